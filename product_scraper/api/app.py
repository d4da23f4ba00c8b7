"""
FastAPI application exposing the product scraper.
"""

import logging
from typing import Optional

import uvicorn
from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from ..config import get_config
from ..crawler import CrawlError, ListingCrawler
from ..models import CrawlResponse

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

DEFAULT_PAGES = 3
MAX_PAGES = 10

# Create FastAPI app
app = FastAPI(
    title="Product Scraper API",
    description="API for scraping product listings and descriptions",
    version="0.1.0",
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Helper to get the crawler
def get_crawler() -> ListingCrawler:
    return ListingCrawler(get_config())


def parse_pages(pages: Optional[str]) -> int:
    """Parse the pages query value; anything non-numeric or zero means the default."""
    try:
        value = int(pages) if pages is not None else 0
    except ValueError:
        value = 0
    return value or DEFAULT_PAGES


# Routes
@app.get("/")
async def root():
    """Root endpoint returning API information."""
    return {
        "message": "Product Scraper API",
        "version": "0.1.0",
        "endpoints": {
            "/api/products": "GET - Search products with query parameters: keyword, pages",
        },
    }


@app.get("/api/products", response_model=CrawlResponse)
async def get_products(
    keyword: Optional[str] = Query(None, description="Search keyword"),
    pages: Optional[str] = Query(None, description="Maximum pages to scrape (1-10)"),
    crawler: ListingCrawler = Depends(get_crawler),
):
    """Scrape products for a keyword."""
    if not keyword:
        raise HTTPException(status_code=400, detail="Missing required parameter: keyword")

    max_pages = parse_pages(pages)
    if max_pages < 1 or max_pages > MAX_PAGES:
        raise HTTPException(
            status_code=400, detail=f"Pages parameter must be between 1 and {MAX_PAGES}"
        )

    logger.info(f"Received request to scrape products for keyword: {keyword}, pages: {max_pages}")

    try:
        products = await crawler.crawl(keyword, max_pages)
    except CrawlError as e:
        logger.error(f"Crawl failed: {str(e)}")
        raise HTTPException(status_code=500, detail=f"An error occurred while scraping products: {str(e)}")
    except Exception as e:
        logger.error(f"API error: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"An error occurred while scraping products: {str(e)}")

    return CrawlResponse(
        keyword=keyword,
        pages_scraped=max_pages,
        total_products=len(products),
        products=products,
    )


def start_server(host: str = "0.0.0.0", port: int = 3000, reload: bool = False):
    """Start the FastAPI server using uvicorn."""
    try:
        uvicorn.run(
            "product_scraper.api.app:app",
            host=host,
            port=port,
            reload=reload,
        )
    except Exception as e:
        logger.error(f"Failed to start server: {str(e)}")
        raise
