"""
Command-line interface for product_scraper.
"""

import argparse
import asyncio
import json
import logging
import sys
from datetime import datetime
from typing import List, Optional

from pydantic import ValidationError

from .config import LOG_LEVELS, get_config
from .crawler import CrawlError, ListingCrawler
from .models import CrawlRequest

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


async def run_crawl(request: CrawlRequest) -> dict:
    """
    Run one crawl and wrap the records with metadata.

    Args:
        request: Validated crawl parameters.
    """
    crawler = ListingCrawler(get_config())
    products = await crawler.crawl(request.keyword, request.max_pages)

    return {
        "keyword": request.keyword,
        "pages_scraped": request.max_pages,
        "total_products": len(products),
        "products": [product.model_dump() for product in products],
        "_meta": {"timestamp": datetime.now().isoformat()},
    }


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Scrape product listings and descriptions for a keyword"
    )
    parser.add_argument("keyword", help="Search keyword")
    parser.add_argument(
        "--pages",
        type=int,
        default=3,
        help="Maximum number of listing pages to scrape (1-10, default: 3)",
    )
    parser.add_argument(
        "--output",
        help="Output file path (default: print to stdout)"
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=get_config().server.log_level,
        help="Set the logging level",
    )
    return parser.parse_args(args)


def main(args: Optional[List[str]] = None) -> int:
    """Main function to parse arguments and run the crawl."""
    parsed_args = parse_args(args)
    logging.getLogger().setLevel(getattr(logging, parsed_args.log_level))

    try:
        request = CrawlRequest(keyword=parsed_args.keyword, max_pages=parsed_args.pages)
    except ValidationError as e:
        logger.error(f"Invalid crawl parameters: {e}")
        return 2

    try:
        output = asyncio.run(run_crawl(request))
    except CrawlError as e:
        logger.error(f"Crawl failed: {str(e)}")
        return 1

    if parsed_args.output:
        with open(parsed_args.output, "w", encoding="utf-8") as f:
            json.dump(output, f, indent=2, ensure_ascii=False)
        logger.info(f"Saved {output['total_products']} products to {parsed_args.output}")
    else:
        print(json.dumps(output, indent=2, ensure_ascii=False))

    return 0


if __name__ == "__main__":
    sys.exit(main())
