"""
Product scraper package.

This package crawls paginated product listings, follows each listing to its
detail page and extracts a normalized record per product, using LLM
providers with a deterministic fallback for descriptions.
"""

import logging
from typing import List, Optional

from .config import AppConfig, get_config
from .crawler import CrawlError, ListingCrawler
from .extraction import DescriptionExtractor, extract_by_pattern
from .models import PLACEHOLDER, CrawlRequest, ListingSummary, ProductRecord
from .processing import normalize_records

# Set up package logger
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

# Version
__version__ = "0.1.0"


async def scrape_products(
    keyword: str,
    max_pages: int = 3,
    config: Optional[AppConfig] = None,
) -> List[ProductRecord]:
    """
    Scrape products for a search keyword.

    Args:
        keyword: Search keyword.
        max_pages: Maximum number of listing pages to visit.
        config: Configuration to use (defaults to the environment config).

    Returns:
        List of normalized ProductRecord objects.
    """
    crawler = ListingCrawler(config or get_config())
    return await crawler.crawl(keyword, max_pages)


__all__ = [
    "scrape_products",
    "ListingCrawler",
    "CrawlError",
    "DescriptionExtractor",
    "extract_by_pattern",
    "normalize_records",
    "CrawlRequest",
    "ListingSummary",
    "ProductRecord",
    "PLACEHOLDER",
    "AppConfig",
    "get_config",
]

