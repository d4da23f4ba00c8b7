#!/usr/bin/env python
"""
Example script demonstrating a crawl with an explicitly built configuration.
"""

import argparse
import asyncio
import json
import logging

from product_scraper import ListingCrawler
from product_scraper.config import AppConfig, CrawlerConfig, LLMConfig

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


async def scrape(keyword: str, pages: int, openai_key: str = None, deepseek_key: str = None):
    """
    Scrape products with credentials passed in rather than read from the environment.

    Args:
        keyword: Search keyword.
        pages: Maximum number of listing pages.
        openai_key: Optional OpenAI credential.
        deepseek_key: Optional DeepSeek credential.
    """
    app_config = AppConfig(
        crawler=CrawlerConfig(max_products_per_page=3, request_delay=1.5),
        llm=LLMConfig(openai_api_key=openai_key, deepseek_api_key=deepseek_key),
    )
    crawler = ListingCrawler(app_config)

    products = await crawler.crawl(keyword, pages)
    print(json.dumps([p.model_dump() for p in products], indent=2, ensure_ascii=False))

    described = sum(1 for p in products if p.description != "-")
    logger.info(f"Scraped {len(products)} products, {described} with descriptions")
    return products


def main():
    """Main function to parse arguments and run the crawl."""
    parser = argparse.ArgumentParser(description="Scrape product listings for a keyword")
    parser.add_argument("keyword", help="Search keyword")
    parser.add_argument("--pages", type=int, default=1, help="Pages to scrape")
    parser.add_argument("--openai-key", help="OpenAI API key")
    parser.add_argument("--deepseek-key", help="DeepSeek API key")
    args = parser.parse_args()

    asyncio.run(scrape(args.keyword, args.pages, args.openai_key, args.deepseek_key))


if __name__ == "__main__":
    main()
