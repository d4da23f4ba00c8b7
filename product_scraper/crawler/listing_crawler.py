"""
Listing crawler: paginates search results and resolves each item to a record.
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional

from ..config import AppConfig, CrawlerConfig
from ..extraction import DescriptionExtractor
from ..models import PLACEHOLDER, ListingSummary, ProductRecord
from ..processing import normalize_records
from .renderer import BrowserSession, PageSession, launch_browser
from .site import EBAY, SiteProfile

# Set up logging
logger = logging.getLogger(__name__)

Launcher = Callable[[CrawlerConfig], Awaitable[BrowserSession]]

COUNT_ITEMS_SCRIPT = "(selector) => document.querySelectorAll(selector).length"

READ_ITEMS_SCRIPT = """
(s) => Array.from(document.querySelectorAll(s.item)).map((item) => {
    const title = item.querySelector(s.title);
    const price = item.querySelector(s.price);
    const link = item.querySelector(s.link);
    return {
        name: title ? title.innerText.trim() : null,
        price: price ? price.innerText.trim() : null,
        url: link ? link.href : null,
    };
})
"""

HAS_NEXT_PAGE_SCRIPT = """
(s) => {
    const pagination = document.querySelector(s.pagination);
    if (!pagination) return false;
    return !!pagination.querySelector(s.next);
}
"""


class CrawlError(Exception):
    """Raised when a browsing session cannot be established."""

    pass


class ListingCrawler:
    """Crawls search result pages and extracts a record per product."""

    def __init__(
        self,
        config: AppConfig,
        extractor: Optional[DescriptionExtractor] = None,
        launcher: Optional[Launcher] = None,
        site: SiteProfile = EBAY,
    ):
        """
        Initialize the crawler.

        Args:
            config: Application configuration.
            extractor: Description extractor. Built from ``config.llm`` if None.
            launcher: Coroutine function returning a started browser session.
            site: Profile of the listing site to crawl.
        """
        self.config = config
        self.crawler_config = config.crawler
        self.extractor = extractor or DescriptionExtractor.from_config(config.llm)
        self.launcher = launcher or launch_browser
        self.site = site

    async def crawl(self, keyword: str, max_pages: int) -> List[ProductRecord]:
        """
        Crawl up to ``max_pages`` listing pages for a keyword.

        Args:
            keyword: Search keyword.
            max_pages: Maximum number of listing pages to visit.

        Returns:
            Normalized records in page-then-item order.

        Raises:
            CrawlError: If the browser session cannot be started.
        """
        if max_pages < 1:
            logger.info(f"Nothing to crawl for max_pages={max_pages}")
            return []

        logger.info(f'Starting to scrape {self.site.name} for "{keyword}" (up to {max_pages} pages)...')
        try:
            browser = await self.launcher(self.crawler_config)
        except Exception as e:
            logger.error(f"Failed to start browser session: {str(e)}")
            raise CrawlError(f"Could not start browser session: {str(e)}") from e

        pages: List[PageSession] = []
        try:
            try:
                pages.append(await browser.new_page())
                pages.append(await browser.new_page())
            except Exception as e:
                logger.error(f"Failed to open browser pages: {str(e)}")
                raise CrawlError(f"Could not open browser pages: {str(e)}") from e

            listing_page, detail_page = pages
            records = await self._crawl_pages(listing_page, detail_page, keyword, max_pages)
        finally:
            await self._release(browser, pages)

        return normalize_records(records)

    @staticmethod
    async def _release(browser: BrowserSession, pages: List[PageSession]) -> None:
        """Close every page and then the browser; teardown errors are only logged."""
        for page in pages:
            try:
                await page.close()
            except Exception as e:
                logger.warning(f"Error closing page: {str(e)}")

        try:
            await browser.close()
        except Exception as e:
            logger.error(f"Error closing browser session: {str(e)}")

    async def _crawl_pages(
        self,
        listing_page: PageSession,
        detail_page: PageSession,
        keyword: str,
        max_pages: int,
    ) -> List[ProductRecord]:
        records: List[ProductRecord] = []

        for page_number in range(1, max_pages + 1):
            try:
                summaries = await self._read_listing_page(listing_page, keyword, page_number)
            except Exception as e:
                logger.error(f"Skipping listing page {page_number}: {str(e)}")
                continue

            # An empty listing ends the crawl even if a next page link is shown
            if summaries is None:
                logger.info("No results found on this page or reached the end of results.")
                break

            records.extend(await self._collect_details(detail_page, summaries))

            if not await self._has_next_page(listing_page):
                logger.info("No more pages available.")
                break

        return records

    async def _read_listing_page(
        self, listing_page: PageSession, keyword: str, page_number: int
    ) -> Optional[List[ListingSummary]]:
        """
        Load one listing page and read its summaries.

        Returns:
            The summaries, or None if the page has no listing items at all.
        """
        url = self.site.search_url(keyword, page_number)
        logger.info(f"Navigating to page {page_number}: {url}")
        await listing_page.navigate(url, timeout_ms=self.crawler_config.listing_timeout_ms)

        found = await listing_page.wait_for_selector(
            self.site.listing_item_selector,
            timeout_ms=self.crawler_config.results_timeout_ms,
        )
        if not found:
            logger.warning("Timeout waiting for search results. Page might have loaded differently.")

        item_count = await listing_page.evaluate(
            COUNT_ITEMS_SCRIPT, self.site.listing_item_selector
        )
        if not item_count:
            return None

        raw_items = await listing_page.evaluate(READ_ITEMS_SCRIPT, self._item_selectors())
        summaries = self._parse_summaries(raw_items)
        logger.info(f"Found {len(summaries)} products on page {page_number}")
        return summaries

    async def _has_next_page(self, listing_page: PageSession) -> bool:
        try:
            return bool(
                await listing_page.evaluate(
                    HAS_NEXT_PAGE_SCRIPT,
                    {
                        "pagination": self.site.pagination_selector,
                        "next": self.site.next_page_selector,
                    },
                )
            )
        except Exception as e:
            logger.error(f"Could not read pagination: {str(e)}")
            return False

    def _item_selectors(self) -> Dict[str, str]:
        return {
            "item": self.site.listing_item_selector,
            "title": self.site.title_selector,
            "price": self.site.price_selector,
            "link": self.site.link_selector,
        }

    @staticmethod
    def _parse_summaries(raw_items: Optional[List[Dict[str, Any]]]) -> List[ListingSummary]:
        """
        Convert raw DOM items into summaries.

        The first item is a template/promotional slot and is skipped, as is
        any item without a detail link.
        """
        summaries = []
        for item in (raw_items or [])[1:]:
            url = item.get("url")
            if not url:
                continue
            summaries.append(
                ListingSummary(
                    name=item.get("name") or PLACEHOLDER,
                    price=item.get("price") or PLACEHOLDER,
                    url=url,
                )
            )
        return summaries

    async def _collect_details(
        self, detail_page: PageSession, summaries: List[ListingSummary]
    ) -> List[ProductRecord]:
        # Only a subset of each page is resolved to bound per-page cost
        to_process = summaries[: self.crawler_config.max_products_per_page]

        records = []
        for index, summary in enumerate(to_process):
            records.append(await self._fetch_record(detail_page, summary))
            if index < len(to_process) - 1:
                await asyncio.sleep(self.crawler_config.request_delay)
        return records

    async def _fetch_record(self, detail_page: PageSession, summary: ListingSummary) -> ProductRecord:
        """Resolve one summary to a record; failures yield a placeholder description."""
        try:
            logger.info(f"Navigating to product detail: {summary.url}")
            await detail_page.navigate(
                summary.url, timeout_ms=self.crawler_config.detail_timeout_ms
            )

            found = await detail_page.wait_for_selector(
                self.site.description_selector,
                timeout_ms=self.crawler_config.description_timeout_ms,
            )
            if not found:
                logger.debug("Description selector not found, continuing...")

            html = await detail_page.content()
            description = await self.extractor.extract(html)
            logger.info(f"Processed product: {summary.name[:30]}...")
            return ProductRecord.from_summary(summary, description)
        except Exception as e:
            logger.error(f"Error processing product detail: {str(e)}")
            return ProductRecord.from_summary(summary, PLACEHOLDER)
