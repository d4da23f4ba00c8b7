"""
Shared fixtures: fake browser sessions and a test configuration.
"""

import re
from typing import Any, Dict, List, Optional

import pytest

from product_scraper.config import AppConfig, CrawlerConfig, LLMConfig
from product_scraper.crawler.listing_crawler import (COUNT_ITEMS_SCRIPT,
                                                     HAS_NEXT_PAGE_SCRIPT,
                                                     READ_ITEMS_SCRIPT)


def listing_item(name: str, price: str = "$10.00", url: Optional[str] = None) -> Dict[str, Any]:
    """Raw listing item as returned by the in-page item reader."""
    return {"name": name, "price": price, "url": url}


def description_html(text: str) -> str:
    """Detail page markup with a description the pattern extractor recognizes."""
    return (
        "<html><body><h1>Item</h1>"
        f'<div class="item-description"><p>{text}</p></div>'
        "</body></html>"
    )


class FakeListingPage:
    """Listing tab serving canned search result pages keyed by page number."""

    def __init__(self, pages: Dict[int, Dict[str, Any]], failing: Optional[set] = None):
        self.pages = pages
        self.failing = failing or set()
        self.navigations: List[str] = []
        self.current: Dict[str, Any] = {}
        self.closed = False

    async def navigate(self, url, wait_until="domcontentloaded", timeout_ms=60000):
        self.navigations.append(url)
        page_number = int(re.search(r"_pgn=(\d+)", url).group(1))
        if page_number in self.failing:
            raise RuntimeError(f"net::ERR_CONNECTION_RESET on page {page_number}")
        self.current = self.pages.get(page_number, {"items": [], "has_next": False})

    async def wait_for_selector(self, selector, timeout_ms):
        return bool(self.current.get("items"))

    async def evaluate(self, script, arg=None):
        if script == COUNT_ITEMS_SCRIPT:
            return len(self.current.get("items", []))
        if script == READ_ITEMS_SCRIPT:
            return list(self.current.get("items", []))
        if script == HAS_NEXT_PAGE_SCRIPT:
            return self.current.get("has_next", False)
        raise AssertionError(f"Unexpected script: {script}")

    async def content(self):
        return "<html></html>"

    async def close(self):
        self.closed = True


class FakeDetailPage:
    """Detail tab serving markup per URL; exception values are raised on navigation."""

    def __init__(self, details: Dict[str, Any]):
        self.details = details
        self.navigations: List[str] = []
        self._html = ""
        self.closed = False

    async def navigate(self, url, wait_until="domcontentloaded", timeout_ms=60000):
        self.navigations.append(url)
        value = self.details.get(url, "<html></html>")
        if isinstance(value, Exception):
            raise value
        self._html = value

    async def wait_for_selector(self, selector, timeout_ms):
        return "item-description" in self._html

    async def evaluate(self, script, arg=None):
        return None

    async def content(self):
        return self._html

    async def close(self):
        self.closed = True


class FakeBrowser:
    """Browser handing out the listing tab first and the detail tab second."""

    def __init__(self, listing_page: FakeListingPage, detail_page: FakeDetailPage):
        self._pages = [listing_page, detail_page]
        self.closed = False

    async def new_page(self):
        return self._pages.pop(0)

    async def close(self):
        self.closed = True


@pytest.fixture
def app_config():
    """Configuration with no delay and no provider credentials."""
    return AppConfig(
        crawler=CrawlerConfig(request_delay=0.0, max_products_per_page=5),
        llm=LLMConfig(openai_api_key=None, deepseek_api_key=None),
    )
