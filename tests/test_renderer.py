"""
Unit tests for the Playwright backed browser session.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from product_scraper.config import CrawlerConfig
from product_scraper.crawler.renderer import (BrowserSession, PageSession,
                                              launch_browser)


@pytest.fixture
def playwright_mocks():
    """Mocked playwright -> browser -> context -> page chain."""
    page = MagicMock()
    page.goto = AsyncMock()
    page.wait_for_selector = AsyncMock()
    page.evaluate = AsyncMock(return_value=3)
    page.content = AsyncMock(return_value="<html>rendered</html>")
    page.close = AsyncMock()
    page.is_closed = MagicMock(return_value=False)

    context = MagicMock()
    context.new_page = AsyncMock(return_value=page)
    context.close = AsyncMock()

    browser = MagicMock()
    browser.new_context = AsyncMock(return_value=context)
    browser.close = AsyncMock()

    pw = MagicMock()
    pw.chromium.launch = AsyncMock(return_value=browser)
    pw.stop = AsyncMock()

    factory = MagicMock()
    factory.return_value.start = AsyncMock(return_value=pw)

    return {"factory": factory, "pw": pw, "browser": browser, "context": context, "page": page}


class TestPageSession:
    """Test suite for PageSession."""

    @pytest.mark.asyncio
    async def test_navigate_passes_wait_condition_and_timeout(self, playwright_mocks):
        session = PageSession(playwright_mocks["page"])

        await session.navigate("https://ebay.com/itm/1", timeout_ms=30000)

        playwright_mocks["page"].goto.assert_awaited_once_with(
            "https://ebay.com/itm/1", wait_until="domcontentloaded", timeout=30000
        )

    @pytest.mark.asyncio
    async def test_wait_for_selector_timeout_is_silent(self, playwright_mocks):
        page = playwright_mocks["page"]
        page.wait_for_selector.side_effect = PlaywrightTimeoutError("Timeout 5000ms exceeded")
        session = PageSession(page)

        assert await session.wait_for_selector(".item-desc", timeout_ms=5000) is False

    @pytest.mark.asyncio
    async def test_wait_for_selector_found(self, playwright_mocks):
        session = PageSession(playwright_mocks["page"])
        assert await session.wait_for_selector(".item-desc", timeout_ms=5000) is True

    @pytest.mark.asyncio
    async def test_evaluate_and_content(self, playwright_mocks):
        session = PageSession(playwright_mocks["page"])

        assert await session.evaluate("(s) => 3", ".s-item") == 3
        assert await session.content() == "<html>rendered</html>"
        playwright_mocks["page"].evaluate.assert_awaited_once_with("(s) => 3", ".s-item")


class TestBrowserSession:
    """Test suite for BrowserSession."""

    @pytest.mark.asyncio
    async def test_context_manager_launches_and_closes(self, playwright_mocks):
        with patch("product_scraper.crawler.renderer.async_playwright", playwright_mocks["factory"]):
            async with BrowserSession(headless=True, user_agent="UA", launch_args=["--no-sandbox"]) as session:
                page = await session.new_page()
                assert isinstance(page, PageSession)

        playwright_mocks["pw"].chromium.launch.assert_awaited_once_with(
            headless=True, args=["--no-sandbox"]
        )
        playwright_mocks["browser"].new_context.assert_awaited_once_with(user_agent="UA")
        playwright_mocks["context"].close.assert_awaited_once()
        playwright_mocks["browser"].close.assert_awaited_once()
        playwright_mocks["pw"].stop.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_launch_failure_stops_playwright(self, playwright_mocks):
        playwright_mocks["pw"].chromium.launch.side_effect = RuntimeError("no chromium")

        with patch("product_scraper.crawler.renderer.async_playwright", playwright_mocks["factory"]):
            with pytest.raises(RuntimeError):
                await BrowserSession().start()

        playwright_mocks["pw"].stop.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_launch_browser_uses_crawler_config(self, playwright_mocks):
        crawler_config = CrawlerConfig(headless=False, user_agent="Custom UA")

        with patch("product_scraper.crawler.renderer.async_playwright", playwright_mocks["factory"]):
            session = await launch_browser(crawler_config)
            await session.close()

        playwright_mocks["pw"].chromium.launch.assert_awaited_once_with(
            headless=False, args=crawler_config.launch_args
        )
        playwright_mocks["browser"].new_context.assert_awaited_once_with(user_agent="Custom UA")

    @pytest.mark.asyncio
    async def test_close_continues_after_context_error(self, playwright_mocks):
        playwright_mocks["context"].close.side_effect = RuntimeError("Target closed")

        with patch("product_scraper.crawler.renderer.async_playwright", playwright_mocks["factory"]):
            session = await BrowserSession().start()
            await session.close()

        playwright_mocks["browser"].close.assert_awaited_once()
        playwright_mocks["pw"].stop.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_close_stops_playwright_after_browser_error(self, playwright_mocks):
        playwright_mocks["browser"].close.side_effect = RuntimeError("Browser has been closed")

        with patch("product_scraper.crawler.renderer.async_playwright", playwright_mocks["factory"]):
            session = await BrowserSession().start()
            await session.close()
            await session.close()

        playwright_mocks["pw"].stop.assert_awaited_once()
