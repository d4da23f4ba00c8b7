"""
Browser rendering sessions using Playwright.
"""

import logging
from typing import Any, List, Optional

from playwright.async_api import Browser, BrowserContext, Page, Playwright
from playwright.async_api import TimeoutError as PlaywrightTimeoutError
from playwright.async_api import async_playwright

from ..config import CrawlerConfig

logger = logging.getLogger(__name__)


class PageSession:
    """
    A single browser tab.

    Wraps a Playwright page with the handful of operations the crawler needs.
    """

    def __init__(self, page: Page):
        self._page = page

    async def navigate(
        self, url: str, wait_until: str = "domcontentloaded", timeout_ms: int = 60000
    ) -> None:
        """Navigate to a URL, raising on navigation failure or timeout."""
        logger.debug(f"Navigating to {url}")
        await self._page.goto(url, wait_until=wait_until, timeout=timeout_ms)

    async def wait_for_selector(self, selector: str, timeout_ms: int) -> bool:
        """
        Wait for a selector to appear.

        Returns:
            True if the selector appeared, False if the wait timed out.
        """
        try:
            await self._page.wait_for_selector(selector, timeout=timeout_ms)
            return True
        except PlaywrightTimeoutError:
            logger.debug(f"Timed out after {timeout_ms}ms waiting for {selector}")
            return False

    async def evaluate(self, script: str, arg: Any = None) -> Any:
        """Evaluate a JavaScript function in the page with an optional argument."""
        return await self._page.evaluate(script, arg)

    async def content(self) -> str:
        """Return the full rendered HTML of the page."""
        return await self._page.content()

    async def close(self) -> None:
        if not self._page.is_closed():
            await self._page.close()


class BrowserSession:
    """
    A Chromium browser owned by a single crawl.

    Use as an async context manager so the browser is always released.
    """

    def __init__(
        self,
        headless: bool = True,
        user_agent: Optional[str] = None,
        launch_args: Optional[List[str]] = None,
    ):
        """
        Initialize the browser session.

        Args:
            headless: Whether to run the browser in headless mode.
            user_agent: User agent string applied to every page.
            launch_args: Extra command line arguments for Chromium.
        """
        self.headless = headless
        self.user_agent = user_agent
        self.launch_args = launch_args or []
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None

    async def start(self) -> "BrowserSession":
        """
        Launch the browser.

        Raises:
            Exception: Whatever Playwright raises when the browser cannot start.
        """
        if self._browser:
            return self

        self._playwright = await async_playwright().start()
        try:
            self._browser = await self._playwright.chromium.launch(
                headless=self.headless, args=self.launch_args
            )
            self._context = await self._browser.new_context(user_agent=self.user_agent)
        except Exception:
            await self.close()
            raise

        logger.info("Browser launched")
        return self

    async def new_page(self) -> PageSession:
        """Open a new tab in this browser."""
        if not self._context:
            await self.start()
        page = await self._context.new_page()
        page.on("pageerror", lambda err: logger.debug(f"Page error: {err}"))
        return PageSession(page)

    async def close(self) -> None:
        """
        Close the browser and playwright instances.

        Every step runs even if an earlier one fails, so a crashed browser
        never leaves the driver process behind.
        """
        context, browser, playwright = self._context, self._browser, self._playwright
        self._context = None
        self._browser = None
        self._playwright = None

        if context:
            try:
                await context.close()
            except Exception as e:
                logger.warning(f"Error closing browser context: {str(e)}")

        if browser:
            try:
                await browser.close()
                logger.info("Browser closed.")
            except Exception as e:
                logger.warning(f"Error closing browser: {str(e)}")

        if playwright:
            try:
                await playwright.stop()
            except Exception as e:
                logger.warning(f"Error stopping playwright: {str(e)}")

    async def __aenter__(self):
        return await self.start()

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()


async def launch_browser(crawler_config: CrawlerConfig) -> BrowserSession:
    """Launch a browser session configured from crawler settings."""
    session = BrowserSession(
        headless=crawler_config.headless,
        user_agent=crawler_config.user_agent,
        launch_args=crawler_config.launch_args,
    )
    return await session.start()
