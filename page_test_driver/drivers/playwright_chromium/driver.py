"""Playwright Chromium driver implementation."""

import logging
from dataclasses import dataclass, field

from playwright.async_api import Browser, Locator, Page, Playwright, async_playwright
from playwright.async_api import Error as PlaywrightError

from page_test_driver.drivers.base import BrowserSession, PageElement, chrome_arguments
from page_test_driver.drivers.playwright_chromium.config import (
    PlaywrightChromiumConfig,
)
from page_test_driver.errors import ElementNotFoundError, SessionError

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class PlaywrightElement(PageElement):
    """Element located by id on a Playwright page."""

    locator: Locator = field(repr=False)

    async def read_text(self) -> str:
        """Return the element's rendered text."""
        return await self.locator.inner_text()


@dataclass(frozen=True, kw_only=True)
class PlaywrightChromiumSession(BrowserSession):
    """Headless Chromium session driven through Playwright."""

    config: PlaywrightChromiumConfig
    playwright: Playwright = field(repr=False)
    browser: Browser = field(repr=False)
    page: Page = field(repr=False)

    @classmethod
    async def open(
        cls, config: PlaywrightChromiumConfig
    ) -> "PlaywrightChromiumSession":
        """Start Playwright, launch Chromium and open a blank page."""
        args = list(chrome_arguments(config.sandbox))
        log.info("Launching Chromium via Playwright: args=%s", args)

        playwright = await async_playwright().start()
        try:
            browser = await playwright.chromium.launch(
                headless=True,
                args=args,
                chromium_sandbox=config.sandbox,
                executable_path=config.executable_path,
            )
            page = await browser.new_page()
        except PlaywrightError as e:
            await playwright.stop()
            raise SessionError(f"Could not launch Chromium: {e}") from e

        return cls(config=config, playwright=playwright, browser=browser, page=page)

    async def navigate(self, url: str) -> None:
        """Load the URL and wait for the load event."""
        try:
            await self.page.goto(url)
        except PlaywrightError as e:
            raise SessionError(f"Could not navigate to {url}: {e}") from e

    async def find_element(self, element_id: str) -> PageElement:
        """Locate the element with the given id on the current page."""
        locator = self.page.locator(f'[id="{element_id}"]')
        if await locator.count() == 0:
            raise ElementNotFoundError(element_id)
        return PlaywrightElement(locator=locator.first)

    async def close(self) -> None:
        """Close the browser, then stop Playwright even if closing failed."""
        try:
            await self.browser.close()
        finally:
            await self.playwright.stop()
