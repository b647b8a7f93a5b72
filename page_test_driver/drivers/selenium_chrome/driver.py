"""Selenium Chrome driver implementation.

Selenium's client is blocking, so every call is run in a worker thread to
keep the event loop responsive (and the polling timeout enforceable).
"""

import asyncio
import logging
from dataclasses import dataclass, field

from selenium import webdriver
from selenium.common.exceptions import NoSuchElementException, WebDriverException
from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement

from page_test_driver.drivers.base import BrowserSession, PageElement, chrome_arguments
from page_test_driver.drivers.selenium_chrome.config import SeleniumChromeConfig
from page_test_driver.errors import ElementNotFoundError, SessionError

log = logging.getLogger(__name__)


def build_options(config: SeleniumChromeConfig) -> webdriver.ChromeOptions:
    """Build headless Chrome options from the driver configuration."""
    options = webdriver.ChromeOptions()
    for argument in chrome_arguments(config.sandbox):
        options.add_argument(argument)
    if config.binary_location:
        options.binary_location = config.binary_location
    return options


def _create_webdriver(config: SeleniumChromeConfig) -> WebDriver:
    options = build_options(config)
    if config.remote_url:
        return webdriver.Remote(command_executor=config.remote_url, options=options)
    return webdriver.Chrome(options=options)


@dataclass(frozen=True, kw_only=True)
class SeleniumElement(PageElement):
    """Element found through Selenium WebDriver."""

    element: WebElement = field(repr=False)

    async def read_text(self) -> str:
        """Return the element's visible text."""
        return await asyncio.to_thread(lambda: self.element.text)


@dataclass(frozen=True, kw_only=True)
class SeleniumChromeSession(BrowserSession):
    """Headless Chrome session driven through Selenium WebDriver."""

    config: SeleniumChromeConfig
    driver: WebDriver = field(repr=False)

    @classmethod
    async def open(cls, config: SeleniumChromeConfig) -> "SeleniumChromeSession":
        """Start a Chrome WebDriver session."""
        log.info(
            "Starting Chrome WebDriver session: remote_url=%s, args=%s",
            config.remote_url,
            list(chrome_arguments(config.sandbox)),
        )
        try:
            driver = await asyncio.to_thread(_create_webdriver, config)
        except WebDriverException as e:
            raise SessionError(f"Could not start Chrome: {e.msg or e}") from e
        return cls(config=config, driver=driver)

    async def navigate(self, url: str) -> None:
        """Load the URL in the current window."""
        try:
            await asyncio.to_thread(self.driver.get, url)
        except WebDriverException as e:
            raise SessionError(f"Could not navigate to {url}: {e.msg or e}") from e

    async def find_element(self, element_id: str) -> PageElement:
        """Find the element with the given id on the current page."""
        try:
            element = await asyncio.to_thread(
                self.driver.find_element, By.ID, element_id
            )
        except NoSuchElementException as e:
            raise ElementNotFoundError(element_id) from e
        return SeleniumElement(element=element)

    async def close(self) -> None:
        """Quit the browser and end the WebDriver session."""
        await asyncio.to_thread(self.driver.quit)
