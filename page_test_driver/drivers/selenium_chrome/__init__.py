"""Selenium Chrome driver module."""

from page_test_driver.drivers.selenium_chrome.config import SeleniumChromeConfig
from page_test_driver.drivers.selenium_chrome.driver import SeleniumChromeSession
from page_test_driver.drivers.selenium_chrome.manifest import (
    selenium_chrome_manifest,
)

__all__ = ["SeleniumChromeConfig", "SeleniumChromeSession", "selenium_chrome_manifest"]
