"""Selenium Chrome driver manifest."""

from page_test_driver.drivers.manifest import DriverManifest
from page_test_driver.drivers.selenium_chrome.config import SeleniumChromeConfig
from page_test_driver.drivers.selenium_chrome.driver import SeleniumChromeSession

selenium_chrome_manifest = DriverManifest(
    config_cls=SeleniumChromeConfig,
    session_factory=SeleniumChromeSession.open,
)
