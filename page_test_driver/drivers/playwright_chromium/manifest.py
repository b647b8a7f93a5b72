"""Playwright Chromium driver manifest."""

from page_test_driver.drivers.manifest import DriverManifest
from page_test_driver.drivers.playwright_chromium.config import (
    PlaywrightChromiumConfig,
)
from page_test_driver.drivers.playwright_chromium.driver import (
    PlaywrightChromiumSession,
)

playwright_chromium_manifest = DriverManifest(
    config_cls=PlaywrightChromiumConfig,
    session_factory=PlaywrightChromiumSession.open,
)
