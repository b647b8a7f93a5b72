"""Playwright Chromium driver module."""

from page_test_driver.drivers.playwright_chromium.config import (
    PlaywrightChromiumConfig,
)
from page_test_driver.drivers.playwright_chromium.driver import (
    PlaywrightChromiumSession,
)
from page_test_driver.drivers.playwright_chromium.manifest import (
    playwright_chromium_manifest,
)

__all__ = [
    "PlaywrightChromiumConfig",
    "PlaywrightChromiumSession",
    "playwright_chromium_manifest",
]
