"""Loading of browser drivers from entry points."""

from importlib.metadata import entry_points
from typing import Any

from page_test_driver.drivers.manifest import DriverManifest

ENTRY_POINT_GROUP = "page_test_driver.drivers"


class DriverNotFoundError(Exception):
    """Raised when a driver is not found."""


def load_driver_manifest(key: str) -> DriverManifest[Any]:
    """Load a driver manifest by key.

    Args:
        key: The driver key as registered in pyproject.toml
             (e.g., "playwright-chromium", "selenium-chrome")

    Returns:
        The driver manifest instance

    Raises:
        DriverNotFoundError: If no driver with the given key is found

    """
    entries = entry_points(group=ENTRY_POINT_GROUP)

    for entry in entries:
        if entry.name == key:
            manifest: DriverManifest[Any] = entry.load()
            return manifest

    available = [e.name for e in entries]
    raise DriverNotFoundError(
        f"Driver '{key}' not found. Available drivers: {available}"
    )
