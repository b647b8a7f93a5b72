"""Driver manifest definition for the plugin system."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from pydantic import BaseModel

from page_test_driver.drivers.base import BrowserSession

ConfigT = TypeVar("ConfigT", bound=BaseModel)


@dataclass(frozen=True, kw_only=True)
class DriverManifest(Generic[ConfigT]):
    """Manifest describing a browser driver plugin.

    The manifest contains references to the configuration class and the
    session factory, so drivers are only imported once selected by key.
    """

    config_cls: type[ConfigT]
    session_factory: Callable[[ConfigT], Awaitable[BrowserSession]]
