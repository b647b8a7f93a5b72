"""Abstract browser session interface used by the test runner."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

HEADLESS_ARGUMENTS = ("--headless", "--disable-gpu")
NO_SANDBOX_ARGUMENT = "--no-sandbox"


def chrome_arguments(sandbox: bool = True) -> Sequence[str]:
    """Build the command line flags for a headless Chrome/Chromium.

    Args:
        sandbox: If False, the browser runs without the OS-level sandbox,
            which is needed in most containers running as root

    Returns:
        Browser flags, always including headless rendering without GPU

    """
    if sandbox:
        return HEADLESS_ARGUMENTS
    return (*HEADLESS_ARGUMENTS, NO_SANDBOX_ARGUMENT)


class PageElement(ABC):
    """Handle to an element found on the current page."""

    @abstractmethod
    async def read_text(self) -> str:
        """Return the element's current rendered text."""


class BrowserSession(ABC):
    """An open browser session owned by a single test run.

    Implementations translate their client's failures into
    ``SessionError`` (creation, navigation) and ``ElementNotFoundError``
    (lookup).
    """

    @abstractmethod
    async def navigate(self, url: str) -> None:
        """Load the given URL in the session's page.

        Raises:
            SessionError: If the page cannot be loaded

        """

    @abstractmethod
    async def find_element(self, element_id: str) -> PageElement:
        """Look up an element on the current page by its id.

        Raises:
            ElementNotFoundError: If no element has the given id

        """

    @abstractmethod
    async def close(self) -> None:
        """Release the browser and every resource held by the session."""
