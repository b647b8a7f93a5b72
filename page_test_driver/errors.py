"""Errors raised while driving a page test."""


class DriverError(Exception):
    """Base class for browser driver failures."""


class SessionError(DriverError):
    """Raised when a browser session cannot be created or navigated."""


class ElementNotFoundError(DriverError):
    """Raised when a required page element does not exist."""

    def __init__(self, element_id: str) -> None:
        super().__init__(f"Element with id '{element_id}' not found")
        self.element_id = element_id


class StatusAssertionError(AssertionError):
    """Raised when the test finished with a status other than success."""

    def __init__(self, status_text: str) -> None:
        super().__init__(f"Test finished with status text: {status_text}")
        self.status_text = status_text
