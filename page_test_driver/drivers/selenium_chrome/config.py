"""Configuration for the Selenium Chrome driver."""

from pydantic import BaseModel


class SeleniumChromeConfig(BaseModel):
    """Configuration for the Selenium Chrome driver."""

    sandbox: bool = True
    # WebDriver server (e.g. Selenium Grid); a local chromedriver is used if unset
    remote_url: str | None = None
    binary_location: str | None = None
