"""Configuration for the Playwright Chromium driver."""

from pydantic import BaseModel


class PlaywrightChromiumConfig(BaseModel):
    """Configuration for the Playwright Chromium driver."""

    sandbox: bool = True
    # Use a system Chromium instead of the one downloaded by `playwright install`
    executable_path: str | None = None
