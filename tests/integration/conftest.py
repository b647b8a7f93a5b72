"""Fixtures for integration tests."""

import socket
from collections.abc import AsyncGenerator, Callable
from pathlib import Path

import pytest

from page_test_driver.drivers.playwright_chromium import (
    PlaywrightChromiumConfig,
    PlaywrightChromiumSession,
)
from page_test_driver.errors import SessionError
from page_test_driver.server import serve_directory

PAGE_TEMPLATE = """<!doctype html>
<html>
<body>
<pre id="output"></pre>
<div id="status">Running</div>
<script>
setTimeout(function () {{
  document.getElementById("output").textContent = {output!r};
  document.getElementById("status").textContent = {status!r};
}}, {delay_ms});
</script>
</body>
</html>
"""


def free_port() -> int:
    """Return a TCP port that is currently free on localhost."""
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
    """Directory served as the page under test."""
    return tmp_path


@pytest.fixture
def write_page(site_dir: Path) -> Callable[..., None]:
    """Return a function writing the test page."""

    def _write(status: str, output: str, *, delay_ms: int = 100) -> None:
        (site_dir / "index.html").write_text(
            PAGE_TEMPLATE.format(status=status, output=output, delay_ms=delay_ms)
        )

    return _write


@pytest.fixture
async def page_url(site_dir: Path) -> AsyncGenerator[str, None]:
    """Serve the site directory and return its URL."""
    port = free_port()
    async with serve_directory(site_dir, "127.0.0.1", port):
        yield f"http://127.0.0.1:{port}/"


@pytest.fixture
def chromium_config() -> PlaywrightChromiumConfig:
    """Chromium configuration usable in containers."""
    return PlaywrightChromiumConfig(sandbox=False)


@pytest.fixture
async def require_chromium(chromium_config: PlaywrightChromiumConfig) -> None:
    """Skip when no Chromium can be launched on this machine."""
    try:
        session = await PlaywrightChromiumSession.open(chromium_config)
    except SessionError as e:
        pytest.skip(f"Chromium is not available: {e}")
    await session.close()
