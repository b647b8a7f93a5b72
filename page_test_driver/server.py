"""Serving and probing the page under test."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

import aiohttp
from aiohttp import web

from page_test_driver.polling import wait_until

log = logging.getLogger(__name__)

# Threaded WebAssembly builds need SharedArrayBuffer, which browsers only
# expose to cross-origin isolated pages.
ISOLATION_HEADERS = {
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Embedder-Policy": "require-corp",
}


async def _add_isolation_headers(
    request: web.Request, response: web.StreamResponse
) -> None:
    response.headers.update(ISOLATION_HEADERS)


def create_app(directory: Path) -> web.Application:
    """Create an application serving the directory's files at the root."""
    app = web.Application()
    app.on_response_prepare.append(_add_isolation_headers)
    app.router.add_get("/", _index_handler(directory))
    app.router.add_static("/", directory, show_index=False)
    return app


def _index_handler(directory: Path):
    async def handler(request: web.Request) -> web.StreamResponse:
        index = directory / "index.html"
        if not index.is_file():
            raise web.HTTPNotFound()
        return web.FileResponse(index)

    return handler


@asynccontextmanager
async def serve_directory(
    directory: Path, host: str, port: int
) -> AsyncGenerator[web.AppRunner, None]:
    """Serve a directory over HTTP for the duration of the context.

    Args:
        directory: Directory holding the page under test
        host: Interface to bind
        port: Port to bind

    Raises:
        NotADirectoryError: If directory does not exist

    """
    if not directory.is_dir():
        raise NotADirectoryError(f"Cannot serve {directory}: not a directory")

    runner = web.AppRunner(create_app(directory))
    await runner.setup()
    try:
        site = web.TCPSite(runner, host, port)
        await site.start()
        log.info("Serving %s at http://%s:%d/", directory, host, port)
        yield runner
    finally:
        await runner.cleanup()
        log.info("Stopped serving %s", directory)


async def wait_for_server(
    url: str, timeout: float, poll_interval: float = 0.5
) -> int:
    """Wait until the URL answers with a non-server-error status.

    Returns:
        The HTTP status of the first accepted response

    Raises:
        TimeoutError: If the server does not answer within timeout

    """
    log.info("Waiting up to %.1fs for %s to respond", timeout, url)

    async with aiohttp.ClientSession() as session:

        async def probe() -> int | None:
            try:
                async with session.get(url) as response:
                    return response.status
            except aiohttp.ClientError as e:
                log.debug("Server not ready: %s", e)
                return None

        status = await wait_until(
            probe,
            lambda s: s is not None and s < 500,
            timeout=timeout,
            poll_interval=poll_interval,
        )

    log.info("Server at %s is up (HTTP %d)", url, status)
    return status
