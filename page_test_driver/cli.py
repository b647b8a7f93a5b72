"""CLI entry point for the browser page test driver."""

import argparse
import asyncio
import json
import logging
import sys
from contextlib import AsyncExitStack
from pathlib import Path
from urllib.parse import urlsplit

from page_test_driver.drivers.loading import load_driver_manifest
from page_test_driver.models.config import RunnerConfig
from page_test_driver.models.result import RunResult
from page_test_driver.runner import PageTestRunner
from page_test_driver.server import serve_directory, wait_for_server

DEFAULT_DRIVER = "playwright-chromium"

STATUS_SYMBOLS = {
    "success": "✅",
    "failure": "❌",
    "error": "❗",
    "timeout": "⏱️",
}


def log_result_summary(log: logging.Logger, url: str, result: RunResult) -> None:
    """Log a one-line summary of the run."""
    symbol = STATUS_SYMBOLS.get(result.status, "?")
    log.info("%s %s: %s (%.2fs)", symbol, url, result.status, result.duration)
    if result.message:
        log.info("  Message: %s", result.message)


def serve_address(url: str) -> tuple[str, int]:
    """Return the host and port a local server must bind to serve the URL."""
    parts = urlsplit(url)
    if parts.scheme != "http" or not parts.hostname:
        raise ValueError(f"Can only serve plain http URLs, got: {url}")
    return parts.hostname, parts.port or 80


async def run(
    config: RunnerConfig,
    driver_key: str = DEFAULT_DRIVER,
    driver_config_json: str = "{}",
    sandbox: bool = True,
    serve_dir: Path | None = None,
    server_timeout: float = 0,
) -> int:
    """Run the page test and return exit code."""
    log = logging.getLogger("page_test_driver")

    log.info("Loading driver: %s", driver_key)
    manifest = load_driver_manifest(driver_key)

    config_dict = json.loads(driver_config_json)
    driver_config = manifest.config_cls(**{**config_dict, "sandbox": sandbox})

    async def open_session():
        return await manifest.session_factory(driver_config)

    async with AsyncExitStack() as stack:
        if serve_dir is not None:
            host, port = serve_address(config.url)
            await stack.enter_async_context(serve_directory(serve_dir, host, port))

        if server_timeout > 0:
            try:
                await wait_for_server(config.url, server_timeout)
            except TimeoutError as e:
                log.error("Page under test is not reachable: %s", e)
                return 1

        runner = PageTestRunner(open_session=open_session, config=config)
        result = await runner.run()

    log_result_summary(log, config.url, result)
    return result.exit_code


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Run a browser-hosted test page and report its result"
    )
    parser.add_argument(
        "--sandbox",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Run the browser inside its OS sandbox (--no-sandbox disables it)",
    )
    parser.add_argument(
        "--driver",
        default=DEFAULT_DRIVER,
        help="Driver key (playwright-chromium, selenium-chrome)",
    )
    parser.add_argument(
        "--driver-config",
        default="{}",
        help="JSON configuration for the driver",
    )
    parser.add_argument(
        "--url",
        default=RunnerConfig.model_fields["url"].default,
        help="URL of the page under test",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=RunnerConfig.model_fields["timeout"].default,
        help="Seconds to wait for the status to leave 'Running'",
    )
    parser.add_argument(
        "--poll-interval",
        type=float,
        default=RunnerConfig.model_fields["poll_interval"].default,
        help="Seconds between status reads",
    )
    parser.add_argument(
        "--serve-dir",
        type=Path,
        default=None,
        help="Serve this directory at the URL's host and port during the run",
    )
    parser.add_argument(
        "--server-timeout",
        type=float,
        default=0,
        help="Wait up to this many seconds for the URL to respond (0 disables)",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    config = RunnerConfig(
        url=args.url,
        timeout=args.timeout,
        poll_interval=args.poll_interval,
    )
    exit_code = asyncio.run(
        run(
            config,
            driver_key=args.driver,
            driver_config_json=args.driver_config,
            sandbox=args.sandbox,
            serve_dir=args.serve_dir,
            server_timeout=args.server_timeout,
        )
    )
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
