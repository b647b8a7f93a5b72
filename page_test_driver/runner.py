"""Test runner driving one page test through a browser session."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field

from page_test_driver.drivers.base import BrowserSession, PageElement
from page_test_driver.errors import StatusAssertionError
from page_test_driver.models.config import SUCCESS_TEXT, RunnerConfig
from page_test_driver.models.result import RunResult
from page_test_driver.polling import wait_until

log = logging.getLogger(__name__)


def report(
    output_text: str, status_text: str, success_text: str = SUCCESS_TEXT
) -> None:
    """Print the captured output and check the final status.

    Raises:
        StatusAssertionError: If status_text is not exactly success_text

    """
    print(output_text)
    if status_text != success_text:
        raise StatusAssertionError(status_text)


@dataclass(frozen=True, kw_only=True)
class PageTestRunner:
    """Runs a single page test.

    The session is acquired once and, if acquisition succeeded, released
    exactly once, whichever way the run ends.
    """

    __test__ = False

    open_session: Callable[[], Awaitable[BrowserSession]]
    config: RunnerConfig = field(default_factory=RunnerConfig)

    async def run(self) -> RunResult:
        """Run the test and return its result; never raises for test failures."""
        loop = asyncio.get_event_loop()
        started = loop.time()
        output_text: str | None = None
        status_text: str | None = None
        session: BrowserSession | None = None

        def elapsed() -> float:
            return loop.time() - started

        try:
            log.info("Starting browser session")
            session = await self.open_session()
            log.info("Session acquired, navigating to %s", self.config.url)
            await session.navigate(self.config.url)

            status_element = await session.find_element(self.config.status_element_id)
            output_element = await session.find_element(self.config.output_element_id)

            log.info("Waiting up to %.1fs for the test to finish", self.config.timeout)
            await self.await_completion(status_element)

            output_text = await output_element.read_text()
            status_text = await status_element.read_text()
            log.info("Test completed with status text: %s", status_text)

            report(output_text, status_text, self.config.success_text)
            result = RunResult(
                status="success",
                duration=elapsed(),
                output=output_text,
                status_text=status_text,
            )
        except StatusAssertionError as e:
            log.error("Test failed: %s", e)
            result = RunResult(
                status="failure",
                duration=elapsed(),
                message=str(e),
                output=output_text,
                status_text=e.status_text,
            )
        except TimeoutError as e:
            log.error("Timed out waiting for the test to finish: %s", e)
            result = RunResult(status="timeout", duration=elapsed(), message=str(e))
        except Exception as e:
            log.exception("Exception in test driver: %s", e)
            result = RunResult(status="error", duration=elapsed(), message=str(e))
        finally:
            if session is not None:
                await self._release(session)

        return result

    async def await_completion(self, status_element: PageElement) -> str:
        """Poll the status element until it leaves the running sentinel.

        Raises:
            TimeoutError: If the status is still running after the timeout

        """
        return await wait_until(
            status_element.read_text,
            lambda text: text != self.config.running_text,
            timeout=self.config.timeout,
            poll_interval=self.config.poll_interval,
        )

    async def _release(self, session: BrowserSession) -> None:
        """Close the session; a failing close is logged, not raised."""
        try:
            await session.close()
        except Exception:
            log.exception("Failed to release browser session")
        else:
            log.info("Browser session released")
