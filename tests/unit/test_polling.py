"""Tests for wait_until."""

import asyncio

import pytest

from page_test_driver.polling import wait_until


def scripted(values: list[str]):
    """Return a reader yielding values in order, then repeating the last."""
    calls: list[int] = [0]

    async def read() -> str:
        idx = min(calls[0], len(values) - 1)
        calls[0] += 1
        return values[idx]

    read.calls = calls  # type: ignore[attr-defined]
    return read


class TestWaitUntil:
    """Tests for wait_until function."""

    async def test_returns_immediately_when_accepted(self) -> None:
        """Returns the first value when the predicate accepts it."""
        read = scripted(["done"])

        value = await wait_until(read, lambda v: v == "done", timeout=1)

        assert value == "done"
        assert read.calls[0] == 1

    async def test_polls_until_accepted(self) -> None:
        """Keeps reading until the predicate accepts a value."""
        read = scripted(["Running", "Running", "exit: 0"])

        value = await wait_until(
            read, lambda v: v != "Running", timeout=1, poll_interval=0.01
        )

        assert value == "exit: 0"
        assert read.calls[0] == 3

    async def test_zero_poll_interval(self) -> None:
        """Polls as fast as the reader allows with a zero interval."""
        read = scripted(["a", "b", "c", "d"])

        value = await wait_until(read, lambda v: v == "d", timeout=1)

        assert value == "d"

    async def test_raises_timeout_error_with_last_value(self) -> None:
        """Raises TimeoutError naming the last value read."""
        read = scripted(["Running"])

        with pytest.raises(TimeoutError, match="'Running'"):
            await wait_until(
                read, lambda v: v != "Running", timeout=0.05, poll_interval=0.01
            )

        assert read.calls[0] > 1

    async def test_bounds_hanging_read(self) -> None:
        """Times out even when a single read never returns."""

        async def hang() -> str:
            await asyncio.sleep(10)
            return "never"  # pragma: no cover

        with pytest.raises(TimeoutError, match="no value read"):
            await wait_until(hang, lambda v: True, timeout=0.05)
