"""Bounded polling of an asynchronous reader."""

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar

T = TypeVar("T")

_UNSET = object()


async def wait_until(
    read: Callable[[], Awaitable[T]],
    predicate: Callable[[T], bool],
    *,
    timeout: float,
    poll_interval: float = 0,
) -> T:
    """Read repeatedly until the value satisfies the predicate.

    Args:
        read: Coroutine function returning the current value
        predicate: Returns True once the value is final
        timeout: Maximum wait time in seconds, including time spent in reads
        poll_interval: Seconds to sleep between reads (0 only yields)

    Returns:
        The first value accepted by the predicate

    Raises:
        TimeoutError: If no value is accepted within timeout

    """
    last: object = _UNSET
    try:
        async with asyncio.timeout(timeout):
            while True:
                value = await read()
                if predicate(value):
                    return value
                last = value
                await asyncio.sleep(poll_interval)
    except TimeoutError as e:
        observed = "no value read" if last is _UNSET else f"last value {last!r}"
        raise TimeoutError(
            f"Condition not met within {timeout} seconds ({observed})"
        ) from e
