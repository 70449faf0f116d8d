"""
Timing and polling helpers.

`now` reports a monotonic clock in milliseconds. `repeated_try` polls a
condition with a caller-controlled backoff; it blocks the calling thread
between attempts.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from ...domain._errors import RetryLimitExceededError

logger = logging.getLogger(__name__)


def now() -> float:
    """High-resolution monotonic time in milliseconds (arbitrary origin)."""
    return time.perf_counter() * 1000.0


def repeated_try(
    check_fn: Callable[[], bool],
    delay_fn: Optional[Callable[[int], float]] = None,
    max_counter: Optional[int] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """
    Poll `check_fn` until it returns True.

    Parameters
    ----------
    check_fn : Callable[[], bool]
        Condition to poll. Checked once immediately.
    delay_fn : Callable[[int], float], optional
        Maps the number of failed attempts so far to the delay before the
        next attempt, in milliseconds. Defaults to no delay.
    max_counter : int, optional
        Give up after this many failed attempts. Unlimited when omitted.
    sleep : Callable[[float], None]
        Sleeps for the given number of seconds. Injectable for tests.

    Raises
    ------
    RetryLimitExceededError
        If `check_fn` failed `max_counter` times.
    """
    try_count = 0
    while not check_fn():
        try_count += 1
        next_backoff = delay_fn(try_count) if delay_fn is not None else 0
        if max_counter is not None and try_count >= max_counter:
            raise RetryLimitExceededError(try_count)
        logger.debug("repeated_try: attempt %d failed, retrying in %s ms", try_count, next_backoff)
        sleep(next_backoff / 1000.0)
