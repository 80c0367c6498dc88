"""Delayed asynchronous square.

The coroutine models a single-shot I/O-like computation: it either fails
right away on invalid input or sleeps for a fixed delay and resolves.
Cancellation and timeouts are left to the caller (`asyncio.wait_for`).
"""

from __future__ import annotations

import asyncio
import logging

from core.config import AppSettings

logger = logging.getLogger(__name__)


class NegativeNumberError(ValueError):
    """Raised by `square_async` for inputs below zero."""

    def __init__(self, value: float) -> None:
        self.value = value
        super().__init__("Negative number is not allowed")


async def square_async(
    n: float,
    *,
    delay: float | None = None,
    settings: AppSettings | None = None,
) -> float:
    """Resolve to `n * n` after `delay` seconds.

    Raises `NegativeNumberError` before any delay is scheduled when `n < 0`.
    Without an explicit `delay`, `AppSettings.square_delay_seconds` is used.
    """

    if n < 0:
        raise NegativeNumberError(n)

    if delay is None:
        delay = (settings or AppSettings()).square_delay_seconds

    await asyncio.sleep(delay)
    logger.info("Output after %ss: %s", delay, n * n)
    return n * n
