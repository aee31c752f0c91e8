"""
Retry of transactions that fail on transient lock contention.

The reservation store serialises bookings of one vehicle by locking its row,
so two concurrent requests can deadlock or time out waiting for the lock. The
whole unit of work is re-run with exponential backoff in that case.
"""

import asyncio
import logging
from functools import wraps
from typing import Awaitable, Callable, TypeVar

from sqlalchemy.exc import DBAPIError, OperationalError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Substrings of driver messages that mark a retryable failure
TRANSIENT_MARKERS = (
    "1213",  # MySQL deadlock
    "1205",  # MySQL lock wait timeout
    "40P01",  # PostgreSQL deadlock_detected
    "40001",  # PostgreSQL serialization_failure
    "database is locked",  # SQLite
)


def is_deadlock_error(error: Exception) -> bool:
    """True for driver errors caused by lock contention rather than bad data."""
    if not isinstance(error, (OperationalError, DBAPIError)):
        return False
    message = str(error)
    return any(marker in message for marker in TRANSIENT_MARKERS)


async def retry_on_deadlock(
    func: Callable[[], Awaitable[T]],
    max_attempts: int = 3,
    base_delay: float = 0.1,
) -> T:
    """
    Await ``func()``, re-running it after a deadlock or lock timeout.

    The n-th retry waits ``base_delay * 2 ** (n - 1)`` seconds. ``func`` must
    open its own transaction so every attempt starts clean. Any other error,
    or the last transient one, propagates unchanged.
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")

    attempt = 1
    while True:
        try:
            return await func()
        except (OperationalError, DBAPIError) as exc:
            if not is_deadlock_error(exc):
                raise
            if attempt >= max_attempts:
                logger.error(
                    "Giving up after %d attempts on lock contention",
                    attempt,
                    extra={"error": str(exc)},
                )
                raise

            delay = base_delay * (2 ** (attempt - 1))
            logger.warning(
                "Lock contention on attempt %d/%d, retrying in %.2fs",
                attempt,
                max_attempts,
                delay,
            )
            await asyncio.sleep(delay)
            attempt += 1


def with_deadlock_retry(max_attempts: int = 3, base_delay: float = 0.1):
    """Decorator applying retry_on_deadlock to an async function."""

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @wraps(func)
        async def wrapper(*args, **kwargs) -> T:
            return await retry_on_deadlock(
                lambda: func(*args, **kwargs), max_attempts, base_delay
            )

        return wrapper

    return decorator
