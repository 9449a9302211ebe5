"""Exponential backoff retry decorator for blocking calls."""

from __future__ import annotations

import functools
import logging
import random
import time
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")

logger = logging.getLogger(__name__)


def retry(
    max_retries: int = 3,
    base_delay: float = 1.0,
    max_delay: float = 60.0,
    jitter: bool = True,
    exceptions: tuple[type[Exception], ...] = (Exception,),
    should_retry: Callable[[Exception], bool] | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """Retry a call with exponential backoff and optional jitter.

    Parameters
    ----------
    max_retries:
        Extra attempts after the first one. ``0`` disables retrying.
    exceptions:
        Exception types that may trigger a retry. Anything else propagates
        on the first attempt.
    should_retry:
        Optional predicate narrowing ``exceptions`` further, e.g. to skip
        client errors that will fail the same way every time.
    sleep:
        Injected so tests can run without waiting.
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        def wrapper(*args: object, **kwargs: object) -> T:
            attempt = 0
            while True:
                try:
                    return func(*args, **kwargs)
                except exceptions as exc:
                    if attempt >= max_retries or (
                        should_retry is not None and not should_retry(exc)
                    ):
                        raise
                    delay = min(base_delay * (2**attempt), max_delay)
                    if jitter:
                        delay *= 0.5 + random.random()
                    attempt += 1
                    logger.warning(
                        "Retry %d/%d for %s after %.1fs: %s",
                        attempt,
                        max_retries,
                        func.__name__,
                        delay,
                        exc,
                    )
                    sleep(delay)

        return wrapper

    return decorator
