"""Rate limiter for vision API calls."""

from __future__ import annotations

import logging
import threading
import time
from typing import Any, Callable, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)

RETRYABLE_MARKERS = (
    "rate limit",
    "rate_limit",
    "429",
    "timeout",
    "connection",
    "temporarily",
    "overloaded",
    "503",
    "500",
)


def is_retryable(error: Exception) -> bool:
    error_str = str(error).lower()
    return any(marker in error_str for marker in RETRYABLE_MARKERS)


class RateLimiter:
    """
    Spaces out API calls and retries transient failures with exponential backoff.

    Usage:
        limiter = RateLimiter(requests_per_minute=20)
        result = limiter.call(api_function, arg1, kwarg=value)
    """

    def __init__(
        self,
        requests_per_minute: int = 20,
        retry_delay_seconds: float = 2.0,
        max_retries: int = 3,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if requests_per_minute <= 0:
            raise ValueError(f"requests_per_minute must be positive, got {requests_per_minute}")
        if max_retries < 0:
            raise ValueError(f"max_retries must be >= 0, got {max_retries}")
        self._min_interval = 60.0 / requests_per_minute
        self._retry_delay = retry_delay_seconds
        self._max_retries = max_retries
        self._sleep = sleep
        self._last_call = 0.0
        self._lock = threading.Lock()

    def call(self, func: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        """Call function with rate limiting and retry logic."""
        with self._lock:
            elapsed = time.time() - self._last_call
            if elapsed < self._min_interval:
                self._sleep(self._min_interval - elapsed)

        last_error: Exception | None = None
        for attempt in range(self._max_retries + 1):
            try:
                with self._lock:
                    self._last_call = time.time()
                return func(*args, **kwargs)
            except Exception as e:
                if not is_retryable(e):
                    raise
                last_error = e
                if attempt < self._max_retries:
                    delay = self._retry_delay * (2 ** attempt)
                    logger.warning(
                        "Vision call failed (attempt %d/%d), retrying in %.1fs: %s",
                        attempt + 1,
                        self._max_retries + 1,
                        delay,
                        e,
                    )
                    self._sleep(delay)

        raise last_error  # type: ignore[misc]
