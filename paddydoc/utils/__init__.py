"""Utility helpers for PaddyDoc."""

from .logging_config import setup_logging
from .rate_limiter import RateLimiter

__all__ = [
    "setup_logging",
    "RateLimiter",
]
