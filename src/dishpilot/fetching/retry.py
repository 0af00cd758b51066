"""Retry decorator for transient network failures."""

import logging
import time
from functools import wraps
from typing import Any, Callable

import requests

logger = logging.getLogger(__name__)

# HTTP error statuses are not retried
TRANSIENT_ERRORS = (
    requests.exceptions.ConnectionError,
    requests.exceptions.ChunkedEncodingError,
    requests.exceptions.ReadTimeout,
    ConnectionResetError,
)


def retry_on_connection_error(
    max_retries: int = 3, initial_delay: float = 1.0
) -> Callable:
    """Retry a catalog download when the connection drops or stalls.

    Args:
        max_retries: Total number of attempts, at least 1
        initial_delay: Seconds to wait after the first failure; doubled each time

    Raises:
        ValueError: If max_retries is less than 1

    Example:
        @retry_on_connection_error(max_retries=2, initial_delay=0.5)
        def download(session, url):
            return session.get(url)
    """
    if max_retries < 1:
        raise ValueError(f"max_retries must be at least 1, got {max_retries}")

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            delay = initial_delay
            for attempt in range(1, max_retries + 1):
                try:
                    return func(*args, **kwargs)
                except TRANSIENT_ERRORS as e:
                    if attempt == max_retries:
                        logger.error(f"Giving up on {func.__name__} after {attempt} attempts: {e}")
                        raise
                    logger.warning(
                        f"{func.__name__} attempt {attempt}/{max_retries} failed ({e}); "
                        f"next try in {delay}s"
                    )
                    time.sleep(delay)
                    delay *= 2

        return wrapper

    return decorator
