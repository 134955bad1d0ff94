import asyncio
import logging
import random
from functools import wraps
from typing import Callable, Optional, Type, Tuple

from utils.errors import TransportError

logger = logging.getLogger("sparkpost_service")

RETRYABLE_STATUS_CODES = frozenset({429, 500, 502, 503, 504})

class RetryManager:
    """
    Manages retry logic with exponential backoff and jitter.
    """

    @staticmethod
    def is_transient_error(exception: Exception) -> bool:
        """
        Determines if an error is transient and worth retrying.
        Connection failures and timeouts carry no status code; throttling
        and gateway errors carry one of RETRYABLE_STATUS_CODES.
        """
        if not isinstance(exception, TransportError):
            return False
        return exception.status_code is None or exception.status_code in RETRYABLE_STATUS_CODES

    @staticmethod
    def backoff_delay(attempt: int, base_delay: float, max_delay: float) -> float:
        """base * 2^(attempt-1), capped at max_delay, plus up to 10% jitter."""
        delay = min(base_delay * (2 ** (attempt - 1)), max_delay)
        return delay + random.uniform(0, 0.1 * delay)

    @staticmethod
    def with_retry(
        max_attempts: int = 3,
        base_delay: float = 1.0,
        max_delay: float = 10.0,
        retry_on: Tuple[Type[Exception], ...] = (TransportError,),
        should_retry: Optional[Callable[[Exception], bool]] = None,
    ):
        """
        Decorator to retry an async function while `should_retry(error)` holds.
        Defaults to RetryManager.is_transient_error.
        """
        should_retry = should_retry or RetryManager.is_transient_error

        def decorator(func: Callable):
            @wraps(func)
            async def wrapper(*args, **kwargs):
                for attempt in range(1, max_attempts + 1):
                    try:
                        return await func(*args, **kwargs)
                    except retry_on as e:
                        if not should_retry(e):
                            logger.warning(f"{func.__name__} failed with a permanent error: {e}")
                            raise
                        if attempt == max_attempts:
                            logger.warning(f"{func.__name__} gave up after {max_attempts} attempts: {e}")
                            raise

                        delay = RetryManager.backoff_delay(attempt, base_delay, max_delay)
                        logger.info(f"{func.__name__} attempt {attempt}/{max_attempts} failed ({e}); retrying in {delay:.2f}s")
                        await asyncio.sleep(delay)
            return wrapper
        return decorator
