import time
import asyncio
import logging

logger = logging.getLogger("sparkpost_service")

class TokenBucketRateLimiter:
    def __init__(self, rate: int, period_seconds: float = 60, burst: int = 1):
        self.rate = rate
        self.period_seconds = period_seconds
        self.capacity = max(burst, 1)
        self.tokens = float(self.capacity)
        self.last_refill = time.monotonic()
        self.lock = asyncio.Lock()

    @property
    def refill_per_second(self) -> float:
        return self.rate / self.period_seconds

    def _refill(self, now: float):
        time_passed = now - self.last_refill
        self.tokens = min(self.capacity, self.tokens + time_passed * self.refill_per_second)
        self.last_refill = now

    async def acquire(self, tokens: int = 1):
        """
        Acquires `tokens` from the bucket. Blocks until tokens are available.
        Never holds more than `burst` tokens, refilled at `rate` per period.
        """
        if self.rate <= 0:
            return  # No limit

        while True:
            async with self.lock:
                self._refill(time.monotonic())

                if self.tokens >= tokens:
                    self.tokens -= tokens
                    return

                wait_time = (tokens - self.tokens) / self.refill_per_second

            # Wait outside lock
            logger.debug(f"Throttled: waiting {wait_time:.2f}s for a request slot")
            await asyncio.sleep(wait_time)
