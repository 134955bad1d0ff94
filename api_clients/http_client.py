import asyncio
import logging
from typing import Any, Callable, Dict, Optional

import requests

from models.config import HttpConfig
from models.http import HttpRequest, HttpResponse
from utils.errors import TransportError
from utils.rate_limiter import TokenBucketRateLimiter
from utils.retry import RETRYABLE_STATUS_CODES, RetryManager

logger = logging.getLogger("sparkpost_service")

ResponseTransform = Callable[[HttpResponse], Any]


def xform_response(handlers: Dict[int, ResponseTransform]) -> ResponseTransform:
    """
    Builds a response transform that dispatches on status code.
    Statuses without a handler become a TransportError carrying status and body.
    """
    def transform(response: HttpResponse) -> Any:
        handler = handlers.get(response.status_code)
        if handler is None:
            raise TransportError(
                f"Unexpected HTTP status {response.status_code}",
                status_code=response.status_code,
                body=response.body,
            )
        return handler(response)
    return transform


class HttpClient:
    """
    Shared transport: one requests.Session, one throttle, retries on
    transient failures. Blocking I/O runs in a worker thread so callers
    get an asyncio future back.
    """

    def __init__(self, config: Optional[HttpConfig] = None):
        self.config = config or HttpConfig()
        self.session = requests.Session()
        throttle = self.config.throttle
        self.rate_limiter = TokenBucketRateLimiter(
            rate=throttle.rate,
            period_seconds=throttle.period.seconds,
            burst=throttle.burst,
        )
        # Transient failures on POST /v1/transmissions are retried too, even though a
        # timeout may hide a request the API already accepted; a duplicate send
        # is preferred over dropping the transmission.
        self._send_with_retry = RetryManager.with_retry(max_attempts=self.config.max_attempts)(self._throttled_send)
        self.closed = False

    def _send(self, request: HttpRequest) -> HttpResponse:
        try:
            resp = self.session.request(
                request.method,
                request.url,
                headers=request.headers,
                data=request.body.encode("utf-8"),
                timeout=self.config.timeout_seconds,
            )
        except requests.RequestException as e:
            raise TransportError(f"{request.method} {request.url} failed: {e}") from e

        if resp.status_code in RETRYABLE_STATUS_CODES:
            raise TransportError(
                f"{request.method} {request.url} returned {resp.status_code}",
                status_code=resp.status_code,
                body=resp.text,
            )
        return HttpResponse(status_code=resp.status_code, body=resp.text)

    async def _throttled_send(self, request: HttpRequest) -> HttpResponse:
        await self.rate_limiter.acquire()
        return await asyncio.to_thread(self._send, request)

    async def _execute(self, request: HttpRequest, transform: ResponseTransform) -> Any:
        response = await self._send_with_retry(request)
        logger.debug(f"{request.method} {request.url} -> {response.status_code}")
        return transform(response)

    def request(self, request: HttpRequest, transform: Optional[ResponseTransform] = None) -> asyncio.Future:
        """Schedules `request` and returns a future resolving to transform(response)."""
        if self.closed:
            raise RuntimeError("HTTP client is closed.")
        return asyncio.ensure_future(self._execute(request, transform or (lambda response: response)))

    def close(self):
        if not self.closed:
            self.session.close()
            self.closed = True
