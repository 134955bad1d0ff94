import asyncio
import logging
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from api_clients.http_client import HttpClient
from api_clients.transmission_request import build_transmission_request
from api_clients.transmission_response import transform_transmission_response
from models.config import SparkPostConfig
from models.transmission import Transmission
from utils.errors import SchemaError

logger = logging.getLogger("sparkpost_service")


class SparkPostClient:
    """
    SparkPost email API driver.

    Owns an immutable configuration and one shared HTTP transport for its
    whole lifetime. Use as a context manager, or call close() when done.
    """

    def __init__(self, config: SparkPostConfig, http: Optional[HttpClient] = None):
        self.config = config
        self.http = http or HttpClient(config.http)

    @classmethod
    def create(cls, config: Union[SparkPostConfig, Dict[str, Any]]) -> "SparkPostClient":
        """Builds a client from a config model or a plain dict, filling in defaults."""
        try:
            config = SparkPostConfig.model_validate(config)
        except ValidationError as e:
            raise SchemaError(e.errors(include_url=False)) from e
        return cls(config)

    def transmission(self, payload: Union[Transmission, Dict[str, Any]]) -> asyncio.Future:
        """
        Send a transmission.

        Returns a future that resolves to a TransmissionSuccess, or fails with
        SchemaError, TransmissionFailedError or TransportError. A payload that
        does not validate fails the future immediately; nothing is sent.
        """
        if self.http.closed:
            raise RuntimeError("SparkPost client is closed.")

        try:
            transmission = Transmission.model_validate(payload)
        except ValidationError as e:
            logger.error(f"Refusing to send invalid transmission: {e}")
            future = asyncio.get_running_loop().create_future()
            future.set_exception(SchemaError(e.errors(include_url=False)))
            return future

        request = build_transmission_request(self.config, transmission)
        logger.info(
            f"Sending transmission to {request.url} "
            f"({len(transmission.recipients)} recipients, sandbox={self.config.sandbox})"
        )
        return self.http.request(request, transform_transmission_response)

    def close(self):
        self.http.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        self.close()
