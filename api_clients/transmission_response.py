import json
import logging
from typing import Any, Type

from pydantic import BaseModel, ValidationError

from api_clients.http_client import xform_response
from models.http import HttpResponse
from models.responses import TransmissionFailure, TransmissionSuccess
from utils.errors import SchemaError, TransmissionFailedError

logger = logging.getLogger("sparkpost_service")


def _coerce(model: Type[BaseModel], body: str) -> Any:
    """Decodes a JSON body and validates it against `model`, raising SchemaError."""
    try:
        decoded = json.loads(body)
    except ValueError as e:
        raise SchemaError([{"type": "json_invalid", "loc": (), "msg": str(e), "input": body}]) from e

    try:
        return model.model_validate(decoded)
    except ValidationError as e:
        logger.error(f"Response does not match {model.__name__}: {e}")
        raise SchemaError(e.errors(include_url=False)) from e


def _on_success(response: HttpResponse) -> TransmissionSuccess:
    return _coerce(TransmissionSuccess, response.body)


def _on_failure(response: HttpResponse):
    failure = _coerce(TransmissionFailure, response.body)
    logger.warning(f"Transmission rejected: {failure.errors[0].message}")
    raise TransmissionFailedError(failure)


transform_transmission_response = xform_response({
    200: _on_success,
    400: _on_failure,
})


def classify_transmission_response(status_code: int, body: str) -> TransmissionSuccess:
    """
    Classifies a raw /v1/transmissions reply.

    Returns the validated success on 200. Raises TransmissionFailedError for a
    well-formed 400, SchemaError when the body does not match the shape for
    its status, and TransportError for any other status.
    """
    return transform_transmission_response(HttpResponse(status_code=status_code, body=body))
