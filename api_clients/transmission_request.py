import json
from typing import Any, Dict

from models.config import SparkPostConfig
from models.http import HttpRequest
from models.transmission import Options, Transmission

TRANSMISSIONS_PATH = "/v1/transmissions"


def apply_sandbox(config: SparkPostConfig, transmission: Transmission) -> Transmission:
    """
    Forces options.sandbox on when the client runs in sandbox mode.
    Returns a copy; the caller's transmission is left untouched.
    """
    if not config.sandbox:
        return transmission
    options = transmission.options or Options()
    return transmission.model_copy(
        update={"options": options.model_copy(update={"sandbox": True})}
    )


def api_post_request(config: SparkPostConfig, path: str, params: Dict[str, Any]) -> HttpRequest:
    return HttpRequest(
        url=f"{config.endpoint}{path}",
        method="POST",
        headers={
            "Content-Type": "application/json; charset=utf-8",
            "Authorization": config.api_key,
        },
        body=json.dumps(params),
    )


def build_transmission_request(config: SparkPostConfig, transmission: Transmission) -> HttpRequest:
    transmission = apply_sandbox(config, transmission)
    return api_post_request(config, TRANSMISSIONS_PATH, transmission.to_wire())
