import os
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

DEFAULT_ENDPOINT = "https://api.sparkpost.com/api"


class ThrottlePeriod(str, Enum):
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"

    @property
    def seconds(self) -> int:
        return {"second": 1, "minute": 60, "hour": 3600}[self.value]


class ThrottleConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    rate: int = 10
    period: ThrottlePeriod = ThrottlePeriod.MINUTE
    burst: int = 2


class HttpConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    throttle: ThrottleConfig = Field(default_factory=ThrottleConfig)
    timeout_seconds: float = 30
    max_attempts: int = Field(default=3, ge=1)


class SparkPostConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    api_key: str
    sandbox: bool = False
    endpoint: str = DEFAULT_ENDPOINT
    http: HttpConfig = Field(default_factory=HttpConfig)


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def load_config_from_env(api_key: Optional[str] = None) -> SparkPostConfig:
    """
    Builds a client configuration from SPARKPOST_* environment variables.
    Call load_dotenv() first to pick up a local .env file.
    """
    api_key = api_key or os.getenv("SPARKPOST_API_KEY")
    if not api_key:
        raise ValueError("Missing SPARKPOST_API_KEY in environment.")

    return SparkPostConfig(
        api_key=api_key,
        sandbox=_env_flag("SPARKPOST_SANDBOX"),
        endpoint=os.getenv("SPARKPOST_ENDPOINT", DEFAULT_ENDPOINT),
        http=HttpConfig(timeout_seconds=float(os.getenv("SPARKPOST_TIMEOUT_SECONDS", "30"))),
    )
