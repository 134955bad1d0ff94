from typing import Any, Dict, List, Optional


class SparkPostError(Exception):
    """Base class for every error delivered by the SparkPost client."""


class SchemaError(SparkPostError):
    """
    A value did not conform to its declared shape.

    Raised for malformed outgoing payloads and for replies whose body does
    not match the shape expected for their status code. `diagnostics` holds
    the raw coercion errors as reported by pydantic.
    """

    def __init__(self, diagnostics: List[Dict[str, Any]], message: Optional[str] = None):
        self.diagnostics = diagnostics
        super().__init__(message or f"Schema error: {diagnostics!r}")


class TransmissionFailedError(SparkPostError):
    """The API answered 400 with a well-formed list of errors."""

    def __init__(self, failure):
        self.failure = failure
        self.message = failure.errors[0].message
        super().__init__(f"Transmission failed: {self.message}")

    @property
    def errors(self):
        return self.failure.errors


class TransportError(SparkPostError):
    """Connection problems, timeouts and status codes nobody handles."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: Optional[str] = None):
        self.status_code = status_code
        self.body = body
        super().__init__(message)
