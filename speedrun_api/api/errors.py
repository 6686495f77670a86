"""Exceptions raised by endpoint construction, transport and response decoding."""

from __future__ import annotations

from typing import Any


class ApiError(Exception):
    """Base exception for all speedrun.com API errors."""


class BodyError(ApiError):
    """Raised when an endpoint cannot encode its query parameters or body."""


class TransportError(ApiError):
    """Raised when the HTTP client fails to complete a round trip."""


class RequiresAuthenticationError(ApiError):
    """Raised before any request when an endpoint needs an API key the client lacks."""

    def __init__(self) -> None:
        super().__init__("endpoint requires authentication, but no API key was provided")


class JsonParseError(ApiError):
    """Raised when a response body is not valid JSON."""

    def __init__(self, source: Exception, status_code: int) -> None:
        self.source = source
        self.status_code = status_code
        super().__init__(f"failed to parse JSON (HTTP {status_code}): {source}")


class SpeedrunApiError(ApiError):
    """speedrun.com answered with a non-success status and an error message."""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(f"speedrun.com server error (HTTP {status_code}): {message}")


class UnknownApiError(ApiError):
    """speedrun.com answered with a non-success status and no readable message."""

    def __init__(self, value: Any, status_code: int) -> None:
        self.value = value
        self.status_code = status_code
        super().__init__(f"unknown speedrun.com server error (HTTP {status_code}): {value!r}")


class DataTypeError(ApiError):
    """Raised when the response JSON does not match the requested type."""

    def __init__(self, typename: str, source: Exception, value: Any = None) -> None:
        self.typename = typename
        self.source = source
        self.value = value
        super().__init__(f"parsing type {typename} from JSON: {source}")


class EndpointBuildError(ApiError):
    """Raised when an endpoint descriptor fails validation."""


class MissingFieldError(EndpointBuildError):
    """Raised when a required endpoint field was not supplied."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"{field} must be initialized")
