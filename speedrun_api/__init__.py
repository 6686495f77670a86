"""Typed client for the speedrun.com REST API."""

__version__ = "0.1.0"

from speedrun_api.api import (
    ApiError,
    AsyncSpeedrunApiClient,
    Endpoint,
    Pageable,
    SinglePage,
    SpeedrunApiClient,
)

__all__ = [
    "ApiError",
    "AsyncSpeedrunApiClient",
    "Endpoint",
    "Pageable",
    "SinglePage",
    "SpeedrunApiClient",
]
