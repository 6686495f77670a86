"""Endpoint descriptors, transport clients and the pagination engine.

Resource endpoints live in submodules named after the resource, e.g.
``speedrun_api.api.games.Games`` or ``speedrun_api.api.runs.CreateRun``.
"""

from speedrun_api.api.client import (
    SPEEDRUN_API_BASE_URL,
    ApiRequest,
    ApiResponse,
    AsyncClient,
    AsyncSpeedrunApiClient,
    Client,
    Method,
    RestClient,
    SpeedrunApiClient,
)
from speedrun_api.api.common import CategoriesSorting, Direction, VariablesSorting
from speedrun_api.api.endpoint import Endpoint
from speedrun_api.api.errors import (
    ApiError,
    BodyError,
    DataTypeError,
    EndpointBuildError,
    JsonParseError,
    MissingFieldError,
    RequiresAuthenticationError,
    SpeedrunApiError,
    TransportError,
    UnknownApiError,
)
from speedrun_api.api.pagination import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    Pageable,
    PagedIter,
    SinglePage,
    paged_stream,
)
from speedrun_api.api.response import Root, deserialize_response

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE_SIZE",
    "SPEEDRUN_API_BASE_URL",
    "ApiError",
    "ApiRequest",
    "ApiResponse",
    "AsyncClient",
    "AsyncSpeedrunApiClient",
    "BodyError",
    "CategoriesSorting",
    "Client",
    "DataTypeError",
    "Direction",
    "Endpoint",
    "EndpointBuildError",
    "JsonParseError",
    "Method",
    "MissingFieldError",
    "Pageable",
    "PagedIter",
    "RequiresAuthenticationError",
    "RestClient",
    "Root",
    "SinglePage",
    "SpeedrunApiClient",
    "SpeedrunApiError",
    "TransportError",
    "UnknownApiError",
    "VariablesSorting",
    "deserialize_response",
    "paged_stream",
]
