"""Response envelope decoding: ``{"data": ..., "pagination": ...}`` → typed values."""

from __future__ import annotations

import json
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter, ValidationError

from speedrun_api.api.client import ApiResponse
from speedrun_api.api.errors import (
    ApiError,
    DataTypeError,
    JsonParseError,
    SpeedrunApiError,
    UnknownApiError,
)
from speedrun_api.types.common import Pagination

T = TypeVar("T")

# Where a human-readable message may live in an error body, in lookup order.
_MESSAGE_POINTERS: tuple[tuple[str, ...], ...] = (("message",), ("error", "message"))


@dataclass
class Root(Generic[T]):
    """A decoded response envelope."""

    data: T
    pagination: Pagination | None = None


@lru_cache(maxsize=256)
def _cached_adapter(data_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(data_type)


def _adapter(data_type: Any) -> TypeAdapter[Any]:
    try:
        return _cached_adapter(data_type)
    except TypeError:
        # unhashable annotation metadata
        return TypeAdapter(data_type)


def typename(data_type: Any) -> str:
    """Readable name of a target type, for error messages."""
    if isinstance(data_type, type):
        return data_type.__qualname__
    return repr(data_type)


def _lookup(value: Any, pointer: tuple[str, ...]) -> Any:
    for key in pointer:
        if not isinstance(value, dict) or key not in value:
            return None
        value = value[key]
    return value


def error_from_body(value: Any, status_code: int) -> ApiError:
    """Build the exception for a non-success response body."""
    for pointer in _MESSAGE_POINTERS:
        message = _lookup(value, pointer)
        if isinstance(message, str):
            return SpeedrunApiError(message, status_code)
    return UnknownApiError(value, status_code)


def decode(data_type: Any, value: Any) -> Any:
    """Validate *value* against *data_type*, raising ``DataTypeError`` on mismatch."""
    try:
        return _adapter(data_type).validate_python(value)
    except ValidationError as exc:
        raise DataTypeError(typename(data_type), exc, value) from exc


def deserialize_response(
    response: ApiResponse,
    data_type: Any = Any,
    *,
    paged: bool = False,
) -> Root[Any]:
    """Decode one HTTP response into a :class:`Root`.

    The body is parsed as JSON before the status is inspected so that error
    payloads can be reported. For *paged* responses a missing ``pagination``
    object decodes to an empty :class:`Pagination`.
    """
    try:
        value = json.loads(response.content) if response.content else {}
    except ValueError as exc:
        raise JsonParseError(exc, response.status_code) from exc

    if not response.is_success:
        raise error_from_body(value, response.status_code)

    if not isinstance(value, dict):
        raise DataTypeError(
            typename(data_type), ValueError("response is not a JSON object"), value
        )

    root = Root(data=decode(data_type, value.get("data")))
    if paged:
        raw_pagination = value.get("pagination")
        root.pagination = (
            Pagination() if raw_pagination is None else decode(Pagination, raw_pagination)
        )
    return root
