"""Endpoint descriptors: method, path, query parameters, body, auth requirement."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from collections.abc import Iterable
from enum import Enum
from typing import Any, TypeVar, get_origin

from pydantic import BaseModel, ConfigDict, ValidationError, ValidationInfo, field_validator
from pydantic_core import PydanticSerializationError

from speedrun_api.api.client import AsyncClient, Client, Method
from speedrun_api.api.errors import BodyError, EndpointBuildError, MissingFieldError
from speedrun_api.api.query import build_request
from speedrun_api.api.response import deserialize_response
from speedrun_api.types.common import to_kebab

EndpointT = TypeVar("EndpointT", bound="Endpoint")

JSON_CONTENT_TYPE = "application/json"


def _render(value: Any) -> str | None:
    """Render one query value the way speedrun.com expects it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (set, frozenset, list, tuple)):
        if not value:
            return None
        return ",".join(sorted(_render(v) or "" for v in value))
    return str(value)


def encode_pairs(values: dict[str, Any]) -> list[tuple[str, str]]:
    pairs: list[tuple[str, str]] = []
    for key, value in values.items():
        if value is None:
            continue
        rendered = _render(value)
        if rendered is not None:
            pairs.append((key, rendered))
    return pairs


class Endpoint(BaseModel, ABC):
    """Describes one API operation.

    Fields hold the operation's parameters. Path identifiers are declared with
    ``Field(exclude=True)`` so only the remaining fields become query
    parameters. Instances are immutable.
    """

    model_config = ConfigDict(
        alias_generator=to_kebab,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )

    @field_validator("*", mode="before")
    @classmethod
    def split_csv_sets(cls, value: Any, info: ValidationInfo) -> Any:
        """Accept the wire form ``a,b`` for set-valued fields."""
        if isinstance(value, str) and info.field_name is not None:
            annotation = cls.model_fields[info.field_name].annotation
            if get_origin(annotation) in (set, frozenset):
                return frozenset(part.strip() for part in value.split(",") if part.strip())
        return value

    @classmethod
    def build(cls: type[EndpointT], **fields: Any) -> EndpointT:
        """Validate *fields* and construct the endpoint.

        Raises ``MissingFieldError`` for the first required field that was not
        supplied and ``EndpointBuildError`` for any other invalid value.
        """
        try:
            return cls(**fields)
        except ValidationError as exc:
            for err in exc.errors():
                if err["type"] == "missing":
                    raise MissingFieldError(str(err["loc"][0])) from exc
            raise EndpointBuildError(str(exc)) from exc

    def method(self) -> Method:
        return Method.GET

    @abstractmethod
    def endpoint(self) -> str:
        """Path of the operation, relative to the API root."""

    def query_parameters(self) -> list[tuple[str, str]]:
        """Ordered query parameters derived from the set fields."""
        return encode_pairs(self.model_dump(by_alias=True, exclude_none=True))

    def body(self) -> tuple[str, bytes] | None:
        """``(content_type, payload)`` for operations that send a body."""
        return None

    def requires_authentication(self) -> bool:
        return False

    def json_body(self, root: str | None = None) -> tuple[str, bytes]:
        """Serialize the non-path fields as a JSON body, optionally under *root*."""
        try:
            payload: Any = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        except PydanticSerializationError as exc:
            raise BodyError(f"JSON encode error: {exc}") from exc
        if root is not None:
            payload = {root: payload}
        return JSON_CONTENT_TYPE, json.dumps(payload).encode()

    # ── one-shot query path ────────────────────────────────────────────────

    def query(self, client: Client, data_type: Any = Any) -> Any:
        """Perform the request and decode ``data`` as *data_type*."""
        request = build_request(self, client)
        response = client.rest(request)
        return deserialize_response(response, data_type).data

    async def query_async(self, client: AsyncClient, data_type: Any = Any) -> Any:
        """Asynchronous counterpart of :meth:`query`."""
        request = build_request(self, client)
        response = await client.rest_async(request)
        return deserialize_response(response, data_type).data


def with_variables(
    pairs: list[tuple[str, str]], variables: Iterable[tuple[str, str]]
) -> list[tuple[str, str]]:
    """Append ``var-<variable>=<value>`` filters after the regular parameters."""
    return pairs + [(f"var-{var}", val) for var, val in variables]
