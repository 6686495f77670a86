"""An in-memory speedrun.com and clients that talk to it."""

from __future__ import annotations

import json
from typing import Any

import httpx

from speedrun_api.api.client import (
    SPEEDRUN_API_BASE_URL,
    ApiRequest,
    ApiResponse,
    AsyncClient,
    Client,
)

RATE_LIMITED = {"error": {"message": "rate limited"}}


class FakeApi:
    """Serves *items* in offset/max pages and records every request.

    ``server_max`` forces the page size the server echoes regardless of the
    requested ``max``. Offsets listed in ``fail_at`` answer HTTP 500 once
    each before serving normally.
    """

    def __init__(
        self,
        items: list[Any],
        *,
        server_max: int | None = None,
        default_max: int = 20,
        fail_at: tuple[int, ...] = (),
        echo_max: bool = True,
    ) -> None:
        self.items = items
        self.server_max = server_max
        self.default_max = default_max
        self.fail_at = list(fail_at)
        self.echo_max = echo_max
        self.requests: list[ApiRequest] = []

    @property
    def offsets(self) -> list[int]:
        return [int(r.url.params.get("offset", "0")) for r in self.requests]

    def respond(self, request: ApiRequest) -> ApiResponse:
        self.requests.append(request)
        offset = int(request.url.params.get("offset", "0"))
        if offset in self.fail_at:
            self.fail_at.remove(offset)
            return ApiResponse(500, json.dumps(RATE_LIMITED).encode(), str(request.url))

        requested = request.url.params.get("max")
        size = self.server_max or (int(requested) if requested else self.default_max)
        page = self.items[offset : offset + size]
        pagination: dict[str, Any] = {"offset": offset, "size": len(page), "links": []}
        if self.echo_max:
            pagination["max"] = size
        body = {"data": page, "pagination": pagination}
        return ApiResponse(200, json.dumps(body).encode(), str(request.url))


class FakeClient(Client):
    def __init__(self, api: FakeApi, *, api_key: str | None = None) -> None:
        self.api = api
        self.api_key = api_key
        self.base_url = httpx.URL(SPEEDRUN_API_BASE_URL)

    def has_api_key(self) -> bool:
        return self.api_key is not None

    def rest(self, request: ApiRequest) -> ApiResponse:
        return self.api.respond(request)


class FakeAsyncClient(AsyncClient):
    def __init__(self, api: FakeApi, *, api_key: str | None = None) -> None:
        self.api = api
        self.api_key = api_key
        self.base_url = httpx.URL(SPEEDRUN_API_BASE_URL)

    def has_api_key(self) -> bool:
        return self.api_key is not None

    async def rest_async(self, request: ApiRequest) -> ApiResponse:
        return self.api.respond(request)
