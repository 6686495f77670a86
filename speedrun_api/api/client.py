"""HTTP clients for the speedrun.com REST API (blocking and asyncio)."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum

import httpx
import structlog

from speedrun_api.api.errors import TransportError

log = structlog.get_logger("speedrun_api.client")

SPEEDRUN_API_BASE_URL = "https://www.speedrun.com/api/v1/"
_DEFAULT_TIMEOUT = 30.0


class Method(Enum):
    """HTTP methods used by speedrun.com endpoints."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


@dataclass
class ApiRequest:
    """A fully assembled request, ready to hand to a client."""

    method: Method
    url: httpx.URL
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""


@dataclass
class ApiResponse:
    """Status code and raw body of one HTTP round trip."""

    status_code: int
    content: bytes
    url: str = ""

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


class RestClient(ABC):
    """Knows where the API lives and whether it holds credentials."""

    base_url: httpx.URL

    def rest_endpoint(self, endpoint: str) -> httpx.URL:
        """Resolve an endpoint path against the API root."""
        return self.base_url.join(endpoint.lstrip("/"))

    @abstractmethod
    def has_api_key(self) -> bool:
        """Return True when requests will carry an API key."""


class Client(RestClient):
    """A client that performs blocking round trips."""

    @abstractmethod
    def rest(self, request: ApiRequest) -> ApiResponse:
        """Send *request* and return the raw response."""


class AsyncClient(RestClient):
    """A client that performs round trips on the running event loop."""

    @abstractmethod
    async def rest_async(self, request: ApiRequest) -> ApiResponse:
        """Send *request* and return the raw response."""


def _resolve_settings(
    api_key: str | None,
    base_url: str | None,
    timeout: float | None,
) -> tuple[str | None, httpx.URL, float]:
    resolved_key = api_key or os.environ.get("SPEEDRUN_API_KEY") or None
    resolved_url = base_url or os.environ.get("SPEEDRUN_API_BASE_URL", SPEEDRUN_API_BASE_URL)
    if not resolved_url.endswith("/"):
        resolved_url += "/"
    if timeout is None:
        timeout = float(os.environ.get("SPEEDRUN_API_TIMEOUT", _DEFAULT_TIMEOUT))
    return resolved_key, httpx.URL(resolved_url), timeout


def _default_headers(api_key: str | None) -> dict[str, str]:
    headers = {"Accept": "application/json"}
    if api_key:
        headers["X-API-Key"] = api_key
    return headers


class SpeedrunApiClient(Client):
    """Blocking speedrun.com client backed by ``httpx.Client``."""

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._api_key, self.base_url, timeout = _resolve_settings(api_key, base_url, timeout)
        self._client = httpx.Client(
            headers=_default_headers(self._api_key),
            timeout=timeout,
            transport=transport,
        )

    # ── lifecycle ──────────────────────────────────────────────────────────

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> SpeedrunApiClient:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    # ── RestClient ─────────────────────────────────────────────────────────

    def has_api_key(self) -> bool:
        return self._api_key is not None

    def rest(self, request: ApiRequest) -> ApiResponse:
        log.debug("api.request", method=request.method.value, url=str(request.url))
        try:
            resp = self._client.request(
                request.method.value,
                request.url,
                headers=request.headers,
                content=request.body or None,
            )
        except httpx.HTTPError as exc:
            log.warning("api.transport_error", url=str(request.url), error=str(exc))
            raise TransportError(f"communication: {exc}") from exc
        log.debug("api.response", url=str(request.url), status=resp.status_code)
        return ApiResponse(status_code=resp.status_code, content=resp.content, url=str(resp.url))


class AsyncSpeedrunApiClient(AsyncClient):
    """Asynchronous speedrun.com client backed by ``httpx.AsyncClient``."""

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key, self.base_url, timeout = _resolve_settings(api_key, base_url, timeout)
        self._client = httpx.AsyncClient(
            headers=_default_headers(self._api_key),
            timeout=timeout,
            transport=transport,
        )

    # ── lifecycle ──────────────────────────────────────────────────────────

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> AsyncSpeedrunApiClient:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.aclose()

    # ── RestClient ─────────────────────────────────────────────────────────

    def has_api_key(self) -> bool:
        return self._api_key is not None

    async def rest_async(self, request: ApiRequest) -> ApiResponse:
        log.debug("api.request", method=request.method.value, url=str(request.url))
        try:
            resp = await self._client.request(
                request.method.value,
                request.url,
                headers=request.headers,
                content=request.body or None,
            )
        except httpx.HTTPError as exc:
            log.warning("api.transport_error", url=str(request.url), error=str(exc))
            raise TransportError(f"communication: {exc}") from exc
        log.debug("api.response", url=str(request.url), status=resp.status_code)
        return ApiResponse(status_code=resp.status_code, content=resp.content, url=str(resp.url))
