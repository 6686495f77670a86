"""Tests for the httpx-backed clients, driven through httpx.MockTransport."""

from __future__ import annotations

import json
import os
from unittest.mock import patch

import httpx
import pytest

from speedrun_api.api.client import (
    ApiRequest,
    AsyncSpeedrunApiClient,
    Method,
    SpeedrunApiClient,
)
from speedrun_api.api.errors import TransportError
from speedrun_api.api.games import Games
from speedrun_api.api.profile import Profile

_ENV_KEYS = ("SPEEDRUN_API_KEY", "SPEEDRUN_API_BASE_URL", "SPEEDRUN_API_TIMEOUT")


@pytest.fixture(autouse=True)
def _clean_env():
    with patch.dict(os.environ, {}):
        for key in _ENV_KEYS:
            os.environ.pop(key, None)
        yield


def _pages(items: list[str], page_size: int):
    """MockTransport handler serving *items* in pages of *page_size*."""
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        offset = int(request.url.params.get("offset", "0"))
        page = items[offset : offset + page_size]
        return httpx.Response(
            200,
            json={
                "data": page,
                "pagination": {"offset": offset, "max": page_size, "size": len(page)},
            },
        )

    return handler, seen


# ── TestSpeedrunApiClient ─────────────────────────────────────────────────


class TestSpeedrunApiClient:
    def test_sends_api_key_header(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={"data": {"id": "me"}})

        with SpeedrunApiClient("secret", transport=httpx.MockTransport(handler)) as client:
            assert client.has_api_key()
            assert Profile().query(client) == {"id": "me"}

        assert seen[0].headers["X-API-Key"] == "secret"
        assert seen[0].headers["Accept"] == "application/json"
        assert str(seen[0].url) == "https://www.speedrun.com/api/v1/profile"

    def test_no_key_no_header(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={"data": []})

        with SpeedrunApiClient(transport=httpx.MockTransport(handler)) as client:
            assert not client.has_api_key()
            Games().query(client)
        assert "X-API-Key" not in seen[0].headers

    def test_key_from_environment(self):
        with patch.dict(os.environ, {"SPEEDRUN_API_KEY": "from-env"}):
            client = SpeedrunApiClient()
        assert client.has_api_key()
        client.close()

    def test_base_url_normalized(self):
        with patch.dict(os.environ, {"SPEEDRUN_API_BASE_URL": "http://localhost:8080/api/v1"}):
            client = SpeedrunApiClient()
        assert str(client.rest_endpoint("/games")) == "http://localhost:8080/api/v1/games"
        client.close()

    def test_explicit_arguments_win(self):
        with patch.dict(os.environ, {"SPEEDRUN_API_BASE_URL": "http://ignored/"}):
            client = SpeedrunApiClient(base_url="http://used/v1/")
        assert client.base_url == httpx.URL("http://used/v1/")
        client.close()

    def test_rest_round_trip(self):
        def handler(request):
            assert request.method == "PUT"
            assert request.headers["Content-Type"] == "application/json"
            assert json.loads(request.content) == {"status": {"status": "verified"}}
            return httpx.Response(404, json={"message": "not found"})

        client = SpeedrunApiClient("k", transport=httpx.MockTransport(handler))
        request = ApiRequest(
            method=Method.PUT,
            url=client.rest_endpoint("runs/r1/status"),
            headers={"Content-Type": "application/json"},
            body=b'{"status": {"status": "verified"}}',
        )
        response = client.rest(request)
        assert response.status_code == 404
        assert not response.is_success
        assert json.loads(response.content) == {"message": "not found"}
        assert response.url == "https://www.speedrun.com/api/v1/runs/r1/status"
        client.close()

    def test_transport_error_wrapped(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with SpeedrunApiClient(transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(TransportError, match="connection refused") as exc_info:
                Games().query(client)
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    def test_paged_iteration_end_to_end(self):
        handler, seen = _pages(["A", "B", "C", "D", "E"], page_size=2)
        with SpeedrunApiClient(transport=httpx.MockTransport(handler)) as client:
            assert list(Games(name="x").iter(client)) == ["A", "B", "C", "D", "E"]
        assert [r.url.params["offset"] for r in seen] == ["0", "2", "4"]
        assert all(r.url.params["name"] == "x" for r in seen)


# ── TestAsyncSpeedrunApiClient ────────────────────────────────────────────


class TestAsyncSpeedrunApiClient:
    @pytest.mark.anyio
    async def test_stream_end_to_end(self):
        handler, seen = _pages(["A", "B", "C", "D", "E"], page_size=2)
        async with AsyncSpeedrunApiClient(transport=httpx.MockTransport(handler)) as client:
            items = [item async for item in Games().stream(client, page_size=2)]
        assert items == ["A", "B", "C", "D", "E"]
        assert [r.url.params["offset"] for r in seen] == ["0", "2", "4"]
        assert {r.url.params["max"] for r in seen} == {"2"}

    @pytest.mark.anyio
    async def test_sends_api_key_header(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={"data": []})

        async with AsyncSpeedrunApiClient(
            "secret", transport=httpx.MockTransport(handler)
        ) as client:
            await Profile().query_async(client)
        assert seen[0].headers["X-API-Key"] == "secret"

    @pytest.mark.anyio
    async def test_transport_error_wrapped(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        async with AsyncSpeedrunApiClient(transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(TransportError) as exc_info:
                await Games().query_async(client)
        assert isinstance(exc_info.value.__cause__, httpx.ReadTimeout)
