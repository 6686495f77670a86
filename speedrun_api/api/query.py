"""Request assembly shared by one-shot queries and page fetches."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from speedrun_api.api.client import ApiRequest, RestClient
from speedrun_api.api.errors import RequiresAuthenticationError

if TYPE_CHECKING:
    from speedrun_api.api.endpoint import Endpoint


def endpoint_url(
    endpoint: Endpoint,
    client: RestClient,
    params: list[tuple[str, str]] | None = None,
) -> httpx.URL:
    """Absolute URL for *endpoint*, carrying *params* (default: its own query)."""
    if params is None:
        params = endpoint.query_parameters()
    url = client.rest_endpoint(endpoint.endpoint())
    return url.copy_with(params=params) if params else url


def build_request(
    endpoint: Endpoint,
    client: RestClient,
    url: httpx.URL | None = None,
) -> ApiRequest:
    """Assemble the request for *endpoint*.

    Raises ``RequiresAuthenticationError`` before touching the network when the
    endpoint needs an API key and *client* has none.
    """
    if endpoint.requires_authentication() and not client.has_api_key():
        raise RequiresAuthenticationError()

    if url is None:
        url = endpoint_url(endpoint, client)

    headers: dict[str, str] = {}
    body = b""
    payload = endpoint.body()
    if payload is not None:
        content_type, body = payload
        headers["Content-Type"] = content_type
    return ApiRequest(method=endpoint.method(), url=url, headers=headers, body=body)
