"""Pagination over offset/limit list endpoints.

Three ways to consume a :class:`Pageable` endpoint, all built on one page
fetch (:class:`SinglePage`):

* ``endpoint.single_page(offset=..., page_size=...)``: exactly one page plus
  its :class:`~speedrun_api.types.Pagination` metadata.
* ``endpoint.iter(client, T)``: a blocking iterator over items.
* ``endpoint.stream(client, T)``: an async iterator over items.

The server may answer with a different page size than the one requested, so
continuation is decided from the echoed ``pagination.max``.
"""

from __future__ import annotations

import dataclasses
from collections import deque
from collections.abc import AsyncIterator, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

import httpx
import structlog

from speedrun_api.api.client import AsyncClient, Client, RestClient
from speedrun_api.api.errors import EndpointBuildError
from speedrun_api.api.query import build_request, endpoint_url
from speedrun_api.api.response import deserialize_response
from speedrun_api.types.common import Pagination

if TYPE_CHECKING:
    from speedrun_api.api.endpoint import Endpoint

log = structlog.get_logger("speedrun_api.pagination")

T = TypeVar("T")

# Page size assumed when neither the server nor the caller says otherwise.
# This is a heuristic: speedrun.com's default is 20 for the endpoints checked,
# but it is not part of the documented contract.
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 200

_PAGING_KEYS = frozenset({"offset", "max"})


@dataclass(frozen=True)
class SinglePage:
    """One page of a pageable endpoint, starting at *offset*."""

    endpoint: Endpoint
    offset: int = 0
    page_size: int | None = None

    def __post_init__(self) -> None:
        if self.offset < 0:
            raise EndpointBuildError(f"offset must be >= 0, got {self.offset}")
        if self.page_size is not None and not 1 <= self.page_size <= MAX_PAGE_SIZE:
            raise EndpointBuildError(
                f"page_size must be between 1 and {MAX_PAGE_SIZE}, got {self.page_size}"
            )

    def page_url(self, client: RestClient) -> httpx.URL:
        """URL of this page; ``offset``/``max`` replace any the endpoint sets."""
        params = [
            (key, value)
            for key, value in self.endpoint.query_parameters()
            if key not in _PAGING_KEYS
        ]
        params.append(("offset", str(self.offset)))
        if self.page_size is not None:
            params.append(("max", str(self.page_size)))
        return endpoint_url(self.endpoint, client, params)

    def query(self, client: Client, data_type: Any = Any) -> tuple[list[Any], Pagination]:
        """Fetch this page, decoding each item as *data_type*."""
        request = build_request(self.endpoint, client, self.page_url(client))
        response = client.rest(request)
        root = deserialize_response(response, list[data_type], paged=True)
        return root.data, root.pagination or Pagination()

    async def query_async(
        self, client: AsyncClient, data_type: Any = Any
    ) -> tuple[list[Any], Pagination]:
        """Asynchronous counterpart of :meth:`query`."""
        request = build_request(self.endpoint, client, self.page_url(client))
        response = await client.rest_async(request)
        root = deserialize_response(response, list[data_type], paged=True)
        return root.data, root.pagination or Pagination()


class PagedIter(Generic[T]):
    """Blocking iterator over every item of a pageable endpoint.

    Pages are fetched lazily, one per exhausted buffer. A failed fetch raises
    from ``next()`` without moving the window, so calling ``next()`` again
    retries the same offset. Iteration ends after the first page holding
    fewer items than the effective page size.
    """

    def __init__(
        self,
        endpoint: Endpoint,
        client: Client,
        data_type: Any = Any,
        *,
        offset: int = 0,
        page_size: int | None = None,
        default_page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        self._client = client
        self._data_type = data_type
        self._default_page_size = default_page_size
        self._window = SinglePage(endpoint, offset=offset, page_size=page_size)
        self._buffer: deque[T] = deque()
        self._last_page = False

    @property
    def offset(self) -> int:
        """Offset of the next page to fetch."""
        return self._window.offset

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        while not self._buffer:
            if self._last_page:
                raise StopIteration
            self._fetch()
        return self._buffer.popleft()

    def _fetch(self) -> None:
        items, pagination = self._window.query(self._client, self._data_type)
        page_size = pagination.max or self._window.page_size or self._default_page_size
        log.debug(
            "pagination.page",
            offset=self._window.offset,
            size=len(items),
            max=page_size,
        )
        self._window = dataclasses.replace(self._window, offset=self._window.offset + len(items))
        if len(items) < page_size:
            self._last_page = True
            log.debug("pagination.done", offset=self._window.offset)
        self._buffer.extend(items)


async def paged_stream(
    endpoint: Endpoint,
    client: AsyncClient,
    data_type: Any = Any,
    *,
    offset: int = 0,
    page_size: int | None = None,
    default_page_size: int = DEFAULT_PAGE_SIZE,
) -> AsyncIterator[Any]:
    """Yield every item of a pageable endpoint, awaiting one page at a time.

    An empty page ends the stream at once. A short page is yielded in full and
    then ends the stream without another fetch.
    """
    next_offset: int | None = offset
    while next_offset is not None:
        page = SinglePage(endpoint, offset=next_offset, page_size=page_size)
        items, pagination = await page.query_async(client, data_type)
        if not items:
            log.debug("pagination.done", offset=page.offset)
            return

        page_max = pagination.max or page_size or default_page_size
        log.debug("pagination.page", offset=page.offset, size=len(items), max=page_max)
        if len(items) < page_max:
            next_offset = None
            log.debug("pagination.done", offset=page.offset + len(items))
        else:
            next_offset = page.offset + page_max
        for item in items:
            yield item


class Pageable:
    """Mixin for endpoints whose results come back in offset/limit pages."""

    def single_page(self, offset: int = 0, page_size: int | None = None) -> SinglePage:
        """One page starting at *offset*; *page_size* is sent as ``max``."""
        return SinglePage(self, offset=offset, page_size=page_size)  # type: ignore[arg-type]

    def iter(
        self,
        client: Client,
        data_type: Any = Any,
        *,
        offset: int = 0,
        page_size: int | None = None,
        default_page_size: int = DEFAULT_PAGE_SIZE,
    ) -> PagedIter[Any]:
        """Blocking iterator over all results from *offset* on."""
        return PagedIter(
            self,  # type: ignore[arg-type]
            client,
            data_type,
            offset=offset,
            page_size=page_size,
            default_page_size=default_page_size,
        )

    def stream(
        self,
        client: AsyncClient,
        data_type: Any = Any,
        *,
        offset: int = 0,
        page_size: int | None = None,
        default_page_size: int = DEFAULT_PAGE_SIZE,
    ) -> AsyncIterator[Any]:
        """Async iterator over all results from *offset* on."""
        return paged_stream(
            self,  # type: ignore[arg-type]
            client,
            data_type,
            offset=offset,
            page_size=page_size,
            default_page_size=default_page_size,
        )
