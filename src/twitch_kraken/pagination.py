"""Lazy iteration over paginated Kraken list endpoints.

Kraken pages its list endpoints in one of two ways:

- **Offset pagination**: each request carries ``offset=<n>&limit=100`` and the
  client advances ``n`` by the number of items it received. An empty page
  means there is nothing left.
- **Cursor pagination**: each response carries an opaque ``_cursor`` that the
  next request sends back as ``cursor=<token>``. A missing or empty cursor
  means there is nothing left.

A page source knows how to fetch the next page for one of those schemes.
``PaginatedIterator`` drives any page source and hands out one item per
``next()``, fetching a new page only once the buffered one is drained::

    posts = PaginatedIterator(
        CursorPageSource(client, "/feed/1234/posts", FeedPostsPage, "posts")
    )
    for post in posts:
        print(post.body)
    if posts.error is not None:
        print("stopped early:", posts.error)

Fetch failures never escape ``next()``. The iterator logs them, ends the
sequence and keeps the exception on ``error``.
"""

import logging
from collections import deque
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Generic, Protocol, TypeVar

import httpx

from twitch_kraken.client import KrakenClient
from twitch_kraken.errors.exceptions import KrakenError

logger = logging.getLogger(__name__)

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)

PAGE_LIMIT = 100


@dataclass
class Page(Generic[T]):
    """One decoded response of a list endpoint."""

    items: list[T] = field(default_factory=list)
    cursor: str | None = None


class PageSource(Protocol[T_co]):
    """Fetches successive pages of one list endpoint."""

    @property
    def has_more(self) -> bool:
        """False once the server has said there are no further pages."""
        ...

    def fetch_next_page(self) -> Page[T_co]: ...


def build_path(path: str, params: Mapping[str, Any]) -> str:
    """Append ``params`` to ``path`` as a query string, skipping None values."""
    query = httpx.QueryParams({k: _format_param(v) for k, v in params.items() if v is not None})
    if not query:
        return path
    return f"{path}?{query}"


def _format_param(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class _EndpointPageSource:
    def __init__(
        self,
        client: KrakenClient,
        path: str,
        page_type: type,
        items_field: str,
        params: Mapping[str, Any] | None = None,
        limit: int | None = PAGE_LIMIT,
    ):
        self.client = client
        self.path = path
        self.page_type = page_type
        self.items_field = items_field
        # filters are fixed for the iterator's lifetime
        self.params = dict(params or {})
        self.limit = limit

    def _get(self, params: Mapping[str, Any]) -> Any:
        query = dict(self.params)
        if self.limit is not None:
            query["limit"] = self.limit
        query.update(params)
        return self.client.fetch(build_path(self.path, query), self.page_type)

    def _items(self, payload: Any) -> list:
        return list(getattr(payload, self.items_field))


class OffsetPageSource(_EndpointPageSource, Generic[T]):
    """Page source for ``offset``/``limit`` endpoints.

    Continuation is inferred from the previous page being non-empty, so
    ``has_more`` is always True; the iterator stops on the first empty page.
    """

    def __init__(self, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.offset = 0

    @property
    def has_more(self) -> bool:
        return True

    def fetch_next_page(self) -> Page[T]:
        payload = self._get({"offset": self.offset})
        items = self._items(payload)
        self.offset += len(items)
        return Page(items=items)


class CursorPageSource(_EndpointPageSource, Generic[T]):
    """Page source for endpoints that return a ``_cursor`` token.

    The first request carries no cursor. After each page, the returned
    cursor is stored; an absent or empty cursor means that page was the last
    one, and ``has_more`` turns False without another request being made.

    The page type must expose the token as a ``cursor`` attribute.
    """

    def __init__(self, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.cursor: str | None = None
        self._started = False

    @property
    def has_more(self) -> bool:
        return not self._started or bool(self.cursor)

    def fetch_next_page(self) -> Page[T]:
        params = {"cursor": self.cursor} if self.cursor else {}
        payload = self._get(params)
        self._started = True
        self.cursor = getattr(payload, "cursor", None)
        return Page(items=self._items(payload), cursor=self.cursor)


class PaginatedIterator(Generic[T]):
    """Single-item-at-a-time iterator over a page source.

    Not safe to share between threads; create one iterator per consumer.
    Iterators hold a reference to the client but do not own it.

    Attributes:
        error: The KrakenError that ended the sequence, or None if it ended
            because the server ran out of data.
        pages_fetched: Number of pages requested so far.
    """

    def __init__(self, source: PageSource[T]):
        self.source = source
        self.error: KrakenError | None = None
        self.pages_fetched = 0
        self._buffer: deque[T] = deque()
        self._exhausted = False

    def __iter__(self) -> "PaginatedIterator[T]":
        return self

    def __next__(self) -> T:
        if not self._buffer:
            self._fill()
        return self._buffer.popleft()

    def _fill(self) -> None:
        if self._exhausted or not self.source.has_more:
            self._exhausted = True
            raise StopIteration

        try:
            page = self.source.fetch_next_page()
        except KrakenError as e:
            logger.error(f"{type(self.source).__name__} failed to fetch page: {e}")
            self.error = e
            self._exhausted = True
            raise StopIteration from None
        finally:
            self.pages_fetched += 1

        if not page.items:
            self._exhausted = True
            raise StopIteration

        self._buffer.extend(page.items)

    @property
    def exhausted(self) -> bool:
        return self._exhausted and not self._buffer


def offset_iterator(
    client: KrakenClient,
    path: str,
    page_type: type,
    items_field: str,
    params: Mapping[str, Any] | None = None,
    limit: int | None = PAGE_LIMIT,
) -> PaginatedIterator:
    return PaginatedIterator(OffsetPageSource(client, path, page_type, items_field, params, limit))


def cursor_iterator(
    client: KrakenClient,
    path: str,
    page_type: type,
    items_field: str,
    params: Mapping[str, Any] | None = None,
    limit: int | None = PAGE_LIMIT,
) -> PaginatedIterator:
    return PaginatedIterator(CursorPageSource(client, path, page_type, items_field, params, limit))
