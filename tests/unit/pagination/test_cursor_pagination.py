"""Tests for cursor-paginated iteration."""

import pytest
from pydantic import BaseModel, Field

from twitch_kraken.pagination import CursorPageSource, PaginatedIterator, cursor_iterator


class NamesPage(BaseModel):
    cursor: str | None = Field(default=None, alias="_cursor")
    names: list[str]


def names(client, **kwargs):
    return cursor_iterator(client, "/names", NamesPage, "names", **kwargs)


@pytest.mark.unit
def test_first_request_has_no_cursor(make_client):
    client, server = make_client({"_cursor": "", "names": ["a"]})

    assert list(names(client)) == ["a"]
    assert "cursor" not in server.params(0)
    assert server.params(0)["limit"] == "100"


@pytest.mark.unit
def test_cursor_is_sent_back_on_next_request(make_client):
    client, server = make_client(
        {"_cursor": "tok-1", "names": ["a"]},
        {"_cursor": "tok-2", "names": ["b"]},
        {"_cursor": "", "names": ["c"]},
    )

    assert list(names(client)) == ["a", "b", "c"]
    assert server.params(1)["cursor"] == "tok-1"
    assert server.params(2)["cursor"] == "tok-2"


@pytest.mark.unit
def test_empty_cursor_ends_without_another_request(make_client):
    """A page with an empty cursor is the last page."""
    client, server = make_client(
        {"_cursor": "c1", "names": ["a", "b"]},
        {"_cursor": "", "names": ["c"]},
    )
    it = names(client)

    assert list(it) == ["a", "b", "c"]
    assert server.calls == 2
    assert it.error is None
    assert it.exhausted


@pytest.mark.unit
def test_absent_cursor_ends_without_another_request(make_client):
    client, server = make_client({"names": ["a"]})

    assert list(names(client)) == ["a"]
    assert server.calls == 1


@pytest.mark.unit
def test_empty_page_ends_even_with_cursor(make_client):
    client, server = make_client({"_cursor": "more", "names": []})
    it = names(client)

    assert list(it) == []
    assert server.calls == 1
    assert it.error is None


@pytest.mark.unit
def test_exhausted_iterator_makes_no_further_requests(make_client):
    client, server = make_client({"_cursor": "", "names": ["a"]})
    it = names(client)

    list(it)
    with pytest.raises(StopIteration):
        next(it)
    with pytest.raises(StopIteration):
        next(it)

    assert server.calls == 1


@pytest.mark.unit
def test_fixed_params_repeat_on_every_page(make_client):
    client, server = make_client(
        {"_cursor": "x", "names": ["a"]},
        {"_cursor": "", "names": ["b"]},
    )

    list(names(client, params={"direction": "asc"}))

    assert server.params(0)["direction"] == "asc"
    assert server.params(1)["direction"] == "asc"
    assert server.params(1)["cursor"] == "x"


@pytest.mark.unit
def test_error_on_later_page_keeps_earlier_items(make_client, envelope):
    client, server = make_client(
        {"_cursor": "x", "names": ["a"]},
        envelope(500, "Internal Server Error", "boom"),
    )
    it = names(client)

    assert list(it) == ["a"]
    assert it.error is not None
    assert it.error.status == 500
    assert server.calls == 2


@pytest.mark.unit
def test_source_tracks_cursor_state(make_client):
    client, _ = make_client({"_cursor": "next", "names": ["a"]})
    source = CursorPageSource(client, "/names", NamesPage, "names")

    assert source.has_more
    page = source.fetch_next_page()

    assert page.items == ["a"]
    assert page.cursor == "next"
    assert source.has_more


@pytest.mark.unit
def test_iterator_accepts_source_directly(make_client):
    client, _ = make_client({"names": ["a", "b"]})

    it = PaginatedIterator(CursorPageSource(client, "/names", NamesPage, "names", limit=None))

    assert list(it) == ["a", "b"]


@pytest.mark.unit
def test_independent_iterations_agree(make_client):
    """Two fresh iterations over the same pages see the same items and requests."""
    pages = ({"_cursor": "tok-1", "names": ["a"]}, {"_cursor": "", "names": ["b"]})
    first_client, first_server = make_client(*pages)
    second_client, second_server = make_client(*pages)

    assert list(names(first_client)) == list(names(second_client)) == ["a", "b"]
    assert first_server.calls == second_server.calls == 2
    for i in range(2):
        assert dict(first_server.params(i)) == dict(second_server.params(i))
    assert "cursor" not in first_server.params(0)
    assert "cursor" not in second_server.params(0)
