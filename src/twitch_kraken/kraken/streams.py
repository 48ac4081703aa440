"""Stream endpoints."""

from collections.abc import Iterable

from twitch_kraken.client import KrakenClient
from twitch_kraken.kraken.models import (
    FeaturedPage,
    FeaturedStream,
    FollowedStreamsPage,
    Stream,
    StreamByUser,
    StreamsPage,
    StreamSummary,
)
from twitch_kraken.pagination import PaginatedIterator, build_path, cursor_iterator, offset_iterator


def get(c: KrakenClient, chan_id: str) -> StreamByUser:
    """Current stream of a channel; ``stream`` is None while offline."""
    return c.fetch(f"/streams/{chan_id}", StreamByUser)


def live(
    c: KrakenClient,
    channel_ids: Iterable[str] | None = None,
    game: str | None = None,
    language: str | None = None,
) -> PaginatedIterator[Stream]:
    params = {
        "channel": ",".join(channel_ids) if channel_ids is not None else None,
        "game": game,
        "language": language,
    }
    return offset_iterator(c, "/streams", StreamsPage, "streams", params)


def summary(c: KrakenClient, game: str | None = None) -> StreamSummary:
    return c.fetch(build_path("/streams/summary", {"game": game}), StreamSummary)


def featured(c: KrakenClient) -> PaginatedIterator[FeaturedStream]:
    return offset_iterator(c, "/streams/featured", FeaturedPage, "featured")


def followed(c: KrakenClient) -> PaginatedIterator[Stream]:
    """Live streams the authenticated user follows (requires ``user_read``)."""
    return cursor_iterator(c, "/streams/followed", FollowedStreamsPage, "streams")
