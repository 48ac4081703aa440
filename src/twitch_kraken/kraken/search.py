"""Search endpoints."""

from enum import Enum

from twitch_kraken.client import KrakenClient
from twitch_kraken.kraken.models import Channel, Game, SearchChannelsPage, SearchGamesPage, Stream, StreamsPage
from twitch_kraken.pagination import PaginatedIterator, offset_iterator


class StreamProtocol(Enum):
    HLS = "hls"
    RTMP = "rtmp"


def channels(c: KrakenClient, query: str) -> PaginatedIterator[Channel]:
    return offset_iterator(c, "/search/channels", SearchChannelsPage, "channels", {"query": query})


def games(c: KrakenClient, query: str, live_only: bool = False) -> PaginatedIterator[Game]:
    return offset_iterator(c, "/search/games", SearchGamesPage, "games", {"query": query, "live": live_only})


def streams(
    c: KrakenClient,
    query: str,
    protocol: StreamProtocol | None = None,
) -> PaginatedIterator[Stream]:
    """Live streams matching ``query``, optionally only HLS or only RTMP ones."""
    hls = None if protocol is None else protocol is StreamProtocol.HLS
    return offset_iterator(c, "/search/streams", StreamsPage, "streams", {"query": query, "hls": hls})
