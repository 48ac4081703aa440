"""Video endpoints."""

from enum import Enum

from twitch_kraken.client import KrakenClient
from twitch_kraken.kraken.models import TopVideosPage, Video, VideosPage
from twitch_kraken.pagination import PaginatedIterator, offset_iterator


class TopVideoPeriod(str, Enum):
    week = "week"
    month = "month"
    all = "all"

    def __str__(self) -> str:
        return self.value


def get(c: KrakenClient, video_id: str) -> Video:
    return c.fetch(f"/videos/{video_id}", Video)


def top(
    c: KrakenClient,
    game: str | None = None,
    period: TopVideoPeriod | None = None,
) -> PaginatedIterator[Video]:
    """Most viewed videos, optionally for one game and time period."""
    params = {"game": game, "period": period}
    return offset_iterator(c, "/videos/top", TopVideosPage, "vods", params)


def followed(c: KrakenClient) -> PaginatedIterator[Video]:
    """Videos from channels the authenticated user follows (requires ``user_read``)."""
    return offset_iterator(c, "/videos/followed", VideosPage, "videos")
