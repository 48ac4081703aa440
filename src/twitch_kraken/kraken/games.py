"""Game endpoints."""

from twitch_kraken.client import KrakenClient
from twitch_kraken.kraken.models import TopGame, TopGamesPage
from twitch_kraken.pagination import PaginatedIterator, offset_iterator


def top(c: KrakenClient) -> PaginatedIterator[TopGame]:
    """Games sorted by current viewers, most popular first."""
    return offset_iterator(c, "/games/top", TopGamesPage, "top")
