"""Team endpoints."""

from twitch_kraken.client import KrakenClient
from twitch_kraken.kraken.models import Team, TeamsPage
from twitch_kraken.pagination import PaginatedIterator, offset_iterator


def get_all(c: KrakenClient) -> PaginatedIterator[Team]:
    return offset_iterator(c, "/teams", TeamsPage, "teams")


def get(c: KrakenClient, team_name: str) -> Team:
    return c.fetch(f"/teams/{team_name}", Team)
