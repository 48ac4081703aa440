"""Chat badges and emoticons."""

from collections.abc import Iterable

from twitch_kraken.client import KrakenClient
from twitch_kraken.kraken.models import BadgeSet, ChatEmotes, EmotesBySet
from twitch_kraken.pagination import build_path


def get_badges(c: KrakenClient, chan_id: str) -> BadgeSet:
    return c.fetch(f"/chat/{chan_id}/badges", BadgeSet)


def get_emote_sets(c: KrakenClient, sets: Iterable[str]) -> EmotesBySet:
    return c.fetch(build_path("/chat/emoticon_images", {"emotesets": ",".join(sets)}), EmotesBySet)


def get_emotes(c: KrakenClient) -> ChatEmotes:
    """Every emoticon on Twitch. The response is several megabytes."""
    return c.fetch("/chat/emoticons", ChatEmotes)
