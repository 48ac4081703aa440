"""Kraken v5 resource endpoints.

Each module groups the endpoints of one resource. Every function takes the
client as its first argument::

    from twitch_kraken.kraken import channels, streams

    channel = channels.get_by_id(client, "12826")
    for stream in streams.live(client, game="Chess"):
        ...
"""

from twitch_kraken.kraken import (
    channel_feed,
    channels,
    chat,
    communities,
    games,
    ingests,
    search,
    streams,
    teams,
    users,
    videos,
)

__all__ = [
    "channel_feed",
    "channels",
    "chat",
    "communities",
    "games",
    "ingests",
    "search",
    "streams",
    "teams",
    "users",
    "videos",
]
