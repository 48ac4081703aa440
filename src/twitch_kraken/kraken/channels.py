"""Channel endpoints."""

from typing import Any

from twitch_kraken.client import KrakenClient
from twitch_kraken.kraken.models import (
    Channel,
    ChannelEditors,
    ChannelFollow,
    ChannelFollowsPage,
    ChannelSubscription,
    ChannelSubscriptionsPage,
    ChannelTeams,
    ChannelUpdate,
    CommercialResponse,
    Community,
    Video,
    VideosPage,
)
from twitch_kraken.pagination import PaginatedIterator, cursor_iterator, offset_iterator


def get(c: KrakenClient) -> Channel:
    """Channel of the authenticated user (requires ``channel_read``)."""
    return c.fetch("/channel", Channel)


def get_by_id(c: KrakenClient, chan_id: str) -> Channel:
    return c.fetch(f"/channels/{chan_id}", Channel)


def editors(c: KrakenClient, chan_id: str) -> ChannelEditors:
    return c.fetch(f"/channels/{chan_id}/editors", ChannelEditors)


def followers(c: KrakenClient, chan_id: str) -> PaginatedIterator[ChannelFollow]:
    return cursor_iterator(c, f"/channels/{chan_id}/follows", ChannelFollowsPage, "follows")


def teams(c: KrakenClient, chan_id: str) -> ChannelTeams:
    return c.fetch(f"/channels/{chan_id}/teams", ChannelTeams)


def subscribers(c: KrakenClient, chan_id: str) -> PaginatedIterator[ChannelSubscription]:
    """Subscribers of a partnered channel (requires ``channel_subscriptions``).

    Channels without a subscription program answer with a 422 service
    error, which ends the iterator and is kept on its ``error``.
    """
    return offset_iterator(c, f"/channels/{chan_id}/subscriptions", ChannelSubscriptionsPage, "subscriptions")


def subscription(c: KrakenClient, chan_id: str, user_id: str) -> ChannelSubscription:
    return c.fetch(f"/channels/{chan_id}/subscriptions/{user_id}", ChannelSubscription)


def videos(c: KrakenClient, chan_id: str) -> PaginatedIterator[Video]:
    return offset_iterator(c, f"/channels/{chan_id}/videos", VideosPage, "videos")


def community(c: KrakenClient, chan_id: str) -> Community:
    return c.fetch(f"/channels/{chan_id}/community", Community)


def set_community(c: KrakenClient, chan_id: str, community_id: str) -> Channel:
    return c.replace(f"/channels/{chan_id}/community/{community_id}", None, Channel)


def update(c: KrakenClient, chan_id: str, settings: ChannelUpdate) -> Channel:
    """Update title, game, delay or feed setting; unset fields are not sent."""
    channel: dict[str, Any] = settings.model_dump(exclude_none=True)
    return c.replace(f"/channels/{chan_id}", {"channel": channel}, Channel)


def commercial(c: KrakenClient, chan_id: str, duration: int) -> CommercialResponse:
    return c.create(f"/channels/{chan_id}/commercial", {"duration": duration}, CommercialResponse)


def reset_stream_key(c: KrakenClient, chan_id: str) -> Channel:
    return c.remove(f"/channels/{chan_id}/stream_key", Channel)
