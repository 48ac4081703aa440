"""User endpoints."""

from twitch_kraken.client import KrakenClient
from twitch_kraken.errors.exceptions import NotFoundError
from twitch_kraken.kraken._no_content import expect_no_content
from twitch_kraken.kraken.models import (
    EmotesBySet,
    User,
    UserBlock,
    UserBlocksPage,
    UserFollowsPage,
    UserSubFollow,
)
from twitch_kraken.pagination import PaginatedIterator, offset_iterator


def get(c: KrakenClient) -> User:
    """The authenticated user (requires ``user_read``)."""
    return c.fetch("/user", User)


def get_by_id(c: KrakenClient, user_id: str) -> User:
    return c.fetch(f"/users/{user_id}", User)


def emotes(c: KrakenClient, user_id: str) -> EmotesBySet:
    return c.fetch(f"/users/{user_id}/emotes", EmotesBySet)


def subscription(c: KrakenClient, user_id: str, channel_id: str) -> UserSubFollow:
    return c.fetch(f"/users/{user_id}/subscriptions/{channel_id}", UserSubFollow)


def following(c: KrakenClient, user_id: str) -> PaginatedIterator[UserSubFollow]:
    return offset_iterator(c, f"/users/{user_id}/follows/channels", UserFollowsPage, "follows")


def is_following(c: KrakenClient, user_id: str, channel_id: str) -> UserSubFollow | None:
    """Follow relationship, or None if the user does not follow the channel."""
    try:
        return c.fetch(f"/users/{user_id}/follows/channels/{channel_id}", UserSubFollow)
    except NotFoundError:
        return None


def follow(c: KrakenClient, user_id: str, channel_id: str, notifications: bool = False) -> UserSubFollow:
    return c.replace(
        f"/users/{user_id}/follows/channels/{channel_id}",
        {"notifications": notifications},
        UserSubFollow,
    )


def unfollow(c: KrakenClient, user_id: str, channel_id: str) -> None:
    """Unfollow a channel. Twitch answers with an empty body on success."""
    expect_no_content(c.remove, f"/users/{user_id}/follows/channels/{channel_id}")


def blocking(c: KrakenClient, user_id: str) -> PaginatedIterator[UserBlock]:
    return offset_iterator(c, f"/users/{user_id}/blocks", UserBlocksPage, "blocks")


def block(c: KrakenClient, user_id: str, target_user_id: str) -> UserBlock:
    return c.replace(f"/users/{user_id}/blocks/{target_user_id}", None, UserBlock)


def unblock(c: KrakenClient, user_id: str, target_user_id: str) -> None:
    expect_no_content(c.remove, f"/users/{user_id}/blocks/{target_user_id}")
