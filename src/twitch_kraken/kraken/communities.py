"""Community endpoints.

Moderation and image endpoints answer with 204 No Content and return None.
"""

from typing import Any

from twitch_kraken.client import KrakenClient
from twitch_kraken.kraken._no_content import expect_no_content
from twitch_kraken.kraken.models import (
    Community,
    CommunityBan,
    CommunityBansPage,
    CommunityModerators,
    CommunityTimeout,
    CommunityTimeoutsPage,
    CommunityUpdate,
    TopCommunitiesPage,
    TopCommunity,
)
from twitch_kraken.pagination import PaginatedIterator, build_path, cursor_iterator


def get_by_name(c: KrakenClient, name: str) -> Community:
    return c.fetch(build_path("/communities", {"name": name}), Community)


def get_by_id(c: KrakenClient, community_id: str) -> Community:
    return c.fetch(f"/communities/{community_id}", Community)


def update(c: KrakenClient, community_id: str, settings: CommunityUpdate) -> None:
    expect_no_content(c.replace, f"/communities/{community_id}", settings.model_dump(exclude_none=True))


def top(c: KrakenClient) -> PaginatedIterator[TopCommunity]:
    return cursor_iterator(c, "/communities/top", TopCommunitiesPage, "communities")


def bans(c: KrakenClient, community_id: str) -> PaginatedIterator[CommunityBan]:
    return cursor_iterator(c, f"/communities/{community_id}/bans", CommunityBansPage, "banned_users")


def ban(c: KrakenClient, community_id: str, user_id: str) -> None:
    expect_no_content(c.replace, f"/communities/{community_id}/bans/{user_id}", None)


def unban(c: KrakenClient, community_id: str, user_id: str) -> None:
    expect_no_content(c.remove, f"/communities/{community_id}/bans/{user_id}")


def set_avatar_image(c: KrakenClient, community_id: str, avatar_image: str) -> None:
    """Upload an avatar; ``avatar_image`` is the base64-encoded PNG."""
    expect_no_content(c.create, f"/communities/{community_id}/images/avatar", {"avatar_image": avatar_image})


def delete_avatar_image(c: KrakenClient, community_id: str) -> None:
    expect_no_content(c.remove, f"/communities/{community_id}/images/avatar")


def set_cover_image(c: KrakenClient, community_id: str, cover_image: str) -> None:
    """Upload a cover image; ``cover_image`` is the base64-encoded PNG."""
    expect_no_content(c.create, f"/communities/{community_id}/images/cover", {"cover_image": cover_image})


def delete_cover_image(c: KrakenClient, community_id: str) -> None:
    expect_no_content(c.remove, f"/communities/{community_id}/images/cover")


def moderators(c: KrakenClient, community_id: str) -> CommunityModerators:
    return c.fetch(f"/communities/{community_id}/moderators", CommunityModerators)


def add_moderator(c: KrakenClient, community_id: str, user_id: str) -> None:
    expect_no_content(c.replace, f"/communities/{community_id}/moderators/{user_id}", None)


def delete_moderator(c: KrakenClient, community_id: str, user_id: str) -> None:
    expect_no_content(c.remove, f"/communities/{community_id}/moderators/{user_id}")


def permissions(c: KrakenClient, community_id: str) -> dict[str, bool]:
    return c.fetch(f"/communities/{community_id}/permissions", dict[str, bool])


def report_channel(c: KrakenClient, community_id: str, channel_id: str) -> None:
    expect_no_content(c.create, f"/communities/{community_id}/report_channel", {"channel_id": channel_id})


def timeouts(c: KrakenClient, community_id: str) -> PaginatedIterator[CommunityTimeout]:
    return cursor_iterator(c, f"/communities/{community_id}/timeouts", CommunityTimeoutsPage, "timed_out_users")


def timeout(
    c: KrakenClient,
    community_id: str,
    user_id: str,
    duration: int,
    reason: str | None = None,
) -> None:
    """Time a user out of the community for ``duration`` hours."""
    data: dict[str, Any] = {"duration": duration}
    if reason is not None:
        data["reason"] = reason
    expect_no_content(c.replace, f"/communities/{community_id}/timeouts/{user_id}", data)


def delete_timeout(c: KrakenClient, community_id: str, user_id: str) -> None:
    expect_no_content(c.remove, f"/communities/{community_id}/timeouts/{user_id}")
