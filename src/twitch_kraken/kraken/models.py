"""Payload models for Kraken v5 resources.

Models keep unknown fields (``extra="allow"``) so new Twitch fields never
break decoding. Kraken prefixes some keys with an underscore (``_id``,
``_total``, ``_cursor``); they are exposed without it.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class KrakenModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class ListPage(KrakenModel):
    """Base for list responses; ``total`` is only sent by some endpoints."""

    total: int | None = Field(default=None, alias="_total")


class CursorPage(ListPage):
    cursor: str | None = Field(default=None, alias="_cursor")


# Users


class UserNotifications(KrakenModel):
    email: bool
    push: bool


class User(KrakenModel):
    id: int = Field(alias="_id")
    name: str
    display_name: str
    type: str
    bio: str | None = None
    logo: str | None = None
    created_at: datetime
    updated_at: datetime
    email: str | None = None
    email_verified: bool | None = None
    notifications: UserNotifications | None = None


# Channels


class Channel(KrakenModel):
    id: int = Field(alias="_id")
    name: str
    display_name: str
    broadcaster_language: str | None = None
    language: str
    game: str | None = None
    status: str | None = None
    logo: str | None = None
    url: str
    followers: int
    views: int
    partner: bool
    mature: bool | None = None
    email: str | None = None
    stream_key: str | None = None
    profile_banner: str | None = None
    profile_banner_background_color: str | None = None
    video_banner: str | None = None
    created_at: datetime
    updated_at: datetime


class ChannelEditors(KrakenModel):
    users: list[User]


class ChannelFollow(KrakenModel):
    created_at: datetime
    notifications: bool
    user: User


class ChannelFollowsPage(CursorPage):
    follows: list[ChannelFollow]


class ChannelSubscription(KrakenModel):
    id: str = Field(alias="_id")
    created_at: datetime
    user: User


class ChannelSubscriptionsPage(ListPage):
    subscriptions: list[ChannelSubscription]


class ChannelTeam(KrakenModel):
    id: int = Field(alias="_id")
    name: str
    display_name: str
    info: str | None = None
    logo: str | None = None
    banner: str | None = None
    background: str | None = None
    created_at: datetime
    updated_at: datetime


class ChannelTeams(KrakenModel):
    teams: list[ChannelTeam]


class ChannelUpdate(KrakenModel):
    """Fields accepted by ``PUT /channels/<id>``; unset fields are left alone."""

    status: str | None = None
    game: str | None = None
    delay: int | None = None
    channel_feed_enabled: bool | None = None


class CommercialResponse(KrakenModel):
    duration: int
    message: str
    retryafter: int


# Videos


class Video(KrakenModel):
    id: str = Field(alias="_id")
    title: str
    description: str | None = None
    description_html: str | None = None
    broadcast_id: int
    broadcast_type: str
    channel: dict[str, Any]
    created_at: datetime
    published_at: datetime | None = None
    game: str | None = None
    language: str | None = None
    length: int
    status: str
    tag_list: str | None = None
    url: str
    viewable: str | None = None
    viewable_at: datetime | None = None
    views: int
    fps: dict[str, float] = Field(default_factory=dict)
    resolutions: dict[str, str] = Field(default_factory=dict)
    preview: dict[str, str] = Field(default_factory=dict)
    thumbnails: dict[str, list[dict[str, Any]]] = Field(default_factory=dict)
    muted_segments: list[dict[str, int]] | None = None


class VideosPage(ListPage):
    videos: list[Video]


class TopVideosPage(ListPage):
    vods: list[Video]


# Games


class Game(KrakenModel):
    id: int = Field(alias="_id")
    name: str
    box: dict[str, str] = Field(default_factory=dict)
    logo: dict[str, str] = Field(default_factory=dict)
    giantbomb_id: int | None = None
    popularity: int | None = None


class TopGame(KrakenModel):
    channels: int
    viewers: int
    game: Game


class TopGamesPage(ListPage):
    top: list[TopGame]


# Streams


class Stream(KrakenModel):
    id: int = Field(alias="_id")
    game: str | None = None
    viewers: int
    video_height: int | None = None
    average_fps: float | None = None
    delay: int | None = None
    created_at: datetime
    is_playlist: bool | None = None
    stream_type: str | None = None
    preview: dict[str, str] = Field(default_factory=dict)
    channel: Channel


class StreamByUser(KrakenModel):
    """Offline channels come back as ``{"stream": null}``; the key is always sent."""

    stream: Stream | None


class StreamsPage(ListPage):
    streams: list[Stream]


class FollowedStreamsPage(CursorPage):
    streams: list[Stream]


class StreamSummary(KrakenModel):
    channels: int
    viewers: int


class FeaturedStream(KrakenModel):
    title: str
    text: str | None = None
    image: str | None = None
    priority: int
    scheduled: bool
    sponsored: bool
    stream: Stream


class FeaturedPage(KrakenModel):
    featured: list[FeaturedStream]


# Teams


class Team(KrakenModel):
    id: int = Field(alias="_id")
    name: str
    display_name: str
    info: str | None = None
    logo: str | None = None
    banner: str | None = None
    background: str | None = None
    created_at: datetime
    updated_at: datetime
    users: list[User] | None = None


class TeamsPage(KrakenModel):
    teams: list[Team]


# User follows / blocks


class UserSubFollow(KrakenModel):
    channel: Channel
    created_at: datetime
    notifications: bool | None = None


class UserFollowsPage(ListPage):
    follows: list[UserSubFollow]


class UserBlock(KrakenModel):
    id: int | None = Field(default=None, alias="_id")
    updated_at: datetime | None = None
    user: User


class UserBlocksPage(ListPage):
    blocks: list[UserBlock]


# Chat


class Badge(KrakenModel):
    alpha: str | None = None
    image: str
    svg: str | None = None


BadgeSet = dict[str, Badge | None]


class EmoteSet(KrakenModel):
    id: int
    code: str


class EmotesBySet(KrakenModel):
    emoticon_sets: dict[str, list[EmoteSet]]


class ChatEmoteImage(KrakenModel):
    width: int | None = None
    height: int | None = None
    url: str
    emoticon_set: int | None = None


class ChatEmote(KrakenModel):
    regex: str
    images: list[ChatEmoteImage]


class ChatEmotes(KrakenModel):
    emoticons: list[ChatEmote]


# Communities


class Community(KrakenModel):
    id: str = Field(alias="_id")
    name: str
    owner_id: str
    summary: str = ""
    description: str = ""
    description_html: str = ""
    rules: str = ""
    rules_html: str = ""
    language: str = ""
    avatar_image_url: str = ""
    cover_image_url: str = ""


class CommunityUpdate(KrakenModel):
    """Fields accepted by ``PUT /communities/<id>``."""

    summary: str | None = None
    description: str | None = None
    rules: str | None = None
    email: str | None = None


class CommunityModerators(KrakenModel):
    moderators: list[User]


class TopCommunity(KrakenModel):
    id: str = Field(alias="_id")
    name: str
    avatar_image_url: str = ""
    channels: int
    viewers: int


class TopCommunitiesPage(CursorPage):
    communities: list[TopCommunity]


class CommunityBan(KrakenModel):
    user_id: str
    name: str
    display_name: str
    bio: str | None = None
    avatar_image_url: str | None = None
    start_timestamp: int


class CommunityBansPage(CursorPage):
    banned_users: list[CommunityBan]


class CommunityTimeout(CommunityBan):
    end_timestamp: int


class CommunityTimeoutsPage(CursorPage):
    timed_out_users: list[CommunityTimeout]


# Channel feed


class FeedPostPermissions(KrakenModel):
    can_delete: bool
    can_moderate: bool | None = None
    can_reply: bool | None = None


class FeedEmote(KrakenModel):
    start: int
    end: int
    id: int
    set: int


class FeedPostComment(KrakenModel):
    id: str
    body: str
    created_at: datetime
    deleted: bool = False
    emotes: list[FeedEmote] = Field(default_factory=list)
    permissions: FeedPostPermissions | None = None
    reactions: dict[str, Any] = Field(default_factory=dict)
    user: User | None = None


class FeedCommentsPage(CursorPage):
    comments: list[FeedPostComment]


class FeedPost(KrakenModel):
    id: str
    body: str
    created_at: datetime
    deleted: bool | None = None
    comments: FeedCommentsPage | None = None
    embeds: list[Any] | None = None
    emotes: list[Any] | None = None
    permissions: FeedPostPermissions | None = None
    reactions: dict[str, Any] | None = None
    user: User | None = None


class FeedPostsPage(CursorPage):
    posts: list[FeedPost]


class NewFeedPostResponse(KrakenModel):
    post: FeedPost
    tweet: str | None = None


class NewReactionResponse(KrakenModel):
    id: str
    emote_id: str
    created_at: datetime
    user: User | None = None


class DeletedReactionResponse(KrakenModel):
    deleted: bool


# Ingests


class IngestServer(KrakenModel):
    id: int = Field(alias="_id")
    name: str
    availability: float
    default: bool
    url_template: str


class IngestServerList(KrakenModel):
    ingests: list[IngestServer]


# Search


class SearchChannelsPage(KrakenModel):
    channels: list[Channel]


class SearchGamesPage(KrakenModel):
    games: list[Game]

    @field_validator("games", mode="before")
    @classmethod
    def _null_means_no_match(cls, value: Any) -> Any:
        # Twitch sends "games": null when nothing matches
        return [] if value is None else value
