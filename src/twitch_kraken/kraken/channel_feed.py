"""Channel feed posts, comments and reactions."""

from twitch_kraken.client import KrakenClient
from twitch_kraken.kraken.models import (
    DeletedReactionResponse,
    FeedCommentsPage,
    FeedPost,
    FeedPostComment,
    FeedPostsPage,
    NewFeedPostResponse,
    NewReactionResponse,
)
from twitch_kraken.pagination import PaginatedIterator, build_path, cursor_iterator

# Comments only accept this reaction.
ENDORSE = "endorse"


def get_post(c: KrakenClient, chan_id: str, post_id: str) -> FeedPost:
    return c.fetch(f"/feed/{chan_id}/posts/{post_id}", FeedPost)


def get_posts(c: KrakenClient, chan_id: str) -> PaginatedIterator[FeedPost]:
    return cursor_iterator(c, f"/feed/{chan_id}/posts", FeedPostsPage, "posts")


def new_post(c: KrakenClient, chan_id: str, content: str) -> NewFeedPostResponse:
    return c.create(f"/feed/{chan_id}/posts", {"content": content}, NewFeedPostResponse)


def delete_post(c: KrakenClient, chan_id: str, post_id: str) -> FeedPost:
    return c.remove(f"/feed/{chan_id}/posts/{post_id}", FeedPost)


def new_post_reaction(c: KrakenClient, chan_id: str, post_id: str, emote_id: str) -> NewReactionResponse:
    path = build_path(f"/feed/{chan_id}/posts/{post_id}/reactions", {"emote_id": emote_id})
    return c.create(path, None, NewReactionResponse)


def delete_post_reaction(c: KrakenClient, chan_id: str, post_id: str, emote_id: str) -> DeletedReactionResponse:
    path = build_path(f"/feed/{chan_id}/posts/{post_id}/reactions", {"emote_id": emote_id})
    return c.remove(path, DeletedReactionResponse)


def get_comments(c: KrakenClient, chan_id: str, post_id: str) -> PaginatedIterator[FeedPostComment]:
    return cursor_iterator(c, f"/feed/{chan_id}/posts/{post_id}/comments", FeedCommentsPage, "comments")


def new_comment(c: KrakenClient, chan_id: str, post_id: str, content: str) -> FeedPostComment:
    return c.create(f"/feed/{chan_id}/posts/{post_id}/comments", {"content": content}, FeedPostComment)


def delete_comment(c: KrakenClient, chan_id: str, post_id: str, comment_id: str) -> FeedPostComment:
    return c.remove(f"/feed/{chan_id}/posts/{post_id}/comments/{comment_id}", FeedPostComment)


def new_comment_reaction(c: KrakenClient, chan_id: str, post_id: str, comment_id: str) -> NewReactionResponse:
    path = build_path(
        f"/feed/{chan_id}/posts/{post_id}/comments/{comment_id}/reactions",
        {"emote_id": ENDORSE},
    )
    return c.create(path, None, NewReactionResponse)


def delete_comment_reaction(
    c: KrakenClient, chan_id: str, post_id: str, comment_id: str
) -> DeletedReactionResponse:
    path = build_path(
        f"/feed/{chan_id}/posts/{post_id}/comments/{comment_id}/reactions",
        {"emote_id": ENDORSE},
    )
    return c.remove(path, DeletedReactionResponse)
