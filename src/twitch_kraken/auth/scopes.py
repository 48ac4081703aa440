"""OAuth scopes and authorization URLs for Kraken.

Example:
    ```python
    from twitch_kraken.auth import Scope, auth_code_flow

    url = auth_code_flow(
        client,
        "http://localhost:8080/callback",
        [Scope.channel_read, Scope.user_read],
        state="c3ab8aa609ea11e793ae92361f002671",
    )
    ```
"""

from collections.abc import Iterable
from enum import Enum
from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from twitch_kraken.client import KrakenClient

AUTHORIZE_URL = "https://api.twitch.tv/kraken/oauth2/authorize"


class Scope(str, Enum):
    channel_check_subscription = "channel_check_subscription"
    channel_commercial = "channel_commercial"
    channel_editor = "channel_editor"
    channel_feed_edit = "channel_feed_edit"
    channel_feed_read = "channel_feed_read"
    channel_read = "channel_read"
    channel_stream = "channel_stream"
    channel_subscriptions = "channel_subscriptions"
    chat_login = "chat_login"
    user_blocks_edit = "user_blocks_edit"
    user_blocks_read = "user_blocks_read"
    user_follows_edit = "user_follows_edit"
    user_read = "user_read"
    user_subscriptions = "user_subscriptions"
    viewing_activity_read = "viewing_activity_read"

    def __str__(self) -> str:
        return self.value


def format_scopes(scopes: Iterable[Scope]) -> str:
    """Space-separated scope list, as the authorize endpoint expects."""
    return " ".join(str(scope) for scope in scopes)


def _authorize_url(
    client: "KrakenClient",
    response_type: str,
    redirect_url: str,
    scopes: Iterable[Scope],
    state: str,
) -> str:
    params = {
        "response_type": response_type,
        "client_id": client.credentials.client_id,
        "redirect_uri": redirect_url,
        "scope": format_scopes(scopes),
        "state": state,
    }
    return str(httpx.URL(AUTHORIZE_URL, params=params))


def auth_code_flow(
    client: "KrakenClient",
    redirect_url: str,
    scopes: Iterable[Scope],
    state: str,
) -> str:
    """Authorization URL for the OAuth authorization code flow."""
    return _authorize_url(client, "code", redirect_url, scopes, state)


def implicit_grant_flow(
    client: "KrakenClient",
    redirect_url: str,
    scopes: Iterable[Scope],
    state: str,
) -> str:
    """Authorization URL for the OAuth implicit grant flow."""
    return _authorize_url(client, "token", redirect_url, scopes, state)
