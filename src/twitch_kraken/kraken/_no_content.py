"""Helpers for endpoints that answer 204 No Content on success."""

from collections.abc import Callable
from typing import Any

from twitch_kraken.errors.exceptions import EmptyResponseError

# Payload type for bodies that must be empty or JSON null; anything else,
# including an error envelope, fails validation.
NoContent = type(None)


def expect_no_content(send: Callable[..., Any], path: str, *args: Any) -> None:
    """Send a request whose success answer is an empty body (204).

    ``send`` is one of the client verbs. An empty body is success; a JSON
    ``null`` is tolerated; an error envelope still raises ``ServiceError``.
    """
    try:
        send(path, *args, NoContent)
    except EmptyResponseError:
        return None
