"""twitch-kraken - typed client for the Twitch Kraken v5 API.

- ``KrakenClient``: HTTP round trips with Kraken headers and typed decoding
- Lazy iterators over offset- and cursor-paginated list endpoints
- Credentials from the environment, .env files or a credentials file
- A typed error taxonomy for transport, decode and service failures

Example:
    ```python
    import itertools

    import twitch_kraken
    from twitch_kraken.kraken import games

    client = twitch_kraken.new("<client id>")
    # Print the name of the top 20 games
    for entry in itertools.islice(games.top(client), 20):
        print(f"{entry.game.name}: {entry.viewers}")
    ```
"""

from twitch_kraken.auth import Credentials
from twitch_kraken.client import KrakenClient
from twitch_kraken.errors import (
    DecodeError,
    EmptyResponseError,
    KrakenError,
    ServiceError,
    TransportError,
)
from twitch_kraken.pagination import PaginatedIterator

__version__ = "0.1.0"


def new(client_id: str, **kwargs) -> KrakenClient:
    """Create a client for ``client_id`` with no OAuth token."""
    return KrakenClient(Credentials(client_id=client_id), **kwargs)


__all__ = [
    "Credentials",
    "DecodeError",
    "EmptyResponseError",
    "KrakenClient",
    "KrakenError",
    "PaginatedIterator",
    "ServiceError",
    "TransportError",
    "__version__",
    "new",
]
