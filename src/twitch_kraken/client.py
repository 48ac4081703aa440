"""HTTP client for the Twitch Kraken v5 API."""

import logging
from typing import Any, TypeVar

import httpx
from pydantic_core import to_json

from twitch_kraken.auth.credentials import Credentials
from twitch_kraken.errors.exceptions import TransportError
from twitch_kraken.errors.handler import decode_response
from twitch_kraken.transport.retry import RateLimitAwareRetry

logger = logging.getLogger(__name__)

T = TypeVar("T")

BASE_URL = "https://api.twitch.tv/kraken"
ACCEPT = "application/vnd.twitchtv.v5+json"


class KrakenClient:
    """Performs one HTTP round trip per call and decodes the result.

    The four verbs map to HTTP methods: ``fetch`` (GET), ``create`` (POST),
    ``replace`` (PUT) and ``remove`` (DELETE). Each takes a path relative to
    the API root, which may already carry a query string, and the payload
    type to decode the response into.

    The client owns its ``Credentials``. The OAuth token is read when each
    request is built, so ``set_oauth_token`` affects every later call,
    including pages fetched by iterators created earlier.

    Example:
        ```python
        import itertools

        from twitch_kraken import KrakenClient
        from twitch_kraken.kraken import games

        with KrakenClient.from_env() as client:
            for entry in itertools.islice(games.top(client), 20):
                print(entry.game.name, entry.viewers)
        ```
    """

    def __init__(
        self,
        credentials: Credentials | str,
        *,
        base_url: str = BASE_URL,
        transport: httpx.BaseTransport | None = None,
        timeout: httpx.Timeout | float | None = None,
        max_retries: int = 0,
    ):
        """Initialize the client.

        Args:
            credentials: Credentials, or a bare client ID
            base_url: API root; every path is appended to it
            transport: httpx transport to send requests through. Defaults
                to ``httpx.HTTPTransport()``.
            timeout: Passed through to ``httpx.Client``; httpx's default
                applies when None.
            max_retries: When greater than 0, wrap the transport in
                ``RateLimitAwareRetry``.
        """
        if isinstance(credentials, str):
            credentials = Credentials(client_id=credentials)
        self.credentials = credentials
        self.base_url = base_url.rstrip("/")

        transport = transport or httpx.HTTPTransport()
        if max_retries > 0:
            transport = RateLimitAwareRetry(wrapped_transport=transport, max_retries=max_retries)

        client_kwargs: dict[str, Any] = {"transport": transport}
        if timeout is not None:
            client_kwargs["timeout"] = timeout
        self._http = httpx.Client(**client_kwargs)

    @classmethod
    def from_env(cls, **kwargs: Any) -> "KrakenClient":
        """Create a client from ``TWITCH_CLIENT_ID`` / ``TWITCH_OAUTH_TOKEN``."""
        return cls(Credentials.from_env(), **kwargs)

    def __enter__(self) -> "KrakenClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    def set_oauth_token(self, token: str) -> None:
        self.credentials.token = token

    def build_headers(self, *, with_body: bool = False) -> dict[str, str]:
        """Headers sent with every request.

        Authorization is only present once a token has been set; without it
        Twitch rejects protected endpoints with a service error.
        """
        headers = {
            "Accept": ACCEPT,
            "Client-ID": self.credentials.client_id,
        }
        if self.credentials.has_token:
            headers["Authorization"] = f"OAuth {self.credentials.token}"
        if with_body:
            headers["Content-Type"] = "application/json; charset=utf-8"
        return headers

    def fetch(self, path: str, payload_type: type[T]) -> T:
        """GET ``path`` and decode the response into ``payload_type``."""
        return self._request("GET", path, payload_type)

    def create(self, path: str, data: Any, payload_type: type[T]) -> T:
        """POST ``data`` as JSON to ``path``."""
        return self._request("POST", path, payload_type, data=data, with_body=True)

    def replace(self, path: str, data: Any, payload_type: type[T]) -> T:
        """PUT ``data`` as JSON to ``path``."""
        return self._request("PUT", path, payload_type, data=data, with_body=True)

    def remove(self, path: str, payload_type: type[T]) -> T:
        """DELETE ``path``.

        Several Kraken DELETE endpoints answer with an empty body; callers
        expecting that catch ``EmptyResponseError``.
        """
        return self._request("DELETE", path, payload_type)

    def _request(
        self,
        method: str,
        path: str,
        payload_type: type[T],
        *,
        data: Any = None,
        with_body: bool = False,
    ) -> T:
        url = self.base_url + path
        content = to_json(data, by_alias=True, exclude_none=True) if with_body else None

        logger.debug(f"{method} {url}")
        try:
            response = self._http.request(
                method,
                url,
                headers=self.build_headers(with_body=with_body),
                content=content,
            )
        except httpx.TransportError as e:
            raise TransportError(f"{method} {path} failed: {e}") from e

        return decode_response(response, payload_type)
