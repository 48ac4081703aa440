"""Structured exceptions for Kraken API calls."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from twitch_kraken.errors.models import ErrorEnvelope


class KrakenError(Exception):
    """Base exception for everything a Kraken call can fail with."""

    pass


class TransportError(KrakenError):
    """The HTTP round trip itself failed (connection, timeout, protocol)."""

    pass


class EmptyResponseError(KrakenError):
    """The response body was empty.

    Endpoints that answer with no content (unfollow, unblock) treat this as
    success; everywhere else it is a failure.
    """

    def __init__(self, message: str = "Empty response", status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class DecodeError(KrakenError):
    """Body matched neither the expected payload nor the error envelope."""

    def __init__(self, message: str, body: str = "", status_code: int | None = None):
        super().__init__(message)
        self.body = body
        self.status_code = status_code


class ServiceError(KrakenError):
    """Twitch answered with an error envelope ``{error, status, message}``."""

    def __init__(
        self,
        message: str,
        envelope: "ErrorEnvelope",
        status_code: int | None = None,
    ):
        super().__init__(message)
        self.envelope = envelope
        self.status_code = status_code

    @property
    def status(self) -> int:
        return self.envelope.status

    @property
    def error(self) -> str:
        return self.envelope.error


class ClientError(ServiceError):
    """4xx service errors."""

    pass


class BadRequestError(ClientError):
    """400 Bad Request."""

    pass


class UnauthorizedError(ClientError):
    """401 Unauthorized."""

    pass


class ForbiddenError(ClientError):
    """403 Forbidden."""

    pass


class NotFoundError(ClientError):
    """404 Not Found."""

    pass


class ConflictError(ClientError):
    """409 Conflict."""

    pass


class UnprocessableEntityError(ClientError):
    """422 Unprocessable Entity.

    Kraken uses this for channels without a subscription program.
    """

    pass


class RateLimitError(ClientError):
    """429 Too Many Requests."""

    def __init__(self, message: str, retry_after: int | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class ServerError(ServiceError):
    """5xx service errors."""

    pass
