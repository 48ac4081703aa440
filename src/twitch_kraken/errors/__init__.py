"""Error taxonomy and response decoding for Kraken calls."""

from twitch_kraken.errors.exceptions import (
    BadRequestError,
    ClientError,
    ConflictError,
    DecodeError,
    EmptyResponseError,
    ForbiddenError,
    KrakenError,
    NotFoundError,
    RateLimitError,
    ServerError,
    ServiceError,
    TransportError,
    UnauthorizedError,
    UnprocessableEntityError,
)
from twitch_kraken.errors.handler import decode_body, decode_response, service_error_for
from twitch_kraken.errors.models import ErrorEnvelope

__all__ = [
    "BadRequestError",
    "ClientError",
    "ConflictError",
    "DecodeError",
    "EmptyResponseError",
    "ErrorEnvelope",
    "ForbiddenError",
    "KrakenError",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    "ServiceError",
    "TransportError",
    "UnauthorizedError",
    "UnprocessableEntityError",
    "decode_body",
    "decode_response",
    "service_error_for",
]
