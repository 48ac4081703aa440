"""Response decoding for Kraken calls.

Every response goes through the same pipeline:

1. Empty body -> ``EmptyResponseError``
2. Body validates as the expected payload type -> payload returned
3. Body validates as the error envelope -> ``ServiceError`` subclass
4. Anything else -> ``DecodeError``

HTTP status codes are only used to refine the exception; the body decides
the outcome, since Kraken reports failures inside the envelope.
"""

import logging
from functools import lru_cache
from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from twitch_kraken.errors.exceptions import (
    BadRequestError,
    ClientError,
    ConflictError,
    DecodeError,
    EmptyResponseError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    ServerError,
    ServiceError,
    UnauthorizedError,
    UnprocessableEntityError,
)
from twitch_kraken.errors.models import ErrorEnvelope
from twitch_kraken.transport.retry import retry_after_seconds

logger = logging.getLogger(__name__)

T = TypeVar("T")

_EXCEPTION_MAP: dict[int, type[ServiceError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
    422: UnprocessableEntityError,
    429: RateLimitError,
}


@lru_cache(maxsize=None)
def _adapter(payload_type: Any) -> TypeAdapter:
    return TypeAdapter(payload_type)


def decode_body(body: str, payload_type: type[T], status_code: int | None = None) -> T:
    """Decode a raw response body into ``payload_type``.

    Args:
        body: Raw response text
        payload_type: Pydantic model or any type ``TypeAdapter`` accepts
        status_code: HTTP status of the response, if known

    Returns:
        The validated payload

    Raises:
        EmptyResponseError: body is empty
        ServiceError: body is a Twitch error envelope
        DecodeError: body is neither
    """
    if not body:
        raise EmptyResponseError(status_code=status_code)

    try:
        return _adapter(payload_type).validate_json(body)
    except ValidationError as e:
        envelope = ErrorEnvelope.from_body(body)
        if envelope is not None:
            raise service_error_for(envelope, status_code=status_code) from e

        logger.debug(f"Failed to decode response body as {_type_name(payload_type)}:\n{body!r}")
        raise DecodeError(
            f"Response did not match {_type_name(payload_type)}",
            body=body,
            status_code=status_code,
        ) from e


def decode_response(response: httpx.Response, payload_type: type[T]) -> T:
    """Decode an ``httpx.Response`` into ``payload_type``.

    See ``decode_body`` for the pipeline; ``Retry-After`` is attached to
    rate limit errors.
    """
    try:
        return decode_body(response.text, payload_type, status_code=response.status_code)
    except RateLimitError as e:
        seconds = retry_after_seconds(response.headers)
        e.retry_after = int(seconds) if seconds is not None else None
        raise


def service_error_for(envelope: ErrorEnvelope, status_code: int | None = None) -> ServiceError:
    """Build the ServiceError subclass matching an error envelope.

    The envelope's own status wins over the HTTP status code.
    """
    status = envelope.status or status_code or 0

    if status in _EXCEPTION_MAP:
        exc_class = _EXCEPTION_MAP[status]
    elif 400 <= status < 500:
        exc_class = ClientError
    elif 500 <= status < 600:
        exc_class = ServerError
    else:
        exc_class = ServiceError

    return exc_class(
        envelope.to_exception_message(),
        envelope=envelope,
        status_code=status_code,
    )


def _type_name(payload_type: Any) -> str:
    return getattr(payload_type, "__name__", repr(payload_type))
