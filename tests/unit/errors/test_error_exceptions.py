"""Tests for the Kraken exception hierarchy."""

import pytest

from twitch_kraken.errors import (
    BadRequestError,
    ClientError,
    DecodeError,
    EmptyResponseError,
    KrakenError,
    NotFoundError,
    RateLimitError,
    ServerError,
    ServiceError,
    TransportError,
    UnauthorizedError,
)
from twitch_kraken.errors.models import ErrorEnvelope


@pytest.fixture
def not_found():
    return ErrorEnvelope(error="Not Found", status=404, message="gone")


@pytest.mark.unit
@pytest.mark.parametrize(
    "exc_class",
    [TransportError, EmptyResponseError, DecodeError, ServiceError, ClientError, ServerError],
)
def test_everything_is_a_kraken_error(exc_class):
    assert issubclass(exc_class, KrakenError)


@pytest.mark.unit
def test_client_errors_are_service_errors():
    for exc_class in (BadRequestError, UnauthorizedError, NotFoundError, RateLimitError):
        assert issubclass(exc_class, ClientError)
        assert issubclass(exc_class, ServiceError)
    assert not issubclass(ServerError, ClientError)


@pytest.mark.unit
def test_empty_response_defaults():
    error = EmptyResponseError()

    assert str(error) == "Empty response"
    assert error.status_code is None


@pytest.mark.unit
def test_decode_error_keeps_body():
    error = DecodeError("did not match", body="<html>", status_code=502)

    assert error.body == "<html>"
    assert error.status_code == 502


@pytest.mark.unit
def test_service_error_exposes_envelope(not_found):
    error = NotFoundError(not_found.to_exception_message(), envelope=not_found, status_code=404)

    assert error.envelope is not_found
    assert error.status == 404
    assert error.error == "Not Found"
    assert "gone" in str(error)


@pytest.mark.unit
def test_rate_limit_error_retry_after():
    envelope = ErrorEnvelope(error="Too Many Requests", status=429, message="")

    error = RateLimitError("slow down", retry_after=12, envelope=envelope, status_code=429)

    assert error.retry_after == 12
    assert error.status == 429
