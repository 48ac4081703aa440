"""Retry transport for the Kraken client.

``RateLimitAwareRetry`` wraps any sync httpx transport:

| Condition | Retried methods |
|-----------|-----------------|
| 429 (rate limit) | all |
| 502, 503, 504 | GET, HEAD, PUT, DELETE, OPTIONS, TRACE |
| network errors | GET, HEAD, PUT, DELETE, OPTIONS, TRACE |

Kraken rate limits per client ID and sends ``Retry-After`` with 429s.

```python
from twitch_kraken.transport.retry import RateLimitAwareRetry
import httpx

transport = RateLimitAwareRetry(
    wrapped_transport=httpx.HTTPTransport(),
    max_retries=5,
    max_backoff=60,
)

with httpx.Client(transport=transport) as client:
    response = client.get("https://api.twitch.tv/kraken/games/top")
```
"""

import logging
import time
from datetime import UTC, datetime
from email.utils import parsedate_to_datetime

import httpx

logger = logging.getLogger(__name__)

IDEMPOTENT_METHODS = frozenset({"GET", "HEAD", "PUT", "DELETE", "OPTIONS", "TRACE"})
RETRYABLE_5XX = frozenset({502, 503, 504})


def backoff_delay(attempt: int, factor: float, cap: float) -> float:
    """Delay before retry number ``attempt`` (1-based), doubling each time."""
    return min(factor * 2 ** (attempt - 1), cap)


def retry_after_seconds(headers: httpx.Headers, now: datetime | None = None) -> float | None:
    """Seconds to wait according to ``Retry-After``.

    Accepts delay-seconds (``"120"``) or an HTTP-date. Returns None when the
    header is absent, malformed, negative or already in the past.
    """
    value = headers.get("Retry-After", "").strip()
    if not value:
        return None

    if value.isdigit():
        return float(value)

    try:
        when = parsedate_to_datetime(value)
    except (ValueError, TypeError):
        return None
    if when.tzinfo is None:
        when = when.replace(tzinfo=UTC)
    seconds = (when - (now or datetime.now(UTC))).total_seconds()
    return seconds if seconds > 0 else None


class RateLimitAwareRetry(httpx.BaseTransport):
    """Retry transport that handles rate limiting and server errors.

    Waits as long as ``Retry-After`` asks on 429s, capped at ``max_backoff``,
    and backs off exponentially everywhere else.

    Args:
        wrapped_transport: Transport that actually sends requests
        max_retries: Retries after the first attempt (default: 5)
        backoff_factor: Delay before the first retry (default: 1.0)
        max_backoff: Upper bound for any single delay in seconds (default: 60)
        retry_5xx_status_codes: 5xx codes retried for idempotent methods
            (default: 502, 503, 504)
    """

    def __init__(
        self,
        *,
        wrapped_transport: httpx.BaseTransport,
        max_retries: int = 5,
        backoff_factor: float = 1.0,
        max_backoff: float = 60.0,
        retry_5xx_status_codes: frozenset[int] | None = None,
    ) -> None:
        self._transport = wrapped_transport
        self.max_retries = max_retries
        self.backoff_factor = backoff_factor
        self.max_backoff = max_backoff
        self.retry_5xx_status_codes = retry_5xx_status_codes or RETRYABLE_5XX

    def __enter__(self) -> "RateLimitAwareRetry":
        self._transport.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self._transport.__exit__(exc_type, exc_val, exc_tb)

    def close(self) -> None:
        self._transport.close()

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        idempotent = request.method in IDEMPOTENT_METHODS
        attempt = 0

        while True:
            attempt += 1
            can_retry = attempt <= self.max_retries
            try:
                response = self._transport.handle_request(request)
            except httpx.TransportError as e:
                if not (can_retry and idempotent):
                    raise
                self._wait(request, str(e), self._backoff(attempt), attempt)
                continue

            delay = self.delay_for(response, attempt, idempotent) if can_retry else None
            if delay is None:
                return response

            response.close()
            self._wait(request, str(response.status_code), delay, attempt)

    def delay_for(self, response: httpx.Response, attempt: int, idempotent: bool) -> float | None:
        """Delay before retrying after ``response``, or None to return it."""
        if response.status_code == 429:
            waited = retry_after_seconds(response.headers)
            if waited is None:
                return self._backoff(attempt)
            return min(waited, self.max_backoff)

        if idempotent and response.status_code in self.retry_5xx_status_codes:
            return self._backoff(attempt)

        return None

    def _backoff(self, attempt: int) -> float:
        return backoff_delay(attempt, self.backoff_factor, self.max_backoff)

    def _wait(self, request: httpx.Request, reason: str, delay: float, attempt: int) -> None:
        logger.warning(
            f"{request.method} {request.url} failed with {reason}, "
            f"retry {attempt}/{self.max_retries} in {delay}s"
        )
        time.sleep(delay)
