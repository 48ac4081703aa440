"""Transport layers for the Kraken client.

Transport layers wrap httpx's ``HTTPTransport``:

Modules:
    retry: Rate limit aware retry with exponential backoff
"""

from twitch_kraken.transport.retry import RateLimitAwareRetry

__all__ = ["RateLimitAwareRetry"]
