"""Ingest server list."""

from twitch_kraken.client import KrakenClient
from twitch_kraken.kraken.models import IngestServerList


def servers(c: KrakenClient) -> IngestServerList:
    return c.fetch("/ingests", IngestServerList)
