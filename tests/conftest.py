"""Pytest configuration and shared fixtures for twitch-kraken tests."""

import json
import os

import httpx
import pytest

from twitch_kraken import KrakenClient
from twitch_kraken.auth import Credentials


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear Twitch-related environment variables before each test.

    This prevents test pollution when testing credential resolution.
    """
    test_prefixes = ("TEST_", "TWITCH_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


class StubServer:
    """Serves canned bodies in order and records every request.

    Each entry is a dict/list (sent as JSON), a str (sent verbatim), or an
    ``httpx.Response``. Once the queue is drained, every request gets a
    500 "no more responses" text body.
    """

    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.responses:
            return httpx.Response(500, text="no more responses")
        response = self.responses.pop(0)
        if isinstance(response, httpx.Response):
            return response
        if isinstance(response, str):
            return httpx.Response(200, text=response)
        return httpx.Response(200, text=json.dumps(response))

    @property
    def calls(self) -> int:
        return len(self.requests)

    def params(self, index: int) -> httpx.QueryParams:
        return self.requests[index].url.params

    def body(self, index: int):
        return json.loads(self.requests[index].content)


@pytest.fixture
def make_client():
    """Factory: build a KrakenClient backed by a StubServer."""
    clients = []

    def _make(*responses, token: str = "", **kwargs):
        server = StubServer(*responses)
        client = KrakenClient(
            Credentials(client_id="test-client-id", token=token),
            transport=httpx.MockTransport(server),
            **kwargs,
        )
        clients.append(client)
        return client, server

    yield _make

    for client in clients:
        client.close()


@pytest.fixture
def user_json():
    return {
        "_id": "44322889",
        "bio": "Just a gamer playing games and chatting.",
        "created_at": "2013-06-03T19:12:02.580593Z",
        "display_name": "dallas",
        "logo": None,
        "name": "dallas",
        "type": "staff",
        "updated_at": "2016-12-14T01:01:44.587917Z",
    }


@pytest.fixture
def channel_json():
    return {
        "_id": "12826",
        "broadcaster_language": "en",
        "created_at": "2007-05-22T10:39:54Z",
        "display_name": "Twitch",
        "followers": 530641,
        "game": "Gaming Talk Shows",
        "language": "en",
        "logo": "https://static-cdn.jtvnw.net/jtv_user_pictures/twitch-profile_image.png",
        "mature": False,
        "name": "twitch",
        "partner": True,
        "status": "Twitch Weekly",
        "updated_at": "2017-03-27T17:42:17Z",
        "url": "https://www.twitch.tv/twitch",
        "views": 188281001,
    }


@pytest.fixture
def stream_json(channel_json):
    return {
        "_id": 23932774784,
        "game": "BATMAN - The Telltale Series",
        "viewers": 7254,
        "video_height": 720,
        "average_fps": 60,
        "delay": 0,
        "created_at": "2016-12-14T22:49:56Z",
        "is_playlist": False,
        "preview": {"small": "https://static-cdn.jtvnw.net/previews-ttv/live_user_dansgaming-80x45.jpg"},
        "channel": channel_json,
    }


@pytest.fixture
def envelope():
    """Factory: Twitch error envelope response with a matching HTTP status."""

    def _envelope(status: int, error: str, message: str = "") -> httpx.Response:
        return httpx.Response(status, json={"error": error, "status": status, "message": message})

    return _envelope
