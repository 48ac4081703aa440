"""Tests for channel endpoints."""

import httpx
import pytest

from twitch_kraken.errors import DecodeError, UnprocessableEntityError
from twitch_kraken.kraken import channels
from twitch_kraken.kraken.models import Channel, ChannelUpdate


@pytest.mark.unit
def test_get_authenticated_channel(make_client, channel_json):
    client, server = make_client(channel_json, token="tok")

    channel = channels.get(client)

    assert isinstance(channel, Channel)
    assert channel.id == 12826
    assert channel.display_name == "Twitch"
    assert server.requests[0].url.path == "/kraken/channel"


@pytest.mark.unit
def test_get_by_id(make_client, channel_json):
    client, server = make_client(channel_json)

    channel = channels.get_by_id(client, "12826")

    assert channel.name == "twitch"
    assert channel.partner is True
    assert server.requests[0].url.path == "/kraken/channels/12826"


@pytest.mark.unit
def test_editors(make_client, user_json):
    client, server = make_client({"users": [user_json]})

    result = channels.editors(client, "12826")

    assert [u.name for u in result.users] == ["dallas"]
    assert server.requests[0].url.path == "/kraken/channels/12826/editors"


@pytest.mark.unit
def test_followers_pages_by_cursor(make_client, user_json):
    follow = {"created_at": "2016-09-16T20:37:39Z", "notifications": False, "user": user_json}
    client, server = make_client(
        {"_cursor": "1474058259", "_total": 2, "follows": [follow]},
        {"_cursor": "", "_total": 2, "follows": [follow]},
    )

    follows = list(channels.followers(client, "12826"))

    assert len(follows) == 2
    assert follows[0].user.display_name == "dallas"
    assert server.requests[0].url.path == "/kraken/channels/12826/follows"
    assert server.params(1)["cursor"] == "1474058259"
    assert server.calls == 2


@pytest.mark.unit
def test_teams(make_client):
    team = {
        "_id": 10,
        "name": "staff",
        "display_name": "Twitch Staff",
        "created_at": "2011-10-25T23:55:47Z",
        "updated_at": "2013-05-24T00:17:10Z",
    }
    client, _ = make_client({"teams": [team]})

    result = channels.teams(client, "12826")

    assert result.teams[0].display_name == "Twitch Staff"


@pytest.mark.unit
def test_subscribers_by_offset(make_client, user_json):
    sub = {"_id": "e5e2ddc37e74aa9636625e8d2cc2e54648a30418", "created_at": "2016-04-06T04:44:31Z", "user": user_json}
    client, server = make_client({"_total": 1, "subscriptions": [sub]}, {"_total": 1, "subscriptions": []})

    subs = list(channels.subscribers(client, "12826"))

    assert [s.id for s in subs] == ["e5e2ddc37e74aa9636625e8d2cc2e54648a30418"]
    assert server.params(1)["offset"] == "1"


@pytest.mark.unit
def test_subscribers_without_program_ends_with_error(make_client, envelope):
    client, _ = make_client(envelope(422, "Unprocessable Entity", "no subscription program"))

    subs = channels.subscribers(client, "12826")

    assert list(subs) == []
    assert isinstance(subs.error, UnprocessableEntityError)


@pytest.mark.unit
def test_videos_path(make_client):
    client, server = make_client({"_total": 0, "videos": []})

    assert list(channels.videos(client, "12826")) == []
    assert server.requests[0].url.path == "/kraken/channels/12826/videos"


@pytest.mark.unit
def test_update_wraps_settings(make_client, channel_json):
    client, server = make_client(channel_json)

    channels.update(client, "12826", ChannelUpdate(status="Playing cool new game!", delay=60))

    request = server.requests[0]
    assert request.method == "PUT"
    assert server.body(0) == {"channel": {"status": "Playing cool new game!", "delay": 60}}


@pytest.mark.unit
def test_set_community(make_client, channel_json):
    client, server = make_client(channel_json)

    channels.set_community(client, "12826", "e9f17055-810f-4736-ba40-fba4ac541caa")

    request = server.requests[0]
    assert request.method == "PUT"
    assert request.url.path == "/kraken/channels/12826/community/e9f17055-810f-4736-ba40-fba4ac541caa"


@pytest.mark.unit
def test_commercial(make_client):
    client, server = make_client({"duration": 30, "message": "", "retryafter": 480})

    result = channels.commercial(client, "12826", 30)

    assert result.retryafter == 480
    assert server.requests[0].method == "POST"
    assert server.body(0) == {"duration": 30}


@pytest.mark.unit
def test_reset_stream_key(make_client, channel_json):
    client, server = make_client({**channel_json, "stream_key": "live_44322889_nCGwsCu4ntwvc4Adm4Z2kMpY3Ea5I2"})

    channel = channels.reset_stream_key(client, "12826")

    assert channel.stream_key.startswith("live_")
    assert server.requests[0].method == "DELETE"
    assert server.requests[0].url.path == "/kraken/channels/12826/stream_key"


@pytest.mark.unit
def test_single_shot_call_raises_on_html(make_client):
    client, _ = make_client(httpx.Response(502, text="<html>Bad Gateway</html>"))

    with pytest.raises(DecodeError) as exc_info:
        channels.get_by_id(client, "12826")

    assert exc_info.value.status_code == 502
