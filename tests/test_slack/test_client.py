"""Tests for the httpx-based Slack client."""

import json

import httpx
import pytest

from slack_relay.config import SLACK_POST_MESSAGE_URL, Settings
from slack_relay.models.slack import SlackPayload
from slack_relay.slack.client import SlackClient, SlackTransportError, get_slack_client


async def test_post_message_sends_authorized_json(fake_slack):
    """One POST with bearer auth, JSON content type and the payload as body."""
    client = fake_slack.client()

    response = await client.post_message("xoxb-abc", SlackPayload(channel="#general", text="hi"))

    assert response.status_code == 200
    assert len(fake_slack.requests) == 1
    request = fake_slack.requests[0]
    assert request.method == "POST"
    assert str(request.url) == SLACK_POST_MESSAGE_URL
    assert request.headers["Authorization"] == "Bearer xoxb-abc"
    assert request.headers["Content-Type"] == "application/json; charset=utf-8"
    assert json.loads(request.content) == {"channel": "#general", "text": "hi"}


async def test_post_message_returns_error_statuses(fake_slack):
    """HTTP errors are returned for the caller to interpret, not raised."""
    fake_slack.respond(503, content=b"Service Unavailable")

    response = await fake_slack.client().post_message("t", SlackPayload(channel="#c", text="x"))

    assert response.status_code == 503


@pytest.mark.parametrize(
    "error",
    [
        httpx.ConnectError("connection refused"),
        httpx.ReadTimeout("timed out"),
        httpx.RemoteProtocolError("server disconnected"),
    ],
)
async def test_post_message_wraps_transport_errors(fake_slack, error: Exception):
    fake_slack.error = error

    with pytest.raises(SlackTransportError, match=str(error)):
        await fake_slack.client().post_message("t", SlackPayload(channel="#c", text="x"))

    assert len(fake_slack.requests) == 1


def test_get_slack_client_uses_settings():
    settings = Settings(
        _env_file=None,
        slack_api_url="https://slack.test/api/chat.postMessage",
        slack_timeout_seconds=2.5,
    )

    client = get_slack_client(settings)

    assert isinstance(client, SlackClient)
    assert client.api_url == "https://slack.test/api/chat.postMessage"
    assert client.timeout_seconds == 2.5
