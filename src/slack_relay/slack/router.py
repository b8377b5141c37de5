"""Relay endpoints, one router per error policy."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from slack_relay.config import Settings, get_settings
from slack_relay.slack.client import SlackClient, get_slack_client
from slack_relay.slack.policies import get_policy
from slack_relay.slack.service import SlackRelay


def build_router(policy_name: str, prefix: str = "") -> APIRouter:
    """Create a router exposing ``POST {prefix}/channels/{channel_name}/messages``.

    The raw body is read here rather than declared as a model so that body
    errors follow the relay's error policy instead of FastAPI's 422.
    """
    policy = get_policy(policy_name)
    router = APIRouter(prefix=prefix, tags=["relay", policy.name])

    @router.post("/channels/{channel_name}/messages")
    async def relay_message(
        channel_name: str,
        request: Request,
        settings: Settings = Depends(get_settings),
        client: SlackClient = Depends(get_slack_client),
    ) -> JSONResponse:
        """Post the JSON body's ``message`` to ``#channel_name``."""
        body = await request.body()
        relay = SlackRelay(settings=settings, client=client, policy=policy)
        return await relay.relay(channel_name, body)

    return router
