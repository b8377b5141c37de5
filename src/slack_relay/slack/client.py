"""Async HTTP client for Slack's chat.postMessage Web API.

One POST per call, no retries. The caller interprets the response; this
module only turns transport failures into a single exception type.
"""

import logging

import httpx
from fastapi import Depends

from slack_relay.config import Settings, get_settings
from slack_relay.models.slack import SlackPayload

logger = logging.getLogger(__name__)


class SlackTransportError(Exception):
    """Slack could not be reached: connect, DNS, timeout or protocol failure."""


class SlackClient:
    """Posts messages to Slack with a bearer bot token.

    Args:
        api_url: Full chat.postMessage endpoint URL.
        timeout_seconds: Transport timeout for the whole request.
        transport: Optional httpx transport (``httpx.MockTransport`` in tests).
    """

    def __init__(
        self,
        api_url: str,
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_url = api_url
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    async def post_message(self, token: str, payload: SlackPayload) -> httpx.Response:
        """Send ``payload`` to Slack and return the raw HTTP response.

        Raises:
            SlackTransportError: If no response was received.
        """
        headers = {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json; charset=utf-8",
        }
        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout_seconds),
                transport=self._transport,
            ) as client:
                return await client.post(
                    self.api_url,
                    headers=headers,
                    content=payload.model_dump_json(),
                )
        except httpx.RequestError as exc:
            logger.warning("Slack request failed: %s (%s)", type(exc).__name__, exc)
            raise SlackTransportError(str(exc) or type(exc).__name__) from exc


def get_slack_client(settings: Settings = Depends(get_settings)) -> SlackClient:
    """FastAPI dependency returning a client configured from settings."""
    return SlackClient(
        api_url=settings.slack_api_url,
        timeout_seconds=settings.slack_timeout_seconds,
    )
