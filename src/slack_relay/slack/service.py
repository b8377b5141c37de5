"""The relay flow: validate -> transform -> post to Slack -> map the result."""

import json
import logging

from fastapi.responses import JSONResponse
from pydantic import ValidationError

from slack_relay.config import Settings
from slack_relay.models.relay import SuccessEnvelope
from slack_relay.models.slack import SlackPayload, SlackResult
from slack_relay.slack.client import SlackClient, SlackTransportError
from slack_relay.slack.errors import FailureKind, RelayFailure
from slack_relay.slack.mrkdwn import markdown_to_mrkdwn
from slack_relay.slack.policies import ErrorPolicy

logger = logging.getLogger(__name__)


def validate_request(channel_name: str | None, body: bytes) -> str:
    """Check the channel and JSON body, returning the message text.

    Raises:
        RelayFailure: MISSING_CHANNEL, INVALID_BODY or MISSING_MESSAGE.
    """
    if not channel_name:
        raise RelayFailure(FailureKind.MISSING_CHANNEL)

    # ValueError covers JSONDecodeError and UnicodeDecodeError; deep nesting hits the recursion limit
    try:
        payload = json.loads(body)
    except (ValueError, RecursionError) as exc:
        raise RelayFailure(FailureKind.INVALID_BODY, detail=str(exc)) from exc

    message = payload.get("message") if isinstance(payload, dict) else None
    # Falsy values (None, "", 0, False, [], {}) all count as missing
    if not message:
        raise RelayFailure(FailureKind.MISSING_MESSAGE)
    if not isinstance(message, str):
        raise RelayFailure(FailureKind.INVALID_BODY, detail="'message' must be a string")
    return message


class SlackRelay:
    """Relays one message per call to a Slack channel.

    Args:
        settings: Application settings; the bot token is read from it on every call.
        client: Slack HTTP client.
        policy: Error policy deciding the shape and status of failures.
    """

    def __init__(self, settings: Settings, client: SlackClient, policy: ErrorPolicy) -> None:
        self.settings = settings
        self.client = client
        self.policy = policy

    def read_token(self) -> str:
        """Return the configured bot token.

        Raises:
            RelayFailure: CONFIG_ERROR if the token is unset or empty.
        """
        token = self.settings.slack_bot_token
        if not token:
            raise RelayFailure(FailureKind.CONFIG_ERROR)
        return token

    async def relay(self, channel_name: str | None, body: bytes) -> JSONResponse:
        """Run the full relay for one request and return the HTTP response.

        Every failure is rendered by the error policy; nothing is raised.
        """
        try:
            message = validate_request(channel_name, body)
            token = self.read_token()
            result = await self._post(token, channel_name, message)
        except RelayFailure as failure:
            self._log_failure(channel_name, failure)
            return self.policy.render(failure)

        logger.info("Relayed message to #%s (ts=%s)", channel_name, result.ts)
        envelope = SuccessEnvelope(channel=channel_name, ts=result.ts)
        return JSONResponse(envelope.model_dump(exclude_none=True))

    async def _post(self, token: str, channel_name: str, message: str) -> SlackResult:
        """Post to Slack and interpret the response.

        Raises:
            RelayFailure: SLACK_UNREACHABLE, SLACK_UNAVAILABLE,
                INVALID_SLACK_RESPONSE or SLACK_ERROR.
        """
        payload = SlackPayload(channel=f"#{channel_name}", text=markdown_to_mrkdwn(message))
        try:
            response = await self.client.post_message(token, payload)
        except SlackTransportError as exc:
            raise RelayFailure(FailureKind.SLACK_UNREACHABLE, detail=str(exc)) from exc

        if self.policy.checks_upstream_status and response.status_code >= 500:
            raise RelayFailure(
                FailureKind.SLACK_UNAVAILABLE, detail=f"HTTP {response.status_code}"
            )

        try:
            result = SlackResult.model_validate_json(response.content)
        except ValidationError as exc:
            raise RelayFailure(
                FailureKind.INVALID_SLACK_RESPONSE,
                detail=f"HTTP {response.status_code}: unparseable body",
            ) from exc

        if not result.ok:
            raise RelayFailure(FailureKind.SLACK_ERROR, slack_error=result.error)
        return result

    def _log_failure(self, channel_name: str | None, failure: RelayFailure) -> None:
        if failure.kind in (
            FailureKind.MISSING_CHANNEL,
            FailureKind.INVALID_BODY,
            FailureKind.MISSING_MESSAGE,
        ):
            logger.info("Rejected relay request for %r: %s", channel_name, failure.kind.value)
        elif failure.kind == FailureKind.CONFIG_ERROR:
            logger.error("SLACK_BOT_TOKEN is not configured")
        else:
            logger.warning(
                "Relay to #%s failed: %s (slack_error=%s, detail=%s)",
                channel_name,
                failure.kind.value,
                failure.slack_error,
                failure.detail,
            )
