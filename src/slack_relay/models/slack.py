"""Wire models for the Slack chat.postMessage call."""

from pydantic import BaseModel, ConfigDict


class SlackPayload(BaseModel):
    """Outbound chat.postMessage body."""

    channel: str  # "#"-prefixed channel name, e.g. "#general"
    text: str  # Message text already converted to mrkdwn


class SlackResult(BaseModel):
    """The parts of a chat.postMessage response the relay reads.

    Slack returns many more fields (``channel``, ``message``, ``warning``...);
    they are ignored. ``ok`` is required: a body without it is not a usable
    Slack response.
    """

    model_config = ConfigDict(extra="ignore")

    ok: bool
    error: str | None = None  # Slack error code, e.g., "channel_not_found"
    ts: str | int | float | None = None  # Usually a string, e.g., "1234567890.123456"
