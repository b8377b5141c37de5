"""Data models for the relay API and the Slack wire format."""

from slack_relay.models.relay import ErrorCategory, PlainError, RichError, SuccessEnvelope
from slack_relay.models.slack import SlackPayload, SlackResult

__all__ = [
    "ErrorCategory",
    "PlainError",
    "RichError",
    "SlackPayload",
    "SlackResult",
    "SuccessEnvelope",
]
