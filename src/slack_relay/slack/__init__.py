"""Slack egress: message relay, mrkdwn conversion, and error policies."""

from slack_relay.slack.client import SlackClient, SlackTransportError, get_slack_client
from slack_relay.slack.errors import FailureKind, RelayFailure
from slack_relay.slack.mrkdwn import markdown_to_mrkdwn
from slack_relay.slack.policies import (
    ErrorPolicy,
    PlainErrorPolicy,
    RichErrorPolicy,
    get_policy,
    map_slack_error,
)
from slack_relay.slack.router import build_router
from slack_relay.slack.service import SlackRelay, validate_request

__all__ = [
    "ErrorPolicy",
    "FailureKind",
    "PlainErrorPolicy",
    "RelayFailure",
    "RichErrorPolicy",
    "SlackClient",
    "SlackRelay",
    "SlackTransportError",
    "build_router",
    "get_policy",
    "get_slack_client",
    "map_slack_error",
    "markdown_to_mrkdwn",
    "validate_request",
]
