"""Relay failure taxonomy.

Every step of the relay raises ``RelayFailure`` on its failure path. The
active error policy decides how each kind is presented to the caller.
"""

from enum import Enum


class FailureKind(str, Enum):
    """Where in the relay a request failed."""

    MISSING_CHANNEL = "missing_channel"
    INVALID_BODY = "invalid_body"
    MISSING_MESSAGE = "missing_message"
    CONFIG_ERROR = "config_error"
    SLACK_UNREACHABLE = "slack_unreachable"  # transport failure, no response
    SLACK_UNAVAILABLE = "slack_unavailable"  # response with HTTP status >= 500
    INVALID_SLACK_RESPONSE = "invalid_slack_response"
    SLACK_ERROR = "slack_error"  # Slack answered ok: false


class RelayFailure(Exception):
    """A terminal failure for one relay request.

    Args:
        kind: Which step failed.
        detail: Underlying error text (e.g., the transport exception message).
        slack_error: Raw Slack error code for ``FailureKind.SLACK_ERROR``.
    """

    def __init__(
        self,
        kind: FailureKind,
        detail: str | None = None,
        slack_error: str | None = None,
    ) -> None:
        super().__init__(detail or kind.value)
        self.kind = kind
        self.detail = detail
        self.slack_error = slack_error
