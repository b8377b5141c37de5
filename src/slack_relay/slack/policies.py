"""Error policies: how relay failures are presented to callers.

Two shapes are supported for the same relay flow:

- ``RichErrorPolicy``: ``{category, code, message}`` with Slack error codes
  mapped to 400/403/429/500 and Slack outages reported as 503.
- ``PlainErrorPolicy``: ``{error, details?, slack_error?}`` with coarse
  400/500/502 statuses and no Slack error differentiation.

The plain policy never short-circuits on Slack 5xx responses, so its
SLACK_UNAVAILABLE entry is not reached by the relay flow. It is kept so that
every FailureKind renders under either policy.
"""

from abc import ABC, abstractmethod

from fastapi.responses import JSONResponse

from slack_relay.models.relay import ErrorCategory, PlainError, RichError
from slack_relay.slack.errors import FailureKind, RelayFailure


class ErrorPolicy(ABC):
    """Turns a ``RelayFailure`` into the HTTP response sent to the caller."""

    name: str
    # Whether an HTTP status >= 500 from Slack short-circuits before the body check
    checks_upstream_status: bool

    @abstractmethod
    def render(self, failure: RelayFailure) -> JSONResponse:
        """Build the error response for ``failure``."""


# Slack error code -> (status, category, message)
SLACK_ERROR_MAP: dict[str, tuple[int, ErrorCategory, str]] = {
    "channel_not_found": (400, ErrorCategory.CLIENT_ERROR, "Channel not found"),
    "not_in_channel": (400, ErrorCategory.CLIENT_ERROR, "Bot is not in that channel"),
    "invalid_auth": (403, ErrorCategory.FORBIDDEN, "Invalid Slack token"),
    "not_authed": (403, ErrorCategory.FORBIDDEN, "Not authenticated"),
    "token_revoked": (403, ErrorCategory.FORBIDDEN, "Slack token revoked"),
    "account_inactive": (403, ErrorCategory.FORBIDDEN, "Slack app inactive"),
    "missing_scope": (403, ErrorCategory.FORBIDDEN, "Bot missing required scope"),
    "rate_limited": (429, ErrorCategory.RATE_LIMITED, "Slack rate limit exceeded"),
}

_RICH_FAILURES: dict[FailureKind, tuple[int, ErrorCategory, str]] = {
    FailureKind.MISSING_CHANNEL: (400, ErrorCategory.CLIENT_ERROR, "Missing channel_name"),
    FailureKind.INVALID_BODY: (400, ErrorCategory.CLIENT_ERROR, "Invalid JSON body"),
    FailureKind.MISSING_MESSAGE: (400, ErrorCategory.CLIENT_ERROR, "Missing 'message' field"),
    FailureKind.CONFIG_ERROR: (
        500,
        ErrorCategory.INTERNAL_ERROR,
        "SLACK_BOT_TOKEN not configured",
    ),
    FailureKind.SLACK_UNREACHABLE: (
        503,
        ErrorCategory.SERVICE_UNAVAILABLE,
        "Could not reach Slack",
    ),
    FailureKind.SLACK_UNAVAILABLE: (
        503,
        ErrorCategory.SERVICE_UNAVAILABLE,
        "Slack API is unavailable",
    ),
    FailureKind.INVALID_SLACK_RESPONSE: (
        500,
        ErrorCategory.INTERNAL_ERROR,
        "Invalid response from Slack",
    ),
}

# Transport and outage failures share one public code
_RICH_CODES: dict[FailureKind, str] = {
    FailureKind.SLACK_UNREACHABLE: "slack_unavailable",
}


def map_slack_error(slack_error: str | None) -> tuple[int, RichError]:
    """Map a Slack error code to an HTTP status and rich error body.

    Unknown or missing codes fall back to a generic 500 ``slack_error``.
    """
    if slack_error in SLACK_ERROR_MAP:
        status, category, message = SLACK_ERROR_MAP[slack_error]
        return status, RichError(category=category, code=slack_error, message=message)
    return 500, RichError(
        category=ErrorCategory.INTERNAL_ERROR,
        code="slack_error",
        message="Slack API error",
    )


class RichErrorPolicy(ErrorPolicy):
    """Categorized errors with per-Slack-code statuses."""

    name = "rich"
    checks_upstream_status = True

    def render(self, failure: RelayFailure) -> JSONResponse:
        if failure.kind == FailureKind.SLACK_ERROR:
            status, body = map_slack_error(failure.slack_error)
        else:
            status, category, message = _RICH_FAILURES[failure.kind]
            code = _RICH_CODES.get(failure.kind, failure.kind.value)
            body = RichError(category=category, code=code, message=message)
        return JSONResponse(body.model_dump(mode="json"), status_code=status)


_PLAIN_FAILURES: dict[FailureKind, tuple[int, str]] = {
    FailureKind.MISSING_CHANNEL: (400, "Missing channel_name"),
    FailureKind.INVALID_BODY: (400, "Invalid JSON body"),
    FailureKind.MISSING_MESSAGE: (400, "Missing 'message' field"),
    FailureKind.CONFIG_ERROR: (500, "SLACK_BOT_TOKEN not configured"),
    FailureKind.SLACK_UNREACHABLE: (502, "Failed to reach Slack"),
    FailureKind.SLACK_UNAVAILABLE: (502, "Slack API is unavailable"),
    FailureKind.INVALID_SLACK_RESPONSE: (500, "Invalid response from Slack"),
    FailureKind.SLACK_ERROR: (500, "Slack API error"),
}


class PlainErrorPolicy(ErrorPolicy):
    """Flat ``{error, details?, slack_error?}`` errors.

    Slack 5xx responses are not special-cased: the body is still checked, so
    they surface as an invalid response or a Slack API error.    """

    name = "plain"
    checks_upstream_status = False

    def render(self, failure: RelayFailure) -> JSONResponse:
        status, error = _PLAIN_FAILURES[failure.kind]
        body = PlainError(error=error)
        if failure.kind == FailureKind.SLACK_UNREACHABLE:
            body.details = failure.detail
        elif failure.kind == FailureKind.SLACK_ERROR:
            body.slack_error = failure.slack_error
        return JSONResponse(body.model_dump(exclude_none=True), status_code=status)


_POLICIES: dict[str, type[ErrorPolicy]] = {
    RichErrorPolicy.name: RichErrorPolicy,
    PlainErrorPolicy.name: PlainErrorPolicy,
}


def get_policy(name: str) -> ErrorPolicy:
    """Return a policy instance by name ("rich" or "plain").

    Raises:
        ValueError: If ``name`` is not a known policy.
    """
    try:
        return _POLICIES[name]()
    except KeyError:
        raise ValueError(
            f"Unknown error policy {name!r}; expected one of {sorted(_POLICIES)}"
        ) from None
