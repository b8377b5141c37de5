"""Response bodies returned to relay callers."""

from enum import Enum
from typing import Literal

from pydantic import BaseModel


class ErrorCategory(str, Enum):
    """Normalized failure categories for the rich error shape."""

    CLIENT_ERROR = "client_error"
    FORBIDDEN = "forbidden"
    RATE_LIMITED = "rate_limited"
    SERVICE_UNAVAILABLE = "service_unavailable"
    INTERNAL_ERROR = "internal_error"


class SuccessEnvelope(BaseModel):
    """Returned after Slack accepted the message."""

    status: Literal["ok"] = "ok"
    channel: str  # Caller-supplied name, without the "#"
    ts: str | int | float | None = None  # Passed through from Slack, never synthesized


class RichError(BaseModel):
    """Categorized error body."""

    category: ErrorCategory
    code: str
    message: str


class PlainError(BaseModel):
    """Flat error body. Optional fields are omitted from the JSON when unset."""

    error: str
    details: str | None = None
    slack_error: str | None = None
