"""FastAPI application with lifespan, health endpoint, and relay routes."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from slack_relay.config import get_settings
from slack_relay.logging_config import configure_logging
from slack_relay.slack.router import build_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: configure logging and load config on startup."""
    settings = get_settings()
    configure_logging(settings.log_level)
    app.state.settings = settings
    yield


app = FastAPI(
    title="Slack Relay",
    lifespan=lifespan,
)
app.include_router(build_router("rich"))
app.include_router(build_router("plain", prefix="/plain"))


@app.get("/health")
async def health():
    """Health check endpoint for Cloud Run and local development."""
    return {
        "status": "ok",
        "service": "slack-relay",
        "version": "0.1.0",
    }
