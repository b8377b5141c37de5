"""Slack message relay service."""
