"""Pytest fixtures for datekit tests."""

import pytest
import structlog

from datekit.config import reset_settings


@pytest.fixture(autouse=True)
def utc_settings(monkeypatch):
    """Pin the default timezone to UTC and reset settings around each test."""
    monkeypatch.setenv("DATEKIT_DEFAULT_TIMEZONE", "UTC")
    monkeypatch.delenv("DATEKIT_DEFAULT_PARSE_PATTERN", raising=False)
    monkeypatch.delenv("DATEKIT_LOG_LEVEL", raising=False)
    reset_settings()
    yield
    reset_settings()
    structlog.reset_defaults()
