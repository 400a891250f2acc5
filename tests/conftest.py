"""Shared test fixtures and configuration.

Pins environment variables so src.config builds predictable settings,
and provides common fixtures like an in-memory output stream.
"""

import os

# Patch env vars BEFORE any src imports
os.environ.setdefault("LOG_LEVEL", "INFO")

import io
from datetime import datetime, timedelta

import pytest


@pytest.fixture
def stream():
    """Return an in-memory text stream to capture adapter output."""
    return io.StringIO()


@pytest.fixture
def fixed_clock():
    """Return a clock that advances 5 ms on every call."""
    moments = iter(
        datetime(2026, 2, 7, 9, 15, 30, 123000) + timedelta(milliseconds=5 * i)
        for i in range(1000)
    )
    return lambda: next(moments)


@pytest.fixture
def fake_monotonic():
    """Return a monotonic timer that advances 5 ms on every call."""
    ticks = iter(i * 0.005 for i in range(1000))
    return lambda: next(ticks)
