"""Shared fixtures for the logging pipeline suites.

Provides a recording sink, a fixed clock and a logger factory so tests can
assert on exact rendered output without touching real streams.
"""

from __future__ import annotations

import io
from typing import Callable

import pytest

from guild_logger import GuildLogger, LoggerOptions, StaticCorrelator
from tests.support import FIXED_TIMESTAMP, RecordingSink


@pytest.fixture()
def sink() -> RecordingSink:
    """Return a sink that records every write in memory."""

    return RecordingSink()


@pytest.fixture()
def fallback() -> io.StringIO:
    """Return an in-memory fallback stream."""

    return io.StringIO()


@pytest.fixture()
def make_logger(sink: RecordingSink, fallback: io.StringIO) -> Callable[..., GuildLogger]:
    """Return a factory building loggers wired to the recording sink and a fixed clock."""

    def _factory(correlation_id: str | None = None, **option_overrides: object) -> GuildLogger:
        options = LoggerOptions(correlator=StaticCorrelator(correlation_id), **option_overrides)  # type: ignore[arg-type]
        return GuildLogger(options, sink=sink, clock=lambda: FIXED_TIMESTAMP, fallback_stream=fallback)

    return _factory
