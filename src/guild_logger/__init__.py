"""Fail-safe structured logging façade.

Public surface: :class:`GuildLogger` (never raises from a log call),
:class:`LoggerOptions` / :func:`options_from_env` for configuration, the
default :class:`ContextCorrelator`, and the error taxonomy rooted at
:class:`GuildLoggerError`.
"""

from __future__ import annotations

from .adapters.correlation.context import ContextCorrelator, StaticCorrelator
from .config import LoggerOptions, options_from_env
from .core import GuildLogger, create_logger
from .domain.entry import Entry, LogLevel, NormalizedError
from .domain.errors import (
    EmitFailure,
    EnrichmentFailure,
    GuildLoggerError,
    InvalidOption,
    NormalizationFailure,
    RenderFailure,
    SinkFailure,
)
from .observability import get_logger

__all__ = [
    "GuildLogger",
    "create_logger",
    "LoggerOptions",
    "options_from_env",
    "ContextCorrelator",
    "StaticCorrelator",
    "Entry",
    "LogLevel",
    "NormalizedError",
    "GuildLoggerError",
    "InvalidOption",
    "EmitFailure",
    "EnrichmentFailure",
    "NormalizationFailure",
    "RenderFailure",
    "SinkFailure",
    "get_logger",
]
