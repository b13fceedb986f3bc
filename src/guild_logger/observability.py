"""Internal diagnostics for the logging pipeline itself.

Purpose
    Give the library a quiet, standard place to report its own behaviour
    (recovered enrichment failures, fallback diagnostics, configuration parsing)
    without mixing those events into the application's log lines.

Contents
    - ``get_logger``: returns the shared package logger (quiet by default).
    - ``log_debug`` / ``log_error``: emit structured entries via a
      single private emitter.
    - ``make_event``: convenience builder for structured failure payloads.

System Integration
    Used by the emitter, the configuration helpers and the default adapters.
    Host applications attach a handler to ``"guild_logger"`` when they want to
    see these events; otherwise the ``NullHandler`` keeps them silent.
"""

from __future__ import annotations

import logging
from typing import Any, Final, Mapping

_LOGGER: Final[logging.Logger] = logging.getLogger("guild_logger")
_LOGGER.addHandler(logging.NullHandler())


def get_logger() -> logging.Logger:
    """Expose the package logger so applications may attach handlers.

    Why
        Leaves the library silent by default while giving host applications full
        control over handler and formatter configuration.
    """

    return _LOGGER


def log_debug(message: str, **fields: Any) -> None:
    """Emit a structured debug diagnostic."""

    _emit(logging.DEBUG, message, fields)


def log_error(message: str, **fields: Any) -> None:
    """Emit a structured error diagnostic."""

    _emit(logging.ERROR, message, fields)


def make_event(stage: str, level: str, payload: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Build a structured payload describing a pipeline event.

    Examples
    --------
    >>> make_event('enrich', 'info', {'reason': 'boom'})
    {'stage': 'enrich', 'level': 'info', 'reason': 'boom'}
    """

    event: dict[str, Any] = {"stage": stage, "level": level}
    if payload:
        event |= dict(payload)
    return event


def _emit(level: int, message: str, fields: Mapping[str, Any]) -> None:
    """Send a diagnostic through the shared logger with its structured context."""

    _LOGGER.log(level, message, extra={"context": dict(fields)})
