"""Plain-text renderer for human-readable log lines.

Purpose
-------
Produce lines shaped like::

    2024-05-01 10:00:00 info req-7: user created, userId=42, function=create, file=users.py

Error-like metadata values are rendered with their full native stack between
newlines; composites are JSON-encoded; everything else uses ``str``. With
``colorize`` enabled only the level token gains terminal colour codes.
"""

from __future__ import annotations

import json
from typing import Any, Final

import click

from ...application.normalize import classify_value, json_default, render_stack
from ...domain.entry import Entry, LogLevel

LEVEL_COLORS: Final[dict[LogLevel, str]] = {
    LogLevel.ERROR: "red",
    LogLevel.WARN: "yellow",
    LogLevel.INFO: "green",
    LogLevel.VERBOSE: "cyan",
    LogLevel.DEBUG: "blue",
}


class PlainTextRenderer:
    """Render entries as single logical text lines.

    Examples
    --------
    >>> entry = Entry("2024-05-01 10:00:00", LogLevel.INFO, "user created", {"userId": 42, "correlationId": "req-7"})
    >>> PlainTextRenderer().render(entry)
    '2024-05-01 10:00:00 info req-7: user created, userId=42, correlationId=req-7'
    """

    def __init__(self, *, colorize: bool = False) -> None:
        self.colorize = colorize

    def render(self, entry: Entry) -> str:
        parts = [self._head(entry)]
        parts.extend(f", {key}={render_value(value)}" for key, value in entry.meta.items())
        return "".join(parts)

    def _head(self, entry: Entry) -> str:
        correlation_id = entry.correlation_id
        suffix = f" {correlation_id}" if correlation_id else ""
        return f"{entry.timestamp} {self._level_token(entry.level)}{suffix}: {entry.message}"

    def _level_token(self, level: LogLevel) -> str:
        if not self.colorize:
            return level.value
        return click.style(level.value, fg=LEVEL_COLORS[level])


def render_value(value: Any) -> str:
    """Render one metadata value according to its kind."""

    kind = classify_value(value)
    if kind == "error":
        return f"\n{render_stack(value)}\n"
    if kind == "composite":
        return json.dumps(value, ensure_ascii=False, default=json_default)
    return str(value)


__all__ = ["PlainTextRenderer", "LEVEL_COLORS", "render_value"]
