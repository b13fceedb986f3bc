"""Test doubles shared across suites."""

from __future__ import annotations

from guild_logger.domain.entry import LogLevel

FIXED_TIMESTAMP = "2024-05-01 10:00:00"


class RecordingSink:
    """In-memory sink honouring level gating and silence like the console sink."""

    def __init__(self, level: LogLevel = LogLevel.DEBUG, *, silent: bool = False) -> None:
        self.level = level
        self.silent = silent
        self.records: list[tuple[LogLevel, str]] = []

    def enabled(self, level: LogLevel) -> bool:
        return self.level.enables(level)

    def write(self, level: LogLevel, rendered: str) -> None:
        if not self.silent:
            self.records.append((level, rendered))

    @property
    def lines(self) -> list[str]:
        return [rendered for _, rendered in self.records]
