"""Console sink built on a private :mod:`logging` logger.

Purpose
-------
Provide the default level-gated transport. Each sink owns an unregistered
:class:`logging.Logger` with a single stream handler, so writes are serialised
by the handler lock and never leak into the root logger or the package's
diagnostic logger. Stream errors propagate to the caller instead of being
printed by :meth:`logging.Handler.handleError`.

Level mapping
-------------
``error``→``ERROR``, ``warn``→``WARNING``, ``info``→``INFO``,
``verbose``→``15``, ``debug``→``DEBUG``.
"""

from __future__ import annotations

import logging
import sys
from typing import Final, TextIO

from ...domain.entry import LogLevel

VERBOSE: Final[int] = 15

STDLIB_LEVELS: Final[dict[LogLevel, int]] = {
    LogLevel.ERROR: logging.ERROR,
    LogLevel.WARN: logging.WARNING,
    LogLevel.INFO: logging.INFO,
    LogLevel.VERBOSE: VERBOSE,
    LogLevel.DEBUG: logging.DEBUG,
}


class _CurrentStdout:
    """Proxy resolving :data:`sys.stdout` on every write (plays well with capture tools)."""

    def write(self, text: str) -> int:
        return sys.stdout.write(text)

    def flush(self) -> None:
        sys.stdout.flush()


class _RaisingStreamHandler(logging.StreamHandler):
    """Stream handler that re-raises write errors so the emitter can report them."""

    def handleError(self, record: logging.LogRecord) -> None:
        # Called from inside StreamHandler.emit's except block.
        raise


class ConsoleSink:
    """Write rendered entries to a text stream, dropping those below ``level``.

    Parameters
    ----------
    level:
        Minimum severity written.
    silent:
        When ``True`` nothing is written at all.
    stream:
        Destination stream. Defaults to whatever :data:`sys.stdout` is at write time.
    """

    def __init__(
        self,
        level: LogLevel | str = LogLevel.INFO,
        *,
        silent: bool = False,
        stream: TextIO | None = None,
        name: str = "guild_logger.sink",
    ) -> None:
        self.level = LogLevel.parse(level)
        self._logger = logging.Logger(name, STDLIB_LEVELS[self.level])
        self._logger.propagate = False
        self._logger.disabled = silent
        handler = _RaisingStreamHandler(stream if stream is not None else _CurrentStdout())  # type: ignore[arg-type]
        handler.setFormatter(logging.Formatter("%(message)s"))
        self._logger.addHandler(handler)

    @property
    def silent(self) -> bool:
        return self._logger.disabled

    @silent.setter
    def silent(self, value: bool) -> None:
        self._logger.disabled = value

    def enabled(self, level: LogLevel) -> bool:
        return self.level.enables(level)

    def write(self, level: LogLevel, rendered: str) -> None:
        self._logger.log(STDLIB_LEVELS[level], "%s", rendered)


__all__ = ["ConsoleSink", "STDLIB_LEVELS", "VERBOSE"]
