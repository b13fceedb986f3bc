"""Context-variable correlation source.

Purpose
-------
Provide a default :class:`~guild_logger.application.ports.CorrelationSource`
whose identifier follows the current thread or asyncio task. Request handlers
bind an id at the start of an operation and clear it at the end; every log call
made in between (including from tasks spawned inside that context) reads it.

Contents
--------
* :class:`ContextCorrelator` – ``bind``/``clear``/``scope`` lifecycle over a
  :class:`~contextvars.ContextVar`.
* :class:`StaticCorrelator` – fixed identifier, handy for scripts and the CLI.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator

from ...observability import log_debug


class ContextCorrelator:
    """Correlation source backed by a dedicated :class:`ContextVar`.

    Examples
    --------
    >>> correlator = ContextCorrelator()
    >>> with correlator.scope("req-7"):
    ...     correlator.get_id()
    'req-7'
    >>> correlator.get_id() is None
    True
    """

    def __init__(self, name: str = "guild_logger_correlation_id") -> None:
        self._var: ContextVar[str | None] = ContextVar(name, default=None)

    def get_id(self) -> str | None:
        return self._var.get()

    def bind(self, correlation_id: str | None) -> None:
        """Bind ``correlation_id`` for the current context; ``None`` clears it."""

        self._var.set(correlation_id)

    def clear(self) -> None:
        self._var.set(None)

    @contextmanager
    def scope(self, correlation_id: str | None) -> Iterator[str | None]:
        """Bind ``correlation_id`` for the duration of the block and restore the previous value."""

        token = self._var.set(correlation_id)
        log_debug("correlation_bound", correlation_id=correlation_id)
        try:
            yield correlation_id
        finally:
            self._var.reset(token)


class StaticCorrelator:
    """Correlation source that always returns the same identifier."""

    def __init__(self, correlation_id: str | None) -> None:
        self._correlation_id = correlation_id

    def get_id(self) -> str | None:
        return self._correlation_id


__all__ = ["ContextCorrelator", "StaticCorrelator"]
