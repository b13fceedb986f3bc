"""Application-layer ports describing collaborator responsibilities.

Purpose
-------
Define the structural contracts the emitter depends on so correlation,
caller introspection, rendering, and transport can be swapped without touching
the pipeline.

Contents
--------
* :class:`CorrelationSource` – yields the active correlation identifier.
* :class:`CallerResolver` – locates the application frame behind a log call.
* :class:`Renderer` – formats an :class:`~guild_logger.domain.entry.Entry`.
* :class:`Sink` – level-gated transport accepting rendered entries.

System Role
-----------
The default adapters under :mod:`guild_logger.adapters` implement these
protocols; consumers may pass their own implementations to
:class:`guild_logger.core.GuildLogger`.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..domain.entry import CallSite, Entry, LogLevel


@runtime_checkable
class CorrelationSource(Protocol):
    """Expose the correlation id of the current execution context.

    This core only reads from the source; binding and clearing belong to the
    request/operation boundary that owns it.
    """

    def get_id(self) -> str | None:
        """Return the active identifier or ``None`` when nothing is bound."""


@runtime_checkable
class CallerResolver(Protocol):
    """Resolve the application call site of the current log call."""

    def resolve(self, skip_frames: int = 0) -> CallSite:
        """Return the caller, skipping ``skip_frames`` application frames beyond the first."""


@runtime_checkable
class Renderer(Protocol):
    """Turn an entry into its final textual form."""

    def render(self, entry: Entry) -> str:
        """Return the rendered entry; serialisation errors propagate."""


@runtime_checkable
class Sink(Protocol):
    """Level-gated transport for rendered entries."""

    def enabled(self, level: LogLevel) -> bool:
        """Return ``True`` when entries at ``level`` would be written."""

    def write(self, level: LogLevel, rendered: str) -> None:
        """Write ``rendered``; entries below the configured minimum are dropped."""
