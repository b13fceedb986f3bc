"""Composition root for ``guild_logger``.

Purpose
-------
Wire correlation, caller resolution, rendering and the sink into a single
logger whose public methods never raise.

Contents
--------
* :class:`GuildLogger` – the fail-safe emitter with ``error``/``warn``/``info``/
  ``verbose``/``debug`` delegators.
* :func:`build_renderer` – select the renderer matching :class:`LoggerOptions`.
* :func:`create_logger` – convenience constructor reading the environment.

System Role
-----------
``GuildLogger.log`` is the catch-all boundary. Each pipeline step returns an
:class:`~guild_logger.domain.errors.Outcome`; render and sink failures divert
to a single diagnostic line on the fallback stream, enrichment failures are
recovered with default fields. Both kinds are reported on the package logger.
"""

from __future__ import annotations

import json
import sys
from datetime import datetime
from typing import Any, Callable, Final, TextIO

from .adapters.caller.stack import StackCallerResolver
from .adapters.renderers.plain import PlainTextRenderer
from .adapters.renderers.structured import StructuredRenderer
from .adapters.sinks.console import ConsoleSink
from .application.enrich import EntryEnricher
from .application.ports import CallerResolver, Renderer, Sink
from .config import LoggerOptions, options_from_env
from .domain.entry import Entry, LogLevel, Meta
from .domain.errors import EmitFailure, Outcome, RenderFailure, SinkFailure
from .observability import log_debug, log_error, make_event

TIMESTAMP_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"
FALLBACK_PREFIX: Final[str] = "guild_logger: log call failed"


def _local_timestamp() -> str:
    return datetime.now().strftime(TIMESTAMP_FORMAT)


def build_renderer(options: LoggerOptions) -> Renderer:
    """Return the renderer selected by ``options.json`` and ``options.pretty``.

    Examples
    --------
    >>> type(build_renderer(LoggerOptions(json=True))).__name__
    'StructuredRenderer'
    """

    if options.json:
        return StructuredRenderer(pretty=options.pretty)
    return PlainTextRenderer(colorize=options.pretty)


class GuildLogger:
    """Structured-logging façade that never lets a logging failure escape.

    Parameters
    ----------
    options:
        Configuration; defaults to :class:`LoggerOptions` with ``info`` level.
    sink:
        Transport override. Defaults to a :class:`ConsoleSink` honouring
        ``options.level`` and ``options.silent``.
    resolver:
        Caller resolver override. Defaults to :class:`StackCallerResolver`.
    renderer:
        Renderer override. Defaults to :func:`build_renderer`.
    clock:
        Zero-argument callable returning the formatted timestamp.
    fallback_stream:
        Where diagnostic lines go when the primary path fails. ``None`` means
        :data:`sys.stderr` as it is at write time.

    Examples
    --------
    >>> logger = GuildLogger(LoggerOptions(silent=True))
    >>> logger.info("started", {"port": 8080}) is None
    True
    """

    def __init__(
        self,
        options: LoggerOptions | None = None,
        *,
        sink: Sink | None = None,
        resolver: CallerResolver | None = None,
        renderer: Renderer | None = None,
        clock: Callable[[], str] | None = None,
        fallback_stream: TextIO | None = None,
    ) -> None:
        self.options = options if options is not None else LoggerOptions()
        self.sink: Sink = sink if sink is not None else ConsoleSink(self.options.level, silent=self.options.silent)
        self.renderer: Renderer = renderer if renderer is not None else build_renderer(self.options)
        self._enricher = EntryEnricher(self.options.correlator, resolver or StackCallerResolver())
        self._clock = clock or _local_timestamp
        self._fallback_stream = fallback_stream

    def is_enabled(self, level: LogLevel | str) -> bool:
        return self.sink.enabled(LogLevel.parse(level))

    def log(self, level: LogLevel | str, message: str, meta: Meta | None = None, *, skip_frames: int = 0) -> None:
        """Emit one entry; every failure is contained inside this call."""

        try:
            failure = self._emit(LogLevel.parse(level), message, meta, skip_frames)
        except Exception as exc:  # noqa: BLE001 - logging must never raise into the caller
            failure = EmitFailure(f"{type(exc).__name__}: {exc}")
            failure.__cause__ = exc
        if failure is not None:
            self._fallback(level, message, meta, failure)

    def _emit(self, level: LogLevel, message: str, meta: Meta | None, skip_frames: int) -> EmitFailure | None:
        if not self.sink.enabled(level):
            return None
        enriched = self._enricher.enrich(meta, skip_frames=skip_frames)
        if not enriched.ok:
            log_debug("enrichment_failed", **make_event("enrich", level.value, {"reason": str(enriched.failure)}))
        entry = Entry(timestamp=self._clock(), level=level, message=str(message), meta=enriched.value or {})
        rendered = Outcome.attempt(RenderFailure, self.renderer.render, entry)
        if not rendered.ok:
            return rendered.failure
        written = Outcome.attempt(SinkFailure, self.sink.write, level, rendered.value)
        return written.failure

    def _fallback(self, level: LogLevel | str, message: str, meta: Meta | None, failure: EmitFailure) -> None:
        kind = type(failure).__name__
        log_error("emit_failed", **make_event("emit", str(level), {"kind": kind, "reason": str(failure)}))
        line = f"{FALLBACK_PREFIX} ({kind}: {failure}) with params ({level}, {message}, {_meta_string(meta)})\n"
        stream = self._fallback_stream or sys.stderr
        try:
            stream.write(line)
            stream.flush()
        except (OSError, ValueError):
            pass

    def error(self, message: str, meta: Meta | None = None) -> None:
        self.log(LogLevel.ERROR, message, meta)

    def warn(self, message: str, meta: Meta | None = None) -> None:
        self.log(LogLevel.WARN, message, meta)

    warning = warn

    def info(self, message: str, meta: Meta | None = None) -> None:
        self.log(LogLevel.INFO, message, meta)

    def verbose(self, message: str, meta: Meta | None = None) -> None:
        self.log(LogLevel.VERBOSE, message, meta)

    def debug(self, message: str, meta: Meta | None = None) -> None:
        self.log(LogLevel.DEBUG, message, meta)


def _meta_string(meta: Any) -> str:
    try:
        return json.dumps(meta, default=str)
    except Exception as exc:  # noqa: BLE001 - diagnostic best effort
        return f"(Cannot stringify meta: {exc})"


def create_logger(**overrides: Any) -> GuildLogger:
    """Return a :class:`GuildLogger` configured from ``GUILD_LOGGER_*`` plus ``overrides``."""

    return GuildLogger(options_from_env().with_overrides(**overrides))


__all__ = ["GuildLogger", "build_renderer", "create_logger", "TIMESTAMP_FORMAT", "FALLBACK_PREFIX"]
