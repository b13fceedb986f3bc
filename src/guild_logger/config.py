"""Logger configuration.

Purpose
-------
Hold the options recognised by :class:`guild_logger.core.GuildLogger` and load
them from the process environment.

Contents
--------
* :class:`LoggerOptions` – immutable option set (``level``, ``json``,
  ``pretty``, ``silent``, ``correlator``).
* :func:`options_from_env` – build options from ``GUILD_LOGGER_*`` variables.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Final, Mapping

from .adapters.env.default import DefaultEnvLoader, default_env_prefix
from .application.ports import CorrelationSource
from .domain.entry import LogLevel
from .domain.errors import InvalidOption
from .observability import log_debug

ENV_PREFIX: Final[str] = default_env_prefix("guild-logger")
_FLAG_KEYS: Final[tuple[str, ...]] = ("json", "pretty", "silent")


@dataclass(frozen=True, slots=True)
class LoggerOptions:
    """Options selecting gating, rendering mode and correlation source.

    Attributes
    ----------
    level:
        Minimum severity emitted by the sink.
    json:
        ``True`` selects the structured renderer, ``False`` plain text.
    pretty:
        Indented JSON in structured mode, coloured level token in plain mode.
    silent:
        Run the full pipeline but suppress every sink write.
    correlator:
        Source of the active correlation identifier, or ``None``.

    Examples
    --------
    >>> LoggerOptions(level="debug").level
    <LogLevel.DEBUG: 'debug'>
    """

    level: LogLevel = LogLevel.INFO
    json: bool = False
    pretty: bool = False
    silent: bool = False
    correlator: CorrelationSource | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "level", LogLevel.parse(self.level))
        for key in _FLAG_KEYS:
            value = getattr(self, key)
            if not isinstance(value, bool):
                raise InvalidOption(f"Option {key!r} must be a boolean, got {value!r}")

    def with_overrides(self, **changes: Any) -> "LoggerOptions":
        """Return a copy with ``changes`` applied; ``None`` values are ignored."""

        return replace(self, **{key: value for key, value in changes.items() if value is not None})

    def describe(self) -> dict[str, object]:
        """Return a JSON-friendly view (the correlator is reported by type name)."""

        return {
            "level": self.level.value,
            "json": self.json,
            "pretty": self.pretty,
            "silent": self.silent,
            "correlator": type(self.correlator).__name__ if self.correlator is not None else None,
        }


def options_from_env(
    prefix: str = ENV_PREFIX,
    environ: Mapping[str, str] | None = None,
    *,
    correlator: CorrelationSource | None = None,
) -> LoggerOptions:
    """Build :class:`LoggerOptions` from ``{prefix}_LEVEL``/``_JSON``/``_PRETTY``/``_SILENT``.

    Unknown keys are ignored; invalid values raise :class:`InvalidOption`.

    Examples
    --------
    >>> options_from_env(environ={"GUILD_LOGGER_LEVEL": "warn", "GUILD_LOGGER_JSON": "true"})
    LoggerOptions(level=<LogLevel.WARN: 'warn'>, json=True, pretty=False, silent=False, correlator=None)
    """

    values = DefaultEnvLoader(environ=environ).load(prefix)
    known: dict[str, Any] = {}
    level = values.pop("level", None)
    if level is not None:
        known["level"] = LogLevel.parse(str(level))
    for key in _FLAG_KEYS:
        if key in values:
            known[key] = values.pop(key)
    if values:
        log_debug("env_options_ignored", prefix=prefix, keys=sorted(values))
    return LoggerOptions(correlator=correlator, **known)


__all__ = ["LoggerOptions", "options_from_env", "ENV_PREFIX"]
