"""Domain value objects describing a single log entry.

Purpose
-------
Anchor the per-call data model: the ordered level set, the error shell, the
call-site tuple, and the immutable :class:`Entry` handed to renderers. The
module performs no I/O.

Contents
--------
* :class:`LogLevel` – ordered severities (``error`` most severe).
* :class:`NormalizedError` – serialisable ``{name, message, stack}`` shell.
* :class:`CallSite` – ``(function_name, file_name)`` of the application caller.
* :class:`Entry` – timestamped, leveled message plus enriched metadata.
* :data:`RESERVED_KEYS` – keys that caller metadata can never overwrite.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Final, Iterator, Mapping, NamedTuple, TypedDict

from .errors import InvalidOption

Meta = Mapping[str, Any]

RESERVED_KEYS: Final[frozenset[str]] = frozenset({"timestamp", "level", "message"})
UNKNOWN: Final[str] = "unknown"


class LogLevel(str, Enum):
    """Fixed ordered set of severities.

    Examples
    --------
    >>> LogLevel.parse("WARNING") is LogLevel.WARN
    True
    >>> LogLevel.INFO.enables(LogLevel.ERROR), LogLevel.INFO.enables(LogLevel.DEBUG)
    (True, False)
    """

    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    VERBOSE = "verbose"
    DEBUG = "debug"

    @property
    def rank(self) -> int:
        """Severity rank where ``0`` is the most severe."""

        return _RANKS[self]

    def enables(self, other: "LogLevel") -> bool:
        """Return ``True`` when ``other`` passes a gate configured at ``self``."""

        return other.rank <= self.rank

    @classmethod
    def parse(cls, value: "LogLevel | str") -> "LogLevel":
        if isinstance(value, LogLevel):
            return value
        if not isinstance(value, str):
            raise InvalidOption(f"Log level must be a string, got {type(value).__name__}")
        normalized = value.strip().lower()
        normalized = _ALIASES.get(normalized, normalized)
        try:
            return cls(normalized)
        except ValueError as exc:
            choices = ", ".join(level.value for level in cls)
            raise InvalidOption(f"Unknown log level {value!r}; expected one of: {choices}") from exc

    def __str__(self) -> str:
        return self.value


_RANKS: Final[dict[LogLevel, int]] = {level: index for index, level in enumerate(LogLevel)}
_ALIASES: Final[dict[str, str]] = {"warning": "warn"}


class NormalizedError(TypedDict):
    """Flattened, JSON-safe shell of an error value.

    The original error object is never handed to a serialiser; renderers
    only see this record.
    """

    name: str
    message: str
    stack: str


class CallSite(NamedTuple):
    """Location of the application frame that issued a log call."""

    function_name: str = UNKNOWN
    file_name: str = UNKNOWN


@dataclass(frozen=True, slots=True)
class Entry:
    """Unit produced per log call.

    ``timestamp``, ``level`` and ``message`` are always present. Meta keys that
    collide with them are dropped at construction so renderers can rely on
    :meth:`items` never yielding a reserved key twice.

    Examples
    --------
    >>> entry = Entry("2024-01-01 00:00:00", LogLevel.INFO, "hi", {"level": "x", "a": 1})
    >>> list(entry.items())
    [('timestamp', '2024-01-01 00:00:00'), ('level', 'info'), ('message', 'hi'), ('a', 1)]
    """

    timestamp: str
    level: LogLevel
    message: str
    meta: Meta = field(default_factory=dict)

    def __post_init__(self) -> None:
        cleaned = {key: value for key, value in self.meta.items() if key not in RESERVED_KEYS}
        object.__setattr__(self, "meta", MappingProxyType(cleaned))

    @property
    def correlation_id(self) -> str | None:
        value = self.meta.get("correlationId")
        return str(value) if value else None

    def head_items(self) -> tuple[tuple[str, Any], ...]:
        return (("timestamp", self.timestamp), ("level", self.level.value), ("message", self.message))

    def items(self) -> Iterator[tuple[str, Any]]:
        """Yield reserved keys first, then metadata in insertion order."""

        yield from self.head_items()
        yield from self.meta.items()


__all__ = [
    "LogLevel",
    "Meta",
    "NormalizedError",
    "CallSite",
    "Entry",
    "RESERVED_KEYS",
    "UNKNOWN",
]
