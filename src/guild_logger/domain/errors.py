"""Domain-level exception hierarchy.

Purpose
-------
Expose the error taxonomy shared by the emitter, the adapters, and consuming
applications. Configuration problems surface to the caller; per-call emission
failures never do. They are carried inside :class:`Outcome` values and end up
in the fallback diagnostic line instead.

Contents
--------
* :class:`GuildLoggerError` – umbrella base class for all library errors.
* :class:`InvalidOption` – configuration values that cannot be interpreted.
* :class:`EmitFailure` – base class for failures local to a single log call.
* :class:`EnrichmentFailure` / :class:`NormalizationFailure` /
  :class:`RenderFailure` / :class:`SinkFailure` – the concrete per-call kinds.
* :class:`Outcome` – success-or-failure result returned by pipeline steps.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")


class GuildLoggerError(Exception):
    """Base type for all exceptions defined by ``guild_logger``.

    Why
    ----
    Provide a single catch-all type for consumers that do not need fine-grained
    handling.
    """


class InvalidOption(GuildLoggerError, ValueError):
    """Raised when a configuration value (level, flag) cannot be interpreted.

    Typical Sources
    ---------------
    :meth:`LogLevel.parse`, :func:`guild_logger.config.options_from_env` and
    CLI option normalisation. Never raised from inside a log call.
    """


class EmitFailure(GuildLoggerError):
    """Base class for failures scoped to one log call.

    The original exception is always attached as ``__cause__``.
    """


class EnrichmentFailure(EmitFailure):
    """The correlation source or the caller resolver raised."""


class NormalizationFailure(EmitFailure):
    """An error-shaped value could not be reduced to its serialisable shell."""


class RenderFailure(EmitFailure):
    """The renderer could not format the entry (for example a circular value)."""


class SinkFailure(EmitFailure):
    """The transport raised while writing a rendered entry."""


@dataclass(frozen=True, slots=True)
class Outcome(Generic[T]):
    """Result of a pipeline step: either ``value`` or ``failure`` is meaningful.

    Examples
    --------
    >>> Outcome.success(3).ok
    True
    >>> Outcome.attempt(RenderFailure, int, "x").failure.__class__.__name__
    'RenderFailure'
    """

    value: T | None = None
    failure: EmitFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, value: T) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def attempt(
        cls,
        failure_type: type[EmitFailure],
        func: Callable[..., T],
        *args: Any,
        **kwargs: Any,
    ) -> "Outcome[T]":
        """Run ``func`` and wrap any :class:`Exception` into ``failure_type``."""

        try:
            return cls(value=func(*args, **kwargs))
        except Exception as exc:  # noqa: BLE001 - converted into a typed failure
            failure = failure_type(f"{type(exc).__name__}: {exc}")
            failure.__cause__ = exc
            return cls(failure=failure)


__all__ = [
    "GuildLoggerError",
    "InvalidOption",
    "EmitFailure",
    "EnrichmentFailure",
    "NormalizationFailure",
    "RenderFailure",
    "SinkFailure",
    "Outcome",
]
