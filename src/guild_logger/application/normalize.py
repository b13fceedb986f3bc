"""Error normalisation for serialisable log output.

Purpose
-------
Detect error-shaped values anywhere in metadata and reduce them to a plain
``{name, message, stack}`` record, so structured serialisers never see the
original object (circular references, unreadable attributes).

Contents
--------
* :func:`is_error_like` – structural capability check.
* :func:`normalize_error` – reduce a value to :class:`NormalizedError`.
* :func:`render_stack` – full native rendering used by plain-text output.
* :func:`classify_value` – tag a meta value as error, composite or primitive.
* :func:`json_default` – ``default=`` hook shared by both renderers.
"""

from __future__ import annotations

import traceback
from collections.abc import Mapping
from typing import Any, Final, Literal

from ..domain.entry import NormalizedError
from ..domain.errors import NormalizationFailure, Outcome

ValueKind = Literal["error", "composite", "primitive"]

_ERROR_ATTRIBUTES: Final[tuple[str, ...]] = ("name", "message", "stack")
_COMPOSITE_TYPES: Final[tuple[type, ...]] = (Mapping, list, tuple, set, frozenset)


def is_error_like(value: Any) -> bool:
    """Return ``True`` for exceptions and for objects exposing ``name``/``message``/``stack``.

    Examples
    --------
    >>> is_error_like(ValueError("boom"))
    True
    >>> is_error_like({"name": "x", "message": "y", "stack": "z"})
    False
    """

    if isinstance(value, BaseException):
        return True
    try:
        return all(hasattr(value, attribute) for attribute in _ERROR_ATTRIBUTES)
    except Exception:  # noqa: BLE001 - a raising __getattr__ means "not error-like"
        return False


def normalize_error(value: Any) -> NormalizedError | None:
    """Return the serialisable shell of ``value`` or ``None`` when it is not error-like.

    Examples
    --------
    >>> normalize_error(KeyError("k"))["name"]
    'KeyError'
    >>> normalize_error(42) is None
    True
    """

    outcome = _try_normalize(value)
    return outcome.value if outcome.ok else None


def _try_normalize(value: Any) -> Outcome[NormalizedError | None]:
    if not is_error_like(value):
        return Outcome.success(None)
    return Outcome.attempt(NormalizationFailure, _shell, value)


def _shell(value: Any) -> NormalizedError:
    if isinstance(value, BaseException):
        return NormalizedError(name=type(value).__name__, message=str(value), stack=_format_exception(value))
    return NormalizedError(name=str(value.name), message=str(value.message), stack=str(value.stack))


def render_stack(value: Any) -> str:
    """Return the native multi-line rendering of an error-like ``value``."""

    if isinstance(value, BaseException):
        return _format_exception(value)
    return str(value.stack)


def _format_exception(exc: BaseException) -> str:
    return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)).rstrip("\n")


def classify_value(value: Any) -> ValueKind:
    """Tag ``value`` so renderers can switch on its kind.

    Examples
    --------
    >>> classify_value(RuntimeError()), classify_value([1]), classify_value(1)
    ('error', 'composite', 'primitive')
    """

    if is_error_like(value):
        return "error"
    if isinstance(value, _COMPOSITE_TYPES):
        return "composite"
    return "primitive"


def json_default(value: Any) -> Any:
    """Fallback encoder for :func:`json.dumps` handling errors, sets and arbitrary objects."""

    normalized = normalize_error(value)
    if normalized is not None:
        return normalized
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=repr)
    return str(value)


__all__ = [
    "ValueKind",
    "is_error_like",
    "normalize_error",
    "render_stack",
    "classify_value",
    "json_default",
]
