"""Environment variable adapter.

Purpose
-------
Translate process environment variables into a flat option mapping used by
:func:`guild_logger.config.options_from_env`.

Key behaviours
--------------
* Enforces a configurable prefix (``default_env_prefix``) so only relevant keys
  are captured.
* Lower-cases the remaining key (``GUILD_LOGGER_LEVEL`` → ``level``).
* Performs light type coercion for common scalar types (bools, ints, floats,
  ``null``/``none``).
"""

from __future__ import annotations

import os
from typing import Mapping

from ...observability import log_debug


def default_env_prefix(slug: str) -> str:
    """Return the canonical environment prefix for *slug*.

    Examples
    --------
    >>> default_env_prefix('guild-logger')
    'GUILD_LOGGER'
    """

    return slug.replace("-", "_").upper()


class DefaultEnvLoader:
    """Load environment variables that belong to the logger namespace."""

    def __init__(self, *, environ: Mapping[str, str] | None = None) -> None:
        """Initialise the loader with a specific ``environ`` mapping for testability."""

        self._environ = os.environ if environ is None else environ

    def load(self, prefix: str) -> dict[str, object]:
        """Return coerced values for variables carrying *prefix*.

        Examples
        --------
        >>> loader = DefaultEnvLoader(environ={'DEMO_JSON': 'true', 'DEMO_LEVEL': 'debug', 'OTHER': '1'})
        >>> sorted(loader.load('DEMO').items())
        [('json', True), ('level', 'debug')]
        """

        prefix = f"{prefix}_" if prefix and not prefix.endswith("_") else prefix
        collected: dict[str, object] = {}
        for key, value in self._environ.items():
            if prefix and not key.startswith(prefix):
                continue
            stripped = key[len(prefix) :] if prefix else key
            if not stripped:
                continue
            collected[stripped.lower()] = coerce(value)
        log_debug("env_variables_loaded", prefix=prefix, keys=sorted(collected.keys()))
        return collected


def coerce(value: str) -> object:
    """Coerce textual values to Python primitives where possible.

    Examples
    --------
    >>> coerce('true'), coerce('10'), coerce('3.5'), coerce('hello')
    (True, 10, 3.5, 'hello')
    """

    lowered = value.lower()
    if lowered in {"true", "false"}:
        return lowered == "true"
    if lowered in {"null", "none"}:
        return None
    try:
        if value.isdigit() or (value.startswith("-") and value[1:].isdigit()):
            return int(value)
        return float(value)
    except ValueError:
        return value


__all__ = ["DefaultEnvLoader", "coerce", "default_env_prefix"]
