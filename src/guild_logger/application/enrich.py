"""Metadata enrichment with correlation id and call site.

Purpose
-------
Merge caller-supplied metadata with the contextual fields every entry carries:
``correlationId`` (when active), ``function`` and ``file``.

Precedence
----------
Enrichment fields are appended after caller metadata and overwrite any
caller-supplied ``correlationId``/``function``/``file`` values.
"""

from __future__ import annotations

from typing import Any

from ..domain.entry import UNKNOWN, CallSite, Meta
from ..domain.errors import EnrichmentFailure, Outcome
from .ports import CallerResolver, CorrelationSource

CORRELATION_KEY = "correlationId"
FUNCTION_KEY = "function"
FILE_KEY = "file"


class EntryEnricher:
    """Attach correlation and caller context to metadata.

    Examples
    --------
    >>> class Fixed:
    ...     def get_id(self):
    ...         return "req-7"
    >>> class Here:
    ...     def resolve(self, skip_frames=0):
    ...         return CallSite("handler", "app.py")
    >>> EntryEnricher(Fixed(), Here()).enrich({"userId": 42, "file": "x"}).value
    {'userId': 42, 'correlationId': 'req-7', 'function': 'handler', 'file': 'app.py'}
    """

    def __init__(self, correlator: CorrelationSource | None, resolver: CallerResolver) -> None:
        self._correlator = correlator
        self._resolver = resolver

    def enrich(self, meta: Meta | None, *, skip_frames: int = 0) -> Outcome[dict[str, Any]]:
        """Return the enriched metadata; ``failure`` is set when a collaborator raised.

        The value is always usable: fields whose collaborator failed fall back
        to "absent" (correlation id) or ``"unknown"`` (call site).
        """

        enriched: dict[str, Any] = dict(meta or {})
        for key in (CORRELATION_KEY, FUNCTION_KEY, FILE_KEY):
            enriched.pop(key, None)

        failures: list[str] = []
        correlation = Outcome.attempt(EnrichmentFailure, self._correlation_id)
        if not correlation.ok:
            failures.append(f"correlator: {correlation.failure}")
        elif correlation.value:
            enriched[CORRELATION_KEY] = correlation.value

        site = Outcome.attempt(EnrichmentFailure, self._resolver.resolve, skip_frames)
        if not site.ok:
            failures.append(f"resolver: {site.failure}")
        call_site = site.value if site.ok and site.value is not None else CallSite()
        enriched[FUNCTION_KEY] = call_site.function_name or UNKNOWN
        enriched[FILE_KEY] = call_site.file_name or UNKNOWN

        if failures:
            failure = EnrichmentFailure("; ".join(failures))
            failure.__cause__ = (correlation.failure or site.failure).__cause__  # type: ignore[union-attr]
            return Outcome(value=enriched, failure=failure)
        return Outcome.success(enriched)

    def _correlation_id(self) -> str | None:
        if self._correlator is None:
            return None
        value = self._correlator.get_id()
        return str(value) if value else None


__all__ = ["EntryEnricher", "CORRELATION_KEY", "FUNCTION_KEY", "FILE_KEY"]
