"""JSON renderer for machine-readable log records.

Purpose
-------
Emit each entry as one JSON object: ``timestamp``, ``level``, ``message``, then
metadata in insertion order with the ``error`` field reduced to its
``{name, message, stack}`` shell. Pretty mode indents the record for human
inspection; compact mode keeps it on one line.
"""

from __future__ import annotations

import json
from typing import Any, Final

from ...application.normalize import json_default, normalize_error
from ...domain.entry import Entry

ERROR_KEY: Final[str] = "error"
_PRETTY_INDENT: Final[int] = 2


class StructuredRenderer:
    """Render entries as JSON documents.

    Examples
    --------
    >>> from guild_logger.domain.entry import LogLevel
    >>> entry = Entry("2024-05-01 10:00:00", LogLevel.INFO, "ready", {"port": 8080})
    >>> StructuredRenderer().render(entry)
    '{"timestamp":"2024-05-01 10:00:00","level":"info","message":"ready","port":8080}'
    """

    def __init__(self, *, pretty: bool = False) -> None:
        self.pretty = pretty

    def build_record(self, entry: Entry) -> dict[str, Any]:
        """Return the record as a plain dictionary before encoding."""

        record: dict[str, Any] = dict(entry.items())
        if ERROR_KEY in record:
            normalized = normalize_error(record[ERROR_KEY])
            if normalized is not None:
                record[ERROR_KEY] = normalized
        return record

    def render(self, entry: Entry) -> str:
        record = self.build_record(entry)
        if self.pretty:
            return json.dumps(record, indent=_PRETTY_INDENT, ensure_ascii=False, default=json_default)
        return json.dumps(record, separators=(",", ":"), ensure_ascii=False, default=json_default)


__all__ = ["StructuredRenderer"]
