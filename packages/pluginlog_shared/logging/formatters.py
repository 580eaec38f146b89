"""Record formatters for plugin sinks.

Design goals:
- JSON lines with stable ``@``-prefixed metadata keys for machine consumers.
- A plain text rendering with the same content for interactive use.
- Field precedence matches emission order: later pairs override earlier ones.
"""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from typing import Any

from . import fields
from .levels import Level


def _level_label(record: logging.LogRecord) -> str:
    """Return the lowercase plugin level name for a record."""
    try:
        return Level(record.levelno).label
    except ValueError:
        return record.levelname.lower()


def _record_fields(record: logging.LogRecord) -> dict[str, Any]:
    """Return the structured fields attached to a record, if any."""
    pairs = getattr(record, fields.RECORD_FIELDS_ATTR, None)
    if not pairs:
        return {}
    return fields.pairs_to_dict(pairs)


def _timestamp(record: logging.LogRecord) -> str:
    return datetime.fromtimestamp(record.created, tz=UTC).isoformat(
        timespec="microseconds"
    )


class JsonFormatter(logging.Formatter):
    """Emit newline-delimited JSON records with ``@`` metadata keys."""

    def __init__(self, *, include_time: bool = True, include_location: bool = False) -> None:
        super().__init__()
        self._include_time = include_time
        self._include_location = include_location

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            fields.LEVEL: _level_label(record),
            fields.MESSAGE: record.getMessage(),
            fields.MODULE: record.name,
        }
        if self._include_time:
            payload[fields.TIMESTAMP] = _timestamp(record)
        if self._include_location:
            payload[fields.CALLER] = f"{record.pathname}:{record.lineno}"

        payload.update(_record_fields(record))

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str, separators=(",", ":"))


class PlainFormatter(logging.Formatter):
    """Human-readable formatter that appends structured fields as ``k=v``."""

    def __init__(self, *, include_time: bool = True, include_location: bool = False) -> None:
        super().__init__()
        self._include_time = include_time
        self._include_location = include_location

    def format(self, record: logging.LogRecord) -> str:
        parts: list[str] = []
        if self._include_time:
            parts.append(_timestamp(record))
        parts.append(f"[{_level_label(record).upper()}]")
        if self._include_location:
            parts.append(f"{record.pathname}:{record.lineno}:")

        prefix = " ".join(parts)
        line = f"{prefix} {record.name}: {record.getMessage()}"

        record_fields = _record_fields(record)
        if record_fields:
            suffix = " ".join(f"{key}={value}" for key, value in record_fields.items())
            line = f"{line}: {suffix}"

        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line
