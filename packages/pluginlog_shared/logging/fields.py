"""Canonical field names and field-map merging for plugin log entries.

The ``@``-prefixed keys are reserved for record metadata emitted by the
formatters; caller-supplied fields are written alongside them unprefixed.
"""

from __future__ import annotations

from typing import Any, Mapping

LEVEL = "@level"
MESSAGE = "@message"
MODULE = "@module"
TIMESTAMP = "@timestamp"
CALLER = "@caller"

# LogRecord attribute carrying the ordered key/value pairs of one entry.
RECORD_FIELDS_ATTR = "pluginlog_fields"

FieldPairs = list[tuple[str, Any]]


def merge_fields(*field_maps: Mapping[str, Any] | None) -> FieldPairs:
    """Flatten field maps into ordered key/value pairs.

    Keys keep the position where they were first seen while the value of the
    last map that supplied them wins. ``None`` entries are skipped.
    """
    merged: dict[str, Any] = {}
    for field_map in field_maps:
        if not field_map:
            continue
        for key, value in field_map.items():
            merged[str(key)] = value
    return list(merged.items())


def pairs_to_dict(*pair_lists: FieldPairs) -> dict[str, Any]:
    """Collapse pair lists into one mapping, later pairs overriding earlier."""
    output: dict[str, Any] = {}
    for pairs in pair_lists:
        for key, value in pairs:
            output[key] = value
    return output
