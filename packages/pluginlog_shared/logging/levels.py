"""Severity levels shared by plugin loggers and their sinks."""

from __future__ import annotations

import logging
from enum import IntEnum


class Level(IntEnum):
    """Ordered severities aligned with standard library numeric levels.

    ``NO_LEVEL`` marks an unset level and is never used to gate output.
    """

    NO_LEVEL = 0
    TRACE = 5
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR
    OFF = logging.CRITICAL + 10

    @property
    def label(self) -> str:
        """Return the lowercase level name used in emitted records."""
        return self.name.lower()

    @classmethod
    def from_name(cls, name: str | None) -> Level | None:
        """Parse a level name case-insensitively; return ``None`` if unknown."""
        if name is None:
            return None
        normalized = name.strip().upper()
        if normalized == "":
            return None
        if normalized == "WARNING":
            return cls.WARN
        if normalized == "NO_LEVEL":
            return None
        try:
            return cls[normalized]
        except KeyError:
            return None
