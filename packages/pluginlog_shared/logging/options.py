"""Logger construction options and caller-facing root logger options.

``LoggerOptions`` describes how a sink logger is built and is recorded next to
every logger stored in a context. ``Options`` is what SDK callers pass when
creating a root logger; ``Options.resolve`` applies the documented defaults.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, TextIO

from .levels import Level


class Role(str, Enum):
    """Subsystem owning a root logger and its policy store."""

    SDK = "sdk"
    PROVIDER = "provider"

    @property
    def default_logger_name(self) -> str:
        """Return the root logger name used when callers do not set one."""
        return self.value


@dataclass(frozen=True, slots=True)
class LoggerOptions:
    """Options used to construct one ``StructuredLogger``."""

    name: str = ""
    level: Level = Level.NO_LEVEL
    output: TextIO | None = None
    include_location: bool = False
    include_time: bool = True
    additional_location_offset: int = 0
    json_format: bool = False
    independent_levels: bool = False

    def copy(self, **changes: Any) -> LoggerOptions:
        """Return a copy with ``changes`` applied; the original is untouched."""
        return replace(self, **changes)


@dataclass(frozen=True, slots=True)
class Options:
    """Caller-facing options for creating a root logger.

    Defaults:
        name: role name (``"sdk"`` or ``"provider"``)
        level: ``Level.NO_LEVEL``; becomes ``TRACE`` when no sink is present
        include_location: ``True``
        include_time: ``True``
        output: ``None`` (standard error)
        additional_location_offset: ``0``
    """

    name: str = ""
    level: Level = Level.NO_LEVEL
    include_location: bool = True
    include_time: bool = True
    output: TextIO | None = None
    additional_location_offset: int = 0

    def resolve(self, role: Role) -> Options:
        """Return options with the role's default name applied."""
        if self.name:
            return self
        return replace(self, name=role.default_logger_name)

    def standalone_logger_options(self) -> LoggerOptions:
        """Build sink options for a root logger created without a host sink."""
        level = Level.TRACE if self.level == Level.NO_LEVEL else self.level
        return LoggerOptions(
            name=self.name,
            level=level,
            output=self.output,
            include_location=self.include_location,
            include_time=self.include_time,
            additional_location_offset=self.additional_location_offset,
            json_format=True,
            independent_levels=True,
        )
