"""Structured sink loggers backed by the standard ``logging`` module.

Each ``StructuredLogger`` wraps an unregistered ``logging.Logger`` so plugin
loggers never appear in (or inherit from) the host's logger hierarchy. A
logger and every child derived from it share one handler, so output
formatting is decided once when the root of the tree is constructed.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Protocol, Sequence

from . import fields
from .formatters import JsonFormatter, PlainFormatter
from .levels import Level
from .options import LoggerOptions


class Logger(Protocol):
    """Leveled, named sink handle stored in a context."""

    @property
    def name(self) -> str:
        """Return the full dotted name of this logger."""

    @property
    def level(self) -> Level:
        """Return the minimum level this logger emits."""

    def named(self, name: str) -> Logger:
        """Derive a child logger whose name is suffixed with ``name``."""

    def set_level(self, level: Level) -> None:
        """Change the minimum level of this logger."""

    def with_fields(self, *pairs: tuple[str, Any]) -> Logger:
        """Return a logger that includes ``pairs`` in every record."""

    def implied_args(self) -> fields.FieldPairs:
        """Return the fields permanently bound to this logger."""

    def close(self) -> None:
        """Release the output this logger writes to."""

    def log(
        self,
        level: Level,
        message: str,
        args: Sequence[tuple[str, Any]] = (),
        *,
        stacklevel: int = 1,
    ) -> None:
        """Emit one record at ``level`` with transient ``args``."""


class _LevelCell:
    """Mutable level holder shared by loggers that do not level independently."""

    __slots__ = ("value",)

    def __init__(self, value: Level) -> None:
        self.value = value


def build_formatter(options: LoggerOptions) -> logging.Formatter:
    """Return the formatter matching ``options``."""
    formatter_cls = JsonFormatter if options.json_format else PlainFormatter
    return formatter_cls(
        include_time=options.include_time,
        include_location=options.include_location,
    )


def _stdlib_logger(name: str, handler: logging.Handler) -> logging.Logger:
    """Create an unregistered stdlib logger writing only to ``handler``."""
    logger = logging.Logger(name or "root")
    logger.propagate = False
    logger.addHandler(handler)
    return logger


class StructuredLogger:
    """``Logger`` implementation emitting through one shared handler.

    ``handler`` defaults to a stream handler on ``options.output`` (standard
    error when unset). A handler without a formatter receives the one
    described by ``options``. ``level`` and ``implied`` are set when deriving
    children so they share the parent's handler and, unless levels are
    independent, its level.
    """

    def __init__(
        self,
        options: LoggerOptions,
        handler: logging.Handler | None = None,
        *,
        level: _LevelCell | None = None,
        implied: tuple[tuple[str, Any], ...] = (),
    ) -> None:
        if handler is None:
            handler = logging.StreamHandler(
                options.output if options.output is not None else sys.stderr
            )
        if handler.formatter is None:
            handler.setFormatter(build_formatter(options))
        if level is None:
            level = _LevelCell(
                Level.INFO if options.level == Level.NO_LEVEL else options.level
            )

        self._options = options
        self._name = options.name
        self._handler = handler
        self._logger = _stdlib_logger(options.name, handler)
        self._level = level
        self._implied = implied

    @property
    def name(self) -> str:
        return self._name

    @property
    def level(self) -> Level:
        return self._level.value

    def _derive(
        self,
        *,
        name: str,
        level: _LevelCell,
        implied: tuple[tuple[str, Any], ...],
    ) -> StructuredLogger:
        return StructuredLogger(
            self._options.copy(name=name),
            self._handler,
            level=level,
            implied=implied,
        )

    def named(self, name: str) -> StructuredLogger:
        full_name = f"{self._name}.{name}" if self._name else name
        level = (
            _LevelCell(self._level.value)
            if self._options.independent_levels
            else self._level
        )
        return self._derive(name=full_name, level=level, implied=self._implied)

    def set_level(self, level: Level) -> None:
        self._level.value = level

    def with_fields(self, *pairs: tuple[str, Any]) -> StructuredLogger:
        return self._derive(
            name=self._name,
            level=self._level,
            implied=self._implied + tuple((str(key), value) for key, value in pairs),
        )

    def implied_args(self) -> fields.FieldPairs:
        return list(self._implied)

    def close(self) -> None:
        """Close the handler shared by every logger derived from this one."""
        self._handler.close()

    def is_enabled(self, level: Level) -> bool:
        """Return whether a record at ``level`` would be emitted."""
        current = self._level.value
        return current != Level.OFF and level != Level.OFF and level >= current

    def log(
        self,
        level: Level,
        message: str,
        args: Sequence[tuple[str, Any]] = (),
        *,
        stacklevel: int = 1,
    ) -> None:
        if not self.is_enabled(level):
            return
        self._logger.log(
            int(level),
            message,
            extra={fields.RECORD_FIELDS_ATTR: [*self._implied, *args]},
            stacklevel=stacklevel + 1 + self._options.additional_location_offset,
        )

    def trace(self, message: str, *args: tuple[str, Any]) -> None:
        """Emit at TRACE."""
        self.log(Level.TRACE, message, args, stacklevel=2)

    def debug(self, message: str, *args: tuple[str, Any]) -> None:
        """Emit at DEBUG."""
        self.log(Level.DEBUG, message, args, stacklevel=2)

    def info(self, message: str, *args: tuple[str, Any]) -> None:
        """Emit at INFO."""
        self.log(Level.INFO, message, args, stacklevel=2)

    def warn(self, message: str, *args: tuple[str, Any]) -> None:
        """Emit at WARN."""
        self.log(Level.WARN, message, args, stacklevel=2)

    def error(self, message: str, *args: tuple[str, Any]) -> None:
        """Emit at ERROR."""
        self.log(Level.ERROR, message, args, stacklevel=2)
