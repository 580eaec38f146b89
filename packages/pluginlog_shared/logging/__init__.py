"""Shared plugin logging machinery.

This package holds the context carrier, the sink logger implementation, the
omission/masking policy engine, and the role-generic registry used by the
public SDK logging module.
"""

from .context import Context, ContextKey, background
from .fields import merge_fields
from .filtering import (
    MASK_TOKEN,
    PolicyStore,
    matches_any_key,
    matches_any_regex,
    matches_any_string,
)
from .formatters import JsonFormatter, PlainFormatter
from .levels import Level
from .options import LoggerOptions, Options, Role
from .registry import (
    get_policy,
    get_root_logger,
    get_root_logger_options,
    get_sink,
    get_sink_options,
    new_root_logger,
    set_sink,
)
from .sink import Logger, StructuredLogger

__all__ = [
    "background",
    "Context",
    "ContextKey",
    "get_policy",
    "get_root_logger",
    "get_root_logger_options",
    "get_sink",
    "get_sink_options",
    "JsonFormatter",
    "Level",
    "Logger",
    "LoggerOptions",
    "MASK_TOKEN",
    "matches_any_key",
    "matches_any_regex",
    "matches_any_string",
    "merge_fields",
    "new_root_logger",
    "Options",
    "PlainFormatter",
    "PolicyStore",
    "Role",
    "set_sink",
    "StructuredLogger",
]
