"""Immutable context carrier for plugin loggers and their policies.

A ``Context`` is threaded explicitly through plugin calls. Setting a value
never mutates the receiver: it returns a new carrier holding a copy of the
remaining entries. Contexts already handed to other callers keep seeing
exactly what they saw before.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Any, Iterator, Mapping


class ContextKey(str, Enum):
    """Slots understood by the plugin logging registry."""

    SINK = "sink"
    SINK_OPTIONS = "sink_options"
    SDK_ROOT_LOGGER = "sdk_root_logger"
    SDK_ROOT_LOGGER_OPTIONS = "sdk_root_logger_options"
    SDK_ROOT_POLICY = "sdk_root_policy"
    PROVIDER_ROOT_LOGGER = "provider_root_logger"
    PROVIDER_ROOT_LOGGER_OPTIONS = "provider_root_logger_options"
    PROVIDER_ROOT_POLICY = "provider_root_policy"


class Context(Mapping[ContextKey, Any]):
    """Read-only mapping of context slots to values."""

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[ContextKey, Any] | None = None) -> None:
        self._values: Mapping[ContextKey, Any] = MappingProxyType(dict(values or {}))

    def __getitem__(self, key: ContextKey) -> Any:
        return self._values[key]

    def __iter__(self) -> Iterator[ContextKey]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        keys = ", ".join(key.value for key in self._values)
        return f"Context({keys})"

    def value(self, key: ContextKey) -> Any | None:
        """Return the value stored under ``key`` or ``None``."""
        return self._values.get(key)

    def with_value(self, key: ContextKey, value: Any) -> Context:
        """Return a new context with ``key`` set to ``value``."""
        updated = dict(self._values)
        updated[key] = value
        return Context(updated)


def background() -> Context:
    """Return an empty root context."""
    return Context()
