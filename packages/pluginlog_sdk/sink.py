"""Host-side sink construction from plugin log settings.

A host calls ``new_sink`` once per plugin context; root loggers created from
that context afterwards become named children of the sink.
"""

from __future__ import annotations

import logging

from packages.pluginlog_shared.config import PluginLogSettings, load_settings
from packages.pluginlog_shared.logging import registry
from packages.pluginlog_shared.logging.context import Context
from packages.pluginlog_shared.logging.levels import Level
from packages.pluginlog_shared.logging.options import LoggerOptions, Options, Role
from packages.pluginlog_shared.logging.sink import StructuredLogger

logger = logging.getLogger(__name__)


def _sink_handler(settings: PluginLogSettings) -> logging.Handler | None:
    """Return a file handler for ``log_path``; ``None`` selects standard error."""
    if settings.log_path == "":
        return None
    try:
        return logging.FileHandler(settings.log_path, mode="a", encoding="utf-8")
    except OSError as exc:
        logger.warning(
            "Unable to open plugin log path %s; writing to stderr: %s",
            settings.log_path,
            exc,
        )
        return None


def sink_options(settings: PluginLogSettings) -> LoggerOptions:
    """Build sink construction options from ``settings``."""
    level = settings.sink_level()
    if level is None:
        logger.warning(
            "Invalid plugin log level %r; sink output disabled", settings.log
        )
        level = Level.OFF

    return LoggerOptions(
        level=level,
        include_time=True,
        json_format=settings.json_output,
        independent_levels=True,
    )


def new_sink(ctx: Context, settings: PluginLogSettings | None = None) -> Context:
    """Return a context carrying a host sink configured from ``settings``.

    When ``log_path`` is set the sink appends to that file until the host
    calls ``close()`` on the sink returned by ``get_sink``.
    """
    resolved = settings if settings is not None else load_settings()
    options = sink_options(resolved)
    sink = StructuredLogger(options, _sink_handler(resolved))
    return registry.set_sink(ctx, sink, options)


def options_from_settings(
    settings: PluginLogSettings, role: Role = Role.SDK
) -> Options:
    """Return root logger options carrying the configured level for ``role``."""
    return Options(level=settings.role_level(role))
