"""Public plugin SDK logging interface."""

from packages.pluginlog_sdk.logger import (
    debug,
    error,
    info,
    mask_field_values_with_field_keys,
    mask_message_regexes,
    mask_message_strings,
    new_root_provider_logger,
    new_root_sdk_logger,
    omit_log_with_field_keys,
    omit_log_with_message_regexes,
    omit_log_with_message_strings,
    set_field,
    trace,
    warn,
)
from packages.pluginlog_sdk.sink import new_sink, options_from_settings
from packages.pluginlog_shared.logging import (
    Context,
    Level,
    LoggerOptions,
    Options,
    background,
    set_sink,
)

__all__ = [
    "background",
    "Context",
    "debug",
    "error",
    "info",
    "Level",
    "LoggerOptions",
    "mask_field_values_with_field_keys",
    "mask_message_regexes",
    "mask_message_strings",
    "new_root_provider_logger",
    "new_root_sdk_logger",
    "new_sink",
    "omit_log_with_field_keys",
    "omit_log_with_message_regexes",
    "omit_log_with_message_strings",
    "Options",
    "options_from_settings",
    "set_field",
    "set_sink",
    "trace",
    "warn",
]
