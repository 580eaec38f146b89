"""Unit tests for SDK and provider root logger creation."""

from __future__ import annotations

import inspect
import io
from typing import Callable

import pytest

from packages.pluginlog_sdk import (
    Context,
    LoggerOptions,
    Options,
    background,
    debug,
    error,
    info,
    new_root_provider_logger,
    new_root_sdk_logger,
    set_sink,
    trace,
    warn,
)
from packages.pluginlog_sdk.testing import multiline_json_decode
from packages.pluginlog_shared.logging import (
    Level,
    Role,
    StructuredLogger,
    get_root_logger,
    get_root_logger_options,
    get_sink,
    get_sink_options,
)


def _sink_context(output: io.StringIO, level: Level = Level.INFO) -> Context:
    options = LoggerOptions(
        name="host",
        level=level,
        output=output,
        include_time=False,
        json_format=True,
        independent_levels=True,
    )
    return set_sink(background(), StructuredLogger(options), options)


def test_root_logger_without_sink_defaults_to_trace() -> None:
    """Without a host sink the SDK logger should default to the most verbose level."""
    output = io.StringIO()
    ctx = new_root_sdk_logger(
        background(), Options(output=output, include_time=False, include_location=False)
    )

    trace(ctx, "very verbose")

    options = get_root_logger_options(ctx, Role.SDK)
    assert options is not None
    assert options.name == "sdk"
    assert options.level is Level.TRACE
    assert options.json_format is True
    assert options.independent_levels is True
    assert multiline_json_decode(output) == [
        {"@level": "trace", "@message": "very verbose", "@module": "sdk"}
    ]


def test_root_logger_creation_does_not_mutate_input_context() -> None:
    """Installing a root logger should leave the input context empty."""
    root = background()
    ctx = new_root_sdk_logger(root, Options(output=io.StringIO()))

    assert get_root_logger(root, Role.SDK) is None
    assert get_root_logger(ctx, Role.SDK) is not None


def test_root_logger_with_sink_derives_named_child() -> None:
    """With a host sink the SDK logger should be a named child inheriting options."""
    output = io.StringIO()
    ctx = new_root_sdk_logger(_sink_context(output))

    logger = get_root_logger(ctx, Role.SDK)
    options = get_root_logger_options(ctx, Role.SDK)

    assert logger is not None
    assert logger.name == "host.sdk"
    assert logger.level is Level.INFO
    assert options == LoggerOptions(
        name="sdk",
        level=Level.INFO,
        output=output,
        include_time=False,
        json_format=True,
        independent_levels=True,
    )


def test_root_logger_with_sink_overrides_level_on_logger_and_options() -> None:
    """An explicit level should apply to the live logger and the options copy."""
    output = io.StringIO()
    sink_ctx = _sink_context(output)
    ctx = new_root_sdk_logger(sink_ctx, Options(level=Level.DEBUG))

    logger = get_root_logger(ctx, Role.SDK)
    options = get_root_logger_options(ctx, Role.SDK)

    assert logger is not None and logger.level is Level.DEBUG
    assert options is not None and options.level is Level.DEBUG
    assert get_root_logger(sink_ctx, Role.SDK) is None


def test_root_logger_level_override_leaves_sink_level_alone() -> None:
    """Independent levels should keep the host sink at its own level."""
    output = io.StringIO()
    sink_ctx = _sink_context(output, level=Level.WARN)
    new_root_sdk_logger(sink_ctx, Options(level=Level.TRACE))

    sink = get_sink(sink_ctx)
    assert sink is not None and sink.level is Level.WARN
    assert get_sink_options(sink_ctx).level is Level.WARN  # type: ignore[union-attr]


def test_provider_root_logger_uses_separate_slot_and_name() -> None:
    """Provider loggers should default their name and not touch the SDK slot."""
    output = io.StringIO()
    ctx = new_root_provider_logger(_sink_context(output), Options(name="aws"))

    provider = get_root_logger(ctx, Role.PROVIDER)
    assert provider is not None and provider.name == "host.aws"
    assert get_root_logger(ctx, Role.SDK) is None

    default_named = new_root_provider_logger(background(), Options(output=output))
    assert get_root_logger_options(default_named, Role.PROVIDER).name == "provider"  # type: ignore[union-attr]


def _located_context(output: io.StringIO, offset: int = 0) -> Context:
    return new_root_sdk_logger(
        background(),
        Options(output=output, include_time=False, additional_location_offset=offset),
    )


@pytest.mark.parametrize("log_fn", [trace, debug, info, warn, error])
def test_level_functions_report_the_calling_line(
    log_fn: Callable[..., None],
) -> None:
    """Each level function should attribute the record to its call site."""
    output = io.StringIO()
    ctx = _located_context(output)

    line_number = inspect.currentframe().f_lineno + 1  # type: ignore[union-attr]
    log_fn(ctx, "where")

    caller = str(multiline_json_decode(output)[0]["@caller"])
    assert caller.endswith(f"test_root_logger.py:{line_number}")


def _log_from_wrapper(ctx: Context) -> None:
    info(ctx, "wrapped")


def test_additional_location_offset_skips_wrapper_frames() -> None:
    """An offset of one should attribute records to the wrapper's caller."""
    output = io.StringIO()
    ctx = _located_context(output, offset=1)

    line_number = inspect.currentframe().f_lineno + 1  # type: ignore[union-attr]
    _log_from_wrapper(ctx)

    caller = str(multiline_json_decode(output)[0]["@caller"])
    assert caller.endswith(f"test_root_logger.py:{line_number}")
