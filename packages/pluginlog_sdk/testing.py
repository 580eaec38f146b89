"""Helpers for asserting on SDK log output in tests."""

from __future__ import annotations

import json
from io import StringIO
from typing import Any, TextIO

from packages.pluginlog_shared.logging.context import Context
from packages.pluginlog_shared.logging.options import Options

from .logger import new_root_sdk_logger


def root_logger(ctx: Context, output: TextIO) -> Context:
    """Install an SDK root logger writing JSON lines to ``output``.

    Records omit timestamps and caller locations so output is deterministic.
    """
    return new_root_sdk_logger(
        ctx,
        Options(include_location=False, include_time=False, output=output),
    )


def multiline_json_decode(data: str | StringIO) -> list[dict[str, Any]]:
    """Decode newline-delimited JSON records, skipping blank lines."""
    text = data if isinstance(data, str) else data.getvalue()
    return [json.loads(line) for line in text.splitlines() if line.strip()]
