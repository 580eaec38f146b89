"""SDK-scoped logging operations over a plugin ``Context``.

Every function reads the SDK root logger and policy store from the context.
Functions returning a ``Context`` never modify the one passed in; callers
chain the returned value to keep accumulated configuration.
"""

from __future__ import annotations

from typing import Any, Mapping

from packages.pluginlog_shared.logging import facade, registry
from packages.pluginlog_shared.logging.context import Context
from packages.pluginlog_shared.logging.filtering import RegexLike
from packages.pluginlog_shared.logging.levels import Level
from packages.pluginlog_shared.logging.options import Options, Role

FieldMap = Mapping[str, Any]


def new_root_sdk_logger(ctx: Context, options: Options | None = None) -> Context:
    """Return a context carrying an SDK root logger built from ``options``."""
    return registry.new_root_logger(ctx, Role.SDK, options)


def new_root_provider_logger(
    ctx: Context, options: Options | None = None
) -> Context:
    """Return a context carrying a provider root logger built from ``options``."""
    return registry.new_root_logger(ctx, Role.PROVIDER, options)


def set_field(ctx: Context, key: str, value: Any) -> Context:
    """Return a context whose SDK logger includes ``key=value`` in every entry."""
    return facade.set_field(ctx, Role.SDK, key, value)


def trace(ctx: Context, message: str, *field_maps: FieldMap | None) -> None:
    """Log ``message`` at TRACE with fields merged from ``field_maps``.

    Fields are shallow merged across maps (later maps win) and with the
    fields bound by ``set_field``.
    """
    facade.emit(ctx, Role.SDK, Level.TRACE, message, field_maps, stacklevel=2)


def debug(ctx: Context, message: str, *field_maps: FieldMap | None) -> None:
    """Log ``message`` at DEBUG; see ``trace`` for field merging."""
    facade.emit(ctx, Role.SDK, Level.DEBUG, message, field_maps, stacklevel=2)


def info(ctx: Context, message: str, *field_maps: FieldMap | None) -> None:
    """Log ``message`` at INFO; see ``trace`` for field merging."""
    facade.emit(ctx, Role.SDK, Level.INFO, message, field_maps, stacklevel=2)


def warn(ctx: Context, message: str, *field_maps: FieldMap | None) -> None:
    """Log ``message`` at WARN; see ``trace`` for field merging."""
    facade.emit(ctx, Role.SDK, Level.WARN, message, field_maps, stacklevel=2)


def error(ctx: Context, message: str, *field_maps: FieldMap | None) -> None:
    """Log ``message`` at ERROR; see ``trace`` for field merging."""
    facade.emit(ctx, Role.SDK, Level.ERROR, message, field_maps, stacklevel=2)


def omit_log_with_field_keys(ctx: Context, *keys: str) -> Context:
    """Drop any entry that has a field whose key is one of ``keys``.

    Additive across calls. With keys ``["foo", "baz"]``::

        fields {foo, bar}  -> omitted
        fields {bar}       -> printed
        fields {baz, boo}  -> omitted
    """
    return facade.extend_policy(
        ctx, Role.SDK, lambda policy: policy.with_omit_log_with_field_keys(*keys)
    )


def omit_log_with_message_regexes(ctx: Context, *patterns: RegexLike) -> Context:
    """Drop any entry whose message matches one of ``patterns``.

    Additive across calls. With ``re.compile("(foo|bar)")``::

        "banana apple foo"     -> omitted
        "pineapple mango"      -> printed
        "pineapple mango bar"  -> omitted
    """
    return facade.extend_policy(
        ctx,
        Role.SDK,
        lambda policy: policy.with_omit_log_with_message_regexes(*patterns),
    )


def omit_log_with_message_strings(ctx: Context, *literals: str) -> Context:
    """Drop any entry whose message contains one of ``literals``. Additive.

    An empty literal is contained in every message and drops every entry.
    """
    return facade.extend_policy(
        ctx,
        Role.SDK,
        lambda policy: policy.with_omit_log_with_message_strings(*literals),
    )


def mask_field_values_with_field_keys(ctx: Context, *keys: str) -> Context:
    """Replace with ``***`` the value of any per-call field keyed by ``keys``.

    Additive across calls. With keys ``["foo", "baz"]``::

        fields {foo: "...", bar: "..."}  -> {foo: "***", bar: "..."}
        fields {bar: "..."}              -> unchanged
    """
    return facade.extend_policy(
        ctx,
        Role.SDK,
        lambda policy: policy.with_mask_field_values_with_field_keys(*keys),
    )


def mask_message_regexes(ctx: Context, *patterns: RegexLike) -> Context:
    """Replace with ``***`` every message span matching one of ``patterns``."""
    return facade.extend_policy(
        ctx, Role.SDK, lambda policy: policy.with_mask_message_regexes(*patterns)
    )


def mask_message_strings(ctx: Context, *literals: str) -> Context:
    """Replace with ``***`` every occurrence of ``literals`` in messages.

    Empty literals are ignored. By contrast an empty literal passed to
    ``omit_log_with_message_strings`` matches, and drops, every entry.
    """
    return facade.extend_policy(
        ctx, Role.SDK, lambda policy: policy.with_mask_message_strings(*literals)
    )
