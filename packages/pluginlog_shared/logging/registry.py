"""Context-scoped registry of sinks, root loggers, and policy stores.

Every accessor reads a single ``Context`` slot and every setter returns a new
``Context``. Role-specific slot names are resolved through ``Role`` so the SDK
and provider loggers share one implementation.
"""

from __future__ import annotations

from dataclasses import dataclass

from .context import Context, ContextKey
from .filtering import PolicyStore
from .levels import Level
from .options import LoggerOptions, Options, Role
from .sink import Logger, StructuredLogger


@dataclass(frozen=True, slots=True)
class _RoleSlots:
    logger: ContextKey
    options: ContextKey
    policy: ContextKey


_SLOTS: dict[Role, _RoleSlots] = {
    Role.SDK: _RoleSlots(
        logger=ContextKey.SDK_ROOT_LOGGER,
        options=ContextKey.SDK_ROOT_LOGGER_OPTIONS,
        policy=ContextKey.SDK_ROOT_POLICY,
    ),
    Role.PROVIDER: _RoleSlots(
        logger=ContextKey.PROVIDER_ROOT_LOGGER,
        options=ContextKey.PROVIDER_ROOT_LOGGER_OPTIONS,
        policy=ContextKey.PROVIDER_ROOT_POLICY,
    ),
}


def get_sink(ctx: Context) -> Logger | None:
    """Return the host-provided sink logger, if any."""
    return ctx.value(ContextKey.SINK)


def get_sink_options(ctx: Context) -> LoggerOptions | None:
    """Return the options the host sink was built with, if recorded."""
    return ctx.value(ContextKey.SINK_OPTIONS)


def set_sink(ctx: Context, sink: Logger, options: LoggerOptions) -> Context:
    """Store a host sink and its construction options."""
    ctx = ctx.with_value(ContextKey.SINK, sink)
    return ctx.with_value(ContextKey.SINK_OPTIONS, options)


def get_root_logger(ctx: Context, role: Role) -> Logger | None:
    return ctx.value(_SLOTS[role].logger)


def set_root_logger(ctx: Context, role: Role, logger: Logger) -> Context:
    return ctx.with_value(_SLOTS[role].logger, logger)


def get_root_logger_options(ctx: Context, role: Role) -> LoggerOptions | None:
    return ctx.value(_SLOTS[role].options)


def set_root_logger_options(
    ctx: Context, role: Role, options: LoggerOptions
) -> Context:
    return ctx.with_value(_SLOTS[role].options, options)


def get_policy(ctx: Context, role: Role) -> PolicyStore:
    """Return the role's policy store, or an empty one if none is set."""
    policy = ctx.value(_SLOTS[role].policy)
    return policy if policy is not None else PolicyStore()


def set_policy(ctx: Context, role: Role, policy: PolicyStore) -> Context:
    return ctx.with_value(_SLOTS[role].policy, policy)


def new_root_logger(
    ctx: Context, role: Role, options: Options | None = None
) -> Context:
    """Install a root logger for ``role`` and return the updated context.

    With a host sink in ``ctx`` the root logger is a named child of it and
    inherits the sink's recorded options. Without one, a standalone JSON
    logger is built from ``options``.
    """
    opts = (options or Options()).resolve(role)

    sink = get_sink(ctx)
    if sink is not None:
        logger = sink.named(opts.name)
        sink_options = get_sink_options(ctx) or LoggerOptions()
        root_options = sink_options.copy(name=opts.name)

        if opts.level != Level.NO_LEVEL:
            logger.set_level(opts.level)
            root_options = root_options.copy(level=opts.level)

        ctx = set_root_logger(ctx, role, logger)
        return set_root_logger_options(ctx, role, root_options)

    root_options = opts.standalone_logger_options()
    ctx = set_root_logger(ctx, role, StructuredLogger(root_options))
    return set_root_logger_options(ctx, role, root_options)
