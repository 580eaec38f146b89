"""Role-generic emit and policy-extension operations.

Public SDK modules bind these functions to a ``Role``. Emitting never mutates
the context, the logger, or the policy store it reads.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping

from . import registry
from .context import Context
from .fields import merge_fields
from .filtering import PolicyStore
from .levels import Level
from .options import Role


def set_field(ctx: Context, role: Role, key: str, value: Any) -> Context:
    """Return a context whose root logger permanently includes ``key``."""
    logger = registry.get_root_logger(ctx, role)
    if logger is None:
        # No root logger outside of a host-configured context; nothing to bind.
        return ctx
    return registry.set_root_logger(ctx, role, logger.with_fields((key, value)))


def emit(
    ctx: Context,
    role: Role,
    level: Level,
    message: str,
    field_maps: tuple[Mapping[str, Any] | None, ...],
    *,
    stacklevel: int = 1,
) -> None:
    """Filter, mask, and forward one entry to the role's root logger.

    ``stacklevel`` counts frames above this function, with ``1`` meaning the
    direct caller, and is used to attribute ``@caller`` locations.
    """
    logger = registry.get_root_logger(ctx, role)
    if logger is None:
        return

    policy = registry.get_policy(ctx, role)
    additional = merge_fields(*field_maps)

    if policy.should_omit(message, logger.implied_args(), additional):
        return

    message = policy.apply_mask(message, additional)
    logger.log(level, message, additional, stacklevel=stacklevel + 1)


def extend_policy(
    ctx: Context, role: Role, extend: Callable[[PolicyStore], PolicyStore]
) -> Context:
    """Return a context carrying ``extend`` applied to the role's policy."""
    return registry.set_policy(ctx, role, extend(registry.get_policy(ctx, role)))
