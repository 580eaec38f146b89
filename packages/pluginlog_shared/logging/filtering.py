"""Omission and masking policy for plugin log entries.

Rules accumulate in a ``PolicyStore``. Every ``with_*`` method returns a new
store; rule categories behave as insertion-ordered sets, so adding a rule that
is already present has no effect.

Evaluation order for one entry:
1. ``should_omit``: field keys, then message regexes, then message strings.
   The first match drops the entry.
2. ``apply_mask``: field values by key, then message regexes, then message
   strings. Every rule is applied.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Any, Iterable, Sequence, TypeVar

from .fields import FieldPairs

MASK_TOKEN = "***"

_T = TypeVar("_T")

RegexLike = str | re.Pattern[str]


def _as_text(candidate: Any) -> str:
    return candidate if isinstance(candidate, str) else str(candidate)


def matches_any_string(candidate: Any, literals: Iterable[str]) -> bool:
    """Return whether ``candidate`` contains any of ``literals``."""
    text = _as_text(candidate)
    return any(literal in text for literal in literals)


def matches_any_regex(candidate: Any, patterns: Iterable[re.Pattern[str]]) -> bool:
    """Return whether any pattern matches anywhere in ``candidate``."""
    text = _as_text(candidate)
    return any(pattern.search(text) is not None for pattern in patterns)


def matches_any_key(key: str, keys: Iterable[str]) -> bool:
    """Return whether ``key`` is exactly one of ``keys``."""
    return any(key == candidate for candidate in keys)


def compile_patterns(patterns: Iterable[RegexLike]) -> tuple[re.Pattern[str], ...]:
    """Compile pattern strings; compiled patterns pass through unchanged."""
    return tuple(
        pattern if isinstance(pattern, re.Pattern) else re.compile(pattern)
        for pattern in patterns
    )


def _union(existing: tuple[_T, ...], additions: Iterable[_T]) -> tuple[_T, ...]:
    """Append unseen ``additions`` to ``existing`` preserving first-seen order."""
    return tuple(dict.fromkeys((*existing, *additions)))


@dataclass(frozen=True, slots=True)
class PolicyStore:
    """Accumulated omission and masking rules for one logger role."""

    omit_log_with_field_keys: tuple[str, ...] = ()
    omit_log_with_message_regexes: tuple[re.Pattern[str], ...] = ()
    omit_log_with_message_strings: tuple[str, ...] = ()
    mask_field_values_with_field_keys: tuple[str, ...] = ()
    mask_message_regexes: tuple[re.Pattern[str], ...] = ()
    mask_message_strings: tuple[str, ...] = ()

    def with_omit_log_with_field_keys(self, *keys: str) -> PolicyStore:
        """Omit entries carrying any field whose key is one of ``keys``."""
        return replace(
            self,
            omit_log_with_field_keys=_union(self.omit_log_with_field_keys, keys),
        )

    def with_omit_log_with_message_regexes(self, *patterns: RegexLike) -> PolicyStore:
        """Omit entries whose message matches any of ``patterns``."""
        return replace(
            self,
            omit_log_with_message_regexes=_union(
                self.omit_log_with_message_regexes, compile_patterns(patterns)
            ),
        )

    def with_omit_log_with_message_strings(self, *literals: str) -> PolicyStore:
        """Omit entries whose message contains any of ``literals``."""
        return replace(
            self,
            omit_log_with_message_strings=_union(
                self.omit_log_with_message_strings, literals
            ),
        )

    def with_mask_field_values_with_field_keys(self, *keys: str) -> PolicyStore:
        """Mask the values of fields whose key is one of ``keys``."""
        return replace(
            self,
            mask_field_values_with_field_keys=_union(
                self.mask_field_values_with_field_keys, keys
            ),
        )

    def with_mask_message_regexes(self, *patterns: RegexLike) -> PolicyStore:
        """Mask message spans matching any of ``patterns``."""
        return replace(
            self,
            mask_message_regexes=_union(
                self.mask_message_regexes, compile_patterns(patterns)
            ),
        )

    def with_mask_message_strings(self, *literals: str) -> PolicyStore:
        """Mask every occurrence of ``literals``; empty literals are ignored."""
        return replace(
            self,
            mask_message_strings=_union(self.mask_message_strings, literals),
        )

    def should_omit(self, message: str, *field_lists: Sequence[tuple[str, Any]]) -> bool:
        """Return whether an entry with ``message`` and fields must be dropped.

        Only field keys and the message text are inspected.
        """
        if self.omit_log_with_field_keys:
            for pairs in field_lists:
                for key, _ in pairs:
                    if matches_any_key(key, self.omit_log_with_field_keys):
                        return True

        if matches_any_regex(message, self.omit_log_with_message_regexes):
            return True

        return matches_any_string(message, self.omit_log_with_message_strings)

    def apply_mask(self, message: str, additional: FieldPairs) -> str:
        """Mask ``additional`` in place and return the masked message."""
        if self.mask_field_values_with_field_keys:
            for index, (key, _) in enumerate(additional):
                if matches_any_key(key, self.mask_field_values_with_field_keys):
                    additional[index] = (key, MASK_TOKEN)

        for pattern in self.mask_message_regexes:
            message = pattern.sub(MASK_TOKEN, message)

        for literal in self.mask_message_strings:
            if literal:
                message = message.replace(literal, MASK_TOKEN)

        return message
