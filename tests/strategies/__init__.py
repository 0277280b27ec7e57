"""Hypothesis strategies for arbengine property-based testing.

This package provides reusable strategies for generating test data
across multiple test modules. Strategies are organized by domain:

- messages: Message strings, placeholders, plural clauses, brace chaos
- localization: Locale codes, message keys, and LocaleSets

Usage:
    from tests.strategies import messages_with_placeholders, locale_sets
    from tests.strategies.messages import plural_clauses

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - placeholder_names, messages_with_placeholders, plural_clauses,
      nested_plural_messages, brace_chaos
    - locale_codes, locale_sets
"""

from .localization import locale_codes, locale_sets, message_keys
from .messages import (
    brace_chaos,
    brace_free_text,
    messages_with_placeholders,
    nested_plural_messages,
    placeholder_names,
    plain_text,
    plural_clauses,
)

__all__ = [
    "brace_chaos",
    "brace_free_text",
    "locale_codes",
    "locale_sets",
    "message_keys",
    "messages_with_placeholders",
    "nested_plural_messages",
    "placeholder_names",
    "plain_text",
    "plural_clauses",
]
