"""Shared constants for arbengine.

Centralizes grammar keywords, file-layout defaults, and documentation
markers used across the syntax and localization packages. Placing them
here avoids circular imports and keeps one source of truth.

Constants are grouped by domain:
- Message grammar: plural keywords and placeholder alphabet
- Project layout: ARB file suffix, config file name, defaults
- Accessor types: default argument types for generated accessors
- Limits: nesting depth for summaries and the Babel locale cache
- Documentation: annotations rendered next to dispatcher members

Python 3.13+. Zero external dependencies.
"""

import string

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Message grammar
    "PLURAL_KEYWORD",
    "OTHER_ARM",
    "NAME_CHARS",
    "ESCAPE_CHAR",
    # Project layout
    "ARB_SUFFIX",
    "L10N_CONFIG_FILENAME",
    "DEFAULT_ARB_DIR",
    "GENERATED_CLASS_SUFFIX",
    # Accessor types
    "DEFAULT_PLACEHOLDER_TYPE",
    "PLURAL_SUBJECT_TYPE",
    # Limits
    "MAX_NESTING_DEPTH",
    "MAX_LOCALE_CACHE_SIZE",
    # Documentation
    "ANNOTATION_MISSING",
    "ANNOTATION_FALLBACK",
]

# ============================================================================
# MESSAGE GRAMMAR
# ============================================================================

PLURAL_KEYWORD: str = "plural"
"""Second segment of an ICU plural clause: {count, plural, ...}."""

OTHER_ARM: str = "other"
"""Mandatory default arm of a plural clause."""

NAME_CHARS: frozenset[str] = frozenset(string.ascii_letters + string.digits + "_")
"""Characters allowed in a placeholder name or index."""

ESCAPE_CHAR: str = "\\"
"""Escape marker; an odd-length run of it turns the next '{' into text."""

# ============================================================================
# PROJECT LAYOUT
# ============================================================================

ARB_SUFFIX: str = ".arb"

L10N_CONFIG_FILENAME: str = "l10n.yaml"

DEFAULT_ARB_DIR: str = "arbs"

GENERATED_CLASS_SUFFIX: str = "Localizations"
"""Suffix for per-file class names when no output class is configured."""

# ============================================================================
# ACCESSOR TYPES
# ============================================================================

DEFAULT_PLACEHOLDER_TYPE: str = "String"
"""Argument type used when ARB metadata does not declare one."""

PLURAL_SUBJECT_TYPE: str = "int"
"""Argument type used for an undeclared plural subject."""

# ============================================================================
# LIMITS
# ============================================================================

MAX_NESTING_DEPTH: int = 100
"""Plural clauses nested deeper than this are summarized by their subject only."""

MAX_LOCALE_CACHE_SIZE: int = 128
"""Maximum Babel Locale objects kept by get_babel_locale()."""

# ============================================================================
# DOCUMENTATION
# ============================================================================

ANNOTATION_MISSING: str = "[MISSING]"

ANNOTATION_FALLBACK: str = "[fallback to {locale}]"
