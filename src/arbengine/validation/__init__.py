"""Validation utilities for locale sets.

Standalone coverage and consistency checks, separated from dispatcher
synthesis for better modularity and testability.

Python 3.13+.
"""

from arbengine.validation.coverage import (
    validate_locale_set,
)

__all__ = [
    "validate_locale_set",
]
