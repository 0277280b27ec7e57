"""Enumerations for arbengine type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class ResolutionStatus(StrEnum):
    """Outcome of resolving one key for one locale.

    StrEnum provides automatic string conversion: str(ResolutionStatus.DIRECT) == "direct"
    """

    DIRECT = "direct"
    """The locale defines the key itself."""

    FALLBACK = "fallback"
    """The value comes from an ancestor culture in the fallback chain."""

    MISSING = "missing"
    """Neither the locale nor any ancestor defines the key."""


class LoadStatus(StrEnum):
    """Status of an ARB file load attempt.

    StrEnum provides automatic string conversion: str(LoadStatus.SUCCESS) == "success"
    """

    SUCCESS = "success"
    """File read and parsed."""

    ERROR = "error"
    """File could not be read or is not a valid ARB document."""


__all__ = [
    "LoadStatus",
    "ResolutionStatus",
]
