"""Data model for parameter occurrences found in ARB message strings.

A message string is not turned into a full tree: the parser only reports
the substitution sites it finds, each tagged with the span it occupies
in the original string. Includes type guards as static methods.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TypeIs

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Base types
    "Span",
    # Occurrence kinds
    "PlainPlaceholder",
    "PluralClause",
    "OccurrenceKind",
    # Occurrence
    "ParameterOccurrence",
]


@dataclass(frozen=True, slots=True)
class Span:
    """Offsets of an occurrence in the source string.

    Attributes:
        start: Offset of the opening '{' (inclusive)
        end: One past the matching closing '}' (exclusive)

    Example:
        Source: "value '{param}' continuation"
        Occurrence span: Span(start=7, end=14)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate span invariants."""
        if self.start < 0:
            msg = f"Span start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"Span end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)

    def slice(self, source: str) -> str:
        """Return the text this span covers in source."""
        return source[self.start : self.end]


@dataclass(frozen=True, slots=True)
class PlainPlaceholder:
    """A basic named or indexed placeholder: {username}, {0}."""

    @staticmethod
    def guard(kind: object) -> TypeIs["PlainPlaceholder"]:
        """Type guard for PlainPlaceholder."""
        return isinstance(kind, PlainPlaceholder)


@dataclass(frozen=True, slots=True)
class PluralClause:
    """An ICU plural clause: {count, plural, =0{None} other{Some}}.

    Attributes:
        countable: Numeric arms keyed by value, in order of appearance
        other: Body of the mandatory default arm; empty when absent

    An empty ``other`` means the clause is malformed and needs review;
    it is never a valid translation.
    """

    countable: Mapping[int, str] = field(default_factory=dict)
    other: str = ""

    def __post_init__(self) -> None:
        """Freeze the arm mapping."""
        object.__setattr__(self, "countable", MappingProxyType(dict(self.countable)))

    @property
    def is_malformed(self) -> bool:
        """True when the default arm is missing or empty."""
        return self.other == ""

    @staticmethod
    def guard(kind: object) -> TypeIs["PluralClause"]:
        """Type guard for PluralClause."""
        return isinstance(kind, PluralClause)


type OccurrenceKind = PlainPlaceholder | PluralClause


@dataclass(frozen=True, slots=True)
class ParameterOccurrence:
    """One substitution site found inside a message string.

    Attributes:
        name: Placeholder name, or the subject variable of a plural clause
        span: Offsets in the original string; covers the whole clause for plurals
        kind: PlainPlaceholder or PluralClause
    """

    name: str
    span: Span
    kind: OccurrenceKind = field(default_factory=PlainPlaceholder)

    @property
    def is_plural(self) -> bool:
        """True when this occurrence is a plural clause."""
        return PluralClause.guard(self.kind)
