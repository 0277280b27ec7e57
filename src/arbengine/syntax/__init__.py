"""ARB message syntax: occurrence model and message-string parser.

Public API:
    parse_message - Find placeholders and plural clauses in one value
    is_parametric - True if a value has any occurrence
    parameter_names - Argument names in first-appearance order

Python 3.13+. Zero external dependencies.
"""

from .ast import (
    OccurrenceKind,
    ParameterOccurrence,
    PlainPlaceholder,
    PluralClause,
    Span,
)
from .parser import is_parametric, parameter_names, parse_message

__all__ = [
    "OccurrenceKind",
    "ParameterOccurrence",
    "PlainPlaceholder",
    "PluralClause",
    "Span",
    "is_parametric",
    "parameter_names",
    "parse_message",
]
