"""Diagnostic system for arbengine errors and warnings.

Provides structured error diagnostics with codes, locations, and hints,
plus the result types produced by locale-set validation.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import ArbConfigError, ArbError, ArbSyntaxError
from .validation import ValidationResult, ValidationWarning

__all__ = [
    "ArbConfigError",
    "ArbError",
    "ArbSyntaxError",
    "Diagnostic",
    "DiagnosticCode",
    "ValidationResult",
    "ValidationWarning",
]
