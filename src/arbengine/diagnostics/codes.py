"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: ARB document errors (malformed JSON, wrong root type)
        2000-2999: Configuration errors (l10n.yaml)
        3000-3999: Validation warnings (coverage and consistency checks)
    """

    # ARB document errors (1000-1999)
    ARB_INVALID_JSON = 1001
    ARB_NOT_AN_OBJECT = 1002
    ARB_READ_FAILED = 1003

    # Configuration errors (2000-2999)
    CONFIG_INVALID_YAML = 2001
    CONFIG_NOT_A_MAPPING = 2002
    CONFIG_READ_FAILED = 2003

    # Validation warnings (3000-3999)
    MISSING_TRANSLATION = 3001
    MALFORMED_PLURAL = 3002
    PARAMETER_MISMATCH = 3003
    UNSUPPORTED_KEY = 3004
    UNKNOWN_LOCALE = 3005


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Main error message
        source_path: File the diagnostic refers to (if any)
        line: 1-based line number (if known)
        column: 1-based column number (if known)
        hint: Suggestion for fixing the problem (optional)
    """

    code: DiagnosticCode
    message: str
    source_path: str | None = None
    line: int | None = None
    column: int | None = None
    hint: str | None = None

    def format_error(self) -> str:
        """Format diagnostic as a single human-readable string.

        Returns:
            Text like ``error[ARB_INVALID_JSON]: msg (app_en.arb:3:5)``
        """
        text = f"error[{self.code.name}]: {self.message}"
        location = self._location()
        if location:
            text += f" ({location})"
        if self.hint:
            text += f"\n  = help: {self.hint}"
        return text

    def _location(self) -> str:
        parts = [self.source_path] if self.source_path else []
        if self.line is not None:
            parts.append(str(self.line))
            if self.column is not None:
                parts.append(str(self.column))
        return ":".join(parts)
