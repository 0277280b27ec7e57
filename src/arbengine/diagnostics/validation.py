"""Validation result types for locale-set checks.

Python 3.13+.
"""

from dataclasses import dataclass

from .codes import DiagnosticCode

__all__ = [
    "ValidationResult",
    "ValidationWarning",
]


@dataclass(frozen=True, slots=True)
class ValidationWarning:
    """Structured warning from locale-set validation.

    Attributes:
        code: Warning code (e.g., MISSING_TRANSLATION)
        message: Human-readable warning message
        locale_code: Locale the warning refers to (if any)
        key: ARB key the warning refers to (if any)
    """

    code: DiagnosticCode
    message: str
    locale_code: str | None = None
    key: str | None = None

    @property
    def context(self) -> str | None:
        """Return "locale/key" context string, or None when neither is set."""
        parts = [p for p in (self.locale_code, self.key) if p]
        return "/".join(parts) if parts else None


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Immutable result of validating a locale set.

    Warnings are ordinary findings, not failures: a Missing resolution
    is a normal outcome the caller may choose to treat as a hard error.

    Example:
        >>> result = ValidationResult.valid()
        >>> result.is_valid
        True
        >>> result.warning_count
        0
    """

    warnings: tuple[ValidationWarning, ...]

    @property
    def is_valid(self) -> bool:
        """True when no warnings were produced."""
        return len(self.warnings) == 0

    @property
    def warning_count(self) -> int:
        """Get number of warnings."""
        return len(self.warnings)

    def by_code(self, code: DiagnosticCode) -> tuple[ValidationWarning, ...]:
        """Get all warnings with the given code, in report order."""
        return tuple(w for w in self.warnings if w.code is code)

    @staticmethod
    def valid() -> "ValidationResult":
        """Create a result with no warnings."""
        return ValidationResult(warnings=())

    def format(self) -> str:
        """Format validation result as human-readable string.

        Returns:
            One line per warning, or a pass message when there are none.
        """
        if not self.warnings:
            return "Validation passed: no warnings"

        lines = [f"Warnings ({len(self.warnings)}):"]
        for warning in self.warnings:
            context = f" ({warning.context})" if warning.context else ""
            lines.append(f"  [{warning.code.name}]: {warning.message}{context}")
        return "\n".join(lines)
