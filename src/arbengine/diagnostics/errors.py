"""arbengine exception hierarchy with structured diagnostics.

Only the I/O-facing layers raise: reading ARB documents and reading the
project configuration. The message parser and the locale resolver never
raise; malformed input degrades to best-effort results instead.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "ArbConfigError",
    "ArbError",
    "ArbSyntaxError",
]


class ArbError(Exception):
    """Base exception for all arbengine errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize ArbError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class ArbSyntaxError(ArbError):
    """ARB content is not a JSON object.

    Raised by parse_arb() for invalid JSON or a non-object root. The
    diagnostic carries the line and column reported by the JSON decoder.
    """


class ArbConfigError(ArbError):
    """The l10n.yaml project file is unreadable or malformed."""
