"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the localization package
and by user code when annotating call sites.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "ArbSource",
    "LocaleCode",
    "MessageKey",
]

type MessageKey = str
"""ARB message key (e.g., 'appTitle', 'welcomeMessage')."""

type LocaleCode = str
"""Raw locale code as written by the user (e.g., 'en', 'en_US', 'pt-BR')."""

type ArbSource = str
"""Raw ARB JSON text as a Python string."""
