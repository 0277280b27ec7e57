"""Locale utilities: normalization, culture parents, and fallback chains.

Locale codes arrive raw from ARB file names and ``@@locale`` values
(``en``, ``en_US``, ``en-GB``, ``zh_Hant_TW``). Comparison is always done
on the normalized form; chains keep the caller's spelling.

The fallback chain is purely structural: the parent of a code is the code
with its last culture subtag removed. Babel is only used to recognize
CLDR locales and to render display names for reports.

Python 3.13+.
"""

from __future__ import annotations

import functools
import re
from typing import TYPE_CHECKING

from arbengine.constants import MAX_LOCALE_CACHE_SIZE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "culture_parts",
    "fallback_chain",
    "get_babel_locale",
    "is_known_locale",
    "locale_display_name",
    "normalize_locale",
    "parent_locale",
    "same_locale",
]

_SEPARATORS = re.compile(r"[_-]")


def normalize_locale(locale_code: str) -> str:
    """Normalize a locale code for comparison and lookups.

    BCP-47 uses hyphens (en-US), ARB file names and Babel use underscores
    (en_US), and case varies between sources. Both are folded away.

    Example:
        >>> normalize_locale("en-US")
        'en_us'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_").lower()


def same_locale(first: str, second: str) -> bool:
    """Check whether two raw codes name the same locale."""
    return normalize_locale(first) == normalize_locale(second)


def culture_parts(locale_code: str) -> tuple[str, ...]:
    """Split a locale code into culture subtags.

    Empty segments are dropped, so an empty or separator-only code has
    no parts at all.

    Example:
        >>> culture_parts("en_US")
        ('en', 'US')
        >>> culture_parts("zh-Hant-TW")
        ('zh', 'Hant', 'TW')
        >>> culture_parts("")
        ()
    """
    return tuple(part for part in _SEPARATORS.split(locale_code) if part)


def parent_locale(locale_code: str) -> str | None:
    """Return the code with its last subtag stripped.

    Returns:
        The parent code, or None for a root culture (``cs``) or an
        unsplittable code.

    Example:
        >>> parent_locale("en_US")
        'en'
        >>> parent_locale("cs") is None
        True
    """
    parts = culture_parts(locale_code)
    if len(parts) <= 1:
        return None
    return _separator_of(locale_code).join(parts[:-1])


def fallback_chain(locale_code: str, default_locale_code: str) -> tuple[str, ...]:
    """Compute the fallback chain for a locale.

    The chain starts at the locale itself and walks up through its parents.
    It stops as soon as the default locale is reached or no parent exists,
    so a root culture that is not the default (``cs`` with default ``en``)
    is its own whole chain.

    A code that cannot be culture-split (empty string) is a root with no
    parent; its chain is just the default locale, or empty when the code
    equals the default.

    Example:
        >>> fallback_chain("en_US", "en")
        ('en_US', 'en')
        >>> fallback_chain("cs", "en")
        ('cs',)
        >>> fallback_chain("", "en")
        ('en',)
    """
    parts = culture_parts(locale_code)
    if not parts:
        if locale_code == default_locale_code:
            return ()
        return (default_locale_code,)

    separator = _separator_of(locale_code)
    chain: list[str] = [locale_code]
    if same_locale(locale_code, default_locale_code):
        return tuple(chain)

    for size in range(len(parts) - 1, 0, -1):
        ancestor = separator.join(parts[:size])
        chain.append(ancestor)
        if same_locale(ancestor, default_locale_code):
            break
    return tuple(chain)


def _separator_of(locale_code: str) -> str:
    # Keep the caller's spelling: en-GB -> en, en_GB -> en.
    return "-" if "-" in locale_code and "_" not in locale_code else "_"


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("en-US")
        >>> locale.territory
        'US'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(locale_code, sep="-" if "-" in locale_code else "_")


def is_known_locale(locale_code: str) -> bool:
    """Check whether Babel's CLDR data knows the locale.

    Example:
        >>> is_known_locale("cs")
        True
        >>> is_known_locale("xx_YY")
        False
    """
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    if not culture_parts(locale_code):
        return False
    try:
        get_babel_locale(locale_code)
    except (UnknownLocaleError, ValueError):
        return False
    return True


def locale_display_name(locale_code: str, display_locale: str = "en") -> str:
    """Render a locale's name for reports, e.g. ``Czech`` for ``cs``.

    Unknown codes are returned unchanged.
    """
    if not is_known_locale(locale_code):
        return locale_code
    name = get_babel_locale(locale_code).get_display_name(get_babel_locale(display_locale))
    return name or locale_code
