"""The set of locales a dispatcher is synthesized from.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from arbengine.locale_utils import normalize_locale

if TYPE_CHECKING:
    from arbengine.arb import ArbDocument, ArbMetadata
    from arbengine.localization.types import LocaleCode, MessageKey

__all__ = [
    "LocaleEntries",
    "LocaleSet",
]


@dataclass(frozen=True, slots=True)
class LocaleEntries:
    """One locale's messages.

    Attributes:
        locale_code: Raw locale code ('en', 'en_US', 'cs')
        generated_class_name: Name of the class generated for this locale
        entries: key -> value, in file order
        metadata: key -> ARB metadata, for keys that have any
    """

    locale_code: LocaleCode
    generated_class_name: str
    entries: Mapping[MessageKey, str] = field(default_factory=dict)
    metadata: Mapping[MessageKey, ArbMetadata] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Freeze the mappings."""
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    @classmethod
    def from_document(
        cls, document: ArbDocument, generated_class_name: str, locale_code: LocaleCode | None = None
    ) -> LocaleEntries:
        """Build entries from a parsed ARB document.

        Args:
            document: Parsed ARB file
            generated_class_name: Class name for this locale
            locale_code: Overrides the document's ``@@locale``
        """
        return cls(
            locale_code=locale_code if locale_code is not None else document.locale,
            generated_class_name=generated_class_name,
            entries=document.values(),
            metadata={
                entry.key: entry.metadata
                for entry in document.entries
                if entry.metadata is not None
            },
        )

    def __contains__(self, key: object) -> bool:
        return key in self.entries


@dataclass(frozen=True, slots=True)
class LocaleSet:
    """All locales of one dispatcher plus the default locale.

    Locales keep their configuration order. Lookups by code are
    normalized, so 'en-US' finds the locale configured as 'en_US'.

    Raises:
        ValueError: If no locales are given, two locales share a
            normalized code, or the default locale is not among them
    """

    locales: tuple[LocaleEntries, ...]
    default_locale_code: LocaleCode
    _index: Mapping[str, LocaleEntries] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate and index locales by normalized code."""
        object.__setattr__(self, "locales", tuple(self.locales))
        if not self.locales:
            msg = "LocaleSet requires at least one locale"
            raise ValueError(msg)

        index: dict[str, LocaleEntries] = {}
        for locale in self.locales:
            normalized = normalize_locale(locale.locale_code)
            if normalized in index:
                msg = (
                    f"Duplicate locale '{locale.locale_code}' "
                    f"(already configured as '{index[normalized].locale_code}')"
                )
                raise ValueError(msg)
            index[normalized] = locale

        if normalize_locale(self.default_locale_code) not in index:
            msg = f"Default locale '{self.default_locale_code}' is not among the configured locales"
            raise ValueError(msg)
        object.__setattr__(self, "_index", MappingProxyType(index))

    def get(self, locale_code: LocaleCode) -> LocaleEntries | None:
        """Look up a locale by code, ignoring case and separator style."""
        return self._index.get(normalize_locale(locale_code))

    def __contains__(self, locale_code: object) -> bool:
        return isinstance(locale_code, str) and self.get(locale_code) is not None

    def __iter__(self) -> Iterator[LocaleEntries]:
        return iter(self.locales)

    def __len__(self) -> int:
        return len(self.locales)

    @property
    def default(self) -> LocaleEntries:
        """The default locale's entries."""
        return self._index[normalize_locale(self.default_locale_code)]

    @property
    def keys(self) -> tuple[MessageKey, ...]:
        """Public keys: the default locale's keys in file order."""
        return tuple(self.default.entries)

    @property
    def locale_codes(self) -> tuple[LocaleCode, ...]:
        """Locale codes in configuration order."""
        return tuple(locale.locale_code for locale in self.locales)
