"""ARB document model.

An ARB file is a JSON object whose plain keys map to message strings and
whose ``@key`` objects carry metadata for them. Entries are held as an
ordered sequence rather than a dict so that edits such as renames keep
each entry in its place.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType

__all__ = [
    "ArbDocument",
    "ArbEntry",
    "ArbMetadata",
    "ArbPlaceholder",
    "infer_locale_from_filename",
    "rename_key",
]


@dataclass(frozen=True, slots=True)
class ArbPlaceholder:
    """Placeholder declaration from ``@key.placeholders``.

    Attributes:
        type: Declared type name (``String``, ``int``, ``DateTime``...); empty if absent
    """

    type: str = ""


@dataclass(frozen=True, slots=True)
class ArbMetadata:
    """Metadata block of one entry (``@key``)."""

    description: str | None = None
    placeholders: Mapping[str, ArbPlaceholder] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Freeze the placeholder mapping."""
        object.__setattr__(self, "placeholders", MappingProxyType(dict(self.placeholders)))

    def placeholder_type(self, name: str) -> str | None:
        """Return the declared type of a placeholder, or None if undeclared."""
        placeholder = self.placeholders.get(name)
        if placeholder is None or not placeholder.type:
            return None
        return placeholder.type


@dataclass(frozen=True, slots=True)
class ArbEntry:
    """One localized message."""

    key: str
    value: str
    metadata: ArbMetadata | None = None


@dataclass(frozen=True, slots=True)
class ArbDocument:
    """Parsed ARB file.

    Attributes:
        locale: ``@@locale`` value; empty if the file has none
        context: ``@@context`` value; empty if the file has none
        entries: Entries in file order, keys unique
    """

    locale: str = ""
    context: str = ""
    entries: tuple[ArbEntry, ...] = ()

    def __post_init__(self) -> None:
        """Reject duplicate keys."""
        seen: set[str] = set()
        for entry in self.entries:
            if entry.key in seen:
                msg = f"Duplicate ARB key: '{entry.key}'"
                raise ValueError(msg)
            seen.add(entry.key)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, key: object) -> bool:
        return any(entry.key == key for entry in self.entries)

    def get(self, key: str) -> ArbEntry | None:
        """Look up an entry by key."""
        return next((entry for entry in self.entries if entry.key == key), None)

    @property
    def keys(self) -> tuple[str, ...]:
        """Entry keys in file order."""
        return tuple(entry.key for entry in self.entries)

    def values(self) -> dict[str, str]:
        """Return a key -> value dict in file order."""
        return {entry.key: entry.value for entry in self.entries}

    def with_locale(self, locale: str) -> "ArbDocument":
        """Return a copy with ``@@locale`` replaced."""
        return replace(self, locale=locale)


def rename_key(document: ArbDocument, old_key: str, new_key: str) -> ArbDocument:
    """Rename one entry, keeping its position and metadata.

    Args:
        document: Source document (unchanged)
        old_key: Key to rename
        new_key: Replacement key

    Returns:
        New document with the entry renamed in place

    Raises:
        KeyError: If old_key is not in the document
        ValueError: If new_key already names a different entry
    """
    if old_key not in document:
        raise KeyError(old_key)
    if new_key != old_key and new_key in document:
        msg = f"Cannot rename '{old_key}' to existing key '{new_key}'"
        raise ValueError(msg)

    entries = tuple(
        replace(entry, key=new_key) if entry.key == old_key else entry
        for entry in document.entries
    )
    return replace(document, entries=entries)


def infer_locale_from_filename(stem: str) -> str | None:
    """Infer a locale code from an ARB file name without its suffix.

    Everything after the first underscore is the locale.

    Example:
        >>> infer_locale_from_filename("app_en_US")
        'en_US'
        >>> infer_locale_from_filename("messages") is None
        True
    """
    _, separator, locale = stem.partition("_")
    if not separator or not locale:
        return None
    return locale
