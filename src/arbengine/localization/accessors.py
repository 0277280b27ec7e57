"""Typed accessors: what the generated class exposes for each key.

Each public key maps to exactly one accessor, built once from the default
locale. A key whose value has no occurrences becomes a plain member; any
other key becomes a method taking its arguments in order of first
appearance. Includes type guards as static methods.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeIs

from arbengine.constants import DEFAULT_PLACEHOLDER_TYPE, PLURAL_SUBJECT_TYPE
from arbengine.syntax import PluralClause, parse_message, parameter_names

if TYPE_CHECKING:
    from arbengine.arb import ArbMetadata
    from arbengine.localization.types import MessageKey

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Accessor kinds
    "AccessorArgument",
    "PlainAccessor",
    "ParametricAccessor",
    "Accessor",
    # Construction
    "build_accessor",
    "member_name_for",
]


@dataclass(frozen=True, slots=True)
class AccessorArgument:
    """One argument of a parametric accessor.

    Attributes:
        name: Argument name as written in the message
        type_name: Declared ARB type ('String', 'int', 'DateTime'...)
    """

    name: str
    type_name: str


@dataclass(frozen=True, slots=True)
class PlainAccessor:
    """A key whose value has no placeholders: exposed as a property."""

    key: MessageKey
    member_name: str

    @staticmethod
    def guard(accessor: object) -> TypeIs[PlainAccessor]:
        """Type guard for PlainAccessor."""
        return isinstance(accessor, PlainAccessor)


@dataclass(frozen=True, slots=True)
class ParametricAccessor:
    """A key with placeholders or plural clauses: exposed as a method."""

    key: MessageKey
    member_name: str
    args: tuple[AccessorArgument, ...]

    @staticmethod
    def guard(accessor: object) -> TypeIs[ParametricAccessor]:
        """Type guard for ParametricAccessor."""
        return isinstance(accessor, ParametricAccessor)

    @property
    def arg_names(self) -> tuple[str, ...]:
        """Argument names in call order."""
        return tuple(arg.name for arg in self.args)


type Accessor = PlainAccessor | ParametricAccessor


def member_name_for(key: MessageKey) -> str:
    """Member name for a key: the key with its first letter upper-cased.

    Example:
        >>> member_name_for("appTitle")
        'AppTitle'
    """
    if not key:
        return key
    return key[0].upper() + key[1:]


def build_accessor(key: MessageKey, value: str, metadata: ArbMetadata | None = None) -> Accessor:
    """Build the accessor for one default-locale entry.

    Argument types come from the ``@key.placeholders`` metadata when
    declared; an undeclared plural subject is an ``int`` and anything
    else a ``String``.

    Example:
        >>> build_accessor("items", "{count, plural, other{{count} of {total}}}")
        ParametricAccessor(key='items', member_name='Items', args=(AccessorArgument(name='count', type_name='int'), AccessorArgument(name='total', type_name='String')))
    """  # noqa: E501
    names = parameter_names(value)
    if not names:
        return PlainAccessor(key, member_name_for(key))

    plural_subjects = {
        occurrence.name for occurrence in parse_message(value) if PluralClause.guard(occurrence.kind)
    }
    args = tuple(
        AccessorArgument(name, _argument_type(name, metadata, name in plural_subjects))
        for name in names
    )
    return ParametricAccessor(key, member_name_for(key), args)


def _argument_type(name: str, metadata: ArbMetadata | None, is_plural_subject: bool) -> str:
    declared = metadata.placeholder_type(name) if metadata is not None else None
    if declared is not None:
        return declared
    return PLURAL_SUBJECT_TYPE if is_plural_subject else DEFAULT_PLACEHOLDER_TYPE
