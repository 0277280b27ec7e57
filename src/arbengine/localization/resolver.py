"""Locale resolution and dispatcher synthesis.

For every key of the default locale and every configured locale, the
resolver decides which locale supplies the value:

    Direct    the locale defines the key itself
    Fallback  the nearest ancestor on the fallback chain defines it
    Missing   no locale on the chain defines it

Resolution never fails; Missing is an ordinary outcome. Direct lookups
short-circuit and never walk the chain. Every resolution is computed
independently from the immutable LocaleSet, so the output is identical
however the work is ordered.

Architecture:
    - resolve_key: one (locale, key) decision
    - synthesize_dispatcher: the full table plus accessors and summaries
    - DispatcherPlan: read-only view the code-emission layer consumes

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from arbengine.constants import ANNOTATION_FALLBACK, ANNOTATION_MISSING
from arbengine.enums import ResolutionStatus
from arbengine.locale_utils import fallback_chain, normalize_locale, same_locale
from arbengine.localization.accessors import build_accessor
from arbengine.localization.summary import summarize_message
from arbengine.syntax import PluralClause, parse_message

if TYPE_CHECKING:
    from arbengine.localization.accessors import Accessor
    from arbengine.localization.locale_set import LocaleSet
    from arbengine.localization.types import LocaleCode, MessageKey

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Resolution
    "KeyResolution",
    "FallbackInfo",
    "resolve_key",
    # Synthesis
    "KeyPlan",
    "DispatcherPlan",
    "synthesize_dispatcher",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class KeyResolution:
    """Which locale supplies one key for one requested locale.

    Attributes:
        locale_code: Requested locale
        key: Message key
        status: DIRECT, FALLBACK or MISSING
        value: Bound value; None when MISSING
        source_locale: Locale the value came from; None when MISSING
    """

    locale_code: LocaleCode
    key: MessageKey
    status: ResolutionStatus
    value: str | None = None
    source_locale: LocaleCode | None = None

    def __post_init__(self) -> None:
        """Validate that value presence matches the status."""
        if (self.status == ResolutionStatus.MISSING) != (self.value is None):
            msg = f"{self.status} resolution of '{self.key}' must not have value={self.value!r}"
            raise ValueError(msg)

    @property
    def is_direct(self) -> bool:
        """Check if the locale defines the key itself."""
        return self.status == ResolutionStatus.DIRECT

    @property
    def is_fallback(self) -> bool:
        """Check if an ancestor locale supplies the key."""
        return self.status == ResolutionStatus.FALLBACK

    @property
    def is_missing(self) -> bool:
        """Check if no locale on the chain supplies the key."""
        return self.status == ResolutionStatus.MISSING

    @property
    def annotation(self) -> str:
        """Doc annotation for the generated member: '', '[fallback to en]' or '[MISSING]'."""
        match self.status:
            case ResolutionStatus.FALLBACK:
                return ANNOTATION_FALLBACK.format(locale=self.source_locale)
            case ResolutionStatus.MISSING:
                return ANNOTATION_MISSING
            case _:
                return ""


@dataclass(frozen=True, slots=True)
class FallbackInfo:
    """Information about a locale fallback event.

    Provided to the on_fallback callback of synthesize_dispatcher() for
    every key a locale takes from an ancestor.

    Attributes:
        requested_locale: Locale the key was resolved for
        resolved_locale: Ancestor locale that supplied the value
        key: Message key

    Example:
        >>> def log_fallback(info: FallbackInfo) -> None:
        ...     print(f"{info.key}: {info.requested_locale} -> {info.resolved_locale}")
        >>> plan = synthesize_dispatcher(locale_set, on_fallback=log_fallback)
    """

    requested_locale: LocaleCode
    resolved_locale: LocaleCode
    key: MessageKey


def resolve_key(locale_set: LocaleSet, locale_code: LocaleCode, key: MessageKey) -> KeyResolution:
    """Resolve one key for one locale.

    A code that is not configured in the set has no entries of its own
    but still walks its fallback chain, so 'en_GB' resolves through 'en'.

    Args:
        locale_set: Configured locales
        locale_code: Requested locale
        key: Message key

    Returns:
        The resolution; never raises for unknown codes or keys
    """
    locale = locale_set.get(locale_code)
    if locale is not None and key in locale.entries:
        return KeyResolution(
            locale_code, key, ResolutionStatus.DIRECT, locale.entries[key], locale.locale_code
        )

    for ancestor_code in fallback_chain(locale_code, locale_set.default_locale_code):
        if same_locale(ancestor_code, locale_code):
            continue
        ancestor = locale_set.get(ancestor_code)
        if ancestor is not None and key in ancestor.entries:
            return KeyResolution(
                locale_code,
                key,
                ResolutionStatus.FALLBACK,
                ancestor.entries[key],
                ancestor.locale_code,
            )

    return KeyResolution(locale_code, key, ResolutionStatus.MISSING)


@dataclass(frozen=True, slots=True)
class KeyPlan:
    """Everything the code-emission layer needs for one public key.

    Attributes:
        key: Message key
        accessor: Typed accessor built from the default locale
        summary: Compact plural summary; None if the default value has no plural clause
        resolutions: One resolution per configured locale, in configuration order
    """

    key: MessageKey
    accessor: Accessor
    summary: str | None
    resolutions: tuple[KeyResolution, ...]


@dataclass(frozen=True, slots=True)
class DispatcherPlan:
    """Result of one synthesis run.

    Computed once from an immutable LocaleSet and never mutated; a
    regeneration builds a new plan from scratch.

    Attributes:
        locale_set: Locales the plan was built from
        key_plans: One plan per default-locale key, in default-locale order
    """

    locale_set: LocaleSet
    key_plans: tuple[KeyPlan, ...]
    _table: Mapping[tuple[str, MessageKey], KeyResolution] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        """Index resolutions by (normalized locale, key)."""
        table = {
            (normalize_locale(resolution.locale_code), plan.key): resolution
            for plan in self.key_plans
            for resolution in plan.resolutions
        }
        object.__setattr__(self, "_table", MappingProxyType(table))

    def resolution(self, locale_code: LocaleCode, key: MessageKey) -> KeyResolution | None:
        """Look up the resolution of a configured locale and public key."""
        return self._table.get((normalize_locale(locale_code), key))

    def missing(self) -> tuple[KeyResolution, ...]:
        """All MISSING resolutions, key-major."""
        return tuple(
            resolution
            for plan in self.key_plans
            for resolution in plan.resolutions
            if resolution.is_missing
        )

    def fallbacks(self) -> tuple[FallbackInfo, ...]:
        """All FALLBACK resolutions as fallback events, key-major."""
        return tuple(
            FallbackInfo(resolution.locale_code, resolution.source_locale or "", plan.key)
            for plan in self.key_plans
            for resolution in plan.resolutions
            if resolution.is_fallback
        )

    @property
    def keys(self) -> tuple[MessageKey, ...]:
        """Public keys in default-locale order."""
        return tuple(plan.key for plan in self.key_plans)

    @property
    def accessors(self) -> Mapping[MessageKey, Accessor]:
        """Key -> accessor, looked up directly by key."""
        return MappingProxyType({plan.key: plan.accessor for plan in self.key_plans})

    @property
    def summaries(self) -> Mapping[MessageKey, str]:
        """Key -> plural summary, for keys whose default value has a plural clause."""
        return MappingProxyType(
            {plan.key: plan.summary for plan in self.key_plans if plan.summary is not None}
        )

    def get(self, key: MessageKey) -> KeyPlan | None:
        """Look up the plan of one public key."""
        return next((plan for plan in self.key_plans if plan.key == key), None)


def synthesize_dispatcher(
    locale_set: LocaleSet,
    *,
    on_fallback: Callable[[FallbackInfo], None] | None = None,
) -> DispatcherPlan:
    """Compute the resolution table, accessors and summaries for a locale set.

    Args:
        locale_set: Configured locales and default locale
        on_fallback: Called once per FALLBACK resolution (optional)

    Returns:
        DispatcherPlan covering every default-locale key and every locale
    """
    default = locale_set.default
    key_plans: list[KeyPlan] = []

    for key, value in default.entries.items():
        resolutions = tuple(
            resolve_key(locale_set, locale.locale_code, key) for locale in locale_set.locales
        )
        for resolution in resolutions:
            if resolution.is_fallback:
                logger.debug(
                    "Key '%s' for '%s' falls back to '%s'",
                    key,
                    resolution.locale_code,
                    resolution.source_locale,
                )
                if on_fallback is not None:
                    on_fallback(
                        FallbackInfo(resolution.locale_code, resolution.source_locale or "", key)
                    )
            elif resolution.is_missing:
                logger.debug("Key '%s' is missing for '%s'", key, resolution.locale_code)

        has_plural = any(PluralClause.guard(o.kind) for o in parse_message(value))
        key_plans.append(
            KeyPlan(
                key=key,
                accessor=build_accessor(key, value, default.metadata.get(key)),
                summary=summarize_message(value) if has_plural else None,
                resolutions=resolutions,
            )
        )

    plan = DispatcherPlan(locale_set, tuple(key_plans))
    logger.info(
        "Synthesized dispatcher: %d keys, %d locales, %d fallbacks, %d missing",
        len(plan.key_plans),
        len(locale_set),
        len(plan.fallbacks()),
        len(plan.missing()),
    )
    return plan
