"""Coverage and consistency checks for a locale set.

Built on top of the resolution table: the resolver reports Missing as an
ordinary outcome, and this module turns such outcomes into warnings for
CI pipelines and editors.

Architecture:
    - validate_locale_set(): Main entry point, runs every pass in order
    - _check_locales(): Pass 1 - Locale codes Babel does not know
    - _check_missing(): Pass 2 - MISSING resolutions
    - _check_plurals(): Pass 3 - Plural clauses without an 'other' arm
    - _check_parameters(): Pass 4 - Translations whose arguments differ
    - _check_unsupported_keys(): Pass 5 - Keys the default locale lacks

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from arbengine.diagnostics import DiagnosticCode, ValidationResult, ValidationWarning
from arbengine.locale_utils import is_known_locale, same_locale
from arbengine.localization import synthesize_dispatcher
from arbengine.syntax import PluralClause, parameter_names, parse_message

if TYPE_CHECKING:
    from arbengine.localization import DispatcherPlan, LocaleSet

__all__ = ["validate_locale_set"]

logger = logging.getLogger(__name__)


def _check_locales(locale_set: LocaleSet) -> list[ValidationWarning]:
    return [
        ValidationWarning(
            code=DiagnosticCode.UNKNOWN_LOCALE,
            message=f"Locale '{locale.locale_code}' is not a known CLDR locale",
            locale_code=locale.locale_code,
        )
        for locale in locale_set.locales
        if not is_known_locale(locale.locale_code)
    ]


def _check_missing(plan: DispatcherPlan) -> list[ValidationWarning]:
    return [
        ValidationWarning(
            code=DiagnosticCode.MISSING_TRANSLATION,
            message=f"No translation for '{resolution.key}' in '{resolution.locale_code}' "
            "or its fallback locales",
            locale_code=resolution.locale_code,
            key=resolution.key,
        )
        for resolution in plan.missing()
    ]


def _check_plurals(locale_set: LocaleSet) -> list[ValidationWarning]:
    warnings: list[ValidationWarning] = []
    for locale in locale_set.locales:
        for key, value in locale.entries.items():
            for occurrence in parse_message(value):
                kind = occurrence.kind
                if PluralClause.guard(kind) and kind.is_malformed:
                    warnings.append(
                        ValidationWarning(
                            code=DiagnosticCode.MALFORMED_PLURAL,
                            message=f"Plural clause '{occurrence.name}' has no 'other' arm",
                            locale_code=locale.locale_code,
                            key=key,
                        )
                    )
    return warnings


def _check_parameters(locale_set: LocaleSet) -> list[ValidationWarning]:
    default = locale_set.default
    expected = {key: set(parameter_names(value)) for key, value in default.entries.items()}

    warnings: list[ValidationWarning] = []
    for locale in locale_set.locales:
        if locale is default:
            continue
        for key, value in locale.entries.items():
            if key not in expected:
                continue
            actual = set(parameter_names(value))
            if actual != expected[key]:
                warnings.append(
                    ValidationWarning(
                        code=DiagnosticCode.PARAMETER_MISMATCH,
                        message=(
                            f"Arguments {sorted(actual)} differ from "
                            f"'{default.locale_code}' arguments {sorted(expected[key])}"
                        ),
                        locale_code=locale.locale_code,
                        key=key,
                    )
                )
    return warnings


def _check_unsupported_keys(locale_set: LocaleSet) -> list[ValidationWarning]:
    default = locale_set.default
    return [
        ValidationWarning(
            code=DiagnosticCode.UNSUPPORTED_KEY,
            message=f"Key is not defined in default locale '{default.locale_code}'",
            locale_code=locale.locale_code,
            key=key,
        )
        for locale in locale_set.locales
        if not same_locale(locale.locale_code, default.locale_code)
        for key in locale.entries
        if key not in default.entries
    ]


def validate_locale_set(
    locale_set: LocaleSet, plan: DispatcherPlan | None = None
) -> ValidationResult:
    """Validate coverage and consistency of a locale set.

    Never raises: every finding is reported as a warning.

    Args:
        locale_set: Locales to check
        plan: Dispatcher plan for locale_set; synthesized when omitted

    Returns:
        ValidationResult with warnings grouped by pass

    Example:
        >>> result = validate_locale_set(locale_set)
        >>> for warning in result.by_code(DiagnosticCode.MISSING_TRANSLATION):
        ...     print(warning.context)
        cs/welcomeMessage
    """
    if plan is None:
        plan = synthesize_dispatcher(locale_set)

    warnings = [
        *_check_locales(locale_set),
        *_check_missing(plan),
        *_check_plurals(locale_set),
        *_check_parameters(locale_set),
        *_check_unsupported_keys(locale_set),
    ]
    logger.debug("Validated %d locales: %d warnings", len(locale_set), len(warnings))
    return ValidationResult(warnings=tuple(warnings))
