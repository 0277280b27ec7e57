"""arbengine - ARB message parsing and locale-dispatcher synthesis.

Reads Application Resource Bundle (ARB) files, finds the placeholders and
ICU plural clauses in each message, and computes for every key which
locale supplies its value once fallback chains are applied. The results
drive code generation and documentation for typed localization accessors.

Public API:
    parse_message - Find placeholders and plural clauses in one value
    parse_arb - Parse ARB JSON to an ArbDocument
    serialize_arb - Serialize an ArbDocument to ARB JSON
    LocaleSet - Per-locale entries plus the default locale
    synthesize_dispatcher - Resolution table, accessors and plural summaries
    load_locale_set - Build a LocaleSet from an l10n.yaml project
    validate_locale_set - Coverage and consistency warnings

Exceptions:
    ArbError - Base exception class
    ArbSyntaxError - Malformed ARB JSON
    ArbConfigError - Malformed l10n.yaml

Submodules:
    arbengine.syntax - Occurrence model and message parser
    arbengine.arb - ARB document model, reader and writer
    arbengine.localization - Locale sets, resolver, accessors and loaders
    arbengine.locale_utils - Locale normalization and fallback chains
    arbengine.diagnostics - Error types and validation results
"""

# Essential Public API - Minimal exports for clean namespace
from .arb import ArbDocument, parse_arb, serialize_arb
from .config import L10nConfig, load_config
from .diagnostics import ArbConfigError, ArbError, ArbSyntaxError
from .localization import (
    LocaleEntries,
    LocaleSet,
    load_locale_set,
    resolve_key,
    synthesize_dispatcher,
)
from .syntax import parse_message
from .validation import validate_locale_set

# Version information - Auto-populated from package metadata
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("arbengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ArbConfigError",
    "ArbDocument",
    "ArbError",
    "ArbSyntaxError",
    "L10nConfig",
    "LocaleEntries",
    "LocaleSet",
    "__version__",
    "load_config",
    "load_locale_set",
    "parse_arb",
    "parse_message",
    "resolve_key",
    "serialize_arb",
    "synthesize_dispatcher",
    "validate_locale_set",
]
