"""Multi-locale dispatching with fallback chains.

Public API:
    LocaleEntries, LocaleSet - The locales a dispatcher is built from
    resolve_key - One (locale, key) resolution
    synthesize_dispatcher - Resolution table, accessors and plural summaries
    PathArbLoader, load_locale_set - Build a LocaleSet from ARB files on disk

Python 3.13+.
"""

from .accessors import (
    Accessor,
    AccessorArgument,
    ParametricAccessor,
    PlainAccessor,
    build_accessor,
    member_name_for,
)
from .loading import (
    ArbLoadResult,
    LoadSummary,
    PathArbLoader,
    generated_class_name,
    load_locale_set,
)
from .locale_set import LocaleEntries, LocaleSet
from .resolver import (
    DispatcherPlan,
    FallbackInfo,
    KeyPlan,
    KeyResolution,
    resolve_key,
    synthesize_dispatcher,
)
from .summary import summarize_message, summarize_plural
from .types import ArbSource, LocaleCode, MessageKey

__all__ = [
    "Accessor",
    "AccessorArgument",
    "ArbLoadResult",
    "ArbSource",
    "DispatcherPlan",
    "FallbackInfo",
    "KeyPlan",
    "KeyResolution",
    "LoadSummary",
    "LocaleCode",
    "LocaleEntries",
    "LocaleSet",
    "MessageKey",
    "ParametricAccessor",
    "PathArbLoader",
    "PlainAccessor",
    "build_accessor",
    "generated_class_name",
    "load_locale_set",
    "member_name_for",
    "resolve_key",
    "summarize_message",
    "summarize_plural",
    "synthesize_dispatcher",
]
