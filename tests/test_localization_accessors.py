"""Tests for localization accessors, plural summaries and LocaleSet construction.

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import given

from arbengine.arb import ArbDocument, ArbEntry, ArbMetadata, ArbPlaceholder
from arbengine.constants import MAX_NESTING_DEPTH
from arbengine.localization import (
    AccessorArgument,
    LocaleEntries,
    LocaleSet,
    ParametricAccessor,
    PlainAccessor,
    build_accessor,
    member_name_for,
    summarize_message,
    summarize_plural,
)
from arbengine.syntax import PluralClause
from tests.strategies import nested_plural_messages, plural_clauses

# ============================================================================
# ACCESSORS
# ============================================================================


class TestBuildAccessor:
    """Accessor kinds and argument types."""

    def test_plain_value(self) -> None:
        """A value without occurrences is a plain accessor."""
        assert build_accessor("appTitle", "My App") == PlainAccessor("appTitle", "AppTitle")

    def test_invalid_braces_stay_plain(self) -> None:
        """Braces that are not placeholders do not make a method."""
        assert PlainAccessor.guard(build_accessor("k", "Use {first name} here"))

    def test_placeholder_defaults_to_string(self) -> None:
        """Undeclared placeholders are Strings."""
        accessor = build_accessor("welcome", "Hi {name}, you are {age}")
        assert accessor == ParametricAccessor(
            "welcome",
            "Welcome",
            (AccessorArgument("name", "String"), AccessorArgument("age", "String")),
        )

    def test_declared_types_win(self) -> None:
        """Metadata placeholder types are used when present."""
        metadata = ArbMetadata(
            placeholders={"age": ArbPlaceholder("int"), "count": ArbPlaceholder("num")}
        )
        accessor = build_accessor(
            "k", "{age} {count, plural, other{{count} x}}", metadata
        )
        assert ParametricAccessor.guard(accessor)
        assert accessor.args == (AccessorArgument("age", "int"), AccessorArgument("count", "num"))

    def test_plural_subject_is_int(self) -> None:
        """An undeclared plural subject is an int; nested names are Strings."""
        accessor = build_accessor("items", "{count, plural, other{{count} by {author}}}")
        assert ParametricAccessor.guard(accessor)
        assert accessor.args == (
            AccessorArgument("count", "int"),
            AccessorArgument("author", "String"),
        )

    def test_repeated_names_once(self) -> None:
        """Each argument appears once, in first-appearance order."""
        accessor = build_accessor("k", "{b} {a} {b}")
        assert ParametricAccessor.guard(accessor)
        assert accessor.arg_names == ("b", "a")

    @pytest.mark.parametrize(
        ("key", "expected"),
        [("appTitle", "AppTitle"), ("x", "X"), ("", ""), ("_private", "_private")],
    )
    def test_member_name(self, key: str, expected: str) -> None:
        """The first letter is upper-cased."""
        assert member_name_for(key) == expected


# ============================================================================
# SUMMARIES
# ============================================================================


class TestSummaries:
    """Compact plural renderings."""

    def test_summary_of_documented_example(self) -> None:
        """Countable arms in ascending order, then else."""
        clause = PluralClause({1: "{count} item", 0: "No items"}, "{count} items")
        assert summarize_plural(clause) == (
            '0 - "No items", 1 - "{count} item", else "{count} items"'
        )

    def test_summary_of_malformed_clause(self) -> None:
        """An empty other still renders."""
        assert summarize_plural(PluralClause()) == 'else ""'

    def test_message_keeps_surrounding_text(self) -> None:
        """Only plural spans are replaced."""
        value = "{user} has {n, plural, =0{no files} other{{n} files}}."
        assert summarize_message(value) == '{user} has 0 - "no files", else "{n} files".'

    def test_message_without_plural(self) -> None:
        """A value without plurals is unchanged."""
        assert summarize_message("Hello {name}") == "Hello {name}"

    def test_nested_plural_is_summarized(self) -> None:
        """A plural inside an arm body is compacted too."""
        value = "{n, plural, =0{none} other{{m, plural, =0{No items} other{{m} items}}}}"
        assert summarize_message(value) == (
            '0 - "none", else "0 - "No items", else "{m} items""'
        )

    def test_nested_plural_in_countable_arm(self) -> None:
        """Countable arm bodies are compacted like the default arm."""
        clause = PluralClause({1: "{k, plural, =2{two} other{many}}"}, "x")
        assert summarize_plural(clause) == '1 - "2 - "two", else "many"", else "x"'

    def test_depth_beyond_limit_shows_subject(self) -> None:
        """Clauses nested past the limit render as their subject placeholder."""
        depth = MAX_NESTING_DEPTH + 20
        value = "{n, plural, =0{zero} other{" * depth + "x" + "}}" * depth
        summary = summarize_message(value)
        assert "plural," not in summary
        assert "other{" not in summary
        assert summary.count('else "') == MAX_NESTING_DEPTH
        assert 'else "{n}"' in summary

    @given(source=nested_plural_messages())
    def test_nested_summary_never_leaks_icu_syntax(self, source: str) -> None:
        """PROPERTY: nested clauses never leave arm syntax in the summary."""
        summary = summarize_message(source)
        assert "plural, =" not in summary
        assert "other{" not in summary

    @given(case=plural_clauses())
    def test_summary_never_leaks_icu_syntax(
        self, case: tuple[str, str, dict[int, str], str]
    ) -> None:
        """PROPERTY: summaries contain no ICU arm syntax and list every arm."""
        source, _, countable, other = case
        summary = summarize_message(source)
        assert "plural, =" not in summary
        assert "other{" not in summary
        for value, body in countable.items():
            assert f'{value} - "{body}"' in summary
        assert summary.endswith(f'else "{other}"')


# ============================================================================
# LOCALE SETS
# ============================================================================


class TestLocaleSet:
    """Construction checks and lookups."""

    def test_empty_rejected(self) -> None:
        """A set needs at least one locale."""
        with pytest.raises(ValueError, match="at least one locale"):
            LocaleSet((), "en")

    def test_duplicate_normalized_code_rejected(self) -> None:
        """en_US and en-us are the same locale."""
        with pytest.raises(ValueError, match="Duplicate locale"):
            LocaleSet((LocaleEntries("en_US", "A"), LocaleEntries("en-us", "B")), "en_US")

    def test_default_must_be_configured(self) -> None:
        """The default locale must be one of the locales."""
        with pytest.raises(ValueError, match="not among the configured locales"):
            LocaleSet((LocaleEntries("cs", "Cs"),), "en")

    def test_lookups(self, sample_locale_set: LocaleSet) -> None:
        """Locales are found by any spelling; keys come from the default."""
        assert sample_locale_set.get("EN-US") is not None
        assert "en-US" in sample_locale_set
        assert "de" not in sample_locale_set
        assert sample_locale_set.default.locale_code == "en"
        assert sample_locale_set.keys == ("appTitle", "welcomeMessage")
        assert sample_locale_set.locale_codes == ("en", "cs", "en_US")
        assert len(sample_locale_set) == 3

    def test_locales_list_is_frozen(self) -> None:
        """A list of locales is stored as a tuple."""
        locale_set = LocaleSet([LocaleEntries("en", "En")], "en")  # type: ignore[arg-type]
        assert isinstance(locale_set.locales, tuple)

    def test_entries_are_read_only(self) -> None:
        """Entry mappings are frozen."""
        entries = LocaleEntries("en", "En", {"a": "A"})
        with pytest.raises(TypeError):
            entries.entries["b"] = "B"  # type: ignore[index]

    def test_from_document(self) -> None:
        """Documents convert to entries with their metadata."""
        metadata = ArbMetadata(description="Title")
        document = ArbDocument(
            locale="en", entries=(ArbEntry("title", "T", metadata), ArbEntry("plain", "P"))
        )
        entries = LocaleEntries.from_document(document, "AppEnLocalizations")
        assert entries.locale_code == "en"
        assert dict(entries.entries) == {"title": "T", "plain": "P"}
        assert dict(entries.metadata) == {"title": metadata}
        assert LocaleEntries.from_document(document, "X", locale_code="en_GB").locale_code == "en_GB"
