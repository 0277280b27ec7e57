"""Tests for locale_utils.py: normalization, parents, fallback chains, Babel lookups.

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given

from arbengine.locale_utils import (
    culture_parts,
    fallback_chain,
    get_babel_locale,
    is_known_locale,
    locale_display_name,
    normalize_locale,
    parent_locale,
    same_locale,
)
from tests.strategies import locale_codes

# ============================================================================
# NORMALIZATION
# ============================================================================


class TestNormalization:
    """Separator and case folding."""

    @pytest.mark.parametrize(
        ("code", "expected"),
        [("en-US", "en_us"), ("en_US", "en_us"), ("EN", "en"), ("zh-Hant-TW", "zh_hant_tw")],
    )
    def test_normalize_locale(self, code: str, expected: str) -> None:
        """Hyphens become underscores and case is folded."""
        assert normalize_locale(code) == expected

    def test_same_locale(self) -> None:
        """Codes compare equal across separator style and case."""
        assert same_locale("pt-BR", "pt_br")
        assert not same_locale("pt", "pt_BR")

    @pytest.mark.parametrize(
        ("code", "expected"),
        [
            ("en", ("en",)),
            ("en_US", ("en", "US")),
            ("zh-Hant-TW", ("zh", "Hant", "TW")),
            ("", ()),
            ("_", ()),
        ],
    )
    def test_culture_parts(self, code: str, expected: tuple[str, ...]) -> None:
        """Codes split on either separator; empty segments are dropped."""
        assert culture_parts(code) == expected


# ============================================================================
# PARENTS AND CHAINS
# ============================================================================


class TestParentLocale:
    """Structural parents."""

    def test_subculture_parent(self) -> None:
        """The last subtag is stripped."""
        assert parent_locale("en_US") == "en"
        assert parent_locale("zh_Hant_TW") == "zh_Hant"

    def test_hyphen_spelling_is_kept(self) -> None:
        """A hyphenated code has a hyphenated parent."""
        assert parent_locale("zh-Hant-TW") == "zh-Hant"

    def test_root_has_no_parent(self) -> None:
        """Root cultures and empty codes have no parent."""
        assert parent_locale("cs") is None
        assert parent_locale("") is None


class TestFallbackChain:
    """Chains from a locale up to the default."""

    def test_subculture_reaches_default(self) -> None:
        """en_US falls back to en."""
        assert fallback_chain("en_US", "en") == ("en_US", "en")

    def test_root_culture_is_its_own_chain(self) -> None:
        """cs has no parent, so the default is never reached."""
        assert fallback_chain("cs", "en") == ("cs",)

    def test_subculture_of_non_default_root(self) -> None:
        """cs_CZ walks to cs and stops there."""
        assert fallback_chain("cs_CZ", "en") == ("cs_CZ", "cs")

    def test_chain_stops_at_default(self) -> None:
        """A default deeper than the root ends the chain early."""
        assert fallback_chain("zh_Hant_TW", "zh_Hant") == ("zh_Hant_TW", "zh_Hant")

    def test_default_itself(self) -> None:
        """The default locale's chain is just itself."""
        assert fallback_chain("en", "en") == ("en",)

    def test_default_compared_normalized(self) -> None:
        """Reaching 'en-us' satisfies a default spelled 'en_US'."""
        assert fallback_chain("en-US-x", "en_US") == ("en-US-x", "en-US")

    def test_empty_code_falls_back_to_default(self) -> None:
        """An unsplittable code is a root whose chain is the default."""
        assert fallback_chain("", "en") == ("en",)

    def test_empty_default_equal_code(self) -> None:
        """An empty code equal to the default has an empty chain."""
        assert fallback_chain("", "") == ()

    @given(code=locale_codes(), default=locale_codes())
    def test_chain_shape(self, code: str, default: str) -> None:
        """PROPERTY: the chain starts at the code and each step drops one subtag."""
        chain = fallback_chain(code, default)
        assert chain[0] == code
        for child, parent in zip(chain, chain[1:], strict=False):
            assert len(culture_parts(parent)) == len(culture_parts(child)) - 1
        if any(same_locale(step, default) for step in chain):
            assert same_locale(chain[-1], default)
            event("chain=reaches_default")
        else:
            assert len(culture_parts(chain[-1])) == 1
            event("chain=ends_at_root")


# ============================================================================
# BABEL
# ============================================================================


class TestBabelLookups:
    """CLDR recognition and display names."""

    @pytest.mark.parametrize("code", ["en", "en_US", "en-GB", "cs", "pt_BR"])
    def test_known_locales(self, code: str) -> None:
        """Real CLDR locales are known in either spelling."""
        assert is_known_locale(code)

    @pytest.mark.parametrize("code", ["", "xx_YY", "not a locale"])
    def test_unknown_locales(self, code: str) -> None:
        """Unknown or malformed codes are not known; nothing raises."""
        assert not is_known_locale(code)

    def test_get_babel_locale_is_cached(self) -> None:
        """Repeated lookups return the cached Locale object."""
        assert get_babel_locale("de_AT") is get_babel_locale("de_AT")
        assert get_babel_locale("de_AT").territory == "AT"

    def test_display_name(self) -> None:
        """Display names are rendered in English by default."""
        assert locale_display_name("cs") == "Czech"

    def test_display_name_of_unknown_code(self) -> None:
        """Unknown codes are returned unchanged."""
        assert locale_display_name("xx_YY") == "xx_YY"
