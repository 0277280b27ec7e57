"""Tests for config.py: l10n.yaml settings and project discovery.

Python 3.13+.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from arbengine.config import L10nConfig, find_project_dir, load_config
from arbengine.constants import DEFAULT_ARB_DIR
from arbengine.diagnostics import ArbConfigError, DiagnosticCode


class TestL10nConfigFromYaml:
    """Parsing l10n.yaml text."""

    def test_all_keys(self) -> None:
        """Every recognized key maps to a field."""
        config = L10nConfig.from_yaml(
            "arb-dir: lib/l10n\n"
            "template-arb-file: app_en.arb\n"
            "output-class: AppLocale\n"
            "output-namespace: MyApp.Localizations\n"
            "default-locale: en\n"
        )
        assert config == L10nConfig(
            arb_dir="lib/l10n",
            template_arb_file="app_en.arb",
            output_class="AppLocale",
            output_namespace="MyApp.Localizations",
            default_locale="en",
        )

    def test_defaults(self) -> None:
        """An empty file gives the default configuration."""
        assert L10nConfig.from_yaml("") == L10nConfig()
        assert L10nConfig().arb_dir == DEFAULT_ARB_DIR

    def test_quoted_and_commented(self) -> None:
        """YAML quoting and comments are handled."""
        config = L10nConfig.from_yaml("# project\narb-dir: 'arbs/main'  # ARB files\n")
        assert config.arb_dir == "arbs/main"

    def test_empty_values_are_unset(self) -> None:
        """Blank values fall back to defaults."""
        config = L10nConfig.from_yaml('arb-dir: ""\noutput-class:\n')
        assert config.arb_dir == DEFAULT_ARB_DIR
        assert config.output_class is None

    def test_scalar_values_are_strings(self) -> None:
        """Non-string scalars are read as text."""
        assert L10nConfig.from_yaml("arb-dir: 2024\n").arb_dir == "2024"

    def test_unknown_keys_are_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Unknown keys are ignored with a debug message."""
        with caplog.at_level(logging.DEBUG, logger="arbengine.config"):
            config = L10nConfig.from_yaml("synthetic-package: false\n")
        assert config == L10nConfig()
        assert "synthetic-package" in caplog.text

    def test_invalid_yaml(self) -> None:
        """A YAML syntax error raises ArbConfigError with a position."""
        with pytest.raises(ArbConfigError) as exc_info:
            L10nConfig.from_yaml("arb-dir: [unclosed\n", source_path="l10n.yaml")
        diagnostic = exc_info.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.code == DiagnosticCode.CONFIG_INVALID_YAML
        assert diagnostic.source_path == "l10n.yaml"

    @pytest.mark.parametrize("text", ["- a\n- b\n", "just text\n"])
    def test_non_mapping(self, text: str) -> None:
        """A document that is not a mapping is rejected."""
        with pytest.raises(ArbConfigError) as exc_info:
            L10nConfig.from_yaml(text)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.CONFIG_NOT_A_MAPPING

    def test_blank_arb_dir_rejected(self) -> None:
        """arb_dir cannot be constructed empty."""
        with pytest.raises(ValueError, match="arb_dir"):
            L10nConfig(arb_dir="  ")


class TestLoadConfig:
    """Reading l10n.yaml from disk."""

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        """A project without l10n.yaml uses defaults."""
        assert load_config(tmp_path) == L10nConfig()

    def test_reads_file(self, tmp_path: Path) -> None:
        """The file in the project directory is parsed."""
        (tmp_path / "l10n.yaml").write_text("output-class: AppLocale\n", encoding="utf-8")
        assert load_config(tmp_path).output_class == "AppLocale"

    def test_byte_order_mark(self, tmp_path: Path) -> None:
        """A UTF-8 byte order mark is ignored."""
        (tmp_path / "l10n.yaml").write_bytes(b"\xef\xbb\xbfarb-dir: l10n\n")
        assert load_config(tmp_path).arb_dir == "l10n"

    def test_invalid_file_names_path(self, tmp_path: Path) -> None:
        """Errors carry the file path."""
        (tmp_path / "l10n.yaml").write_text("{", encoding="utf-8")
        with pytest.raises(ArbConfigError, match="l10n.yaml"):
            load_config(tmp_path)


class TestFindProjectDir:
    """Walking up to the project directory."""

    def test_finds_ancestor(self, tmp_path: Path) -> None:
        """The nearest ancestor with l10n.yaml is the project."""
        (tmp_path / "l10n.yaml").write_text("", encoding="utf-8")
        nested = tmp_path / "arbs" / "extra"
        nested.mkdir(parents=True)
        assert find_project_dir(nested) == tmp_path.resolve()

    def test_starts_from_file(self, tmp_path: Path) -> None:
        """A file path starts the search at its directory."""
        (tmp_path / "l10n.yaml").write_text("", encoding="utf-8")
        arb = tmp_path / "app_en.arb"
        arb.write_text("{}", encoding="utf-8")
        assert find_project_dir(arb) == tmp_path.resolve()

    def test_no_project(self, tmp_path: Path) -> None:
        """None when no ancestor has the file."""
        nested = tmp_path / "a"
        nested.mkdir()
        result = find_project_dir(nested)
        assert result is None or (result / "l10n.yaml").is_file()
