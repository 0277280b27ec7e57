"""Project configuration from ``l10n.yaml``.

A project keeps its ARB files in one directory next to an ``l10n.yaml``
file. Recognized keys:

    arb-dir            ARB directory, relative to the project (default 'arbs')
    template-arb-file  File whose locale is the default when none is set
    output-class       Base class name for generated locale classes
    output-namespace   Namespace for generated code
    default-locale     Locale whose keys define the dispatcher surface

Empty values count as unset. Unknown keys are ignored.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from arbengine.constants import DEFAULT_ARB_DIR, L10N_CONFIG_FILENAME
from arbengine.diagnostics import ArbConfigError, Diagnostic, DiagnosticCode

__all__ = [
    "L10nConfig",
    "find_project_dir",
    "load_config",
]

logger = logging.getLogger(__name__)

_KNOWN_KEYS = frozenset({
    "arb-dir",
    "template-arb-file",
    "output-class",
    "output-namespace",
    "default-locale",
})


@dataclass(frozen=True, slots=True)
class L10nConfig:
    """Immutable ``l10n.yaml`` settings.

    Constructing ``L10nConfig()`` with no arguments gives the settings of a
    project without a config file.

    Attributes:
        arb_dir: ARB directory relative to the project directory
        template_arb_file: File name of the template ARB (optional)
        output_class: Base name for generated classes (optional)
        output_namespace: Namespace for generated code (optional)
        default_locale: Explicit default locale (optional)

    Example:
        >>> config = L10nConfig.from_yaml("arb-dir: l10n\\noutput-class: AppLocale\\n")
        >>> config.arb_dir, config.output_class
        ('l10n', 'AppLocale')
    """

    arb_dir: str = DEFAULT_ARB_DIR
    template_arb_file: str | None = None
    output_class: str | None = None
    output_namespace: str | None = None
    default_locale: str | None = None

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If arb_dir is empty
        """
        if not self.arb_dir.strip():
            msg = "arb_dir cannot be empty"
            raise ValueError(msg)

    @classmethod
    def from_yaml(cls, text: str, *, source_path: str | None = None) -> L10nConfig:
        """Build a config from ``l10n.yaml`` text.

        Raises:
            ArbConfigError: If the text is not valid YAML or not a mapping
        """
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            mark = getattr(e, "problem_mark", None)
            diagnostic = Diagnostic(
                code=DiagnosticCode.CONFIG_INVALID_YAML,
                message=f"Invalid YAML: {e}",
                source_path=source_path,
                line=mark.line + 1 if mark is not None else None,
                column=mark.column + 1 if mark is not None else None,
            )
            raise ArbConfigError(diagnostic) from e

        if data is None:
            return cls()
        if not isinstance(data, dict):
            diagnostic = Diagnostic(
                code=DiagnosticCode.CONFIG_NOT_A_MAPPING,
                message=f"{L10N_CONFIG_FILENAME} must be a mapping, got {type(data).__name__}",
                source_path=source_path,
                hint="Write one 'key: value' pair per line",
            )
            raise ArbConfigError(diagnostic)

        for key in data:
            if key not in _KNOWN_KEYS:
                logger.debug("Ignoring unknown %s key '%s'", L10N_CONFIG_FILENAME, key)

        return cls(
            arb_dir=_setting(data, "arb-dir") or DEFAULT_ARB_DIR,
            template_arb_file=_setting(data, "template-arb-file"),
            output_class=_setting(data, "output-class"),
            output_namespace=_setting(data, "output-namespace"),
            default_locale=_setting(data, "default-locale"),
        )


def _setting(data: dict[Any, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def load_config(project_dir: str | Path) -> L10nConfig:
    """Read ``l10n.yaml`` from a project directory.

    A project without the file gets the default configuration.

    Raises:
        ArbConfigError: If the file exists but cannot be read or parsed
    """
    path = Path(project_dir) / L10N_CONFIG_FILENAME
    if not path.is_file():
        logger.debug("No %s in %s, using defaults", L10N_CONFIG_FILENAME, project_dir)
        return L10nConfig()

    try:
        text = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        diagnostic = Diagnostic(
            code=DiagnosticCode.CONFIG_READ_FAILED,
            message=f"Cannot read {L10N_CONFIG_FILENAME}: {e}",
            source_path=str(path),
        )
        raise ArbConfigError(diagnostic) from e
    return L10nConfig.from_yaml(text, source_path=str(path))


def find_project_dir(start: str | Path) -> Path | None:
    """Walk up from ``start`` to the nearest directory holding ``l10n.yaml``.

    Args:
        start: File or directory to start from

    Returns:
        The project directory, or None if no ancestor has the file
    """
    current = Path(start).resolve()
    if current.is_file():
        current = current.parent
    for candidate in (current, *current.parents):
        if (candidate / L10N_CONFIG_FILENAME).is_file():
            return candidate
    return None
