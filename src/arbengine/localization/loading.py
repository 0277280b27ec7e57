"""Loading a project's ARB files into a LocaleSet.

Components:
    PathArbLoader - Discovers and parses the ``*.arb`` files of one directory
    ArbLoadResult - Immutable result of a single file load attempt
    LoadSummary - Immutable aggregate of all load results
    load_locale_set - l10n.yaml settings + directory -> (LocaleSet, LoadSummary)

A file that cannot be read or parsed is recorded as an error and skipped;
the remaining files still load.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from arbengine.arb import ArbDocument, infer_locale_from_filename, read_arb_file
from arbengine.constants import ARB_SUFFIX, GENERATED_CLASS_SUFFIX
from arbengine.diagnostics import ArbError
from arbengine.enums import LoadStatus
from arbengine.locale_utils import normalize_locale, same_locale
from arbengine.localization.locale_set import LocaleEntries, LocaleSet

if TYPE_CHECKING:
    from arbengine.config import L10nConfig
    from arbengine.localization.types import LocaleCode

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Concrete loader
    "PathArbLoader",
    # Load result types
    "ArbLoadResult",
    "LoadSummary",
    # Project loading
    "generated_class_name",
    "load_locale_set",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ArbLoadResult:
    """Result of loading a single ARB file.

    Attributes:
        source_path: Path of the file
        status: Load status (success, error)
        locale_code: Locale the file was assigned (None if undeterminable)
        document: Parsed document if status is SUCCESS
        error: Exception if status is ERROR, None otherwise
    """

    source_path: str
    status: LoadStatus
    locale_code: LocaleCode | None = None
    document: ArbDocument | None = None
    error: Exception | None = None

    @property
    def is_success(self) -> bool:
        """Check if the file loaded successfully."""
        return self.status == LoadStatus.SUCCESS

    @property
    def is_error(self) -> bool:
        """Check if the file failed to load."""
        return self.status == LoadStatus.ERROR

    @property
    def file_stem(self) -> str:
        """File name without directory and ``.arb`` suffix."""
        return Path(self.source_path).stem


@dataclass(frozen=True, slots=True)
class LoadSummary:
    """Immutable aggregate of ARB load results.

    All statistics are computed properties derived from ``results``.

    Example:
        >>> locale_set, summary = load_locale_set(config, "myapp")
        >>> for result in summary.get_errors():
        ...     print(f"Failed: {result.source_path}: {result.error}")
    """

    results: tuple[ArbLoadResult, ...]

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"LoadSummary(total={self.total_attempted}, "
            f"ok={self.successful}, "
            f"errors={self.errors})"
        )

    @property
    def total_attempted(self) -> int:
        """Total number of load attempts."""
        return len(self.results)

    @property
    def successful(self) -> int:
        """Number of successful loads."""
        return sum(1 for r in self.results if r.is_success)

    @property
    def errors(self) -> int:
        """Number of load errors."""
        return sum(1 for r in self.results if r.is_error)

    @property
    def all_successful(self) -> bool:
        """Check if every file loaded."""
        return self.errors == 0

    def get_successful(self) -> tuple[ArbLoadResult, ...]:
        """Get all successful load results."""
        return tuple(r for r in self.results if r.is_success)

    def get_errors(self) -> tuple[ArbLoadResult, ...]:
        """Get all results with errors."""
        return tuple(r for r in self.results if r.is_error)

    def get_by_locale(self, locale_code: LocaleCode) -> ArbLoadResult | None:
        """Get the successful result for a locale, ignoring code spelling."""
        normalized = normalize_locale(locale_code)
        return next(
            (
                r
                for r in self.results
                if r.is_success
                and r.locale_code is not None
                and normalize_locale(r.locale_code) == normalized
            ),
            None,
        )


@dataclass(frozen=True, slots=True)
class PathArbLoader:
    """File system loader for one directory of ARB files.

    The locale of each file is taken from its name (``app_en_US.arb`` ->
    ``en_US``), then from its ``@@locale``, then from ``fallback_locale``.

    Attributes:
        directory: Directory holding the ``*.arb`` files
        fallback_locale: Locale for files that name none (optional)

    Example:
        >>> loader = PathArbLoader("myapp/arbs")
        >>> summary = loader.load_all()
        >>> summary.successful
        3
    """

    directory: str | Path
    fallback_locale: LocaleCode | None = None

    def discover(self) -> tuple[Path, ...]:
        """List ARB files in the directory, sorted by name.

        A missing directory has no files.
        """
        root = Path(self.directory)
        if not root.is_dir():
            logger.warning("ARB directory not found: %s", root)
            return ()
        return tuple(
            sorted(
                (path for path in root.iterdir() if path.suffix == ARB_SUFFIX and path.is_file()),
                key=lambda path: path.name,
            )
        )

    def load_file(self, path: str | Path) -> ArbLoadResult:
        """Read, parse and assign a locale to one file. Never raises."""
        path = Path(path)
        source_path = str(path)
        try:
            document = read_arb_file(path)
        except ArbError as e:
            logger.warning("Failed to load %s: %s", source_path, e)
            return ArbLoadResult(source_path, LoadStatus.ERROR, error=e)

        locale_code = (
            infer_locale_from_filename(path.stem) or document.locale or self.fallback_locale
        )
        if not locale_code:
            error = ValueError(f"Cannot determine the locale of {path.name}")
            logger.warning("Failed to load %s: %s", source_path, error)
            return ArbLoadResult(source_path, LoadStatus.ERROR, document=document, error=error)

        logger.debug("Loaded %s as '%s' (%d entries)", source_path, locale_code, len(document))
        return ArbLoadResult(
            source_path,
            LoadStatus.SUCCESS,
            locale_code=locale_code,
            document=document.with_locale(locale_code),
        )

    def load_all(self) -> LoadSummary:
        """Load every discovered file.

        A file whose locale was already loaded from an earlier file is
        recorded as an error.
        """
        results: list[ArbLoadResult] = []
        seen: dict[str, str] = {}
        for path in self.discover():
            result = self.load_file(path)
            if result.is_success and result.locale_code is not None:
                normalized = normalize_locale(result.locale_code)
                if normalized in seen:
                    error = ValueError(
                        f"Locale '{result.locale_code}' is already loaded from {seen[normalized]}"
                    )
                    logger.warning("Failed to load %s: %s", result.source_path, error)
                    result = ArbLoadResult(
                        result.source_path,
                        LoadStatus.ERROR,
                        locale_code=result.locale_code,
                        document=result.document,
                        error=error,
                    )
                else:
                    seen[normalized] = result.source_path
            results.append(result)

        summary = LoadSummary(tuple(results))
        logger.info("Loaded ARB files from %s: %r", self.directory, summary)
        return summary


def generated_class_name(
    file_stem: str, locale_code: LocaleCode, output_class: str | None = None
) -> str:
    """Name of the class generated for one ARB file.

    Example:
        >>> generated_class_name("app_en", "en")
        'AppEnLocalizations'
        >>> generated_class_name("app_en", "en-US", "AppLocale")
        'AppLocale_en_US'
    """
    if output_class:
        suffix = locale_code.replace("-", "_")
        return f"{output_class}_{suffix}" if suffix else output_class
    pascal = "".join(segment[:1].upper() + segment[1:] for segment in file_stem.split("_"))
    return pascal + GENERATED_CLASS_SUFFIX


def load_locale_set(
    config: L10nConfig, project_dir: str | Path
) -> tuple[LocaleSet, LoadSummary]:
    """Load a project's ARB files into a LocaleSet.

    The default locale is ``default-locale`` when it loaded, else the
    locale of ``template-arb-file``, else the first loaded locale. A
    configured default that did not load is skipped with a warning.

    Args:
        config: Project settings
        project_dir: Directory that ``arb-dir`` is relative to

    Returns:
        (locale set, load summary)

    Raises:
        ValueError: If no file loaded
    """
    arb_dir = Path(project_dir) / config.arb_dir
    summary = PathArbLoader(arb_dir, fallback_locale=config.default_locale).load_all()
    loaded = summary.get_successful()
    if not loaded:
        msg = f"No ARB files could be loaded from {arb_dir}"
        raise ValueError(msg)

    locales = tuple(
        LocaleEntries.from_document(
            result.document,
            generated_class_name(result.file_stem, result.locale_code, config.output_class),
        )
        for result in loaded
        if result.document is not None and result.locale_code is not None
    )
    default_locale = _configured_locale(config, locales) or _template_locale(config, loaded)
    if not default_locale:
        default_locale = locales[0].locale_code

    return LocaleSet(locales, default_locale), summary


def _configured_locale(
    config: L10nConfig, locales: tuple[LocaleEntries, ...]
) -> LocaleCode | None:
    if not config.default_locale:
        return None
    for locale in locales:
        if same_locale(locale.locale_code, config.default_locale):
            return locale.locale_code
    logger.warning("Default locale '%s' was not loaded", config.default_locale)
    return None


def _template_locale(
    config: L10nConfig, loaded: tuple[ArbLoadResult, ...]
) -> LocaleCode | None:
    if not config.template_arb_file:
        return None
    template_name = Path(config.template_arb_file).name
    for result in loaded:
        if Path(result.source_path).name == template_name:
            return result.locale_code
    logger.warning("Template ARB file '%s' was not loaded", config.template_arb_file)
    return None
