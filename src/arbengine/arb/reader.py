"""ARB JSON reader.

Turns raw ARB text into an ArbDocument. Only the JSON shape is checked:
the root must be an object. Everything inside it is read leniently, the
way hand-edited ARB files need to be.

Reading rules:
    - ``@@locale`` and ``@@context`` become document fields
    - ``@key`` objects become the metadata of ``key``
    - other ``@``-prefixed keys and non-string message values are skipped
    - trailing commas and comments are tolerated (JSON5)

Strict JSON is tried first; text it rejects is re-read with json5, and
error positions always come from the strict parser.

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

import json5

from arbengine.arb.document import ArbDocument, ArbEntry, ArbMetadata, ArbPlaceholder
from arbengine.diagnostics import ArbError, ArbSyntaxError, Diagnostic, DiagnosticCode

if TYPE_CHECKING:
    from arbengine.localization.types import ArbSource

__all__ = [
    "parse_arb",
    "read_arb_file",
]

logger = logging.getLogger(__name__)

_LOCALE_KEY = "@@locale"
_CONTEXT_KEY = "@@context"


def parse_arb(content: ArbSource, *, source_path: str | None = None) -> ArbDocument:
    """Parse ARB text into a document.

    Args:
        content: ARB JSON text
        source_path: File name for diagnostics (optional)

    Returns:
        Parsed document, entries in file order

    Raises:
        ArbSyntaxError: If content is not valid JSON or its root is not an object

    Example:
        >>> doc = parse_arb('{"@@locale": "en", "hello": "Hello {name}"}')
        >>> doc.locale, doc.keys
        ('en', ('hello',))
    """
    data = _load_json(content, source_path)

    if not isinstance(data, dict):
        diagnostic = Diagnostic(
            code=DiagnosticCode.ARB_NOT_AN_OBJECT,
            message=f"ARB root must be a JSON object, got {type(data).__name__}",
            source_path=source_path,
            hint='Wrap the messages in an object: {"key": "value"}',
        )
        raise ArbSyntaxError(diagnostic)

    return _build_document(data, source_path)


def read_arb_file(path: str | Path) -> ArbDocument:
    """Read and parse one ARB file.

    A UTF-8 byte order mark is ignored.

    Raises:
        ArbError: If the file cannot be read or decoded (ARB_READ_FAILED)
        ArbSyntaxError: If the content is not an ARB object
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        diagnostic = Diagnostic(
            code=DiagnosticCode.ARB_READ_FAILED,
            message=f"Cannot read ARB file: {e}",
            source_path=str(path),
        )
        raise ArbError(diagnostic) from e
    return parse_arb(content, source_path=str(path))


def _load_json(content: str, source_path: str | None) -> Any:
    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        strict_error = e

    try:
        data = json5.loads(content)
    except ValueError:
        diagnostic = Diagnostic(
            code=DiagnosticCode.ARB_INVALID_JSON,
            message=f"Invalid ARB JSON: {strict_error.msg}",
            source_path=source_path,
            line=strict_error.lineno,
            column=strict_error.colno,
        )
        raise ArbSyntaxError(diagnostic) from strict_error

    logger.debug(
        "Read %s leniently: %s (%d:%d)",
        source_path or "<string>",
        strict_error.msg,
        strict_error.lineno,
        strict_error.colno,
    )
    return data


def _build_document(data: dict[str, Any], source_path: str | None) -> ArbDocument:
    locale = data.get(_LOCALE_KEY)
    context = data.get(_CONTEXT_KEY)

    entries: list[ArbEntry] = []
    for key, value in data.items():
        if key.startswith("@"):
            continue
        if not isinstance(value, str):
            logger.debug(
                "Skipping non-string value for '%s' in %s", key, source_path or "<string>"
            )
            continue
        entries.append(ArbEntry(key, value, _read_metadata(data.get(f"@{key}"))))

    return ArbDocument(
        locale=locale if isinstance(locale, str) else "",
        context=context if isinstance(context, str) else "",
        entries=tuple(entries),
    )


def _read_metadata(raw: object) -> ArbMetadata | None:
    if not isinstance(raw, dict):
        return None

    description = raw.get("description")
    placeholders: dict[str, ArbPlaceholder] = {}
    raw_placeholders = raw.get("placeholders")
    if isinstance(raw_placeholders, dict):
        for name, declaration in raw_placeholders.items():
            declared_type = declaration.get("type") if isinstance(declaration, dict) else None
            placeholders[name] = ArbPlaceholder(
                declared_type if isinstance(declared_type, str) else ""
            )

    return ArbMetadata(
        description=description if isinstance(description, str) else None,
        placeholders=placeholders,
    )
