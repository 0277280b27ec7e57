"""ARB JSON writer.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from arbengine.arb.document import ArbDocument, ArbMetadata

__all__ = ["serialize_arb"]


def serialize_arb(document: ArbDocument, *, sort_keys: bool = False) -> str:
    """Serialize a document back to ARB JSON.

    ``@@locale`` and ``@@context`` come first (when set), then every entry
    directly followed by its ``@key`` metadata block. Non-ASCII text is
    written as-is and the output ends with a newline.

    Args:
        document: Document to write
        sort_keys: Order entries by key instead of document order

    Returns:
        JSON text with two-space indentation
    """
    data: dict[str, Any] = {}
    if document.locale:
        data["@@locale"] = document.locale
    if document.context:
        data["@@context"] = document.context

    entries = document.entries
    if sort_keys:
        entries = tuple(sorted(entries, key=lambda entry: entry.key))

    for entry in entries:
        data[entry.key] = entry.value
        if entry.metadata is not None:
            data[f"@{entry.key}"] = _metadata_to_json(entry.metadata)

    return json.dumps(data, ensure_ascii=False, indent=2) + "\n"


def _metadata_to_json(metadata: ArbMetadata) -> dict[str, Any]:
    block: dict[str, Any] = {}
    if metadata.description is not None:
        block["description"] = metadata.description
    if metadata.placeholders:
        block["placeholders"] = {
            name: ({"type": placeholder.type} if placeholder.type else {})
            for name, placeholder in metadata.placeholders.items()
        }
    return block
