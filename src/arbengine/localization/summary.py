"""Compact, locale-agnostic rendering of plural clauses for documentation.

Hover text and doc comments show what a plural key means without echoing
ICU grammar:

    {count, plural, =0{No items} =1{{count} item} other{{count} items}}

renders as:

    0 - "No items", 1 - "{count} item", else "{count} items"

Arm bodies are rendered the same way, so a plural nested inside an arm is
compacted too. Below MAX_NESTING_DEPTH levels a nested clause is shown
as its subject placeholder (``{count}``).

Python 3.13+. Zero external dependencies.
"""

from arbengine.constants import MAX_NESTING_DEPTH
from arbengine.syntax import PluralClause, parse_message

__all__ = [
    "summarize_message",
    "summarize_plural",
]


def summarize_plural(clause: PluralClause) -> str:
    """Render a plural clause as its compact form.

    Countable arms come first in ascending numeric order, then the
    default arm.
    """
    return _summarize_clause(clause, 1)


def summarize_message(value: str) -> str:
    """Replace every plural clause in a message with its compact form.

    Text outside plural clauses, plain placeholders included, is kept.

    Example:
        >>> summarize_message("You have {n, plural, =0{none} other{{n} new}}.")
        'You have 0 - "none", else "{n} new".'
    """
    return _summarize_text(value, 0)


def _summarize_clause(clause: PluralClause, depth: int) -> str:
    arms = [
        f'{value} - "{_summarize_text(clause.countable[value], depth)}"'
        for value in sorted(clause.countable)
    ]
    arms.append(f'else "{_summarize_text(clause.other, depth)}"')
    return ", ".join(arms)


def _summarize_text(value: str, depth: int) -> str:
    parts: list[str] = []
    position = 0
    for occurrence in parse_message(value):
        kind = occurrence.kind
        if not PluralClause.guard(kind):
            continue
        parts.append(value[position : occurrence.span.start])
        if depth >= MAX_NESTING_DEPTH:
            parts.append("{" + occurrence.name + "}")
        else:
            parts.append(_summarize_clause(kind, depth + 1))
        position = occurrence.span.end
    parts.append(value[position:])
    return "".join(parts)
