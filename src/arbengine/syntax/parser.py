"""Message-string parser for ARB values.

Locates substitution placeholders and ICU plural clauses inside one raw
message string. The grammar is a subset of ICU MessageFormat with the
Flutter escaping conventions, and in practice it shows up half-edited
and with typos, so the parser never raises: malformed constructs degrade
to best-effort partial results.

Scanning rules:
    - ``{`` opens a candidate placeholder; a later ``{`` supersedes a
      pending one, so ``{{name}}`` reports only the inner ``{name}``.
    - An odd-length run of backslashes turns the following ``{`` into text.
    - A ``}`` with nothing pending is text.
    - A candidate closes as a plain placeholder when its trimmed content
      is an identifier or a decimal index; any other character cancels it.
    - At a ``,`` the candidate may be a plural clause. The clause form
      requires ``<name>, plural, <arms>`` (or ``<name> plural, <arms>``);
      ``<name>, plural <arms>`` is NOT a clause, and its arm bodies are
      scanned as ordinary text instead.

All offsets refer to the original string.

Python 3.13+. Zero external dependencies.
"""

import logging
import re
from collections.abc import Iterator
from itertools import chain

from arbengine.constants import ESCAPE_CHAR, NAME_CHARS, OTHER_ARM, PLURAL_KEYWORD
from arbengine.syntax.ast import (
    ParameterOccurrence,
    PlainPlaceholder,
    PluralClause,
    Span,
)
from arbengine.syntax.cursor import Cursor

__all__ = [
    "is_parametric",
    "parameter_names",
    "parse_message",
]

logger = logging.getLogger(__name__)

_NAME_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*|[0-9]+")

# Follows the comma after the subject: ", plural," with free whitespace.
_PLURAL_MARKER = re.compile(rf"\s*{PLURAL_KEYWORD}\s*,")


def parse_message(source: str) -> tuple[ParameterOccurrence, ...]:
    """Find every placeholder and plural clause in a message string.

    Args:
        source: Raw ARB value

    Returns:
        Occurrences in ascending span order; empty for a non-parametric string

    Example:
        >>> [o.name for o in parse_message("Hi {name}, {count, plural, other{x}}")]
        ['name', 'count']
        >>> parse_message("value '{param}' continuation")[0].span
        Span(start=7, end=14)
    """
    occurrences: list[ParameterOccurrence] = []
    cursor = Cursor(source, 0)
    open_at: int | None = None

    while not cursor.is_eof:
        char = cursor.current

        if char == ESCAPE_CHAR:
            run_end = cursor.skip_run(ESCAPE_CHAR)
            escaped = (run_end.pos - cursor.pos) % 2 == 1 and run_end.peek() == "{"
            cursor = run_end.advance() if escaped else run_end
            open_at = None
            continue

        if char == "{":
            open_at = cursor.pos
            cursor = cursor.advance()
            continue

        if open_at is None:
            cursor = cursor.advance()
            continue

        if char in NAME_CHARS or char == " ":
            cursor = cursor.advance()
            continue

        if char == "}":
            name = source[open_at + 1 : cursor.pos].strip()
            if _is_valid_name(name):
                occurrences.append(
                    ParameterOccurrence(name, Span(open_at, cursor.pos + 1), PlainPlaceholder())
                )
            open_at = None
            cursor = cursor.advance()
            continue

        if char == ",":
            plural = _parse_plural(source, open_at, cursor)
            if plural is not None:
                occurrence, cursor = plural
                occurrences.append(occurrence)
                open_at = None
                continue

        # Anything else cancels the pending candidate.
        open_at = None
        cursor = cursor.advance()

    return tuple(occurrences)


def is_parametric(source: str) -> bool:
    """Check whether a message string contains at least one occurrence."""
    return len(parse_message(source)) > 0


def parameter_names(source: str) -> tuple[str, ...]:
    """Collect argument names in order of first appearance.

    Plural subjects are included, and each plural arm body is scanned
    with the same rules, so ``{n, plural, other{{n} by {author}}}``
    yields ``("n", "author")``.
    """
    names: dict[str, None] = {}
    # Depth-first over nested arm bodies with an explicit stack.
    pending: list[Iterator[ParameterOccurrence]] = [iter(parse_message(source))]
    while pending:
        occurrence = next(pending[-1], None)
        if occurrence is None:
            pending.pop()
            continue
        names.setdefault(occurrence.name, None)
        kind = occurrence.kind
        if PluralClause.guard(kind):
            bodies = (*kind.countable.values(), kind.other)
            pending.append(chain.from_iterable(parse_message(body) for body in bodies))
    return tuple(names)


def _is_valid_name(name: str) -> bool:
    return _NAME_PATTERN.fullmatch(name) is not None


def _parse_plural(
    source: str, open_at: int, comma: Cursor
) -> tuple[ParameterOccurrence, Cursor] | None:
    """Try to read a plural clause whose subject ends at ``comma``.

    Returns:
        (occurrence, cursor after the clause), or None when the text is
        not a plural clause or the clause never closes.
    """
    subject = source[open_at + 1 : comma.pos].split()
    after_comma = comma.advance()

    if len(subject) == 1 and _is_valid_name(subject[0]):
        marker = _PLURAL_MARKER.match(source, after_comma.pos)
        if marker is None:
            return None
        cursor = Cursor(source, marker.end())
    elif len(subject) == 2 and subject[1] == PLURAL_KEYWORD and _is_valid_name(subject[0]):
        cursor = after_comma
    else:
        return None

    name = subject[0]
    countable: dict[int, str] = {}
    other = ""

    while True:
        cursor = cursor.skip_whitespace()
        if cursor.is_eof:
            break
        if cursor.current == "}":
            end = cursor.advance()
            clause = PluralClause(countable, other)
            return ParameterOccurrence(name, Span(open_at, end.pos), clause), end

        arm = _read_arm(cursor)
        if arm is None:
            break
        selector, body, cursor = arm
        match selector:
            case int():
                countable[selector] = body
            case str() if selector == OTHER_ARM:
                other = body
            case _:
                logger.debug("Ignoring plural arm '%s' of '%s'", selector, name)

    # Unrecognized arm syntax: keep what was read, end at the clause's own brace.
    block = _read_block(Cursor(source, open_at))
    if block is None:
        logger.debug("Unterminated plural clause '%s' at offset %d", name, open_at)
        return None
    _, end = block
    logger.debug("Malformed plural clause '%s' at offset %d", name, open_at)
    clause = PluralClause(countable, other)
    return ParameterOccurrence(name, Span(open_at, end.pos), clause), end


def _read_arm(cursor: Cursor) -> tuple[int | str, str, Cursor] | None:
    """Read one ``=N{body}`` or ``keyword{body}`` arm.

    Returns:
        (selector, body, cursor after the arm); the selector is an int for
        numeric arms and the keyword otherwise. None on malformed syntax.
    """
    selector: int | str
    if cursor.current == "=":
        digits, after = cursor.advance().read_digits()
        if not digits:
            return None
        try:
            selector = int(digits)
        except ValueError:
            # Beyond the interpreter's integer-string conversion limit.
            return None
    else:
        selector, after = cursor.read_word()
        if not selector:
            return None

    block = _read_block(after.skip_whitespace())
    if block is None:
        return None
    body, end = block
    return selector, body, end


def _read_block(cursor: Cursor) -> tuple[str, Cursor] | None:
    """Read a brace-delimited block with nesting.

    Args:
        cursor: Positioned at the opening '{'

    Returns:
        (inner text, cursor after the matching '}'), or None if the block
        does not start with '{' or never closes. A backslash skips the
        character after it.
    """
    if cursor.is_eof or cursor.current != "{":
        return None

    body_start = cursor.advance()
    c = body_start
    depth = 0
    while not c.is_eof:
        char = c.current
        if char == ESCAPE_CHAR:
            c = c.advance(2)
            continue
        if char == "{":
            depth += 1
        elif char == "}":
            if depth == 0:
                return body_start.slice_to(c.pos), c.advance()
            depth -= 1
        c = c.advance()
    return None
