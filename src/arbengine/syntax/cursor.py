"""Immutable cursor for scanning ARB message strings.

Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns a NEW cursor, so a loop that forgets to
      reassign makes no progress instead of corrupting shared state
    - Offsets always refer to the original string; nothing is copied
      or cleaned before scanning
"""

from dataclasses import dataclass

__all__ = ["Cursor"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("{name}", 0)
        >>> cursor.current
        '{'
        >>> cursor.advance().current
        'n'
        >>> cursor.pos  # Original unchanged
        0
        >>> Cursor("hi", 2).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of input."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input

        Check is_eof before reading; the scanner never reads past the end.
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Returns:
            Character at position + offset, or None if beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped to EOF)."""
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos (exclusive)."""
        return self.source[self.pos : end_pos]

    def skip_whitespace(self) -> "Cursor":
        """Skip any Unicode whitespace (spaces, tabs, line breaks).

        Example:
            >>> Cursor("  \\n =0{x}", 0).skip_whitespace().current
            '='
        """
        c = self
        while not c.is_eof and c.current.isspace():
            c = c.advance()
        return c

    def skip_run(self, char: str) -> "Cursor":
        """Skip a run of consecutive ``char`` characters.

        Example:
            >>> Cursor("\\\\\\\\{", 0).skip_run("\\\\").pos
            2
        """
        c = self
        while not c.is_eof and c.current == char:
            c = c.advance()
        return c

    def read_digits(self) -> tuple[str, "Cursor"]:
        """Read a run of ASCII digits.

        Returns:
            (digits, cursor after the run); digits is empty if none were found
        """
        c = self
        while not c.is_eof and c.current in "0123456789":
            c = c.advance()
        return self.slice_to(c.pos), c

    def read_word(self) -> tuple[str, "Cursor"]:
        """Read a run of ASCII letters (an arm keyword such as ``other``)."""
        c = self
        while not c.is_eof and c.current.isascii() and c.current.isalpha():
            c = c.advance()
        return self.slice_to(c.pos), c
