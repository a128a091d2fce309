"""
Hawk Lexical Layer
==================

This module implements the character-level scanning used by the grammar
engine. There is no separate token stream: grammar rules ask the cursor
directly whether a literal comes next, and the cursor scans identifiers
and numbers on demand.

Whitespace
----------
Any character for which str.isspace() is true separates tokens. Each
newline skipped advances the line counter, which is the only position
information diagnostics report.

Identifiers
-----------
An identifier starts with a letter or underscore and continues with
letters, ASCII digits and underscores. The reserved words below can never
be identifiers, not even in a declaration:

    program begin end if then else while loop input output int float double

Numbers
-------
| Form     | Example | Result |
|----------|---------|--------|
| Integer  | 42      | ok     |
| Decimal  | 12.5    | ok     |
| Trailing | 12.     | error  |
| Leading  | .5      | error  |

A decimal point must be followed by at least one digit. A bare trailing
point invalidates the whole literal, not just its fractional part.

Example Usage
-------------
>>> from hawk.checker.cursor import Cursor
>>> cursor = Cursor("  x1 := 12.5;")
>>> cursor.scan_identifier()
'x1'
>>> cursor.consume(":=")
>>> cursor.scan_number()
'12.5'
>>> cursor.peek(";")
True
"""

import string
from typing import Optional

from hawk.checker.errors import (
    ExpectedIdentifierError,
    ExpectedNumberError,
    ReservedKeywordError,
    UnexpectedTokenError,
)


# =============================================================================
# Reserved Words
# =============================================================================

RESERVED_WORDS: frozenset[str] = frozenset({
    # Program structure
    "program",
    "begin",
    "end",

    # Control flow
    "if",
    "then",
    "else",
    "while",
    "loop",

    # I/O statements
    "input",
    "output",

    # Types
    "int",
    "float",
    "double",
})


# =============================================================================
# Cursor Implementation
# =============================================================================

class Cursor:
    """
    Tracks the scanning position within a source buffer.

    The source text is fixed for the lifetime of the cursor. The position
    only moves forward, except when the owning parser restores a snapshot
    through restore().

    Attributes:
        source: The full source text
        filename: Source name attached to errors for logging
        pos: Offset of the next unread character
        line: Current line number (1-indexed)
    """

    # Characters that may continue an identifier besides letters
    IDENT_EXTRA = string.digits + "_"

    def __init__(self, source: str, filename: Optional[str] = None):
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1

    # =========================================================================
    # Position Management
    # =========================================================================

    def at_end(self) -> bool:
        """Check if every character has been consumed."""
        return self.pos >= len(self.source)

    def mark(self) -> tuple[int, int]:
        """Return the (pos, line) pair for a later restore()."""
        return self.pos, self.line

    def restore(self, pos: int, line: int) -> None:
        """Move back to a position previously returned by mark()."""
        self.pos = pos
        self.line = line

    # =========================================================================
    # Whitespace
    # =========================================================================

    def skip_whitespace(self) -> None:
        """Advance past whitespace, counting newlines."""
        source = self.source
        while self.pos < len(source) and source[self.pos].isspace():
            if source[self.pos] == "\n":
                self.line += 1
            self.pos += 1

    # =========================================================================
    # Literal Tokens
    # =========================================================================

    def peek(self, literal: str) -> bool:
        """
        Check whether the literal comes next, without consuming it.

        Leading whitespace is skipped first (and stays skipped). The match
        is exact and case-sensitive; running out of input is simply a
        mismatch.
        """
        self.skip_whitespace()
        return self.source.startswith(literal, self.pos)

    def consume(self, literal: str) -> None:
        """
        Consume the literal or fail.

        Raises:
            UnexpectedTokenError: If the literal does not come next. The
                error line is the line after whitespace skipping.
        """
        if not self.peek(literal):
            raise UnexpectedTokenError(literal, self.line, self.filename)
        self.pos += len(literal)

    # =========================================================================
    # Identifier and Number Scanning
    # =========================================================================

    def scan_identifier(self) -> str:
        """
        Scan a maximal identifier.

        Returns:
            The identifier text

        Raises:
            ExpectedIdentifierError: If no identifier starts here
            ReservedKeywordError: If the scanned text is a reserved word
        """
        self.skip_whitespace()
        source = self.source
        start = self.pos

        if start >= len(source) or not self._is_ident_start(source[start]):
            raise ExpectedIdentifierError(self.line, self.filename)

        end = start + 1
        while end < len(source) and self._is_ident_char(source[end]):
            end += 1

        name = source[start:end]
        self.pos = end

        if name in RESERVED_WORDS:
            raise ReservedKeywordError(name, self.line, self.filename)

        return name

    def scan_number(self) -> str:
        """
        Scan a numeric literal: digits, optionally '.' and more digits.

        Returns:
            The literal text

        Raises:
            ExpectedNumberError: If there is no integer part, or if a
                decimal point is not followed by a digit
        """
        self.skip_whitespace()
        source = self.source
        start = self.pos

        end = self._skip_digits(start)
        if end == start:
            raise ExpectedNumberError(self.line, self.filename)

        if end < len(source) and source[end] == ".":
            fraction_end = self._skip_digits(end + 1)
            if fraction_end == end + 1:
                raise ExpectedNumberError(self.line, self.filename)
            end = fraction_end

        self.pos = end
        return source[start:end]

    def _skip_digits(self, pos: int) -> int:
        source = self.source
        while pos < len(source) and source[pos] in string.digits:
            pos += 1
        return pos

    @staticmethod
    def _is_ident_start(char: str) -> bool:
        return char.isalpha() or char == "_"

    @classmethod
    def _is_ident_char(cls, char: str) -> bool:
        return char.isalpha() or char in cls.IDENT_EXTRA
