"""
Hawk Checker Errors
===================

Exceptions raised by the recognition engine. Every error carries a fixed
message template and the line on which it was detected, and renders as:

    ERROR !! <message> in Line <line>.

Two kinds exist:

- **Syntax mismatches** (HawkSyntaxError and most subclasses) are ordinary
  recognition failures. Grammar rules catch them to try another
  alternative, so only the one that reaches the top is ever reported.

- **Semantic violations** (HawkSemanticError) are sticky. They are recorded
  on the parser state instead of being raised where they are detected, and
  once recorded they win over any later syntax mismatch.
"""

from typing import Optional

from hawk.errors import HawkError, SourceLocation


# =============================================================================
# Base Syntax Error
# =============================================================================

class HawkSyntaxError(HawkError):
    """
    A recognition failure at a given line.

    Attributes:
        message: The error description (one of the fixed templates)
        line: Line number where the error was detected (1-indexed)
        filename: Optional source name, used only for logging
    """

    def __init__(self, message: str, line: int, filename: Optional[str] = None):
        self.message = message
        self.line = line
        self.filename = filename
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        return f"ERROR !! {self.message} in Line {self.line}."

    @property
    def location(self) -> SourceLocation:
        """Return a SourceLocation for log messages."""
        return SourceLocation(self.filename or "<input>", self.line)

    def __setattr__(self, name, value):
        # Frozen once constructed; Exception internals stay writable.
        if name in ("message", "line", "filename") and name in self.__dict__:
            raise AttributeError(f"cannot modify '{name}' of {type(self).__name__}")
        super().__setattr__(name, value)

    def __eq__(self, other) -> bool:
        if not isinstance(other, HawkSyntaxError):
            return NotImplemented
        return (self.message, self.line) == (other.message, other.line)

    def __hash__(self) -> int:
        return hash((self.message, self.line))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, line={self.line})"


# =============================================================================
# Lexical Errors
# =============================================================================

class UnexpectedTokenError(HawkSyntaxError):
    """A literal token did not match at the current position."""

    def __init__(self, literal: str, line: int, filename: Optional[str] = None):
        self.literal = literal
        super().__init__(f'unexpected token: "{literal}"', line, filename)


class ExpectedIdentifierError(HawkSyntaxError):
    """The next character cannot start an identifier."""

    def __init__(self, line: int, filename: Optional[str] = None):
        super().__init__("expected an identifier", line, filename)


class ReservedKeywordError(HawkSyntaxError):
    """
    An identifier scan produced one of the reserved words.

    Raised for declarations and references alike; a variable can never
    shadow a keyword.
    """

    def __init__(self, word: str, line: int, filename: Optional[str] = None):
        self.word = word
        super().__init__(f"{word} is a reserved keyword", line, filename)


class ExpectedNumberError(HawkSyntaxError):
    """No complete numeric literal at the current position."""

    def __init__(self, line: int, filename: Optional[str] = None):
        super().__init__("expected a number", line, filename)


# =============================================================================
# Grammar Errors
# =============================================================================

class ExpectedStatementError(HawkSyntaxError):
    """None of the five statement forms matched."""

    def __init__(self, line: int, filename: Optional[str] = None):
        super().__init__("expected a statement", line, filename)


class ExpectedComparisonError(HawkSyntaxError):
    """A comparison is missing its =, <>, > or < operator."""

    def __init__(self, line: int, filename: Optional[str] = None):
        super().__init__("expected a comparison operator", line, filename)


class InvalidTypeError(HawkSyntaxError):
    """A declaration names a type outside int, float and double."""

    def __init__(self, line: int, filename: Optional[str] = None):
        super().__init__(
            "all declarations must have a type of int, float, or double",
            line,
            filename,
        )


# =============================================================================
# Semantic (Sticky) Errors
# =============================================================================

class HawkSemanticError(HawkSyntaxError):
    """
    A sticky error.

    Once recorded on the parser state it is never cleared or replaced,
    and backtracking stops as soon as it is seen.
    """
    pass


class UndeclaredIdentifierError(HawkSemanticError):
    """
    Reference to an identifier that no declaration introduced.

    The name is kept for callers; the message stays the fixed template.
    """

    def __init__(self, identifier: str, line: int, filename: Optional[str] = None):
        self.identifier = identifier
        super().__init__("identifier not declared", line, filename)
