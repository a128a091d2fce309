"""
Hawk Error Hierarchy
====================

This module defines the root of the exception hierarchy for the Hawk
checker. All exceptions raised by the package inherit from HawkError,
allowing callers to catch every Hawk-related error with a single except
clause if desired.

Exception Hierarchy
-------------------
HawkError (base)
└── HawkSyntaxError (hawk.checker.errors) - recognition failures
    ├── UnexpectedTokenError - literal token did not match
    ├── ExpectedIdentifierError - identifier scan failed
    ├── ReservedKeywordError - identifier is a reserved word
    ├── ExpectedNumberError - number scan failed
    ├── ExpectedStatementError - no statement alternative matched
    ├── ExpectedComparisonError - missing comparison operator
    ├── InvalidTypeError - declaration type is not int/float/double
    └── HawkSemanticError - sticky errors
        └── UndeclaredIdentifierError - identifier used but never declared

Error messages follow this format:
    ERROR !! <message> in Line <line>.
"""

from dataclasses import dataclass


# =============================================================================
# Base Exception Class
# =============================================================================

class HawkError(Exception):
    """
    Base exception for all Hawk errors.

    All exceptions in the package inherit from this class, allowing callers
    to catch all Hawk-related errors with a single except clause:

        try:
            checker.check_file("input.hawk")
        except HawkError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source text for error reporting.

    The checker tracks lines only; Hawk diagnostics never report a column.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
    """
    filename: str
    line: int

    def __str__(self) -> str:
        """Format as 'filename:line' for log messages."""
        return f"{self.filename}:{self.line}"
