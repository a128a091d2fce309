"""
Hawk - Syntax and Declaration Checker
=====================================

This package checks programs written in Hawk, a small imperative teaching
language. A program is accepted when it matches the Hawk grammar and
every identifier used in a statement was declared beforehand; otherwise
the first error is reported with its line number.

Main Components
---------------
- **checker**: the recognition engine (hawk.checker)
    Cursor, grammar rules, symbol table and result types

- **cli**: command-line tools (hawkc)
    Reads a source file and prints the rule trace or the error

Quick Start
-----------
Check a program:
    >>> from hawk import check_source
    >>> result = check_source("program begin y := 1; end;")
    >>> result.accepted
    False
    >>> str(result.error)
    'ERROR !! identifier not declared in Line 1.'

Check a file:
    >>> from hawk import HawkChecker
    >>> result = HawkChecker().check_file("input.hawk")

Or use the command-line tool:
    $ hawkc input.hawk
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from hawk.errors import HawkError, SourceLocation
from hawk.checker import (
    HawkChecker,
    CheckerOptions,
    check_source,
    default_input_path,
    Accepted,
    Rejected,
    CheckResult,
    HawkParser,
    HawkSyntaxError,
    HawkSemanticError,
    UndeclaredIdentifierError,
    ReservedKeywordError,
)

__all__ = [
    # Version info
    "__version__",
    # Checker
    "HawkChecker",
    "CheckerOptions",
    "check_source",
    "default_input_path",
    "HawkParser",
    # Results
    "Accepted",
    "Rejected",
    "CheckResult",
    # Exception hierarchy
    "HawkError",
    "SourceLocation",
    "HawkSyntaxError",
    "HawkSemanticError",
    "UndeclaredIdentifierError",
    "ReservedKeywordError",
]
