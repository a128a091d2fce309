"""
Hawk Checker
============

This package implements the syntax and declaration checker for Hawk, a
small imperative language with a declaration section, assignments,
if/while statements and input/output.

The checker is a backtracking recursive descent recognizer working
directly on the source text:

- A cursor for whitespace, literal tokens, identifiers and numbers
- One grammar method per non-terminal, with snapshot-based backtracking
- A symbol table filled by the declaration section and consulted by
  every statement
- A sticky error slot for undeclared identifiers

Pipeline
--------
    Source → HawkParser → Accepted(trace) | Rejected(error)

Usage
-----
>>> from hawk.checker import check_source
>>> result = check_source("program x: int; begin x := 3; output x; end;")
>>> result.accepted
True
>>> result.trace[:6]
('PROGRAM', 'DECL_SEC', 'DECL', 'ID_LIST', 'STMT_SEC', 'STMT')

Not supported:
- Building a syntax tree or generating code
- Reporting more than the first error
- Type checking beyond the int/float/double declaration types
"""

from hawk.checker.checker import (
    CheckerOptions,
    HawkChecker,
    check_source,
    default_input_path,
)
from hawk.checker.cursor import Cursor, RESERVED_WORDS
from hawk.checker.errors import (
    HawkSyntaxError,
    HawkSemanticError,
    UnexpectedTokenError,
    ExpectedIdentifierError,
    ReservedKeywordError,
    ExpectedNumberError,
    ExpectedStatementError,
    ExpectedComparisonError,
    InvalidTypeError,
    UndeclaredIdentifierError,
)
from hawk.checker.grammar import HawkParser, Rule
from hawk.checker.result import Accepted, Rejected, CheckResult
from hawk.checker.state import ParserState, Snapshot
from hawk.checker.symbols import Symbol, SymbolTable

__all__ = [
    # Main API
    "HawkChecker",
    "CheckerOptions",
    "check_source",
    "default_input_path",
    # Results
    "Accepted",
    "Rejected",
    "CheckResult",
    # Engine
    "HawkParser",
    "Rule",
    "Cursor",
    "RESERVED_WORDS",
    "ParserState",
    "Snapshot",
    "Symbol",
    "SymbolTable",
    # Errors
    "HawkSyntaxError",
    "HawkSemanticError",
    "UnexpectedTokenError",
    "ExpectedIdentifierError",
    "ReservedKeywordError",
    "ExpectedNumberError",
    "ExpectedStatementError",
    "ExpectedComparisonError",
    "InvalidTypeError",
    "UndeclaredIdentifierError",
]
