"""
Hawk Recursive Descent Recognizer
=================================

This module implements the grammar engine: one method per non-terminal,
each recognizing its production directly against the source text through
a Cursor. Nothing is built; the observable output is the trace of rule
names entered on the successful derivation path.

Grammar (EBNF)
--------------
program     ::= 'program' [ decl_sec ] 'begin' stmt_sec 'end' ';'
decl_sec    ::= decl { decl }
decl        ::= id_list ':' type ';'
id_list     ::= identifier { ',' identifier }
stmt_sec    ::= stmt { stmt }
stmt        ::= assign | if_stmt | while_stmt | input | output
assign      ::= identifier ':=' expr ';'
if_stmt     ::= 'if' comp 'then' stmt_sec [ 'else' stmt_sec ] 'end' 'if' ';'
while_stmt  ::= 'while' comp 'loop' stmt_sec 'end' 'loop' ';'
input       ::= 'input' id_list ';'
output      ::= 'output' ( id_list | number ) ';'
expr        ::= factor [ ( '+' | '-' ) expr ]
factor      ::= operand [ ( '*' | '/' ) factor ]
operand     ::= number | identifier | '(' expr ')'
comp        ::= '(' operand ( '=' | '<>' | '>' | '<' ) operand ')'
type        ::= 'int' | 'float' | 'double'

Backtracking
------------
Ordered choices and greedy repetitions take a Snapshot, try an
alternative, and restore the snapshot when it raises a HawkSyntaxError.
Once a sticky error has been recorded, nothing is restored and no further
alternative is tried: the failure propagates straight to parse().

Identifiers recognized inside the declaration section are recorded in
the symbol table. Anywhere else an unknown identifier records a sticky
UndeclaredIdentifierError, but the identifier itself still matches so the
surrounding rule can finish.

Recursion
---------
Rules call each other directly, so nesting depth in the input maps to
Python stack depth. Pathologically deep inputs end in RecursionError.
The two section repetitions run as loops, so a long flat run of
declarations or statements does not deepen the stack.

Example Usage
-------------
>>> from hawk.checker.grammar import HawkParser
>>> parser = HawkParser("program x: int; begin x := 3; end;")
>>> result = parser.parse()
>>> result.trace[:4]
('PROGRAM', 'DECL_SEC', 'DECL', 'ID_LIST')
"""

import logging
from enum import Enum
from typing import Callable, Optional

from hawk.errors import HawkError
from hawk.checker.errors import (
    ExpectedComparisonError,
    ExpectedStatementError,
    HawkSyntaxError,
    InvalidTypeError,
    UndeclaredIdentifierError,
)
from hawk.checker.result import Accepted, CheckResult, Rejected
from hawk.checker.state import ParserState, Snapshot

logger = logging.getLogger(__name__)


# =============================================================================
# Rule Names
# =============================================================================

class Rule(Enum):
    """Trace entries, one per non-terminal that records its entry."""
    PROGRAM = "PROGRAM"
    DECL_SEC = "DECL_SEC"
    DECL = "DECL"
    ID_LIST = "ID_LIST"
    STMT_SEC = "STMT_SEC"
    STMT = "STMT"
    ASSIGN = "ASSIGN"
    IF_STMT = "IF_STMT"
    WHILE_STMT = "WHILE_STMT"
    INPUT = "INPUT"
    OUTPUT = "OUTPUT"
    EXPR = "EXPR"
    FACTOR = "FACTOR"
    OPERAND = "OPERAND"
    COMP = "COMP"


# Declarable types, tried in this order
TYPES = ("int", "float", "double")

# Comparison operators; '<>' must be tried before '<'
COMPARISON_OPERATORS = ("=", "<>", ">", "<")


# =============================================================================
# Parser Implementation
# =============================================================================

class HawkParser:
    """
    Recursive descent recognizer for Hawk.

    Every grammar rule is a public method that either returns normally or
    raises HawkSyntaxError. Use parse() to run the whole program rule and
    obtain an Accepted or Rejected result; the individual rules are
    exposed so fragments can be recognized on their own.

    A parser is good for a single parse() call.

    Attributes:
        state: The ParserState being mutated
    """

    def __init__(self, source: str, filename: Optional[str] = None):
        self.state = ParserState.from_source(source, filename)
        self.filename = filename
        self._parsed = False

    @property
    def cursor(self):
        return self.state.cursor

    @property
    def trace(self) -> list[str]:
        return self.state.trace

    def parse(self) -> CheckResult:
        """
        Recognize a whole program.

        Returns:
            Accepted with the trace if the program is valid and no sticky
            error was recorded, otherwise Rejected. A sticky error always
            takes precedence over the syntax error that ended the parse.
        """
        if self._parsed:
            raise HawkError("HawkParser.parse() can only be called once per parser")
        self._parsed = True

        error: Optional[HawkSyntaxError] = None
        try:
            self.program()
        except HawkSyntaxError as e:
            error = e

        if self.state.fatal_error is not None:
            return Rejected(self.state.fatal_error)
        if error is not None:
            return Rejected(error)
        return Accepted(tuple(self.state.trace))

    # =========================================================================
    # Backtracking Helpers
    # =========================================================================

    def _enter(self, rule: Rule) -> None:
        """Stop if a sticky error exists, otherwise record the rule."""
        if self.state.fatal_error is not None:
            raise self.state.fatal_error
        self.state.trace.append(rule.value)

    def _attempt(
        self,
        alternative: Callable[[], object],
        snapshot: Snapshot,
        name: Optional[str] = None,
    ) -> bool:
        """
        Try one alternative.

        Returns:
            True if it matched, False if it failed and was rolled back

        Raises:
            HawkSyntaxError: If the attempt failed after a sticky error
                was recorded
        """
        try:
            alternative()
            return True
        except HawkSyntaxError as e:
            if self.state.fatal_error is not None:
                raise
            logger.debug(
                f"{name or alternative.__name__} failed on line {e.line} ({e.message}), "
                f"rolling back to line {snapshot.line}"
            )
            self.state.restore(snapshot)
            return False

    def _repeat(self, rule: Rule, item: Callable[[], object]) -> None:
        """
        Greedily match further items of a repetition.

        Each extra item is traced as another entry of the repeating rule.
        The first item that fails is rolled back along with its trace
        entry, and the repetition ends there.
        """
        def repetition():
            self._enter(rule)
            item()

        count = 1
        while self._attempt(repetition, self.state.snapshot(), rule.value):
            count += 1
        logger.debug(f"{rule.value} ended after {count} items on line {self.state.line}")

    # =========================================================================
    # Program Structure
    # =========================================================================

    def program(self) -> None:
        """PROGRAM -> program [DECL_SEC] begin STMT_SEC end ;"""
        self._enter(Rule.PROGRAM)
        self.cursor.consume("program")
        if not self.cursor.peek("begin"):
            self.decl_sec()
        self.cursor.consume("begin")
        self.stmt_sec()
        self.cursor.consume("end")
        self.cursor.consume(";")

    def decl_sec(self) -> None:
        """DECL_SEC -> DECL | DECL DECL_SEC"""
        self._enter(Rule.DECL_SEC)
        self.state.in_declaration_section = True
        try:
            self.decl()
            self._repeat(Rule.DECL_SEC, self.decl)
        finally:
            self.state.in_declaration_section = False

    def decl(self) -> None:
        """DECL -> ID_LIST : TYPE ;"""
        self._enter(Rule.DECL)
        self.id_list()
        self.cursor.consume(":")
        self.type_()
        self.cursor.consume(";")

    def id_list(self) -> None:
        """ID_LIST -> ID | ID , ID_LIST"""
        self._enter(Rule.ID_LIST)
        self.identifier()
        if self.cursor.peek(","):
            self.cursor.consume(",")
            self.id_list()

    def identifier(self) -> str:
        """
        ID, plus the symbol table action.

        In the declaration section the name is declared. Elsewhere an
        undeclared name records the sticky error; the identifier still
        counts as matched.
        """
        name = self.cursor.scan_identifier()
        state = self.state

        if state.in_declaration_section:
            if state.symbols.declare(name, state.line):
                logger.debug(f"declared '{name}' on line {state.line}")
        elif not state.symbols.is_declared(name):
            error = UndeclaredIdentifierError(name, state.line, self.filename)
            if state.record_fatal(error):
                logger.debug(f"{error.location}: '{name}' used before declaration")

        return name

    def type_(self) -> str:
        """TYPE -> int | float | double"""
        for name in TYPES:
            if self.cursor.peek(name):
                self.cursor.consume(name)
                return name
        raise InvalidTypeError(self.state.line, self.filename)

    # =========================================================================
    # Statements
    # =========================================================================

    def stmt_sec(self) -> None:
        """STMT_SEC -> STMT | STMT STMT_SEC"""
        self._enter(Rule.STMT_SEC)
        self.stmt()
        self._repeat(Rule.STMT_SEC, self.stmt)

    def stmt(self) -> None:
        """STMT -> ASSIGN | IF_STMT | WHILE_STMT | INPUT | OUTPUT"""
        self._enter(Rule.STMT)
        for alternative in (self.assign, self.if_stmt, self.while_stmt, self.input, self.output):
            if self._attempt(alternative, self.state.snapshot()):
                return
        # Reported at the line the statement started from, not the offending text
        raise ExpectedStatementError(self.state.line, self.filename)

    def assign(self) -> None:
        """ASSIGN -> ID := EXPR ;"""
        self._enter(Rule.ASSIGN)
        self.identifier()
        self.cursor.consume(":=")
        self.expr()
        self.cursor.consume(";")

    def if_stmt(self) -> None:
        """IF_STMT -> if COMP then STMT_SEC [else STMT_SEC] end if ;"""
        self._enter(Rule.IF_STMT)
        self.cursor.consume("if")
        self.comp()
        self.cursor.consume("then")
        self.stmt_sec()
        if self.cursor.peek("else"):
            self.cursor.consume("else")
            self.stmt_sec()
        self.cursor.consume("end")
        self.cursor.consume("if")
        self.cursor.consume(";")

    def while_stmt(self) -> None:
        """WHILE_STMT -> while COMP loop STMT_SEC end loop ;"""
        self._enter(Rule.WHILE_STMT)
        self.cursor.consume("while")
        self.comp()
        self.cursor.consume("loop")
        self.stmt_sec()
        self.cursor.consume("end")
        self.cursor.consume("loop")
        self.cursor.consume(";")

    def input(self) -> None:
        """INPUT -> input ID_LIST ;"""
        self._enter(Rule.INPUT)
        self.cursor.consume("input")
        self.id_list()
        self.cursor.consume(";")

    def output(self) -> None:
        """OUTPUT -> output ID_LIST ; | output NUM ;"""
        self._enter(Rule.OUTPUT)
        self.cursor.consume("output")
        if not self._attempt(self.id_list, self.state.snapshot()):
            self.number()
        self.cursor.consume(";")

    # =========================================================================
    # Expressions
    # =========================================================================
    # Both binary levels recurse on their right operand, so chains of the
    # same operator associate to the right.

    def expr(self) -> None:
        """EXPR -> FACTOR | FACTOR + EXPR | FACTOR - EXPR"""
        self._enter(Rule.EXPR)
        self.factor()
        for operator in ("+", "-"):
            if self.cursor.peek(operator):
                self.cursor.consume(operator)
                self.expr()
                return

    def factor(self) -> None:
        """FACTOR -> OPERAND | OPERAND * FACTOR | OPERAND / FACTOR"""
        self._enter(Rule.FACTOR)
        self.operand()
        for operator in ("*", "/"):
            if self.cursor.peek(operator):
                self.cursor.consume(operator)
                self.factor()
                return

    def operand(self) -> None:
        """OPERAND -> NUM | ID | ( EXPR )"""
        self._enter(Rule.OPERAND)
        if self._attempt(self.number, self.state.snapshot()):
            return
        if self._attempt(self.identifier, self.state.snapshot()):
            return
        self.cursor.consume("(")
        self.expr()
        self.cursor.consume(")")

    def number(self) -> str:
        """NUM -> digit+ [ . digit+ ]"""
        return self.cursor.scan_number()

    def comp(self) -> None:
        """COMP -> ( OPERAND op OPERAND ) where op is =, <>, > or <"""
        self._enter(Rule.COMP)
        self.cursor.consume("(")
        self.operand()
        for operator in COMPARISON_OPERATORS:
            if self.cursor.peek(operator):
                self.cursor.consume(operator)
                self.operand()
                self.cursor.consume(")")
                return
        raise ExpectedComparisonError(self.state.line, self.filename)
