"""
Hawk Parser State
=================

ParserState bundles everything the grammar engine mutates while
recognizing one input: the cursor, the rule trace, the declaration
section flag, the symbol table and the sticky error slot.

Backtracking
------------
Before trying an alternative, a rule takes a Snapshot. If the attempt
fails, restore() rolls back the cursor, line, trace, declaration flag and
symbol table. The sticky error is deliberately absent from Snapshot, so
no restore path can ever clear it.

A state lives for exactly one top-level parse and is then discarded.
"""

from dataclasses import dataclass, field
from typing import Optional

from hawk.checker.cursor import Cursor
from hawk.checker.errors import HawkSemanticError
from hawk.checker.symbols import SymbolTable


@dataclass(frozen=True)
class Snapshot:
    """
    Rollback point for one alternative attempt.

    Attributes:
        pos: Cursor offset
        line: Line number
        trace_length: Number of trace entries to keep
        in_declaration_section: Declaration flag
        symbols_mark: Symbol table journal mark
    """
    pos: int
    line: int
    trace_length: int
    in_declaration_section: bool
    symbols_mark: int


@dataclass
class ParserState:
    """
    Mutable recognizer state for one input.

    Attributes:
        cursor: Position tracking and lexical scanning
        trace: Rule names entered so far, in order
        in_declaration_section: True while the declaration section is
            being recognized; identifiers are then recorded, not checked
        symbols: Declared identifiers
        fatal_error: The first sticky error, if any
    """
    cursor: Cursor
    trace: list[str] = field(default_factory=list)
    in_declaration_section: bool = False
    symbols: SymbolTable = field(default_factory=SymbolTable)
    fatal_error: Optional[HawkSemanticError] = None

    @classmethod
    def from_source(cls, source: str, filename: Optional[str] = None) -> "ParserState":
        """Create a fresh state positioned at the start of source."""
        return cls(cursor=Cursor(source, filename))

    @property
    def line(self) -> int:
        """Current line number."""
        return self.cursor.line

    def snapshot(self) -> Snapshot:
        """Capture everything a failed alternative must roll back."""
        pos, line = self.cursor.mark()
        return Snapshot(
            pos=pos,
            line=line,
            trace_length=len(self.trace),
            in_declaration_section=self.in_declaration_section,
            symbols_mark=self.symbols.mark(),
        )

    def restore(self, snapshot: Snapshot) -> None:
        """Roll back to a snapshot. The sticky error is never touched."""
        self.cursor.restore(snapshot.pos, snapshot.line)
        del self.trace[snapshot.trace_length:]
        self.in_declaration_section = snapshot.in_declaration_section
        self.symbols.rollback(snapshot.symbols_mark)

    def record_fatal(self, error: HawkSemanticError) -> bool:
        """
        Record a sticky error unless one is already set.

        Returns:
            True if this error became the sticky error
        """
        if self.fatal_error is not None:
            return False
        self.fatal_error = error
        return True
