"""
Symbol table for Hawk declarations.

Hawk has a single flat scope: every identifier introduced in the
declaration section is visible to every statement. The table only
answers membership questions; declaring a name twice is accepted and
keeps the first declaration's line.

Rollback
--------
The grammar engine speculatively parses declarations and must be able to
undo names recorded by a failed attempt. Instead of copying the table for
every snapshot, insertions are journaled: mark() returns the journal
length and rollback() removes every name inserted after that mark.
"""

import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Symbol:
    """A declared identifier and the line of its first declaration."""
    name: str
    line: int


class SymbolTable:
    """
    Flat, journaled set of declared identifiers.

    Example:
        table = SymbolTable()
        mark = table.mark()
        table.declare("x", 1)
        table.rollback(mark)   # "x" is gone again
    """

    def __init__(self) -> None:
        self._symbols: dict[str, Symbol] = {}
        self._journal: list[str] = []

    def declare(self, name: str, line: int) -> bool:
        """
        Record a declaration.

        Returns:
            True if the name is new, False if it was already declared
        """
        existing = self.lookup(name)
        if existing is not None:
            logger.debug(f"'{name}' redeclared on line {line}, keeping line {existing.line}")
            return False
        self._symbols[name] = Symbol(name, line)
        self._journal.append(name)
        return True

    def is_declared(self, name: str) -> bool:
        """Return True if the name has been declared."""
        return name in self._symbols

    def lookup(self, name: str) -> Optional[Symbol]:
        """Return the Symbol for a name, or None."""
        return self._symbols.get(name)

    def mark(self) -> int:
        """Return a rollback point."""
        return len(self._journal)

    def rollback(self, mark: int) -> None:
        """Forget every declaration made after the given mark."""
        while len(self._journal) > mark:
            del self._symbols[self._journal.pop()]

    def names(self) -> list[str]:
        """Return declared names in declaration order."""
        return list(self._journal)

    def __len__(self) -> int:
        return len(self._journal)
