"""
Check results.

A check ends in exactly one of two outcomes: Accepted with the rule trace
of the successful derivation, or Rejected with the single error to report.
"""

from dataclasses import dataclass
from typing import Union

from hawk.checker.errors import HawkSyntaxError


@dataclass(frozen=True)
class Accepted:
    """The input was recognized and every identifier was declared."""
    trace: tuple[str, ...]

    @property
    def accepted(self) -> bool:
        return True


@dataclass(frozen=True)
class Rejected:
    """The input was rejected; error is the one diagnostic to report."""
    error: HawkSyntaxError

    @property
    def accepted(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return self.error.message

    @property
    def line(self) -> int:
        return self.error.line


CheckResult = Union[Accepted, Rejected]
