"""
Hawk Checker Main Module
========================

This module provides the main interface for checking Hawk programs.
It wraps the grammar engine with source preparation and configuration:

    Source → Normalize newlines → Recognize → Accepted | Rejected

Usage
-----
Command line:
    $ hawkc program.hawk

Programmatic:
    >>> from hawk.checker import check_source
    >>> result = check_source("program begin y := 1; end;")
    >>> print(result.error)
    ERROR !! identifier not declared in Line 1.

Configuration
-------------
CheckerOptions can be built directly or from environment variables:

    HAWK_INPUT          default input file for hawkc
    HAWK_NO_TRACE       if truthy, Accepted results carry an empty trace
    HAWK_KEEP_NEWLINES  if truthy, '\\r' is not normalized to '\\n'
"""

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

from hawk.checker.grammar import HawkParser
from hawk.checker.result import Accepted, CheckResult, Rejected

logger = logging.getLogger(__name__)

# Name of the file hawkc reads when no input is given
DEFAULT_INPUT_NAME = "input.hawk"

_TRUTHY = ("1", "true", "yes", "on")


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in _TRUTHY


def default_input_path() -> Path:
    """
    Return the file checked when no input path is given.

    $HAWK_INPUT if set, otherwise input.hawk in the user's Documents folder.
    """
    if env_path := os.environ.get("HAWK_INPUT"):
        return Path(env_path).expanduser()
    return Path.home() / "Documents" / DEFAULT_INPUT_NAME


@dataclass
class CheckerOptions:
    """
    Checker configuration options.

    Attributes:
        filename: Source name used in log messages
        normalize_newlines: Convert '\\r\\n' and lone '\\r' to '\\n' before
                            checking, so every line ending counts once
        trace: Return the rule trace in Accepted results. The trace is
               always recorded; this only controls what callers get back.
    """
    filename: str = "<input>"
    normalize_newlines: bool = True
    trace: bool = True

    @classmethod
    def from_env(cls) -> "CheckerOptions":
        """
        Create CheckerOptions from environment variables.

        Environment variables (all optional):
            HAWK_NO_TRACE: Disable the trace in results
            HAWK_KEEP_NEWLINES: Disable newline normalization
        """
        options = cls()
        if _env_flag("HAWK_NO_TRACE"):
            options.trace = False
        if _env_flag("HAWK_KEEP_NEWLINES"):
            options.normalize_newlines = False
        return options


class HawkChecker:
    """
    Syntax and declaration checker for Hawk programs.

    Example:
        checker = HawkChecker()
        result = checker.check_file("input.hawk")
        if result.accepted:
            print("\\n".join(result.trace))
        else:
            print(result.error)

    Attributes:
        options: Checker configuration options
    """

    def __init__(self, options: Optional[CheckerOptions] = None):
        self.options = options or CheckerOptions()

    def check_source(self, source: str, filename: Optional[str] = None) -> CheckResult:
        """
        Check Hawk source text.

        Args:
            source: The complete program text
            filename: Source name for logging (defaults to options.filename)

        Returns:
            Accepted with the rule trace, or Rejected with the first error
        """
        filename = filename or self.options.filename
        if self.options.normalize_newlines:
            source = source.replace("\r\n", "\n").replace("\r", "\n")

        parser = HawkParser(source, filename)
        result = parser.parse()

        if isinstance(result, Rejected):
            logger.info(f"{result.error.location}: rejected: {result.message}")
            return result

        declared = parser.state.symbols.names()
        logger.debug(
            f"{filename}: accepted after {len(result.trace)} rule entries, "
            f"{len(declared)} identifiers declared ({', '.join(declared)})"
        )
        if not self.options.trace:
            return Accepted(())
        return result

    def check_file(self, filepath) -> CheckResult:
        """
        Check a Hawk source file.

        Args:
            filepath: Path to the source file (read as UTF-8)

        Raises:
            FileNotFoundError: If the source file does not exist
        """
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"Source file not found: {filepath}")

        source = path.read_text(encoding="utf-8")
        return self.check_source(source, str(path))


def check_source(source: str, options: Optional[CheckerOptions] = None, **overrides) -> CheckResult:
    """
    Convenience function: check source text with optional option overrides.

    Example:
        result = check_source(text, trace=False)
    """
    options = replace(options or CheckerOptions(), **overrides)
    return HawkChecker(options).check_source(source)
