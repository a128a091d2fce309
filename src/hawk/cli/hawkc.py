"""
hawkc - Hawk Checker Command-Line Interface
===========================================

This module implements the command-line interface for the Hawk checker.
It reads one source file, checks it, and prints either the trace of
grammar rules entered or the single error found.

Usage Examples
--------------
Check a file:
    $ hawkc program.hawk

Check the default input (~/Documents/input.hawk or $HAWK_INPUT):
    $ hawkc

Only report errors:
    $ hawkc --no-trace program.hawk

Verbose mode (debug logging of backtracking):
    $ hawkc -v program.hawk
"""

import logging
from pathlib import Path
from typing import Optional

import click

from hawk import __version__
from hawk.checker import CheckerOptions, HawkChecker, Rejected, default_input_path
from hawk.cli.errors import handle_cli_exception

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    required=False,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "--trace/--no-trace",
    default=None,
    help="Print the rule trace on success (default: on, or off if HAWK_NO_TRACE is set)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="hawkc")
def main(input_file: Optional[Path], trace: Optional[bool], verbose: bool) -> None:
    """
    Check a Hawk program for syntax and undeclared identifiers.

    INPUT_FILE is the Hawk source file to check. When omitted, the file
    named by $HAWK_INPUT is used, or input.hawk in your Documents folder.

    On success the grammar rules entered are printed one per line.
    On failure a single line is printed to stderr:

    \b
        ERROR !! <message> in Line <line>.

    \b
    Exit codes:
        0  program accepted
        1  program rejected
        2  input file missing or unreadable
        3  internal error
    """
    setup_logging(verbose)

    if input_file is None:
        input_file = default_input_path()
        logger.debug(f"no input file given, using {input_file}")

    options = CheckerOptions.from_env()
    if trace is not None:
        options.trace = trace
    options.filename = str(input_file)

    try:
        if verbose:
            click.echo(f"Checking {input_file}...")

        result = HawkChecker(options).check_file(input_file)

        if isinstance(result, Rejected):
            handle_cli_exception(result.error, verbose)

        for rule in result.trace:
            click.echo(rule)

        if verbose:
            click.echo(f"Checked {input_file}: OK")

    except Exception as e:
        handle_cli_exception(e, verbose)


if __name__ == "__main__":
    main()
