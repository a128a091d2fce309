#!/usr/bin/env python3
"""
Hawk Checker Demo
=================

This script checks every .hawk program in examples/programs and shows
how to work with the two possible results:

1. Accepted - the trace of grammar rules entered
2. Rejected - the single error, with its line number

Usage:
    python examples/check_programs.py
"""

from pathlib import Path

from hawk import HawkChecker, CheckerOptions, Rejected


def main():
    programs_dir = Path(__file__).parent / "programs"
    checker = HawkChecker(CheckerOptions())

    for path in sorted(programs_dir.glob("*.hawk")):
        result = checker.check_file(path)

        print(f"{path.name}:")
        if isinstance(result, Rejected):
            print(f"  {result.error}")
        else:
            print(f"  accepted, {len(result.trace)} rule entries")
            print(f"  {' '.join(result.trace[:8])} ...")
        print()


if __name__ == "__main__":
    main()
