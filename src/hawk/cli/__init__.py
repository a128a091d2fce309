"""
Hawk Command-Line Interface
===========================

This package provides the command-line tools for Hawk:

- **hawkc**: syntax and declaration checker

Each tool is implemented as a Click-based CLI application with
help text and consistent exit codes.
"""

__all__ = ["hawkc"]
