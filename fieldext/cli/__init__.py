"""
Command-line interface module for fieldext.

This module provides the CLI entry point for listing extenders and
replaying actions through pipeline definitions.
"""

from fieldext.cli.main import main

__all__ = ["main"]
