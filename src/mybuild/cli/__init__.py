"""
Command-line interface for the mybuild package.

This module provides the main CLI entry point for the build wrapper.
"""

from .main import main_cli

__all__ = [
    "main_cli",
]
