"""
System interaction utilities.

This module provides the system-level functionality the build wrapper needs:

- Command execution with error handling and logging
- External tool discovery on PATH
- Child process environment preparation
- Processor count detection for the parallel build
"""

from .commands import (
    build_child_environment,
    find_first_executable,
    format_command,
    get_git_commit,
    run_command,
)

from .cpu import get_cpu_count

__all__ = [
    # Commands
    "build_child_environment",
    "find_first_executable",
    "format_command",
    "get_git_commit",
    "run_command",
    # CPU
    "get_cpu_count",
]
