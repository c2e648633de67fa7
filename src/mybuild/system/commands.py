"""
Command execution and tool discovery utilities.

This module provides functions for executing short-lived system commands,
locating external tools on PATH and preparing child process environments.
"""

import logging
import os
import shutil
import subprocess
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)


def run_command(command: Sequence[str], cwd: Path) -> Tuple[int, str, str]:
    """Execute a command and capture its output.

    Args:
        command: The command and its arguments.
        cwd: Working directory path for command execution.

    Returns:
        Tuple of (return_code, stdout_string, stderr_string).
        return_code is -1 when the command could not be started.
    """
    logger.debug(f"Executing command: '{' '.join(command)}' in '{cwd}'")
    try:
        process = subprocess.run(
            list(command),
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
        return process.returncode, process.stdout, process.stderr
    except FileNotFoundError as e:
        logger.debug(f"Command not found: {command[0]}: {e}")
        return -1, "", f"Error: Command not found '{command[0]}'"
    except OSError as e:
        logger.error(f"Failed to run '{command[0]}': {type(e).__name__}: {e}")
        return -1, "", f"Error: {e}"


def find_first_executable(candidates: Sequence[str]) -> Optional[str]:
    """Return the first candidate found on PATH, or None.

    Examples:
        >>> find_first_executable(["cmake3", "cmake"])  # only cmake installed
        'cmake'
    """
    for candidate in candidates:
        if shutil.which(candidate):
            return candidate
    return None


def get_git_commit(source_dir: Path) -> str:
    """Return the hash of the last commit in source_dir.

    Returns an empty string when git is missing or source_dir is not a
    repository; the commit id is informational only.
    """
    return_code, stdout, stderr = run_command(["git", "log", "-1", "--format=%H"], cwd=source_dir)
    if return_code != 0:
        logger.warning(f"Could not determine git commit in {source_dir}: {stderr.strip()}")
        return ""
    return stdout.strip()


def build_child_environment(overrides: Mapping[str, str]) -> Dict[str, str]:
    """Copy the current environment and apply overrides for a child process.

    The parent process environment is never modified.
    """
    env = os.environ.copy()
    env.update(overrides)
    return env


def format_command(command: List[str]) -> str:
    """Render a command vector for logging."""
    return " ".join(command)
