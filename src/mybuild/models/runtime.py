"""
Runtime data models.

This module contains data structures produced while a build run executes:
the generated paths and the outcome of each external command.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional


@dataclass
class RunPaths:
    """
    A container for all file paths used by a single build run.
    """

    # Root of the source tree (the directory the wrapper is run from).
    source_dir: Path
    # Out-of-source build directory, e.g. "<source_dir>/bld-debug".
    build_dir: Path
    # Log file receiving the build tool output.
    build_log_file: Path


@dataclass
class CommandResult:
    """
    The outcome of one external command invocation.
    """

    command: List[str]
    return_code: int
    cwd: Path
    # Only the variables overriding the inherited environment.
    env_overrides: Dict[str, str] = field(default_factory=dict)
    log_file: Optional[Path] = None

    @property
    def succeeded(self) -> bool:
        return self.return_code == 0
