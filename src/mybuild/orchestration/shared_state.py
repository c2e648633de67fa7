"""
Shared data structures for the orchestration module.

This module defines the runtime state passed between the orchestration
components of a single build run.
"""

from dataclasses import dataclass, field
from typing import IO, Any, Dict, Optional

from ..models.runtime import RunPaths


@dataclass
class RuntimeState:
    """
    Runtime state shared across orchestration components.

    Filled in phase by phase; nothing here outlives the process.
    """
    # Paths for this run
    run_paths: Optional[RunPaths] = None

    # Configuration step
    env_overrides: Dict[str, str] = field(default_factory=dict)

    # Build step
    build_log: Optional[IO[Any]] = None
