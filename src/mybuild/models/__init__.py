"""
Data models for the build wrapper.

Configuration Models:
- Option defaults, tool names and bundled dependency paths

Option Models:
- Raw command-line values and the resolved, read-only option record

Runtime Models:
- Paths used by a run and the outcome of external commands
"""

from .config import AppConfig, BuildDefaults, PathsConfig, ToolchainConfig
from .options import BUILD_PROFILES, DEBUG_DEFAULT, BuildOptions, RawOptions
from .runtime import CommandResult, RunPaths

__all__ = [
    # Configuration
    "AppConfig",
    "BuildDefaults",
    "PathsConfig",
    "ToolchainConfig",
    # Options
    "BUILD_PROFILES",
    "DEBUG_DEFAULT",
    "BuildOptions",
    "RawOptions",
    # Runtime
    "CommandResult",
    "RunPaths",
]
