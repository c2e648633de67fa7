"""
Orchestration module for the build wrapper.

Components:
- BuildRunner: Main orchestrator
- BuildConfiguration: Build directory preparation and CMake invocation
- ProcessManager: Child process execution
- LogManager: Build log handling and completion check
"""

from .build_configuration import CONSTANT_DEFINITIONS, BuildConfiguration
from .build_runner import BuildRunner
from .log_manager import LogManager
from .process_manager import ProcessManager
from .shared_state import RuntimeState

__all__ = [
    "BuildConfiguration",
    "BuildRunner",
    "CONSTANT_DEFINITIONS",
    "LogManager",
    "ProcessManager",
    "RuntimeState",
]
