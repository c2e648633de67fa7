"""
mybuild: CMake/make build wrapper for the MySQL source tree.

The package resolves a small set of build options, configures the source tree
with CMake in an out-of-source build directory and runs a parallel make whose
output is captured to a log file.

The package is organized into specialized modules:
- config: Defaults loaded from a TOML configuration file
- models: Data structures and type definitions
- validation: Option validation and error handling
- options: Option resolution and reporting
- system: Command execution, tool discovery and CPU detection
- orchestration: Configure and build phases
- cli: Command-line interface

Usage:
    From command line:
        mybuild -t release -b /usr/local/boost_1_70_0

    Programmatically:
        from mybuild import BuildRunner, get_config, resolve_options
        runner = BuildRunner(options, get_config())
        runner.run()
"""

from .config import get_config, clear_config_cache, set_config_path
from .orchestration import BuildRunner
from .options import dump_options, resolve_options
from .cli import main_cli

from .models import (
    AppConfig,
    BuildDefaults,
    BuildOptions,
    CommandResult,
    RawOptions,
    RunPaths,
)

from .validation import (
    BuildVerificationError,
    CommandError,
    ValidationError,
)

__version__ = "1.0.0"

__all__ = [
    # Main interfaces
    "get_config",
    "clear_config_cache",
    "set_config_path",
    "BuildRunner",
    "dump_options",
    "resolve_options",
    "main_cli",
    # Models
    "AppConfig",
    "BuildDefaults",
    "BuildOptions",
    "CommandResult",
    "RawOptions",
    "RunPaths",
    # Errors
    "BuildVerificationError",
    "CommandError",
    "ValidationError",
]
