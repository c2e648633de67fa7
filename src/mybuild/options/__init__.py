"""
Option resolution for the build wrapper.
"""

from .resolver import (
    dump_options,
    resolve_build_dir,
    resolve_debug_flag,
    resolve_gmock_zip,
    resolve_options,
)

__all__ = [
    "dump_options",
    "resolve_build_dir",
    "resolve_debug_flag",
    "resolve_gmock_zip",
    "resolve_options",
]
