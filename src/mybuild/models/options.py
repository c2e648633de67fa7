"""
Build option data models.

`RawOptions` holds the values exactly as scanned from the command line;
`BuildOptions` is the validated, read-only record every later phase reads.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# Maps the user-facing build type to the CMake build profile.
BUILD_PROFILES = {
    "debug": "Debug",
    "release": "RelWithDebInfo",
}

# Value of the debug option when it is left unset.
DEBUG_DEFAULT = "default"


@dataclass
class RawOptions:
    """
    Option values as scanned from the command line, not yet validated.

    All values stay strings so that out-of-domain input reaches validation
    untouched.
    """

    boost_dir: str
    dest_dir: str
    build_type: str
    build_action: str
    valgrind: str
    debug: str = DEBUG_DEFAULT
    gmock_enable: bool = False
    asan: bool = False
    msan: bool = False
    tsan: bool = False
    ubsan: bool = False
    commit_input: Optional[str] = None
    clang: bool = False
    aarch64_ver: str = "8"
    arch_type: str = ""


@dataclass(frozen=True)
class BuildOptions:
    """
    The resolved option record.

    Binary options are kept as the "0"/"1" strings CMake expects.
    """

    # --- User selections ---
    build_type: str
    boost_dir: Path
    dest_dir: str
    build_action: str
    valgrind: str
    debug: str
    asan: str
    msan: str
    tsan: str
    ubsan: str
    commit_input: Optional[str]
    clang: bool
    aarch64_ver: str
    arch_type: str

    # --- Derived values ---
    cmake_build_type: str
    gmock_zip: str
    source_dir: Path
    build_dir: Path

    @property
    def should_build(self) -> bool:
        """True when the build step is requested."""
        return self.build_action == "1"

    @property
    def debug_enabled(self) -> bool:
        return self.debug == "1"
