"""
Configuration data models.

This module contains the data structures loaded from `config.toml`: option
defaults, external tool names and the well-known paths inside the source tree.
"""

from dataclasses import dataclass, field
from typing import List


@dataclass
class BuildDefaults:
    """
    Default option values and build output settings, loaded from `[build]`.
    """

    # Build type used when -t is not given ("debug" or "release").
    build_type: str = "debug"
    # Installation prefix used when -d is not given.
    dest_dir: str = "/usr/local/mysql"
    # "1" to run make after configuring, "0" to configure only.
    build_action: str = "1"
    # "1" to configure with valgrind support.
    valgrind: str = "0"
    # ARMv8 revision hint passed through as AARCH64_VER.
    aarch64_ver: str = "8"
    # Architecture hint passed through as ARCH_TYPE. Can be an empty string.
    arch_type: str = ""
    # The build directory is "<build_dir_prefix><build_type>" under the source root.
    build_dir_prefix: str = "bld-"
    # Build output log, written in the working directory.
    log_file: str = "build.log"
    # Substring whose presence in the build log marks a completed build.
    completion_marker: str = "100%"


@dataclass
class ToolchainConfig:
    """
    Names of the external tools, loaded from `[toolchain]`.
    """

    # Configuration tool candidates, in order of preference.
    configure_tools: List[str] = field(default_factory=lambda: ["cmake3", "cmake"])
    make_command: str = "make"
    # Prefixed to the build command when found on PATH. Can be an empty string.
    unbuffer_command: str = "unbuffer"
    # Compilers exported as CC/CXX when --clang is given.
    clang_cc: str = "clang"
    clang_cxx: str = "clang++"


@dataclass
class PathsConfig:
    """
    Paths of bundled dependencies, loaded from `[paths]`.

    Relative paths are resolved against the source root.
    """

    ssl_path: str = "/usr/local/ssl"
    tsm_dir: str = "extra/TencentSM/TencentSM-1.7.3-2"
    gmock_zip: str = "source_downloads/googletest-release-1.10.0.zip"


@dataclass
class AppConfig:
    """
    The root configuration object that aggregates all loaded settings.
    """

    build: BuildDefaults
    toolchain: ToolchainConfig
    paths: PathsConfig
