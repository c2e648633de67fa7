"""
Option resolution: validation and derivation of the build option record.

Validation runs once after argument scanning, in a fixed order, and stops at
the first failure. No directory is created and no external process is started
here, so a failed resolution leaves the working tree untouched.
"""

import logging
from pathlib import Path

from ..models.config import AppConfig
from ..models.options import BUILD_PROFILES, DEBUG_DEFAULT, BuildOptions, RawOptions
from ..validation import (
    validate_binary_flag,
    validate_enum_choice,
    validate_mapped_choice,
    validate_not_regular_file,
    validate_path_exists,
)

logger = logging.getLogger(__name__)


def resolve_debug_flag(debug: str, cmake_build_type: str) -> str:
    """
    Resolve the debug option against the build profile.

    "default" becomes "1" for Debug and "0" for RelWithDebInfo; explicit
    values must be "1" or "0".

    Raises:
        ValidationError: If the value is not 1, 0 or default
    """
    if debug == DEBUG_DEFAULT:
        return "1" if cmake_build_type == BUILD_PROFILES["debug"] else "0"
    return validate_enum_choice(
        debug,
        valid_choices=["0", "1"],
        field_name="debug",
        message="Invalid debug value, it must be 1, 0, or default.",
    )


def resolve_build_dir(app_config: AppConfig, source_dir: Path, build_type: str) -> Path:
    """Return the build directory for a build type, e.g. `<source>/bld-debug`."""
    return source_dir / f"{app_config.build.build_dir_prefix}{build_type}"


def resolve_gmock_zip(app_config: AppConfig, source_dir: Path, enabled: bool) -> str:
    """Return the bundled googletest archive path, or "" when -g was not given."""
    if not enabled:
        return ""
    return str(source_dir / app_config.paths.gmock_zip)


def resolve_options(raw: RawOptions, app_config: AppConfig, source_dir: Path) -> BuildOptions:
    """
    Validate scanned options and derive the read-only option record.

    Args:
        raw: Values scanned from the command line
        app_config: Loaded configuration
        source_dir: Root of the source tree

    Returns:
        The resolved BuildOptions

    Raises:
        ValidationError: On the first out-of-domain value
    """
    boost_dir = validate_path_exists(raw.boost_dir, must_be_dir=True, field_name="Boost directory")

    build_action = validate_binary_flag(raw.build_action, field_name="build_action")

    cmake_build_type = validate_mapped_choice(
        raw.build_type, BUILD_PROFILES, field_name="build type"
    )

    valgrind = validate_binary_flag(raw.valgrind, field_name="valgrind")

    debug = resolve_debug_flag(raw.debug, cmake_build_type)

    build_dir = validate_not_regular_file(
        resolve_build_dir(app_config, source_dir, raw.build_type),
        field_name="build_dir",
    )

    return BuildOptions(
        build_type=raw.build_type,
        boost_dir=boost_dir,
        dest_dir=raw.dest_dir,
        build_action=build_action,
        valgrind=valgrind,
        debug=debug,
        asan="1" if raw.asan else "0",
        msan="1" if raw.msan else "0",
        tsan="1" if raw.tsan else "0",
        ubsan="1" if raw.ubsan else "0",
        commit_input=raw.commit_input or None,
        clang=raw.clang,
        aarch64_ver=raw.aarch64_ver,
        arch_type=raw.arch_type,
        cmake_build_type=cmake_build_type,
        gmock_zip=resolve_gmock_zip(app_config, source_dir, raw.gmock_enable),
        source_dir=source_dir,
        build_dir=build_dir,
    )


def dump_options(options: BuildOptions, prog: str = "mybuild") -> None:
    """Report the resolved options before any external process runs."""
    logger.info(f"Dumping the options used by {prog} ...")
    for name, value in (
        ("build_type", options.build_type),
        ("boost_dir", options.boost_dir),
        ("build_action", options.build_action),
        ("dest_dir", options.dest_dir),
        ("valgrind", options.valgrind),
        ("debug", options.debug),
        ("asan", options.asan),
        ("msan", options.msan),
        ("tsan", options.tsan),
        ("ubsan", options.ubsan),
        ("gmock_zip", options.gmock_zip),
        ("clang", int(options.clang)),
        ("aarch64_ver", options.aarch64_ver),
        ("arch_type", options.arch_type),
    ):
        logger.info(f"{name}={value}")
