"""
Configuration validation utilities.

This module turns the raw TOML sections into validated configuration
dataclasses. Missing keys fall back to the dataclass defaults.
"""

import logging
from typing import Any, Dict

from ..models.config import AppConfig, BuildDefaults, PathsConfig, ToolchainConfig
from ..models.options import BUILD_PROFILES
from ..validation import (
    ValidationError,
    validate_binary_flag,
    validate_enum_choice,
    validate_non_empty_string,
    validate_string_list,
)

logger = logging.getLogger(__name__)


def _as_string(value: Any, field_name: str) -> str:
    """Accept TOML strings and integers for string-typed option values."""
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise ValidationError(
            f"{field_name} must be a string or an integer, got {type(value).__name__}",
            field_name=field_name,
            value=value
        )
    return str(value)


def validate_build_defaults(build_data: Dict[str, Any]) -> BuildDefaults:
    """
    Validate the `[build]` section.

    Raises:
        ValidationError: If a value is outside its allowed domain
    """
    defaults = BuildDefaults()

    build_type = validate_enum_choice(
        build_data.get("build_type", defaults.build_type),
        valid_choices=list(BUILD_PROFILES),
        field_name="build.build_type",
    )
    build_action = validate_binary_flag(
        _as_string(build_data.get("build_action", defaults.build_action), "build.build_action"),
        field_name="build.build_action",
    )
    valgrind = validate_binary_flag(
        _as_string(build_data.get("valgrind", defaults.valgrind), "build.valgrind"),
        field_name="build.valgrind",
    )
    dest_dir = validate_non_empty_string(
        build_data.get("dest_dir", defaults.dest_dir), field_name="build.dest_dir"
    )
    aarch64_ver = _as_string(
        build_data.get("aarch64_ver", defaults.aarch64_ver), "build.aarch64_ver"
    )
    arch_type = _as_string(build_data.get("arch_type", defaults.arch_type), "build.arch_type")
    build_dir_prefix = validate_non_empty_string(
        build_data.get("build_dir_prefix", defaults.build_dir_prefix),
        field_name="build.build_dir_prefix",
    )
    log_file = validate_non_empty_string(
        build_data.get("log_file", defaults.log_file), field_name="build.log_file"
    )
    completion_marker = validate_non_empty_string(
        build_data.get("completion_marker", defaults.completion_marker),
        field_name="build.completion_marker",
    )

    return BuildDefaults(
        build_type=build_type,
        dest_dir=dest_dir,
        build_action=build_action,
        valgrind=valgrind,
        aarch64_ver=aarch64_ver,
        arch_type=arch_type,
        build_dir_prefix=build_dir_prefix,
        log_file=log_file,
        completion_marker=completion_marker,
    )


def validate_toolchain_config(toolchain_data: Dict[str, Any]) -> ToolchainConfig:
    """Validate the `[toolchain]` section."""
    defaults = ToolchainConfig()

    configure_tools = validate_string_list(
        toolchain_data.get("configure_tools", defaults.configure_tools),
        field_name="toolchain.configure_tools",
    )
    make_command = validate_non_empty_string(
        toolchain_data.get("make_command", defaults.make_command),
        field_name="toolchain.make_command",
    )
    unbuffer_command = toolchain_data.get("unbuffer_command", defaults.unbuffer_command)
    if not isinstance(unbuffer_command, str):
        raise ValidationError(
            "toolchain.unbuffer_command must be a string",
            field_name="toolchain.unbuffer_command",
            value=unbuffer_command
        )
    if not unbuffer_command:
        logger.debug("No unbuffer command configured; build output may be block-buffered.")

    clang_cc = validate_non_empty_string(
        toolchain_data.get("clang_cc", defaults.clang_cc), field_name="toolchain.clang_cc"
    )
    clang_cxx = validate_non_empty_string(
        toolchain_data.get("clang_cxx", defaults.clang_cxx), field_name="toolchain.clang_cxx"
    )

    return ToolchainConfig(
        configure_tools=configure_tools,
        make_command=make_command,
        unbuffer_command=unbuffer_command,
        clang_cc=clang_cc,
        clang_cxx=clang_cxx,
    )


def validate_paths_config(paths_data: Dict[str, Any]) -> PathsConfig:
    """Validate the `[paths]` section."""
    defaults = PathsConfig()
    return PathsConfig(
        ssl_path=validate_non_empty_string(
            paths_data.get("ssl_path", defaults.ssl_path), field_name="paths.ssl_path"
        ),
        tsm_dir=validate_non_empty_string(
            paths_data.get("tsm_dir", defaults.tsm_dir), field_name="paths.tsm_dir"
        ),
        gmock_zip=validate_non_empty_string(
            paths_data.get("gmock_zip", defaults.gmock_zip), field_name="paths.gmock_zip"
        ),
    )


def validate_app_config(config_data: Dict[str, Any]) -> AppConfig:
    """
    Validate a complete parsed configuration file.

    Unknown top-level sections are ignored with a warning.
    """
    known_sections = {"build", "toolchain", "paths"}
    for section in config_data:
        if section not in known_sections:
            logger.warning(f"Ignoring unknown configuration section [{section}]")

    return AppConfig(
        build=validate_build_defaults(config_data.get("build", {})),
        toolchain=validate_toolchain_config(config_data.get("toolchain", {})),
        paths=validate_paths_config(config_data.get("paths", {})),
    )
