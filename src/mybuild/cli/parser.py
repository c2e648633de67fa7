"""
Command-line argument parsing for the build wrapper.

Every value flag accepts both the separate form (`-t release`) and the
attached form (`-t=release`). Values are kept as plain strings here; domain
checks happen afterwards in `mybuild.options.resolver`.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from ..models.config import AppConfig
from ..models.options import BUILD_PROFILES, DEBUG_DEFAULT, RawOptions

PROG = "mybuild"

_SANITIZERS = (("asan", "ASAN"), ("msan", "MSAN"), ("tsan", "TSAN"), ("ubsan", "UBSAN"))

# Flags taking one value, as `-x VALUE` or `-x=VALUE`.
VALUE_FLAGS = frozenset(
    ["-b", "-d", "-t", "-v", "-B", "-D", "-i", "--aarch64_ver", "--arch_type"]
)
SWITCH_FLAGS = frozenset(
    ["-g", "--clang", "-h", "--help"] + [f"--{sanitizer}" for sanitizer, _ in _SANITIZERS]
)

_EPILOG = """\
build types:
  MySQL defines build type as: Debug, Release, RelWithDebInfo.
  The mapping here is:
    debug   => Debug
    release => RelWithDebInfo

note: this tool is intended for internal use by MySQL developers.
"""


def build_parser(app_config: AppConfig, source_dir: Path) -> argparse.ArgumentParser:
    """
    Create the argument parser with defaults taken from the configuration.

    Args:
        app_config: Loaded configuration supplying option defaults
        source_dir: Source root; the default boost directory

    Returns:
        Configured ArgumentParser
    """
    defaults = app_config.build

    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Configure and build the MySQL source tree with CMake and make.",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument(
        "-b",
        dest="boost_dir",
        metavar="BOOST_DIR",
        default=str(source_dir),
        help=(
            "Set the boost directory, like /usr/local/boost_1_70_0 instead of "
            f"/usr/local/boost_1_70_0/include. Default: {source_dir}."
        ),
    )
    parser.add_argument(
        "-d",
        dest="dest_dir",
        metavar="DEST_DIR",
        default=defaults.dest_dir,
        help=f"Set the destination directory. Default: {defaults.dest_dir}.",
    )
    parser.add_argument(
        "-g",
        dest="gmock_enable",
        action="store_true",
        help="Turn on unittest (gmock) compilation.",
    )
    parser.add_argument(
        "-t",
        dest="build_type",
        metavar="|".join(BUILD_PROFILES),
        default=defaults.build_type,
        help=f"Select the build type. Default: {defaults.build_type}.",
    )
    parser.add_argument(
        "-v",
        dest="valgrind",
        metavar="1|0",
        default=defaults.valgrind,
        help=f"With or without valgrind. Default: {defaults.valgrind}.",
    )
    parser.add_argument(
        "-B",
        dest="build_action",
        metavar="1|0",
        default=defaults.build_action,
        help=f"With or without build action. Default: {defaults.build_action}.",
    )
    parser.add_argument(
        "-D",
        dest="debug",
        metavar=f"1|0|{DEBUG_DEFAULT}",
        default=DEBUG_DEFAULT,
        help="With or without debug [for debug sync etc]. Default: 1 for Debug, 0 for RelWithDebInfo.",
    )
    for sanitizer, name in _SANITIZERS:
        parser.add_argument(
            f"--{sanitizer}",
            dest=sanitizer,
            action="store_true",
            help=f"Turn on {name}.",
        )
    parser.add_argument(
        "-i",
        dest="commit_input",
        metavar="COMMIT",
        default=None,
        help="Set git commit. Default: the last commit of the source tree.",
    )
    parser.add_argument(
        "--clang",
        action="store_true",
        help="Build with clang/clang++ instead of the default compilers.",
    )
    parser.add_argument(
        "--aarch64_ver",
        metavar="VER",
        default=defaults.aarch64_ver,
        help=f"Set the aarch64 version hint. Default: {defaults.aarch64_ver}.",
    )
    parser.add_argument(
        "--arch_type",
        metavar="TYPE",
        default=defaults.arch_type,
        help="Set the architecture type hint. Default: none.",
    )
    return parser


def normalize_tokens(argv: Sequence[str], parser: argparse.ArgumentParser) -> List[str]:
    """
    Rewrite argv so argparse sees every value flag in its `-x=VALUE` form.

    A separate-form flag always takes the next token as its value, even when
    that token starts with '-'. Only exact flag names are recognized, so
    clustered switches (`-gB0`) and glued values (`-trelease`) are rejected
    here rather than left to argparse's short-option rules.
    """
    tokens: List[str] = []
    remaining = list(argv)
    while remaining:
        token = remaining.pop(0)
        if token in VALUE_FLAGS:
            if not remaining:
                parser.error(f"Missing value for option: {token}")
            tokens.append(f"{token}={remaining.pop(0)}")
        elif token in SWITCH_FLAGS:
            tokens.append(token)
        elif token.partition("=")[0] in VALUE_FLAGS and "=" in token:
            tokens.append(token)
        else:
            parser.error(f"Unknown option: {token}")
    return tokens


def parse_options(
    argv: Optional[Sequence[str]],
    app_config: AppConfig,
    source_dir: Path,
) -> RawOptions:
    """
    Scan command-line tokens into a RawOptions record.

    Unrecognized tokens or missing values print a usage error to stderr and
    raise SystemExit(2). -h/--help prints usage and raises SystemExit(0).
    """
    parser = build_parser(app_config, source_dir)
    if argv is None:
        argv = sys.argv[1:]
    args = parser.parse_args(normalize_tokens(argv, parser))
    return RawOptions(**vars(args))
