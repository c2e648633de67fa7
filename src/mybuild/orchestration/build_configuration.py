"""
Build configuration for the orchestration module.

This module prepares the build directory, picks the CMake executable and
translates the resolved options into CMake cache definitions.
"""

import logging
from pathlib import Path
from typing import Dict, List, Tuple

from ..models.config import AppConfig
from ..models.options import BuildOptions
from ..models.runtime import CommandResult, RunPaths
from ..system import find_first_executable, get_git_commit
from ..validation import CommandError
from .process_manager import ProcessManager
from .shared_state import RuntimeState

logger = logging.getLogger(__name__)

CMAKE_CACHE_FILE = "CMakeCache.txt"

# Definitions passed on every configuration run regardless of options.
CONSTANT_DEFINITIONS: Tuple[Tuple[str, str], ...] = (
    ("ENABLED_PROFILING", "1"),
    ("WITH_EXTRA_CHARSETS", "all"),
    ("WITH_SSL", "bundled"),
    ("WITH_CURL", "system"),
    ("WITH_ENTERPRISE_ENCRYPTION", "1"),
    ("WITH_ZLIB", "bundled"),
    ("WITH_INNOBASE_STORAGE_ENGINE", "1"),
    ("WITH_ARCHIVE_STORAGE_ENGINE", "1"),
    ("WITH_BLACKHOLE_STORAGE_ENGINE", "1"),
    ("WITH_PERFSCHEMA_STORAGE_ENGINE", "1"),
    ("WITH_FEDERATED_STORAGE_ENGINE", "1"),
    # The example engine only gets in the way of the test suite.
    ("WITH_EXAMPLE_STORAGE_ENGINE", "0"),
    ("ENABLED_LOCAL_INFILE", "0"),
    ("INSTALL_LAYOUT", "STANDALONE"),
    ("CMAKE_EXPORT_COMPILE_COMMANDS", "ON"),
    ("TXSQL_MODE", "txsql"),
    ("DOWNLOAD_BOOST", "1"),
)


class BuildConfiguration:
    """
    Runs the configuration phase of a build.

    Call order: create_run_paths(), prepare_build_directory(), run_configure().
    """

    def __init__(self, options: BuildOptions, app_config: AppConfig,
                 state: RuntimeState, process_manager: ProcessManager):
        self.options = options
        self.app_config = app_config
        self.state = state
        self.process_manager = process_manager

    def create_run_paths(self) -> RunPaths:
        """Derive the paths used by this run and store them in the state."""
        run_paths = RunPaths(
            source_dir=self.options.source_dir,
            build_dir=self.options.build_dir,
            build_log_file=self.options.source_dir / self.app_config.build.log_file,
        )
        self.state.run_paths = run_paths
        return run_paths

    def prepare_build_directory(self) -> Path:
        """
        Create the build directory, or reuse it and drop stale CMake caches.

        Returns:
            The build directory path
        """
        build_dir = self.options.build_dir
        if not build_dir.is_dir():
            build_dir.mkdir()
            logger.info(f"Created build directory '{build_dir}'")
            return build_dir

        logger.info(f"Directory '{build_dir}' exists, use it.")
        # An in-source cache would make CMake ignore the build directory.
        for cache_file in (build_dir / CMAKE_CACHE_FILE,
                           self.options.source_dir / CMAKE_CACHE_FILE):
            if cache_file.is_file():
                cache_file.unlink()
                logger.info(f"Removed stale CMake cache '{cache_file}'")
        return build_dir

    def find_configure_tool(self) -> str:
        """
        Pick the first configuration tool found on PATH.

        Raises:
            CommandError: If none of the candidates is installed
        """
        candidates = self.app_config.toolchain.configure_tools
        tool = find_first_executable(candidates)
        if tool is None:
            raise CommandError(f"None of {candidates} found on PATH", command=list(candidates))
        return tool

    def resolve_commit_id(self) -> str:
        """Use the -i override when given, else the last commit of the source tree."""
        if self.options.commit_input:
            commit_id = self.options.commit_input
        else:
            commit_id = get_git_commit(self.options.source_dir)
        return commit_id

    def compiler_environment(self) -> Dict[str, str]:
        """Return the CC/CXX overrides for the selected toolchain."""
        overrides: Dict[str, str] = {}
        if self.options.clang:
            logger.info("clang is ON")
            overrides["CC"] = self.app_config.toolchain.clang_cc
            overrides["CXX"] = self.app_config.toolchain.clang_cxx
        self.state.env_overrides = overrides
        return overrides

    def cmake_definitions(self, commit_id: str) -> List[Tuple[str, str]]:
        """Return the ordered (name, value) cache definitions for this run."""
        options = self.options
        paths = self.app_config.paths
        dest_dir = options.dest_dir

        definitions = [
            ("FORCE_INSOURCE_BUILD", "1"),
            ("CMAKE_BUILD_TYPE", options.cmake_build_type),
            ("SYSCONFDIR", dest_dir),
            ("CMAKE_INSTALL_PREFIX", dest_dir),
            ("MYSQL_DATADIR", f"{dest_dir}/data"),
            ("WITH_DEBUG", options.debug),
            ("WITH_VALGRIND", options.valgrind),
            ("WITH_SSL_PATH", str(options.source_dir / paths.ssl_path)),
            ("WITH_BOOST", f"{options.boost_dir / 'boost'}/"),
            ("WITH_TSM", str(options.source_dir / paths.tsm_dir)),
            ("WITH_ASAN", options.asan),
            ("WITH_MSAN", options.msan),
            ("WITH_TSAN", options.tsan),
            ("WITH_UBSAN", options.ubsan),
            ("LOCAL_GMOCK_ZIP", options.gmock_zip),
            ("GIT_COMMIT", commit_id),
            ("AARCH64_VER", options.aarch64_ver),
            ("ARCH_TYPE", options.arch_type),
        ]
        definitions.extend(CONSTANT_DEFINITIONS)
        return definitions

    def compose_cmake_arguments(self, tool: str, commit_id: str) -> List[str]:
        """Build the full configuration command vector."""
        command = [tool, str(self.options.source_dir)]
        command.extend(f"-D{name}={value}" for name, value in self.cmake_definitions(commit_id))
        return command

    def run_configure(self) -> CommandResult:
        """
        Invoke the configuration tool inside the build directory.

        Raises:
            CommandError: If the tool is missing or exits non-zero
        """
        tool = self.find_configure_tool()
        commit_id = self.resolve_commit_id()
        env_overrides = self.compiler_environment()
        command = self.compose_cmake_arguments(tool, commit_id)

        logger.info(f"Start to run {tool} at {self.options.build_dir}...")
        result = self.process_manager.run(
            command, cwd=self.options.build_dir, env_overrides=env_overrides
        )
        if not result.succeeded:
            raise CommandError(
                f"{tool} failed with exit code {result.return_code}",
                command=command,
                return_code=result.return_code,
            )
        return result
