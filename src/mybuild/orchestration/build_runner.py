"""
BuildRunner: the top-level build orchestrator.

This module coordinates the configuration and build phases by delegating to
the specialized orchestration components.
"""

import logging
import shutil
from typing import List

from ..models.config import AppConfig
from ..models.options import BuildOptions
from ..models.runtime import CommandResult
from ..system import get_cpu_count
from ..validation import CommandError
from .build_configuration import BuildConfiguration
from .log_manager import LogManager
from .process_manager import ProcessManager
from .shared_state import RuntimeState

logger = logging.getLogger(__name__)


class BuildRunner:
    """
    Runs configure then build for one resolved option record.

    Any failure raises immediately; later steps are never attempted.
    """

    def __init__(self, options: BuildOptions, app_config: AppConfig):
        self.options = options
        self.app_config = app_config

        # Shared state across all components
        self.state = RuntimeState()

        self.process_manager = ProcessManager(self.state)
        self.log_manager = LogManager(self.state)
        self.configuration = BuildConfiguration(
            options, app_config, self.state, self.process_manager
        )

    def run(self) -> CommandResult:
        """
        Execute the configuration phase and, if requested, the build phase.

        Returns:
            The result of the last external command that ran

        Raises:
            CommandError: If an external tool fails
            BuildVerificationError: If the build log lacks the completion marker
        """
        self.configuration.create_run_paths()
        self.configuration.prepare_build_directory()
        result = self.configuration.run_configure()

        if self.options.should_build:
            return self.execute_build_step()
        logger.info("Build action disabled, skipping build step.")
        return result

    def compose_build_command(self, jobs: int) -> List[str]:
        """Return the build command, wrapped with unbuffer when available."""
        toolchain = self.app_config.toolchain
        command: List[str] = []
        if toolchain.unbuffer_command and shutil.which(toolchain.unbuffer_command):
            command.append(toolchain.unbuffer_command)
        command.extend([
            toolchain.make_command,
            "VERBOSE=1",
            "-C",
            str(self.options.build_dir),
            f"-j{jobs}",
        ])
        return command

    def execute_build_step(self) -> CommandResult:
        """
        Run the build tool, tee its output into the build log, then verify.

        Raises:
            CommandError: If the build tool exits non-zero
            BuildVerificationError: If the completion marker is absent
        """
        run_paths = self.state.run_paths
        if run_paths is None:
            raise RuntimeError("Run paths must be created before the build step")

        command = self.compose_build_command(get_cpu_count())

        log_file = self.log_manager.open_build_log(run_paths.build_log_file)
        try:
            result = self.process_manager.run_with_tee(
                command,
                cwd=run_paths.source_dir,
                log_file=log_file,
                env_overrides=self.state.env_overrides,
                log_path=run_paths.build_log_file,
            )
        finally:
            self.log_manager.close_build_log()

        if not result.succeeded:
            raise CommandError(
                f"Build failed with exit code {result.return_code}, see {run_paths.build_log_file}",
                command=command,
                return_code=result.return_code,
            )

        self.log_manager.verify_completion(
            run_paths.build_log_file, self.app_config.build.completion_marker
        )
        logger.info("Build completed successfully.")
        return result
