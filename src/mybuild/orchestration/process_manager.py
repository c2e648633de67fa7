"""
Process management for the orchestration module.

This module starts the external tools as blocking child processes. The
configuration tool writes straight to the inherited terminal; the build tool's
combined stdout/stderr is duplicated to the terminal and to a log file.
"""

import logging
import subprocess
import sys
from pathlib import Path
from typing import IO, Any, Dict, List, Optional

from ..models.runtime import CommandResult
from ..system import build_child_environment, format_command
from ..validation import CommandError
from .shared_state import RuntimeState

logger = logging.getLogger(__name__)


class ProcessManager:
    """
    Runs external commands and waits for their exit.

    There is no timeout and no retry: every call blocks until the child exits
    and reports its status code.
    """

    def __init__(self, state: RuntimeState):
        self.state = state

    def run(self, command: List[str], cwd: Path,
            env_overrides: Optional[Dict[str, str]] = None) -> CommandResult:
        """
        Run a command with inherited stdio and wait for it.

        Raises:
            CommandError: If the command cannot be started
        """
        overrides = dict(env_overrides or {})
        logger.info(f"Running: {format_command(command)} (cwd: {cwd})")
        try:
            completed = subprocess.run(
                command,
                cwd=cwd,
                env=build_child_environment(overrides),
                check=False,
            )
        except OSError as e:
            raise CommandError(
                f"Failed to start '{command[0]}': {e}", command=command
            ) from e

        logger.debug(f"'{command[0]}' exited with code {completed.returncode}")
        return CommandResult(
            command=command,
            return_code=completed.returncode,
            cwd=cwd,
            env_overrides=overrides,
        )

    def run_with_tee(self, command: List[str], cwd: Path, log_file: IO[Any],
                     env_overrides: Optional[Dict[str, str]] = None,
                     log_path: Optional[Path] = None) -> CommandResult:
        """
        Run a command, copying its combined output to stdout and a log file.

        Args:
            command: The command and its arguments
            cwd: Working directory
            log_file: Open text file receiving every output line
            env_overrides: Variables set for the child only
            log_path: Path of log_file, recorded in the result

        Raises:
            CommandError: If the command cannot be started
        """
        overrides = dict(env_overrides or {})
        logger.info(f"Running: {format_command(command)} (cwd: {cwd})")
        try:
            process = subprocess.Popen(
                command,
                cwd=cwd,
                env=build_child_environment(overrides),
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                encoding="utf-8",
                errors="replace",
                bufsize=1,
            )
        except OSError as e:
            raise CommandError(
                f"Failed to start '{command[0]}': {e}", command=command
            ) from e

        logger.info(f"Build process started with PID: {process.pid}")
        with process:
            assert process.stdout is not None
            for line in process.stdout:
                sys.stdout.write(line)
                log_file.write(line)
            sys.stdout.flush()
            log_file.flush()
            return_code = process.wait()

        logger.info(f"Build process finished with exit code: {return_code}")
        return CommandResult(
            command=command,
            return_code=return_code,
            cwd=cwd,
            env_overrides=overrides,
            log_file=log_path,
        )
