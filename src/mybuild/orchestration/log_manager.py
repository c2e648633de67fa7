"""
Log management for the orchestration module.

This module owns the build log: it is opened fresh for every run, receives the
build tool's output and is scanned afterwards for the completion marker.
"""

import logging
from pathlib import Path
from typing import IO, Any

from ..validation import BuildVerificationError
from .shared_state import RuntimeState

logger = logging.getLogger(__name__)


class LogManager:
    """
    Handles the build log file for a single run.
    """

    def __init__(self, state: RuntimeState):
        self.state = state

    def open_build_log(self, path: Path) -> IO[Any]:
        """
        Open the build log for writing, truncating output of a previous run.

        Raises:
            OSError: If the file cannot be opened
        """
        if self.state.build_log is not None:
            raise RuntimeError("Build log is already open")
        self.state.build_log = open(path, "w", encoding="utf-8")
        logger.debug(f"Opened build log: {path}")
        return self.state.build_log

    def close_build_log(self) -> None:
        """Close the build log if it is open."""
        if self.state.build_log is None:
            return
        try:
            self.state.build_log.close()
        except OSError as e:
            logger.warning(f"Failed to close build log: {e}")
        finally:
            self.state.build_log = None

    @staticmethod
    def log_contains(path: Path, marker: str) -> bool:
        """Return True if the log file contains marker anywhere."""
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            for line in f:
                if marker in line:
                    return True
        return False

    def verify_completion(self, path: Path, marker: str) -> None:
        """
        Check the captured build output for the completion marker.

        Raises:
            BuildVerificationError: If the marker is absent or the log is missing
        """
        try:
            found = self.log_contains(path, marker)
        except FileNotFoundError as e:
            raise BuildVerificationError(
                f"Build log {path} not found", log_file=str(path), marker=marker
            ) from e

        if not found:
            raise BuildVerificationError(
                f"Build did not complete: '{marker}' not found in {path}",
                log_file=str(path),
                marker=marker,
            )
        logger.info(f"Found completion marker '{marker}' in {path}")
