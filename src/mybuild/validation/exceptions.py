"""
Exception types and error handling helpers.

Every failure in the build wrapper is fatal: the helpers here only decide how
an error is logged and whether the process exits, they never retry.
"""

import logging
import sys
from enum import Enum
from typing import Any, List, Optional

logger = logging.getLogger(__name__)


class ErrorSeverity(Enum):
    """Log level an error is reported at."""
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


class ValidationError(Exception):
    """
    Raised when an option value is outside its allowed domain.

    The field name and offending value are kept so callers can report them
    without parsing the message.
    """

    def __init__(self, message: str, field_name: Optional[str] = None,
                 value: Any = None, severity: ErrorSeverity = ErrorSeverity.ERROR):
        super().__init__(message)
        self.field_name = field_name
        self.value = value
        self.severity = severity


class CommandError(Exception):
    """Raised when an external tool cannot be started or exits non-zero."""

    def __init__(self, message: str, command: Optional[List[str]] = None,
                 return_code: Optional[int] = None):
        super().__init__(message)
        self.command = command or []
        self.return_code = return_code


class BuildVerificationError(Exception):
    """Raised when the build log does not contain the completion marker."""

    def __init__(self, message: str, log_file: Optional[str] = None,
                 marker: Optional[str] = None):
        super().__init__(message)
        self.log_file = log_file
        self.marker = marker


def handle_error(
    error: Exception,
    context: str,
    severity: ErrorSeverity = ErrorSeverity.ERROR,
    reraise: bool = True,
    logger: Optional[logging.Logger] = None
) -> None:
    """
    Log an error with its context, then optionally re-raise it.

    Args:
        error: The exception that occurred
        context: Context description of where the error occurred
        severity: Level to log at; CRITICAL also logs the traceback
        reraise: Whether to re-raise the exception after logging
        logger: Logger instance to use (defaults to module logger)
    """
    effective_logger = logger or globals()["logger"]
    effective_logger.log(
        severity.value,
        f"Error in {context}: {error}",
        exc_info=severity is ErrorSeverity.CRITICAL,
    )

    if reraise:
        raise error


def handle_config_error(error: Exception, context: str, **kwargs) -> None:
    """Handle configuration-related errors."""
    handle_error(error, f"config {context}", **kwargs)


def handle_cli_error(error: Exception, context: str, **kwargs) -> None:
    """Log a fatal CLI error and terminate the process."""
    exit_code = kwargs.pop('exit_code', 1)
    handle_error(error, f"CLI {context}", reraise=False, **kwargs)

    sys.exit(exit_code)
