"""
Command-line interface for the mybuild build wrapper.

This module provides the main CLI entry point: it loads the configuration,
resolves the command-line options and runs the configure and build phases.
Every failure is fatal and ends the process with a non-zero exit code.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from ..config import get_config
from ..options import dump_options, resolve_options
from ..orchestration import BuildRunner
from ..validation import (
    BuildVerificationError,
    CommandError,
    ValidationError,
    handle_cli_error,
)
from .parser import PROG, parse_options

LOG_FORMAT = "%(asctime)s [%(levelname)-5.5s] %(name)s:%(filename)s:%(lineno)d\t %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger(__name__)


class _BelowWarningFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.WARNING


def configure_logging(level: int = logging.INFO) -> None:
    """
    Send informational records to stdout and warnings and errors to stderr.

    Does nothing if the root logger already has handlers.
    """
    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.addFilter(_BelowWarningFilter())
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.WARNING)

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=[stdout_handler, stderr_handler],
    )


def main_cli(argv: Optional[Sequence[str]] = None) -> None:
    """
    Main command-line interface for the build wrapper.

    Phases, strictly in order:
    - Configuration loading
    - Argument scanning and option validation
    - Option dump
    - CMake configuration in the build directory
    - Parallel make with output teed to the build log (when -B 1)

    Raises:
        SystemExit: On usage errors (code 2), on validation, command or
            build verification failures (code 1) and after --help (code 0).
    """
    configure_logging()

    try:
        app_config = get_config()
    except (OSError, ValidationError, ValueError) as e:
        handle_cli_error(
            error=e,
            context="configuration loading",
            exit_code=1,
            logger=logger,
        )

    source_dir = Path.cwd()
    raw_options = parse_options(argv, app_config, source_dir)

    try:
        options = resolve_options(raw_options, app_config, source_dir)
    except ValidationError as e:
        handle_cli_error(
            error=e,
            context="option validation",
            exit_code=1,
            logger=logger,
        )

    dump_options(options, prog=PROG)

    runner = BuildRunner(options, app_config)
    try:
        runner.run()
    except CommandError as e:
        handle_cli_error(error=e, context="external command", exit_code=1, logger=logger)
    except BuildVerificationError as e:
        handle_cli_error(error=e, context="build verification", exit_code=1, logger=logger)
    except OSError as e:
        handle_cli_error(error=e, context="build directory", exit_code=1, logger=logger)


if __name__ == "__main__":
    main_cli()
