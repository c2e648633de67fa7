"""
Validation and error handling for the mybuild package.

This module provides option-value validation and consistent error reporting
across the application.
"""

from .exceptions import (
    BuildVerificationError,
    CommandError,
    ErrorSeverity,
    ValidationError,
    handle_error,
    handle_config_error,
    handle_cli_error,
)

from .validators import (
    validate_binary_flag,
    validate_enum_choice,
    validate_mapped_choice,
    validate_non_empty_string,
    validate_not_regular_file,
    validate_path_exists,
    validate_string_list,
)

__all__ = [
    # Exceptions and handlers
    "BuildVerificationError",
    "CommandError",
    "ErrorSeverity",
    "ValidationError",
    "handle_error",
    "handle_config_error",
    "handle_cli_error",
    # Validators
    "validate_binary_flag",
    "validate_enum_choice",
    "validate_mapped_choice",
    "validate_non_empty_string",
    "validate_not_regular_file",
    "validate_path_exists",
    "validate_string_list",
]
