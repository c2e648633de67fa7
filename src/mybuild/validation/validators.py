"""
Validation functions for option values.

Option values arrive as strings from the command line or TOML defaults; the
functions here check them against their allowed domains and return the
normalized value.
"""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .exceptions import ValidationError


def validate_enum_choice(
    value: Any,
    valid_choices: List[str],
    field_name: str = "value",
    message: Optional[str] = None,
) -> str:
    """
    Validate that a value is one of the allowed choices.

    Args:
        value: Value to validate
        valid_choices: List of allowed values
        field_name: Name of the field being validated
        message: Optional message replacing the generated one

    Returns:
        Validated value as a string

    Raises:
        ValidationError: If the value is not an allowed choice
    """
    str_value = str(value)
    if str_value not in valid_choices:
        raise ValidationError(
            message or f"{field_name} must be one of {valid_choices}, got '{str_value}'",
            field_name=field_name,
            value=value
        )
    return str_value


def validate_binary_flag(value: Any, field_name: str = "value") -> str:
    """
    Validate a string-typed boolean that must be exactly "0" or "1".

    Returns:
        The flag as "0" or "1"

    Raises:
        ValidationError: For any other value, including "true" or "01"
    """
    return validate_enum_choice(
        value,
        valid_choices=["0", "1"],
        field_name=field_name,
        message=f"Invalid {field_name} value, it must be 1 or 0.",
    )


def validate_mapped_choice(
    value: Any,
    mapping: Dict[str, str],
    field_name: str = "value",
) -> str:
    """
    Validate a value against the keys of a mapping and return the mapped value.

    Example:
        >>> validate_mapped_choice("release", {"debug": "Debug", "release": "RelWithDebInfo"})
        'RelWithDebInfo'
    """
    key = validate_enum_choice(
        value,
        valid_choices=list(mapping),
        field_name=field_name,
        message=(
            f"Invalid {field_name}, it must be "
            + " or ".join(f'"{choice}"' for choice in mapping)
            + "."
        ),
    )
    return mapping[key]


def validate_path_exists(
    path: Union[str, Path],
    must_be_dir: bool = False,
    field_name: str = "path",
) -> Path:
    """
    Validate that a path exists (and optionally that it is a directory).

    Args:
        path: Path to validate
        must_be_dir: Require the path to be a directory
        field_name: Name of the field being validated

    Returns:
        The path as a Path object

    Raises:
        ValidationError: If the path does not exist or is not a directory
    """
    path_str = str(path)
    if must_be_dir and not os.path.isdir(path_str):
        raise ValidationError(
            f"{field_name} {path_str} not exists or is not a directory.",
            field_name=field_name,
            value=path_str
        )
    if not os.path.exists(path_str):
        raise ValidationError(
            f"{field_name} does not exist: {path_str}",
            field_name=field_name,
            value=path_str
        )
    return Path(path_str)


def validate_not_regular_file(path: Union[str, Path], field_name: str = "path") -> Path:
    """
    Validate that a path is not an existing regular file.

    A missing path or an existing directory both pass.
    """
    path_obj = Path(path)
    if path_obj.is_file():
        raise ValidationError(
            f"File '{path_obj}' exists but it is not a directory.",
            field_name=field_name,
            value=str(path_obj)
        )
    return path_obj


def validate_non_empty_string(value: Any, field_name: str = "value") -> str:
    """Validate that a value is a non-empty string."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(
            f"{field_name} must be a non-empty string",
            field_name=field_name,
            value=value
        )
    return value


def validate_string_list(value: Any, field_name: str = "value") -> List[str]:
    """Validate a non-empty list of non-empty strings."""
    if not isinstance(value, list) or not value:
        raise ValidationError(
            f"{field_name} must be a non-empty list of strings",
            field_name=field_name,
            value=value
        )
    return [validate_non_empty_string(item, field_name=field_name) for item in value]
