"""YAML parsing utilities for tabsql.

This module provides functions for loading export options and connection
profiles from YAML (or JSON, which YAML parses) files with validation.
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from tabsql.exceptions import ValidationError
from tabsql.models.options import ExportOptions
from tabsql.models.profile import ConnectionProfile


def substitute_env_vars(data: Any) -> Any:
    """Recursively substitute environment variables in data structure.

    Supports ${VAR_NAME} and ${VAR_NAME:-default} syntax.

    Args:
        data: Data structure (dict, list, str, etc.)

    Returns:
        Data with environment variables substituted

    Examples:
        >>> os.environ['IRIS_HOST'] = 'localhost'
        >>> substitute_env_vars('${IRIS_HOST}')
        'localhost'
        >>> substitute_env_vars('${MISSING:-default_value}')
        'default_value'
    """
    if isinstance(data, dict):
        return {k: substitute_env_vars(v) for k, v in data.items()}
    elif isinstance(data, list):
        return [substitute_env_vars(item) for item in data]
    elif isinstance(data, str):
        # Pattern matches ${VAR_NAME} or ${VAR_NAME:-default}
        pattern = r'\$\{([^}:]+)(?::-([^}]*))?\}'

        def replace_var(match: re.Match) -> str:
            var_name = match.group(1)
            default_value = match.group(2)

            value = os.environ.get(var_name)
            if value is None:
                if default_value is None:
                    raise ValidationError(
                        f"Environment variable '{var_name}' not found and no default provided"
                    )
                return default_value
            return value

        return re.sub(pattern, replace_var, data)
    else:
        return data


def load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file into a dictionary with environment variable substitution.

    Args:
        path: Path to YAML or JSON file

    Returns:
        Dictionary with file contents and environment variables substituted

    Raises:
        ValidationError: If file cannot be read or parsed, or required env vars are missing
    """
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValidationError(f"Invalid YAML in {path}: {e}") from e
    except FileNotFoundError:
        raise ValidationError(f"File not found: {path}")
    except OSError as e:
        raise ValidationError(f"Failed to load {path}: {e}") from e

    if data is None:
        raise ValidationError(f"Empty YAML file: {path}")
    if not isinstance(data, dict):
        raise ValidationError(f"Expected a mapping at the top of {path}")
    return substitute_env_vars(data)


def load_options(path: Path) -> ExportOptions:
    """Load and validate export options from a file.

    Args:
        path: Path to options file

    Returns:
        Validated ExportOptions

    Raises:
        ValidationError: If the options are invalid
    """
    data = load_yaml(path)
    try:
        return ExportOptions.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid export options in {path}: {e}") from e


def load_profile(path: Path) -> ConnectionProfile:
    """Load and validate a connection profile from a file.

    Args:
        path: Path to profile file

    Returns:
        Validated ConnectionProfile

    Raises:
        ValidationError: If the profile is invalid
    """
    data = load_yaml(path)
    try:
        return ConnectionProfile.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid connection profile in {path}: {e}") from e
