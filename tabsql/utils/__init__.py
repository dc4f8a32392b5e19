"""tabsql utilities package.

This package contains utility functions for YAML parsing,
logging, and other cross-cutting concerns.
"""

from tabsql.utils.logging import setup_logging
from tabsql.utils.yaml_parser import load_options, load_profile, load_yaml, substitute_env_vars

__all__ = [
    "load_options",
    "load_profile",
    "load_yaml",
    "setup_logging",
    "substitute_env_vars",
]
