"""tabsql configuration management.

This module centralizes all configuration loading from environment variables
and provides sensible defaults. All modules should import configuration
values from here rather than reading environment variables directly.

Environment Variables:
    TABSQL_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
                      Default: INFO

    TABSQL_LOG_FORMAT: Log output format (text, json)
                       Default: text

    TABSQL_DIALECT: Dialect used when none is passed to the exporter
                    Options: any id registered in tabsql.dialects
                    Default: iris

    TABSQL_PROFILE_PATH: YAML/JSON file holding the connection profile
                         used for live execution
                         Default: unset

    TABSQL_DEFAULT_TABLE_NAME: Table name used when neither the caller nor
                               the export options supply one
                               Default: export

    TABSQL_ECHO_SQL: Log every statement SQLAlchemy sends to the database
                     Default: false
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


def _get_bool(key: str, default: bool) -> bool:
    """Get boolean from environment variable."""
    value = os.environ.get(key, "").lower()
    if not value:
        return default
    return value in ("true", "1", "yes", "on")


def _get_str(key: str, default: str) -> str:
    """Get string from environment variable."""
    return os.environ.get(key, default)


def _get_path(key: str) -> Optional[Path]:
    value = os.environ.get(key, "")
    return Path(value) if value else None


@dataclass
class TabSQLConfig:
    """tabsql configuration container.

    All configuration values are loaded from environment variables
    with sensible defaults.

    Usage:
        from tabsql.core.config import config

        dialect = config.dialect
        level = config.log_level
    """

    # Logging Configuration
    log_level: str = field(default_factory=lambda: _get_str("TABSQL_LOG_LEVEL", "INFO").upper())
    log_format: str = field(default_factory=lambda: _get_str("TABSQL_LOG_FORMAT", "text"))

    # Export Configuration
    dialect: str = field(default_factory=lambda: _get_str("TABSQL_DIALECT", "iris").lower())
    default_table_name: str = field(
        default_factory=lambda: _get_str("TABSQL_DEFAULT_TABLE_NAME", "export")
    )

    # Live Execution Configuration
    profile_path: Optional[Path] = field(default_factory=lambda: _get_path("TABSQL_PROFILE_PATH"))
    echo_sql: bool = field(default_factory=lambda: _get_bool("TABSQL_ECHO_SQL", False))

    def __post_init__(self):
        """Validate configuration after initialization."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if self.log_level not in valid_levels:
            raise ValueError(
                f"Invalid TABSQL_LOG_LEVEL: {self.log_level}. "
                f"Must be one of: {valid_levels}"
            )

        valid_formats = {"text", "json"}
        if self.log_format not in valid_formats:
            raise ValueError(
                f"Invalid TABSQL_LOG_FORMAT: {self.log_format}. "
                f"Must be one of: {valid_formats}"
            )

        if not self.default_table_name.strip():
            raise ValueError("TABSQL_DEFAULT_TABLE_NAME must not be blank")

    def as_dict(self) -> dict:
        """Export configuration as dictionary.

        Returns:
            Dictionary of all configuration values
        """
        return {
            "log_level": self.log_level,
            "log_format": self.log_format,
            "dialect": self.dialect,
            "default_table_name": self.default_table_name,
            "profile_path": str(self.profile_path) if self.profile_path else None,
            "echo_sql": self.echo_sql,
        }


def load_config() -> TabSQLConfig:
    """Load configuration from environment.

    This function creates a new TabSQLConfig instance by reading
    current environment variables. Call this to refresh config
    if environment has changed.

    Returns:
        New TabSQLConfig instance
    """
    return TabSQLConfig()


# Global configuration instance - loaded once at import time
# Use load_config() to refresh if needed
config = load_config()
