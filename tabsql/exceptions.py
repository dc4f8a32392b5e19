"""tabsql exception hierarchy."""

from __future__ import annotations

from typing import Optional

NO_COL_SELECTED_ERROR = "****NO COLUMNS SELECTED****"
NO_OPTIONS_PRESENT_ERROR = "****NO OPTIONS PRESENT****"


class TabSQLError(Exception):
    """Base exception for all tabsql errors."""

    pass


class ConfigurationError(TabSQLError):
    """Raised when configuration is invalid or missing."""

    pass


class ValidationError(TabSQLError):
    """Raised when an options or profile document fails validation."""

    pass


class ExportError(TabSQLError):
    """Raised when an export cannot be finalized."""

    pass


class NoColumnsSelectedError(ExportError):
    """Raised when the header stream was empty or never received."""

    def __init__(self, message: str = NO_COL_SELECTED_ERROR):
        super().__init__(message)


class NoOptionsPresentError(ExportError):
    """Raised when finalization is reached without an options payload."""

    def __init__(self, message: str = NO_OPTIONS_PRESENT_ERROR):
        super().__init__(message)


class OutputWriteFailedError(ExportError):
    """Raised when generated text cannot be written to the output sink."""

    pass


class ExecutionFailedError(TabSQLError):
    """Raised when a statement cannot be executed against a live database.

    Attributes:
        statement: The statement text that failed, if known
        reason: The underlying driver/database message
    """

    def __init__(self, reason: str, statement: Optional[str] = None):
        super().__init__(reason)
        self.reason = reason
        self.statement = statement

    def with_statement(self, statement: str) -> "ExecutionFailedError":
        """Return this error with the failing statement attached."""
        if self.statement is None:
            self.statement = statement
        return self


class ConnectionError(ExecutionFailedError):
    """Raised when a connection to the database cannot be opened."""

    pass


class DriverUnavailableError(ExecutionFailedError):
    """Raised when the vendor driver for a dialect cannot be resolved."""

    pass
