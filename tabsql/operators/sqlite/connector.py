"""SQLite connector implementation using SQLAlchemy.

This module provides connection management for SQLite databases.
"""

from __future__ import annotations

from sqlalchemy.engine import URL

from tabsql.exceptions import ConnectionError
from tabsql.operators.sql.connector import SQLConnector


class SQLiteConnector(SQLConnector):
    """SQLite connector using SQLAlchemy.

    Profile fields used:
        - database: Database file path (required, or ":memory:" for in-memory)
        - connection_string: Full connection string (alternative)

    Examples:
        >>> profile = ConnectionProfile(database="/path/to/export.db")
        >>> with SQLiteConnector(profile) as conn:
        ...     conn.execute_statement("CREATE TABLE test (id TEXT)")
    """

    def _build_connection_url(self) -> URL:
        """Build SQLite connection URL from the profile.

        Returns:
            SQLAlchemy URL

        Raises:
            ConnectionError: If the database path is missing
        """
        if self.profile.connection_string:
            return super()._build_connection_url()

        if not self.profile.database:
            raise ConnectionError("Missing required profile field: database")

        return URL.create(self.profile.driver or "sqlite", database=self.profile.database)

    def _get_database_name(self) -> str:
        """Get database name for error messages.

        Returns:
            "SQLite"
        """
        return "SQLite"
