"""PostgreSQL connector implementation using SQLAlchemy.

This module provides connection management for PostgreSQL databases.
"""

from __future__ import annotations

from sqlalchemy.engine import URL

from tabsql.exceptions import ConnectionError
from tabsql.operators.sql.connector import SQLConnector


class PostgresConnector(SQLConnector):
    """PostgreSQL connector using SQLAlchemy.

    Profile fields used:
        - host: Database host (default: localhost)
        - port: Database port (default: 5432)
        - database: Database name (required)
        - user: Username (required)
        - password: Password (required)
        - connection_string: Full connection string (alternative to individual fields)

    Examples:
        >>> profile = ConnectionProfile(
        ...     driver="postgresql+psycopg",
        ...     host="localhost",
        ...     database="mydb",
        ...     user="postgres",
        ...     password="secret",
        ... )
        >>> with PostgresConnector(profile) as conn:
        ...     conn.execute_statement("CREATE TABLE t (a VARCHAR(255))")
    """

    def _build_connection_url(self) -> URL:
        """Build PostgreSQL connection URL from the profile.

        Returns:
            SQLAlchemy URL

        Raises:
            ConnectionError: If required fields are missing
        """
        if self.profile.connection_string:
            return super()._build_connection_url()

        for key in ("database", "user", "password"):
            if getattr(self.profile, key) is None:
                raise ConnectionError(f"Missing required profile field: {key}")

        return URL.create(
            self.profile.driver or "postgresql",
            username=self.profile.user,
            password=self.profile.password,
            host=self.profile.host or "localhost",
            port=self.profile.port or 5432,
            database=self.profile.database,
        )

    def _get_database_name(self) -> str:
        """Get database name for error messages.

        Returns:
            "PostgreSQL"
        """
        return "PostgreSQL"
