"""IRIS connector implementation using SQLAlchemy.

This module provides connection management for IRIS databases. The IRIS
driver is not bundled; it must be installed as a SQLAlchemy dialect
plugin registered under the profile's driver name (default ``iris``).
"""

from __future__ import annotations

from sqlalchemy.engine import URL

from tabsql.exceptions import ConnectionError
from tabsql.operators.sql.connector import SQLConnector


class IRISConnector(SQLConnector):
    """IRIS connector using SQLAlchemy.

    Profile fields used:
        - host, port, database: Address, rendered as iris://host:port/database
        - user, password: Credentials
        - driver: SQLAlchemy dialect name of the installed IRIS plugin
        - connection_string: Full connection string (alternative)

    Examples:
        >>> profile = ConnectionProfile(
        ...     host="iris.internal", port=5050, database="refine",
        ...     user="loader", password="secret",
        ... )
        >>> with IRISConnector(profile.with_driver("iris")) as conn:
        ...     conn.execute_statement(statement)
    """

    def _build_connection_url(self) -> URL:
        """Build IRIS connection URL from the profile.

        Returns:
            SQLAlchemy URL

        Raises:
            ConnectionError: If required fields are missing
        """
        if self.profile.connection_string:
            return super()._build_connection_url()

        for key in ("host", "database"):
            if getattr(self.profile, key) is None:
                raise ConnectionError(f"Missing required profile field: {key}")

        return URL.create(
            self.profile.driver or "iris",
            username=self.profile.user,
            password=self.profile.password,
            host=self.profile.host,
            port=self.profile.port,
            database=self.profile.database,
        )

    def _get_database_name(self) -> str:
        """Get database name for error messages.

        Returns:
            "IRIS"
        """
        return "IRIS"
