"""SQL-based connector base class using SQLAlchemy.

This module provides a base class for database connectors that use
SQLAlchemy for driver loading and connection management.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Connection, Engine
from sqlalchemy.exc import NoSuchModuleError
from sqlalchemy.pool import NullPool

from tabsql.core.connector import Connector
from tabsql.exceptions import ConnectionError, DriverUnavailableError, ExecutionFailedError


class SQLConnector(Connector):
    """Base class for SQL database connectors using SQLAlchemy.

    Provides the connection lifecycle shared by every vendor:
    - Driver resolution (SQLAlchemy dialect plugin + DBAPI module)
    - One connection per connector, no pooling
    - Statement execution inside a transaction

    Statements are sent with ``exec_driver_sql`` and ``no_parameters`` so
    the DBAPI receives the text alone: ``%`` and ``:name`` sequences in
    literals are never read as placeholders.

    Subclasses must implement:
    - _get_database_name(): Return database name for error messages

    Examples:
        Subclass implementation:
        >>> class MyDBConnector(SQLConnector):
        ...     def _get_database_name(self) -> str:
        ...         return "MyDB"
    """

    def __init__(self, profile, echo: bool = False):
        """Initialize SQL connector.

        Args:
            profile: Connection profile
            echo: Log statements through SQLAlchemy
        """
        super().__init__(profile, echo=echo)
        self.engine: Optional[Engine] = None
        self.connection: Optional[Connection] = None

    @abstractmethod
    def _get_database_name(self) -> str:
        """Get database name for error messages.

        Returns:
            Human-readable database name (e.g., "PostgreSQL", "SQLite")
        """
        pass

    def _build_connection_url(self) -> URL:
        """Build the SQLAlchemy URL from the profile.

        Returns:
            sqlalchemy.engine.URL

        Raises:
            ConnectionError: If the profile is incomplete
        """
        try:
            return self.profile.sqlalchemy_url()
        except ValueError as e:
            raise ConnectionError(f"Invalid {self._get_database_name()} profile: {e}") from e

    def connect(self) -> None:
        """Load the driver and open a connection.

        Raises:
            DriverUnavailableError: If the dialect plugin or DBAPI is missing
            ConnectionError: If connection fails
        """
        db_name = self._get_database_name()
        url = self._build_connection_url()

        try:
            self.engine = create_engine(url, poolclass=NullPool, echo=self.echo)
        except (NoSuchModuleError, ImportError) as e:
            raise DriverUnavailableError(
                f"No {db_name} driver available for '{url.drivername}': {e}"
            ) from e
        except Exception as e:
            raise ConnectionError(f"Failed to configure {db_name} engine: {e}") from e

        try:
            self.connection = self.engine.connect()
        except Exception as e:
            self.engine.dispose()
            self.engine = None
            raise ConnectionError(
                f"Failed to connect to {db_name} at {self.profile.url}: {e}"
            ) from e

    def disconnect(self) -> None:
        """Close the connection and dispose the engine.

        Safe to call even if already disconnected.
        """
        if self.connection is not None:
            self.connection.close()
            self.connection = None
        if self.engine is not None:
            self.engine.dispose()
            self.engine = None

    def execute_statement(self, statement: str) -> None:
        """Execute a SQL statement (DDL, DML) without returning results.

        Executes the statement and commits the transaction.

        Args:
            statement: SQL statement string

        Raises:
            ExecutionFailedError: If not connected or statement execution fails
        """
        if not self.is_connected:
            raise ExecutionFailedError("Not connected to database", statement)

        try:
            with self.connection.begin():
                self.connection.execution_options(no_parameters=True).exec_driver_sql(
                    statement
                )
        except Exception as e:
            raise ExecutionFailedError(f"Failed to execute statement: {e}", statement) from e
