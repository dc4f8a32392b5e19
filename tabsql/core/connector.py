"""Base Connector abstract class.

This module defines the Connector interface for managing connections
to databases that generated statements are executed against.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

from tabsql.models.profile import ConnectionProfile


class Connector(ABC):
    """Base class for managing connections to a live database.

    A connector is opened, used for statement execution and closed again;
    the live-execution adapter creates a fresh one per statement.

    Examples:
        Using a connector as a context manager:
        >>> with SQLiteConnector(ConnectionProfile(database="out.db")) as conn:
        ...     conn.execute_statement("CREATE TABLE t (a TEXT)")
    """

    def __init__(self, profile: ConnectionProfile, echo: bool = False):
        """Initialize connector with a connection profile.

        Args:
            profile: Connection profile
            echo: Log statements through SQLAlchemy
        """
        self.profile = profile
        self.echo = echo
        self.connection: Optional[Any] = None

    @abstractmethod
    def connect(self) -> None:
        """Establish connection to the database.

        Raises:
            DriverUnavailableError: If the driver cannot be loaded
            ConnectionError: If connection fails
        """
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Close connection to the database.

        Should handle cases where connection is already closed gracefully.
        """
        pass

    @abstractmethod
    def execute_statement(self, statement: str) -> None:
        """Execute a single DDL or DML statement and commit it.

        Args:
            statement: SQL statement text

        Raises:
            ExecutionFailedError: If not connected or execution fails
        """
        pass

    def __enter__(self) -> Connector:
        """Context manager entry: establish connection.

        Returns:
            Self
        """
        self.connect()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Context manager exit: close connection."""
        self.disconnect()

    @property
    def is_connected(self) -> bool:
        """Check if connection is established.

        Returns:
            True if connected, False otherwise
        """
        return self.connection is not None
