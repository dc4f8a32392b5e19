"""Live statement execution.

This module provides the adapter that sends one generated statement to a
live database: open a connection, execute, close - with the connection
released on every exit path.
"""

from __future__ import annotations

import logging
from typing import Optional

from tabsql.core.dialect import Dialect
from tabsql.exceptions import ConnectionError, DriverUnavailableError, ExecutionFailedError
from tabsql.models.profile import ConnectionProfile

logger = logging.getLogger(__name__)


class StatementExecutor:
    """Executes single statements through a dialect's connector.

    Each call is one attempt: there is no retry and no timeout. Callers
    that need a deadline impose it around ``execute``.

    Examples:
        >>> executor = StatementExecutor(get_dialect("sqlite"))
        >>> executor.execute(ConnectionProfile(database="out.db"), "CREATE TABLE t (a TEXT)")
    """

    def __init__(self, dialect: Dialect, echo: bool = False):
        """Initialize executor.

        Args:
            dialect: Dialect whose connector runs the statements
            echo: Log statements through SQLAlchemy
        """
        self.dialect = dialect
        self.echo = echo

    def execute(self, profile: Optional[ConnectionProfile], statement: str) -> None:
        """Execute exactly one statement.

        Args:
            profile: Connection profile
            statement: Statement text

        Raises:
            DriverUnavailableError: If the dialect's driver cannot be loaded
            ExecutionFailedError: If connecting or executing fails
        """
        if not self.dialect.supports_live_execution():
            raise DriverUnavailableError(
                f"Dialect '{self.dialect.name}' does not support live execution", statement
            )
        if profile is None:
            raise ConnectionError("No connection profile configured for live execution", statement)

        connector = self.dialect.create_connector(profile, echo=self.echo)
        try:
            connector.connect()
            connector.execute_statement(statement.strip())
        except ExecutionFailedError as e:
            logger.error("ERROR Msg :: %s, Query :: %s", e.reason, statement)
            raise e.with_statement(statement)
        finally:
            connector.disconnect()
