"""Base Dialect abstract class.

This module defines the Dialect interface: how identifiers and literals
are quoted, which type text columns get, how DDL is wrapped before live
execution, and which connector executes statements.
"""

from __future__ import annotations

from abc import ABC
from typing import Any, Optional

from tabsql.core.connector import Connector
from tabsql.exceptions import DriverUnavailableError
from tabsql.models.options import ColumnOptions
from tabsql.models.profile import ConnectionProfile


class Dialect(ABC):
    """Base class for SQL dialect strategies.

    Subclasses set class attributes and override the hooks they need.
    A dialect without a ``connector_class`` only generates text.

    Attributes:
        name: Registry identifier
        text_type: Column type used for columns without an override
        driver: Default SQLAlchemy drivername for live execution
        connector_class: Connector used for live execution, or None

    Examples:
        >>> dialect = get_dialect("iris")
        >>> dialect.quote_identifier("order id")
        '"order id"'
        >>> dialect.supports_live_execution()
        True
    """

    name: str = ""
    identifier_quote: str = '"'
    text_type: str = "VARCHAR(255)"
    text_type_base: str = "VARCHAR"
    statement_terminator: str = ";"
    driver: Optional[str] = None
    connector_class: Optional[type[Connector]] = None

    def quote_identifier(self, identifier: str) -> str:
        """Quote a table or column name.

        Embedded quote characters are doubled.
        """
        q = self.identifier_quote
        return q + identifier.replace(q, q + q) + q

    def quote_table_name(self, table_name: str) -> str:
        """Quote a table name, keeping ``schema.table`` references apart."""
        parts = [p for p in table_name.split(".") if p]
        if len(parts) < 2:
            return self.quote_identifier(table_name)
        return ".".join(self.quote_identifier(p) for p in parts)

    def string_literal(self, value: Any) -> str:
        """Render a value as a quoted string literal.

        Single quotes are doubled and NUL characters removed; newlines and
        other control characters are valid inside a quoted literal.
        """
        text = str(value).replace("\x00", "")
        return "'" + text.replace("'", "''") + "'"

    def null_literal(self) -> str:
        return "NULL"

    def column_type(self, column: Optional[ColumnOptions]) -> str:
        """Get the DDL type of a column.

        Args:
            column: Per-column override, or None for the default text type

        Returns:
            DDL type string (e.g., "VARCHAR(255)", "INTEGER")
        """
        if column is None or (column.type is None and column.size is None):
            return self.text_type
        base = column.type or self.text_type_base
        if column.size is not None and "(" not in base:
            return f"{base}({column.size})"
        return base

    def supports_live_execution(self) -> bool:
        """Whether statements can be executed against a database."""
        return self.connector_class is not None

    def wrap_ddl_for_execution(self, ddl: str) -> str:
        """Turn CREATE text into the form sent to the database.

        The default sends the text unchanged.
        """
        return ddl

    def strip_terminator(self, statement: str) -> str:
        """Remove surrounding whitespace and one trailing terminator."""
        statement = statement.strip()
        if statement.endswith(self.statement_terminator):
            statement = statement[: -len(self.statement_terminator)].rstrip()
        return statement

    def create_connector(self, profile: ConnectionProfile, echo: bool = False) -> Connector:
        """Create the connector for live execution.

        Args:
            profile: Connection profile
            echo: Log statements through SQLAlchemy

        Returns:
            Connector instance (not yet connected)

        Raises:
            DriverUnavailableError: If the dialect has no connector
        """
        if self.connector_class is None:
            raise DriverUnavailableError(f"Dialect '{self.name}' does not support live execution")
        if self.driver:
            profile = profile.with_driver(self.driver)
        return self.connector_class(profile, echo=echo)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
