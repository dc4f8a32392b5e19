"""SQLite dialect."""

from __future__ import annotations

from tabsql.core.dialect import Dialect
from tabsql.operators.sqlite.connector import SQLiteConnector


class SQLiteDialect(Dialect):
    """SQLite dialect.

    SQLite has a single TEXT storage class for strings, so text columns
    are created as TEXT. DDL is executed unchanged.
    """

    name = "sqlite"
    text_type = "TEXT"
    text_type_base = "TEXT"
    driver = "sqlite"
    connector_class = SQLiteConnector
