"""PostgreSQL dialect."""

from __future__ import annotations

from tabsql.core.dialect import Dialect
from tabsql.operators.postgres.connector import PostgresConnector


class PostgresDialect(Dialect):
    """PostgreSQL dialect executed through psycopg."""

    name = "postgres"
    driver = "postgresql+psycopg"
    connector_class = PostgresConnector
