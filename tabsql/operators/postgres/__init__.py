"""PostgreSQL operators for tabsql."""

from tabsql.operators.postgres.connector import PostgresConnector

__all__ = ["PostgresConnector"]
