"""SQLite operators for tabsql."""

from tabsql.operators.sqlite.connector import SQLiteConnector

__all__ = ["SQLiteConnector"]
