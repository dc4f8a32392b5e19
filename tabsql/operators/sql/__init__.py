"""Generic SQL operators for SQLAlchemy-based databases.

This package provides the concrete base class for SQL connectors:
- SQLConnector: Driver loading and connection management using SQLAlchemy

Database-specific subclasses (SQLiteConnector, PostgresConnector,
IRISConnector) supply defaults and error-message names.
"""

from tabsql.operators.sql.connector import SQLConnector

__all__ = ["SQLConnector"]
