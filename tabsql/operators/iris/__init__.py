"""IRIS operators for tabsql."""

from tabsql.operators.iris.connector import IRISConnector

__all__ = ["IRISConnector"]
