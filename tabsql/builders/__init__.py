"""tabsql builders package.

This package contains the builders that turn a buffered export into
SQL text: one CREATE TABLE statement and one batch INSERT statement.
"""

from tabsql.builders.create import SqlCreateBuilder
from tabsql.builders.insert import SqlInsertBuilder

__all__ = ["SqlCreateBuilder", "SqlInsertBuilder"]
