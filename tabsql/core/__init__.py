"""tabsql core package.

This package contains abstract base classes and internal framework logic
that define the interfaces for all extensible components.
"""

from tabsql.core.connector import Connector
from tabsql.core.dialect import Dialect
from tabsql.core.executor import StatementExecutor
from tabsql.core.serializer import TabularSerializer

__all__ = [
    "Connector",
    "Dialect",
    "StatementExecutor",
    "TabularSerializer",
]
