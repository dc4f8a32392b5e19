"""IRIS dialect.

IRIS tables carry storage directives after the column list. They are
added only to the statement sent to the database; the CREATE text written
to the output stays plain SQL.
"""

from __future__ import annotations

from tabsql.core.dialect import Dialect
from tabsql.operators.iris.connector import IRISConnector

STORAGE_DIRECTIVES = (
    "datascope [ GLOBAL ]\n"
    "ramexpire [ 0 ]\n"
    "diskexpire [ 0 ]\n"
    "partitionkey [ None ]\n"
    "partitiondate [ None ]\n"
    "partitionrange [ 0 ];"
)


class IRISDialect(Dialect):
    """IRIS dialect with storage directives on executed DDL."""

    name = "iris"
    driver = "iris"
    connector_class = IRISConnector

    def wrap_ddl_for_execution(self, ddl: str) -> str:
        """Strip the trailing terminator and append the storage directives."""
        return f"{self.strip_terminator(ddl)}\n{STORAGE_DIRECTIVES}"
