"""Batch INSERT statement builder."""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from tabsql.builders.base import SqlBuilder, number_text
from tabsql.core.dialect import Dialect
from tabsql.models.cell import SqlData
from tabsql.models.options import ColumnOptions, ExportOptions

logger = logging.getLogger(__name__)

INDENT = "    "


class SqlInsertBuilder(SqlBuilder):
    """Builds one multi-row INSERT statement covering every buffered row.

    Each row becomes one value tuple with exactly one literal per column:
    short rows are padded with empty values, long rows are cut to the
    column count. Values are string literals unless the column is declared
    numeric and the value is a finite number.

    Examples:
        >>> rows = [[SqlData("id", 1, "1"), SqlData("name", "O'Neil", "O'Neil")]]
        >>> builder = SqlInsertBuilder("t", ["id", "name"], rows, ExportOptions(), GenericDialect())
        >>> print(builder.get_insert_sql())
        INSERT INTO "t" ("id", "name") VALUES
            ('1', 'O''Neil');
    """

    def __init__(
        self,
        table_name: str,
        columns: Sequence[str],
        rows: Sequence[Sequence[SqlData]],
        options: ExportOptions,
        dialect: Dialect,
    ):
        super().__init__(table_name, columns, options, dialect)
        self.rows = rows

    def get_insert_sql(self) -> str:
        """Get the INSERT statement, or "" when there are no rows."""
        if not self.rows:
            return ""

        width = len(self.columns)
        column_options = [self.column_options(index) for index in range(width)]
        column_list = ", ".join(self.dialect.quote_identifier(c) for c in self.column_names())

        tuples = []
        for row_number, row in enumerate(self.rows):
            if len(row) > width:
                logger.warning(
                    "Row %d has %d cells for %d columns; extra cells dropped",
                    row_number,
                    len(row),
                    width,
                )
            literals = []
            for index in range(width):
                data = row[index] if index < len(row) else None
                literals.append(self._literal(data, column_options[index]))
            tuples.append(f"{INDENT}({', '.join(literals)})")

        values = ",\n".join(tuples)
        return f"INSERT INTO {self.quoted_table_name} ({column_list}) VALUES\n{values};\n"

    def _literal(self, data: Optional[SqlData], column: Optional[ColumnOptions]) -> str:
        value = _cell_value(data)
        numeric = column is not None and column.is_numeric

        if value is None:
            if numeric:
                return self.dialect.null_literal()
            return "''" if self._empty_as_string(column) else self.dialect.null_literal()

        if numeric:
            number = number_text(value)
            if number is not None:
                return number
        return self.dialect.string_literal(value)

    def _empty_as_string(self, column: Optional[ColumnOptions]) -> bool:
        if column is not None and column.null_value_to_empty_str is not None:
            return column.null_value_to_empty_str
        return self.options.convert_null_to_empty_string


def _cell_value(data: Optional[SqlData]) -> Any:
    """Raw value when present and non-empty, else display text, else None."""
    if data is None:
        return None
    if data.value is not None and not (isinstance(data.value, str) and data.value == ""):
        return data.value
    if data.text:
        return data.text
    return None

