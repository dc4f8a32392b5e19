"""Shared state for the SQL text builders."""

from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import Any, Optional, Sequence

from tabsql.core.dialect import Dialect
from tabsql.models.options import ColumnOptions, ExportOptions

_NUMBER = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")


def number_text(value: Any) -> Optional[str]:
    """Render a numeric value as SQL, or None when it is not a finite number."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return repr(value) if math.isfinite(value) else None
    if isinstance(value, Decimal):
        return format(value, "f") if value.is_finite() else None
    if isinstance(value, str) and _NUMBER.match(value.strip()):
        return value.strip()
    return None


class SqlBuilder:
    """Base class holding what both builders need.

    Args:
        table_name: Effective table name
        columns: Column names in header order
        options: Export options
        dialect: Dialect used for quoting and column types
    """

    def __init__(
        self,
        table_name: str,
        columns: Sequence[str],
        options: ExportOptions,
        dialect: Dialect,
    ):
        self.table_name = table_name
        self.columns = list(columns)
        self.options = options
        self.dialect = dialect

    def column_names(self) -> list[str]:
        """Column names as they appear in generated SQL."""
        if self.options.trim_column_names:
            return [name.strip() for name in self.columns]
        return list(self.columns)

    def column_options(self, index: int) -> Optional[ColumnOptions]:
        """Per-column override for the column at ``index``, if configured."""
        original = self.columns[index]
        found = self.options.column_options(original)
        if found is None and self.options.trim_column_names:
            found = self.options.column_options(original.strip())
        return found

    @property
    def quoted_table_name(self) -> str:
        return self.dialect.quote_table_name(self.table_name)
