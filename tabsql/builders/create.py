"""CREATE TABLE statement builder."""

from __future__ import annotations

from typing import Optional

from tabsql.builders.base import SqlBuilder, number_text
from tabsql.models.options import ColumnOptions

INDENT = "    "


class SqlCreateBuilder(SqlBuilder):
    """Builds the DDL text of an export.

    One column definition per header column, in header order. Columns
    without an override get the dialect's text type. The statement ends
    with a single terminator and a newline, nothing else, so a dialect can
    strip the terminator and append trailing clauses.

    Examples:
        >>> builder = SqlCreateBuilder("orders", ["id", "name"], ExportOptions(), GenericDialect())
        >>> print(builder.get_create_sql())
        CREATE TABLE "orders" (
            "id" VARCHAR(255),
            "name" VARCHAR(255)
        );
    """

    def get_drop_sql(self) -> str:
        """Get the DROP TABLE statement, or "" when not requested."""
        if not self.options.include_drop_statement:
            return ""
        if_exists = " IF EXISTS" if self.options.include_if_exist_with_drop_statement else ""
        return f"DROP TABLE{if_exists} {self.quoted_table_name};\n"

    def get_create_sql(self) -> str:
        """Get the CREATE TABLE statement."""
        definitions = [
            self._column_definition(name, self.column_options(index))
            for index, name in enumerate(self.column_names())
        ]
        body = ",\n".join(INDENT + definition for definition in definitions)
        return f"CREATE TABLE {self.quoted_table_name} (\n{body}\n);\n"

    def get_sql(self) -> str:
        """Get the full DDL text: optional DROP followed by CREATE."""
        drop = self.get_drop_sql()
        if drop:
            return f"{drop}\n{self.get_create_sql()}"
        return self.get_create_sql()

    def _column_definition(self, name: str, column: Optional[ColumnOptions]) -> str:
        parts = [self.dialect.quote_identifier(name), self.dialect.column_type(column)]
        if column is not None:
            if not column.allow_null:
                parts.append("NOT NULL")
            if column.default_value is not None:
                number = number_text(column.default_value) if column.is_numeric else None
                if number is not None:
                    parts.append(f"DEFAULT {number}")
                else:
                    parts.append(f"DEFAULT {self.dialect.string_literal(column.default_value)}")
        return " ".join(parts)
