"""Tests for the CREATE TABLE and INSERT builders."""

from decimal import Decimal

import pytest

from tabsql.builders.base import number_text
from tabsql.builders.create import SqlCreateBuilder
from tabsql.builders.insert import SqlInsertBuilder
from tabsql.dialects import GenericDialect, SQLiteDialect
from tabsql.models.cell import SqlData
from tabsql.models.options import ExportOptions

from conftest import create_columns, insert_tuples


def row(*values):
    return [SqlData("", "", "") if v is None else SqlData("", v, str(v)) for v in values]


@pytest.fixture
def dialect():
    return GenericDialect()


class TestNumberText:
    """Tests for numeric literal rendering."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (3, "3"),
            (-2.5, "-2.5"),
            (Decimal("10.50"), "10.50"),
            ("42", "42"),
            (" 1e3 ", "1e3"),
            (".5", ".5"),
        ],
    )
    def test_numbers(self, value, expected):
        assert number_text(value) == expected

    @pytest.mark.parametrize(
        "value", [True, float("nan"), float("inf"), "12abc", "1; DROP TABLE x", "", None]
    )
    def test_not_numbers(self, value):
        assert number_text(value) is None


class TestSqlCreateBuilder:
    """Tests for SqlCreateBuilder."""

    def test_create_text(self, dialect):
        builder = SqlCreateBuilder("orders", ["id", "name"], ExportOptions(), dialect)
        assert builder.get_create_sql() == (
            'CREATE TABLE "orders" (\n'
            '    "id" VARCHAR(255),\n'
            '    "name" VARCHAR(255)\n'
            ");\n"
        )

    def test_columns_in_header_order(self, dialect):
        columns = ["zeta", "alpha", "mid", "beta"]
        sql = SqlCreateBuilder("t", columns, ExportOptions(), dialect).get_create_sql()
        assert create_columns(sql) == columns

    def test_single_terminator(self, dialect):
        sql = SqlCreateBuilder("t", ["a"], ExportOptions(), dialect).get_create_sql()
        assert sql.count(";") == 1
        assert sql.endswith(";\n")

    def test_identifiers_quoted(self, dialect):
        columns = ['my "col"', "select", "with space"]
        sql = SqlCreateBuilder('odd "table"', columns, ExportOptions(), dialect).get_create_sql()
        assert sql.startswith('CREATE TABLE "odd ""table""" (')
        assert '"my ""col""" VARCHAR(255)' in sql
        assert create_columns(sql) == columns

    def test_schema_qualified_table(self, dialect):
        sql = SqlCreateBuilder("sales.orders", ["a"], ExportOptions(), dialect).get_create_sql()
        assert sql.startswith('CREATE TABLE "sales"."orders" (')

    def test_dialect_text_type(self):
        sql = SqlCreateBuilder("t", ["a"], ExportOptions(), SQLiteDialect()).get_create_sql()
        assert '"a" TEXT' in sql

    def test_column_overrides(self, dialect):
        options = ExportOptions.from_payload(
            {
                "columns": [
                    {"name": "qty", "type": "INTEGER", "allowNull": False, "defaultValue": "0"},
                    {"name": "city", "type": "VARCHAR", "size": 80, "defaultValue": "n/a"},
                    {"name": "code", "size": 10},
                ]
            }
        )
        sql = SqlCreateBuilder("t", ["qty", "city", "code", "note"], options, dialect).get_create_sql()
        assert '"qty" INTEGER NOT NULL DEFAULT 0' in sql
        assert "\"city\" VARCHAR(80) DEFAULT 'n/a'" in sql
        assert '"code" VARCHAR(10)' in sql
        assert '"note" VARCHAR(255)' in sql

    def test_numeric_default_not_injected(self, dialect):
        options = ExportOptions.from_payload(
            {"columns": [{"name": "qty", "type": "INTEGER", "defaultValue": "0); DROP TABLE x"}]}
        )
        sql = SqlCreateBuilder("t", ["qty"], options, dialect).get_create_sql()
        assert "DEFAULT '0); DROP TABLE x'" in sql

    def test_no_drop_by_default(self, dialect):
        builder = SqlCreateBuilder("t", ["a"], ExportOptions(), dialect)
        assert builder.get_drop_sql() == ""
        assert builder.get_sql() == builder.get_create_sql()

    def test_drop_statement(self, dialect):
        options = ExportOptions(includeDropStatement=True)
        builder = SqlCreateBuilder("t", ["a"], options, dialect)
        assert builder.get_drop_sql() == 'DROP TABLE "t";\n'
        assert builder.get_sql() == 'DROP TABLE "t";\n\n' + builder.get_create_sql()

    def test_drop_if_exists(self, dialect):
        options = ExportOptions(includeDropStatement=True, includeIfExistWithDropStatement=True)
        builder = SqlCreateBuilder("t", ["a"], options, dialect)
        assert builder.get_drop_sql() == 'DROP TABLE IF EXISTS "t";\n'

    def test_if_exists_alone_has_no_effect(self, dialect):
        options = ExportOptions(includeIfExistWithDropStatement=True)
        assert SqlCreateBuilder("t", ["a"], options, dialect).get_drop_sql() == ""

    def test_trim_column_names(self, dialect):
        options = ExportOptions(trimColumnNames=True)
        sql = SqlCreateBuilder("t", [" a ", "b "], options, dialect).get_create_sql()
        assert create_columns(sql) == ["a", "b"]

    def test_names_untrimmed_by_default(self, dialect):
        sql = SqlCreateBuilder("t", [" a "], ExportOptions(), dialect).get_create_sql()
        assert create_columns(sql) == [" a "]


class TestSqlInsertBuilder:
    """Tests for SqlInsertBuilder."""

    def test_insert_text(self, dialect):
        builder = SqlInsertBuilder(
            "t", ["id", "name"], [row("1", "x"), row("2", None)], ExportOptions(), dialect
        )
        assert builder.get_insert_sql() == (
            'INSERT INTO "t" ("id", "name") VALUES\n'
            "    ('1', 'x'),\n"
            "    ('2', '');\n"
        )

    def test_no_rows_no_statement(self, dialect):
        assert SqlInsertBuilder("t", ["a"], [], ExportOptions(), dialect).get_insert_sql() == ""

    def test_one_tuple_per_row_in_order(self, dialect):
        rows = [row(str(i), f"v{i}") for i in range(10)]
        sql = SqlInsertBuilder("t", ["a", "b"], rows, ExportOptions(), dialect).get_insert_sql()
        tuples = insert_tuples(sql)
        assert len(tuples) == 10
        assert [t[0] for t in tuples] == [f"'{i}'" for i in range(10)]
        assert all(len(t) == 2 for t in tuples)

    def test_short_and_long_rows_fit_column_count(self, dialect):
        rows = [row("1"), row("1", "2", "3", "4")]
        sql = SqlInsertBuilder("t", ["a", "b", "c"], rows, ExportOptions(), dialect).get_insert_sql()
        assert insert_tuples(sql) == [["'1'", "''", "''"], ["'1'", "'2'", "'3'"]]

    def test_quotes_escaped(self, dialect):
        sql = SqlInsertBuilder(
            "t", ["a"], [row("O'Neil"), row("it's 'quoted'")], ExportOptions(), dialect
        ).get_insert_sql()
        assert "('O''Neil')" in sql
        assert "('it''s ''quoted''')" in sql

    def test_control_characters_kept_inside_literal(self, dialect):
        sql = SqlInsertBuilder(
            "t", ["a"], [row("line1\nline2"), row("nul\x00byte")], ExportOptions(), dialect
        ).get_insert_sql()
        assert "('line1\nline2')" in sql
        assert "('nulbyte')" in sql

    def test_empty_cells_as_null(self, dialect):
        options = ExportOptions(convertNullToEmptyString=False)
        sql = SqlInsertBuilder("t", ["a", "b"], [row("1", None)], options, dialect).get_insert_sql()
        assert insert_tuples(sql) == [["'1'", "NULL"]]

    def test_column_null_override(self, dialect):
        options = ExportOptions.from_payload(
            {
                "convertNullToEmptyString": True,
                "columns": [{"name": "b", "nullValueToEmptyStr": False}],
            }
        )
        sql = SqlInsertBuilder("t", ["a", "b"], [row(None, None)], options, dialect).get_insert_sql()
        assert insert_tuples(sql) == [["''", "NULL"]]

    def test_numeric_columns_unquoted(self, dialect):
        options = ExportOptions.from_payload(
            {"columns": [{"name": "qty", "type": "INTEGER"}, {"name": "price", "type": "DECIMAL"}]}
        )
        rows = [
            [SqlData("qty", 3, "3"), SqlData("price", "9.50", "9.50"), SqlData("note", 7, "7")],
            [SqlData("qty", "", ""), SqlData("price", "n/a", "n/a"), SqlData("note", "", "")],
        ]
        sql = SqlInsertBuilder(
            "t", ["qty", "price", "note"], rows, options, dialect
        ).get_insert_sql()
        assert insert_tuples(sql) == [["3", "9.50", "'7'"], ["NULL", "'n/a'", "''"]]

    def test_trimmed_names_in_column_list(self, dialect):
        options = ExportOptions(trimColumnNames=True)
        sql = SqlInsertBuilder("t", [" a "], [row("1")], options, dialect).get_insert_sql()
        assert sql.startswith('INSERT INTO "t" ("a") VALUES')
