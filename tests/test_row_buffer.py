"""Tests for RowBuffer and ExportContext."""

from tabsql.buffers.memory import ExportContext, RowBuffer
from tabsql.models.cell import CellData, SqlData


class TestRowBuffer:
    """Tests for RowBuffer."""

    def test_header_sets_columns_in_order(self):
        buffer = RowBuffer()
        buffer.set_header([CellData("b", "b", "b"), CellData("a", "a", "a")])
        assert buffer.columns == ["b", "a"]
        assert buffer.has_columns

    def test_header_text_is_column_name(self):
        """Header cell text wins over the cell's own column name."""
        buffer = RowBuffer()
        buffer.set_header([CellData("internal", None, "Display Name")])
        assert buffer.columns == ["Display Name"]

    def test_missing_header_cell_keeps_position(self):
        buffer = RowBuffer()
        buffer.set_header([CellData("a", "a", "a"), None, CellData("", "", "")])
        buffer.append_row([CellData("a", 1, "1"), CellData("", 2, "2"), CellData("", 3, "3")])
        assert buffer.columns == ["a", "column2", "column3"]
        assert [cell.value for cell in buffer.rows[0]] == [1, 2, 3]

    def test_second_header_ignored(self):
        buffer = RowBuffer()
        buffer.set_header([CellData("a", "a", "a")])
        buffer.set_header([CellData("z", "z", "z")])
        assert buffer.columns == ["a"]

    def test_empty_header(self):
        buffer = RowBuffer()
        buffer.set_header([])
        assert buffer.columns == []
        assert not buffer.has_columns

    def test_rows_keep_one_cell_per_input_cell(self):
        buffer = RowBuffer()
        buffer.set_header([CellData(n, n, n) for n in ("id", "name", "city")])
        buffer.append_row([CellData("id", 1, "1"), None, CellData("city", "", "")])
        assert len(buffer) == 1
        row = buffer.rows[0]
        assert len(row) == 3
        assert row[0] == SqlData("id", 1, "1")
        assert row[1] == SqlData("name", "", "")
        assert row[2].is_empty

    def test_rows_kept_in_arrival_order(self):
        buffer = RowBuffer()
        buffer.set_header([CellData("n", "n", "n")])
        for i in range(5):
            buffer.append_row([CellData("n", i, str(i))])
        assert [row[0].value for row in buffer] == [0, 1, 2, 3, 4]

    def test_clear_is_idempotent(self):
        buffer = RowBuffer()
        buffer.set_header([CellData("a", "a", "a")])
        buffer.append_row([CellData("a", 1, "1")])
        buffer.clear()
        buffer.clear()
        assert buffer.columns == []
        assert len(buffer) == 0

        buffer.set_header([CellData("b", "b", "b")])
        assert buffer.columns == ["b"]


class TestExportContext:
    """Tests for ExportContext."""

    def test_contexts_do_not_share_buffers(self):
        first = ExportContext()
        second = ExportContext()
        first.buffer.set_header([CellData("a", "a", "a")])
        assert second.columns == []
        assert first.columns == ["a"]
