"""In-memory row buffering.

This module provides the row buffer that accumulates a pushed row stream
(header row once, then data rows) and the per-export context that owns it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

from tabsql.models.cell import CellData, SqlData
from tabsql.models.options import ExportOptions

logger = logging.getLogger(__name__)


class RowBuffer:
    """In-memory buffer of a column list and data rows.

    Rows are kept as lists of ``SqlData``; nothing is serialized until the
    builders walk the buffer once at the end of the stream. Every data row
    holds one cell per incoming cell, empty cells included, so columns stay
    aligned across rows.

    Examples:
        >>> buffer = RowBuffer()
        >>> buffer.set_header([CellData("id", text="id"), CellData("name", text="name")])
        >>> buffer.append_row([CellData("id", 1, "1"), None])
        >>> buffer.columns
        ['id', 'name']
        >>> buffer.rows[0][1]
        SqlData(column_name='name', value='', text='')
    """

    def __init__(self):
        self._columns: list[str] = []
        self._rows: list[list[SqlData]] = []
        self._header_seen = False

    def set_header(self, cells: Iterable[Optional[CellData]]) -> None:
        """Record the column list from the header row.

        Each header cell's text is the column name. A missing or unnamed
        header cell still takes its position, named ``column<N>`` (1-based),
        so data cells stay under the header they arrived with. The column
        list is set once; later header rows are ignored.

        Args:
            cells: Header cells in column order
        """
        if self._header_seen:
            logger.warning("Header row received more than once; keeping the first one")
            return
        self._header_seen = True
        for index, cell in enumerate(cells):
            name = (cell.text or cell.column_name) if cell is not None else ""
            if not name:
                name = f"column{index + 1}"
                logger.warning("Header cell %d has no name; using %r", index, name)
            self._columns.append(name)

    def append_row(self, cells: Iterable[Optional[CellData]]) -> None:
        """Append one data row.

        Missing or empty cells are stored as empty ``SqlData``.

        Args:
            cells: Data cells in column order; None stands for a missing cell
        """
        values = []
        for index, cell in enumerate(cells):
            fallback = self._columns[index] if index < len(self._columns) else ""
            values.append(SqlData.from_cell(cell, fallback))
        self._rows.append(values)

    def clear(self) -> None:
        """Drop all columns and rows.

        Idempotent - can be called multiple times safely.
        """
        self._columns = []
        self._rows = []
        self._header_seen = False

    def __iter__(self) -> Iterator[list[SqlData]]:
        return iter(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    @property
    def columns(self) -> list[str]:
        """Column names in first-seen order."""
        return self._columns

    @property
    def rows(self) -> list[list[SqlData]]:
        """Data rows in arrival order."""
        return self._rows

    @property
    def has_columns(self) -> bool:
        return len(self._columns) > 0


@dataclass
class ExportContext:
    """State scoped to exactly one export.

    Created when a stream starts and discarded when it ends, so nothing
    from one export can reach the next.
    """

    options: Optional[ExportOptions] = None
    buffer: RowBuffer = field(default_factory=RowBuffer)

    @property
    def columns(self) -> list[str]:
        return self.buffer.columns

    @property
    def rows(self) -> list[list[SqlData]]:
        return self.buffer.rows
