"""Base RowSource abstract class.

This module defines the interface of row sources: components that decide
which rows and columns to export and push them into a serializer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable, Iterator, Optional, Sequence

from tabsql.core.serializer import TabularSerializer
from tabsql.models.cell import CellData


class RowSource(ABC):
    """Base class for row sources.

    Subclasses provide the header and the data rows; ``stream`` pushes
    them through the serializer contract in order.

    Examples:
        >>> source = ListRowSource(["id", "name"], [[1, "Alice"], [2, None]])
        >>> result = source.stream(exporter, {"tableName": "people"})
    """

    @abstractmethod
    def header(self) -> list[str]:
        """Get column names in export order."""
        pass

    @abstractmethod
    def rows(self) -> Iterator[Sequence[Any]]:
        """Iterate raw data rows, one value per column."""
        pass

    def stream(self, serializer: TabularSerializer, options: Any) -> Any:
        """Push the whole source through a serializer.

        Args:
            serializer: Receiver of the stream
            options: Export options payload handed to start_file()

        Returns:
            Whatever serializer.end_file() returns
        """
        serializer.start_file(options)
        columns = self.header()
        serializer.add_row([CellData(name, name, name) for name in columns], True)
        for row in self.rows():
            serializer.add_row(self.to_cells(columns, row), False)
        return serializer.end_file()

    @staticmethod
    def to_cells(columns: Sequence[str], row: Sequence[Any]) -> list[Optional[CellData]]:
        """Turn raw values into cells, one per column.

        Values beyond the header are dropped; missing trailing values
        become None cells.
        """
        cells: list[Optional[CellData]] = []
        for index, name in enumerate(columns):
            if index >= len(row):
                cells.append(None)
                continue
            value = row[index]
            text = None if value is None else str(value)
            cells.append(CellData(name, value, text))
        return cells


class ListRowSource(RowSource):
    """Row source over in-memory lists.

    Examples:
        >>> ListRowSource(["a", "b"], [["1", "x"], ["2", ""]])
    """

    def __init__(self, header: Sequence[str], rows: Iterable[Sequence[Any]]):
        self._header = list(header)
        self._rows = rows

    def header(self) -> list[str]:
        return list(self._header)

    def rows(self) -> Iterator[Sequence[Any]]:
        return iter(self._rows)
