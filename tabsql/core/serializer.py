"""Base TabularSerializer abstract class.

This module defines the push-style interface a row source drives:
one ``start_file``, any number of ``add_row`` calls, one ``end_file``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence

from tabsql.models.cell import CellData


class TabularSerializer(ABC):
    """Receiver of a tabular row stream.

    A row source calls ``start_file`` once with the export options, then
    ``add_row`` for the header row (``is_header=True``) followed by each
    data row, then ``end_file`` once. Calls are serialized; a serializer
    instance handles one stream at a time.

    Examples:
        Driving a serializer by hand:
        >>> serializer.start_file({"tableName": "orders"})
        >>> serializer.add_row([CellData("id", text="id")], is_header=True)
        >>> serializer.add_row([CellData("id", 1, "1")], is_header=False)
        >>> serializer.end_file()
    """

    @abstractmethod
    def start_file(self, options: Any) -> None:
        """Begin a stream.

        Args:
            options: Export options payload (mapping, model, or None)
        """
        pass

    @abstractmethod
    def add_row(self, cells: Sequence[Optional[CellData]], is_header: bool) -> None:
        """Receive one row.

        Args:
            cells: Cells in column order; None marks a missing cell
            is_header: True for the header row
        """
        pass

    @abstractmethod
    def end_file(self) -> Any:
        """Finish the stream.

        Returns:
            Serializer-specific result
        """
        pass
