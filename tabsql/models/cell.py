"""Cell value models.

A row source hands the exporter ``CellData`` objects; the row buffer keeps
``SqlData`` objects, which are the same three facts with empty content
normalized to empty strings so every buffered row has one value per column.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class CellData:
    """A cell as delivered by a row source.

    For header rows, ``text`` carries the column name.

    Examples:
        >>> CellData(column_name="price", value=9.5, text="9.5")
        >>> CellData(column_name="note", value=None, text=None)
    """

    column_name: str
    value: Any = None
    text: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        """Whether the cell has no display content."""
        return self.text is None or self.text == ""


@dataclass(frozen=True)
class SqlData:
    """A buffered cell ready for SQL serialization.

    ``text`` is never None; an empty string means the source cell had no
    content, in which case ``value`` is the empty string too.
    """

    column_name: str
    value: Any
    text: str

    @classmethod
    def from_cell(cls, cell: Optional[CellData], column_name: str = "") -> SqlData:
        """Normalize an incoming cell.

        Args:
            cell: Source cell, or None when the row source had nothing there
            column_name: Column name to use when ``cell`` is None

        Returns:
            SqlData with empty value and text for empty or missing cells
        """
        if cell is None:
            return cls(column_name, "", "")
        if cell.is_empty:
            return cls(cell.column_name, "", "")
        return cls(cell.column_name, cell.value, cell.text)

    @property
    def is_empty(self) -> bool:
        """Whether the source cell had no content."""
        return self.text == ""
