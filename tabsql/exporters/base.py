"""Base WriterExporter abstract class.

This module defines the interface of exporters that render a row source
as text onto a writer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Optional, TextIO

if TYPE_CHECKING:
    from tabsql.sources.base import RowSource


class WriterExporter(ABC):
    """Base class for exporters that write text.

    Examples:
        >>> with open("orders.sql", "w") as out:
        ...     result = exporter.export(CsvRowSource("orders.csv"), out, options)
    """

    content_type: str = "text/plain"

    @abstractmethod
    def export(
        self,
        source: RowSource,
        writer: Optional[TextIO] = None,
        options: Any = None,
        default_table_name: Optional[str] = None,
    ) -> Any:
        """Export all rows of a source.

        Args:
            source: Row source to stream from
            writer: Text sink, or None to produce no text
            options: Export options payload
            default_table_name: Host-supplied table name (e.g., the project name)

        Returns:
            Exporter-specific result
        """
        pass
