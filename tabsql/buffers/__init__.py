"""tabsql buffers package.

This package contains the in-memory row buffer that accumulates a pushed
row stream between the start and end of an export.
"""

from tabsql.buffers.memory import ExportContext, RowBuffer

__all__ = ["ExportContext", "RowBuffer"]
