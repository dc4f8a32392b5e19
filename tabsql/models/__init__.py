"""tabsql models package.

This package contains the cell value model and the pydantic models that
represent export options, connection profiles and export results.
"""

from tabsql.models.cell import CellData, SqlData
from tabsql.models.options import ColumnOptions, ExportOptions
from tabsql.models.profile import ConnectionProfile
from tabsql.models.results import ExecutionRecord, ExportResult

__all__ = [
    # Cell models
    "CellData",
    "SqlData",
    # Options models
    "ExportOptions",
    "ColumnOptions",
    # Connection models
    "ConnectionProfile",
    # Result models
    "ExportResult",
    "ExecutionRecord",
]
