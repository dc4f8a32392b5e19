"""tabsql - stream tabular rows into SQL text and live databases."""

__version__ = "0.1.0"

# Re-export key models for convenience
from tabsql.models import (
    CellData,
    ColumnOptions,
    ConnectionProfile,
    ExecutionRecord,
    ExportOptions,
    ExportResult,
    SqlData,
)

# Re-export core classes for custom dialects and sources
from tabsql.core import Connector, Dialect, StatementExecutor, TabularSerializer

from tabsql.builders import SqlCreateBuilder, SqlInsertBuilder
from tabsql.dialects import get_dialect, register_dialect
from tabsql.exporters import ExportState, SqlExporter
from tabsql.sources import CsvRowSource, ListRowSource, RowSource

__all__ = [
    # Version
    "__version__",
    # Models
    "CellData",
    "SqlData",
    "ExportOptions",
    "ColumnOptions",
    "ConnectionProfile",
    "ExportResult",
    "ExecutionRecord",
    # Core ABCs
    "Connector",
    "Dialect",
    "StatementExecutor",
    "TabularSerializer",
    # Builders
    "SqlCreateBuilder",
    "SqlInsertBuilder",
    # Dialects
    "get_dialect",
    "register_dialect",
    # Exporters
    "ExportState",
    "SqlExporter",
    # Sources
    "CsvRowSource",
    "ListRowSource",
    "RowSource",
]
