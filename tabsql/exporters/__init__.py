"""tabsql exporters package."""

from tabsql.exporters.base import WriterExporter
from tabsql.exporters.sql import ExportState, SqlExporter

__all__ = ["ExportState", "SqlExporter", "WriterExporter"]
