"""tabsql sources package.

This package contains row sources that push tabular data into a
serializer through the start_file/add_row/end_file contract.
"""

from tabsql.sources.base import ListRowSource, RowSource
from tabsql.sources.csv_source import CsvRowSource

__all__ = ["CsvRowSource", "ListRowSource", "RowSource"]
