"""CSV row source.

This module provides a row source reading a delimited text file whose
first line is the header.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Any, Iterator, Optional, Sequence, Union

from tabsql.sources.base import RowSource


class CsvRowSource(RowSource):
    """Row source over a CSV file.

    The file is read lazily: rows are pushed to the serializer as they are
    parsed. Every value is text; empty fields become empty cells.

    Examples:
        >>> source = CsvRowSource("orders.csv")
        >>> source.header()
        ['order_id', 'customer', 'amount']

        Tab-separated input:
        >>> CsvRowSource("orders.tsv", delimiter="\\t")
    """

    def __init__(
        self,
        path: Union[str, Path],
        delimiter: str = ",",
        encoding: str = "utf-8",
    ):
        """Initialize CSV source.

        Args:
            path: Path to the CSV file
            delimiter: Field delimiter
            encoding: File encoding
        """
        self.path = Path(path)
        self.delimiter = delimiter
        self.encoding = encoding
        self._header: Optional[list[str]] = None

    def header(self) -> list[str]:
        if self._header is None:
            with open(self.path, "r", encoding=self.encoding, newline="") as f:
                reader = csv.reader(f, delimiter=self.delimiter)
                self._header = next(reader, [])
        return list(self._header)

    def rows(self) -> Iterator[Sequence[Any]]:
        with open(self.path, "r", encoding=self.encoding, newline="") as f:
            reader = csv.reader(f, delimiter=self.delimiter)
            next(reader, None)
            for row in reader:
                if not row:
                    continue
                yield row
