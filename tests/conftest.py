"""Shared fixtures for tabsql tests."""

import io
import re
import tempfile
from pathlib import Path

import pytest
from sqlalchemy import create_engine, text

from tabsql.exporters.sql import SqlExporter
from tabsql.models.cell import CellData


@pytest.fixture
def temp_db():
    """Create a temporary SQLite database path."""
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = f.name
    yield db_path
    Path(db_path).unlink(missing_ok=True)


@pytest.fixture
def writer():
    """In-memory output sink."""
    return io.StringIO()


@pytest.fixture
def exporter(writer):
    """Text-only exporter writing to the in-memory sink."""
    return SqlExporter(dialect="generic", default_table_name="project", writer=writer)


def header_cells(names):
    return [CellData(name, name, name) for name in names]


def data_cells(names, values):
    return [
        None if value is None else CellData(name, value, str(value))
        for name, value in zip(names, values)
    ]


def push(serializer, options, header, rows):
    """Drive a serializer through one full stream."""
    serializer.start_file(options)
    if header is not None:
        serializer.add_row(header_cells(header), True)
    for row in rows:
        serializer.add_row(data_cells(header or [""] * len(row), row), False)
    return serializer.end_file()


def create_columns(sql):
    """Column names of the CREATE TABLE statement in ``sql``, in order."""
    match = re.search(r"CREATE TABLE [^(]+\((.*?)\n\);", sql, re.S)
    assert match, f"no CREATE TABLE in {sql!r}"
    names = []
    for line in match.group(1).strip().splitlines():
        name = re.match(r'\s*"((?:[^"]|"")*)"', line).group(1)
        names.append(name.replace('""', '"'))
    return names


def insert_tuples(sql):
    """Value tuples of the INSERT statement in ``sql``, as lists of literals."""
    match = re.search(r"INSERT INTO .*? VALUES\n(.*?);\n", sql, re.S)
    assert match, f"no INSERT in {sql!r}"
    literal = r"'(?:[^']|'')*'|NULL|[-+0-9.eE]+"
    tuples = []
    for line in match.group(1).split("),\n"):
        body = line.strip().lstrip("(").rstrip(")")
        tuples.append(re.findall(literal, body))
    return tuples


def fetch_all(db_path, query):
    """Run a query against a SQLite file and return the rows as tuples."""
    engine = create_engine(f"sqlite:///{db_path}")
    try:
        with engine.connect() as conn:
            return [tuple(r) for r in conn.execute(text(query))]
    finally:
        engine.dispose()
