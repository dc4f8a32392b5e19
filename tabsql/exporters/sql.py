"""SQL exporter.

This module provides the exporter that buffers a pushed row stream and,
when the stream ends, writes CREATE TABLE and INSERT text and optionally
executes it against a live database.
"""

from __future__ import annotations

import logging
from datetime import datetime
from enum import Enum
from typing import Any, Optional, Sequence, TextIO, Union

from pydantic import ValidationError as PydanticValidationError

from tabsql.buffers.memory import ExportContext
from tabsql.builders.create import SqlCreateBuilder
from tabsql.builders.insert import SqlInsertBuilder
from tabsql.core.config import config
from tabsql.core.dialect import Dialect
from tabsql.core.executor import StatementExecutor
from tabsql.core.serializer import TabularSerializer
from tabsql.dialects import get_dialect
from tabsql.exceptions import (
    ConnectionError,
    DriverUnavailableError,
    ExecutionFailedError,
    NoColumnsSelectedError,
    NoOptionsPresentError,
    OutputWriteFailedError,
    TabSQLError,
    ValidationError,
)
from tabsql.exporters.base import WriterExporter
from tabsql.models.cell import CellData
from tabsql.models.options import ExportOptions
from tabsql.models.profile import ConnectionProfile
from tabsql.models.results import ExecutionRecord, ExportResult
from tabsql.sources.base import RowSource

logger = logging.getLogger(__name__)


class ExportState(str, Enum):
    """Lifecycle state of an SqlExporter."""

    OPEN = "open"
    ACCUMULATING = "accumulating"
    FINALIZING = "finalizing"
    FAILED = "failed"


class SqlExporter(TabularSerializer, WriterExporter):
    """Exports a row stream as SQL text, optionally executing it.

    The exporter is a push receiver: ``start_file`` opens a fresh
    ``ExportContext``, ``add_row`` fills its buffer, ``end_file`` builds
    the statements and discards the context whatever happens, so one
    instance can run any number of sequential exports.

    At the end of a stream:
    1. No columns -> NoColumnsSelectedError; no options -> NoOptionsPresentError
    2. Table name = options.tableName, else the host default
    3. includeStructure: write DROP/CREATE text; when live, execute the DROP
       and the dialect-wrapped CREATE
    4. includeContent: write INSERT text; when live, execute it
    Output-write and execution failures are logged and recorded on the
    returned ExportResult instead of raised.

    Examples:
        >>> exporter = SqlExporter(dialect="sqlite", profile=ConnectionProfile(database="out.db"))
        >>> with open("orders.sql", "w") as out:
        ...     result = exporter.export(
        ...         CsvRowSource("orders.csv"), out, {"useLiveDialect": True}, "orders"
        ...     )
        >>> result.success
        True
    """

    content_type = "text/plain"

    def __init__(
        self,
        dialect: Union[str, Dialect, None] = None,
        profile: Optional[ConnectionProfile] = None,
        default_table_name: Optional[str] = None,
        writer: Optional[TextIO] = None,
        echo: Optional[bool] = None,
    ):
        """Initialize SQL exporter.

        Args:
            dialect: Dialect id or instance (defaults to TABSQL_DIALECT)
            profile: Connection profile for live execution (defaults to the
                file at TABSQL_PROFILE_PATH, read only when live execution runs)
            default_table_name: Table name used when options carry none
            writer: Output sink for push-style use; None writes nothing
            echo: Log executed statements through SQLAlchemy

        Raises:
            ConfigurationError: If the dialect is unknown
        """
        self.dialect = get_dialect(dialect)
        self.profile = profile
        self.default_table_name = default_table_name or config.default_table_name
        self.writer = writer
        self.executor = StatementExecutor(
            self.dialect, echo=config.echo_sql if echo is None else echo
        )
        self.state = ExportState.OPEN
        self.last_result: Optional[ExportResult] = None
        self._context: Optional[ExportContext] = None

    def export(
        self,
        source: RowSource,
        writer: Optional[TextIO] = None,
        options: Any = None,
        default_table_name: Optional[str] = None,
    ) -> ExportResult:
        """Stream a row source through this exporter.

        Args:
            source: Row source
            writer: Output sink for this export, or None
            options: Export options payload
            default_table_name: Host-supplied table name for this export

        Returns:
            ExportResult

        Raises:
            NoColumnsSelectedError: If the source produced no columns
            NoOptionsPresentError: If no options were supplied
            Exception: Whatever the row source raises mid-stream
        """
        saved = (self.writer, self.default_table_name)
        self.writer = writer
        if default_table_name:
            self.default_table_name = default_table_name
        try:
            return source.stream(self, options)
        except Exception:
            if self._context is not None:
                logger.error("Row source failed before the end of the stream; discarding rows")
                self._context.buffer.clear()
                self._context = None
                self.state = ExportState.FAILED
            raise
        finally:
            self.writer, self.default_table_name = saved

    def start_file(self, options: Any) -> None:
        """Begin an export with its options payload.

        Raises:
            ValidationError: If the options payload is malformed
        """
        logger.debug("export sql with options: %s", options)
        try:
            parsed = ExportOptions.from_payload(options)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid export options: {e}") from e
        self._context = ExportContext(options=parsed)
        self.state = ExportState.OPEN

    def add_row(self, cells: Sequence[Optional[CellData]], is_header: bool) -> None:
        """Buffer the header row or one data row."""
        if self._context is None:
            self._context = ExportContext()
        self.state = ExportState.ACCUMULATING
        if is_header:
            self._context.buffer.set_header(cells)
        else:
            self._context.buffer.append_row(cells)

    def end_file(self) -> ExportResult:
        """Build, write and optionally execute the statements.

        Returns:
            ExportResult

        Raises:
            NoColumnsSelectedError: If no header columns were received
            NoOptionsPresentError: If start_file() got no options
        """
        context = self._context if self._context is not None else ExportContext()
        self._context = None
        self.state = ExportState.FINALIZING
        try:
            result = self._finalize(context)
        except Exception:
            self.state = ExportState.FAILED
            raise
        finally:
            context.buffer.clear()

        self.state = ExportState.OPEN
        self.last_result = result
        return result

    def _finalize(self, context: ExportContext) -> ExportResult:
        if not context.columns:
            logger.error("No Columns Selected!!")
            raise NoColumnsSelectedError()
        if context.options is None:
            logger.error("No Options Selected!!")
            raise NoOptionsPresentError()

        options = context.options
        table_name = options.table_name or self.default_table_name
        create_builder = SqlCreateBuilder(table_name, context.columns, options, self.dialect)
        insert_builder = SqlInsertBuilder(
            table_name, context.columns, context.rows, options, self.dialect
        )

        result = ExportResult(
            table_name=table_name,
            success=True,
            columns=len(context.columns),
            rows=len(context.rows),
            live_execution=options.use_live_dialect,
            started_at=datetime.now(),
        )
        executing = options.use_live_dialect

        try:
            if options.include_structure:
                self._write(create_builder.get_sql())
                result.structure_written = self.writer is not None

                if executing:
                    drop_sql = create_builder.get_drop_sql()
                    if drop_sql:
                        executing = self._execute(result, "drop", drop_sql)
                if executing:
                    create_query = self.dialect.wrap_ddl_for_execution(
                        create_builder.get_create_sql()
                    )
                    logger.debug("%s", create_query)
                    executing = self._execute(result, "create", create_query)

            if options.include_content:
                insert_sql = insert_builder.get_insert_sql()
                if insert_sql:
                    self._write(insert_sql)
                    result.content_written = self.writer is not None
                    if executing:
                        self._execute(result, "insert", insert_sql)
                else:
                    logger.info("No rows to insert into %s", table_name)

        except OutputWriteFailedError as e:
            logger.error("Failed to write SQL output for %s: %s", table_name, e)
            result.success = False
            result.output_error = str(e)

        result.completed_at = datetime.now()
        result.duration_seconds = (result.completed_at - result.started_at).total_seconds()
        logger.debug("sql export finished: %s", result)
        return result

    def _write(self, text: str) -> None:
        if self.writer is None:
            return
        try:
            self.writer.write(text)
        except (OSError, ValueError) as e:
            raise OutputWriteFailedError(str(e)) from e

    def _execute(self, result: ExportResult, kind: str, statement: str) -> bool:
        """Execute one statement, recording the outcome on ``result``.

        Returns:
            True when the statement executed
        """
        started_at = datetime.now()
        try:
            self.executor.execute(self._resolve_profile(), statement)
        except ExecutionFailedError as e:
            duration = (datetime.now() - started_at).total_seconds()
            result.executions.append(
                ExecutionRecord(kind=kind, success=False, duration_seconds=duration)
            )
            result.success = False
            result.execution_error = e.reason
            result.execution_error_kind = (
                "DriverUnavailable" if isinstance(e, DriverUnavailableError) else "ExecutionFailed"
            )
            result.failed_statement = e.statement or statement
            return False

        duration = (datetime.now() - started_at).total_seconds()
        result.executions.append(ExecutionRecord(kind=kind, success=True, duration_seconds=duration))
        return True

    def _resolve_profile(self) -> Optional[ConnectionProfile]:
        """Get the connection profile, loading it from TABSQL_PROFILE_PATH once."""
        if self.profile is None and config.profile_path is not None:
            from tabsql.utils.yaml_parser import load_profile

            try:
                self.profile = load_profile(config.profile_path)
            except TabSQLError as e:
                raise ConnectionError(f"Cannot load connection profile: {e}") from e
        return self.profile
