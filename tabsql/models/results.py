"""Result models for SQL exports.

An export that gets past its preconditions always returns an
``ExportResult``. Output-write and live-execution failures are recorded on
the result instead of being raised, so callers can see exactly which parts
of the export took effect.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field as PydanticField

from tabsql.exceptions import (
    DriverUnavailableError,
    ExecutionFailedError,
    OutputWriteFailedError,
)


class ExecutionRecord(BaseModel):
    """One statement sent to the live database."""

    kind: str = PydanticField(..., description="'drop', 'create' or 'insert'")

    success: bool = PydanticField(..., description="Whether the statement executed")

    duration_seconds: float = PydanticField(0.0, ge=0.0)

    model_config = {"extra": "forbid"}


class ExportResult(BaseModel):
    """Outcome of one export.

    Contains what was written, what was executed, and the first
    output or execution error encountered.
    """

    table_name: str = PydanticField(..., description="Effective table name")

    success: bool = PydanticField(
        ...,
        description="True when every requested write and execution succeeded",
    )

    columns: int = PydanticField(0, description="Number of columns exported", ge=0)

    rows: int = PydanticField(0, description="Number of data rows exported", ge=0)

    structure_written: bool = PydanticField(
        False,
        description="CREATE text reached the output sink",
    )

    content_written: bool = PydanticField(
        False,
        description="INSERT text reached the output sink",
    )

    live_execution: bool = PydanticField(
        False,
        description="Whether live execution was requested",
    )

    executions: list[ExecutionRecord] = PydanticField(
        default_factory=list,
        description="Statements sent to the live database, in order",
    )

    output_error: Optional[str] = PydanticField(
        None,
        description="Message of the output sink failure, if any",
    )

    execution_error: Optional[str] = PydanticField(
        None,
        description="Message of the live-execution failure, if any",
    )

    execution_error_kind: Optional[str] = PydanticField(
        None,
        description="'DriverUnavailable' or 'ExecutionFailed'",
    )

    failed_statement: Optional[str] = PydanticField(
        None,
        description="Statement text whose execution failed",
    )

    started_at: datetime = PydanticField(..., description="Finalization start time")

    completed_at: Optional[datetime] = PydanticField(
        None,
        description="Finalization completion time",
    )

    duration_seconds: float = PydanticField(0.0, ge=0.0)

    model_config = {"extra": "forbid"}

    @property
    def partial(self) -> bool:
        """Some text was written but a later step failed."""
        return not self.success and (self.structure_written or self.content_written)

    @property
    def statements_executed(self) -> int:
        return sum(1 for record in self.executions if record.success)

    def raise_for_error(self) -> None:
        """Raise the recorded error, if any.

        Raises:
            OutputWriteFailedError: If writing to the output sink failed
            DriverUnavailableError: If the vendor driver could not be loaded
            ExecutionFailedError: If a statement failed to execute
        """
        if self.output_error is not None:
            raise OutputWriteFailedError(self.output_error)
        if self.execution_error is not None:
            if self.execution_error_kind == "DriverUnavailable":
                raise DriverUnavailableError(self.execution_error, self.failed_statement)
            raise ExecutionFailedError(self.execution_error, self.failed_statement)
