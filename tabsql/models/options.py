"""Export options models.

Options arrive once per export as a JSON-like document with camelCase keys.
Recognized keys are mapped onto ``ExportOptions``; anything else is ignored.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, Field as PydanticField, field_validator

NUMERIC_TYPES = frozenset(
    {
        "INT",
        "INTEGER",
        "SMALLINT",
        "TINYINT",
        "BIGINT",
        "NUMERIC",
        "DECIMAL",
        "FLOAT",
        "DOUBLE",
        "DOUBLE PRECISION",
        "REAL",
    }
)


class ColumnOptions(BaseModel):
    """Per-column overrides for the generated CREATE TABLE statement.

    Columns without an entry are created with the dialect's text type.

    Examples:
        >>> ColumnOptions(name="qty", type="INTEGER", allowNull=False)
        >>> ColumnOptions(name="city", type="VARCHAR", size=80, defaultValue="n/a")
    """

    name: str = PydanticField(..., description="Column name as it appears in the header row")

    type: Optional[str] = PydanticField(
        None,
        description="SQL type name (e.g., 'VARCHAR', 'INTEGER'); dialect text type if omitted",
    )

    size: Optional[int] = PydanticField(
        None,
        description="Length/precision appended to the type as TYPE(size)",
        gt=0,
    )

    allow_null: bool = PydanticField(
        True,
        alias="allowNull",
        description="Emit NOT NULL when False",
    )

    default_value: Optional[str] = PydanticField(
        None,
        alias="defaultValue",
        description="DEFAULT clause value",
    )

    null_value_to_empty_str: Optional[bool] = PydanticField(
        None,
        alias="nullValueToEmptyStr",
        description="Override convertNullToEmptyString for this column",
    )

    model_config = {"extra": "ignore", "populate_by_name": True}

    @field_validator("type")
    @classmethod
    def normalize_type(cls, v: Optional[str]) -> Optional[str]:
        """Upper-case and trim the type name."""
        if v is None:
            return None
        v = v.strip().upper()
        return v or None

    @property
    def is_numeric(self) -> bool:
        """Whether values in this column are written as unquoted numbers."""
        if self.type is None:
            return False
        return self.type.split("(")[0].strip() in NUMERIC_TYPES


class ExportOptions(BaseModel):
    """Options controlling one SQL export.

    Examples:
        Defaults (structure and content, no live execution):
        >>> ExportOptions()

        From the JSON payload a host sends:
        >>> ExportOptions.from_payload(
        ...     {"tableName": "orders", "includeContent": False, "useLiveDialect": True}
        ... )
    """

    include_structure: bool = PydanticField(
        True,
        alias="includeStructure",
        description="Emit the CREATE TABLE statement",
    )

    include_content: bool = PydanticField(
        True,
        alias="includeContent",
        description="Emit the INSERT statement",
    )

    table_name: Optional[str] = PydanticField(
        None,
        alias="tableName",
        description="Overrides the host-supplied default table name",
    )

    use_live_dialect: bool = PydanticField(
        False,
        validation_alias=AliasChoices("useLiveDialect", "use_live_dialect", "iris"),
        description="Execute generated statements against the dialect's database",
    )

    include_drop_statement: bool = PydanticField(
        False,
        alias="includeDropStatement",
        description="Prefix the DDL with DROP TABLE",
    )

    include_if_exist_with_drop_statement: bool = PydanticField(
        False,
        alias="includeIfExistWithDropStatement",
        description="Use DROP TABLE IF EXISTS when includeDropStatement is set",
    )

    trim_column_names: bool = PydanticField(
        False,
        alias="trimColumnNames",
        description="Strip surrounding whitespace from column names",
    )

    convert_null_to_empty_string: bool = PydanticField(
        True,
        validation_alias=AliasChoices(
            "convertNullToEmptyString",
            "convertNulltoEmptyString",
            "convert_null_to_empty_string",
        ),
        description="Write empty cells as '' instead of NULL in text columns",
    )

    columns: list[ColumnOptions] = PydanticField(
        default_factory=list,
        description="Per-column type overrides",
    )

    model_config = {"extra": "ignore", "populate_by_name": True}

    @field_validator("table_name")
    @classmethod
    def blank_table_name_is_none(cls, v: Optional[str]) -> Optional[str]:
        """Treat a blank table name as absent."""
        if v is not None and not v.strip():
            return None
        return v

    @classmethod
    def from_payload(cls, payload: Any) -> Optional[ExportOptions]:
        """Build options from whatever the host passed to start_file().

        Args:
            payload: An ExportOptions instance, a mapping, or None

        Returns:
            ExportOptions, or None when no payload was supplied
        """
        if payload is None:
            return None
        if isinstance(payload, ExportOptions):
            return payload
        return cls.model_validate(payload)

    def column_options(self, name: str) -> Optional[ColumnOptions]:
        """Get the override for a column, if one was configured."""
        for column in self.columns:
            if column.name == name:
                return column
        return None
