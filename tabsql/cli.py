"""tabsql CLI - Command-line interface for SQL exports."""

import sys
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from tabsql import __version__
from tabsql.dialects import DIALECTS, get_dialect
from tabsql.exceptions import ConfigurationError, ExportError, ValidationError
from tabsql.exporters.sql import SqlExporter
from tabsql.models.options import ExportOptions
from tabsql.models.results import ExportResult
from tabsql.sources.csv_source import CsvRowSource
from tabsql.utils.logging import setup_logging
from tabsql.utils.yaml_parser import load_options, load_profile

app = typer.Typer(
    name="tabsql",
    help="tabsql - Export tabular data as SQL and load it into a database",
    add_completion=True,
)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        typer.echo(f"tabsql version {__version__}")
        raise typer.Exit()


def _display_result(result: ExportResult, verbose: bool = False) -> None:
    """Display export result on stderr, keeping stdout for SQL text."""
    if result.success:
        typer.secho("Export succeeded!", fg=typer.colors.GREEN, bold=True, err=True)
    else:
        typer.secho("Export finished with errors!", fg=typer.colors.RED, bold=True, err=True)
        if result.output_error:
            typer.echo(f"Output error: {result.output_error}", err=True)
        if result.execution_error:
            typer.echo(f"{result.execution_error_kind}: {result.execution_error}", err=True)

    typer.echo(f"Table: {result.table_name}", err=True)
    typer.echo(f"Columns: {result.columns}", err=True)
    typer.echo(f"Rows: {result.rows:,}", err=True)
    if result.live_execution:
        typer.echo(f"Statements executed: {result.statements_executed}", err=True)
    typer.echo(f"Duration: {result.duration_seconds:.2f}s", err=True)

    if verbose and result.failed_statement:
        typer.echo("\nFailed statement:", err=True)
        typer.echo(result.failed_statement, err=True)


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    """tabsql - Turn tabular rows into CREATE TABLE and INSERT statements."""
    pass


@app.command()
def export(
    csv_path: Annotated[
        Path,
        typer.Argument(
            help="Path to the CSV file to export",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
        ),
    ],
    options_path: Annotated[
        Optional[Path],
        typer.Option("--options", "-c", help="YAML/JSON export options file"),
    ] = None,
    profile_path: Annotated[
        Optional[Path],
        typer.Option("--profile", "-p", help="YAML/JSON connection profile for live execution"),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write SQL to this file instead of stdout"),
    ] = None,
    table: Annotated[
        Optional[str],
        typer.Option("--table", "-t", help="Table name (overrides the options file)"),
    ] = None,
    dialect: Annotated[
        Optional[str],
        typer.Option("--dialect", "-d", help="Dialect id (see 'tabsql dialects')"),
    ] = None,
    live: Annotated[
        Optional[bool],
        typer.Option("--live/--no-live", help="Execute the statements against the database"),
    ] = None,
    delimiter: Annotated[
        str,
        typer.Option("--delimiter", help="CSV field delimiter"),
    ] = ",",
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Verbose output"),
    ] = False,
) -> None:
    """Export a CSV file as SQL."""
    setup_logging("DEBUG" if verbose else None)
    try:
        options = load_options(options_path) if options_path else ExportOptions()
        updates = {}
        if table:
            updates["table_name"] = table
        if live is not None:
            updates["use_live_dialect"] = live
        if updates:
            options = options.model_copy(update=updates)

        profile = load_profile(profile_path) if profile_path else None
        exporter = SqlExporter(dialect=dialect, profile=profile)
        source = CsvRowSource(csv_path, delimiter=delimiter)

        if output is not None:
            with open(output, "w", encoding="utf-8") as out:
                result = exporter.export(source, out, options, csv_path.stem)
        else:
            result = exporter.export(source, sys.stdout, options, csv_path.stem)

        _display_result(result, verbose)

        if not result.success:
            raise typer.Exit(code=1)

    except (ValidationError, ConfigurationError) as e:
        typer.secho(f"Configuration error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    except ExportError as e:
        typer.secho(f"Export error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    except typer.Exit:
        raise
    except Exception as e:
        typer.secho(f"Unexpected error: {e}", fg=typer.colors.RED, err=True)
        if verbose:
            import traceback
            traceback.print_exc()
        raise typer.Exit(code=1)


@app.command()
def dialects() -> None:
    """List the registered dialects."""
    for name in sorted(DIALECTS):
        dialect = get_dialect(name)
        live = "live" if dialect.supports_live_execution() else "text only"
        driver = dialect.driver or "-"
        typer.echo(f"  {name:<10} {live:<10} driver={driver}  text_type={dialect.text_type}")


if __name__ == "__main__":
    app()
