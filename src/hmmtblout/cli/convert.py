"""
Convert commands for rewriting tblout reports.

Provides subcommands:
- reformat: Re-render a report with its own column widths
- table: Export records to CSV, TSV or Parquet
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from hmmtblout.cli.utils import load_config, open_reader, print_error, track_records
from hmmtblout.core.exceptions import TbloutError
from hmmtblout.core.io_utils import (
    infer_output_format,
    records_to_dataframe,
    write_dataframe,
)
from hmmtblout.core.writer import TbloutWriter

app = typer.Typer(
    name="convert",
    help="Rewrite tblout reports or export them as tables",
    no_args_is_help=True,
)

console = Console()


def _fail(error: TbloutError) -> None:
    print_error(console, error)
    raise typer.Exit(code=1) from None


@app.command(name="reformat")
def reformat(
    tblout: Path = typer.Argument(
        ...,
        help="Tabular report written with --tblout",
        exists=True,
        dir_okay=False,
    ),
    output: Path = typer.Option(
        ...,
        "--output",
        "-o",
        help="Output report path ('.gz' to compress)",
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="YAML reader configuration",
        exists=True,
        dir_okay=False,
    ),
    skip_malformed: bool = typer.Option(
        False,
        "--skip-malformed",
        help="Drop data lines that fail to decode instead of stopping",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress progress output",
    ),
) -> None:
    """
    Re-render a report: header, aligned data lines, then the metadata block.

    Example:

        hmmtblout convert reformat hits.tbl -o hits.clean.tbl
    """
    reader_config = load_config(config, skip_malformed, console)

    with open_reader(tblout, reader_config, console) as reader:
        try:
            records = track_records(reader.records(), "Rewriting", console, quiet)
            with TbloutWriter.to_path(output) as writer:
                writer.write_header(reader.header)
                count = writer.write_records(records)
                writer.write_meta(reader.meta)
        except TbloutError as e:
            _fail(e)

    if not quiet:
        console.print(f"[green]Wrote {count:,} records to {output}[/green]")


@app.command(name="table")
def table(
    tblout: Path = typer.Argument(
        ...,
        help="Tabular report written with --tblout",
        exists=True,
        dir_okay=False,
    ),
    output: Path = typer.Option(
        ...,
        "--output",
        "-o",
        help="Output table (.csv, .tsv or .parquet)",
    ),
    output_format: str | None = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format: csv, tsv or parquet (default: from extension)",
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="YAML reader configuration",
        exists=True,
        dir_okay=False,
    ),
    skip_malformed: bool = typer.Option(
        False,
        "--skip-malformed",
        help="Drop data lines that fail to decode instead of stopping",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress progress output",
    ),
) -> None:
    """
    Export the records of a report as a typed table.

    Example:

        hmmtblout convert table hits.tbl -o hits.parquet
    """
    if output_format is None:
        try:
            fmt = infer_output_format(output)
        except ValueError:
            console.print(
                f"[red]Error: cannot infer format from '{output.name}'; "
                f"use --format csv|tsv|parquet[/red]"
            )
            raise typer.Exit(code=1) from None
    elif output_format in ("csv", "tsv", "parquet"):
        fmt = output_format
    else:
        raise typer.BadParameter(
            f"Unknown format '{output_format}'. Choose csv, tsv or parquet.",
            param_hint="--format",
        )

    reader_config = load_config(config, skip_malformed, console)
    with open_reader(tblout, reader_config, console) as reader:
        try:
            records = track_records(reader.records(), "Reading", console, quiet)
            df = records_to_dataframe(records, reader.schema)
        except TbloutError as e:
            _fail(e)

    write_dataframe(df, output, fmt)
    if not quiet:
        console.print(f"[green]Wrote {df.height:,} {reader.schema.value} records to {output}[/green]")
