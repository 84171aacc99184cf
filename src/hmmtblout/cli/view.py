"""
View commands for inspecting tblout reports.

Provides subcommands:
- info: Show run metadata, record layout and column widths
- coordinates: Print target name, strand and hit coordinates per record
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from hmmtblout.cli.utils import load_config, open_reader, print_error
from hmmtblout.core.exceptions import TbloutError
from hmmtblout.models.meta import META_LABELS
from hmmtblout.models.program import Program, RecordSchema
from hmmtblout.models.records import ModelRecord, SequenceRecord

app = typer.Typer(
    name="view",
    help="Inspect HMMER and Infernal tblout reports",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)


@app.command(name="info")
def info(
    tblout: Path = typer.Argument(
        ...,
        help="Tabular report written with --tblout",
        exists=True,
        dir_okay=False,
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="YAML reader configuration",
        exists=True,
        dir_okay=False,
    ),
) -> None:
    """
    Show the run metadata and column layout of a report.

    Example:

        hmmtblout view info hits.tbl
    """
    reader_config = load_config(config, skip_malformed=False, console=console)
    with open_reader(tblout, reader_config, console) as reader:
        meta = reader.meta

        table = Table(title=str(tblout), show_header=False)
        table.add_column("Field", style="bold")
        table.add_column("Value")
        for field, label in META_LABELS.items():
            value = getattr(meta, field)
            table.add_row(label, str(value))

        if reader.program is Program.UNKNOWN:
            table.add_row("Layout", "[yellow]unknown[/yellow]")
        else:
            table.add_row("Layout", reader.schema.value)
        widths = reader.column_widths
        table.add_row("Column widths", " ".join(map(str, widths)) if widths else "[yellow]none[/yellow]")

        console.print(table)


@app.command(name="coordinates")
def coordinates(
    tblout: Path = typer.Argument(
        ...,
        help="Tabular report written with --tblout",
        exists=True,
        dir_okay=False,
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
        help="Skip data lines that fail to decode instead of stopping",
    ),
) -> None:
    """
    Print target name, strand and coordinates of every hit, tab-separated.

    Nucleotide reports print the alignment coordinates (ali from/to);
    covariance model reports print the sequence coordinates (seq from/to).
    Protein reports carry no strand and are rejected.

    Example:

        hmmtblout view coordinates hits.tbl > hits.tsv
    """
    reader_config = load_config(config, skip_malformed, console=err_console)
    with open_reader(tblout, reader_config, err_console) as reader:
        try:
            if reader.schema is RecordSchema.PROFILE:
                err_console.print(
                    f"[red]Error: {reader.program.value} reports have no "
                    f"strand or coordinates[/red]"
                )
                raise typer.Exit(code=1)

            for record in reader.records():
                if isinstance(record, SequenceRecord):
                    start, end = record.ali_from, record.ali_to
                elif isinstance(record, ModelRecord):
                    start, end = record.seq_from, record.seq_to
                else:
                    msg = f"Unexpected record type: {type(record).__name__}"
                    raise TypeError(msg)
                typer.echo(f"{record.target_name}\t{record.strand}\t{start}\t{end}")
        except TbloutError as e:
            print_error(err_console, e)
            raise typer.Exit(code=1) from None
