"""
Shared CLI utilities for hmmtblout commands.

Error reporting, configuration loading and reader construction used by
every subcommand, plus a progress spinner that counts records as they
stream past.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import TypeVar

import typer
from rich.console import Console
from rich.progress import (
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeElapsedColumn,
)

from hmmtblout.core.exceptions import RecordError, TbloutError
from hmmtblout.core.parsers import TbloutReader
from hmmtblout.models.config import ReaderConfig

T = TypeVar("T")


def print_error(console: Console, error: TbloutError) -> None:
    """Print an error message, followed by its suggestion where one helps.

    Suggestions for single malformed lines are generic, so they are left out.
    """
    console.print(f"[red]Error: {error.message}[/red]")
    if error.suggestion and not isinstance(error, RecordError):
        console.print(f"[dim]{error.suggestion}[/dim]")


def track_records(
    records: Iterable[T],
    description: str,
    console: Console,
    quiet: bool = False,
) -> Iterator[T]:
    """Pass records through unchanged while a spinner counts them.

    Args:
        records: Any record iterable; consumed lazily.
        description: Task description to display.
        console: Console the spinner renders on.
        quiet: If True, no spinner is shown.

    Yields:
        The input records, in order.
    """
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        TextColumn("{task.completed:,} records"),
        TimeElapsedColumn(),
        console=console,
        disable=quiet,
        transient=True,
    ) as progress:
        task = progress.add_task(description, total=None)
        for record in records:
            yield record
            progress.advance(task)


def load_config(
    config_path: Path | None,
    skip_malformed: bool,
    console: Console,
) -> ReaderConfig:
    """Build the reader configuration from a YAML file and CLI flags.

    Args:
        config_path: Optional YAML configuration file.
        skip_malformed: If True, malformed data lines are skipped.
        console: Console for error output.

    Returns:
        ReaderConfig with CLI flags applied over the file's values.

    Raises:
        typer.Exit: If the configuration file is invalid.
    """
    config = ReaderConfig()
    if config_path is not None:
        try:
            config = ReaderConfig.from_yaml(config_path)
        except TbloutError as e:
            print_error(console, e)
            raise typer.Exit(code=1) from None
    if skip_malformed:
        config = config.model_copy(update={"on_error": "skip"})
    return config


def open_reader(path: Path, config: ReaderConfig, console: Console) -> TbloutReader:
    """Open a tblout report, turning reader errors into a clean CLI exit.

    Raises:
        typer.Exit: If the file cannot be read or its metadata is invalid.
    """
    try:
        return TbloutReader.from_path(path, config)
    except TbloutError as e:
        print_error(console, e)
        raise typer.Exit(code=1) from None
    except OSError as e:
        console.print(f"[red]Error reading {path}: {e}[/red]")
        raise typer.Exit(code=1) from None
