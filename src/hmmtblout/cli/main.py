"""
Main CLI entry point for hmmtblout.

Provides subcommands for working with HMMER and Infernal --tblout reports:
- view: Inspect metadata and print hit coordinates
- convert: Re-render reports or export them as tables
"""

from __future__ import annotations

import logging

import typer
from rich import print as rprint

from hmmtblout import __version__

app = typer.Typer(
    name="hmmtblout",
    help="Read, rewrite and export HMMER / Infernal tabular (--tblout) reports",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        rprint(f"hmmtblout version {__version__}")
        raise typer.Exit


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
) -> None:
    """
    hmmtblout: typed records from HMMER and Infernal tabular reports.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import subcommands
from hmmtblout.cli import convert, view

# Register subcommands
app.add_typer(view.app, name="view")
app.add_typer(convert.app, name="convert")


if __name__ == "__main__":
    app()
