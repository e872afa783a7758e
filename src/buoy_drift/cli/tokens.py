"""Tokens command."""

from pathlib import Path
from typing import List

import typer
from rich.table import Table

from . import app
from ._common import console, report_error
from ..exceptions import BuoyError
from ..logging_config import setup_logging
from ..models import ColorValue, SpacingValue
from ..primitives.spacing import format_px
from ..tokens import load_tokens


def _display_value(value) -> str:
    if isinstance(value, ColorValue):
        return value.hex
    if isinstance(value, SpacingValue):
        return f"{format_px(value.value)}{value.unit}"
    return str(getattr(value, "value", value))


@app.command()
def tokens(
    files: List[Path] = typer.Argument(
        ...,
        help="Token files (.json, .css, .scss)",
        exists=True, file_okay=True, dir_okay=False, readable=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """List the design tokens parsed from token files."""
    setup_logging(verbose=verbose, quiet=not verbose)
    try:
        parsed = load_tokens([str(f) for f in files])
    except BuoyError as e:
        report_error(e)
        raise typer.Exit(1)

    if not parsed:
        console.print("[yellow]No tokens found.[/yellow]")
        return

    table = Table(title=f"Design tokens ({len(parsed)})")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Category")
    table.add_column("Value", style="magenta", no_wrap=True)
    table.add_column("Source", style="dim")
    for token in parsed:
        table.add_row(token.name, token.category, _display_value(token.value), token.source.path)
    console.print(table)
