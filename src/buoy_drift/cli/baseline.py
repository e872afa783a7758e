"""Baseline command."""

from pathlib import Path
from typing import Optional

import typer

from . import app
from ._common import baseline_path, console, report_error, resolve_config, run_scan
from ..baseline import load_baseline, load_baseline_entries, save_baseline
from ..exceptions import BuoyError
from ..logging_config import setup_logging


@app.command()
def baseline(
    path: Path = typer.Argument(
        Path("."),
        help="Directory to scan",
    ),
    show: bool = typer.Option(
        False, "--show",
        help="Show current baseline instead of saving",
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c",
        help="Configuration file path (TOML format)",
        exists=True, file_okay=True, dir_okay=False, readable=True,
    ),
):
    """Accept all current drift signals so [cyan]buoy check[/cyan] only reports new ones."""
    setup_logging(verbose=False, quiet=True)
    try:
        settings = resolve_config(config)
        target = baseline_path(path, settings)

        if show:
            signatures = load_baseline(str(target))
            if not signatures:
                console.print("[yellow]No baseline found.[/yellow]")
                raise typer.Exit(0)
            console.print(f"[bold cyan]Baseline[/bold cyan] ({target}): {len(signatures)} signatures")
            for entry in load_baseline_entries(str(target)):
                console.print(
                    f"  {entry['signature']}  [dim]{entry.get('type', '')}[/dim]  "
                    f"{entry.get('file', '')}  {entry.get('value', '')}",
                    markup=True,
                    highlight=False,
                )
            raise typer.Exit(0)

        result = run_scan(path, settings)
        count = save_baseline(result.signals, str(target))
        console.print(f"[green]Baseline saved to {target} ({count} signatures)[/green]")
    except BuoyError as e:
        report_error(e)
        raise typer.Exit(1)
