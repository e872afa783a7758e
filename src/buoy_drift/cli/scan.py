"""Scan command."""

from pathlib import Path
from typing import List, Optional

import typer

from . import app
from ._common import error_dicts, report_error, resolve_config, resolve_tokens, run_scan
from ..exceptions import BuoyError
from ..fixes import FixOptions, generate_fixes
from ..formatters import get_formatter
from ..logging_config import setup_logging
from ..models import DriftReport


@app.command()
def scan(
    path: Path = typer.Argument(
        Path("."),
        help="File or directory to scan",
    ),
    output_format: Optional[str] = typer.Option(
        None, "--format", "-f",
        help="Output format: [cyan]rich[/cyan], [cyan]json[/cyan] or [cyan]github[/cyan]",
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c",
        help="Configuration file path (TOML format)",
        exists=True, file_okay=True, dir_okay=False, readable=True,
    ),
    tokens: Optional[List[Path]] = typer.Option(
        None, "--tokens", "-t",
        help="Design token file (.json, .css, .scss); repeatable. Enables fix suggestions",
    ),
    blame: bool = typer.Option(
        False, "--blame",
        help="Attribute each signal to the git author of its line",
    ),
    workers: Optional[int] = typer.Option(
        None, "--workers", "-w",
        help="Parallel scan workers",
        min=1, max=32,
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v",
        help="Show debug logging",
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q",
        help="Only log errors",
    ),
):
    """
    List design drift signals: hardcoded colors, arbitrary Tailwind values
    and inline styles.

    [bold]Examples:[/bold]

      buoy scan src

      buoy scan src --format json

      buoy scan src --tokens tokens.json
    """
    setup_logging(verbose=verbose, quiet=quiet)
    try:
        settings = resolve_config(
            config, output_format=output_format, workers=workers, verbose=verbose, quiet=quiet
        )
        setup_logging(verbosity=settings.verbosity)
        result = run_scan(path, settings, blame=blame)
        design_tokens = resolve_tokens(settings, tokens or [])

        fixes = []
        if design_tokens:
            fixes = generate_fixes(
                result.signals,
                design_tokens,
                FixOptions(
                    types=settings.fix.types,
                    min_confidence=settings.fix.min_confidence,
                    include_files=settings.fix.include_files,
                    exclude_files=settings.fix.exclude_files,
                ),
            )

        report = DriftReport(
            signals=result.signals,
            root=str(path),
            files_scanned=result.files_scanned,
            errors=error_dicts(result),
            fixes=fixes,
        )
        get_formatter(settings.output_format).render(report)
    except (BuoyError, ValueError) as e:
        report_error(e)
        raise typer.Exit(1)
