"""Check command: CI gate on drift severity."""

from pathlib import Path
from typing import Optional

import typer

from . import app
from ._common import (
    baseline_path,
    err_console,
    error_dicts,
    report_error,
    resolve_config,
    run_scan,
    split_baselined,
)
from ..baseline import load_baseline
from ..exceptions import BuoyError
from ..formatters import get_formatter
from ..logging_config import setup_logging
from ..models import DriftReport, severity_at_least


@app.command()
def check(
    path: Path = typer.Argument(
        Path("."),
        help="File or directory to check",
    ),
    fail_on: Optional[str] = typer.Option(
        None, "--fail-on",
        help="Lowest severity that fails: critical, warning, info or none",
    ),
    use_baseline: bool = typer.Option(
        True, "--baseline/--no-baseline",
        help="Ignore signals recorded in the baseline file",
    ),
    output_format: Optional[str] = typer.Option(
        None, "--format", "-f",
        help="Output format: rich, json or github",
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c",
        help="Configuration file path (TOML format)",
        exists=True, file_okay=True, dir_okay=False, readable=True,
    ),
    blame: bool = typer.Option(
        False, "--blame",
        help="Attribute each signal to the git author of its line",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """
    Exit with code 1 when any signal is at or above [cyan]--fail-on[/cyan].

    Signals already in the baseline are not counted.
    """
    setup_logging(verbose=verbose, quiet=not verbose)
    try:
        settings = resolve_config(
            config, fail_on=fail_on, output_format=output_format, verbose=verbose
        )
        result = run_scan(path, settings, blame=blame)

        signals, hidden = result.signals, 0
        if use_baseline:
            signatures = load_baseline(str(baseline_path(path, settings)))
            signals, hidden = split_baselined(result.signals, signatures)

        report = DriftReport(
            signals=signals,
            root=str(path),
            files_scanned=result.files_scanned,
            errors=error_dicts(result),
            baselined=hidden,
        )
        get_formatter(settings.output_format).render(report)
    except (BuoyError, ValueError) as e:
        report_error(e)
        raise typer.Exit(1)

    if settings.fail_on == "none":
        raise typer.Exit(0)
    failing = [s for s in signals if severity_at_least(s.severity, settings.fail_on)]
    if failing:
        err_console.print(
            f"[red]{len(failing)} signal(s) at or above '{settings.fail_on}'[/red]"
        )
        raise typer.Exit(1)
