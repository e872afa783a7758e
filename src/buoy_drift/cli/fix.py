"""Fix command: suggest or apply token replacements for hardcoded values."""

from pathlib import Path
from typing import List, Optional

import typer
from rich.syntax import Syntax

from . import app
from ._common import console, project_base, report_error, resolve_config, resolve_tokens, run_scan
from ..exceptions import BuoyError
from ..fixes import FixOptions, apply_fixes, generate_fix_diff, generate_fixes, summarize_fixes
from ..formatters import get_formatter
from ..logging_config import setup_logging
from ..models import DriftReport


@app.command()
def fix(
    path: Path = typer.Argument(
        Path("."),
        help="File or directory to fix",
    ),
    tokens: Optional[List[Path]] = typer.Option(
        None, "--tokens", "-t",
        help="Design token file (.json, .css, .scss); repeatable",
    ),
    apply: bool = typer.Option(
        False, "--apply",
        help="Write fixes to disk",
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run",
        help="With --apply, report what would change without writing",
    ),
    min_confidence: Optional[str] = typer.Option(
        None, "--min-confidence",
        help="Lowest confidence to suggest (exact, high, medium, low)",
    ),
    fix_types: Optional[List[str]] = typer.Option(
        None, "--type",
        help="Only this fix type (e.g. hardcoded-color); repeatable",
    ),
    backup: Optional[bool] = typer.Option(
        None, "--backup/--no-backup",
        help="Write <file>.bak before modifying a file",
    ),
    diff: bool = typer.Option(
        False, "--diff",
        help="Show a unified diff for each suggested fix",
    ),
    output_format: Optional[str] = typer.Option(
        None, "--format", "-f",
        help="Output format for suggestions: rich, json or github",
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c",
        help="Configuration file path (TOML format)",
        exists=True, file_okay=True, dir_okay=False, readable=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """
    Match hardcoded values to design tokens and propose [cyan]var(--token)[/cyan]
    replacements.

    Without [cyan]--apply[/cyan] nothing is written. Applying only touches
    fixes at or above the configured apply confidence ([cyan]high[/cyan] by
    default).
    """
    setup_logging(verbose=verbose, quiet=not verbose)
    try:
        settings = resolve_config(
            config,
            output_format=output_format,
            verbose=verbose,
            fix={"min_confidence": min_confidence, "types": fix_types or None, "backup": backup},
        )
        design_tokens = resolve_tokens(settings, tokens or [])
        if not design_tokens:
            console.print(
                "[yellow]No design tokens found.[/yellow] Pass --tokens or set token_files in buoy-drift.toml"
            )
            raise typer.Exit(1)

        result = run_scan(path, settings)
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

        if not apply:
            report = DriftReport(
                signals=result.signals,
                root=str(path),
                files_scanned=result.files_scanned,
                fixes=fixes,
            )
            get_formatter(settings.output_format).render(report)
            if diff:
                base = project_base(path)
                for f in fixes:
                    content = (base / f.file).read_text(encoding="utf-8", errors="replace")
                    console.print(Syntax(generate_fix_diff(f, content), "diff"))
            summary = summarize_fixes(fixes)
            if settings.output_format == "rich":
                console.print(
                    f"{summary['total']} fix(es), {summary['high_confidence_count']} safe to apply "
                    "([cyan]buoy fix --apply[/cyan])"
                )
            return

        outcome = apply_fixes(
            fixes,
            dry_run=dry_run,
            backup=settings.fix.backup,
            min_confidence=settings.fix.apply_min_confidence,
            root=project_base(path),
        )
        verb = "Would apply" if dry_run else "Applied"
        console.print(
            f"[green]{verb} {outcome.applied} fix(es)[/green], "
            f"{outcome.skipped} skipped, {outcome.failed} failed"
        )
        for r in outcome.results:
            if r.status == "failed":
                console.print(f"  [red]failed[/red] {r.fix_id}: {r.error}")
        if outcome.failed:
            raise typer.Exit(1)
    except (BuoyError, ValueError, OSError) as e:
        report_error(e)
        raise typer.Exit(1)
