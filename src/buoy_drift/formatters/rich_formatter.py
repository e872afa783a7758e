"""Rich terminal formatter for buoy-drift."""

from typing import List

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..models import SEVERITIES, DriftReport, DriftSignal, Fix
from .base import BaseFormatter

console = Console(stderr=True)

_SEVERITY_STYLE = {
    "critical": "[red bold]critical[/red bold]",
    "warning": "[yellow]warning[/yellow]",
    "info": "[dim]info[/dim]",
}

_CONFIDENCE_STYLE = {
    "exact": "[green bold]exact[/green bold]",
    "high": "[green]high[/green]",
    "medium": "[yellow]medium[/yellow]",
    "low": "[red]low[/red]",
}

MAX_ROWS_PER_SEVERITY = 50


class RichFormatter(BaseFormatter):
    """Summary panel plus one table per severity."""

    def render(self, report: DriftReport) -> None:
        self._print_summary(report)
        self._print_signals(report.signals)
        if report.fixes:
            self._print_fixes(report.fixes)
        if report.errors:
            console.print(f"[yellow]{len(report.errors)} file(s) could not be scanned[/yellow]")
            for error in report.errors:
                console.print(f"  [dim]{error['file']}[/dim]: {error['error']}")

    def format(self, report: DriftReport) -> str:
        # Rich output goes directly to console; return empty string
        self.render(report)
        return ""

    def _print_summary(self, report: DriftReport) -> None:
        counts = report.counts_by_severity()
        lines = [
            f"[bold]Files scanned:[/bold] {report.files_scanned}",
            f"[bold]Drift signals:[/bold] {len(report.signals)}  "
            + "  ".join(f"{_SEVERITY_STYLE[s]} {counts[s]}" for s in SEVERITIES),
        ]
        if report.baselined:
            lines.append(f"[dim]{report.baselined} baselined signal(s) hidden[/dim]")
        console.print(
            Panel("\n".join(lines), title="[bold cyan]Buoy Design Drift[/bold cyan]", expand=False)
        )

    def _print_signals(self, signals: List[DriftSignal]) -> None:
        if not signals:
            console.print("[green]No design drift detected.[/green]")
            return

        for severity in SEVERITIES:
            group = [s for s in signals if s.severity == severity]
            if not group:
                continue
            table = Table(title=f"{_SEVERITY_STYLE[severity]} ({len(group)})", show_lines=False)
            table.add_column("Location", style="cyan", no_wrap=True)
            table.add_column("Type")
            table.add_column("Value", style="magenta")
            table.add_column("Message")
            for signal in group[:MAX_ROWS_PER_SEVERITY]:
                message = signal.message
                if signal.suggestion:
                    message += f"\n[dim]{signal.suggestion}[/dim]"
                table.add_row(signal.location, signal.type, signal.value, message)
            console.print(table)
            if len(group) > MAX_ROWS_PER_SEVERITY:
                console.print(f"[dim]...and {len(group) - MAX_ROWS_PER_SEVERITY} more[/dim]")

    def _print_fixes(self, fixes: List[Fix]) -> None:
        table = Table(title=f"Suggested fixes ({len(fixes)})")
        table.add_column("Location", style="cyan", no_wrap=True)
        table.add_column("Confidence")
        table.add_column("Change")
        table.add_column("Reason", style="dim")
        for fix in fixes:
            table.add_row(
                f"{fix.file}:{fix.line}:{fix.column}",
                f"{_CONFIDENCE_STYLE[fix.confidence]} {fix.confidence_score:.0f}",
                f"{fix.original} -> [green]{fix.replacement}[/green]",
                fix.reason,
            )
        console.print(table)
