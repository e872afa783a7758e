"""GitHub Actions formatter: workflow annotations and the PR comment body."""

from typing import Dict, List, Optional, Sequence

from ..models import SEVERITY_RANK, DriftReport, DriftSignal
from ..scanning.blame import UNKNOWN_AUTHOR
from .base import BaseFormatter

COMMENT_MARKER = "<!-- buoy-design-drift-report -->"
COMMENT_HEADER = "## :ring_buoy: Buoy Design Drift Report"

MAX_FIXED_SHOWN = 5
MAX_ROWS_PER_AUTHOR = 15

_ANNOTATION_LEVEL = {"critical": "error", "warning": "warning", "info": "notice"}

_SEVERITY_ICON = {
    "critical": ":x:",
    "warning": ":warning:",
    "info": ":information_source:",
}


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'' if count == 1 else 's'}"


def _escape_annotation(text: str) -> str:
    return text.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def format_annotations(signals: Sequence[DriftSignal]) -> str:
    lines = []
    for s in signals:
        level = _ANNOTATION_LEVEL[s.severity]
        position = f"file={s.file},line={s.line}"
        if s.column is not None:
            position += f",col={s.column}"
        message = s.message + (f" ({s.suggestion})" if s.suggestion else "")
        lines.append(f"::{level} {position},title={s.type}::{_escape_annotation(message)}")
    return "\n".join(lines)


def _format_signals_by_author(signals: Sequence[DriftSignal]) -> List[str]:
    by_author: Dict[str, List[DriftSignal]] = {}
    for signal in signals:
        by_author.setdefault(signal.author or UNKNOWN_AUTHOR, []).append(signal)

    lines: List[str] = []
    # Most issues first; ties keep first-seen order
    for author, authored in sorted(by_author.items(), key=lambda kv: -len(kv[1])):
        lines.append(f"### {author} ({_plural(len(authored), 'issue')})")
        lines.append("")
        lines.append("| Severity | File | Line | Issue |")
        lines.append("|----------|------|------|-------|")
        ordered = sorted(authored, key=lambda s: SEVERITY_RANK[s.severity])
        for s in ordered[:MAX_ROWS_PER_AUTHOR]:
            suggestion = f" - {s.suggestion}" if s.suggestion else ""
            lines.append(
                f"| {_SEVERITY_ICON[s.severity]} | `{s.file}` | {s.line} | {s.message}{suggestion} |"
            )
        if len(ordered) > MAX_ROWS_PER_AUTHOR:
            lines.append(f"| | | | _...and {len(ordered) - MAX_ROWS_PER_AUTHOR} more_ |")
        lines.append("")
    return lines


def format_pr_comment(
    signals: Sequence[DriftSignal],
    baseline_count: int = 0,
    previous: Optional[Sequence[DriftSignal]] = None,
) -> str:
    """Markdown PR comment, prefixed with a marker so it can be found and updated.

    With ``previous`` (the signals of the last push), signals that no longer
    occur at the same file, line and value are listed as fixed.
    """
    lines = [COMMENT_MARKER, COMMENT_HEADER, ""]

    if not signals:
        lines += [":white_check_mark: **No new design drift detected** in this PR", ""]
    elif previous is not None:
        current = {(s.file, s.line, s.value) for s in signals}
        fixed = [p for p in previous if (p.file, p.line, p.value) not in current]
        summary = f"**{_plural(len(signals), 'issue')} remaining**"
        if fixed:
            summary += f" ({len(fixed)} fixed since last push)"
        lines += [summary, ""]
        if fixed:
            lines += ["### :white_check_mark: Fixed", ""]
            for s in fixed[:MAX_FIXED_SHOWN]:
                lines.append(f"- ~~`{s.file}:{s.line}`~~ {s.message}")
            if len(fixed) > MAX_FIXED_SHOWN:
                lines.append(f"- _...and {len(fixed) - MAX_FIXED_SHOWN} more_")
            lines.append("")
    else:
        lines += [f"**{_plural(len(signals), 'new issue')}** in this PR", ""]

    if signals:
        lines += _format_signals_by_author(signals)

    if baseline_count > 0:
        lines += [
            "---",
            "",
            "<details>",
            f"<summary>Baseline: {_plural(baseline_count, 'pre-existing issue')}</summary>",
            "",
            "These issues existed before this PR and are not shown above.",
            "",
            "Run `buoy baseline` to re-scan and update the baseline.",
            "",
            "</details>",
            "",
        ]

    lines += ["---", "*:robot: Buoy scans every PR for design drift.*"]
    return "\n".join(lines)


def is_drift_comment(body: str) -> bool:
    return COMMENT_MARKER in body or COMMENT_HEADER in body


class GithubFormatter(BaseFormatter):
    """Output GitHub Actions ``::error`` / ``::warning`` / ``::notice`` annotations.

    Also generates a Markdown comment body suitable for ``gh pr comment``.
    """

    def render(self, report: DriftReport) -> None:
        print(self.format(report))

    def format(self, report: DriftReport) -> str:
        annotations = format_annotations(report.signals)
        comment = format_pr_comment(report.signals, report.baselined, report.fixed)
        return f"{annotations}\n\n{comment}" if annotations else comment
