"""Apply fixes to source files.

Fixes are grouped by file and applied bottom-up (descending line, then
column) so an edit never shifts the position of a fix still to be applied.
"""

from __future__ import annotations

import difflib
import shutil
from collections import defaultdict
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from ..logging_config import get_logger
from ..models import Fix, FixResult, meets_confidence_threshold

logger = get_logger(__name__)


@dataclass
class ApplyResult:
    """Per-fix outcomes plus tallies."""

    results: List[FixResult] = field(default_factory=list)
    applied: int = 0
    skipped: int = 0
    failed: int = 0

    def add(self, result: FixResult) -> None:
        self.results.append(result)
        if result.status == "applied":
            self.applied += 1
        elif result.status == "skipped":
            self.skipped += 1
        else:
            self.failed += 1


def _replace_in_line(line: str, fix: Fix) -> Optional[str]:
    """Replace ``fix.original`` at its column, else its first occurrence on the line."""
    index = line.find(fix.original, max(fix.column - 1, 0))
    if index == -1:
        index = line.find(fix.original)
    if index == -1:
        return None
    return line[:index] + fix.replacement + line[index + len(fix.original):]


def _apply_to_file(
    path: Path,
    fixes: List[Fix],
    dry_run: bool,
    backup: bool,
    min_confidence: str,
) -> List[FixResult]:
    if not path.is_file():
        return [FixResult(fix.id, "failed", f"File not found: {path}") for fix in fixes]

    results: List[FixResult] = []
    try:
        content = path.read_text(encoding="utf-8")
        lines = content.split("\n")
        ordered = sorted(fixes, key=lambda f: (f.line, f.column), reverse=True)
        applied_any = False

        for fix in ordered:
            if not meets_confidence_threshold(fix.confidence, min_confidence):
                results.append(
                    FixResult(
                        fix.id,
                        "skipped",
                        f"Confidence {fix.confidence} below threshold {min_confidence}",
                    )
                )
                continue

            line_index = fix.line - 1
            if line_index < 0 or line_index >= len(lines):
                results.append(
                    FixResult(
                        fix.id,
                        "failed",
                        f"Line {fix.line} out of range (file has {len(lines)} lines)",
                    )
                )
                continue

            new_line = _replace_in_line(lines[line_index], fix)
            if new_line is None:
                results.append(
                    FixResult(
                        fix.id,
                        "failed",
                        f'Original value "{fix.original}" not found on line {fix.line}',
                    )
                )
                continue

            lines[line_index] = new_line
            applied_any = True
            results.append(FixResult(fix.id, "applied"))

        if not dry_run and applied_any:
            if backup:
                shutil.copyfile(path, path.with_name(path.name + ".bak"))
            path.write_text("\n".join(lines), encoding="utf-8")
            logger.debug(f"Wrote {path}")
    except OSError as e:
        done = {r.fix_id for r in results}
        results.extend(FixResult(fix.id, "failed", str(e)) for fix in fixes if fix.id not in done)
        logger.warning(f"Failed to apply fixes to {path}: {e}")

    return results


def apply_fixes(
    fixes: Iterable[Fix],
    dry_run: bool = False,
    backup: bool = False,
    min_confidence: str = "high",
    root: Optional[Path] = None,
) -> ApplyResult:
    """Apply ``fixes`` to disk.

    Args:
        fixes: Fixes to apply; their ``file`` is resolved against ``root``
        dry_run: Compute outcomes without writing anything
        backup: Copy each modified file to ``<file>.bak`` first
        min_confidence: Fixes below this tier are skipped
        root: Base directory for relative fix paths (default: cwd)
    """
    root = Path(root) if root is not None else Path.cwd()
    by_file: Dict[str, List[Fix]] = defaultdict(list)
    for fix in fixes:
        by_file[fix.file].append(fix)

    outcome = ApplyResult()
    for file, file_fixes in by_file.items():
        for result in _apply_to_file(root / file, file_fixes, dry_run, backup, min_confidence):
            outcome.add(result)

    logger.info(
        f"Fixes applied: {outcome.applied}, skipped: {outcome.skipped}, failed: {outcome.failed}"
        + (" (dry run)" if dry_run else "")
    )
    return outcome


def generate_fix_diff(fix: Fix, content: Optional[str] = None, context_lines: int = 3) -> str:
    """Unified diff preview of one fix.

    With the file ``content`` the diff shows surrounding lines; without it,
    just the replaced value.
    """
    if content is None:
        return "\n".join(
            [
                f"--- {fix.file}",
                f"+++ {fix.file}",
                f"@@ -{fix.line},1 +{fix.line},1 @@",
                f"-{fix.original}",
                f"+{fix.replacement}",
            ]
        )

    before = content.split("\n")
    line_index = fix.line - 1
    if line_index < 0 or line_index >= len(before):
        return generate_fix_diff(fix, None, context_lines)

    after = list(before)
    after[line_index] = _replace_in_line(before[line_index], fix) or before[line_index]
    diff = difflib.unified_diff(
        before, after, fromfile=fix.file, tofile=fix.file, n=context_lines, lineterm=""
    )
    return "\n".join(diff)
