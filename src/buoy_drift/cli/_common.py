"""Shared CLI helpers."""

from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from rich.console import Console
from rich.markup import escape

from ..config import DriftConfig, load_config
from ..exceptions import InvalidPathError
from ..models import DesignToken
from ..scanning import GitBlame, ProjectScanner, ScanResult, enrich_with_authors
from ..tokens import load_tokens

console = Console()
err_console = Console(stderr=True)


def resolve_config(config: Optional[Path] = None, **overrides) -> DriftConfig:
    """Build the config from files, environment and CLI options."""
    return load_config(config_file=config, **overrides)


def project_base(path: Path) -> Path:
    """The directory signal paths are relative to."""
    return path if path.is_dir() else path.parent


def baseline_path(path: Path, config: DriftConfig) -> Path:
    """Baseline file location; relative names live in the scanned directory."""
    candidate = Path(config.baseline_file)
    if candidate.is_absolute():
        return candidate
    return project_base(path) / candidate


def run_scan(path: Path, config: DriftConfig, blame: bool = False) -> ScanResult:
    """Scan ``path`` and optionally attribute signals to their git authors.

    Raises:
        InvalidPathError: If ``path`` does not exist
    """
    if not path.exists():
        raise InvalidPathError(path, "Path does not exist")
    result = ProjectScanner(config).scan(path)
    if blame:
        result.signals = enrich_with_authors(result.signals, GitBlame(str(project_base(path))))
    return result


def resolve_tokens(config: DriftConfig, extra: Iterable[Path] = ()) -> List[DesignToken]:
    """Tokens from the configured token files plus any given on the command line."""
    paths = list(config.token_files) + [str(p) for p in extra]
    if not paths:
        return []
    return load_tokens(paths)


def error_dicts(result: ScanResult) -> List[dict]:
    return [{"file": e.file, "error": e.error} for e in result.errors]


def split_baselined(signals, signatures) -> Tuple[list, int]:
    """``(new signals, number hidden by the baseline)``."""
    from ..baseline import filter_against_baseline

    remaining = filter_against_baseline(signals, signatures)
    return remaining, len(signals) - len(remaining)


def report_error(error: Exception) -> None:
    """Print an error and, for BuoyErrors that carry one, its remedy."""
    console.print(f"[red]Error:[/red] {escape(str(error))}", highlight=False)
    hint = getattr(error, "hint", None)
    if hint:
        console.print(f"[dim]{escape(hint)}[/dim]", highlight=False)
