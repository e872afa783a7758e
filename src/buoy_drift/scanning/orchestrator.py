"""Multi-file scanning over a bounded worker pool.

Usage:
    scanner = ProjectScanner(config)
    result = scanner.scan(Path("src"))
    # result.signals, result.errors, result.files_scanned

Each file is read, routed by template type and scanned independently. A file
that cannot be read or scanned becomes a ``FileError`` record and the run
continues. Signals are merged sorted by (file, line, column).
"""

from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ..config import DriftConfig
from ..exceptions import BuoyError
from ..logging_config import get_logger
from ..models import DriftSignal
from .files import discover_files, resolve_template_type
from .scanner import DriftScanner

logger = get_logger(__name__)

# Default worker count: use CPU count, capped at 8 to avoid overwhelming I/O
_DEFAULT_WORKERS = min(os.cpu_count() or 4, 8)

# Below this many files the pool costs more than it saves
_PARALLEL_THRESHOLD = 10


@dataclass(frozen=True)
class FileError:
    """A file that could not be scanned."""

    file: str
    error: str


@dataclass
class ScanResult:
    """Everything one project scan produced."""

    signals: list[DriftSignal] = field(default_factory=list)
    errors: list[FileError] = field(default_factory=list)
    files_scanned: int = 0

    @property
    def files_failed(self) -> int:
        return len(self.errors)


def _signal_sort_key(signal: DriftSignal) -> tuple:
    return (signal.file, signal.line, signal.column or 0)


class ProjectScanner:
    """Discovers and scans every template file under a root directory.

    Args:
        config: Discovery limits, template overrides and worker count.
        scanner: Per-file scanner (a default DriftScanner if None).
    """

    def __init__(
        self, config: Optional[DriftConfig] = None, scanner: Optional[DriftScanner] = None
    ) -> None:
        self.config = config or DriftConfig()
        self.scanner = scanner or DriftScanner()
        self._max_workers = self.config.workers or _DEFAULT_WORKERS

    def scan_path(self, path: Path, root: Path) -> list[DriftSignal]:
        """Scan one file; signal paths are relative to ``root`` in POSIX form.

        Raises:
            OSError: If the file cannot be read
        """
        template_type = resolve_template_type(path, self.config.template_overrides)
        if template_type is None:
            return []
        content = path.read_text(encoding="utf-8", errors="replace")
        rel_path = _relative_name(path, root)
        return self.scanner.scan_file(content, rel_path, template_type)

    def scan(self, root: Path) -> ScanResult:
        """Scan every discoverable file under ``root``.

        Raises:
            InvalidPathError: If ``root`` does not exist
        """
        root = Path(root)
        base = root if root.is_dir() else root.parent
        paths = list(discover_files(root, self.config))
        logger.debug(f"Discovered {len(paths)} files under {root}")

        result = ScanResult()

        def _scan_one(path: Path) -> list[DriftSignal]:
            return self.scan_path(path, base)

        def _record(path: Path, error: Exception) -> None:
            rel_path = _relative_name(path, base)
            logger.debug(f"Error scanning {rel_path}: {error}")
            result.errors.append(FileError(file=rel_path, error=str(error)))

        if len(paths) < _PARALLEL_THRESHOLD or self._max_workers == 1:
            for path in paths:
                try:
                    result.signals.extend(_scan_one(path))
                    result.files_scanned += 1
                except (OSError, BuoyError, ValueError) as e:
                    _record(path, e)
        else:
            with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
                futures = {executor.submit(_scan_one, path): path for path in paths}
                for future in as_completed(futures):
                    try:
                        result.signals.extend(future.result())
                        result.files_scanned += 1
                    except (OSError, BuoyError, ValueError) as e:
                        _record(futures[future], e)

        result.signals.sort(key=_signal_sort_key)
        result.errors.sort(key=lambda err: err.file)

        if result.errors:
            logger.warning(
                f"{len(result.errors)} of {len(paths)} files could not be scanned "
                "(run with --verbose for details)"
            )
        return result


def _relative_name(path: Path, root: Path) -> str:
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()
