"""Attribute drift signals to the authors of the offending lines."""

import subprocess
from pathlib import Path
from typing import Callable, Dict, List, Optional

from ..logging_config import get_logger
from ..models import DriftSignal

logger = get_logger(__name__)

UNKNOWN_AUTHOR = "Unknown"

AuthorLookup = Callable[[str, int], Optional[str]]


class GitBlame:
    """Line author lookup backed by ``git blame --line-porcelain``.

    Blame output is fetched once per file and cached. Files outside a git
    repository (or without git installed) have no authors.
    """

    def __init__(self, repo_path: str, timeout: int = 30):
        self.repo_path = str(Path(repo_path).resolve())
        self.timeout = timeout
        self._cache: Dict[str, Dict[int, str]] = {}

    def __call__(self, file: str, line: int) -> Optional[str]:
        if file not in self._cache:
            self._cache[file] = self._blame_file(file)
        return self._cache[file].get(line)

    def _blame_file(self, file: str) -> Dict[int, str]:
        try:
            result = subprocess.run(
                ["git", "-C", self.repo_path, "blame", "--line-porcelain", "--", file],
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except (FileNotFoundError, subprocess.TimeoutExpired) as e:
            logger.debug(f"git blame unavailable for {file}: {e}")
            return {}

        if result.returncode != 0:
            logger.debug(f"git blame failed for {file}: {result.stderr.strip()}")
            return {}
        return parse_line_porcelain(result.stdout)


def parse_line_porcelain(output: str) -> Dict[int, str]:
    """Map final line numbers to author names from ``--line-porcelain`` output."""
    authors: Dict[int, str] = {}
    current_line: Optional[int] = None

    for raw in output.splitlines():
        if raw.startswith("\t"):
            current_line = None
            continue
        parts = raw.split(" ")
        # Header: <40-hex sha> <orig line> <final line> [<group size>]
        if len(parts) >= 3 and len(parts[0]) == 40 and parts[2].isdigit():
            current_line = int(parts[2])
        elif raw.startswith("author ") and current_line is not None:
            authors[current_line] = raw[len("author "):]

    return authors


def enrich_with_authors(signals: List[DriftSignal], lookup: AuthorLookup) -> List[DriftSignal]:
    """Return copies of ``signals`` with ``author`` set from ``lookup``.

    Lines without a known author are attributed to ``"Unknown"``. A failing
    lookup for one file does not stop the rest.
    """
    if not signals:
        return signals

    failed_files = set()
    enriched: List[DriftSignal] = []
    for signal in signals:
        author = None
        if signal.file not in failed_files:
            try:
                author = lookup(signal.file, signal.line)
            except Exception as e:
                logger.warning(f"Failed to get blame for {signal.file}: {e}")
                failed_files.add(signal.file)
        enriched.append(signal.with_author(author or UNKNOWN_AUTHOR))
    return enriched
