"""File discovery and template-type resolution."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path
from typing import Mapping, Optional

from ..config import DriftConfig
from ..exceptions import FileAccessError, InvalidPathError
from ..extractors.router import TEMPLATES
from ..logging_config import get_logger

logger = get_logger(__name__)

_EXTENSION_TO_TEMPLATE: dict[str, str] = {}
for _name, _cfg in TEMPLATES.items():
    for _ext in _cfg.extensions:
        _EXTENSION_TO_TEMPLATE.setdefault(_ext, _name)
# Longest suffix first, so ".blade.php" wins over ".php"
_EXTENSIONS_BY_LENGTH = sorted(_EXTENSION_TO_TEMPLATE, key=len, reverse=True)


def resolve_template_type(
    path: Path | str, overrides: Optional[Mapping[str, str]] = None
) -> Optional[str]:
    """Template type for ``path`` from its (possibly compound) suffix.

    ``overrides`` maps extensions to template types and is consulted first.
    Returns None for files no extractor understands.
    """
    name = Path(path).name.lower()

    if overrides:
        for ext in sorted(overrides, key=len, reverse=True):
            if name.endswith(ext.lower()):
                template_type = overrides[ext]
                if template_type not in TEMPLATES:
                    raise InvalidPathError(
                        Path(path), f"override maps {ext} to unknown template type {template_type!r}"
                    )
                return template_type

    for ext in _EXTENSIONS_BY_LENGTH:
        if name.endswith(ext):
            return _EXTENSION_TO_TEMPLATE[ext]
    return None


def should_skip_file(filepath: Path, exclude_patterns: list[str]) -> bool:
    """True if ``filepath`` (relative to the scan root) matches an exclusion glob.

    A pattern like ``node_modules/*`` also excludes anything below a nested
    ``node_modules`` directory.
    """
    for pattern in exclude_patterns:
        if filepath.match(pattern):
            return True
        if pattern.endswith("/*") and pattern[:-2] in filepath.parts[:-1]:
            return True
    return False


def _matches_include(filepath: Path, include_patterns: list[str]) -> bool:
    if not include_patterns:
        return True
    return any(filepath.match(pattern) for pattern in include_patterns)


def _walk(root: Path, exclude_patterns: list[str]) -> Iterator[Path]:
    """Files below root in sorted order, without descending into excluded directories."""

    def on_error(error: OSError) -> None:
        raise FileAccessError(root, f"Directory scan failed: {error}")

    for dirpath, dirnames, filenames in os.walk(root, onerror=on_error):
        rel_dir = Path(dirpath).relative_to(root)
        # A placeholder child lets "dir/*" patterns match the directory itself
        dirnames[:] = sorted(
            d for d in dirnames if not should_skip_file(rel_dir / d / "_", exclude_patterns)
        )
        for filename in sorted(filenames):
            path = Path(dirpath) / filename
            if not path.is_symlink():
                yield path


def discover_files(root: Path, config: Optional[DriftConfig] = None) -> Iterator[Path]:
    """Yield scannable files under ``root`` in sorted order.

    A file is scannable when it resolves to a template type, matches the
    include globs, does not match the exclude globs and is within the size
    limit. Stops after ``config.max_files`` files.

    Raises:
        InvalidPathError: If ``root`` does not exist
        FileAccessError: If the directory walk fails
    """
    config = config or DriftConfig()
    root = Path(root)
    if not root.exists():
        raise InvalidPathError(root, "Path does not exist")

    if root.is_file():
        if resolve_template_type(root, config.template_overrides) is not None:
            yield root
        return

    count = 0
    for path in _walk(root, config.exclude_patterns):
        relative = path.relative_to(root)
        if should_skip_file(relative, config.exclude_patterns):
            continue
        if not _matches_include(relative, config.include_patterns):
            continue
        if resolve_template_type(path, config.template_overrides) is None:
            continue
        try:
            if path.stat().st_size > config.max_file_size_bytes:
                logger.debug(f"Skipping {relative}: larger than {config.max_file_size_mb} MB")
                continue
        except OSError as e:
            logger.debug(f"Cannot stat {relative}: {e}")
            continue

        yield path
        count += 1
        if count >= config.max_files:
            logger.warning(f"Stopped after {config.max_files} files (max_files)")
            return
