"""Drift scanning: detectors, per-file scanner and project orchestration."""

from .blame import GitBlame, enrich_with_authors, parse_line_porcelain
from .detectors import (
    Detection,
    detect_hardcoded_colors,
    detect_inline_styles,
    detect_tailwind_arbitrary,
)
from .files import discover_files, resolve_template_type, should_skip_file
from .orchestrator import FileError, ProjectScanner, ScanResult
from .scanner import DriftScanner, scan_content, scan_file, scan_fragments

__all__ = [
    "GitBlame",
    "enrich_with_authors",
    "parse_line_porcelain",
    "Detection",
    "detect_hardcoded_colors",
    "detect_inline_styles",
    "detect_tailwind_arbitrary",
    "discover_files",
    "resolve_template_type",
    "should_skip_file",
    "FileError",
    "ProjectScanner",
    "ScanResult",
    "DriftScanner",
    "scan_content",
    "scan_file",
    "scan_fragments",
]
