"""Scan-related exceptions: file access, template types, baselines."""

from pathlib import Path
from typing import List

from .base import BuoyError


class ScanError(BuoyError):
    """Base class for scan-related errors."""
    pass


class FileAccessError(ScanError):
    """Raised when a source file cannot be read."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class UnsupportedTemplateError(ScanError):
    """Raised when a template type label is not known to the router."""

    def __init__(self, template_type: str, supported: List[str]):
        super().__init__(
            f"Unsupported template type: {template_type}",
            details={"template_type": template_type, "supported": ", ".join(supported)},
            hint="Map the file extension to a known type in the [templates] table of buoy-drift.toml",
        )
        self.template_type = template_type
        self.supported = supported


class BaselineError(ScanError):
    """Raised when a baseline file exists but cannot be used."""

    def __init__(self, path: Path, reason: str):
        super().__init__(
            f"Invalid baseline file: {path}",
            details={"path": str(path), "reason": reason},
            hint="Delete the file or run `buoy baseline` to write a fresh one",
        )
        self.path = path
        self.reason = reason
