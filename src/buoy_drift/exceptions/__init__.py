"""Exception hierarchy for buoy-drift."""

from .base import BuoyError
from .config import ConfigurationError, InvalidConfigError, InvalidPathError
from .scan import BaselineError, FileAccessError, ScanError, UnsupportedTemplateError
from .tokens import TokenError, TokenParseError, TokenValidationError

__all__ = [
    "BuoyError",
    "ScanError",
    "FileAccessError",
    "UnsupportedTemplateError",
    "BaselineError",
    "TokenError",
    "TokenValidationError",
    "TokenParseError",
    "ConfigurationError",
    "InvalidPathError",
    "InvalidConfigError",
]
