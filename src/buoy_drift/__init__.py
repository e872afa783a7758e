"""
buoy-drift - design drift detection for component codebases

Finds hardcoded colors, arbitrary Tailwind values and inline styles across
React, Vue, Svelte, Angular and dozens of other template languages, then matches
each one against the project's design tokens to propose a replacement.
"""

__version__ = "0.3.0"

from .baseline import filter_against_baseline, get_signal_signature
from .config import DriftConfig, load_config
from .extractors import extract_styles
from .fixes import apply_fixes, generate_fixes, summarize_fixes
from .matching import score_confidence
from .models import DesignToken, DriftSignal, Fix, StyleFragment
from .scanning import DriftScanner, ProjectScanner, scan_content, scan_file
from .tokens import load_tokens, parse_token_file

__all__ = [
    "extract_styles",  # Per-template style extraction
    "scan_file",  # Single-file drift scan
    "ProjectScanner",  # Whole-project scan
    "DriftScanner",
    "scan_content",
    "generate_fixes",
    "apply_fixes",
    "summarize_fixes",
    "score_confidence",
    "get_signal_signature",
    "filter_against_baseline",
    "load_tokens",
    "parse_token_file",
    "load_config",
    "DriftConfig",
    "DesignToken",
    "DriftSignal",
    "Fix",
    "StyleFragment",
]
