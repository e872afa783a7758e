"""Fix suggestion generation and application."""

from .applier import ApplyResult, apply_fixes, generate_fix_diff
from .generator import (
    FixOptions,
    find_best_token_match,
    generate_fixes,
    simple_glob_match,
    summarize_fixes,
)

__all__ = [
    "ApplyResult",
    "apply_fixes",
    "generate_fix_diff",
    "FixOptions",
    "find_best_token_match",
    "generate_fixes",
    "simple_glob_match",
    "summarize_fixes",
]
