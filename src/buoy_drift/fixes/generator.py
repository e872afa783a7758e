"""Fix generation: match each fixable drift signal to its best design token.

Usage:
    fixes = generate_fixes(signals, tokens, FixOptions(min_confidence="high"))
    summary = summarize_fixes(fixes)
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ..baseline import get_signal_signature
from ..logging_config import get_logger
from ..matching.confidence import score_confidence
from ..models import (
    CONFIDENCE_LEVELS,
    CONFIDENCE_RANK,
    SUPPORTED_FIX_TYPES,
    ConfidenceResult,
    DesignToken,
    DriftSignal,
    Fix,
    create_fix_id,
    meets_confidence_threshold,
)
from ..primitives.color import HEX_COLOR_PATTERN
from ..primitives.strings import token_to_css_var

logger = get_logger(__name__)

# Candidates scoring below this produce no fix at all
MIN_MATCH_SCORE = 40

# Token categories that can stand in for each fix type
_CANDIDATE_CATEGORIES: Dict[str, Tuple[str, ...]] = {
    "hardcoded-color": ("color",),
    "hardcoded-spacing": ("spacing",),
    "hardcoded-radius": ("spacing",),
    "hardcoded-font-size": ("typography", "sizing"),
}

_HEX_IN_TEXT = HEX_COLOR_PATTERN
_RGB_IN_TEXT = re.compile(r"rgba?\s*\([^)]+\)", re.IGNORECASE)
_PX_IN_TEXT = re.compile(r"\b\d+(?:\.\d+)?px\b")


@dataclass(frozen=True)
class FixOptions:
    """Filters applied while generating fixes.

    Attributes:
        types: Fix types to generate (empty = all supported types)
        min_confidence: Drop fixes below this tier
        include_files: Only files matching one of these globs (empty = all)
        exclude_files: Skip files matching any of these globs
    """

    types: Sequence[str] = field(default_factory=tuple)
    min_confidence: str = "low"
    include_files: Sequence[str] = field(default_factory=tuple)
    exclude_files: Sequence[str] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.min_confidence not in CONFIDENCE_RANK:
            raise ValueError(f"min_confidence must be one of {', '.join(CONFIDENCE_LEVELS)}")


def simple_glob_match(file: str, pattern: str) -> bool:
    """Glob match where ``*`` stays within a path segment and ``**`` crosses them.

    A pattern also matches when it lines up with a trailing or leading run of
    whole path segments (``*.tsx`` matches ``src/App.tsx``).
    """
    out = []
    i = 0
    while i < len(pattern):
        if pattern.startswith("**", i):
            out.append(".*")
            i += 2
        elif pattern[i] == "*":
            out.append("[^/]*")
            i += 1
        else:
            out.append(re.escape(pattern[i]))
            i += 1
    body = "".join(out)
    return re.search(f"^{body}$|/{body}$|^{body}/", file) is not None


def matches_file_patterns(file: str, include: Sequence[str], exclude: Sequence[str]) -> bool:
    if include and not any(simple_glob_match(file, p) for p in include):
        return False
    return not any(simple_glob_match(file, p) for p in exclude)


def get_hardcoded_value(signal: DriftSignal) -> Optional[str]:
    """The raw value a fix would replace.

    The signal's own ``value`` is used when it is a bare color or length;
    otherwise the first hex, rgb() or px literal in the message.
    """
    value = signal.value.strip()
    for pattern in (_HEX_IN_TEXT, _RGB_IN_TEXT, _PX_IN_TEXT):
        match = pattern.fullmatch(value)
        if match:
            return match.group(0)
    if re.fullmatch(r"-?\d+(?:\.\d+)?(?:rem|em)?", value):
        return value

    for pattern in (_HEX_IN_TEXT, _RGB_IN_TEXT, _PX_IN_TEXT):
        match = pattern.search(signal.message)
        if match:
            return match.group(0)
    return None


def candidate_tokens(tokens: Iterable[DesignToken], fix_type: str) -> List[DesignToken]:
    categories = _CANDIDATE_CATEGORIES.get(fix_type, ())
    return [t for t in tokens if t.category in categories]


def find_best_token_match(
    value: str, fix_type: str, tokens: Iterable[DesignToken]
) -> Optional[Tuple[DesignToken, ConfidenceResult]]:
    """Highest-scoring candidate; ties keep the earlier token. None below 40."""
    best: Optional[Tuple[DesignToken, ConfidenceResult]] = None
    for token in candidate_tokens(tokens, fix_type):
        confidence = score_confidence(value, token, fix_type)
        if best is None or confidence.score > best[1].score:
            best = (token, confidence)

    if best is not None and best[1].score >= MIN_MATCH_SCORE:
        return best
    return None


def generate_fix_for_signal(signal: DriftSignal, tokens: Sequence[DesignToken]) -> Optional[Fix]:
    value = get_hardcoded_value(signal)
    if value is None:
        return None

    match = find_best_token_match(value, signal.type, tokens)
    if match is None:
        return None
    token, confidence = match

    column = signal.column or 1
    return Fix(
        id=create_fix_id(signal.file, signal.line, column),
        signal_id=get_signal_signature(signal),
        confidence=confidence.level,
        confidence_score=confidence.score,
        file=signal.file,
        line=signal.line,
        column=column,
        original=value,
        replacement=token_to_css_var(token.name),
        reason=confidence.reason,
        fix_type=signal.type,
        token_name=token.name,
    )


def generate_fixes(
    signals: Iterable[DriftSignal],
    tokens: Sequence[DesignToken],
    options: Optional[FixOptions] = None,
) -> List[Fix]:
    """Generate fixes for every fixable signal, best confidence first.

    Filters, in order: fix type allow-list, file include/exclude globs,
    minimum confidence. Fixes with equal confidence keep signal order.
    """
    options = options or FixOptions()
    allowed_types = tuple(options.types) or SUPPORTED_FIX_TYPES
    tokens = list(tokens)

    fixes: List[Fix] = []
    for signal in signals:
        if signal.type not in SUPPORTED_FIX_TYPES or signal.type not in allowed_types:
            continue
        if not matches_file_patterns(signal.file, options.include_files, options.exclude_files):
            continue

        fix = generate_fix_for_signal(signal, tokens)
        if fix is None:
            continue
        if not meets_confidence_threshold(fix.confidence, options.min_confidence):
            continue
        fixes.append(fix)

    fixes.sort(key=lambda f: -CONFIDENCE_RANK[f.confidence])
    logger.debug(f"Generated {len(fixes)} fixes from {len(tokens)} tokens")
    return fixes


def summarize_fixes(fixes: Iterable[Fix]) -> dict:
    """Counts by confidence tier and fix type.

    ``high_confidence_count`` counts fixes safe to apply unattended
    (exact + high).
    """
    by_confidence = {level: 0 for level in CONFIDENCE_LEVELS}
    by_type: Dict[str, int] = {}
    total = 0

    for fix in fixes:
        total += 1
        by_confidence[fix.confidence] += 1
        by_type[fix.fix_type] = by_type.get(fix.fix_type, 0) + 1

    return {
        "total": total,
        "by_confidence": by_confidence,
        "by_type": by_type,
        "high_confidence_count": by_confidence["exact"] + by_confidence["high"],
    }
