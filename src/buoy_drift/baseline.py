"""Baseline management: signal signatures, filtering and persistence.

A signal's signature is the only identity that survives between runs. It is
derived from ``(type, file, value, component_name)``; line numbers are left
out so a baselined signal stays baselined when code above it moves.
"""

import base64
import hashlib
import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Set

from .exceptions import BaselineError
from .logging_config import get_logger
from .models import DriftSignal

logger = get_logger(__name__)

BASELINE_VERSION = 1
SIGNATURE_LENGTH = 16


def signature_of(*parts: Optional[str]) -> str:
    """SHA-256 of the non-empty parts joined by ``|``, base64, first 16 chars."""
    joined = "|".join(p for p in parts if p)
    digest = hashlib.sha256(joined.encode("utf-8")).digest()
    return base64.b64encode(digest).decode("ascii")[:SIGNATURE_LENGTH]


def get_signal_signature(signal: DriftSignal) -> str:
    """Stable identity of a signal for baseline comparison."""
    return signature_of(signal.type, signal.file, signal.value, signal.component_name)


def filter_against_baseline(
    signals: Iterable[DriftSignal], baseline_signatures: Iterable[str]
) -> List[DriftSignal]:
    """Keep only the signals whose signature is not in the baseline."""
    known = set(baseline_signatures)
    return [s for s in signals if get_signal_signature(s) not in known]


def save_baseline(signals: Iterable[DriftSignal], path: str) -> int:
    """Write the signatures of ``signals`` as a JSON baseline file.

    Returns the number of distinct signatures written.
    """
    entries: Dict[str, dict] = {}
    for signal in signals:
        signature = get_signal_signature(signal)
        entries.setdefault(
            signature,
            {
                "signature": signature,
                "type": signal.type,
                "file": signal.file,
                "value": signal.value,
            },
        )

    signatures = sorted(entries)
    data = {
        "version": BASELINE_VERSION,
        "created_at": datetime.now(timezone.utc).isoformat(),
        "signatures": signatures,
        "entries": [entries[s] for s in signatures],
    }

    p = Path(path)
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        with open(p, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
    except OSError as e:
        raise BaselineError(p, f"Write failed: {e}")

    logger.info(f"Saved baseline with {len(signatures)} signatures to {path}")
    return len(signatures)


def load_baseline(path: str) -> Set[str]:
    """Load accepted signatures from a baseline file.

    Accepts both the object form written by ``save_baseline`` and a plain
    JSON list of signatures.

    Returns:
        Set of signatures. Empty if the file does not exist.

    Raises:
        BaselineError: If the file exists but is not a valid baseline
    """
    p = Path(path)
    if not p.exists():
        logger.info(f"No baseline file at {path}")
        return set()

    try:
        with open(p, encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise BaselineError(p, str(e))

    if isinstance(raw, dict):
        raw = raw.get("signatures")
    if not isinstance(raw, list) or not all(isinstance(s, str) for s in raw):
        raise BaselineError(p, "expected a list of signature strings")

    result = set(raw)
    logger.info(f"Loaded baseline with {len(result)} signatures from {path}")
    return result


def load_baseline_entries(path: str) -> List[dict]:
    """The per-signature detail records of a baseline file (empty for the list form)."""
    p = Path(path)
    if not p.exists():
        return []
    try:
        with open(p, encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise BaselineError(p, str(e))
    if isinstance(raw, dict) and isinstance(raw.get("entries"), list):
        return raw["entries"]
    return []


@dataclass
class BaselineDiff:
    """Signals of the current run classified against a previous run."""

    new: List[DriftSignal] = field(default_factory=list)
    unchanged: List[DriftSignal] = field(default_factory=list)
    fixed: List[str] = field(default_factory=list)


def diff_signals(current: Iterable[DriftSignal], previous: Iterable[str]) -> BaselineDiff:
    """Classify ``current`` signals against ``previous`` signatures.

    - ``new``       : signature not seen before
    - ``unchanged`` : signature present in both runs
    - ``fixed``     : previous signatures no longer produced (sorted)
    """
    previous_set = set(previous)
    diff = BaselineDiff()
    seen: Set[str] = set()

    for signal in current:
        signature = get_signal_signature(signal)
        seen.add(signature)
        if signature in previous_set:
            diff.unchanged.append(signal)
        else:
            diff.new.append(signal)

    diff.fixed = sorted(previous_set - seen)
    return diff
