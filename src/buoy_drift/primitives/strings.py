"""String helpers for comparing component and token names."""

from __future__ import annotations

import re

_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")


def levenshtein_distance(a: str, b: str) -> int:
    """Classic edit distance (insert, delete, substitute all cost 1)."""
    if len(a) < len(b):
        a, b = b, a
    previous = list(range(len(b) + 1))
    for i, ch_a in enumerate(a, 1):
        current = [i]
        for j, ch_b in enumerate(b, 1):
            cost = 0 if ch_a == ch_b else 1
            current.append(min(previous[j] + 1, current[j - 1] + 1, previous[j - 1] + cost))
        previous = current
    return previous[-1]


def string_similarity(a: str, b: str) -> float:
    """Similarity in [0, 1] derived from the Levenshtein distance."""
    max_len = max(len(a), len(b))
    if max_len == 0:
        return 1.0
    return 1.0 - levenshtein_distance(a, b) / max_len


def normalize_for_comparison(name: str) -> str:
    """Strip common prefixes/suffixes and separators: ``BaseButtonView`` -> ``button``."""
    name = re.sub(r"^(I|Abstract|Base)", "", name, flags=re.IGNORECASE)
    name = re.sub(r"(Component|View|Container|Wrapper)$", "", name, flags=re.IGNORECASE)
    return re.sub(r"[-_]", "", name.lower())


def to_kebab_case(name: str) -> str:
    """``colors.primaryBlue`` -> ``colors-primary-blue``."""
    name = name.replace(".", "-").replace("_", "-").replace(" ", "-")
    name = _CAMEL_BOUNDARY.sub(r"\1-\2", name)
    return re.sub(r"-{2,}", "-", name).strip("-").lower()


def token_to_css_var(token_name: str) -> str:
    """Render a token name as a ``var(--...)`` reference.

    Names that already are custom properties are used verbatim.
    """
    if token_name.startswith("--"):
        return f"var({token_name})"
    return f"var(--{to_kebab_case(token_name)})"
