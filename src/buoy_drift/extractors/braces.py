"""Brace balancing and object-literal splitting for JS-ish expressions.

These helpers are deliberately forgiving: unbalanced input returns None or
an empty list instead of raising.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

_OPEN = {"{": "}", "(": ")", "[": "]"}
_QUOTES = ("'", '"', "`")


def _skip_string(text: str, start: int) -> int:
    """Return the index just past the string literal opening at ``start``."""
    quote = text[start]
    i = start + 1
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == "\\":
            i += 2
            continue
        if quote == "`" and ch == "$" and i + 1 < n and text[i + 1] == "{":
            end = find_matching_brace(text, i + 1)
            if end is None:
                return n
            i = end + 1
            continue
        if ch == quote:
            return i + 1
        i += 1
    return n


def find_matching_brace(text: str, open_index: int) -> Optional[int]:
    """Index of the bracket closing the one at ``open_index``.

    String literals (including template literals with ``${}``) are skipped
    so quoted braces do not count. Returns None if the bracket never closes.
    """
    if open_index >= len(text) or text[open_index] not in _OPEN:
        return None
    stack = [_OPEN[text[open_index]]]
    i = open_index + 1
    n = len(text)
    while i < n:
        ch = text[i]
        if ch in _QUOTES:
            i = _skip_string(text, i)
            continue
        if ch in _OPEN:
            stack.append(_OPEN[ch])
        elif ch in (")", "]", "}"):
            if ch != stack[-1]:
                return None
            stack.pop()
            if not stack:
                return i
        i += 1
    return None


def balanced_body(text: str, open_index: int) -> Optional[Tuple[str, int]]:
    """Return ``(inner_text, close_index)`` for the bracket at ``open_index``."""
    close = find_matching_brace(text, open_index)
    if close is None:
        return None
    return text[open_index + 1 : close], close


def split_top_level(text: str, separator: str = ",") -> List[str]:
    """Split on ``separator`` where it is not nested in brackets or strings."""
    parts: List[str] = []
    depth = 0
    current_start = 0
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if ch in _QUOTES:
            i = _skip_string(text, i)
            continue
        if ch in _OPEN:
            depth += 1
        elif ch in (")", "]", "}"):
            depth = max(0, depth - 1)
        elif ch == separator and depth == 0:
            parts.append(text[current_start:i])
            current_start = i + 1
        i += 1
    parts.append(text[current_start:])
    return [p.strip() for p in parts if p.strip()]


def split_key_value(entry: str) -> Optional[Tuple[str, str]]:
    """Split ``key: value`` at the first top-level colon."""
    depth = 0
    i = 0
    n = len(entry)
    while i < n:
        ch = entry[i]
        if ch in _QUOTES:
            if depth == 0 and i == 0:
                # Quoted key
                end = _skip_string(entry, i)
                rest = entry[end:].lstrip()
                if rest.startswith(":"):
                    return entry[:end].strip(), rest[1:].strip()
                return None
            i = _skip_string(entry, i)
            continue
        if ch in _OPEN:
            depth += 1
        elif ch in (")", "]", "}"):
            depth = max(0, depth - 1)
        elif ch == ":" and depth == 0:
            return entry[:i].strip(), entry[i + 1 :].strip()
        i += 1
    return None


def unquote(text: str) -> Optional[str]:
    """Return the content of a plain string literal, or None if not one.

    Template literals with interpolations are not plain strings.
    """
    text = text.strip()
    if len(text) >= 2 and text[0] in _QUOTES and text[-1] == text[0]:
        inner = text[1:-1]
        if text[0] == "`" and "${" in inner:
            return None
        if _skip_string(text, 0) != len(text):
            return None
        return inner
    return None
