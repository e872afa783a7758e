"""Offset-preserving masking and position helpers.

Extractors never delete text before matching. Regions that must not be
searched (HTML comments, ``<script>`` and ``<textarea>`` bodies) are
overwritten with a filler character of the same length, so a match index in
the masked text is also a valid index into the original text.
"""

from __future__ import annotations

import re
from typing import Iterable, Tuple

MASK_CHAR = "\0"
_NOT_NEWLINE = re.compile(r"[^\n]")

HTML_COMMENT = re.compile(r"<!--[\s\S]*?-->")
SCRIPT_BLOCK = re.compile(r"<script[^>]*>[\s\S]*?</script>", re.IGNORECASE)
TEXTAREA_BLOCK = re.compile(r"<textarea[^>]*>[\s\S]*?</textarea>", re.IGNORECASE)

# Comments first; a commented-out <script> must not open a script region
HTML_MASKS: Tuple["re.Pattern[str]", ...] = (HTML_COMMENT, SCRIPT_BLOCK, TEXTAREA_BLOCK)


def _fill(match: "re.Match[str]") -> str:
    return _NOT_NEWLINE.sub(MASK_CHAR, match.group(0))


def mask(content: str, patterns: Iterable["re.Pattern[str]"]) -> str:
    """Replace every match of each pattern (applied in order) with filler.

    Newlines inside a masked region are kept so line numbers of the masked
    text match the original.
    """
    for pattern in patterns:
        content = pattern.sub(_fill, content)
    return content


def mask_html(content: str) -> str:
    return mask(content, HTML_MASKS)


def is_masked(text: str) -> bool:
    return MASK_CHAR in text


def line_and_column(content: str, position: int) -> Tuple[int, int]:
    """1-based (line, column) of ``position`` in ``content``."""
    line = content.count("\n", 0, position) + 1
    last_newline = content.rfind("\n", 0, position)
    return line, position - last_newline


def line_at(content: str, position: int) -> int:
    return content.count("\n", 0, position) + 1
