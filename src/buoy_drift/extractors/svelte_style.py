"""Style extraction for Svelte ``style:`` directives.

``style:color="red"``, ``style:color={'#fff'}`` and
``style:--accent|important={isDark ? '#000' : '#fff'}`` produce fragments.
Directives whose value is only a variable reference (``style:color``,
``style:color={color}``, ``style:color="{theme.fg}"``) carry no literal CSS
and are skipped.
"""

from __future__ import annotations

import re
from typing import List, Optional

from ..models import StyleFragment
from .braces import balanced_body, unquote
from .masking import is_masked, line_and_column, mask_html

_DIRECTIVE = re.compile(r"(?<![\w-])style:(--[\w-]+|[a-zA-Z-]+)((?:\|[a-z]+)*)\s*=\s*")
_REFERENCE = re.compile(r"^[A-Za-z_$][\w$]*(?:\??\.[A-Za-z_$][\w$]*|\[[^\]]*\])*$")
_BRACED_REFERENCE = re.compile(r"^\{\s*([^{}]*?)\s*\}$")


def _is_reference(expression: str) -> bool:
    return bool(_REFERENCE.match(expression.strip()))


def _directive_value(masked: str, start: int) -> Optional[str]:
    """Read the value starting at ``start`` (just after ``=``)."""
    if start >= len(masked):
        return None
    opener = masked[start]

    if opener == "{":
        body = balanced_body(masked, start)
        if body is None:
            return None
        expression = body[0].strip()
        if not expression or _is_reference(expression):
            return None
        literal = unquote(expression)
        return literal if literal is not None else expression

    if opener in ("'", '"'):
        end = masked.find(opener, start + 1)
        if end == -1:
            return None
        value = masked[start + 1 : end].strip()
        braced = _BRACED_REFERENCE.match(value)
        if not value or (braced and _is_reference(braced.group(1))):
            return None
        return value

    return None


def extract_svelte_style_directives(content: str) -> List[StyleFragment]:
    """Find ``style:prop`` directives that carry literal CSS values."""
    masked = mask_html(content)
    fragments: List[StyleFragment] = []

    for match in _DIRECTIVE.finditer(masked):
        value = _directive_value(masked, match.end())
        if value is None or is_masked(value):
            continue
        prop = match.group(1)
        css = f"{prop}: {value}"
        if "important" in match.group(2):
            css += " !important"
        line, column = line_and_column(content, match.start())
        fragments.append(StyleFragment(css=css, line=line, column=column, context="inline"))

    return fragments
