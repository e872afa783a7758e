"""Style extraction for directive bindings (Angular and Vue).

Angular: ``[style.color]="'red'"``, ``[style.width.px]="120"`` and
``[ngStyle]="{ 'color': 'red' }"``.
Vue: ``:style="{ color: 'red' }"``, ``v-bind:style="..."`` and template
literal bindings ``:style="`color: ${c}`"``.

Plain ``style="..."`` attributes are left to the HTML-like extractor.
"""

from __future__ import annotations

import re
from typing import List, Optional

from ..models import StyleFragment
from ..primitives import CSS_COLOR_KEYWORDS
from .braces import split_key_value, split_top_level, unquote
from .masking import line_and_column, mask_html

# Units accepted by Angular's [style.prop.unit] binding syntax
CSS_UNITS = frozenset(
    {
        "px", "em", "rem", "vh", "vw", "vmin", "vmax", "%", "pt", "pc", "in",
        "cm", "mm", "ex", "ch", "fr", "deg", "rad", "grad", "turn", "s", "ms",
    }
)

_ANGULAR_BINDING = re.compile(r'\[style\.([a-zA-Z-]+)(?:\.([a-zA-Z%]+))?\]\s*=\s*"([^"]*)"')
_NG_STYLE = re.compile(r'\[ngStyle\]\s*=\s*"([^"]*)"', re.IGNORECASE)
_VUE_BINDING = re.compile(r'(?::|v-bind:)style\s*=\s*"([^"]*)"')
_NUMBER = re.compile(r"^-?\d+\.?\d*$")
_IDENTIFIER = re.compile(r"^[a-zA-Z_$][a-zA-Z0-9_$]*$")
_PROPERTY = re.compile(r"^[a-zA-Z-]+$")


def parse_style_object(object_content: str) -> str:
    """Turn ``{ 'color': 'red', padding: '16px' }`` (without braces) into CSS.

    Only string-literal values are kept. A literal that reads as a single
    identifier (``'primary'``) is taken for a variable name and skipped
    unless it is a CSS color keyword.
    """
    declarations: List[str] = []
    for entry in split_top_level(object_content):
        pair = split_key_value(entry)
        if pair is None:
            continue
        key = unquote(pair[0])
        if key is None:
            key = pair[0]
        if not _PROPERTY.match(key):
            continue
        value = unquote(pair[1])
        if value is None or not value.strip():
            continue
        value = value.strip()
        if _IDENTIFIER.match(value) and value.lower() not in CSS_COLOR_KEYWORDS:
            continue
        declarations.append(f"{key}: {value}")
    return "; ".join(declarations)


def _object_body(expression: str) -> Optional[str]:
    expression = expression.strip()
    if expression.startswith("{") and expression.endswith("}"):
        return expression[1:-1]
    return None


def extract_angular_style_bindings(content: str) -> List[StyleFragment]:
    """``[style.prop]`` and ``[style.prop.unit]`` bindings, one fragment each."""
    masked = mask_html(content)
    fragments: List[StyleFragment] = []

    for match in _ANGULAR_BINDING.finditer(masked):
        prop, unit, value = match.group(1), match.group(2), match.group(3).strip()
        if len(value) >= 2 and value.startswith("'") and value.endswith("'"):
            value = value[1:-1]
        if unit and unit in CSS_UNITS:
            if _NUMBER.match(value):
                value = f"{value}{unit}"
            else:
                value = f"{value} {unit}"
        line, column = line_and_column(content, match.start())
        fragments.append(
            StyleFragment(css=f"{prop}: {value}", line=line, column=column, context="inline")
        )

    return fragments


def extract_ng_style_bindings(content: str) -> List[StyleFragment]:
    """``[ngStyle]="{...}"`` object bindings."""
    masked = mask_html(content)
    fragments: List[StyleFragment] = []

    for match in _NG_STYLE.finditer(masked):
        body = _object_body(match.group(1))
        if body is None:
            continue
        css = parse_style_object(body)
        if css:
            line, column = line_and_column(content, match.start())
            fragments.append(StyleFragment(css=css, line=line, column=column, context="inline"))

    return fragments


def extract_vue_style_bindings(content: str) -> List[StyleFragment]:
    """``:style`` / ``v-bind:style`` object and template-literal bindings."""
    masked = mask_html(content)
    fragments: List[StyleFragment] = []

    for match in _VUE_BINDING.finditer(masked):
        expression = match.group(1).strip()
        css = ""
        body = _object_body(expression)
        if body is not None:
            css = parse_style_object(body)
        elif len(expression) >= 2 and expression[0] == expression[-1] == "`":
            # Raw CSS, ${} placeholders kept as-is
            css = expression[1:-1].strip()
        if css:
            line, column = line_and_column(content, match.start())
            fragments.append(StyleFragment(css=css, line=line, column=column, context="inline"))

    return fragments


def extract_directive_styles(content: str) -> List[StyleFragment]:
    """All directive forms: Angular bindings, ngStyle, then Vue bindings."""
    return (
        extract_angular_style_bindings(content)
        + extract_ng_style_bindings(content)
        + extract_vue_style_bindings(content)
    )
