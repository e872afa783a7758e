"""Style extraction for JSX (React, Preact, Solid, Qwik, Astro, MDX).

``style={{ color: '#fff', padding: 8 }}`` objects are located with
brace balancing and rewritten as CSS declarations
(``color: #fff; padding: 8``) so the same value recognizers apply to every
template family.
"""

from __future__ import annotations

import re
from typing import List, Optional

from ..models import StyleFragment
from .braces import balanced_body, split_key_value, split_top_level, unquote
from .masking import line_and_column, mask

_STYLE_PROP = re.compile(r"(?<![\w:.-])style\s*=\s*\{")
_LINE_COMMENT = re.compile(r"(?<![:'\"\w])//[^\n]*")
_BLOCK_COMMENT = re.compile(r"/\*[\s\S]*?\*/")
_JSX_COMMENT = re.compile(r"\{/\*[\s\S]*?\*/\}")
_CAMEL = re.compile(r"([a-z0-9])([A-Z])")
_IDENTIFIER_KEY = re.compile(r"^[A-Za-z_$][\w$]*$")


def _css_property(key: str) -> Optional[str]:
    unquoted = unquote(key)
    if unquoted is not None:
        key = unquoted
    elif not _IDENTIFIER_KEY.match(key):
        # Computed keys such as [prop] cannot be resolved statically
        return None
    if key.startswith("--"):
        return key
    prop = _CAMEL.sub(r"\1-\2", key).lower()
    # WebkitTransition -> -webkit-transition
    if prop.startswith(("webkit-", "moz-", "ms-")):
        prop = "-" + prop
    return prop


def _css_value(expression: str) -> str:
    literal = unquote(expression)
    if literal is not None:
        return literal.strip()
    return expression.strip()


def style_object_to_css(body: str) -> str:
    """Convert the inside of a JS object literal into ``prop: value`` declarations.

    Spreads, shorthand properties and computed keys are skipped. Non-literal
    values keep their expression text, so colors inside ternaries are still
    visible to the scanner.
    """
    declarations: List[str] = []
    for entry in split_top_level(body):
        if entry.startswith("..."):
            continue
        pair = split_key_value(entry)
        if pair is None:
            continue
        prop = _css_property(pair[0])
        value = _css_value(pair[1])
        if prop and value:
            declarations.append(f"{prop}: {value}")
    return "; ".join(declarations)


def extract_jsx_style_objects(content: str) -> List[StyleFragment]:
    """Find ``style={{...}}`` object literals in JSX content."""
    masked = mask(content, (_JSX_COMMENT, _BLOCK_COMMENT, _LINE_COMMENT))
    fragments: List[StyleFragment] = []

    for match in _STYLE_PROP.finditer(masked):
        outer_open = match.end() - 1
        outer = balanced_body(masked, outer_open)
        if outer is None:
            continue
        expression = outer[0].strip()
        if not expression.startswith("{"):
            # style={styles.card} or style={computeStyle()}
            continue
        inner_open = masked.index("{", outer_open + 1)
        inner = balanced_body(masked, inner_open)
        if inner is None:
            continue
        css = style_object_to_css(inner[0])
        if not css:
            continue
        line, column = line_and_column(content, match.start())
        fragments.append(StyleFragment(css=css, line=line, column=column, context="inline"))

    return fragments
