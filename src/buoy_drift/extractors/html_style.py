"""Style extraction for HTML-like templates.

Covers plain HTML and the server-side dialects that share its attribute
syntax: Blade, ERB, Twig, PHP, Razor, Handlebars, Mustache, EJS, Pug,
Liquid, Jinja/Django, Nunjucks, Thymeleaf, Freemarker, Go templates, Hugo,
Jekyll, Eleventy, Markdown and SVG.
"""

from __future__ import annotations

import re
from typing import List

from ..models import StyleFragment
from .masking import is_masked, line_and_column, line_at, mask_html

# The lookbehind rejects data-style, ng-style, v-bind:style and :style
_DOUBLE_QUOTED = re.compile(r'(?<![:\w-])style\s*=\s*"((?:[^"\\]|\\.)*)"', re.IGNORECASE)
_SINGLE_QUOTED = re.compile(r"(?<![:\w-])style\s*=\s*'((?:[^'\\]|\\.)*)'", re.IGNORECASE)
_STYLE_BLOCK = re.compile(r"<style[^>]*>([\s\S]*?)</style>", re.IGNORECASE)
_CDATA = re.compile(r"^\s*<!\[CDATA\[([\s\S]*?)\]\]>\s*$")


def _strip_cdata(css: str) -> str:
    match = _CDATA.match(css)
    if match:
        return match.group(1).strip()
    return css


def extract_html_style_attributes(content: str) -> List[StyleFragment]:
    """Find ``style="..."`` and ``style='...'`` attributes.

    Values may span lines and contain escaped quotes. Empty values and values
    overlapping a masked region are skipped.
    """
    masked = mask_html(content)
    fragments: List[StyleFragment] = []

    for pattern in (_DOUBLE_QUOTED, _SINGLE_QUOTED):
        for match in pattern.finditer(masked):
            css = match.group(1)
            if not css or not css.strip() or is_masked(css):
                continue
            line, column = line_and_column(content, match.start())
            fragments.append(StyleFragment(css=css, line=line, column=column, context="inline"))

    return fragments


def extract_style_blocks(content: str) -> List[StyleFragment]:
    """Find ``<style>`` element bodies; the fragment sits at column 1 of the tag's line."""
    masked = mask_html(content)
    fragments: List[StyleFragment] = []

    for match in _STYLE_BLOCK.finditer(masked):
        css = match.group(1)
        if not css or not css.strip() or is_masked(css):
            continue
        css = _strip_cdata(css.strip())
        if not css:
            continue
        fragments.append(
            StyleFragment(css=css, line=line_at(content, match.start()), column=1, context="style-block")
        )

    return fragments


def extract_all_html_styles(content: str) -> List[StyleFragment]:
    """Inline attributes first, then ``<style>`` blocks."""
    return extract_html_style_attributes(content) + extract_style_blocks(content)
