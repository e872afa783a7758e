"""Tokens declared in stylesheets: CSS custom properties and SCSS variables."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from ..exceptions import TokenParseError
from ..extractors.masking import line_and_column
from ..logging_config import get_logger
from ..models import ColorValue, DesignToken, RawValue, SpacingValue, TokenSource, create_token_id
from ..primitives.color import normalize_color
from ..primitives.spacing import parse_dimension
from .parser import parse_token_file

logger = get_logger(__name__)

_COMMENT = re.compile(r"/\*.*?\*/", re.DOTALL)
_CSS_PROPERTY = re.compile(r"(--[A-Za-z0-9_-]+)\s*:\s*([^;{}]+?)\s*(?:;|(?=}))")
_SCSS_VARIABLE = re.compile(r"^\s*\$([A-Za-z0-9_-]+)\s*:\s*([^;]+?)\s*(?:!default\s*)?;", re.MULTILINE)
_SELECTOR = re.compile(r"([^{};]+)\{")
_VAR_REF = re.compile(r"^var\(\s*(--[A-Za-z0-9_-]+)\s*(?:,\s*(.+))?\)$")
_SCSS_REF = re.compile(r"^\$([A-Za-z0-9_-]+)$")
_LENGTH = re.compile(r"^-?\d*\.?\d+(px|rem|em)$")
_COLOR_LITERAL = re.compile(r"^(?:#[0-9a-fA-F]{3,8}|(?:rgba?|hsla?)\([^()]*\)|[a-zA-Z]+)$")
_MAX_ALIAS_DEPTH = 10


def _blank_comments(content: str) -> str:
    """Blank out comments, keeping offsets and line breaks."""
    return _COMMENT.sub(lambda m: re.sub(r"[^\n]", " ", m.group(0)), content)


def _selector_at(content: str, offset: int) -> Optional[str]:
    """The innermost selector whose block is open at ``offset``."""
    stack: List[str] = []
    last = 0
    for match in re.finditer(r"[{}]", content[:offset]):
        if match.group(0) == "{":
            head = _SELECTOR.search(content[last:match.end()])
            stack.append(head.group(1).strip() if head else "")
        elif stack:
            stack.pop()
        last = match.end()
    return stack[-1] if stack else None


def _resolve(name: str, values: Dict[str, str], reference: "re.Pattern[str]") -> tuple:
    """Follow ``var(--x)`` / ``$x`` references; returns ``(value, aliases)``."""
    value = values[name]
    aliases: List[str] = []
    for _ in range(_MAX_ALIAS_DEPTH):
        match = reference.match(value)
        if not match:
            break
        target = match.group(1)
        if target not in values or target in aliases or target == name:
            fallback = match.group(2) if match.lastindex and match.lastindex >= 2 else None
            if fallback:
                value = fallback.strip()
            break
        aliases.append(target)
        value = values[target]
    return value, aliases


def infer_token(name: str, value: str, source: TokenSource, aliases: Iterable[str] = ()) -> DesignToken:
    """Category from the value: colors, lengths, otherwise ``other``/raw."""
    hex_value = normalize_color(value) if _COLOR_LITERAL.match(value) else None
    if hex_value is not None:
        category, token_value = "color", ColorValue(hex=hex_value)
    elif _LENGTH.match(value):
        number, unit = parse_dimension(value)
        category, token_value = "spacing", SpacingValue(value=number, unit=unit)
    else:
        category, token_value = "other", RawValue(value=value)

    return DesignToken(
        id=create_token_id(source, name),
        name=name,
        category=category,
        value=token_value,
        source=source,
        aliases=tuple(aliases),
    )


def parse_css_tokens(content: str, source_path: str = "imported") -> List[DesignToken]:
    """Design tokens from ``--name: value;`` declarations.

    Later declarations of the same property override earlier ones (the
    cascade for ``:root``); the first declaration fixes the token's position.
    Token names drop the leading ``--``.
    """
    text = _blank_comments(content)
    values: Dict[str, str] = {}
    origins: Dict[str, tuple] = {}
    for match in _CSS_PROPERTY.finditer(text):
        prop = match.group(1)
        values[prop] = match.group(2).strip()
        if prop not in origins:
            line, _ = line_and_column(text, match.start())
            origins[prop] = (line, _selector_at(text, match.start()))

    tokens = []
    for prop, (line, selector) in origins.items():
        value, aliases = _resolve(prop, values, _VAR_REF)
        name = prop[2:]
        source = TokenSource(
            type="css", path=source_path, selector=selector, variable_name=prop, line=line
        )
        tokens.append(infer_token(name, value, source, [a[2:] for a in aliases]))

    logger.debug(f"{source_path}: {len(tokens)} CSS custom properties")
    return tokens


def parse_scss_tokens(content: str, source_path: str = "imported") -> List[DesignToken]:
    """Design tokens from top-level-style ``$name: value;`` SCSS variables."""
    text = _blank_comments(content)
    values: Dict[str, str] = {}
    lines: Dict[str, int] = {}
    for match in _SCSS_VARIABLE.finditer(text):
        name = match.group(1)
        values[name] = match.group(2).strip()
        if name not in lines:
            lines[name], _ = line_and_column(text, match.start(1))

    tokens = []
    for name, line in lines.items():
        value, aliases = _resolve(name, values, _SCSS_REF)
        source = TokenSource(type="scss", path=source_path, variable_name=f"${name}", line=line)
        tokens.append(infer_token(name, value, source, aliases))

    logger.debug(f"{source_path}: {len(tokens)} SCSS variables")
    return tokens


_LOADERS = {
    ".json": parse_token_file,
    ".css": parse_css_tokens,
    ".scss": parse_scss_tokens,
}


def load_tokens(paths: Iterable[str]) -> List[DesignToken]:
    """Load and concatenate tokens from each file, in the given order.

    Raises:
        TokenParseError: If a file is unreadable or has an unsupported suffix
    """
    tokens: List[DesignToken] = []
    for path in paths:
        p = Path(path)
        loader = _LOADERS.get(p.suffix.lower())
        if loader is None:
            raise TokenParseError(
                str(path), f"unsupported token file type {p.suffix!r} (expected .json, .css or .scss)"
            )
        try:
            content = p.read_text(encoding="utf-8")
        except OSError as e:
            raise TokenParseError(str(path), f"cannot read file: {e}")
        tokens.extend(loader(content, str(path)))

    logger.info(f"Loaded {len(tokens)} design tokens")
    return tokens
