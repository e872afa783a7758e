"""JSON design token files: W3C DTCG, Tokens Studio and Style Dictionary.

Format detection looks at the whole document:

  dtcg              any ``$value`` key
  tokens-studio     any ``type`` key together with any ``value`` key
  style-dictionary  otherwise (tokens are objects with ``value``)

Alias references such as ``"{color.brand.primary}"`` are resolved against the
other tokens of the same file before values are typed.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from ..exceptions import TokenParseError, TokenValidationError
from ..logging_config import get_logger
from ..models import (
    ColorValue,
    DesignToken,
    RawValue,
    SpacingValue,
    TokenMetadata,
    TokenSource,
    TokenValue,
    create_token_id,
)
from ..primitives.color import normalize_color
from ..primitives.spacing import parse_dimension

logger = get_logger(__name__)

TOKEN_FORMATS = ("dtcg", "tokens-studio", "style-dictionary")

_TYPE_TO_CATEGORY = {
    "color": "color",
    "dimension": "spacing",
    "spacing": "spacing",
    "sizing": "sizing",
    "fontFamily": "typography",
    "fontFamilies": "typography",
    "fontWeight": "typography",
    "fontWeights": "typography",
    "fontSize": "typography",
    "fontSizes": "typography",
    "lineHeight": "typography",
    "lineHeights": "typography",
    "typography": "typography",
    "shadow": "shadow",
    "boxShadow": "shadow",
    "border": "border",
    "borderRadius": "spacing",
    "borderWidth": "border",
    "duration": "motion",
    "cubicBezier": "motion",
    "number": "other",
    "string": "other",
}

# First path segment -> token type, for Style Dictionary files
_PATH_TYPES = {
    "color": "color",
    "colors": "color",
    "spacing": "dimension",
    "space": "dimension",
    "size": "dimension",
    "fontsize": "typography",
    "font": "typography",
    "typography": "typography",
    "radius": "dimension",
    "shadow": "shadow",
    "border": "border",
}

_ALIAS = re.compile(r"^\{([^{}]+)\}$")
_DIMENSION = re.compile(r"^-?[\d.]+(px|rem|em)?$")
_MAX_ALIAS_DEPTH = 10


@dataclass
class _RawToken:
    name: str
    value: Any
    type: Optional[str]
    description: Optional[str] = None
    deprecated: bool = False
    aliases: List[str] = field(default_factory=list)


def _has_key(obj: Any, key: str) -> bool:
    if isinstance(obj, dict):
        return key in obj or any(_has_key(v, key) for v in obj.values())
    if isinstance(obj, list):
        return any(_has_key(v, key) for v in obj)
    return False


def detect_format(data: dict) -> str:
    if _has_key(data, "$value"):
        return "dtcg"
    if _has_key(data, "type") and _has_key(data, "value"):
        return "tokens-studio"
    return "style-dictionary"


def _walk_dtcg(obj: dict, path: List[str], inherited: Optional[str]) -> List[_RawToken]:
    tokens: List[_RawToken] = []
    for key, value in obj.items():
        if key.startswith("$") or not isinstance(value, dict):
            continue
        current = path + [key]
        if "$value" in value:
            tokens.append(
                _RawToken(
                    name=".".join(current),
                    value=value["$value"],
                    type=value.get("$type") or inherited,
                    description=value.get("$description"),
                    deprecated=bool(value.get("$deprecated", False)),
                )
            )
        else:
            tokens.extend(_walk_dtcg(value, current, value.get("$type") or inherited))
    return tokens


def _walk_plain(obj: dict, path: List[str], typed: bool) -> List[_RawToken]:
    """Tokens Studio (``typed``) and Style Dictionary trees."""
    tokens: List[_RawToken] = []
    for key, value in obj.items():
        if not isinstance(value, dict):
            continue
        current = path + [key]
        if "value" in value:
            if typed and "type" in value:
                token_type = value.get("type")
            elif typed:
                token_type = None
            else:
                token_type = _PATH_TYPES.get(current[0].lower())
            tokens.append(
                _RawToken(
                    name=".".join(current),
                    value=value["value"],
                    type=token_type,
                    description=value.get("description") or value.get("comment"),
                    deprecated=bool(value.get("deprecated", False)),
                )
            )
        else:
            tokens.extend(_walk_plain(value, current, typed))
    return tokens


def _resolve_aliases(raw_tokens: List[_RawToken]) -> None:
    """Replace ``{path.to.token}`` values with the referenced value, in place."""
    by_name = {t.name: t for t in raw_tokens}

    for token in raw_tokens:
        value = token.value
        seen = [token.name]
        for _ in range(_MAX_ALIAS_DEPTH):
            if not isinstance(value, str):
                break
            match = _ALIAS.match(value.strip())
            if not match:
                break
            target_name = match.group(1).strip()
            target = by_name.get(target_name)
            if target is None or target_name in seen:
                raise TokenValidationError(token.name, f"unresolvable alias {value!r}")
            seen.append(target_name)
            token.aliases.append(target_name)
            if token.type is None:
                token.type = target.type
            value = target.value
        else:
            raise TokenValidationError(token.name, f"alias chain deeper than {_MAX_ALIAS_DEPTH}")
        token.value = value


def map_type_to_category(token_type: Optional[str], name: str, raw_value: Any) -> str:
    """Token category from its declared type, else from its value or name."""
    if token_type:
        return _TYPE_TO_CATEGORY.get(token_type, "other")

    if isinstance(raw_value, str) and raw_value.strip().startswith("#"):
        return "color"
    lower = name.lower()
    if "color" in lower:
        return "color"
    if "spacing" in lower or "space" in lower:
        return "spacing"
    if "font" in lower or "size" in lower:
        return "typography"
    return "other"


def parse_token_value(name: str, raw_value: Any, category: str) -> TokenValue:
    """Type a raw JSON value for ``category``.

    Raises:
        TokenValidationError: If a color token's value is not a color
    """
    if category == "color":
        hex_value = normalize_color(raw_value) if isinstance(raw_value, str) else None
        if hex_value is None:
            raise TokenValidationError(name, f"color token has non-color value {raw_value!r}")
        return ColorValue(hex=hex_value)

    if category in ("spacing", "sizing"):
        value, unit = parse_dimension(raw_value)
        return SpacingValue(value=value, unit=unit)

    # Font sizes and other plain lengths stay matchable as spacing
    if category in ("typography", "other") and (
        isinstance(raw_value, str) and _DIMENSION.match(raw_value.strip())
    ):
        value, unit = parse_dimension(raw_value)
        return SpacingValue(value=value, unit=unit)

    if isinstance(raw_value, (dict, list)):
        return RawValue(value=json.dumps(raw_value, separators=(",", ":")))
    return RawValue(value=str(raw_value))


def _to_design_token(raw: _RawToken, source_path: str) -> DesignToken:
    category = map_type_to_category(raw.type, raw.name, raw.value)
    source = TokenSource(type="json", path=source_path, key=raw.name)
    return DesignToken(
        id=create_token_id(source, raw.name),
        name=raw.name,
        category=category,
        value=parse_token_value(raw.name, raw.value, category),
        source=source,
        aliases=tuple(raw.aliases),
        metadata=TokenMetadata(deprecated=raw.deprecated, description=raw.description),
    )


def parse_token_file(content: str, source_path: str = "imported") -> List[DesignToken]:
    """Parse a JSON token document into DesignTokens, in document order.

    Raises:
        TokenParseError: If ``content`` is not a JSON object
        TokenValidationError: If a token is malformed (bad alias, non-color color)
    """
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise TokenParseError(source_path, f"invalid JSON: {e}")
    if not isinstance(data, dict):
        raise TokenParseError(source_path, "top level must be an object")
    if not data:
        return []

    token_format = detect_format(data)
    if token_format == "dtcg":
        raw_tokens = _walk_dtcg(data, [], data.get("$type"))
    else:
        raw_tokens = _walk_plain(data, [], typed=token_format == "tokens-studio")

    _resolve_aliases(raw_tokens)
    tokens = [_to_design_token(raw, source_path) for raw in raw_tokens]
    logger.debug(f"{source_path}: {len(tokens)} tokens ({token_format})")
    return tokens


def token_format_of(content: str) -> Tuple[str, int]:
    """``(format, token count)`` for a JSON token document; used for reporting."""
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise TokenParseError("<content>", f"invalid JSON: {e}")
    if not isinstance(data, dict):
        raise TokenParseError("<content>", "top level must be an object")
    token_format = detect_format(data)
    if token_format == "dtcg":
        return token_format, len(_walk_dtcg(data, [], data.get("$type")))
    return token_format, len(_walk_plain(data, [], typed=token_format == "tokens-studio"))
