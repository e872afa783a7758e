"""Design token models.

A token's value is a tagged union: each value class carries a ``type``
discriminant (``color``, ``spacing``, ``typography``, ``shadow``, ``border``
or ``raw``). A token is only valid when its value's tag is allowed for the
token's category; a color token always carries a color value. Invalid
shapes raise ``TokenValidationError`` rather than being coerced.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, Literal, Mapping, Optional, Tuple, Union

from ..exceptions import TokenValidationError

TokenCategory = Literal[
    "color", "spacing", "typography", "shadow", "border", "sizing", "motion", "other"
]
SpacingUnit = Literal["px", "rem", "em"]
BorderStyle = Literal["solid", "dashed", "dotted", "none"]

TOKEN_CATEGORIES = (
    "color", "spacing", "typography", "shadow", "border", "sizing", "motion", "other",
)
TOKEN_SOURCES = ("css", "json", "scss", "figma", "typescript")
SPACING_UNITS = ("px", "rem", "em")
BORDER_STYLES = ("solid", "dashed", "dotted", "none")

# Value tags each category may carry. Typography and sizing tokens can hold a
# plain dimension (font-size, width) so they are matchable as spacing values.
CATEGORY_VALUE_TYPES: Dict[str, Tuple[str, ...]] = {
    "color": ("color",),
    "spacing": ("spacing",),
    "typography": ("typography", "spacing", "raw"),
    "shadow": ("shadow", "raw"),
    "border": ("border", "raw"),
    "sizing": ("spacing", "raw"),
    "motion": ("raw",),
    "other": ("raw", "spacing"),
}

_HEX_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


@dataclass(frozen=True)
class RGBA:
    r: float
    g: float
    b: float
    a: float = 1.0


@dataclass(frozen=True)
class ColorValue:
    hex: str
    rgba: Optional[RGBA] = None
    type: str = field(default="color", init=False)


@dataclass(frozen=True)
class SpacingValue:
    value: float
    unit: SpacingUnit = "px"
    type: str = field(default="spacing", init=False)


@dataclass(frozen=True)
class TypographyValue:
    font_family: str
    font_size: float
    font_weight: float
    line_height: Optional[float] = None
    letter_spacing: Optional[float] = None
    type: str = field(default="typography", init=False)


@dataclass(frozen=True)
class ShadowValue:
    x: float
    y: float
    blur: float
    spread: float
    color: str
    type: str = field(default="shadow", init=False)


@dataclass(frozen=True)
class BorderValue:
    width: float
    style: BorderStyle
    color: str
    radius: Optional[float] = None
    type: str = field(default="border", init=False)


@dataclass(frozen=True)
class RawValue:
    value: str
    type: str = field(default="raw", init=False)


TokenValue = Union[ColorValue, SpacingValue, TypographyValue, ShadowValue, BorderValue, RawValue]


@dataclass(frozen=True)
class TokenSource:
    """Where a token was defined."""

    type: str
    path: str
    key: Optional[str] = None
    selector: Optional[str] = None
    variable_name: Optional[str] = None
    line: Optional[int] = None


@dataclass(frozen=True)
class TokenMetadata:
    deprecated: bool = False
    deprecation_reason: Optional[str] = None
    description: Optional[str] = None
    tags: Tuple[str, ...] = ()


@dataclass(frozen=True)
class DesignToken:
    """A name/value pair from the project's design-token source of truth."""

    id: str
    name: str
    category: TokenCategory
    value: TokenValue
    source: TokenSource
    aliases: Tuple[str, ...] = ()
    used_by: Tuple[str, ...] = ()
    metadata: TokenMetadata = field(default_factory=TokenMetadata)

    def __post_init__(self) -> None:
        if self.category not in CATEGORY_VALUE_TYPES:
            raise TokenValidationError(
                self.name,
                f"unknown category {self.category!r}, expected one of {', '.join(TOKEN_CATEGORIES)}",
            )
        if self.source.type not in TOKEN_SOURCES:
            raise TokenValidationError(self.name, f"unknown source type {self.source.type!r}")
        allowed = CATEGORY_VALUE_TYPES[self.category]
        value_type = getattr(self.value, "type", None)
        if value_type not in allowed:
            raise TokenValidationError(
                self.name,
                f"category {self.category!r} cannot carry a {value_type!r} value "
                f"(allowed: {', '.join(allowed)})",
            )
        _validate_value(self.name, self.value)


def _validate_value(name: str, value: TokenValue) -> None:
    if isinstance(value, ColorValue):
        if not _HEX_RE.match(value.hex):
            raise TokenValidationError(name, f"color value {value.hex!r} is not a hex color")
    elif isinstance(value, SpacingValue):
        if value.unit not in SPACING_UNITS:
            raise TokenValidationError(name, f"spacing unit {value.unit!r} must be px, rem or em")
    elif isinstance(value, BorderValue):
        if value.style not in BORDER_STYLES:
            raise TokenValidationError(name, f"border style {value.style!r} is not supported")


# ---------------------------------------------------------------------------
# Construction from plain mappings (JSON, TOML, API payloads)
# ---------------------------------------------------------------------------

_VALUE_FIELDS: Dict[str, Tuple[type, Dict[str, Tuple[str, ...]]]] = {
    "color": (ColorValue, {"required": ("hex",), "optional": ("rgba",)}),
    "spacing": (SpacingValue, {"required": ("value", "unit"), "optional": ()}),
    "typography": (
        TypographyValue,
        {
            "required": ("font_family", "font_size", "font_weight"),
            "optional": ("line_height", "letter_spacing"),
        },
    ),
    "shadow": (ShadowValue, {"required": ("x", "y", "blur", "spread", "color"), "optional": ()}),
    "border": (BorderValue, {"required": ("width", "style", "color"), "optional": ("radius",)}),
    "raw": (RawValue, {"required": ("value",), "optional": ()}),
}

_STRING_FIELDS = {"hex", "unit", "font_family", "color", "style"}


def _snake(key: str) -> str:
    return re.sub(r"(?<=[a-z0-9])([A-Z])", r"_\1", key).lower()


def token_value_from_dict(name: str, data: Mapping[str, Any]) -> TokenValue:
    """Build a tagged token value from a mapping.

    Accepts camelCase or snake_case keys. Raises TokenValidationError when
    the ``type`` tag is missing or unknown, a required field is absent, or a
    field has the wrong primitive type.
    """
    if not isinstance(data, Mapping):
        raise TokenValidationError(name, f"value must be an object, got {type(data).__name__}")
    tag = data.get("type")
    if tag not in _VALUE_FIELDS:
        raise TokenValidationError(
            name, f"value type {tag!r} must be one of {', '.join(_VALUE_FIELDS)}"
        )
    cls, fields = _VALUE_FIELDS[tag]
    normalized = {_snake(k): v for k, v in data.items() if k != "type"}

    kwargs: Dict[str, Any] = {}
    for key in fields["required"]:
        if key not in normalized:
            raise TokenValidationError(name, f"{tag} value is missing {key!r}")
        kwargs[key] = normalized[key]
    for key in fields["optional"]:
        if normalized.get(key) is not None:
            kwargs[key] = normalized[key]

    for key, val in kwargs.items():
        if key == "rgba":
            if not isinstance(val, Mapping):
                raise TokenValidationError(name, "rgba must be an object with r, g, b, a")
            try:
                kwargs[key] = RGBA(
                    r=float(val["r"]), g=float(val["g"]), b=float(val["b"]), a=float(val.get("a", 1.0))
                )
            except (KeyError, TypeError, ValueError) as e:
                raise TokenValidationError(name, f"invalid rgba: {e}") from e
        elif key in _STRING_FIELDS or (tag == "raw" and key == "value"):
            if not isinstance(val, str):
                raise TokenValidationError(name, f"{key!r} must be a string")
        elif isinstance(val, bool) or not isinstance(val, (int, float)):
            raise TokenValidationError(name, f"{key!r} must be a number")

    return cls(**kwargs)


def design_token_from_dict(data: Mapping[str, Any]) -> DesignToken:
    """Validate and build a DesignToken from a plain mapping."""
    name = str(data.get("name") or data.get("id") or "<unnamed>")
    for key in ("name", "category", "value", "source"):
        if key not in data:
            raise TokenValidationError(name, f"missing required field {key!r}")

    raw_source = data["source"]
    if not isinstance(raw_source, Mapping) or "type" not in raw_source:
        raise TokenValidationError(name, "source must be an object with a 'type'")
    source_kwargs = {_snake(k): v for k, v in raw_source.items()}
    source = TokenSource(
        type=source_kwargs.get("type", ""),
        path=str(source_kwargs.get("path") or source_kwargs.get("file_key") or ""),
        key=source_kwargs.get("key"),
        selector=source_kwargs.get("selector"),
        variable_name=source_kwargs.get("variable_name"),
        line=source_kwargs.get("line"),
    )

    raw_meta = data.get("metadata") or {}
    meta_kwargs = {_snake(k): v for k, v in raw_meta.items()}
    metadata = TokenMetadata(
        deprecated=bool(meta_kwargs.get("deprecated", False)),
        deprecation_reason=meta_kwargs.get("deprecation_reason"),
        description=meta_kwargs.get("description"),
        tags=tuple(meta_kwargs.get("tags") or ()),
    )

    value = token_value_from_dict(name, data["value"])
    return DesignToken(
        id=str(data.get("id") or create_token_id(source, name)),
        name=name,
        category=data["category"],
        value=value,
        source=source,
        aliases=tuple(data.get("aliases") or ()),
        used_by=tuple(data.get("used_by") or data.get("usedBy") or ()),
        metadata=metadata,
    )


def create_token_id(source: TokenSource, name: str) -> str:
    """Stable token id derived from where the token was defined."""
    if source.type == "scss" and source.variable_name:
        return f"scss:{source.path}:{source.variable_name}"
    if source.type == "figma":
        return f"figma:{source.path}:{source.key or name}"
    if source.type == "typescript" and source.key:
        return f"typescript:{source.path}:{source.key}:{name}"
    return f"{source.type}:{source.path}:{name}"


def normalize_token_name(name: str) -> str:
    """Lowercase and drop separators so ``color-primary`` matches ``colorPrimary``."""
    return re.sub(r"[-_\s.]", "", name.lower())


def tokens_match(a: TokenValue, b: TokenValue) -> bool:
    """Return True when two token values describe the same design decision."""
    if a.type != b.type:
        return False
    if isinstance(a, ColorValue):
        return a.hex.lower() == b.hex.lower()
    if isinstance(a, SpacingValue):
        return a.value == b.value and a.unit == b.unit
    if isinstance(a, TypographyValue):
        return (
            a.font_family == b.font_family
            and a.font_size == b.font_size
            and a.font_weight == b.font_weight
        )
    if isinstance(a, ShadowValue):
        return (
            a.x == b.x
            and a.y == b.y
            and a.blur == b.blur
            and a.spread == b.spread
            and a.color.lower() == b.color.lower()
        )
    if isinstance(a, BorderValue):
        return a.width == b.width and a.style == b.style and a.color.lower() == b.color.lower()
    return a.value == b.value
