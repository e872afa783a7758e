"""Pure color, spacing and string primitives."""

from .color import (
    CSS_COLOR_KEYWORDS,
    HEX_COLOR_PATTERN,
    HSL_COLOR_PATTERN,
    RGB_COLOR_PATTERN,
    color_distance,
    color_similarity,
    contains_color,
    contrast_ratio,
    hex_to_rgb,
    is_hardcoded_color,
    normalize_color,
    relative_luminance,
)
from .spacing import convert_to_px, format_px, parse_dimension, parse_spacing_to_px
from .strings import (
    levenshtein_distance,
    normalize_for_comparison,
    string_similarity,
    to_kebab_case,
    token_to_css_var,
)

__all__ = [
    "CSS_COLOR_KEYWORDS",
    "HEX_COLOR_PATTERN",
    "HSL_COLOR_PATTERN",
    "RGB_COLOR_PATTERN",
    "color_distance",
    "color_similarity",
    "contains_color",
    "contrast_ratio",
    "hex_to_rgb",
    "is_hardcoded_color",
    "normalize_color",
    "relative_luminance",
    "convert_to_px",
    "format_px",
    "parse_dimension",
    "parse_spacing_to_px",
    "levenshtein_distance",
    "normalize_for_comparison",
    "string_similarity",
    "to_kebab_case",
    "token_to_css_var",
]
