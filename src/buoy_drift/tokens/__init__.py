"""Design token sources: JSON token files, CSS custom properties, SCSS variables."""

from .css import infer_token, load_tokens, parse_css_tokens, parse_scss_tokens
from .parser import (
    TOKEN_FORMATS,
    detect_format,
    map_type_to_category,
    parse_token_file,
    parse_token_value,
    token_format_of,
)
from .suggestions import TokenSuggestion, TokenSuggestionService

__all__ = [
    "TOKEN_FORMATS",
    "detect_format",
    "map_type_to_category",
    "parse_token_file",
    "parse_token_value",
    "token_format_of",
    "infer_token",
    "load_tokens",
    "parse_css_tokens",
    "parse_scss_tokens",
    "TokenSuggestion",
    "TokenSuggestionService",
]
