"""Style extraction: template text in, located CSS fragments out.

Extractors are pure and total. Malformed markup yields fewer (or no)
fragments, never an exception.
"""

from .class_patterns import (
    ClassPatternMatch,
    PatternTokenHint,
    analyze_pattern_for_tokens,
    extract_class_patterns,
)
from .directive_style import (
    extract_angular_style_bindings,
    extract_directive_styles,
    extract_ng_style_bindings,
    extract_vue_style_bindings,
    parse_style_object,
)
from .html_style import extract_all_html_styles, extract_html_style_attributes, extract_style_blocks
from .jsx_style import extract_jsx_style_objects, style_object_to_css
from .masking import line_and_column, mask_html
from .router import (
    TEMPLATE_TYPES,
    TEMPLATES,
    TemplateConfig,
    extract_css_file_styles,
    extract_styles,
    get_syntax_family,
    get_template_config,
)
from .svelte_style import extract_svelte_style_directives

__all__ = [
    "ClassPatternMatch",
    "PatternTokenHint",
    "analyze_pattern_for_tokens",
    "extract_class_patterns",
    "extract_angular_style_bindings",
    "extract_directive_styles",
    "extract_ng_style_bindings",
    "extract_vue_style_bindings",
    "parse_style_object",
    "extract_all_html_styles",
    "extract_html_style_attributes",
    "extract_style_blocks",
    "extract_jsx_style_objects",
    "style_object_to_css",
    "line_and_column",
    "mask_html",
    "TEMPLATE_TYPES",
    "TEMPLATES",
    "TemplateConfig",
    "extract_css_file_styles",
    "extract_styles",
    "get_syntax_family",
    "get_template_config",
    "extract_svelte_style_directives",
]
