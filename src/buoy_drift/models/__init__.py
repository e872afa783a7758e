"""Data models shared across buoy-drift."""

from .component import (
    AccessibilityInfo,
    Component,
    ComponentMetadata,
    ComponentSource,
    HardcodedValue,
    PropDefinition,
    VariantDefinition,
    create_component_id,
    normalize_component_name,
)
from .drift import (
    DRIFT_TYPES,
    SEVERITIES,
    SEVERITY_RANK,
    DriftSignal,
    StyleFragment,
    severity_at_least,
)
from .fix import (
    CONFIDENCE_LEVELS,
    CONFIDENCE_RANK,
    SUPPORTED_FIX_TYPES,
    ConfidenceResult,
    Fix,
    FixResult,
    create_fix_id,
    get_confidence_level,
    meets_confidence_threshold,
)
from .report import DriftReport
from .token import (
    RGBA,
    BorderValue,
    ColorValue,
    DesignToken,
    RawValue,
    ShadowValue,
    SpacingValue,
    TokenMetadata,
    TokenSource,
    TokenValue,
    TypographyValue,
    create_token_id,
    design_token_from_dict,
    normalize_token_name,
    token_value_from_dict,
    tokens_match,
)

__all__ = [
    "DriftReport",
    "AccessibilityInfo",
    "Component",
    "ComponentMetadata",
    "ComponentSource",
    "HardcodedValue",
    "PropDefinition",
    "VariantDefinition",
    "create_component_id",
    "normalize_component_name",
    "DRIFT_TYPES",
    "SEVERITIES",
    "SEVERITY_RANK",
    "DriftSignal",
    "StyleFragment",
    "severity_at_least",
    "CONFIDENCE_LEVELS",
    "CONFIDENCE_RANK",
    "SUPPORTED_FIX_TYPES",
    "ConfidenceResult",
    "Fix",
    "FixResult",
    "create_fix_id",
    "get_confidence_level",
    "meets_confidence_threshold",
    "RGBA",
    "BorderValue",
    "ColorValue",
    "DesignToken",
    "RawValue",
    "ShadowValue",
    "SpacingValue",
    "TokenMetadata",
    "TokenSource",
    "TokenValue",
    "TypographyValue",
    "create_token_id",
    "design_token_from_dict",
    "normalize_token_name",
    "token_value_from_dict",
    "tokens_match",
]
