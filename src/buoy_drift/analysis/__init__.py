"""Component analyzers. Each is a pure function over a component list."""

from .contrast import analyze_accessibility, check_accessibility, check_color_contrast
from .duplicates import analyze_duplicates, detect_potential_duplicates, extract_base_name
from .engine import AnalysisConfig, SemanticDiffEngine
from .examples import (
    analyze_example_coverage,
    analyze_examples,
    classify_component_context,
    is_example_file,
    is_test_file,
)
from .naming import analyze_naming, detect_naming_patterns, identify_naming_pattern
from .sprawl import FrameworkInfo, check_framework_sprawl

__all__ = [
    "AnalysisConfig",
    "SemanticDiffEngine",
    "FrameworkInfo",
    "analyze_accessibility",
    "analyze_duplicates",
    "analyze_example_coverage",
    "analyze_examples",
    "analyze_naming",
    "check_accessibility",
    "check_color_contrast",
    "check_framework_sprawl",
    "classify_component_context",
    "detect_naming_patterns",
    "detect_potential_duplicates",
    "extract_base_name",
    "identify_naming_pattern",
    "is_example_file",
    "is_test_file",
]
