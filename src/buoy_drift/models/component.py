"""Component models consumed by the component analyzers.

Components are produced by framework-specific component scanners that live
outside this package; the analyzers only read them.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class ComponentSource:
    """Where a component is defined (react, vue, svelte, angular, figma, storybook)."""

    type: str
    path: str = ""
    export_name: str = ""
    line: Optional[int] = None


@dataclass
class PropDefinition:
    name: str
    type: str = "unknown"
    required: bool = False
    default_value: Any = None


@dataclass
class VariantDefinition:
    name: str
    props: Dict[str, Any] = field(default_factory=dict)


@dataclass
class HardcodedValue:
    """A literal style value found inside a component."""

    type: str  # color, spacing, fontSize, fontFamily, shadow, border, other
    value: str
    property: str  # e.g. backgroundColor, padding, color
    location: str  # "line:column" or free text


@dataclass
class AccessibilityInfo:
    has_aria_label: Optional[bool] = None
    has_role: Optional[bool] = None
    issues: List[str] = field(default_factory=list)


@dataclass
class ComponentMetadata:
    deprecated: bool = False
    deprecation_reason: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    documentation: Optional[str] = None
    accessibility: Optional[AccessibilityInfo] = None
    hardcoded_values: List[HardcodedValue] = field(default_factory=list)


@dataclass
class Component:
    id: str
    name: str
    source: ComponentSource
    props: List[PropDefinition] = field(default_factory=list)
    variants: List[VariantDefinition] = field(default_factory=list)
    dependencies: List[str] = field(default_factory=list)
    metadata: ComponentMetadata = field(default_factory=ComponentMetadata)

    @property
    def path(self) -> str:
        return self.source.path


def create_component_id(source: ComponentSource, name: str) -> str:
    """Build the stable id for a component from its source location."""
    if source.type == "storybook":
        return f"storybook:{source.export_name or name}"
    if source.type == "figma":
        return f"figma:{source.path}:{source.export_name or name}"
    return f"{source.type}:{source.path}:{source.export_name or name}"


def normalize_component_name(name: str) -> str:
    """``Primary-Button``, ``primary_button`` and ``PrimaryButtonComponent`` all normalize alike."""
    return re.sub(r"component$", "", re.sub(r"[-_\s]", "", name.lower()))
