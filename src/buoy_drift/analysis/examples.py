"""Example coverage: production components against their stories and demos.

A component's context comes from its file path. Production and example
components are related by case-insensitive name.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from ..models import Component, DriftSignal
from .signals import component_signal

EXAMPLE_FILE_PATTERNS = tuple(
    re.compile(p)
    for p in (
        r"\.stories\.[jt]sx?$",
        r"\.story\.[jt]sx?$",
        r"\.examples?\.[jt]sx?$",
        r"\.demo\.[jt]sx?$",
        r"\.showcase\.[jt]sx?$",
        r"/stories/",
        r"/examples?/",
        r"/demos?/",
        r"/playground/",
        r"/sandbox/",
        r"__stories__/",
        r"__examples__/",
        r"/docs/",
        r"\.mdx$",
    )
)

TEST_FILE_PATTERNS = tuple(
    re.compile(p)
    for p in (
        r"\.test\.[jt]sx?$",
        r"\.spec\.[jt]sx?$",
        r"/__tests__/",
        r"/tests?/",
        r"\.e2e\.[jt]sx?$",
    )
)

# Infrastructure components rarely get their own stories
_EXEMPT_NAME_PARTS = ("context", "provider", "wrapper", "internal", "utils")

_CODE_SOURCES = ("react", "vue", "svelte", "angular")


def is_example_file(path: str) -> bool:
    return any(p.search(path) for p in EXAMPLE_FILE_PATTERNS)


def is_test_file(path: str) -> bool:
    return any(p.search(path) for p in TEST_FILE_PATTERNS)


def classify_component_context(component: Component) -> str:
    """production, example, test or unknown."""
    path = component.source.path if component.source.type in _CODE_SOURCES else ""
    if not path:
        return "unknown"
    if is_example_file(path):
        return "example"
    if is_test_file(path):
        return "test"
    return "production"


@dataclass
class ExampleCoverage:
    production: List[Component] = field(default_factory=list)
    with_examples: List[Component] = field(default_factory=list)
    without_examples: List[Component] = field(default_factory=list)
    example_only: List[Component] = field(default_factory=list)
    related: Dict[str, List[Component]] = field(default_factory=dict)

    @property
    def coverage_percent(self) -> int:
        if not self.production:
            return 100
        return round(len(self.with_examples) / len(self.production) * 100)


def analyze_example_coverage(components: Sequence[Component]) -> ExampleCoverage:
    contexts = {c.id: classify_component_context(c) for c in components}
    by_name: Dict[str, List[Component]] = {}
    for component in components:
        by_name.setdefault(component.name.lower(), []).append(component)

    coverage = ExampleCoverage()
    for component in components:
        same_name = by_name[component.name.lower()]
        context = contexts[component.id]
        if context == "production":
            examples = [c for c in same_name if contexts[c.id] == "example" and c.id != component.id]
            coverage.production.append(component)
            coverage.related[component.id] = examples
            (coverage.with_examples if examples else coverage.without_examples).append(component)
        elif context == "example":
            if not any(contexts[c.id] == "production" for c in same_name if c.id != component.id):
                coverage.example_only.append(component)
    return coverage


def compare_production_to_examples(production: Component, examples: Sequence[Component]) -> List[dict]:
    """Props and variants used in examples but missing from the production component."""
    production_props = {p.name.lower() for p in production.props}
    production_variants = {v.name.lower() for v in production.variants}
    issues = []
    seen = set()

    for example in examples:
        for prop in example.props:
            name = prop.name.lower()
            if name not in production_props and ("prop", name) not in seen:
                seen.add(("prop", name))
                issues.append(
                    {
                        "type": "missing-prop",
                        "description": f'Prop "{name}" used in examples but not defined in production component',
                        "example_source": example.source.path or "unknown",
                    }
                )
        for variant in example.variants:
            name = variant.name.lower()
            if name not in production_variants and ("variant", name) not in seen:
                seen.add(("variant", name))
                issues.append(
                    {
                        "type": "missing-variant",
                        "description": f'Variant "{name}" used in examples but not defined in production component',
                        "example_source": example.source.path or "unknown",
                    }
                )
    return issues


def analyze_examples(components: Sequence[Component]) -> List[DriftSignal]:
    coverage = analyze_example_coverage(components)
    signals = []

    for component in coverage.without_examples:
        if any(part in component.name.lower() for part in _EXEMPT_NAME_PARTS):
            continue
        signals.append(
            component_signal(
                component,
                "missing-documentation",
                "info",
                component.name,
                f'Component "{component.name}" has no example/story files',
                "Add a .stories.tsx file to document component usage",
            )
        )

    for component in coverage.production:
        for issue in compare_production_to_examples(component, coverage.related[component.id]):
            signals.append(
                component_signal(
                    component,
                    "semantic-mismatch",
                    "warning",
                    issue["description"],
                    f"{component.name}: {issue['description']}",
                    "Add missing prop/variant to production component",
                )
            )

    for component in coverage.example_only:
        signals.append(
            component_signal(
                component,
                "orphaned-component",
                "info",
                f"example:{component.name}",
                f'Example "{component.name}" has no corresponding production component',
                "If this is a demo-only component, document it as such",
            )
        )
    return signals
