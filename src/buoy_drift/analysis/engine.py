"""SemanticDiffEngine: runs the component analyzers over one component set.

Usage:
    engine = SemanticDiffEngine(AnalysisConfig(check_examples=False))
    signals = engine.analyze(components, frameworks=[FrameworkInfo("react")])
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..logging_config import get_logger
from ..models import Component, DesignToken, DriftSignal
from ..tokens.suggestions import TokenSuggestionService
from .contrast import analyze_accessibility
from .duplicates import analyze_duplicates
from .examples import analyze_examples
from .naming import analyze_naming
from .signals import component_signal
from .sprawl import FrameworkInfo, check_framework_sprawl

logger = get_logger(__name__)

_SIZE_VALUE_TYPES = ("spacing", "fontSize")


@dataclass(frozen=True)
class AnalysisConfig:
    """Which component checks run. All are on by default."""

    check_deprecated: bool = True
    check_naming: bool = True
    check_duplicates: bool = True
    check_accessibility: bool = True
    check_examples: bool = True
    check_hardcoded: bool = True


class SemanticDiffEngine:
    def __init__(
        self,
        config: Optional[AnalysisConfig] = None,
        suggestions: Optional[TokenSuggestionService] = None,
    ):
        self.config = config or AnalysisConfig()
        self.suggestions = suggestions or TokenSuggestionService()

    def analyze(
        self,
        components: Sequence[Component],
        frameworks: Sequence[FrameworkInfo] = (),
        tokens: Sequence[DesignToken] = (),
    ) -> List[DriftSignal]:
        """Run every enabled check; signals come grouped by check, in component order."""
        components = list(components)
        signals: List[DriftSignal] = []

        sprawl = check_framework_sprawl(frameworks)
        if sprawl is not None:
            signals.append(sprawl)

        if self.config.check_deprecated:
            signals.extend(self._deprecated(components))
        if self.config.check_naming:
            signals.extend(analyze_naming(components))
        if self.config.check_accessibility:
            signals.extend(analyze_accessibility(components))
        if self.config.check_hardcoded:
            for component in components:
                signals.extend(self.analyze_hardcoded_values(component, tokens))
        if self.config.check_duplicates:
            signals.extend(analyze_duplicates(components))
        if self.config.check_examples:
            signals.extend(analyze_examples(components))

        logger.debug(f"Component analysis: {len(components)} components, {len(signals)} signals")
        return signals

    def _deprecated(self, components: Sequence[Component]) -> List[DriftSignal]:
        return [
            component_signal(
                c,
                "deprecated-pattern",
                "warning",
                c.name,
                f'Component "{c.name}" is marked as deprecated',
                c.metadata.deprecation_reason or "Migrate to recommended alternative",
            )
            for c in components
            if c.metadata.deprecated
        ]

    def _replacement_hint(self, values, tokens: Sequence[DesignToken], fallback: str) -> str:
        replacements = []
        for hv in values:
            found = self.suggestions.suggest(hv.type, hv.value, tokens) if tokens else []
            if found:
                best = found[0]
                replacements.append(
                    f"{hv.value} -> {best.suggested_token} ({round(best.confidence * 100)}% match)"
                )
        if replacements:
            return "Suggested replacements: " + "; ".join(replacements)
        return fallback

    def analyze_hardcoded_values(
        self, component: Component, tokens: Sequence[DesignToken] = ()
    ) -> List[DriftSignal]:
        """One color signal and one size signal per component, when it has any."""
        hardcoded = component.metadata.hardcoded_values
        colors = [h for h in hardcoded if h.type == "color"]
        sizes = [h for h in hardcoded if h.type in _SIZE_VALUE_TYPES]
        signals = []

        if colors:
            values = ", ".join(h.value for h in colors)
            plural = "s" if len(colors) > 1 else ""
            signals.append(
                component_signal(
                    component,
                    "hardcoded-value",
                    "warning",
                    f"color:{values}",
                    f'Component "{component.name}" has {len(colors)} hardcoded color{plural}: {values}',
                    self._replacement_hint(
                        colors, tokens, "Replace hardcoded colors with design tokens"
                    ),
                )
            )
        if sizes:
            values = ", ".join(h.value for h in sizes)
            plural = "s" if len(sizes) > 1 else ""
            signals.append(
                component_signal(
                    component,
                    "hardcoded-value",
                    "info",
                    f"spacing:{values}",
                    f'Component "{component.name}" has {len(sizes)} hardcoded size value{plural}: {values}',
                    self._replacement_hint(
                        sizes, tokens, "Consider using spacing tokens for consistency"
                    ),
                )
            )
        return signals
