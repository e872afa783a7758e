"""Token suggestions: the closest design tokens for a hardcoded value."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence

from ..models import ColorValue, DesignToken, HardcodedValue, SpacingValue
from ..primitives.color import color_similarity, normalize_color
from ..primitives.spacing import convert_to_px, format_px, parse_spacing_to_px

COLOR_SIMILARITY_THRESHOLD = 0.8
SPACING_SIMILARITY_THRESHOLD = 0.9
MAX_SUGGESTIONS = 3


@dataclass(frozen=True)
class TokenSuggestion:
    hardcoded_value: str
    suggested_token: str
    token_value: str
    confidence: float


def _rank(suggestions: List[TokenSuggestion], limit: int) -> List[TokenSuggestion]:
    suggestions.sort(key=lambda s: (-s.confidence, s.suggested_token))
    return suggestions[:limit]


class TokenSuggestionService:
    """Proposes replacement tokens for hardcoded colors and lengths.

    Colors are compared by RGB similarity (threshold 0.8), lengths by
    relative pixel difference (threshold 0.9). Results are ordered by
    confidence, then token name, and capped at ``max_suggestions``.
    """

    def __init__(self, max_suggestions: int = MAX_SUGGESTIONS):
        self.max_suggestions = max_suggestions

    def find_color_suggestions(
        self, value: str, tokens: Iterable[DesignToken]
    ) -> List[TokenSuggestion]:
        normalized = normalize_color(value)
        if normalized is None:
            return []

        suggestions = []
        for token in tokens:
            if not isinstance(token.value, ColorValue):
                continue
            similarity = color_similarity(normalized, token.value.hex)
            if similarity >= COLOR_SIMILARITY_THRESHOLD:
                suggestions.append(
                    TokenSuggestion(value, token.name, token.value.hex, similarity)
                )
        return _rank(suggestions, self.max_suggestions)

    def find_spacing_suggestions(
        self, value: str, tokens: Iterable[DesignToken]
    ) -> List[TokenSuggestion]:
        px = parse_spacing_to_px(value)
        if px is None:
            return []

        suggestions = []
        for token in tokens:
            if not isinstance(token.value, SpacingValue):
                continue
            token_px = convert_to_px(token.value.value, token.value.unit)
            similarity = 1 - abs(px - token_px) / max(px, token_px, 1)
            if similarity >= SPACING_SIMILARITY_THRESHOLD:
                suggestions.append(
                    TokenSuggestion(
                        value,
                        token.name,
                        f"{format_px(token.value.value)}{token.value.unit}",
                        similarity,
                    )
                )
        return _rank(suggestions, self.max_suggestions)

    def suggest(self, kind: str, value: str, tokens: Sequence[DesignToken]) -> List[TokenSuggestion]:
        """Dispatch on the hardcoded value's kind (color, spacing, fontSize)."""
        if kind == "color":
            return self.find_color_suggestions(value, tokens)
        if kind in ("spacing", "fontSize", "font-size"):
            return self.find_spacing_suggestions(value, tokens)
        return []

    def generate_token_suggestions(
        self, hardcoded_values: Iterable[HardcodedValue], tokens: Sequence[DesignToken]
    ) -> Dict[str, List[TokenSuggestion]]:
        """Suggestions keyed by hardcoded value; values with none are omitted."""
        result: Dict[str, List[TokenSuggestion]] = {}
        for hv in hardcoded_values:
            suggestions = self.suggest(hv.type, hv.value, tokens)
            if suggestions:
                result[hv.value] = suggestions
        return result
