"""Scoring raw style values against design tokens."""

from .confidence import score_color_confidence, score_confidence, score_spacing_confidence

__all__ = ["score_color_confidence", "score_confidence", "score_spacing_confidence"]
