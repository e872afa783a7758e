"""Drift scanner: runs the line detectors over file text or style fragments.

Three entry points, from lowest to highest level:

* ``scan_content`` runs every detector over every line of the text. Used for
  code files (JSX/TSX and friends) where literals anywhere can hold colors.
* ``scan_fragments`` runs the color detector over extracted CSS fragments and
  reports each inline fragment that holds a color.
* ``scan_file`` routes a file by template type: code files get the line
  detectors plus one inline-style signal per ``style={{...}}`` object found
  by brace balancing; stylesheets and markup go through the extractors and
  the fragment scan, plus a Tailwind pass over the masked markup.

Output order within a file is ascending line, then column, then detector
order, so rescanning unchanged text gives the same list.
"""

from __future__ import annotations

import re
from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple

from ..extractors.jsx_style import extract_jsx_style_objects
from ..extractors.masking import line_and_column, mask_html
from ..extractors.router import extract_styles, get_syntax_family
from ..logging_config import get_logger
from ..models import DriftSignal, StyleFragment
from .detectors import (
    DETECTOR_RANK,
    LINE_DETECTORS,
    Detection,
    Detector,
    comment_flags,
    detect_hardcoded_colors,
    detect_tailwind_arbitrary,
    inline_fragment_detection,
    jsx_object_detection,
)

logger = get_logger(__name__)

# Extracted CSS is looked up in the original text this far past its anchor
_FRAGMENT_SEARCH_WINDOW = 256
_NEWLINE = re.compile(r"\n")

_Located = Tuple[int, int, int, DriftSignal]


class _Collector:
    """Accumulates signals, dropping repeats of ``(line, column, tag)``."""

    def __init__(self, file: str) -> None:
        self.file = file
        self._seen: Set[Tuple[int, int, str]] = set()
        self._located: List[_Located] = []

    def add(self, detection: Detection, line: int, column: int) -> None:
        key = (line, column, detection.tag)
        if key in self._seen:
            return
        self._seen.add(key)
        signal = DriftSignal(
            type=detection.type,
            severity=detection.severity,
            file=self.file,
            line=line,
            column=column,
            value=detection.value,
            message=detection.message,
            suggestion=detection.suggestion,
        )
        self._located.append((line, column, DETECTOR_RANK[detection.tag], signal))

    def signals(self) -> List[DriftSignal]:
        ordered = sorted(self._located, key=lambda item: item[:3])
        return [signal for _, _, _, signal in ordered]


def _scan_lines(
    collector: _Collector,
    lines: Sequence[str],
    detectors: Sequence[Detector],
) -> None:
    for line_number, (line, comment) in enumerate(zip(lines, comment_flags(lines)), start=1):
        if comment:
            continue
        for detector in detectors:
            for detection in detector(line):
                collector.add(detection, line_number, detection.index + 1)


def _line_starts(content: str) -> List[int]:
    return [0] + [match.end() for match in _NEWLINE.finditer(content)]


class DriftScanner:
    """Turns file text into drift signals.

    Args:
        detectors: Line detectors used by ``scan_content``, in tie-break order.
    """

    def __init__(self, detectors: Optional[Sequence[Detector]] = None) -> None:
        self.detectors = tuple(detectors) if detectors is not None else LINE_DETECTORS

    def scan_content(self, content: str, file: str) -> List[DriftSignal]:
        """Run every line detector over ``content``."""
        collector = _Collector(file)
        _scan_lines(collector, content.split("\n"), self.detectors)
        return collector.signals()

    def scan_fragments(
        self,
        fragments: Iterable[StyleFragment],
        file: str,
        content: Optional[str] = None,
    ) -> List[DriftSignal]:
        """Scan extracted style fragments.

        When the original ``content`` is given, colors get exact positions in
        it: directly if the fragment's CSS appears verbatim, otherwise by
        finding each literal after the fragment anchor. Without ``content``
        positions are relative to the anchor.
        """
        collector = _Collector(file)
        self._collect_fragments(collector, list(fragments), content)
        return collector.signals()

    def scan_file(self, content: str, file: str, template_type: str) -> List[DriftSignal]:
        """Route ``content`` by template type and scan it."""
        family = get_syntax_family(template_type)
        collector = _Collector(file)
        if family == "jsx":
            _scan_lines(collector, content.split("\n"), self.detectors)
            # Multi-line and nested style={{...}} objects the line scan cannot see
            for fragment in extract_jsx_style_objects(content):
                detection = jsx_object_detection(fragment.css)
                if detection is not None:
                    collector.add(detection, fragment.line, fragment.column)
        else:
            self._collect_fragments(collector, extract_styles(content, template_type), content)
            # @apply in stylesheets, class attributes in markup
            text = content if family == "css" else mask_html(content)
            _scan_lines(collector, text.split("\n"), (detect_tailwind_arbitrary,))

        signals = collector.signals()
        logger.debug(f"{file}: {len(signals)} signals")
        return signals

    def _collect_fragments(
        self,
        collector: _Collector,
        fragments: List[StyleFragment],
        content: Optional[str],
    ) -> None:
        starts = _line_starts(content) if content is not None else None

        for fragment in fragments:
            anchor = self._anchor(fragment, starts)
            base = self._locate(fragment, content, anchor)

            if fragment.context == "inline":
                detection = inline_fragment_detection(fragment.css)
                if detection is not None:
                    collector.add(detection, fragment.line, fragment.column)

            literals = _LiteralFinder(content, anchor, len(fragment.css) + _FRAGMENT_SEARCH_WINDOW)
            css_lines = fragment.css.split("\n")
            offset = 0
            for index, (css_line, comment) in enumerate(zip(css_lines, comment_flags(css_lines))):
                if not comment:
                    for detection in detect_hardcoded_colors(css_line):
                        if base is not None:
                            position: Optional[int] = base + offset + detection.index
                        else:
                            position = literals.find(detection.value)
                        if position is not None:
                            line, column = line_and_column(content, position)
                        elif index == 0:
                            line, column = fragment.line, fragment.column + detection.index
                        else:
                            line, column = fragment.line + index, detection.index + 1
                        collector.add(detection, line, column)
                offset += len(css_line) + 1

    @staticmethod
    def _anchor(fragment: StyleFragment, starts: Optional[List[int]]) -> Optional[int]:
        if starts is None or fragment.line > len(starts):
            return None
        return starts[fragment.line - 1] + fragment.column - 1

    @staticmethod
    def _locate(
        fragment: StyleFragment, content: Optional[str], anchor: Optional[int]
    ) -> Optional[int]:
        """Offset of the fragment's CSS in ``content`` if it appears there verbatim."""
        if content is None or anchor is None:
            return None
        found = content.find(fragment.css, anchor, anchor + len(fragment.css) + _FRAGMENT_SEARCH_WINDOW)
        if found == -1:
            return None
        return found


class _LiteralFinder:
    """Finds values of a rewritten fragment in the original text.

    Directive extractors rebuild CSS from bindings, so the fragment text is
    not in the file but each literal value is. Repeated values are found in
    order, one occurrence per lookup.
    """

    def __init__(self, content: Optional[str], anchor: Optional[int], window: int) -> None:
        self.content = content
        self.anchor = anchor
        self.window = window
        self._cursors: Dict[str, int] = {}

    def find(self, value: str) -> Optional[int]:
        if self.content is None or self.anchor is None:
            return None
        start = self._cursors.get(value, self.anchor)
        found = self.content.find(value, start, self.anchor + self.window)
        if found == -1:
            return None
        self._cursors[value] = found + len(value)
        return found


_default_scanner = DriftScanner()


def scan_content(content: str, file: str) -> List[DriftSignal]:
    return _default_scanner.scan_content(content, file)


def scan_fragments(
    fragments: Iterable[StyleFragment], file: str, content: Optional[str] = None
) -> List[DriftSignal]:
    return _default_scanner.scan_fragments(fragments, file, content)


def scan_file(content: str, file: str, template_type: str) -> List[DriftSignal]:
    return _default_scanner.scan_file(content, file, template_type)
