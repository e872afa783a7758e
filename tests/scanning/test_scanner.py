"""Tests for DriftScanner: content, fragment and file scanning."""

import pytest

from buoy_drift.exceptions import UnsupportedTemplateError
from buoy_drift.models import StyleFragment
from buoy_drift.scanning.scanner import DriftScanner, scan_content, scan_file, scan_fragments


class TestScanContent:
    def test_hex_position(self):
        content = "const a = 1;\nconst c = '#ff0000';\n// '#00ff00'\n"
        signals = scan_content(content, "src/a.ts")
        assert len(signals) == 1
        signal = signals[0]
        assert (signal.file, signal.line, signal.column) == ("src/a.ts", 2, 12)
        assert signal.value == "#ff0000"
        assert signal.suggestion == "Use a design token or CSS variable"

    def test_sorted_by_position(self):
        content = "<div style={{ color: '#fff' }} />"
        signals = scan_content(content, "App.tsx")
        assert [(s.type, s.column) for s in signals] == [
            ("inline-style", 6),
            ("hardcoded-color", 23),
        ]

    def test_rescan_is_stable(self):
        content = "<a className=\"bg-[#123456] p-[3px]\" style={{ color: 'red', background: '#fff' }} />"
        first = scan_content(content, "x.tsx")
        second = scan_content(content, "x.tsx")
        assert [(s.line, s.column, s.type) for s in first] == [
            (s.line, s.column, s.type) for s in second
        ]

    def test_empty_content(self):
        assert scan_content("", "a.tsx") == []

    def test_custom_detectors(self):
        scanner = DriftScanner(detectors=[])
        assert scanner.scan_content("color: #fff", "a.tsx") == []


class TestScanFragments:
    def test_exact_positions_with_content(self):
        content = '<p>\n<div style="color: #fff">'
        fragment = StyleFragment(css="color: #fff", line=2, column=6, context="inline")
        signals = scan_fragments([fragment], "a.html", content)
        assert [(s.type, s.line, s.column) for s in signals] == [
            ("inline-style", 2, 6),
            ("hardcoded-color", 2, 20),
        ]

    def test_relative_positions_without_content(self):
        fragment = StyleFragment(css="a {\n  color: #fff;\n}", line=10, column=1, context="style-block")
        signals = scan_fragments([fragment], "a.css")
        assert [(s.line, s.column) for s in signals] == [(11, 10)]

    def test_duplicate_fragments_reported_once(self):
        fragment = StyleFragment(css="color: #fff", line=1, column=1, context="inline")
        signals = scan_fragments([fragment, fragment], "a.html")
        assert len(signals) == 2
        assert {s.type for s in signals} == {"inline-style", "hardcoded-color"}

    def test_style_block_has_no_inline_signal(self):
        fragment = StyleFragment(css="color: #fff", line=1, column=1, context="style-block")
        signals = scan_fragments([fragment], "a.vue")
        assert [s.type for s in signals] == ["hardcoded-color"]


class TestScanFile:
    def test_stylesheet(self):
        content = "a {\n  color: #ffffff;\n  --brand: #000;\n}\n"
        signals = scan_file(content, "theme.css", "css")
        assert [(s.type, s.line, s.column) for s in signals] == [("hardcoded-color", 2, 10)]

    def test_tailwind_apply_in_stylesheet(self):
        content = ".btn {\n  @apply bg-[#ff0000];\n}\n"
        signals = scan_file(content, "b.css", "css")
        types = sorted(s.type for s in signals)
        assert types == ["arbitrary-tailwind", "hardcoded-color"]

    def test_markup_only_scans_styles(self):
        content = "<p>#ffffff is white</p>\n<div class=\"bg-[#fff]\"></div>"
        signals = scan_file(content, "page.html", "html")
        assert [(s.type, s.line, s.column) for s in signals] == [("arbitrary-tailwind", 2, 13)]

    def test_markup_style_attribute(self):
        content = '<div style="color: #abc; margin: 0"></div>'
        signals = scan_file(content, "page.blade.php", "blade")
        assert [s.type for s in signals] == ["inline-style", "hardcoded-color"]
        assert signals[1].column == 20

    def test_comment_in_markup_ignored(self):
        content = '<!-- <div class="bg-[#fff]" style="color: red"> -->'
        assert scan_file(content, "a.html", "html") == []

    def test_jsx_scans_every_line(self):
        content = "const theme = { brand: '#3b82f6' };\n"
        signals = scan_file(content, "theme.tsx", "react")
        assert [s.value for s in signals] == ["#3b82f6"]

    def test_jsx_multiline_style_object(self):
        content = "<div\n  style={{\n    color: '#ff0000',\n    padding: 8,\n  }}\n/>"
        signals = scan_file(content, "Box.tsx", "react")
        assert [(s.type, s.line, s.column) for s in signals] == [
            ("inline-style", 2, 3),
            ("hardcoded-color", 3, 13),
        ]
        assert signals[0].value == "style={{ color: #ff0000; padding: 8 }}"

    def test_jsx_nested_style_object(self):
        content = '<div style={{ border: { top: 1 }, color: "#ff0000" }} />'
        signals = scan_file(content, "Box.tsx", "react")
        assert [(s.type, s.column) for s in signals] == [
            ("inline-style", 6),
            ("hardcoded-color", 43),
        ]

    def test_jsx_single_line_object_reported_once(self):
        signals = scan_file("<div style={{ color: '#fff' }} />", "Box.tsx", "react")
        assert [(s.type, s.column) for s in signals] == [
            ("inline-style", 6),
            ("hardcoded-color", 23),
        ]
        assert signals[0].value == "style={{ color: '#fff' }}"

    def test_universal_selector(self):
        signals = scan_file("* { color: #ff0000; }", "a.css", "css")
        assert [(s.value, s.line, s.column) for s in signals] == [("#ff0000", 1, 12)]

    def test_universal_selector_in_style_block(self):
        content = "<style>\n* { color: #ff0000; }\n*, ::before { border-color: #e5e7eb }\n</style>"
        signals = scan_file(content, "a.html", "html")
        assert [(s.value, s.line) for s in signals] == [("#ff0000", 2), ("#e5e7eb", 3)]

    def test_block_comment_lines_skipped(self):
        content = "/**\n * Brand: #ffffff\n */\na { color: #000; }\n"
        signals = scan_file(content, "a.css", "css")
        assert [(s.value, s.line) for s in signals] == [("#000", 4)]

    def test_odd_length_hex_ignored(self):
        content = ".a { color: #12345; background: #abcdef1; }"
        assert scan_file(content, "a.css", "css") == []

    def test_vue_binding_columns_point_at_literal(self):
        content = "<p>\n<div :style=\"{ color: '#ff0000' }\"></div>"
        signals = scan_file(content, "a.vue", "vue")
        assert [(s.type, s.line, s.column) for s in signals] == [
            ("inline-style", 2, 6),
            ("hardcoded-color", 2, 24),
        ]

    def test_vue_binding_repeated_literal(self):
        content = "<div :style=\"{ color: '#fff', background: '#fff' }\"></div>"
        signals = scan_file(content, "a.vue", "vue")
        colors = [s.column for s in signals if s.type == "hardcoded-color"]
        assert colors == [24, 44]

    def test_angular_binding_column(self):
        content = "<div [style.color]=\"'#ff0000'\"></div>"
        signals = scan_file(content, "a.component.html", "angular")
        colors = [(s.line, s.column) for s in signals if s.type == "hardcoded-color"]
        assert colors == [(1, 22)]

    def test_svelte_directive_column(self):
        content = "<div style:color={'#ff0000'}></div>"
        signals = scan_file(content, "a.svelte", "svelte")
        colors = [s.column for s in signals if s.type == "hardcoded-color"]
        assert colors == [20]

    def test_svelte_directive(self):
        content = "<div style:color={'#ff0000'}></div>"
        signals = scan_file(content, "a.svelte", "svelte")
        assert "inline-style" in {s.type for s in signals}
        assert "#ff0000" in {s.value for s in signals}

    def test_unknown_template(self):
        with pytest.raises(UnsupportedTemplateError):
            scan_file("", "a.xyz", "xyz")
