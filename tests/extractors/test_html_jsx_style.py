"""Tests for the HTML-like and JSX style extractors."""

from buoy_drift.extractors.html_style import (
    extract_all_html_styles,
    extract_html_style_attributes,
    extract_style_blocks,
)
from buoy_drift.extractors.jsx_style import extract_jsx_style_objects, style_object_to_css


class TestHtmlStyleAttributes:
    def test_double_quoted(self):
        fragments = extract_html_style_attributes('<div style="color: red; padding: 4px">')
        assert len(fragments) == 1
        fragment = fragments[0]
        assert fragment.css == "color: red; padding: 4px"
        assert (fragment.line, fragment.column) == (1, 6)
        assert fragment.context == "inline"

    def test_single_quoted(self):
        fragments = extract_html_style_attributes("<span style='margin: 0'>")
        assert [f.css for f in fragments] == ["margin: 0"]

    def test_position_on_later_line(self):
        content = "<section>\n  <div\n    style=\"color: #fff\">"
        fragments = extract_html_style_attributes(content)
        assert (fragments[0].line, fragments[0].column) == (3, 5)

    def test_multiline_value(self):
        content = '<div style="color: red;\n  margin: 0">'
        fragments = extract_html_style_attributes(content)
        assert fragments[0].css == "color: red;\n  margin: 0"

    def test_prefixed_attributes_ignored(self):
        content = '<div data-style="color: red" :style="x" ng-style="y">'
        assert extract_html_style_attributes(content) == []

    def test_empty_value_skipped(self):
        assert extract_html_style_attributes('<div style="">') == []
        assert extract_html_style_attributes('<div style="  ">') == []

    def test_comments_and_scripts_ignored(self):
        content = (
            '<!-- <div style="color: red"> -->\n'
            '<script>el.innerHTML = \'<b style="color: blue">\'</script>\n'
            '<p style="color: green">'
        )
        fragments = extract_html_style_attributes(content)
        assert [f.css for f in fragments] == ["color: green"]
        assert fragments[0].line == 3


class TestStyleBlocks:
    def test_style_block(self):
        content = "<html>\n<style>\n  .a { color: #fff; }\n</style>"
        fragments = extract_style_blocks(content)
        assert len(fragments) == 1
        assert fragments[0].css == ".a { color: #fff; }"
        assert (fragments[0].line, fragments[0].column) == (2, 1)
        assert fragments[0].context == "style-block"

    def test_cdata_unwrapped(self):
        fragments = extract_style_blocks("<style><![CDATA[ .a{color:red} ]]></style>")
        assert fragments[0].css == ".a{color:red}"

    def test_empty_block_skipped(self):
        assert extract_style_blocks("<style>\n</style>") == []

    def test_inline_before_blocks(self):
        content = '<style>.a{}</style><div style="color: red">'
        fragments = extract_all_html_styles(content)
        assert [f.context for f in fragments] == ["inline", "style-block"]


class TestJsxStyleObjects:
    def test_object_converted_to_css(self):
        content = "<div style={{ backgroundColor: '#fff', padding: 8 }} />"
        fragments = extract_jsx_style_objects(content)
        assert len(fragments) == 1
        assert fragments[0].css == "background-color: #fff; padding: 8"
        assert (fragments[0].line, fragments[0].column) == (1, 6)

    def test_multiline_object(self):
        content = "return (\n  <div\n    style={{\n      color: 'red',\n    }}\n  />\n);"
        fragments = extract_jsx_style_objects(content)
        assert fragments[0].css == "color: red"
        assert fragments[0].line == 3

    def test_reference_is_skipped(self):
        assert extract_jsx_style_objects("<div style={styles.card} />") == []
        assert extract_jsx_style_objects("<div style={getStyle()} />") == []

    def test_commented_out_jsx_ignored(self):
        content = "// <div style={{ color: 'red' }} />\n{/* <p style={{ color: 'blue' }} /> */}"
        assert extract_jsx_style_objects(content) == []

    def test_url_is_not_a_comment(self):
        content = "<div style={{ backgroundImage: 'url(https://x.io/a.png)', color: '#000' }} />"
        fragments = extract_jsx_style_objects(content)
        assert fragments[0].css == "background-image: url(https://x.io/a.png); color: #000"

    def test_ternary_value_kept(self):
        content = "<p style={{ color: dark ? '#000' : '#fff' }} />"
        fragments = extract_jsx_style_objects(content)
        assert fragments[0].css == "color: dark ? '#000' : '#fff'"


class TestStyleObjectToCss:
    def test_vendor_prefix_and_custom_property(self):
        css = style_object_to_css("WebkitTransition: 'none', '--gap': '4px'")
        assert css == "-webkit-transition: none; --gap: 4px"

    def test_spread_shorthand_and_computed_keys_skipped(self):
        css = style_object_to_css("...base, color, [key]: 'red', margin: 0")
        assert css == "margin: 0"
