"""Tests for Angular, Vue and Svelte style bindings."""

from buoy_drift.extractors.directive_style import (
    extract_angular_style_bindings,
    extract_directive_styles,
    extract_ng_style_bindings,
    extract_vue_style_bindings,
    parse_style_object,
)
from buoy_drift.extractors.svelte_style import extract_svelte_style_directives


class TestAngularBindings:
    def test_quoted_literal(self):
        fragments = extract_angular_style_bindings("<div [style.color]=\"'red'\"></div>")
        assert [f.css for f in fragments] == ["color: red"]
        assert fragments[0].column == 6

    def test_unit_suffix(self):
        fragments = extract_angular_style_bindings('<div [style.width.px]="120"></div>')
        assert fragments[0].css == "width: 120px"

    def test_unit_with_expression(self):
        fragments = extract_angular_style_bindings('<div [style.width.px]="size"></div>')
        assert fragments[0].css == "width: size px"

    def test_ng_style_object(self):
        content = "<div [ngStyle]=\"{ 'color': 'red', 'padding': '4px' }\"></div>"
        fragments = extract_ng_style_bindings(content)
        assert fragments[0].css == "color: red; padding: 4px"

    def test_ng_style_with_only_variables(self):
        content = '<div [ngStyle]="{ color: theme.fg }"></div>'
        assert extract_ng_style_bindings(content) == []


class TestVueBindings:
    def test_object_binding(self):
        fragments = extract_vue_style_bindings("<div :style=\"{ color: 'red', margin: '8px' }\">")
        assert fragments[0].css == "color: red; margin: 8px"

    def test_v_bind_form(self):
        fragments = extract_vue_style_bindings("<div v-bind:style=\"{ padding: '4px' }\">")
        assert fragments[0].css == "padding: 4px"
        assert fragments[0].column == 6

    def test_template_literal_binding(self):
        fragments = extract_vue_style_bindings('<div :style="`color: ${c}; margin: 0`">')
        assert fragments[0].css == "color: ${c}; margin: 0"

    def test_reference_binding_skipped(self):
        assert extract_vue_style_bindings('<div :style="boxStyle">') == []

    def test_identifier_literal_skipped_unless_color(self):
        assert parse_style_object("display: 'flex', color: 'white'") == "color: white"


class TestDirectiveStyles:
    def test_all_forms_in_order(self):
        content = (
            "<a [style.color]=\"'red'\"></a>\n"
            "<b [ngStyle]=\"{ 'margin': '0' }\"></b>\n"
            "<i :style=\"{ padding: '2px' }\"></i>"
        )
        fragments = extract_directive_styles(content)
        assert [f.line for f in fragments] == [1, 2, 3]


class TestSvelteDirectives:
    def test_quoted_value(self):
        fragments = extract_svelte_style_directives('<div style:color="red">')
        assert [f.css for f in fragments] == ["color: red"]
        assert fragments[0].column == 6

    def test_braced_literal(self):
        fragments = extract_svelte_style_directives("<div style:color={'#fff'}>")
        assert fragments[0].css == "color: #fff"

    def test_important_modifier_and_custom_property(self):
        content = "<div style:--accent|important={dark ? '#000' : '#fff'}>"
        fragments = extract_svelte_style_directives(content)
        assert fragments[0].css == "--accent: dark ? '#000' : '#fff' !important"

    def test_variable_references_skipped(self):
        content = (
            "<div style:color>\n"
            "<div style:color={color}>\n"
            '<div style:color="{theme.fg}">\n'
        )
        assert extract_svelte_style_directives(content) == []

    def test_commented_directive_ignored(self):
        assert extract_svelte_style_directives('<!-- <p style:color="red"> -->') == []
