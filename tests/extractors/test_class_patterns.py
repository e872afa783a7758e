"""Tests for dynamic class-name pattern extraction."""

from buoy_drift.extractors.class_patterns import (
    analyze_pattern_for_tokens,
    extract_class_patterns,
    extract_nested_template_literals,
    extract_simple_var_name,
    parse_template_content,
)


class TestTemplateParsing:
    def test_parse_template_content(self):
        structure, variables, static = parse_template_content("btn-${size} ${variant || 'primary'}")
        assert structure == "btn-{size} {variant}"
        assert variables == ["size", "variant || 'primary'"]
        assert static == ["btn-", " "]

    def test_simple_var_name(self):
        assert extract_simple_var_name("prefix || 'btn'") == "prefix"
        assert extract_simple_var_name("active && 'on'") == "active"
        assert extract_simple_var_name("isOn ? 'a' : 'b'") == "isOn"

    def test_nested_template_literals(self):
        templates = extract_nested_template_literals("'base', a && `x-${a}`, `plain`")
        assert templates == ["x-${a}"]


class TestExtractClassPatterns:
    def test_template_literal_class(self):
        matches = extract_class_patterns("<div className={`btn-${size}`} />")
        assert len(matches) == 1
        match = matches[0]
        assert match.context == "template-literal"
        assert match.structure == "btn-{size}"
        assert match.variables == ("size",)
        assert match.static_parts == ("btn-",)
        assert (match.line, match.column) == (1, 6)

    def test_clsx_call(self):
        content = "<a className={clsx('btn', variant && `btn-${variant}`)} />"
        matches = extract_class_patterns(content)
        assert [(m.context, m.structure) for m in matches] == [("clsx", "btn-{variant}")]

    def test_conditional(self):
        content = "<a className={active ? `tab-${tone}` : 'tab'} />"
        matches = extract_class_patterns(content)
        assert [m.context for m in matches] == ["conditional"]

    def test_cva_variants(self):
        content = (
            "const button = cva('btn', {\n"
            "  variants: {\n"
            "    size: { sm: 'h-8', lg: 'h-12' },\n"
            "    intent: { primary: 'bg-blue' },\n"
            "  },\n"
            "});"
        )
        matches = extract_class_patterns(content)
        assert [m.pattern for m in matches] == ["cva:size", "cva:intent"]
        assert matches[0].static_parts == ("sm", "lg")
        assert all(m.context == "cva" for m in matches)

    def test_bem_modifier(self):
        matches = extract_class_patterns('<div class="card card__title--muted">')
        assert len(matches) == 1
        assert matches[0].structure == "{block}__{element}--{modifier}"
        assert matches[0].static_parts == ("card", "title", "muted")

    def test_data_attribute(self):
        matches = extract_class_patterns('<button data-state="open" data-testid="x">')
        assert len(matches) == 1
        assert matches[0].context == "data-attribute"
        assert matches[0].variables == ("state",)
        assert matches[0].static_parts == ("open",)

    def test_no_patterns(self):
        assert extract_class_patterns('<div className="static">') == []


class TestTokenHints:
    def test_size_variable(self):
        match = extract_class_patterns("<div className={`btn-${size}`} />")[0]
        hint = analyze_pattern_for_tokens(match)
        assert (hint.potential_token_type, hint.confidence) == ("size", "high")
        assert hint.evidence == ("size",)

    def test_bem_modifier_hint(self):
        match = extract_class_patterns('<div class="card__title--muted">')[0]
        hint = analyze_pattern_for_tokens(match)
        assert hint.potential_token_type == "modifier"
        assert hint.suggested_token_name == "muted"

    def test_data_state_hint(self):
        match = extract_class_patterns('<div data-state="open">')[0]
        assert analyze_pattern_for_tokens(match).potential_token_type == "state"

    def test_unknown(self):
        match = extract_class_patterns("<div className={`x-${foo}`} />")[0]
        assert analyze_pattern_for_tokens(match).potential_token_type == "unknown"
