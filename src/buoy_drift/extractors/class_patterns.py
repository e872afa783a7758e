"""Dynamic class-name pattern extraction.

Recognizes how components apply design decisions through class names:

    className={`btn-${size}`}                       template-literal
    className={clsx(base, variant && `${p}-${variant}`)}   clsx / classnames / cx
    className={active ? `tab-${tone}` : 'tab'}      conditional
    cva('btn', { variants: { size: {...} } })       cva
    class="card__title--muted"                      bem
    data-state="open"                               data-attribute

These matches are a secondary signal: they tell which variables (variant,
size, color, state) drive styling, independent of the style extractors.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .braces import balanced_body, split_key_value, split_top_level, unquote
from .masking import line_and_column

CLASS_UTILITIES = ("clsx", "classnames", "classNames", "cx", "cn", "twMerge", "cva")

SEMANTIC_DATA_ATTRIBUTES = frozenset(
    {
        "state", "variant", "size", "theme", "color", "intent", "tone", "active",
        "disabled", "selected", "orientation", "side", "align", "status",
    }
)

_TEMPLATE_CLASS = re.compile(r"className\s*=\s*\{`([^`]*\$\{[^`]+)`\}")
_CONDITIONAL_CLASS = re.compile(r"className\s*=\s*\{[^}]*\?\s*`([^`]*\$\{[^`]+)`[^}]*\}")
_UTILITY_CLASS = {
    name: re.compile(r"className\s*=\s*\{" + name + r"\s*\(([^)]*\$\{[^)]+)\)\}")
    for name in CLASS_UTILITIES
}
_CVA_CALL = re.compile(r"\bcva\s*\(")
_STATIC_CLASS_ATTR = re.compile(r"""(?<![\w-])(?:class|className)\s*=\s*(["'])([^"']*)\1""")
_BEM_CLASS = re.compile(
    r"^([a-z][a-z0-9]*(?:-[a-z0-9]+)*)(?:__([a-z0-9]+(?:-[a-z0-9]+)*))?(?:--([a-z0-9]+(?:-[a-z0-9]+)*))?$"
)
_DATA_ATTRIBUTE = re.compile(
    r"""(?<![\w-])data-([a-z][a-z0-9-]*)\s*=\s*(?:"([^"]*)"|'([^']*)'|\{([^}]*)\})"""
)
_SIMPLE_IDENT = re.compile(r"^([a-zA-Z_$][a-zA-Z0-9_$]*)")


@dataclass(frozen=True)
class ClassPatternMatch:
    """A class-name construct whose output depends on variables."""

    pattern: str
    structure: str
    variables: Tuple[str, ...]
    static_parts: Tuple[str, ...]
    line: int
    column: int
    context: str  # template-literal, clsx, classnames, cx, conditional, cva, bem, data-attribute


@dataclass(frozen=True)
class PatternTokenHint:
    potential_token_type: str  # variant, size, color, state, modifier, unknown
    confidence: str  # high, medium, low
    suggested_token_name: str = ""
    evidence: Tuple[str, ...] = field(default=())


def _utility_context(name: str) -> str:
    if name == "clsx":
        return "clsx"
    if name == "cx":
        return "cx"
    return "classnames"


def extract_simple_var_name(expression: str) -> str:
    """``prefix || 'btn'`` -> ``prefix``; ``variant && `...``` -> ``variant``."""
    cleaned = re.sub(r"\s*\|\|.*$", "", expression, flags=re.DOTALL)
    cleaned = re.sub(r"\s*&&.*$", "", cleaned, flags=re.DOTALL)
    cleaned = re.sub(r"\s*\?.*$", "", cleaned, flags=re.DOTALL).strip()
    match = _SIMPLE_IDENT.match(cleaned)
    return match.group(1) if match else expression


def parse_template_content(content: str) -> Tuple[str, List[str], List[str]]:
    """Split template-literal text into (structure, variables, static parts).

    ``btn-${size} ${variant || 'primary'}`` gives structure
    ``btn-{size} {variant}``, variables ``["size", "variant || 'primary'"]``
    and static parts ``["btn-", " "]``.
    """
    variables: List[str] = []
    static_parts: List[str] = []
    structure: List[str] = []
    current_static: List[str] = []
    i = 0
    n = len(content)

    while i < n:
        if content.startswith("${", i):
            if current_static:
                static_parts.append("".join(current_static))
                current_static = []
            depth = 1
            j = i + 2
            while j < n and depth > 0:
                if content[j] == "{":
                    depth += 1
                elif content[j] == "}":
                    depth -= 1
                j += 1
            expression = content[i + 2 : j - 1] if depth == 0 else content[i + 2 :]
            variables.append(expression)
            structure.append("{" + extract_simple_var_name(expression) + "}")
            i = j
        else:
            current_static.append(content[i])
            structure.append(content[i])
            i += 1

    if current_static:
        static_parts.append("".join(current_static))

    return "".join(structure), variables, static_parts


def extract_nested_template_literals(content: str) -> List[str]:
    """Every backtick template literal in ``content`` that interpolates something."""
    templates: List[str] = []
    i = 0
    n = len(content)
    while i < n:
        if content[i] != "`":
            i += 1
            continue
        j = i + 1
        depth = 0
        closed = False
        while j < n:
            ch = content[j]
            if ch == "\\":
                j += 2
                continue
            if content.startswith("${", j):
                depth += 1
                j += 2
                continue
            if ch == "}" and depth > 0:
                depth -= 1
            elif ch == "`" and depth == 0:
                closed = True
                break
            j += 1
        if closed:
            template = content[i + 1 : j]
            if "${" in template:
                templates.append(template)
        i = j + 1
    return templates


def _make_match(template: str, line: int, column: int, context: str) -> Optional[ClassPatternMatch]:
    structure, variables, static_parts = parse_template_content(template)
    if not variables:
        return None
    return ClassPatternMatch(
        pattern=template,
        structure=structure,
        variables=tuple(variables),
        static_parts=tuple(static_parts),
        line=line,
        column=column,
        context=context,
    )


def _line_patterns(line: str, line_num: int) -> List[ClassPatternMatch]:
    matches: List[ClassPatternMatch] = []

    for m in _TEMPLATE_CLASS.finditer(line):
        found = _make_match(m.group(1), line_num, m.start() + 1, "template-literal")
        if found:
            matches.append(found)

    for name, regex in _UTILITY_CLASS.items():
        for m in regex.finditer(line):
            for template in extract_nested_template_literals(m.group(1)):
                found = _make_match(template, line_num, m.start() + 1, _utility_context(name))
                if found:
                    matches.append(found)

    for m in _CONDITIONAL_CLASS.finditer(line):
        found = _make_match(m.group(1), line_num, m.start() + 1, "conditional")
        if found:
            matches.append(found)

    return matches


def _multiline_patterns(content: str) -> List[ClassPatternMatch]:
    matches: List[ClassPatternMatch] = []
    start = content.find("className")
    while start != -1:
        i = start + len("className")
        while i < len(content) and content[i] not in "{\"'":
            i += 1
        if i < len(content) and content[i] == "{":
            body = balanced_body(content, i)
            if body is not None and "\n" in body[0]:
                brace_content = body[0]
                context = "template-literal"
                for utility in CLASS_UTILITIES:
                    if utility + "(" in brace_content:
                        context = _utility_context(utility)
                        break
                if "?" in brace_content and ":" in brace_content:
                    context = "conditional"
                line, _ = line_and_column(content, start)
                for template in extract_nested_template_literals(brace_content):
                    found = _make_match(template, line, 1, context)
                    if found:
                        matches.append(found)
        start = content.find("className", start + 1)
    return matches


def _cva_patterns(content: str) -> List[ClassPatternMatch]:
    """Variant groups declared through ``cva(base, { variants: {...} })``."""
    matches: List[ClassPatternMatch] = []
    for call in _CVA_CALL.finditer(content):
        args = balanced_body(content, call.end() - 1)
        if args is None:
            continue
        for arg in split_top_level(args[0]):
            if not arg.startswith("{"):
                continue
            config = balanced_body(arg, 0)
            if config is None:
                continue
            for entry in split_top_level(config[0]):
                pair = split_key_value(entry)
                if pair is None or (unquote(pair[0]) or pair[0]) != "variants":
                    continue
                variants = pair[1]
                if not variants.startswith("{"):
                    continue
                variants_body = balanced_body(variants, 0)
                if variants_body is None:
                    continue
                line, column = line_and_column(content, call.start())
                for variant_entry in split_top_level(variants_body[0]):
                    variant_pair = split_key_value(variant_entry)
                    if variant_pair is None:
                        continue
                    name = unquote(variant_pair[0]) or variant_pair[0]
                    options: List[str] = []
                    if variant_pair[1].startswith("{"):
                        options_body = balanced_body(variant_pair[1], 0)
                        if options_body is not None:
                            for option in split_top_level(options_body[0]):
                                option_pair = split_key_value(option)
                                if option_pair is not None:
                                    options.append(unquote(option_pair[0]) or option_pair[0])
                    matches.append(
                        ClassPatternMatch(
                            pattern=f"cva:{name}",
                            structure="{" + name + "}",
                            variables=(name,),
                            static_parts=tuple(options),
                            line=line,
                            column=column,
                            context="cva",
                        )
                    )
    return matches


def _bem_patterns(content: str) -> List[ClassPatternMatch]:
    """BEM class names carrying an element or modifier part."""
    matches: List[ClassPatternMatch] = []
    for attr in _STATIC_CLASS_ATTR.finditer(content):
        line, column = line_and_column(content, attr.start())
        for class_name in attr.group(2).split():
            bem = _BEM_CLASS.match(class_name)
            if not bem or not (bem.group(2) or bem.group(3)):
                continue
            block, element, modifier = bem.groups()
            structure = "{block}"
            parts = [block]
            if element:
                structure += "__{element}"
                parts.append(element)
            variables: Tuple[str, ...] = ()
            if modifier:
                structure += "--{modifier}"
                parts.append(modifier)
                variables = ("modifier",)
            matches.append(
                ClassPatternMatch(
                    pattern=class_name,
                    structure=structure,
                    variables=variables,
                    static_parts=tuple(parts),
                    line=line,
                    column=column,
                    context="bem",
                )
            )
    return matches


def _data_attribute_patterns(content: str) -> List[ClassPatternMatch]:
    """``data-state``/``data-variant``-style attributes that drive styling."""
    matches: List[ClassPatternMatch] = []
    for m in _DATA_ATTRIBUTE.finditer(content):
        name = m.group(1)
        if name not in SEMANTIC_DATA_ATTRIBUTES:
            continue
        value = next((g for g in m.groups()[1:] if g is not None), "").strip()
        line, column = line_and_column(content, m.start())
        matches.append(
            ClassPatternMatch(
                pattern=m.group(0),
                structure=f"data-{name}={{{name}}}",
                variables=(name,),
                static_parts=(value,) if value else (),
                line=line,
                column=column,
                context="data-attribute",
            )
        )
    return matches


def extract_class_patterns(content: str) -> List[ClassPatternMatch]:
    """All dynamic class patterns in ``content``, de-duplicated by (line, pattern)."""
    matches: List[ClassPatternMatch] = []
    for index, line in enumerate(content.split("\n"), 1):
        matches.extend(_line_patterns(line, index))
    matches.extend(_multiline_patterns(content))
    matches.extend(_cva_patterns(content))
    matches.extend(_bem_patterns(content))
    matches.extend(_data_attribute_patterns(content))

    seen = set()
    unique: List[ClassPatternMatch] = []
    for match in matches:
        key = (match.line, match.pattern)
        if key in seen:
            continue
        seen.add(key)
        unique.append(match)
    return unique


def analyze_pattern_for_tokens(match: ClassPatternMatch) -> PatternTokenHint:
    """Guess which kind of design token a pattern's variables select."""
    names = [v.lower() for v in match.variables]
    if match.context == "cva":
        names.extend(s.lower() for s in match.static_parts)

    def any_contains(*needles: str) -> Tuple[str, ...]:
        return tuple(n for n in names if any(needle in n for needle in needles))

    for token_type, needles in (
        ("variant", ("variant", "type", "kind", "intent")),
        ("size", ("size", "sz")),
        ("color", ("color", "theme", "palette", "tone")),
        ("state", ("state", "active", "disabled", "selected")),
    ):
        evidence = any_contains(*needles)
        if evidence:
            return PatternTokenHint(token_type, "high", evidence=evidence)

    if match.context == "bem" and "modifier" in match.variables:
        return PatternTokenHint("modifier", "medium", suggested_token_name=match.static_parts[-1])

    static_lower = "".join(match.static_parts).lower()
    if "btn" in static_lower or "button" in static_lower:
        return PatternTokenHint("variant", "medium")
    if "text" in static_lower or "bg" in static_lower:
        return PatternTokenHint("color", "medium")

    return PatternTokenHint("unknown", "low")
