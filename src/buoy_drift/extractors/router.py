"""Template types and the extraction router.

Every supported template label belongs to a syntax family. The family decides
which extractors run:

  jsx        JSX style objects + HTML-like forms
  vue        ``:style`` / ``v-bind:style`` bindings + HTML-like forms
  angular    ``[style.x]`` bindings, ``[ngStyle]`` + HTML-like forms
  svelte     ``style:x`` directives + HTML-like forms
  html-like  ``style`` attributes and ``<style>`` blocks
  css        the whole file is one stylesheet

Adding a template type means adding one ``TemplateConfig`` entry below.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

from ..exceptions import UnsupportedTemplateError
from ..logging_config import get_logger
from ..models import StyleFragment
from .directive_style import extract_directive_styles, extract_vue_style_bindings
from .html_style import extract_all_html_styles
from .jsx_style import extract_jsx_style_objects
from .svelte_style import extract_svelte_style_directives

logger = get_logger(__name__)

SYNTAX_FAMILIES = ("jsx", "vue", "angular", "svelte", "html-like", "css")


@dataclass(frozen=True)
class TemplateConfig:
    """A template label, its syntax family and the file suffixes that imply it."""

    name: str
    family: str = "html-like"
    extensions: Tuple[str, ...] = ()


def _t(name: str, *extensions: str, family: str = "html-like") -> Tuple[str, TemplateConfig]:
    return name, TemplateConfig(name=name, family=family, extensions=extensions)


TEMPLATES: Dict[str, TemplateConfig] = dict(
    [
        # Server-side templates
        _t("blade", ".blade.php"),
        _t("erb", ".html.erb", ".erb"),
        _t("twig", ".html.twig", ".twig"),
        _t("php", ".php", ".phtml"),
        _t("html", ".html", ".htm"),
        _t("njk", ".njk", ".nunjucks"),
        _t("razor", ".cshtml", ".razor"),
        _t("hbs", ".hbs", ".handlebars"),
        _t("mustache", ".mustache"),
        _t("ejs", ".ejs"),
        _t("pug", ".pug", ".jade"),
        _t("liquid", ".liquid"),
        _t("slim", ".slim"),
        _t("haml", ".haml"),
        _t("jinja", ".jinja", ".jinja2", ".j2"),
        _t("django", ".djhtml"),
        _t("thymeleaf"),
        _t("freemarker", ".ftl", ".ftlh"),
        _t("go-template", ".gohtml", ".tmpl"),
        _t("edge", ".edge"),
        _t("eta", ".eta"),
        _t("heex", ".heex", ".leex"),
        _t("velocity", ".vm"),
        _t("xslt", ".xsl", ".xslt"),
        # Component frameworks
        _t("astro", ".astro", family="jsx"),
        _t("solid", family="jsx"),
        _t("qwik", family="jsx"),
        _t("marko", ".marko"),
        _t("lit"),
        _t("fast"),
        _t("angular", ".component.html", family="angular"),
        _t("stencil"),
        _t("alpine"),
        _t("htmx"),
        _t("react", ".tsx", ".jsx", family="jsx"),
        _t("preact", family="jsx"),
        _t("vue", ".vue", family="vue"),
        _t("svelte", ".svelte", family="svelte"),
        # Static site generators
        _t("hugo"),
        _t("jekyll"),
        _t("eleventy", ".11ty.html"),
        _t("shopify"),
        # Documents and data
        _t("markdown", ".md", ".markdown"),
        _t("mdx", ".mdx", family="jsx"),
        _t("asciidoc", ".adoc", ".asciidoc"),
        _t("svg", ".svg"),
        _t("yaml-template", ".yaml.tmpl", ".yml.tmpl"),
        _t("json-template", ".json.tmpl"),
        # Stylesheets
        _t("css", ".css", family="css"),
        _t("scss", ".scss", family="css"),
        _t("sass", ".sass", family="css"),
        _t("less", ".less", family="css"),
    ]
)

TEMPLATE_TYPES = tuple(TEMPLATES)


def get_template_config(template_type: str) -> TemplateConfig:
    """Look up a template label. Raises UnsupportedTemplateError if unknown."""
    try:
        return TEMPLATES[template_type]
    except KeyError:
        raise UnsupportedTemplateError(template_type, sorted(TEMPLATES)) from None


def get_syntax_family(template_type: str) -> str:
    return get_template_config(template_type).family


def extract_css_file_styles(content: str) -> List[StyleFragment]:
    """A stylesheet is a single style block starting at line 1, column 1."""
    if not content.strip():
        return []
    return [StyleFragment(css=content, line=1, column=1, context="style-block")]


def _dedupe(fragments: List[StyleFragment]) -> List[StyleFragment]:
    seen = set()
    unique: List[StyleFragment] = []
    for fragment in fragments:
        key = (fragment.line, fragment.column, fragment.css)
        if key in seen:
            continue
        seen.add(key)
        unique.append(fragment)
    return unique


def extract_styles(content: str, template_type: str) -> List[StyleFragment]:
    """Run every extractor the template's family calls for.

    Framework-specific fragments come before the HTML-like ones. A fragment
    found by two extractors at the same position is kept once.
    """
    family = get_syntax_family(template_type)

    if family == "css":
        return extract_css_file_styles(content)

    if family == "jsx":
        fragments = extract_jsx_style_objects(content)
    elif family == "vue":
        fragments = extract_vue_style_bindings(content)
    elif family == "angular":
        fragments = extract_directive_styles(content)
    elif family == "svelte":
        fragments = extract_svelte_style_directives(content)
    else:
        fragments = []

    fragments = _dedupe(fragments + extract_all_html_styles(content))
    logger.debug(f"{template_type}: {len(fragments)} style fragments")
    return fragments
