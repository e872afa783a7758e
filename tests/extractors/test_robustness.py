"""Extractors and the file scanner must survive truncated and garbled markup."""

import random

import pytest

from buoy_drift.extractors.router import extract_styles
from buoy_drift.scanning.scanner import scan_file

# One template type per syntax family
FAMILY_SAMPLES = {
    "react": (
        "export const Card = () => (\n"
        "  <div style={{ color: '#ff0000', margin: `${gap}px`, border: { top: 1 } }}>\n"
        "    {/* <p style={{ color: 'blue' }} /> */}\n"
        '    <span className="bg-[#fff] p-[3px]" style="color: rgb(1, 2, 3)" />\n'
        "  </div>\n"
        ");\n"
    ),
    "vue": (
        "<template>\n"
        "  <div :style=\"{ color: '#ff0000', 'padding': '8px' }\" v-bind:style=\"`color: ${c}`\">\n"
        '    <p style="background: #fff">x</p>\n'
        "  </div>\n"
        "</template>\n"
        "<style scoped>\n.a { color: #123; }\n</style>\n"
    ),
    "angular": (
        "<div [style.color]=\"'#ff0000'\" [style.width.px]=\"120\"\n"
        "     [ngStyle]=\"{ 'background-color': '#fff', padding: '4px' }\">\n"
        "  <!-- <div style=\"color: red\"> -->\n"
        "</div>\n"
    ),
    "svelte": (
        "<script>let dark = true;</script>\n"
        "<div style:color={'#ff0000'} style:--accent|important={dark ? '#000' : '#fff'}\n"
        "     style:padding=\"8px\" style:margin>\n"
        "</div>\n"
    ),
    "html": (
        "<html><head><style><![CDATA[ a { color: #abc; } ]]></style></head>\n"
        "<body style='margin: 0; color: hsl(0, 100%, 50%)'>\n"
        '<textarea style="color: #fff"></textarea><div class="text-[#333]/50"></div>\n'
        "</body></html>\n"
    ),
    "css": (
        "/**\n * Palette\n */\n"
        "* { color: #ff0000; }\n"
        ".btn { @apply bg-[#ff0000]; --brand: #000; background: rgba(0, 0, 0, .5); }\n"
    ),
}

PIECES = [
    "<", ">", "/>", "</", "<div", "<style>", "</style>", "<script>", "</script>",
    "<!--", "-->", "<textarea>", "<![CDATA[", "]]>", "style=", "style={", "style={{",
    ":style=", "v-bind:style=", "[style.color]=", "[ngStyle]=", "style:color=",
    "style:--x|important=", "{", "}", "{{", "}}", "(", ")", "[", "]", "'", '"', "`",
    "${", "\\", "/*", "*/", "//", "*", ":", ";", ",", "\n", " ", "color", "#fff",
    "#ff0000", "#12345", "rgb(1,2,3)", "hsl(", "var(--a)", "bg-[#fff]", "p-[3px]",
    "padding: 8px", "...spread", "[key]", "@apply", "--", "theme(", "\0",
]


def _garble(rng, sample):
    chars = list(sample)
    for _ in range(rng.randint(1, 8)):
        if not chars:
            break
        index = rng.randrange(len(chars))
        action = rng.random()
        if action < 0.4:
            del chars[index]
        elif action < 0.7:
            chars.insert(index, rng.choice("{}[]()<>'\"`:;=/*\n"))
        else:
            chars[index] = rng.choice(PIECES)
    return "".join(chars)


def _noise(rng):
    return "".join(rng.choice(PIECES) for _ in range(rng.randint(0, 60)))


def _check(content, template_type):
    fragments = extract_styles(content, template_type)
    assert all(f.line >= 1 and f.column >= 1 for f in fragments)
    signals = scan_file(content, "fuzz", template_type)
    assert all(s.line >= 1 and (s.column is None or s.column >= 1) for s in signals)


@pytest.mark.parametrize("template_type", sorted(FAMILY_SAMPLES))
class TestGarbledInput:
    def test_every_prefix(self, template_type):
        sample = FAMILY_SAMPLES[template_type]
        for end in range(len(sample) + 1):
            _check(sample[:end], template_type)

    def test_random_edits(self, template_type):
        rng = random.Random(f"edits-{template_type}")
        sample = FAMILY_SAMPLES[template_type]
        for _ in range(200):
            _check(_garble(rng, sample), template_type)

    def test_random_noise(self, template_type):
        rng = random.Random(f"noise-{template_type}")
        for _ in range(200):
            _check(_noise(rng), template_type)

    @pytest.mark.slow
    def test_random_noise_long_run(self, template_type):
        rng = random.Random(f"long-{template_type}")
        for _ in range(5000):
            _check(_noise(rng) + _garble(rng, FAMILY_SAMPLES[template_type]), template_type)
