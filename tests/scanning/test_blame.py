"""Tests for git blame author attribution."""

from buoy_drift.models import DriftSignal
from buoy_drift.scanning.blame import (
    UNKNOWN_AUTHOR,
    GitBlame,
    enrich_with_authors,
    parse_line_porcelain,
)

SHA_A = "a" * 40
SHA_B = "b" * 40

PORCELAIN = "\n".join(
    [
        f"{SHA_A} 1 1 2",
        "author Ada Lovelace",
        "author-mail <ada@example.com>",
        "summary Initial commit",
        "filename src/App.tsx",
        "\tconst a = 1;",
        f"{SHA_A} 2 2",
        "author Ada Lovelace",
        "filename src/App.tsx",
        "\tconst b = '#fff';",
        f"{SHA_B} 5 3 1",
        "author Grace Hopper",
        "filename src/App.tsx",
        "\tauthor fake-line-content",
    ]
)


def _make_signal(file="src/App.tsx", line=2):
    return DriftSignal(
        type="hardcoded-color",
        severity="warning",
        file=file,
        line=line,
        value="#fff",
        message="Hardcoded color #fff",
    )


class TestParseLinePorcelain:
    def test_maps_final_lines_to_authors(self):
        authors = parse_line_porcelain(PORCELAIN)
        assert authors == {1: "Ada Lovelace", 2: "Ada Lovelace", 3: "Grace Hopper"}

    def test_empty_output(self):
        assert parse_line_porcelain("") == {}


class TestEnrichWithAuthors:
    def test_known_and_unknown_lines(self):
        lookup = {("src/App.tsx", 2): "Ada"}
        signals = [_make_signal(line=2), _make_signal(line=9)]
        enriched = enrich_with_authors(signals, lambda f, l: lookup.get((f, l)))
        assert [s.author for s in enriched] == ["Ada", UNKNOWN_AUTHOR]
        assert signals[0].author is None

    def test_detected_at_preserved(self):
        signal = _make_signal()
        enriched = enrich_with_authors([signal], lambda f, l: "Ada")
        assert enriched[0].detected_at == signal.detected_at

    def test_failing_lookup_does_not_stop_other_files(self):
        calls = []

        def lookup(file, line):
            calls.append(file)
            if file == "bad.tsx":
                raise RuntimeError("boom")
            return "Ada"

        signals = [
            _make_signal(file="bad.tsx", line=1),
            _make_signal(file="bad.tsx", line=2),
            _make_signal(file="good.tsx", line=1),
        ]
        enriched = enrich_with_authors(signals, lookup)
        assert [s.author for s in enriched] == [UNKNOWN_AUTHOR, UNKNOWN_AUTHOR, "Ada"]
        assert calls.count("bad.tsx") == 1

    def test_empty(self):
        assert enrich_with_authors([], lambda f, l: "x") == []


class TestGitBlame:
    def test_outside_repository_has_no_authors(self, tmp_path):
        (tmp_path / "a.css").write_text("a{}", encoding="utf-8")
        blame = GitBlame(str(tmp_path))
        assert blame("a.css", 1) is None
