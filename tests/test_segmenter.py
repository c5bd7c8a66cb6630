from __future__ import annotations

import re
from concurrent.futures import ThreadPoolExecutor

import pytest

from pyparsedtext.pattern_spec import PatternSpec
from pyparsedtext.patterns import PATTERNS
from pyparsedtext.stages.matcher import RegexMatcher
from pyparsedtext.stages.segmenter import PatternSegmenter, split_span
from pyparsedtext.types import Occurrence, Span

SAMPLES = [
    "",
    "a",
    "aaaa",
    "hello my website is http://foo.bar, bar is good.",
    "ping @michel about #release at 555-123-4567 or jane@example.com",
    "ünïcødé @zoë #día www.example.org/x.",
    "no matches here",
]

SPEC_SETS = [
    [],
    [PatternSpec(pattern=re.compile("a"))],
    [PatternSpec(pattern=re.compile("a*"))],
    [PatternSpec(pattern=PATTERNS["url"]), PatternSpec(pattern=re.compile("bar"))],
    [PatternSpec(pattern=re.compile("bar")), PatternSpec(pattern=PATTERNS["url"])],
    [
        PatternSpec(pattern=PATTERNS["email"]),
        PatternSpec(pattern=PATTERNS["mention"], render_text=lambda m, g: "M"),
        PatternSpec(pattern=PATTERNS["hashtag"], max_match_count=1),
        PatternSpec(pattern=PATTERNS["phone"]),
        PatternSpec(pattern=PATTERNS["url"]),
    ],
    [PatternSpec(pattern=re.compile(r"\w+"), max_match_count=2)],
]


@pytest.mark.parametrize("text", SAMPLES)
@pytest.mark.parametrize("specs", SPEC_SETS)
def test_spans_concatenate_to_input(text, specs):
    spans = PatternSegmenter().segment(text, specs)

    assert "".join(span.text for span in spans) == text


@pytest.mark.parametrize("text", SAMPLES)
@pytest.mark.parametrize("specs", SPEC_SETS)
def test_only_unclaimed_spans_are_empty(text, specs):
    spans = PatternSegmenter().segment(text, specs)

    assert all(span.text for span in spans if span.claimed)
    if len(spans) > 1:
        assert all(span.text for span in spans)


def test_later_pattern_never_reclaims_a_region():
    specs = [
        PatternSpec(pattern=re.compile("foo.bar"), props={"by": "first"}),
        PatternSpec(pattern=re.compile("o"), props={"by": "second"}),
    ]

    spans = PatternSegmenter().segment("foo.bar boo", specs)

    assert [(s.text, s.props.get("by")) for s in spans] == [
        ("foo.bar", "first"),
        (" b", None),
        ("o", "second"),
        ("o", "second"),
    ]


def test_split_span_without_occurrences_returns_span():
    span = Span(text="abc")

    assert split_span(span, PatternSpec(pattern=re.compile("x")), []) == [span]


def test_split_span_omits_empty_remainders():
    spec = PatternSpec(pattern=re.compile("b"))
    occurrences = [
        Occurrence(start=0, end=1, full_match="b", groups=("b",), rendered_text="B"),
        Occurrence(start=1, end=2, full_match="b", groups=("b",), rendered_text="B"),
    ]

    spans = split_span(Span(text="bbc"), spec, occurrences)

    assert [(s.text, s.claimed, s.children) for s in spans] == [
        ("b", True, "B"),
        ("b", True, "B"),
        ("c", False, "c"),
    ]


def test_parse_drops_empty_spans():
    chunks = PatternSegmenter().parse("", [])

    assert chunks == []


def test_custom_matcher_is_used():
    class FirstCharMatcher:
        def find_occurrences(self, text, spec, *, limit=None, trace=None):
            return [Occurrence(start=0, end=1, full_match=text[0], rendered_text="#")]

    chunks = PatternSegmenter(FirstCharMatcher()).parse(
        "abc", [PatternSpec(pattern=re.compile("unused"))]
    )

    assert [c.children for c in chunks] == ["#", "bc"]


def test_shared_pattern_across_threads():
    pattern = re.compile("lol")
    text = " ".join(["lol"] * 50)
    specs = [PatternSpec(pattern=pattern, render_text=lambda m, g: "x")]

    def run(_):
        return "".join(c.children for c in PatternSegmenter().parse(text, specs))

    with ThreadPoolExecutor(max_workers=4) as pool:
        results = list(pool.map(run, range(16)))

    assert set(results) == {" ".join(["x"] * 50)}


class TestRegexMatcher:
    def test_offsets_are_relative_to_span(self):
        occurrences = RegexMatcher().find_occurrences(
            "xaxa", PatternSpec(pattern=re.compile("a"))
        )

        assert [(o.start, o.end) for o in occurrences] == [(1, 2), (3, 4)]

    def test_limit(self):
        occurrences = RegexMatcher().find_occurrences(
            "aaaa", PatternSpec(pattern=re.compile("a")), limit=3
        )

        assert len(occurrences) == 3

    def test_rendered_text_defaults_to_match(self):
        (occurrence,) = RegexMatcher().find_occurrences(
            "xay", PatternSpec(pattern=re.compile("a"))
        )

        assert occurrence.rendered_text == "a"
        assert occurrence.groups == ("a",)

    def test_duck_typed_pattern(self):
        class Needle:
            pattern = "needle"

            def search(self, string):
                return re.search("needle", string)

        occurrences = RegexMatcher().find_occurrences(
            "hay needle hay needle", PatternSpec(pattern=Needle())
        )

        assert [o.start for o in occurrences] == [4, 15]

    def test_search_only_pattern_steps_past_empty_matches(self):
        class LazyA:
            pattern = "a*?b|"

            def search(self, string):
                return re.search("a*?b|", string)

        occurrences = RegexMatcher().find_occurrences("xaab", PatternSpec(pattern=LazyA()))

        assert [(o.start, o.end, o.full_match) for o in occurrences] == [(1, 4, "aab")]
