from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from ..runtime.tracing import trace_timing
from ..types import Chunk, Span
from .matcher import RegexMatcher

if TYPE_CHECKING:
    from ..pattern_spec import PatternSpec
    from ..types import Occurrence, Trace
    from .protocols import Matcher

logger = logging.getLogger(__name__)


def split_span(span: Span, spec: PatternSpec, occurrences: list[Occurrence]) -> list[Span]:
    """Rewrite one unclaimed span around its occurrences.

    Produces prefix, claimed occurrence, gap, ..., suffix; empty remainders
    are omitted.
    """
    if not occurrences:
        return [span]
    out: list[Span] = []
    cursor = 0
    for occ in occurrences:
        if occ.start > cursor:
            out.append(Span(text=span.text[cursor : occ.start]))
        out.append(
            Span(
                text=span.text[occ.start : occ.end],
                claimed=True,
                rendered_text=occ.rendered_text,
                on_press=spec.on_press,
                on_long_press=spec.on_long_press,
                props=spec.props,
            )
        )
        cursor = occ.end
    if cursor < len(span.text):
        out.append(Span(text=span.text[cursor:]))
    return out


def span_to_chunk(span: Span) -> Chunk:
    if not span.claimed:
        return Chunk(children=span.text)
    return Chunk(
        children=span.children,
        on_press=span.on_press,
        on_long_press=span.on_long_press,
        props=dict(span.props),
        text=span.text,
    )


class PatternSegmenter:
    """Applies pattern specs in order to a progressively split span list.

    A span claimed by an earlier spec is never scanned by a later one, so
    the first spec wins every overlapping region.
    """

    def __init__(self, matcher: Matcher | None = None) -> None:
        self.matcher = matcher or RegexMatcher()

    def segment(
        self, text: str, specs: Sequence[PatternSpec], trace: Trace | None = None
    ) -> list[Span]:
        spans = [Span(text=text)]
        for spec in specs:
            with trace_timing(trace, "match", spec.name) as details:
                spans, matched = self._apply(spans, spec, trace)
                details["matches"] = matched
            logger.debug("Pattern %s claimed %d span(s)", spec.name, matched)
        return spans

    def _apply(
        self, spans: list[Span], spec: PatternSpec, trace: Trace | None
    ) -> tuple[list[Span], int]:
        # max_match_count is a budget for the whole pass, not per span.
        budget = spec.max_match_count
        matched = 0
        out: list[Span] = []
        for span in spans:
            if span.claimed or (budget is not None and matched >= budget):
                out.append(span)
                continue
            limit = None if budget is None else budget - matched
            occurrences = self.matcher.find_occurrences(
                span.text, spec, limit=limit, trace=trace
            )
            matched += len(occurrences)
            out.extend(split_span(span, spec, occurrences))
        return out, matched

    def parse(
        self, text: str, specs: Sequence[PatternSpec], trace: Trace | None = None
    ) -> list[Chunk]:
        spans = self.segment(text, specs, trace)
        with trace_timing(trace, "chunk", "to_chunks") as details:
            chunks = [span_to_chunk(span) for span in spans if span.text]
            details["chunks"] = len(chunks)
        if trace is not None:
            trace.spans = spans
        return chunks
