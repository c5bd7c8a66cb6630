from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from ..types import Occurrence

if TYPE_CHECKING:
    from ..pattern_spec import PatternSpec
    from ..types import Trace
    from .protocols import MatchLike, TextPattern

logger = logging.getLogger(__name__)

Renderer = Callable[[str, tuple[Any, ...]], Any]


class RegexMatcher:
    """Finds the occurrences of one PatternSpec inside a span.

    The scan cursor is a local offset, so a pattern object shared between
    specs, threads or earlier callers never leaks position state into a scan.
    After every occurrence the pattern is searched again on the remaining
    text only: ``^`` and lookbehinds see the remainder, not the whole span.
    """

    def find_occurrences(
        self,
        text: str,
        spec: PatternSpec,
        *,
        limit: int | None = None,
        trace: Trace | None = None,
    ) -> list[Occurrence]:
        occurrences: list[Occurrence] = []
        render = self._renderer(spec, trace)
        pos = 0
        while pos < len(text):
            if limit is not None and len(occurrences) >= limit:
                break
            found = _next_nonempty_match(spec.pattern, text[pos:])
            if found is None:
                break
            offset, match = found
            start, end = offset + match.start(), offset + match.end()
            full_match = match.group()
            groups = (full_match, *match.groups())
            occurrences.append(
                Occurrence(
                    start=pos + start,
                    end=pos + end,
                    full_match=full_match,
                    groups=groups,
                    rendered_text=render(full_match, groups),
                )
            )
            pos += end
        return occurrences

    @staticmethod
    def _renderer(spec: PatternSpec, trace: Trace | None) -> Renderer:
        render_text = spec.render_text
        if render_text is None:
            return _identity
        if callable(render_text):
            return render_text
        message = (
            f"render_text for pattern {spec.name!r} is not callable "
            f"({type(render_text).__name__}); using the matched text"
        )
        logger.debug(message)
        if trace is not None and message not in trace.warnings:
            trace.warnings.append(message)
        return _identity


def _next_nonempty_match(
    pattern: TextPattern, remainder: str
) -> tuple[int, MatchLike] | None:
    """Return the first non-empty match in ``remainder`` and its base offset.

    Empty matches claim nothing. ``finditer`` keeps a non-empty match that
    starts where an empty one did, e.g. ``(?:|ab)`` on ``"ab"``; search-only
    patterns step one character past an empty match.
    """
    finditer = getattr(pattern, "finditer", None)
    if finditer is not None:
        for match in finditer(remainder):
            if match.end() > match.start():
                return 0, match
        return None
    offset = 0
    while offset < len(remainder):
        match = pattern.search(remainder[offset:])
        if match is None:
            return None
        if match.end() > match.start():
            return offset, match
        offset += match.start() + 1
    return None


def _identity(full_match: str, _groups: tuple[Any, ...]) -> str:
    return full_match
