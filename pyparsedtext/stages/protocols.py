from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from ..pattern_spec import PatternSpec
    from ..types import Chunk, Occurrence, Span, Trace


class MatchLike(Protocol):
    def start(self) -> int: ...
    def end(self) -> int: ...
    def group(self) -> Any: ...
    def groups(self) -> tuple[Any, ...]: ...


class TextPattern(Protocol):
    """Anything usable as ``PatternSpec.pattern``.

    Compiled ``re`` and ``regex`` patterns both satisfy it.
    """

    def search(self, string: str) -> MatchLike | None: ...


class Matcher(Protocol):
    def find_occurrences(
        self,
        text: str,
        spec: PatternSpec,
        *,
        limit: int | None = None,
        trace: Trace | None = None,
    ) -> list[Occurrence]: ...


class Segmenter(Protocol):
    def segment(
        self, text: str, specs: list[PatternSpec], trace: Trace | None = None
    ) -> list[Span]: ...

    def parse(
        self, text: str, specs: list[PatternSpec], trace: Trace | None = None
    ) -> list[Chunk]: ...
