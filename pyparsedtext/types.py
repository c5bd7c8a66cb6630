from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Literal

PressCallback = Callable[[str], Any]


@dataclass(frozen=True)
class Span:
    """A contiguous slice of the input tracked while patterns are applied.

    Concatenating ``text`` over the span sequence always yields the input.
    """

    text: str
    claimed: bool = False
    rendered_text: str | None = None
    on_press: PressCallback | None = None
    on_long_press: PressCallback | None = None
    props: Mapping[str, Any] = field(default_factory=dict)

    @property
    def children(self) -> str:
        if self.rendered_text is None:
            return self.text
        return self.rendered_text


@dataclass(frozen=True)
class Occurrence:
    """One match of a pattern; offsets refer to the span being scanned."""

    start: int
    end: int
    full_match: str
    groups: tuple[str | None, ...] = ()
    rendered_text: str | None = None


@dataclass(frozen=True)
class Chunk:
    """Public output unit: rendered text plus optional callbacks."""

    children: str
    on_press: PressCallback | None = None
    on_long_press: PressCallback | None = None
    props: Mapping[str, Any] = field(default_factory=dict)
    # Source substring; differs from ``children`` when render_text was used.
    text: str | None = None

    @property
    def matched(self) -> bool:
        return self.text is not None

    def press(self) -> Any:
        if self.on_press is None:
            return None
        return self.on_press(self.text if self.text is not None else self.children)

    def long_press(self) -> Any:
        if self.on_long_press is None:
            return None
        return self.on_long_press(
            self.text if self.text is not None else self.children
        )

    def to_dict(self) -> dict[str, Any]:
        """Return only the values that are present, props included."""
        out: dict[str, Any] = dict(self.props)
        out["children"] = self.children
        if self.on_press is not None:
            out["on_press"] = self.on_press
        if self.on_long_press is not None:
            out["on_long_press"] = self.on_long_press
        return out


@dataclass(frozen=True)
class TraceEvent:
    stage: Literal["match", "segment", "chunk"]
    name: str
    ms: float
    details: dict[str, Any] = field(default_factory=dict)


@dataclass
class Trace:
    """Structured debugging output."""

    events: list[TraceEvent] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    # Optional snapshot
    spans: list[Span] | None = None


@dataclass
class ExtractionResult:
    chunks: list[Chunk]
    spans: list[Span] = field(default_factory=list)
    trace: Trace | None = None

    @property
    def text(self) -> str:
        """Rendered concatenation of all chunks."""
        return "".join(chunk.children for chunk in self.chunks)
