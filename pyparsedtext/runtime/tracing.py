from __future__ import annotations

import time
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from ..types import Trace, TraceEvent


@contextmanager
def trace_timing(
    trace: Trace | None, stage: str, name: str, **details: Any
) -> Iterator[dict[str, Any]]:
    """Time the enclosed block and record it as a TraceEvent.

    Yields the details dict so the block can attach results (e.g. match
    counts) before the event is stored. With ``trace=None`` nothing is
    recorded.
    """
    start = time.perf_counter()
    try:
        yield details
    finally:
        if trace is not None:
            ms = (time.perf_counter() - start) * 1000.0
            trace.events.append(
                TraceEvent(stage=stage, name=name, ms=ms, details=dict(details))  # type: ignore[arg-type]
            )
