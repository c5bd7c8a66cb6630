from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ExtractionConfig:
    """User-facing configuration for a TextExtraction.

    Keep this frozen+hashable so it can be shared between extractions.
    """

    # Behavior toggles
    return_trace: bool = False
    enable_deprecation_warnings: bool = False

    # re flags applied when a pattern is given as a plain string
    pattern_flags: int = 0
