from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import replace
from typing import Any

from .extraction_config import ExtractionConfig
from .pattern_spec import PatternSpec, load_pattern_specs
from .stages.protocols import Segmenter
from .stages.segmenter import PatternSegmenter
from .types import Chunk, ExtractionResult, Trace

logger = logging.getLogger(__name__)


class TextExtraction:
    """Splits ``text`` into chunks claimed by an ordered list of patterns.

    Example:
        >>> extraction = TextExtraction("hello foo", [{"pattern": r"foo"}])
        >>> [chunk.children for chunk in extraction.parse()]
        ['hello ', 'foo']
    """

    def __init__(
        self,
        text: str,
        patterns: Iterable[PatternSpec | Mapping[str, Any]] | None = None,
        *,
        config: ExtractionConfig | None = None,
        segmenter: Segmenter | None = None,
    ) -> None:
        self.text = text
        self.config = config or ExtractionConfig()
        self._pattern_items = list(patterns or ())
        self.patterns = load_pattern_specs(self._pattern_items, config=self.config)
        self.segmenter = segmenter or PatternSegmenter()

    def _specs_for(self, cfg: ExtractionConfig) -> list[PatternSpec]:
        # Mappings are reloaded when an override changes how they are read.
        if (
            cfg.pattern_flags == self.config.pattern_flags
            and cfg.enable_deprecation_warnings
            == self.config.enable_deprecation_warnings
        ):
            return self.patterns
        return load_pattern_specs(self._pattern_items, config=cfg)

    def run(self, **overrides: Any) -> ExtractionResult:
        """Parse the text; ``overrides`` replace ExtractionConfig fields."""
        cfg = replace(self.config, **overrides) if overrides else self.config
        specs = self._specs_for(cfg)
        trace = Trace()
        logger.debug("Extracting %d chars with %d pattern(s)", len(self.text), len(specs))
        chunks = self.segmenter.parse(self.text, specs, trace)
        return ExtractionResult(
            chunks=chunks,
            spans=list(trace.spans or []),
            trace=trace if cfg.return_trace else None,
        )

    def parse(self) -> list[Chunk]:
        return self.run().chunks

    def __call__(self) -> list[Chunk]:
        return self.parse()


def parse(
    text: str,
    patterns: Iterable[PatternSpec | Mapping[str, Any]] | None = None,
    **config_overrides: Any,
) -> list[Chunk]:
    """One-shot helper: ``TextExtraction(text, patterns).parse()``."""
    config = ExtractionConfig(**config_overrides)
    return TextExtraction(text, patterns, config=config).parse()
