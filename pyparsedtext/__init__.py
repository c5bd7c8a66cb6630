"""pyparsedtext - split text into pattern-claimed chunks for rich rendering."""

from .extraction import TextExtraction, parse
from .extraction_config import ExtractionConfig
from .pattern_spec import PatternSpec, load_pattern_specs, normalize_max_match_count
from .patterns import PATTERNS, UnknownPatternError
from .types import Chunk, ExtractionResult, Trace

# Version info
try:
    from ._version import __version__, __version_tuple__
except ImportError:
    __version__ = "0.0.0"
    __version_tuple__ = (0, 0, 0)

__all__ = [
    "__version__",
    "TextExtraction",
    "parse",
    "ExtractionConfig",
    "PatternSpec",
    "load_pattern_specs",
    "normalize_max_match_count",
    "PATTERNS",
    "UnknownPatternError",
    "Chunk",
    "ExtractionResult",
    "Trace",
]
