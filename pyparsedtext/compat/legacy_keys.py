"""Translation of mapping keys used by older pattern definitions."""

from __future__ import annotations

import os
import sys
import warnings
from collections.abc import Mapping
from typing import Any

from ..extraction_config import ExtractionConfig

_PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__))) + os.sep

# camelCase keys are accepted silently; they are the documented alternative
# spelling for configuration files shared with JavaScript front ends.
CAMEL_CASE_KEYS = {
    "renderText": "render_text",
    "onPress": "on_press",
    "onLongPress": "on_long_press",
    "maxMatchCount": "max_match_count",
}

# Deprecated spellings, translated with an optional DeprecationWarning.
DEPRECATED_KEYS = {
    "nonExhaustiveModeMaxMatchCount": "max_match_count",
    "non_exhaustive_mode_max_match_count": "max_match_count",
}


def maybe_warn(cfg: ExtractionConfig, message: str) -> None:
    if not cfg.enable_deprecation_warnings:
        return
    # Attribute the warning to the first frame outside this package.
    frame = sys._getframe()
    stacklevel = 1
    while frame is not None and frame.f_code.co_filename.startswith(_PACKAGE_DIR):
        frame = frame.f_back
        stacklevel += 1
    warnings.warn(message, DeprecationWarning, stacklevel=stacklevel)


def translate_keys(mapping: Mapping[str, Any], cfg: ExtractionConfig) -> dict[str, Any]:
    """Return a copy of ``mapping`` with every key in snake_case.

    An explicit snake_case key wins over its camelCase or deprecated alias.
    """
    out: dict[str, Any] = {}
    aliased: dict[str, Any] = {}
    for key, value in mapping.items():
        if key in CAMEL_CASE_KEYS:
            aliased.setdefault(CAMEL_CASE_KEYS[key], value)
        elif key in DEPRECATED_KEYS:
            target = DEPRECATED_KEYS[key]
            maybe_warn(cfg, f"Pattern key '{key}' is deprecated; use '{target}'")
            aliased.setdefault(target, value)
        else:
            out[key] = value
    for key, value in aliased.items():
        out.setdefault(key, value)
    return out
