"""Bundled patterns for common rich-text entities.

The patterns are compiled with the ``regex`` package so that mentions and
hashtags can be defined over Unicode letter classes (``\\p{L}``). Any of them
can be used directly as ``PatternSpec.pattern`` or referenced by name from a
mapping, e.g. ``{"type": "url"}``.
"""

from __future__ import annotations

from types import MappingProxyType

import regex

URL_PATTERN = regex.compile(
    r"(?:https?://|www\.)"
    # host, greedy; backtracks to the last dot before the top-level domain
    r"[-a-zA-Z0-9@:%._+~#=]{1,256}"
    # long gTLDs (".americanexpress") and punycode (".xn--...")
    r"\.(?:xn--)?[a-z0-9-]{2,20}\b"
    # path/query; may contain , . [ ] but never ends on them
    r"(?:[-a-zA-Z0-9@:%_+\[\],.~#?&/=]*[-a-zA-Z0-9@:%_+\]~#?&/=])*",
    regex.IGNORECASE,
)

PHONE_PATTERN = regex.compile(
    r"[+]?[(]?[0-9]{3}[)]?[-\s.]?[0-9]{3}[-\s.]?[0-9]{4,6}"
)

EMAIL_PATTERN = regex.compile(r"\S+@\S+\.\S+")

MENTION_PATTERN = regex.compile(r"(?<![\p{L}\p{N}_])@[\p{L}\p{N}_]+")

HASHTAG_PATTERN = regex.compile(
    r"(?<![\p{L}\p{N}_&])#[\p{L}\p{N}_]*\p{L}[\p{L}\p{N}_]*"
)

PATTERNS = MappingProxyType(
    {
        "url": URL_PATTERN,
        "phone": PHONE_PATTERN,
        "email": EMAIL_PATTERN,
        "mention": MENTION_PATTERN,
        "hashtag": HASHTAG_PATTERN,
    }
)


class UnknownPatternError(ValueError):
    """Raised when a named pattern is not part of the bundled library."""


def get_pattern(name: str) -> regex.Pattern:
    try:
        return PATTERNS[name]
    except KeyError:
        raise UnknownPatternError(
            f"Unknown pattern type '{name}'. Available: {sorted(PATTERNS)}"
        ) from None
