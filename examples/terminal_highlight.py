#!/usr/bin/env python3
"""
Terminal highlighting example.

Parses a chat message with the bundled patterns plus a custom one and
renders claimed chunks with ANSI colors. Pressing is simulated by calling
``Chunk.press()`` on every chunk that has a handler.

Usage:
    python examples/terminal_highlight.py
"""

import re

from pyparsedtext import PATTERNS, ExtractionConfig, PatternSpec, TextExtraction

COLORS = {
    "url": "\033[34;4m",
    "email": "\033[36m",
    "mention": "\033[35;1m",
    "hashtag": "\033[32m",
    "ticket": "\033[33m",
}
RESET = "\033[0m"


def main() -> None:
    text = (
        "@michel the fix for [JIRA-1234] is on https://example.com/pr/42, "
        "ping jane@example.com if #release slips."
    )

    specs = [
        PatternSpec(pattern=PATTERNS["url"], on_press=lambda u: print("open", u), props={"kind": "url"}),
        PatternSpec(pattern=PATTERNS["email"], props={"kind": "email"}),
        PatternSpec(pattern=PATTERNS["mention"], props={"kind": "mention"}),
        PatternSpec(pattern=PATTERNS["hashtag"], props={"kind": "hashtag"}),
        PatternSpec(
            pattern=re.compile(r"\[([A-Z]+-\d+)\]"),
            render_text=lambda matched, groups: groups[1],
            on_press=lambda ticket: print("open ticket", ticket),
            props={"kind": "ticket"},
        ),
    ]
    result = TextExtraction(text, specs, config=ExtractionConfig(return_trace=True)).run()

    rendered = []
    for chunk in result.chunks:
        color = COLORS.get(chunk.props.get("kind", ""), "")
        rendered.append(f"{color}{chunk.children}{RESET}" if color else chunk.children)
    print("".join(rendered))

    for chunk in result.chunks:
        chunk.press()

    for event in result.trace.events:
        print(f"{event.stage:6s} {event.name[:40]:40s} {event.ms:7.3f} ms {event.details}")


if __name__ == "__main__":
    main()
