"""Turn styled frames back into the characters they put on screen."""

from __future__ import annotations

import re

ANSI_ESCAPE = re.compile(r"\x1B(?:\[[0-?]*[ -/]*[@-~]|\][^\x07]*\x07|[@-Z\\^_-])")


def strip_ansi(text: str) -> str:
    """Remove all ANSI escape sequences (color, cursor control) from text."""
    if not text:
        return ""
    return ANSI_ESCAPE.sub("", text)


def visible_frame(raw: str) -> str:
    """Return what a single ``\\r``-prefixed frame leaves on screen.

    Escape codes are dropped, as are the leading carriage return and a
    trailing newline.
    """
    return strip_ansi(raw).removeprefix("\r").removesuffix("\n")
