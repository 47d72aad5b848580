"""Keyboard geometry used to approximate finger travel between keys."""

from __future__ import annotations

import math
from types import MappingProxyType

from glyphtype.limits import DEFAULT_KEY_DISTANCE

# Rows of a US QWERTY layout, unshifted. Shifted symbols share the
# coordinates of the key that produces them.
_ROWS = (
    "`1234567890-=",
    "qwertyuiop[]\\",
    "asdfghjkl;'",
    "zxcvbnm,./",
)
_SHIFTED_ROWS = (
    "~!@#$%^&*()_+",
    "QWERTYUIOP{}|",
    "ASDFGHJKL:\"",
    "ZXCVBNM<>?",
)


def _build_layout() -> dict[str, tuple[int, int]]:
    layout: dict[str, tuple[int, int]] = {}
    for y, (row, shifted) in enumerate(zip(_ROWS, _SHIFTED_ROWS, strict=True)):
        for x, (key, shifted_key) in enumerate(zip(row, shifted, strict=True)):
            layout[key] = (x, y)
            # Letters are folded to lowercase on lookup, so only symbols need an entry.
            if not shifted_key.isalpha():
                layout[shifted_key] = (x, y)
    # Space bar sits under the middle of the bottom row.
    layout[" "] = (5, len(_ROWS))
    return layout


KEYBOARD_LAYOUT: MappingProxyType[str, tuple[int, int]] = MappingProxyType(_build_layout())


def key_position(symbol: str) -> tuple[int, int] | None:
    """Return the (x, y) coordinate of a key, or None if it is not on the board."""
    return KEYBOARD_LAYOUT.get(symbol.lower())


def key_distance(first: str, second: str) -> float:
    """Euclidean distance between two keys.

    Unknown symbols never raise: the distance falls back to DEFAULT_KEY_DISTANCE.
    """
    pos1 = key_position(first)
    pos2 = key_position(second)
    if pos1 is None or pos2 is None:
        return DEFAULT_KEY_DISTANCE
    return math.hypot(pos1[0] - pos2[0], pos1[1] - pos2[1])


__all__ = ["KEYBOARD_LAYOUT", "key_distance", "key_position"]
