"""Braille look-alike glyphs shown ahead of the typing cursor."""

from __future__ import annotations

import random
from types import MappingProxyType

# Braille cells chosen for a rough visual resemblance to the character they
# stand in for. Several characters intentionally share a cell.
_SIMILAR_BRAILLE = {
    "a": "⠪",
    "b": "⡷",
    "c": "⠣",
    "d": "⢾",
    "e": "⠯",
    "f": "⡟",
    "g": "⢽",
    "h": "⡗",
    "i": "⠅",
    "j": "⢸",
    "k": "⡕",
    "l": "⡇",
    "m": "⠿",
    "n": "⠗",
    "o": "⠶",
    "p": "⡯",
    "q": "⢽",
    "r": "⠇",
    "s": "⠎",
    "t": "⠞",
    "u": "⠥",
    "v": "⠬",
    "w": "⠺",
    "x": "⠭",
    "y": "⢹",
    "z": "⠵",
    "0": "⡷",
    "1": "⢸",
    "2": "⠝",
    "3": "⠺",
    "4": "⢳",
    "5": "⠧",
    "6": "⡶",
    "7": "⠉",
    "8": "⣿",
    "9": "⠻",
    ".": "⠄",
    ",": "⠠",
    "!": "⠃",
    "?": "⠹",
    "-": "⠤",
    "_": "⣀",
    "'": "⠈",
    '"': "⠘",
    ":": "⠆",
    ";": "⠰",
    "(": "⡜",
    ")": "⢣",
}

# Capital letters share the cell of their lowercase form.
_SIMILAR_BRAILLE.update(
    {char.upper(): glyph for char, glyph in list(_SIMILAR_BRAILLE.items()) if char.isalpha()}
)

GLYPH_MAP: MappingProxyType[str, str] = MappingProxyType(_SIMILAR_BRAILLE)

# Every non-empty Braille cell; U+2800 is excluded since it renders blank.
DECORATIVE_POOL: tuple[str, ...] = tuple(chr(code) for code in range(0x2801, 0x2900))


def decorate(symbol: str) -> str:
    """Return the Braille stand-in for a character, or the character itself."""
    return GLYPH_MAP.get(symbol, symbol)


def random_decorative(rng: random.Random | None = None) -> str:
    """Pick a random non-blank Braille cell for positions with no real character."""
    return (rng or random).choice(DECORATIVE_POOL)


__all__ = ["DECORATIVE_POOL", "GLYPH_MAP", "decorate", "random_decorative"]
