"""Tests for Braille glyph substitution."""

from __future__ import annotations

import random

import pytest
from hypothesis import given

from glyphtype.glyphs import DECORATIVE_POOL, GLYPH_MAP, decorate, random_decorative
from tests.strategies import any_char

pytestmark = pytest.mark.unit


class TestDecorate:
    @given(any_char)
    def test_total(self, char: str) -> None:
        result = decorate(char)
        assert isinstance(result, str)
        assert result

    @given(any_char)
    def test_unmapped_is_identity(self, char: str) -> None:
        if char not in GLYPH_MAP:
            assert decorate(char) == char

    def test_maps_letters_to_braille(self) -> None:
        glyph = decorate("l")
        assert 0x2800 <= ord(glyph) <= 0x28FF

    def test_uppercase_shares_lowercase_glyph(self) -> None:
        assert decorate("H") == decorate("h")
        assert "H" in GLYPH_MAP

    def test_letters_outside_the_table_unchanged(self) -> None:
        assert decorate("é") == "é"
        assert decorate("É") == "É"

    def test_space_is_not_decorated(self) -> None:
        assert decorate(" ") == " "

    def test_shared_glyphs_are_allowed(self) -> None:
        assert decorate("g") == decorate("q")


class TestRandomDecorative:
    def test_draws_from_pool(self) -> None:
        rng = random.Random(7)
        for _ in range(200):
            assert random_decorative(rng) in DECORATIVE_POOL

    def test_never_blank(self) -> None:
        assert "\u2800" not in DECORATIVE_POOL
        assert " " not in DECORATIVE_POOL

    def test_seeded_draws_repeat(self) -> None:
        first = [random_decorative(random.Random(3)) for _ in range(5)]
        second = [random_decorative(random.Random(3)) for _ in range(5)]
        assert first == second

    def test_module_random_fallback(self) -> None:
        assert random_decorative() in DECORATIVE_POOL
