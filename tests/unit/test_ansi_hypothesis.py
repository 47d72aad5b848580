"""Property-based tests for ANSI stripping using Hypothesis."""

from __future__ import annotations

import pytest
from hypothesis import given

from glyphtype.ansi import strip_ansi, visible_frame
from tests.strategies import plain_text, text_with_ansi

pytestmark = pytest.mark.unit


class TestStripAnsiProperties:
    @given(plain_text)
    def test_plain_text_unchanged(self, text: str) -> None:
        assert strip_ansi(text) == text

    @given(text_with_ansi())
    def test_no_escape_in_output(self, text: str) -> None:
        assert "\x1b" not in strip_ansi(text)

    @given(text_with_ansi())
    def test_idempotence(self, text: str) -> None:
        once = strip_ansi(text)
        assert strip_ansi(once) == once

    @given(text_with_ansi())
    def test_length_never_increases(self, text: str) -> None:
        assert len(strip_ansi(text)) <= len(text)


class TestVisibleFrame:
    def test_strips_frame_markers(self) -> None:
        assert visible_frame("\r\x1b[38;2;9;9;9m⠿\x1b[0mab\n") == "⠿ab"

    def test_keeps_inner_spaces(self) -> None:
        assert visible_frame("\rab   ") == "ab   "

    def test_empty(self) -> None:
        assert strip_ansi("") == ""
        assert visible_frame("") == ""
