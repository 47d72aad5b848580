"""Property-based tests for line splitting."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from glyphtype.layout import line_capacity, split_lines, wrap_with_offsets
from tests.strategies import plain_text, sentences

pytestmark = pytest.mark.unit

widths = st.integers(min_value=1, max_value=60)


class TestSplitProperties:
    @given(plain_text, widths, st.integers(min_value=0, max_value=20))
    def test_lines_fit_capacity(self, text: str, capacity: int, overshoot: int) -> None:
        for line in split_lines(text, capacity + overshoot, overshoot):
            assert len(line) <= capacity

    @given(plain_text, widths)
    def test_offsets_point_into_text(self, text: str, width: int) -> None:
        for offset, line in wrap_with_offsets(text, width, 0):
            assert text[offset : offset + len(line)] == line

    @given(plain_text, widths)
    def test_offsets_strictly_increase(self, text: str, width: int) -> None:
        offsets = [line.offset for line in wrap_with_offsets(text, width, 0)]
        assert offsets == sorted(set(offsets))
        assert all(offset < len(text) for offset in offsets)

    @given(st.data(), widths)
    def test_word_text_rejoins_losslessly(self, data: st.DataObject, capacity: int) -> None:
        text = data.draw(sentences(max_word=capacity))
        lines = split_lines(text, capacity, 0)
        assert " ".join(lines) == text

    @given(st.data(), widths)
    def test_never_breaks_a_word_that_fits(self, data: st.DataObject, capacity: int) -> None:
        text = data.draw(sentences(max_word=capacity))
        words = set(text.split(" "))
        for line in split_lines(text, capacity, 0):
            assert not line.startswith(" ")
            assert not line.endswith(" ")
            assert set(line.split(" ")) <= words

    @given(st.data(), widths)
    def test_greedy(self, data: st.DataObject, capacity: int) -> None:
        text = data.draw(sentences(max_word=capacity))
        lines = split_lines(text, capacity, 0)
        for line, following in zip(lines, lines[1:], strict=False):
            next_word = following.split(" ")[0]
            assert len(line) + 1 + len(next_word) > capacity


class TestSplitExamples:
    def test_break_at_space_drops_separator(self) -> None:
        assert split_lines("a b", 2, 0) == ["a", "b"]
        assert split_lines("a b", 1, 0) == ["a", "b"]

    def test_overshoot_reserves_room(self) -> None:
        assert split_lines("a b", 5, 3) == ["a", "b"]

    def test_fits_on_one_line(self) -> None:
        assert split_lines("ab", 80, 0) == ["ab"]

    def test_moves_cut_back_to_space(self) -> None:
        assert split_lines("alpha beta gamma", 10, 4) == ["alpha", "beta", "gamma"]

    def test_long_token_is_hard_cut(self) -> None:
        assert split_lines("abcdefgh", 3, 0) == ["abc", "def", "gh"]

    def test_only_one_separator_consumed(self) -> None:
        assert split_lines("ab  cd", 2, 0) == ["ab", " c", "d"]

    def test_empty_text(self) -> None:
        assert split_lines("", 10, 2) == []

    def test_offsets(self) -> None:
        wrapped = wrap_with_offsets("alpha beta gamma", 10, 4)
        assert [line.offset for line in wrapped] == [0, 6, 11]

    @pytest.mark.parametrize(("width", "overshoot"), [(5, 5), (3, 10), (0, 0)])
    def test_no_room_for_text(self, width: int, overshoot: int) -> None:
        with pytest.raises(ValueError, match="no room"):
            line_capacity(width, overshoot)
        with pytest.raises(ValueError):
            split_lines("text", width, overshoot)
