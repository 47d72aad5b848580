"""Greedy word wrap that leaves room for the overshoot tail."""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from collections.abc import Iterator


class WrappedLine(NamedTuple):
    offset: int  # index of the first character in the original text
    text: str


def line_capacity(width: int, overshoot: int) -> int:
    capacity = width - overshoot
    if capacity < 1:
        raise ValueError(
            f"display width {width} leaves no room for text after an overshoot of {overshoot}"
        )
    return capacity


def iter_wrapped(text: str, width: int, overshoot: int) -> Iterator[WrappedLine]:
    """Yield lines of at most ``width - overshoot`` characters.

    A cut that lands inside a word moves back to the last space in the
    segment; a word longer than the capacity is hard cut. Exactly one space
    after each line is consumed as the separator.
    """
    capacity = line_capacity(width, overshoot)
    start = 0
    length = len(text)
    while start < length:
        end = min(start + capacity, length)
        if end < length and text[end] != " ":
            space = text.rfind(" ", start, end)
            if space > start:
                end = space
        yield WrappedLine(start, text[start:end])
        start = end
        if start < length and text[start] == " ":
            start += 1


def split_lines(text: str, width: int, overshoot: int) -> list[str]:
    """Split text into display lines; empty text gives no lines."""
    return [line.text for line in iter_wrapped(text, width, overshoot)]


def wrap_with_offsets(text: str, width: int, overshoot: int) -> list[WrappedLine]:
    return list(iter_wrapped(text, width, overshoot))


__all__ = ["WrappedLine", "iter_wrapped", "line_capacity", "split_lines", "wrap_with_offsets"]
