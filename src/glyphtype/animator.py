"""Frame-by-frame reveal of a single line."""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from glyphtype.glyphs import decorate, random_decorative
from glyphtype.timing import character_delay, clamp_delay, contraction_delay, easing

if TYPE_CHECKING:
    from collections.abc import Callable

    from glyphtype.config import AnimationConfig
    from glyphtype.terminal import Terminal

log = logging.getLogger(__name__)


class LineState(Enum):
    TYPING = "typing"
    OVERSHOOTING = "overshooting"
    CONTRACTING = "contracting"
    DONE = "done"


class CellKind(Enum):
    BLANK = "blank"
    SHIMMER = "shimmer"
    COMMITTED = "committed"


@dataclass(slots=True)
class Cell:
    """One column of the line being animated."""

    kind: CellKind = CellKind.BLANK
    glyph: str = " "
    intensity: float = 0.0

    @classmethod
    def blank(cls) -> Cell:
        return cls()

    @classmethod
    def committed(cls, char: str) -> Cell:
        return cls(CellKind.COMMITTED, char)

    @classmethod
    def shimmer(cls, glyph: str, intensity: float) -> Cell:
        return cls(CellKind.SHIMMER, glyph, intensity)


class LineAnimator:
    """Drive one line through typing and, on the last line, the overshoot flourish.

    The display buffer holds one cell per column: the line itself plus
    ``config.overshoot`` trailing cells when ``is_final`` is set. Every cell
    inside the shimmer window gets a fresh glyph and intensity each frame and
    cells past the window are blanked; only committed characters persist.
    """

    def __init__(
        self,
        line: str,
        config: AnimationConfig,
        terminal: Terminal,
        *,
        is_final: bool,
        line_start: int,
        total_length: int,
        width: int,
        rng: random.Random | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.line = line
        self.config = config
        self.terminal = terminal
        self.is_final = is_final
        self.line_start = line_start
        self.total_length = total_length
        self.width = width
        self.rng = rng or random.Random()
        self.sleep = sleep

        self.overshoot = config.overshoot if is_final else 0
        self.buffer = [Cell.blank() for _ in range(len(line) + self.overshoot)]
        self.state = LineState.TYPING
        self._previous: str | None = None

    @property
    def overshoot_cells(self) -> list[Cell]:
        return self.buffer[len(self.line) :]

    def run(self) -> None:
        for index in range(len(self.line)):
            self._type_frame(index)

        if self.is_final and self.overshoot:
            self._contract()

        self._set_state(LineState.DONE)
        self._finalize()

    def _set_state(self, state: LineState) -> None:
        if state is not self.state:
            log.debug("line %r: %s -> %s", self.line[:20], self.state.value, state.value)
            self.state = state

    def _type_frame(self, index: int) -> None:
        ahead = self.rng.randint(self.config.min_braille_ahead, self.config.braille_ahead)
        window_end = min(index + ahead, len(self.buffer) - 1)
        for j in range(index + 1, window_end + 1):
            if j < len(self.line):
                glyph = decorate(self.line[j])
            else:
                glyph = random_decorative(self.rng)
            self.buffer[j] = Cell.shimmer(glyph, self.rng.random())
        for j in range(max(window_end, index) + 1, len(self.buffer)):
            self.buffer[j] = Cell.blank()

        char = self.line[index]
        self.buffer[index] = Cell.committed(char)
        self._flush()

        factor = easing(self.line_start + index, self.total_length)
        delay = character_delay(self._previous, char, self.config, factor, self.rng)
        self._previous = char
        self._wait(delay)

    def _contract(self) -> None:
        text_length = len(self.line)
        for step in range(self.overshoot):
            self._set_state(LineState.OVERSHOOTING)
            remaining = self.overshoot - step
            for j in range(text_length, text_length + remaining):
                self.buffer[j] = Cell.shimmer(random_decorative(self.rng), self.rng.random())
            self._flush()
            self._wait(contraction_delay(self.config, self.rng))

            self._set_state(LineState.CONTRACTING)
            self.buffer[text_length + remaining - 1] = Cell.blank()
            self._flush()
            self._wait(contraction_delay(self.config, self.rng))

    def _finalize(self) -> None:
        self.terminal.write_raw(f"\r{self.line.ljust(self.width)}\n")

    def render(self) -> str:
        parts = []
        for cell in self.buffer:
            if cell.kind is CellKind.SHIMMER:
                parts.append(
                    self.terminal.style_with_brightness(cell.glyph, cell.intensity, self.config)
                )
            else:
                parts.append(cell.glyph)
        return "".join(parts)

    def _flush(self) -> None:
        self.terminal.write_raw(f"\r{self.render()}")

    def _wait(self, delay_ms: float) -> None:
        self.sleep(clamp_delay(delay_ms) / 1000)


__all__ = ["Cell", "CellKind", "LineAnimator", "LineState"]
