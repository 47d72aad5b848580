"""Run the typing animation over a whole text."""

from __future__ import annotations

import logging
import random
import time
from typing import TYPE_CHECKING

from glyphtype.animator import LineAnimator
from glyphtype.layout import wrap_with_offsets
from glyphtype.terminal import Terminal

if TYPE_CHECKING:
    from collections.abc import Callable

    from glyphtype.config import AnimationConfig

log = logging.getLogger(__name__)


def run(
    text: str,
    config: AnimationConfig,
    terminal: Terminal | None = None,
    *,
    rng: random.Random | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Type ``text`` onto the terminal line by line.

    Lines are animated strictly one after another. Each line's easing
    position starts at its offset in ``text`` so the speed curve spans the
    whole text. The cursor is hidden once for the run and restored even when
    rendering fails or is interrupted.

    Returns:
        The number of lines rendered.
    """
    terminal = terminal or Terminal()
    rng = rng or random.Random()

    with terminal.hidden_cursor():
        width = terminal.query_display_width()
        lines = wrap_with_offsets(text, width, config.overshoot)
        log.info(
            "Animating %d characters over %d line(s) at width %d", len(text), len(lines), width
        )

        for number, line in enumerate(lines, 1):
            log.debug("Line %d/%d starts at offset %d", number, len(lines), line.offset)
            LineAnimator(
                line.text,
                config,
                terminal,
                is_final=number == len(lines),
                line_start=line.offset,
                total_length=len(text),
                width=width,
                rng=rng,
                sleep=sleep,
            ).run()

    log.info("Animation finished")
    return len(lines)


__all__ = ["run"]
