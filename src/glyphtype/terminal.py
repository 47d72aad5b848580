"""Terminal output, cursor control and brightness styling."""

from __future__ import annotations

import io
import math
import os
import sys
from contextlib import contextmanager
from typing import TYPE_CHECKING, TextIO

from rich.color import Color, ColorSystem
from rich.console import Console
from rich.control import Control
from rich.style import Style

from glyphtype.ansi import visible_frame

if TYPE_CHECKING:
    from collections.abc import Iterator

    from glyphtype.config import AnimationConfig

# Terminals that are KNOWN to NOT support truecolor
# Check these FIRST, before trusting COLORTERM (which may be incorrectly set)
_NO_TRUECOLOR_TERMINALS = {
    "apple_terminal",  # macOS Terminal.app - only supports 256 colors
}

# Terminals that are KNOWN to support truecolor
_TRUECOLOR_TERMINALS = {
    "iterm.app",
    "vscode",
    "hyper",
    "alacritty",
    "kitty",
    "wezterm",
    "ghostty",
    "warp",
    "tabby",
    "rio",
    "contour",
}

HIDE_CURSOR = str(Control.show_cursor(False))
SHOW_CURSOR = str(Control.show_cursor(True))


def supports_truecolor() -> bool:
    """Check if the terminal supports truecolor (24-bit colors).

    Detection logic (in order of priority):
    1. GLYPHTYPE_COLOR_SYSTEM set to 'truecolor' or 'standard' (explicit override)
    2. TERM_PROGRAM known to NOT support truecolor (Apple_Terminal) -> False
    3. TERM_PROGRAM known to support truecolor (iTerm.app, vscode, etc.) -> True
    4. COLORTERM set to 'truecolor' or '24bit' -> True
    5. WT_SESSION set (Windows Terminal) -> True

    TERM_PROGRAM is checked before COLORTERM because some shell configs
    set COLORTERM=truecolor even in terminals that don't support it.
    """
    override = os.environ.get("GLYPHTYPE_COLOR_SYSTEM", "").lower()
    if override == "truecolor":
        return True
    if override == "standard":
        return False

    term_program = os.environ.get("TERM_PROGRAM", "").lower()
    if term_program in _NO_TRUECOLOR_TERMINALS:
        return False
    if term_program in _TRUECOLOR_TERMINALS:
        return True

    colorterm = os.environ.get("COLORTERM", "").lower()
    if colorterm in ("truecolor", "24bit"):
        return True

    return bool(os.environ.get("WT_SESSION"))


def gray_level(intensity: float, min_brightness: int = 0, max_brightness: int = 255) -> int:
    """Map an intensity in [0, 1] onto a gray channel value."""
    return math.floor(min_brightness + (max_brightness - min_brightness) * intensity)


class Terminal:
    """The terminal collaborators the animation writes through."""

    def __init__(self, stream: TextIO | None = None, *, truecolor: bool | None = None) -> None:
        self.console = Console(file=stream or sys.stdout, highlight=False, soft_wrap=True)
        if truecolor is None:
            truecolor = supports_truecolor()
        self.color_system = ColorSystem.TRUECOLOR if truecolor else ColorSystem.EIGHT_BIT

    def query_display_width(self) -> int:
        return self.console.size.width

    def write_raw(self, text: str) -> None:
        stream = self.console.file
        stream.write(text)
        stream.flush()

    def hide_cursor(self) -> None:
        self.write_raw(HIDE_CURSOR)

    def show_cursor(self) -> None:
        self.write_raw(SHOW_CURSOR)

    @contextmanager
    def hidden_cursor(self) -> Iterator[Terminal]:
        """Hide the cursor for the duration of the block, restoring it on any exit."""
        self.hide_cursor()
        try:
            yield self
        finally:
            self.show_cursor()

    def style_with_brightness(
        self, glyph: str, intensity: float, config: AnimationConfig | None = None
    ) -> str:
        """Render a glyph as gray text whose brightness follows ``intensity``."""
        if config is None:
            level = gray_level(intensity)
        else:
            level = gray_level(intensity, config.min_brightness, config.max_brightness)
        style = Style(color=Color.from_rgb(level, level, level))
        return style.render(glyph, color_system=self.color_system)


class RecordingTerminal(Terminal):
    """Terminal that keeps every write in memory instead of drawing it."""

    def __init__(self, width: int = 80, *, truecolor: bool = True) -> None:
        super().__init__(io.StringIO(), truecolor=truecolor)
        self.width = width
        self.writes: list[str] = []
        self.cursor_events: list[str] = []

    def query_display_width(self) -> int:
        return self.width

    def write_raw(self, text: str) -> None:
        self.writes.append(text)

    def hide_cursor(self) -> None:
        self.cursor_events.append("hide")
        super().hide_cursor()

    def show_cursor(self) -> None:
        self.cursor_events.append("show")
        super().show_cursor()

    @property
    def frames(self) -> list[str]:
        """Raw frame writes, without cursor control sequences."""
        return [text for text in self.writes if text not in (HIDE_CURSOR, SHOW_CURSOR)]

    @property
    def plain_frames(self) -> list[str]:
        """Frames as the characters left on screen, escape codes removed."""
        return [visible_frame(frame) for frame in self.frames]


__all__ = [
    "HIDE_CURSOR",
    "SHOW_CURSOR",
    "RecordingTerminal",
    "Terminal",
    "gray_level",
    "supports_truecolor",
]
