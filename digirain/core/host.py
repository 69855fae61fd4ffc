"""Curses terminal acting as the rendering/windowing host.

The rain engine works in pixels. A terminal has character cells, so the
host reports its size in pixels (from ``TIOCGWINSZ`` when the terminal
fills in the pixel fields, else from a nominal 8x16 cell) and maps glyph
pixel positions back onto character cells when drawing.
"""

from __future__ import annotations

import curses
import logging
import struct
import sys

from ..constants import (
    CELL_PIXEL_HEIGHT,
    CELL_PIXEL_WIDTH,
    STATUS_BAR_HEIGHT,
    TRAIL_BRIGHT_OPACITY,
    TRAIL_DIM_OPACITY,
)
from ..utils import safe_addstr, theme_attr
from .bootstrap import resolve_posix_backends

LOGGER = logging.getLogger(__name__)

_WINSIZE = struct.Struct("HHHH")


def query_cell_pixels(stream=None):
    """Return ``(width, height)`` of one character cell from the tty, or None."""
    backends = resolve_posix_backends()
    if backends is None:
        return None
    fcntl_mod, termios_mod = backends
    request = getattr(termios_mod, "TIOCGWINSZ", None)
    if request is None:
        return None
    stream = sys.stdout if stream is None else stream
    try:
        raw = fcntl_mod.ioctl(stream.fileno(), request, b"\0" * _WINSIZE.size)
        rows, cols, xpixel, ypixel = _WINSIZE.unpack(raw)
    except (AttributeError, ValueError, OSError, struct.error):
        return None
    if not rows or not cols or not xpixel or not ypixel:
        return None
    return (xpixel / cols, ypixel / rows)


class TerminalHost:
    """Window size query, glyph drawing and the fullscreen toggle."""

    def __init__(self, stdscr, default_size=(0, 0), stream=None):
        self.stdscr = stdscr
        self.fullscreen = False
        self.default_size = default_size
        self._stream = stream

    def toggle_fullscreen(self):
        """Flip between windowed (with status bar) and fullscreen mode."""
        self.fullscreen = not self.fullscreen
        LOGGER.debug("fullscreen: %s", self.fullscreen)
        return self.fullscreen

    def rain_lines(self):
        """Terminal lines available to the rain."""
        lines, _ = self.stdscr.getmaxyx()
        if self.fullscreen:
            return max(0, lines)
        return max(0, lines - STATUS_BAR_HEIGHT)

    def cell_pixels(self):
        measured = query_cell_pixels(self._stream)
        if measured is None:
            return (CELL_PIXEL_WIDTH, CELL_PIXEL_HEIGHT)
        return measured

    def physical_size(self):
        """Return the rain area size in pixels."""
        _, cols = self.stdscr.getmaxyx()
        lines = self.rain_lines()
        if cols <= 0 or lines <= 0:
            return self.default_size
        px_w, px_h = self.cell_pixels()
        return (int(cols * px_w), int(lines * px_h))

    def to_screen(self, x, y, cell_pixels=None):
        """Map a pixel position to a ``(line, col)`` terminal cell."""
        px_w, px_h = cell_pixels or self.cell_pixels()
        return (int(y // px_h), int(x // px_w))

    @staticmethod
    def glyph_attr(glyph):
        """Pick the color attribute for a glyph from its state and opacity."""
        if not glyph.is_trailing:
            return theme_attr("head") | curses.A_BOLD
        if glyph.opacity >= TRAIL_BRIGHT_OPACITY:
            return theme_attr("trail_bright") | curses.A_BOLD
        if glyph.opacity >= TRAIL_DIM_OPACITY:
            return theme_attr("trail")
        return theme_attr("trail_dim") | curses.A_DIM

    def draw_glyph(self, glyph, cell_pixels=None, max_line=None):
        """Draw ``glyph`` at its pixel position; off-area glyphs are skipped."""
        line, col = self.to_screen(glyph.x, glyph.y, cell_pixels)
        if max_line is None:
            max_line = self.rain_lines()
        if line >= max_line:
            return False
        safe_addstr(self.stdscr, line, col, glyph.symbol, self.glyph_attr(glyph))
        return True
