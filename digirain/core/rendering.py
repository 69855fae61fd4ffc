"""Rendering helpers for digirain."""

import curses

from ..utils import safe_addstr, theme_attr


def _paint_order(glyph):
    # Heads last and faded glyphs first, so the brightest glyph wins a cell.
    return (not glyph.is_trailing, glyph.opacity)


def draw_rain(app):
    """Draw every live glyph inside the rain area."""
    host = app.host
    cell_pixels = host.cell_pixels()
    max_line = host.rain_lines()
    drawn = 0
    for glyph in sorted(app.engine.glyphs.values(), key=_paint_order):
        if glyph.is_fully_transparent:
            continue
        if host.draw_glyph(glyph, cell_pixels, max_line):
            drawn += 1
    return drawn


def draw_statusbar(app, version):
    """Draw the bottom status bar."""
    h, w = app.stdscr.getmaxyx()
    if h <= 0:
        return
    attr = theme_attr("status")
    engine = app.engine
    grid = engine.grid
    left_status = (
        f' digirain v{version} | Glyphs: {engine.counter.value}/{engine.counter.maximum}'
        f' | Grid: {grid.columns}x{grid.rows}'
    )
    if app.paused:
        left_status += ' | PAUSED'
    hints = 'F11 Full  P Pause  C Clear  Q Quit '

    safe_addstr(app.stdscr, h - 1, 0, ' ' * (w - 1), attr)
    safe_addstr(app.stdscr, h - 1, 0, left_status, attr)
    if w > len(left_status) + len(hints) + 1:
        safe_addstr(app.stdscr, h - 1, w - len(hints) - 1, hints, attr | curses.A_BOLD)
