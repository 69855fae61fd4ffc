"""Main loop helpers for digirain."""

import curses


def draw_frame(app):
    """Render a full frame before reading input."""
    app.stdscr.erase()
    app.draw_rain()
    if not app.host.fullscreen:
        app.draw_statusbar()
    app.stdscr.noutrefresh()
    curses.doupdate()


def read_input_key(stdscr):
    """Read one key from curses, returning None on timeout/no input."""
    try:
        return stdscr.get_wch()
    except curses.error:
        return None


def dispatch_input(app, key):
    """Dispatch one normalized input event."""
    if key is None:
        return

    if isinstance(key, int) and key == curses.KEY_RESIZE:
        # The resize tick picks up the new size on its next poll.
        curses.update_lines_cols()
        return

    app.handle_key(key)


def run_app_loop(app):
    """Run tick/draw/input loop with cleanup on exit.

    The curses input timeout paces the loop at one frame per read.
    """
    try:
        while app.running:
            app.update()
            draw_frame(app)
            key = read_input_key(app.stdscr)
            dispatch_input(app, key)
    finally:
        app.cleanup()
