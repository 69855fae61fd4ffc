"""Keyboard routing helpers for digirain."""

import curses

from ..constants import KEY_CTRL_Q, KEY_ESCAPE
from ..utils import normalize_key_code

QUIT_KEYS = (ord('q'), ord('Q'), KEY_ESCAPE, KEY_CTRL_Q)


def handle_key_event(app, key):
    """Handle keyboard input. Returns True when the key was consumed."""
    key_code = normalize_key_code(key)
    if key_code is None:
        return False

    if key_code in QUIT_KEYS:
        app.running = False
        return True

    if key_code == getattr(curses, 'KEY_F11', -1):
        app.toggle_fullscreen()
        return True

    if key_code in (ord('p'), ord('P'), ord(' ')):
        app.toggle_pause()
        return True

    if key_code in (ord('c'), ord('C')):
        app.clear()
        return True

    return False
