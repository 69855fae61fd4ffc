"""
Utility functions for digirain.
"""
import curses
import locale

from .theme import ROLE_TO_PAIR_ID, get_theme


def init_colors(theme_key_or_obj=None):
    """Initialize curses color pairs from the active palette.

    Returns True when the 256-color palette was installed.
    """
    curses.start_color()
    curses.use_default_colors()

    if theme_key_or_obj is None:
        theme = get_theme(None)
    elif isinstance(theme_key_or_obj, str):
        theme = get_theme(theme_key_or_obj)
    else:
        theme = theme_key_or_obj

    use_extended = bool(
        theme.custom_colors
        and theme.pairs_256
        and curses.can_change_color()
        and curses.COLORS >= 256
    )
    if use_extended:
        for color_id, rgb in theme.custom_colors.items():
            curses.init_color(color_id, *rgb)
        pair_map = theme.pairs_256
    else:
        pair_map = theme.pairs_base

    for role, pair_id in ROLE_TO_PAIR_ID.items():
        fg, bg = pair_map[role]
        curses.init_pair(pair_id, fg, bg)
    return use_extended


def theme_attr(role):
    """Return curses color attribute for a semantic role."""
    return curses.color_pair(ROLE_TO_PAIR_ID[role])


def safe_addstr(win, y, x, text, attr=0):
    """Write string safely, clipping to window bounds."""
    h, w = win.getmaxyx()
    if y < 0 or y >= h or x < 0 or x >= w:
        return
    max_len = w - x - 1 if y == h - 1 else w - x
    if max_len <= 0:
        return
    try:
        win.addnstr(y, x, text, max_len, attr)
    except curses.error:
        pass


def normalize_key_code(key):
    """Normalize keys from get_wch()/getch() into comparable integer codes."""
    if isinstance(key, int):
        return key
    if not isinstance(key, str) or not key or len(key) != 1:
        return None
    if key in ('\n', '\r'):
        return 10
    if key == '\x1b':
        return 27
    return ord(key)


def check_unicode_support():
    """Check if terminal supports Unicode."""
    try:
        'ｱ'.encode(locale.getpreferredencoding())
        return True
    except (UnicodeEncodeError, LookupError):
        return False
