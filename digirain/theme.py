"""Rain color palettes and lookup helpers."""

from dataclasses import dataclass
import curses
from typing import Optional

from .constants import C_HEAD, C_STATUS, C_TRAIL, C_TRAIL_BRIGHT, C_TRAIL_DIM, DEFAULT_THEME

# Test doubles may expose only a subset of color constants.
for _name, _fallback in {
    "COLOR_BLACK": 0,
    "COLOR_CYAN": 6,
    "COLOR_GREEN": 2,
    "COLOR_WHITE": 7,
    "COLOR_YELLOW": 3,
}.items():
    if not hasattr(curses, _name):
        setattr(curses, _name, _fallback)

ROLE_TO_PAIR_ID = {
    "head": C_HEAD,
    "trail_bright": C_TRAIL_BRIGHT,
    "trail": C_TRAIL,
    "trail_dim": C_TRAIL_DIM,
    "status": C_STATUS,
}


def _mk_pairs(fg_bg):
    """Map head, trail_bright, trail, trail_dim, status to (fg, bg)."""
    return dict(zip(("head", "trail_bright", "trail", "trail_dim", "status"), fg_bg))


@dataclass(frozen=True)
class Theme:
    """Palette for heads, fading trail bands and the status bar."""

    key: str
    label: str
    pairs_base: dict[str, tuple[int, int]]
    pairs_256: Optional[dict[str, tuple[int, int]]] = None
    custom_colors: Optional[dict[int, tuple[int, int, int]]] = None


THEMES = {
    "green": Theme(
        key="green",
        label="Classic Green",
        pairs_base=_mk_pairs(
            (
                (curses.COLOR_WHITE, curses.COLOR_BLACK),
                (curses.COLOR_GREEN, curses.COLOR_BLACK),
                (curses.COLOR_GREEN, curses.COLOR_BLACK),
                (curses.COLOR_GREEN, curses.COLOR_BLACK),
                (curses.COLOR_BLACK, curses.COLOR_GREEN),
            )
        ),
        pairs_256=_mk_pairs(
            (
                (20, curses.COLOR_BLACK),
                (21, curses.COLOR_BLACK),
                (22, curses.COLOR_BLACK),
                (23, curses.COLOR_BLACK),
                (curses.COLOR_BLACK, 22),
            )
        ),
        custom_colors={
            20: (706, 1000, 706),   # head, pale green-white
            21: (0, 1000, 0),       # trail, full bright
            22: (0, 650, 0),        # trail, half faded
            23: (0, 300, 0),        # trail, nearly gone
        },
    ),
    "amber": Theme(
        key="amber",
        label="Amber Phosphor",
        pairs_base=_mk_pairs(
            (
                (curses.COLOR_WHITE, curses.COLOR_BLACK),
                (curses.COLOR_YELLOW, curses.COLOR_BLACK),
                (curses.COLOR_YELLOW, curses.COLOR_BLACK),
                (curses.COLOR_YELLOW, curses.COLOR_BLACK),
                (curses.COLOR_BLACK, curses.COLOR_YELLOW),
            )
        ),
    ),
    "cyan": Theme(
        key="cyan",
        label="Ice",
        pairs_base=_mk_pairs(
            (
                (curses.COLOR_WHITE, curses.COLOR_BLACK),
                (curses.COLOR_CYAN, curses.COLOR_BLACK),
                (curses.COLOR_CYAN, curses.COLOR_BLACK),
                (curses.COLOR_CYAN, curses.COLOR_BLACK),
                (curses.COLOR_BLACK, curses.COLOR_CYAN),
            )
        ),
    ),
}


def list_themes():
    """Return themes in deterministic order."""
    order = ("green", "amber", "cyan")
    return [THEMES[key] for key in order]


def get_theme(theme_key: Optional[str]) -> Theme:
    """Resolve theme by key with fallback to default."""
    if not theme_key:
        return THEMES[DEFAULT_THEME]
    return THEMES.get(theme_key, THEMES[DEFAULT_THEME])
