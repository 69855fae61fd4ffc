"""Glyph records and the symbols they display."""

from __future__ import annotations

import random
import string
from dataclasses import dataclass

from ..constants import DEFAULT_SYMBOLS


def _code_range(start, end):
    return "".join(chr(code) for code in range(start, end + 1))


# Each set is a tuple of ranges; a range is picked first, then a symbol in it.
SYMBOL_SETS = {
    "katakana": (_code_range(0x30A0, 0x30FF), string.digits),
    "halfwidth": (_code_range(0xFF66, 0xFF9D), string.digits),
    "digits": (string.digits,),
    "ascii": (string.ascii_letters, string.digits, "!#$%&*+-<=>?@^~"),
}


def get_symbol_set(key):
    """Resolve a symbol set by name with fallback to the default one."""
    return SYMBOL_SETS.get(key or DEFAULT_SYMBOLS, SYMBOL_SETS[DEFAULT_SYMBOLS])


def random_symbol(rng=None, symbol_set=None):
    """Pick a range with equal probability, then a symbol inside it."""
    rng = rng or random
    ranges = symbol_set or SYMBOL_SETS[DEFAULT_SYMBOLS]
    selected = ranges[rng.randrange(len(ranges))]
    return selected[rng.randrange(len(selected))]


@dataclass
class Glyph:
    """One displayed character of a droplet.

    ``x``/``y``/``size`` are fixed at creation from the grid in effect then.
    """

    id: int
    column: int
    row: int
    remaining_spawns: int
    symbol: str
    x: float = 0.0
    y: float = 0.0
    size: float = 0.0
    is_trailing: bool = False
    opacity: float = 1.0

    @property
    def cell(self):
        return (self.column, self.row)

    @property
    def is_fully_transparent(self):
        return self.opacity <= 0.0
