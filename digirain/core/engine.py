"""Droplet lifecycle engine.

``RainEngine`` is the single owner of the rain state: grid, character
counter and glyph collection. Every tick handler is a method on it and the
event loop calls them one at a time, so no handler ever observes a partial
update from another.

Per glyph the lifecycle is ``Head(remaining_spawns) -> Trailing(opacity)``:

* :meth:`RainEngine.spawn_droplet` creates heads at free cells.
* :meth:`RainEngine.move_droplets` turns every head into a trailing glyph,
  growing the droplet one row down while its budget lasts.
* :meth:`RainEngine.fade_droplets` fades trailing glyphs and reclaims them
  one frame after they reach zero opacity.
* :meth:`RainEngine.monitor_window_size` hard-resets everything when the
  window pixel size changes.
"""

from __future__ import annotations

import itertools
import logging
import random

from .config import RainConfig
from .counter import CharacterCounter
from .glyphs import Glyph, get_symbol_set, random_symbol
from .grid import Grid, recompute
from .selector import select_free_cell

LOGGER = logging.getLogger(__name__)


class RainEngine:
    """Owned mutable context for all droplet tick handlers."""

    def __init__(self, config: RainConfig | None = None, rng: random.Random | None = None):
        self.config = config or RainConfig()
        self.rng = rng or random.Random(self.config.seed)
        self.grid = Grid(columns=self.config.columns)
        self.counter = CharacterCounter(self.config.max_characters)
        self.glyphs: dict[int, Glyph] = {}
        self.symbol_set = get_symbol_set(self.config.symbols)
        self._ids = itertools.count(1)

    # -- views ---------------------------------------------------------

    @property
    def glyph_count(self):
        return len(self.glyphs)

    def occupied_cells(self):
        return {glyph.cell for glyph in self.glyphs.values()}

    def heads(self):
        return [glyph for glyph in self.glyphs.values() if not glyph.is_trailing]

    def trailing(self):
        return [glyph for glyph in self.glyphs.values() if glyph.is_trailing]

    # -- resize / reset ------------------------------------------------

    def reset(self, window_width, window_height):
        """Recompute the grid and drop every live glyph."""
        self.grid = recompute(window_width, window_height, self.config.columns)
        self.counter.reset()
        self.glyphs.clear()
        LOGGER.info(
            "grid reset: %dx%d px, %d columns x %d rows, cell %.2f px",
            self.grid.window_width,
            self.grid.window_height,
            self.grid.columns,
            self.grid.rows,
            self.grid.cell_dimension,
        )

    def clear(self):
        """Reset at the current window size."""
        self.reset(self.grid.window_width, self.grid.window_height)

    def monitor_window_size(self, width, height):
        """Reset when ``width`` or ``height`` differ from the last seen size.

        Returns True when a reset happened.
        """
        size_changed = False
        if width != self.grid.window_width:
            size_changed = True
        if height != self.grid.window_height:
            size_changed = True
        if size_changed:
            self.reset(width, height)
        LOGGER.debug("live characters: %d (counter %d)", self.glyph_count, self.counter.value)
        return size_changed

    # -- spawning ------------------------------------------------------

    def spawn_character(self, column, row, remaining_spawns):
        """Create a head glyph at ``(column, row)`` and count it.

        No capacity check happens here; the counter itself stops at its cap.
        """
        glyph = Glyph(
            id=next(self._ids),
            column=column,
            row=row,
            remaining_spawns=max(0, int(remaining_spawns)),
            symbol=random_symbol(self.rng, self.symbol_set),
            x=self.grid.column_to_x(column),
            y=self.grid.row_to_y(row),
            size=self.grid.cell_dimension,
        )
        self.glyphs[glyph.id] = glyph
        self.counter.increment()
        return glyph

    def droplet_length(self):
        deviation = self.config.length_deviation
        length_deviation = self.rng.randrange(-deviation, deviation) if deviation else 0
        return self.config.base_length + length_deviation

    def spawn_droplet(self):
        """Start a new droplet at a free cell unless the cap is reached.

        A grid with no free cell skips the spawn as well.
        """
        if self.counter.at_capacity or not self.grid.is_sized:
            return None
        occupied = self.occupied_cells()
        in_grid = sum(
            1 for column, row in occupied if 0 <= column < self.grid.columns and 0 <= row < self.grid.rows
        )
        if in_grid >= self.grid.cells():
            LOGGER.debug("spawn skipped: all %d cells are occupied", self.grid.cells())
            return None
        column, row = select_free_cell(
            occupied,
            self.grid.columns,
            self.grid.rows,
            self.rng,
        )
        return self.spawn_character(column, row, self.droplet_length())

    # -- animation -----------------------------------------------------

    def move_droplets(self):
        """Turn every head into a trailing glyph, growing droplets downward."""
        children = []
        for glyph in self.heads():
            if glyph.remaining_spawns > 0:
                children.append(
                    self.spawn_character(glyph.column, glyph.row + 1, glyph.remaining_spawns - 1)
                )
                glyph.remaining_spawns -= 1
            glyph.is_trailing = True
            glyph.opacity = 1.0
        return children

    def fade_droplets(self):
        """Fade trailing glyphs, removing those already fully transparent.

        Returns the number of glyphs removed.
        """
        fade = self.config.fade_per_frame
        removed = 0
        for glyph in self.trailing():
            if glyph.is_fully_transparent:
                del self.glyphs[glyph.id]
                self.counter.decrement()
                removed += 1
            else:
                glyph.opacity = max(0.0, glyph.opacity - fade)
        return removed
