"""Free-cell selection for new droplet heads."""

from __future__ import annotations

import logging
import random

from ..constants import FREE_CELL_MAX_ATTEMPTS

LOGGER = logging.getLogger(__name__)


class GridSaturatedError(RuntimeError):
    """Raised when every cell of the grid is occupied."""


def select_free_cell(
    occupied,
    columns: int,
    rows: int,
    rng: random.Random | None = None,
    max_attempts: int = FREE_CELL_MAX_ATTEMPTS,
) -> tuple[int, int]:
    """Return a uniformly sampled ``(column, row)`` not present in ``occupied``.

    Rejection sampling is tried first; after ``max_attempts`` misses the free
    cells are enumerated and sampled directly.
    """
    if columns <= 0 or rows <= 0:
        raise GridSaturatedError(f"grid has no cells ({columns}x{rows})")
    rng = rng or random
    for _ in range(max(0, int(max_attempts))):
        cell = (rng.randrange(columns), rng.randrange(rows))
        if cell not in occupied:
            return cell

    LOGGER.debug("rejection sampling exhausted after %d attempts", max_attempts)
    free = [(c, r) for c in range(columns) for r in range(rows) if (c, r) not in occupied]
    if not free:
        raise GridSaturatedError(f"all {columns * rows} cells are occupied")
    return rng.choice(free)
