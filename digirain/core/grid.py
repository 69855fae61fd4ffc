"""Character grid derived from the window pixel size."""

from __future__ import annotations

from dataclasses import dataclass

from ..constants import AMOUNT_OF_COLUMNS


@dataclass(frozen=True)
class Grid:
    """Column/row partition of the window.

    ``columns`` is fixed by configuration; ``cell_dimension`` and ``rows``
    always follow the last observed window size.
    """

    window_width: int = 0
    window_height: int = 0
    columns: int = AMOUNT_OF_COLUMNS
    cell_dimension: float = 0.0
    rows: int = 0

    @property
    def is_sized(self) -> bool:
        return self.rows > 0 and self.cell_dimension > 0

    def cells(self) -> int:
        return self.columns * self.rows

    def column_to_x(self, column: int) -> float:
        """Return the pixel x of the left edge of ``column``."""
        return column * self.cell_dimension

    def row_to_y(self, row: int) -> float:
        """Return the pixel y of the top edge of ``row``."""
        return row * self.cell_dimension


def recompute(window_width: int, window_height: int, columns: int = AMOUNT_OF_COLUMNS) -> Grid:
    """Build the grid for a window of ``window_width`` x ``window_height`` pixels."""
    window_width = max(0, int(window_width))
    window_height = max(0, int(window_height))
    cell_dimension = window_width / columns
    if cell_dimension <= 0:
        return Grid(window_width, window_height, columns, 0.0, 0)
    # floor(height / (width / columns)) without float rounding
    rows = (window_height * columns) // window_width
    return Grid(window_width, window_height, columns, cell_dimension, rows)
