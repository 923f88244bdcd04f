# masking_utils/mask.py
import sys
from typing import Tuple

import numpy as np

from .errors import MalformedMaskError, MaskIndexError

UNPLACED = (-1, -1)


class Mask:
    """
    A rectangular grid of selection flags anchored on a source image.

    Parameters
    ----------
    height, width : int
        Grid size in cells (one cell per source pixel). Both must be >= 1.

    Attributes
    ----------
    bits : np.ndarray
        (height, width) uint8, non-zero = selected.
    position : tuple[int, int]
        (x, y) of the top-left cell in source-image coordinates.
        (-1, -1) until the mask is placed.
    """

    def __init__(self, height: int, width: int):
        height, width = int(height), int(width)
        if height < 1 or width < 1:
            raise MalformedMaskError(f"Mask must be at least 1x1, got {height}x{width}")

        self.bits: np.ndarray = np.zeros((height, width), dtype=np.uint8)
        self.position: Tuple[int, int] = UNPLACED

    @classmethod
    def from_bits(cls, rows):
        """Build a mask from a nested sequence (or 2D array) of flags."""
        if isinstance(rows, np.ndarray):
            if rows.ndim != 2:
                raise MalformedMaskError(f"Expected a 2D grid, got shape {rows.shape}")
            grid = rows
        else:
            rows = [list(r) for r in rows]
            if not rows or not rows[0]:
                raise MalformedMaskError("Mask has no cells")
            width = len(rows[0])
            if any(len(r) != width for r in rows):
                raise MalformedMaskError("Mask rows differ in length")
            grid = np.array(rows)
            if grid.ndim != 2:
                raise MalformedMaskError(f"Expected a 2D grid, got shape {grid.shape}")

        m = cls(*grid.shape)
        m.bits[:] = (grid != 0)
        return m

    # ======================================================
    # Shape / placement
    # ======================================================
    @property
    def height(self) -> int:
        return self.bits.shape[0]

    @property
    def width(self) -> int:
        return self.bits.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return self.bits.shape

    @property
    def is_placed(self) -> bool:
        return self.position != UNPLACED

    def set_position(self, x: int, y: int):
        # no check against any image, extraction validates reads
        self.position = (int(x), int(y))

    # ======================================================
    # Cells
    # ======================================================
    def _check_cell(self, row, col):
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise MaskIndexError(
                f"Cell ({row}, {col}) outside mask of {self.height}x{self.width}"
            )

    def is_selected(self, row: int, col: int) -> bool:
        self._check_cell(row, col)
        return bool(self.bits[row, col])

    def set_selected(self, row: int, col: int, selected: bool = True):
        self._check_cell(row, col)
        self.bits[row, col] = 1 if selected else 0

    def select_all(self):
        self.bits.fill(1)

    def clear(self):
        self.bits.fill(0)

    def selected_count(self) -> int:
        return int(np.count_nonzero(self.bits))

    # ======================================================
    # Debug
    # ======================================================
    def render(self, on="#", off=".") -> str:
        return "\n".join(
            "".join(on if v else off for v in row) for row in self.bits
        )

    def debug_print(self, file=None):
        print(self.render(), file=file or sys.stdout)

    def __repr__(self):
        return f"Mask({self.height}x{self.width} at {self.position}, {self.selected_count()} selected)"
