"""Background grid used to reject candidates that crowd accepted samples."""
from __future__ import annotations

import math
from typing import Sequence

from bluenoise.geometry import Point, check_domain, check_radius, in_domain

__all__ = ["AccelerationGrid", "EMPTY"]

EMPTY = -1


class AccelerationGrid:
    """Dense cell table mapping grid cells to sample indices.

    Cells have side ``r / sqrt(2)`` so their diagonal equals ``r``; two
    samples at least ``r`` apart can never share a cell.  The grid stores
    indices into the caller's sample list, never coordinates.
    """

    def __init__(self, width: float, height: float, r: float):
        self.radius = check_radius(r)
        self.width, self.height = check_domain(width, height)
        self.cell_size = self.radius / math.sqrt(2.0)
        self.cols = int(math.ceil(self.width / self.cell_size))
        self.rows = int(math.ceil(self.height / self.cell_size))
        self._cells = [EMPTY] * (self.cols * self.rows)
        self._occupied = 0

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    def occupied(self) -> int:
        return self._occupied

    def cell_of(self, p: tuple[float, float]) -> tuple[int, int]:
        """Return ``(row, col)`` for a point inside the domain."""
        gy = min(int(p[1] / self.cell_size), self.rows - 1)
        gx = min(int(p[0] / self.cell_size), self.cols - 1)
        return gy, gx

    def get(self, row: int, col: int) -> int:
        return self._cells[row * self.cols + col]

    def insert(self, p: tuple[float, float], index: int) -> None:
        gy, gx = self.cell_of(p)
        slot = gy * self.cols + gx
        if self._cells[slot] == EMPTY:
            self._occupied += 1
        self._cells[slot] = index

    def is_valid(
        self,
        candidate: tuple[float, float],
        samples: Sequence[Point],
        r: float | None = None,
    ) -> bool:
        """Return ``True`` if ``candidate`` may be accepted.

        ``samples`` is the list the stored indices point into.  For the grid's
        own radius the 5x5 block of cells around the candidate is enough; a
        larger ``r`` widens the scan to ``ceil(r / cell_size)`` cells each way.
        """
        if not in_domain(candidate, self.width, self.height):
            return False
        rr = self.radius if r is None else r
        reach = 2 if rr <= self.radius else int(math.ceil(rr / self.cell_size))
        r2 = rr * rr
        cx, cy = candidate[0], candidate[1]
        gy, gx = self.cell_of(candidate)
        cols = self.cols
        cells = self._cells
        for yy in range(max(gy - reach, 0), min(gy + reach + 1, self.rows)):
            base = yy * cols
            for xx in range(max(gx - reach, 0), min(gx + reach + 1, cols)):
                si = cells[base + xx]
                if si == EMPTY:
                    continue
                qx, qy = samples[si]
                if (cx - qx) ** 2 + (cy - qy) ** 2 < r2:
                    return False
        return True
