"""Fault lines: the random linear boundaries used to raise terrain."""

from typing import Protocol

import numpy as np
from numpy.typing import NDArray
from pydantic import BaseModel

# Possible slopes (rows per column) of a random fault line.
# Zero is absent and vertical lines cannot be expressed as a slope.
SLOPES: tuple[float, ...] = (-4.0, -2.0, -1.0, -0.5, -0.25, 0.25, 0.5, 1.0, 2.0, 4.0)


class RandomSource(Protocol):
    """The subset of numpy.random.Generator used to draw fault lines."""

    def integers(self, low: int, high: int) -> int: ...

    def random(self) -> float: ...


class FaultLine(BaseModel, frozen=True):
    """Immutable fault line f(col) = slope * (col - pivot_col) + pivot_row.

    ``side`` selects which half-plane is raised: True raises cells on or
    above the line (f(col) >= row), False raises cells on or below it.
    Cells exactly on the line are raised either way.
    """

    pivot_col: float
    pivot_row: float
    slope: float
    side: bool

    def evaluate(self, col: float | NDArray[np.float64]) -> float | NDArray[np.float64]:
        """Row coordinate of the line at the given column(s)."""
        return self.slope * (col - self.pivot_col) + self.pivot_row

    def mask(self, height: int, width: int) -> NDArray[np.bool_]:
        """Boolean mask of the cells this fault line raises.

        Args:
            height: Number of grid rows.
            width: Number of grid columns.

        Returns:
            Array of shape (height, width), True where a cell is raised.
        """
        rows = np.arange(height, dtype=np.float64)[:, np.newaxis]
        cols = np.arange(width, dtype=np.float64)[np.newaxis, :]
        f = self.evaluate(cols)

        on_line = f == rows
        return on_line | ((f < rows) ^ self.side)

    def flipped(self) -> "FaultLine":
        """Return the same line raising the opposite side."""
        return self.model_copy(update={"side": not self.side})


def draw_fault_line(rng: RandomSource, height: int, width: int) -> FaultLine:
    """Draw a random fault line through a height x width grid.

    The pivot is a uniformly random cell, the slope is uniform over SLOPES
    and the raised side is a fair coin flip.
    """
    pivot_col = int(rng.integers(0, width))
    pivot_row = int(rng.integers(0, height))
    slope = SLOPES[int(rng.integers(0, len(SLOPES)))]
    side = bool(rng.random() < 0.5)

    return FaultLine(
        pivot_col=float(pivot_col),
        pivot_row=float(pivot_row),
        slope=slope,
        side=side,
    )
