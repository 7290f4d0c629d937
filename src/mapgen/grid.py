"""Terrain grid: elevation storage, fault-line mutation, stats and rendering."""

from typing import Mapping

import numpy as np
import structlog
from numpy.typing import NDArray
from pydantic import BaseModel

from .exceptions import InvalidDimensionsError, MutationLimitError
from .faults import FaultLine, RandomSource, draw_fault_line
from .rendering import TerrainClass, render_elevations

logger = structlog.get_logger()

# Cells are uint16 and each mutation raises a cell by at most 1
MAX_MUTATIONS = int(np.iinfo(np.uint16).max)


class TerrainStats(BaseModel, frozen=True):
    """Summary of the elevations in a grid."""

    min: int = 0
    avg: int = 0
    max: int = 0


class TerrainGrid:
    """Rectangular elevation grid shaped by random fault lines.

    Statistics are cached and only refreshed by ``recompute_stats``, so a
    caller can apply a batch of mutations before paying for one scan.
    """

    def __init__(
        self,
        height: int,
        width: int,
        seed: int | None = None,
        rng: RandomSource | None = None,
    ):
        """Create a grid with every cell at elevation 0.

        Args:
            height: Number of rows, must be positive.
            width: Number of columns, must be positive.
            seed: Seed for the owned random generator (None = OS entropy).
            rng: Random source to use instead of a seeded generator.

        Raises:
            InvalidDimensionsError: If either dimension is not a positive int.
        """
        for name, value in (("height", height), ("width", width)):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise InvalidDimensionsError(f"{name} must be an integer, got {value!r}")
            if value <= 0:
                raise InvalidDimensionsError(f"{name} must be positive, got {value}")

        self._height = int(height)
        self._width = int(width)
        self._elevations = np.zeros((self._height, self._width), dtype=np.uint16)
        self._rng: RandomSource = rng if rng is not None else np.random.default_rng(seed)
        self._stats = TerrainStats()
        self._mutations = 0

        logger.debug("grid_created", height=self._height, width=self._width)

    @property
    def height(self) -> int:
        return self._height

    @property
    def width(self) -> int:
        return self._width

    @property
    def area(self) -> int:
        return self._height * self._width

    @property
    def elevations(self) -> NDArray[np.uint16]:
        """Read-only view of the elevation matrix."""
        view = self._elevations.view()
        view.flags.writeable = False
        return view

    @property
    def mutations(self) -> int:
        """Number of fault lines applied so far."""
        return self._mutations

    @property
    def stats(self) -> TerrainStats:
        """Statistics as of the last ``recompute_stats`` call."""
        return self._stats

    @property
    def min(self) -> int:
        return self._stats.min

    @property
    def avg(self) -> int:
        return self._stats.avg

    @property
    def max(self) -> int:
        return self._stats.max

    # --- Mutation ---

    def apply_fault_line(self, line: FaultLine) -> None:
        """Raise every cell on the selected side of ``line`` by 1.

        Raises:
            MutationLimitError: If the grid has already absorbed
                MAX_MUTATIONS fault lines.
        """
        if self._mutations >= MAX_MUTATIONS:
            logger.warning("mutation_limit_reached", mutations=self._mutations)
            raise MutationLimitError(
                f"Grid already mutated {self._mutations} times "
                f"(limit {MAX_MUTATIONS})"
            )

        self._elevations[line.mask(self._height, self._width)] += 1
        self._mutations += 1

    def mutate(self) -> FaultLine:
        """Apply one random fault line and return it."""
        line = draw_fault_line(self._rng, self._height, self._width)
        self.apply_fault_line(line)
        return line

    def mutate_many(self, count: int) -> int:
        """Apply ``count`` random fault lines.

        Returns:
            Number of mutations applied.

        Raises:
            ValueError: If ``count`` is negative.
        """
        if count < 0:
            raise ValueError(f"Cannot apply a negative number of mutations: {count}")

        for _ in range(count):
            self.mutate()
        logger.debug("grid_mutated", count=count, total=self._mutations)
        return count

    # --- Statistics ---

    def recompute_stats(self) -> TerrainStats:
        """Scan the grid and refresh the cached min/avg/max."""
        total = int(self._elevations.sum(dtype=np.int64))
        self._stats = TerrainStats(
            min=int(self._elevations.min()),
            avg=total // self.area,
            max=int(self._elevations.max()),
        )
        return self._stats

    # --- Rendering ---

    def render(
        self,
        beach_level: int,
        hills_level: int,
        glyphs: Mapping[TerrainClass, str] | None = None,
    ) -> str:
        """Render the grid as text.

        Cells below ``beach_level`` are water, cells at or above
        ``hills_level`` are hills and everything in between is lowland.
        Threshold order is not checked.
        """
        return render_elevations(self._elevations, beach_level, hills_level, glyphs)
