"""Shared test fixtures for map generator tests."""

from collections import deque

import pytest

from mapgen.faults import SLOPES
from mapgen.grid import TerrainGrid


class StubRandom:
    """Random source that replays fixed fault-line draws.

    Each line is (pivot_col, pivot_row, slope, side) and is returned in the
    order draw_fault_line consumes it.
    """

    def __init__(self, *lines: tuple[int, int, float, bool]):
        self._ints: deque[int] = deque()
        self._floats: deque[float] = deque()
        for pivot_col, pivot_row, slope, side in lines:
            self._ints.extend([pivot_col, pivot_row, SLOPES.index(slope)])
            # side is drawn as random() < 0.5
            self._floats.append(0.0 if side else 0.9)

    def integers(self, low: int, high: int) -> int:
        value = self._ints.popleft()
        assert low <= value < high, f"{value} outside [{low}, {high})"
        return value

    def random(self) -> float:
        return self._floats.popleft()


class ScriptedConsole:
    """Console that answers prompts from a list and records output."""

    def __init__(self, *answers: str):
        self._answers = deque(answers)
        self.output: list[str] = []

    def read(self) -> str:
        if not self._answers:
            raise EOFError
        return self._answers.popleft()

    def write(self, text: str) -> None:
        self.output.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.output)


@pytest.fixture
def stub_random():
    """Factory for StubRandom instances."""
    return StubRandom


@pytest.fixture
def seeded_grid() -> TerrainGrid:
    """12x9 grid with a fixed seed and no mutations."""
    return TerrainGrid(height=12, width=9, seed=1234)


@pytest.fixture
def mutated_grid(seeded_grid: TerrainGrid) -> TerrainGrid:
    """Seeded grid after 40 mutations with fresh statistics."""
    seeded_grid.mutate_many(40)
    seeded_grid.recompute_stats()
    return seeded_grid


@pytest.fixture
def scripted_console():
    """Factory for ScriptedConsole instances."""
    return ScriptedConsole
