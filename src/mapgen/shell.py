"""Interactive console session around a TerrainGrid."""

from typing import Callable

import structlog

from .budget import MutationBudget
from .config import Config
from .exceptions import InputError
from .grid import TerrainGrid

logger = structlog.get_logger()

BANNER = "Map-Generator-5"


def parse_unsigned(text: str, what: str) -> int:
    """Parse a non-negative decimal integer typed at the console.

    Raises:
        InputError: If the text is not an unsigned integer.
    """
    stripped = text.strip()
    if not (stripped.isascii() and stripped.isdigit()):
        raise InputError(f"Failed to parse {what} as an unsigned integer")
    return int(stripped)


class MapSession:
    """One console session: pick dimensions, then mutate and render in a loop.

    Input and output are injected so the session can run against a real
    console or a scripted sequence of answers.
    """

    def __init__(
        self,
        config: Config,
        read: Callable[[], str],
        write: Callable[[str], None],
    ):
        self.config = config
        self._read = read
        self._write = write
        self.grid: TerrainGrid | None = None
        self.budget = MutationBudget(total=config.limits.max_mutations)

    def run(self) -> int:
        """Run the session until the user exits or the budget runs out.

        Returns:
            Process exit status: 0 on a normal exit, 1 on invalid input.
        """
        self._write(BANNER)
        try:
            height = self._ask_dimension("Height", self.config.limits.max_height)
            width = self._ask_dimension("Width", self.config.limits.max_width)
            self.grid = TerrainGrid(height, width, seed=self.config.generator.seed)
            logger.info("session_started", height=height, width=width)
            self._loop(self.grid)
        except InputError as e:
            self._write(str(e))
            logger.warning("session_input_rejected", error=str(e))
            return 1
        except EOFError:
            logger.info("session_input_closed")
            return 0

        logger.info("session_finished", mutations=self.budget.used)
        return 0

    def _ask(self, prompt: str, what: str) -> int:
        self._write(prompt)
        return parse_unsigned(self._read(), what)

    def _ask_dimension(self, label: str, limit: int) -> int:
        value = self._ask(f"{label}?", label.lower())
        limits = self.config.limits
        if value > limit:
            raise InputError(
                f"{label} is too big. Limits are width ≤ {limits.max_width}, "
                f"height ≤ {limits.max_height}."
            )
        if value == 0:
            raise InputError(f"{label} must be at least 1.")
        return value

    def _loop(self, grid: TerrainGrid) -> None:
        budget = self.budget
        while not budget.exhausted:
            requested = self._ask(
                f"Mutate how many times? (At most {budget.remaining} times remain. "
                "0 to exit.)",
                "number of mutations",
            )
            if requested == 0:
                self._write("Exited!")
                return
            if requested > budget.remaining:
                self._write(
                    f"{requested} > {budget.remaining}. "
                    f"Mutating only {budget.remaining} times..."
                )

            grid.mutate_many(budget.take(requested))
            stats = grid.recompute_stats()
            self._write(
                f"Mutated {budget.used} times total | Area = {grid.area} | "
                f"Minimum elevation = {stats.min} | "
                f"Average elevation = {stats.avg} | "
                f"Maximum elevation = {stats.max}"
            )

            beach_level = self._ask(
                "Beach elevation? (Lower elevations will be covered in water.)",
                "beach elevation",
            )
            hills_level = self._ask(
                "Elevation of lowest foothills?", "hills elevation"
            )
            self._write(
                grid.render(
                    beach_level,
                    hills_level,
                    glyphs=self.config.glyphs.as_mapping(),
                )
            )

        self._write("Done!")
