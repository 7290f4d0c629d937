"""Lifetime mutation budget for an interactive session."""

from dataclasses import dataclass, field

import structlog

from .grid import MAX_MUTATIONS

logger = structlog.get_logger()


@dataclass
class MutationBudget:
    """Countdown of mutations a session may still apply to its grid.

    Requests larger than what remains are clamped rather than rejected.
    """

    total: int = MAX_MUTATIONS
    remaining: int = field(init=False)

    def __post_init__(self) -> None:
        if self.total < 0:
            raise ValueError(f"Budget total must be non-negative, got {self.total}")
        self.remaining = self.total

    @property
    def used(self) -> int:
        return self.total - self.remaining

    @property
    def exhausted(self) -> bool:
        return self.remaining == 0

    def take(self, requested: int) -> int:
        """Reserve up to ``requested`` mutations.

        Returns:
            Number of mutations granted, at most ``remaining``.

        Raises:
            ValueError: If ``requested`` is negative.
        """
        if requested < 0:
            raise ValueError(f"Cannot take a negative number of mutations: {requested}")

        granted = min(requested, self.remaining)
        if granted < requested:
            logger.info(
                "mutation_request_clamped",
                requested=requested,
                granted=granted,
            )
        self.remaining -= granted
        return granted
