"""Stochastic strategy implementations.

These strategies draw from their own ``random.Random`` so a seeded instance
replays the same sequence without touching the global random state.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import ClassVar

from dilemma.models.moves import Move
from dilemma.strategies.base import Strategy


class Erratic(Strategy):
    """Unpredictable actor - cooperates with a fixed probability.

    Represents an opponent whose behavior cannot be modeled or predicted.
    Useful for testing robustness of history-dependent strategies.
    """

    stochastic: ClassVar[bool] = True

    def __init__(self, cooperate_probability: float = 0.5, seed: int | None = None) -> None:
        """Initialize Erratic strategy.

        Args:
            cooperate_probability: Chance of cooperating each round (0.0-1.0)
            seed: Optional seed for reproducibility

        Raises:
            ValueError: If cooperate_probability is outside [0, 1]
        """
        if not 0.0 <= cooperate_probability <= 1.0:
            raise ValueError(f"cooperate_probability must be in [0, 1], got {cooperate_probability}")
        super().__init__(name="Erratic")
        self.cooperate_probability = cooperate_probability
        self._rng = random.Random(seed)

    def next_move(self, my_moves: Sequence[Move], their_moves: Sequence[Move]) -> Move:
        if self._rng.random() < self.cooperate_probability:
            return Move.COOPERATE
        return Move.DEFECT


__all__ = ["Erratic"]
