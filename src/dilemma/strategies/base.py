"""Base strategy interface for the repeated prisoners' dilemma.

This module defines the abstract base class for all strategies along with
the factory functions used to select strategies by name.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import ClassVar, Literal

from dilemma.models.moves import Move


class Strategy(ABC):
    """Abstract base class for all strategies.

    A strategy is a decision rule: given the full history of both players,
    it produces the next move. Strategies hold no game state of their own;
    everything needed to decide is in the two histories, so one instance can
    safely be reused across rounds and games.

    Subclasses:
        - Deterministic strategies (AlwaysCooperate, TitForTat, Grudger, etc.)
        - Stochastic strategies (Erratic)
    """

    # Stochastic strategies accept a ``seed`` keyword argument
    stochastic: ClassVar[bool] = False

    def __init__(self, name: str = "Strategy"):
        """Initialize strategy.

        Args:
            name: Display name used when reporting games
        """
        self.name = name

    @abstractmethod
    def next_move(self, my_moves: Sequence[Move], their_moves: Sequence[Move]) -> Move:
        """Choose this player's move for the next round.

        Both histories cover every round played so far (empty on the first
        call) and always have the same length.

        Args:
            my_moves: This player's previous moves, oldest first
            their_moves: The opponent's previous moves, oldest first

        Returns:
            The chosen move
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


# Type alias for strategy types
StrategyType = Literal[
    # Deterministic strategies
    "always_cooperate",
    "always_defect",
    "tit_for_tat",
    "suspicious_tit_for_tat",
    "tit_for_two_tats",
    "grudger",
    "pavlov",
    # Stochastic strategies
    "erratic",
]


def get_strategy_class(strategy_type: StrategyType | str) -> type[Strategy]:
    """Resolve a strategy type name to its class.

    Names are case-insensitive; hyphens and spaces count as underscores.
    A few common aliases are accepted (e.g. "grim_trigger" for Grudger).

    Raises:
        ValueError: If strategy type is unknown
    """
    # Import here to avoid circular imports
    from dilemma.strategies.deterministic import (
        AlwaysCooperate,
        AlwaysDefect,
        Grudger,
        Pavlov,
        SuspiciousTitForTat,
        TitForTat,
        TitForTwoTats,
    )
    from dilemma.strategies.stochastic import Erratic

    # Normalize type name
    type_name = strategy_type.lower().strip().replace("-", "_").replace(" ", "_")

    strategy_map: dict[str, type[Strategy]] = {
        "always_cooperate": AlwaysCooperate,
        "cooperate": AlwaysCooperate,
        "always_defect": AlwaysDefect,
        "defect": AlwaysDefect,
        "tit_for_tat": TitForTat,
        "titfortat": TitForTat,
        "suspicious_tit_for_tat": SuspiciousTitForTat,
        "tit_for_two_tats": TitForTwoTats,
        "grudger": Grudger,
        "grim_trigger": Grudger,
        "pavlov": Pavlov,
        "win_stay_lose_shift": Pavlov,
        "erratic": Erratic,
        "random": Erratic,
    }

    if type_name not in strategy_map:
        raise ValueError(
            f"Unknown strategy type: {strategy_type}. "
            f"Valid types: {[name for names in list_strategy_types().values() for name in names]}"
        )

    return strategy_map[type_name]


def get_strategy_by_type(strategy_type: StrategyType | str, **kwargs) -> Strategy:
    """Create strategy by type name.

    Factory function that returns the appropriate strategy instance
    based on the type name. Extra keyword arguments are passed to the
    strategy constructor (e.g. ``seed`` for Erratic).

    Args:
        strategy_type: Type of strategy to create

    Returns:
        Strategy instance

    Raises:
        ValueError: If strategy type is unknown
    """
    return get_strategy_class(strategy_type)(**kwargs)


def list_strategy_types() -> dict[str, list[str]]:
    """List all available strategy types by category.

    Returns:
        Dictionary with categories as keys and list of types as values
    """
    return {
        "deterministic": [
            "always_cooperate",
            "always_defect",
            "tit_for_tat",
            "suspicious_tit_for_tat",
            "tit_for_two_tats",
            "grudger",
            "pavlov",
        ],
        "stochastic": [
            "erratic",
        ],
    }
