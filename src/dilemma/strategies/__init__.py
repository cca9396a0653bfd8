"""Strategy implementations for the repeated prisoners' dilemma.

This module provides the strategies that can be pitted against each other:

1. Deterministic strategies - Pure functions of the move histories
   (AlwaysCooperate, TitForTat, Grudger, etc.)
2. Stochastic strategies - Randomized choices (Erratic)

All strategies implement the Strategy base class interface.
"""

from dilemma.strategies.base import (
    Strategy,
    StrategyType,
    get_strategy_by_type,
    get_strategy_class,
    list_strategy_types,
)
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

__all__ = [
    # Base classes and types
    "Strategy",
    "StrategyType",
    # Factory functions
    "get_strategy_by_type",
    "get_strategy_class",
    "list_strategy_types",
    # Deterministic strategies
    "AlwaysCooperate",
    "AlwaysDefect",
    "TitForTat",
    "SuspiciousTitForTat",
    "TitForTwoTats",
    "Grudger",
    "Pavlov",
    # Stochastic strategies
    "Erratic",
]
