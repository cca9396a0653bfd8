"""Repeated prisoners' dilemma simulation.

Two strategies play a fixed number of rounds against each other. Each round
both choose simultaneously to cooperate or defect, seeing the full history
of earlier rounds, and a payoff matrix scores the outcome.

Usage:
    from dilemma import AlwaysCooperate, AlwaysDefect, RepeatedGame

    game = RepeatedGame(AlwaysCooperate(), AlwaysDefect(), num_rounds=200)
    while not game.is_complete():
        game.play_round()
    game.calculate_score()  # (-1000, 4000)
"""

from dilemma.engine import GamePhase, RepeatedGame, create_game
from dilemma.models import (
    DEFAULT_MATRIX,
    Move,
    PayoffMatrix,
    PayoffParameters,
    build_matrix,
)
from dilemma.runner import GameResult, GameRunner, run_game
from dilemma.strategies import (
    AlwaysCooperate,
    AlwaysDefect,
    Erratic,
    Grudger,
    Pavlov,
    Strategy,
    SuspiciousTitForTat,
    TitForTat,
    TitForTwoTats,
    get_strategy_by_type,
    list_strategy_types,
)

__version__ = "0.1.0"

__all__ = [
    # Engine
    "GamePhase",
    "RepeatedGame",
    "create_game",
    # Models
    "DEFAULT_MATRIX",
    "Move",
    "PayoffMatrix",
    "PayoffParameters",
    "build_matrix",
    # Runner
    "GameResult",
    "GameRunner",
    "run_game",
    # Strategies
    "Strategy",
    "AlwaysCooperate",
    "AlwaysDefect",
    "TitForTat",
    "SuspiciousTitForTat",
    "TitForTwoTats",
    "Grudger",
    "Pavlov",
    "Erratic",
    "get_strategy_by_type",
    "list_strategy_types",
]
