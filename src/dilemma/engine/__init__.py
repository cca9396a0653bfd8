"""Game engine module for the repeated prisoners' dilemma.

Usage:
    from dilemma.engine import create_game

    game = create_game("tit_for_tat", "grudger", num_rounds=10)
    while not game.is_complete():
        game.play_round()

    print(game.calculate_score())
"""

from dilemma.engine.game_engine import (
    GamePhase,
    RepeatedGame,
    create_game,
)

__all__ = [
    "GamePhase",
    "RepeatedGame",
    "create_game",
]
