"""Game runner for the repeated prisoners' dilemma.

This module drives a RepeatedGame to completion and reports it. It
serves as the entry point behind the CLI and as the harness used by the
integration tests.

Report format (one line each, on the ``echo`` callable):
    Playing strategy <Name A> against <Name B>
    (Cooperate, Defect)          <- once per round
    Final score: (-1000, 4000)
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from dilemma import parameters
from dilemma.engine.game_engine import RepeatedGame
from dilemma.models.matrices import DEFAULT_MATRIX, PayoffMatrix
from dilemma.models.moves import format_round
from dilemma.strategies.base import Strategy

logger = logging.getLogger(__name__)


@dataclass
class GameResult:
    """Result of a completed game.

    Captures all relevant data for reporting and analysis.
    """

    strategy_a_name: str
    strategy_b_name: str
    rounds_played: int
    score_a: int
    score_b: int
    history: list[tuple[str, str]]  # (move_a, move_b) per round

    @property
    def score(self) -> tuple[int, int]:
        return (self.score_a, self.score_b)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "strategy_a": self.strategy_a_name,
            "strategy_b": self.strategy_b_name,
            "rounds_played": self.rounds_played,
            "score_a": self.score_a,
            "score_b": self.score_b,
            "history": [list(pair) for pair in self.history],
        }


class GameRunner:
    """Runs a single game between two strategies and reports it.

    Usage:
        runner = GameRunner(AlwaysCooperate(), AlwaysDefect())
        result = runner.run_game()
    """

    def __init__(
        self,
        strategy_a: Strategy,
        strategy_b: Strategy,
        num_rounds: int = parameters.NUM_ROUNDS,
        matrix: PayoffMatrix = DEFAULT_MATRIX,
        verbose: bool = True,
        echo: Callable[[str], None] = print,
    ):
        """Initialize the game runner.

        Args:
            strategy_a: Strategy for player A
            strategy_b: Strategy for player B
            num_rounds: Number of rounds to play
            matrix: Payoff matrix used for scoring
            verbose: Report every round's moves (startup and final lines are always reported)
            echo: Callable receiving each report line
        """
        self.strategy_a = strategy_a
        self.strategy_b = strategy_b
        self.num_rounds = num_rounds
        self.matrix = matrix
        self.verbose = verbose
        self.echo = echo

    def run_game(self) -> GameResult:
        """Play every round in order and report the outcome."""
        game = RepeatedGame(
            strategy_a=self.strategy_a,
            strategy_b=self.strategy_b,
            num_rounds=self.num_rounds,
            matrix=self.matrix,
        )

        self.echo(f"Playing strategy {self.strategy_a.name} against {self.strategy_b.name}")

        for _ in range(self.num_rounds):
            game.play_round()
            if self.verbose:
                move_a, move_b = game.history[-1]
                self.echo(format_round(move_a, move_b))

        score_a, score_b = game.calculate_score()
        self.echo(f"Final score: ({score_a}, {score_b})")
        logger.info(f"Game finished: {self.strategy_a.name} {score_a}, {self.strategy_b.name} {score_b}")

        return GameResult(
            strategy_a_name=self.strategy_a.name,
            strategy_b_name=self.strategy_b.name,
            rounds_played=game.rounds_played,
            score_a=score_a,
            score_b=score_b,
            history=[(a.value, b.value) for a, b in game.history],
        )


def run_game(
    strategy_a: Strategy,
    strategy_b: Strategy,
    num_rounds: int = parameters.NUM_ROUNDS,
    matrix: PayoffMatrix = DEFAULT_MATRIX,
    verbose: bool = True,
    echo: Callable[[str], None] = print,
) -> GameResult:
    """Convenience wrapper: build a GameRunner and run one game."""
    runner = GameRunner(
        strategy_a=strategy_a,
        strategy_b=strategy_b,
        num_rounds=num_rounds,
        matrix=matrix,
        verbose=verbose,
        echo=echo,
    )
    return runner.run_game()
