"""Core game engine for the repeated prisoners' dilemma.

This module implements the RepeatedGame class, which plays a fixed number of
rounds between two strategies and scores the result.

Round Sequence:
1. DECIDE - Ask each strategy for its move, giving it (own history, opponent history)
2. RECORD - Append both moves to their histories together
3. ADVANCE - Phase moves EMPTY -> IN_PROGRESS -> COMPLETE

Scoring is not accumulated during play. ``calculate_score`` folds the payoff
matrix over the recorded histories, so it is valid at any point of a game.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from enum import Enum
from typing import Optional

from dilemma import parameters
from dilemma.models.matrices import DEFAULT_MATRIX, PayoffMatrix, PayoffParameters, build_matrix
from dilemma.models.moves import Move, MoveHistory
from dilemma.strategies.base import Strategy, get_strategy_by_type

logger = logging.getLogger(__name__)


class GamePhase(Enum):
    """Lifecycle phase of a repeated game."""

    EMPTY = "empty"  # No rounds played
    IN_PROGRESS = "in_progress"  # 1..num_rounds-1 rounds played
    COMPLETE = "complete"  # num_rounds rounds played


class RepeatedGame:
    """An instance of the repeated prisoners' dilemma.

    The same two players play against each other for several rounds. In each
    round they choose simultaneously whether to cooperate or defect, and they
    have knowledge of the entire history of the game.

    The game exclusively owns both move histories. They are only ever
    extended together, so they always have the same length.

    Usage:
        game = RepeatedGame(AlwaysCooperate(), AlwaysDefect(), num_rounds=200)
        while not game.is_complete():
            game.play_round()
        score_a, score_b = game.calculate_score()
    """

    def __init__(
        self,
        strategy_a: Strategy,
        strategy_b: Strategy,
        num_rounds: int = parameters.NUM_ROUNDS,
        matrix: PayoffMatrix = DEFAULT_MATRIX,
    ):
        """Initialize an empty game.

        Args:
            strategy_a: Strategy for player A
            strategy_b: Strategy for player B
            num_rounds: Number of rounds in a complete game
            matrix: Payoff matrix used for scoring

        Raises:
            ValueError: If num_rounds is negative
        """
        if num_rounds < 0:
            raise ValueError(f"num_rounds must be non-negative, got {num_rounds}")

        self.strategy_a = strategy_a
        self.strategy_b = strategy_b
        self.num_rounds = num_rounds
        self.matrix = matrix

        self._player_a_moves: MoveHistory = []
        self._player_b_moves: MoveHistory = []

        logger.info(f"New game: {strategy_a.name} vs {strategy_b.name}, {num_rounds} rounds")

    # -------------------------------------------------------------------------
    # State queries
    # -------------------------------------------------------------------------

    @property
    def player_a_moves(self) -> MoveHistory:
        """Copy of player A's move history."""
        return list(self._player_a_moves)

    @property
    def player_b_moves(self) -> MoveHistory:
        """Copy of player B's move history."""
        return list(self._player_b_moves)

    @property
    def history(self) -> list[tuple[Move, Move]]:
        """Move pairs (A, B) for every round played, oldest first."""
        return list(zip(self._player_a_moves, self._player_b_moves))

    @property
    def rounds_played(self) -> int:
        return len(self._player_a_moves)

    @property
    def phase(self) -> GamePhase:
        if self.rounds_played >= self.num_rounds:
            return GamePhase.COMPLETE
        if self.rounds_played == 0:
            return GamePhase.EMPTY
        return GamePhase.IN_PROGRESS

    def is_complete(self) -> bool:
        """Check if every round has been played."""
        return self.phase == GamePhase.COMPLETE

    # -------------------------------------------------------------------------
    # Play
    # -------------------------------------------------------------------------

    def play_round(self) -> None:
        """Play the next round.

        Each strategy sees its own history as ``my_moves`` and the opponent's
        as ``their_moves``. Both moves are decided before either is recorded.

        Raises:
            RuntimeError: If the game is already complete, or the histories
                have drifted apart (an engine bug)
            TypeError: If a strategy returns something other than a Move
        """
        if self.is_complete():
            raise RuntimeError(f"Game is already complete after {self.num_rounds} rounds")

        move_a = self._ask(self.strategy_a, self._player_a_moves, self._player_b_moves)
        move_b = self._ask(self.strategy_b, self._player_b_moves, self._player_a_moves)

        self._player_a_moves.append(move_a)
        self._player_b_moves.append(move_b)

        logger.debug(f"Round {self.rounds_played}: ({move_a.value}, {move_b.value})")

    def _ask(self, strategy: Strategy, my_moves: Sequence[Move], their_moves: Sequence[Move]) -> Move:
        """Ask one strategy for its next move, enforcing the strategy contract."""
        if len(my_moves) != len(their_moves):
            raise RuntimeError(
                f"Move histories out of step: {len(my_moves)} vs {len(their_moves)} moves "
                f"when asking {strategy.name}"
            )

        # Read-only views of the histories
        move = strategy.next_move(tuple(my_moves), tuple(their_moves))
        if not isinstance(move, Move):
            raise TypeError(f"{strategy.name} returned {move!r}, expected a Move")
        return move

    # -------------------------------------------------------------------------
    # Scoring
    # -------------------------------------------------------------------------

    def calculate_score(self) -> tuple[int, int]:
        """Calculate the total score (player A, player B) over rounds played so far.

        Read-only and idempotent; valid in every phase.
        """
        score_a, score_b = 0, 0
        for move_a, move_b in zip(self._player_a_moves, self._player_b_moves):
            payoff_a, payoff_b = self.matrix.score(move_a, move_b)
            score_a += payoff_a
            score_b += payoff_b
        return score_a, score_b


# =============================================================================
# Factory function for creating games
# =============================================================================


def create_game(
    strategy_a: str,
    strategy_b: str,
    num_rounds: Optional[int] = None,
    params: Optional[PayoffParameters] = None,
) -> RepeatedGame:
    """Create a new game between two strategies selected by name.

    Args:
        strategy_a: Strategy type name for player A (e.g. "tit_for_tat")
        strategy_b: Strategy type name for player B
        num_rounds: Override for the number of rounds (default: NUM_ROUNDS)
        params: Override for the payoff parameters

    Returns:
        Initialized RepeatedGame

    Raises:
        ValueError: If a strategy name is unknown or num_rounds is negative
    """
    return RepeatedGame(
        strategy_a=get_strategy_by_type(strategy_a),
        strategy_b=get_strategy_by_type(strategy_b),
        num_rounds=parameters.NUM_ROUNDS if num_rounds is None else num_rounds,
        matrix=DEFAULT_MATRIX if params is None else build_matrix(params),
    )
