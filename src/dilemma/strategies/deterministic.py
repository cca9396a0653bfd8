"""Deterministic strategy implementations.

Each strategy here is a pure function of the two move histories: the same
histories always produce the same move. That keeps games between them
reproducible and makes every strategy testable round by round.
"""

from __future__ import annotations

from collections.abc import Sequence

from dilemma.models.moves import Move
from dilemma.strategies.base import Strategy


class AlwaysCooperate(Strategy):
    """Cooperates every round, ignoring history."""

    def __init__(self) -> None:
        super().__init__(name="Always Cooperate")

    def next_move(self, my_moves: Sequence[Move], their_moves: Sequence[Move]) -> Move:
        return Move.COOPERATE


class AlwaysDefect(Strategy):
    """Defects every round, ignoring history."""

    def __init__(self) -> None:
        super().__init__(name="Always Defect")

    def next_move(self, my_moves: Sequence[Move], their_moves: Sequence[Move]) -> Move:
        return Move.DEFECT


class TitForTat(Strategy):
    """Reciprocator - cooperates first, then mirrors the opponent.

    Strategic pattern:
    - Round 1: cooperate
    - Afterwards: play whatever the opponent played last round
    """

    def __init__(self) -> None:
        super().__init__(name="Tit for Tat")

    def next_move(self, my_moves: Sequence[Move], their_moves: Sequence[Move]) -> Move:
        if not their_moves:
            return Move.COOPERATE
        return their_moves[-1]


class SuspiciousTitForTat(Strategy):
    """Tit for Tat that opens with a defection."""

    def __init__(self) -> None:
        super().__init__(name="Suspicious Tit for Tat")

    def next_move(self, my_moves: Sequence[Move], their_moves: Sequence[Move]) -> Move:
        if not their_moves:
            return Move.DEFECT
        return their_moves[-1]


class TitForTwoTats(Strategy):
    """Forgiving reciprocator - retaliates only after two defections in a row."""

    def __init__(self) -> None:
        super().__init__(name="Tit for Two Tats")

    def next_move(self, my_moves: Sequence[Move], their_moves: Sequence[Move]) -> Move:
        if len(their_moves) >= 2 and their_moves[-1] is Move.DEFECT and their_moves[-2] is Move.DEFECT:
            return Move.DEFECT
        return Move.COOPERATE


class Grudger(Strategy):
    """Punisher - cooperates until betrayed, then defects forever.

    A harsh strategy that enforces cooperation through the threat of
    permanent retaliation. Once triggered, never forgives.

    The trigger is recomputed from the opponent's history every round
    instead of being stored, so the instance stays stateless.
    """

    def __init__(self) -> None:
        super().__init__(name="Grudger")

    def next_move(self, my_moves: Sequence[Move], their_moves: Sequence[Move]) -> Move:
        if Move.DEFECT in their_moves:
            return Move.DEFECT
        return Move.COOPERATE


class Pavlov(Strategy):
    """Win-stay, lose-shift.

    Strategic pattern:
    - Round 1: cooperate
    - After a win (opponent cooperated: R or T payoff), repeat the last move
    - After a loss (opponent defected: S or P payoff), switch moves
    """

    def __init__(self) -> None:
        super().__init__(name="Pavlov")

    def next_move(self, my_moves: Sequence[Move], their_moves: Sequence[Move]) -> Move:
        if not my_moves:
            return Move.COOPERATE

        my_last, their_last = my_moves[-1], their_moves[-1]
        if their_last is Move.COOPERATE:
            return my_last
        return my_last.opposite()


# Export all strategy classes
__all__ = [
    "AlwaysCooperate",
    "AlwaysDefect",
    "TitForTat",
    "SuspiciousTitForTat",
    "TitForTwoTats",
    "Grudger",
    "Pavlov",
]
