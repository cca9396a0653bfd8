"""Move definitions for the repeated prisoners' dilemma.

A move is the simultaneous choice a player makes each round. The enum value
doubles as the literal tag printed in round reports, e.g. ``(Cooperate, Defect)``.
"""

from enum import Enum


class Move(str, Enum):
    """The two choices in the single prisoners' dilemma.

    Inherits from str for proper JSON serialization.
    """

    COOPERATE = "Cooperate"
    DEFECT = "Defect"

    def opposite(self) -> "Move":
        """Return the other move."""
        if self is Move.COOPERATE:
            return Move.DEFECT
        return Move.COOPERATE

    def __str__(self) -> str:
        return self.value


MoveHistory = list[Move]
"""Ordered, append-only sequence of one player's moves, oldest first."""


_MOVE_ALIASES: dict[str, Move] = {
    "cooperate": Move.COOPERATE,
    "c": Move.COOPERATE,
    "defect": Move.DEFECT,
    "d": Move.DEFECT,
}


def parse_move(text: str) -> Move:
    """Parse a move from user-supplied text.

    Accepts the full names and their single-letter forms, case-insensitively.

    Raises:
        ValueError: If the text names no move
    """
    key = text.strip().lower()
    if key not in _MOVE_ALIASES:
        raise ValueError(f"Unknown move: {text!r}. Valid moves: {sorted(_MOVE_ALIASES)}")
    return _MOVE_ALIASES[key]


def format_round(move_a: Move, move_b: Move) -> str:
    """Format one round's move pair the way round reports print it."""
    return f"({move_a.value}, {move_b.value})"
