"""Repeated prisoners' dilemma models.

This module exports the core data structures for the game.
"""

from .matrices import (
    DEFAULT_MATRIX,
    OutcomePayoffs,
    PayoffMatrix,
    PayoffParameters,
    build_matrix,
)
from .moves import (
    Move,
    MoveHistory,
    format_round,
    parse_move,
)

__all__ = [
    # Moves
    "Move",
    "MoveHistory",
    "format_round",
    "parse_move",
    # Matrices
    "DEFAULT_MATRIX",
    "OutcomePayoffs",
    "PayoffMatrix",
    "PayoffParameters",
    "build_matrix",
]
