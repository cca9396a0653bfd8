"""Payoff matrix for the prisoners' dilemma.

This module implements the constructor pattern for the payoff matrix.
Callers specify parameters only; ``build_matrix`` guarantees a valid
prisoners' dilemma by enforcing its ordinal constraint (T > R > P > S)
before any cell is created.

Outcomes are keyed by (my move, their move):
- (Cooperate, Cooperate) -> (R, R)
- (Cooperate, Defect)    -> (S, T)
- (Defect, Cooperate)    -> (T, S)
- (Defect, Defect)       -> (P, P)
"""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, model_validator

from dilemma import parameters
from dilemma.models.moves import Move


class PayoffParameters(BaseModel):
    """Parameters for constructing a payoff matrix.

    Defaults reproduce the reference game from ``dilemma.parameters``.

    Attributes:
        reward: R, paid to both players on mutual cooperation
        punishment: P, paid to both players on mutual defection
        temptation: T, paid for defecting against a cooperator
        sucker: S, paid for cooperating against a defector
    """

    model_config = ConfigDict(frozen=True)

    reward: int = parameters.COOPERATE_PAYOUT
    punishment: int = parameters.DEFECT_PAYOUT
    temptation: int = parameters.NARC_OUT_OPPONENT_PAYOUT
    sucker: int = parameters.GOT_NARCED_OUT_PAYOUT

    @model_validator(mode="after")
    def validate_ordering(self) -> "PayoffParameters":
        """Validate T > R > P > S constraint."""
        t, r, p, s = self.temptation, self.reward, self.punishment, self.sucker
        if not (t > r > p > s):
            raise ValueError(f"Prisoners' dilemma requires T > R > P > S, got T={t}, R={r}, P={p}, S={s}")
        return self


@dataclass(frozen=True)
class OutcomePayoffs:
    """Payoffs for a single outcome cell in the matrix."""

    payoff_a: int
    payoff_b: int

    def as_tuple(self) -> tuple[int, int]:
        return (self.payoff_a, self.payoff_b)

    def swapped(self) -> "OutcomePayoffs":
        """Return the same outcome seen from the other player's side."""
        return OutcomePayoffs(self.payoff_b, self.payoff_a)


@dataclass(frozen=True)
class PayoffMatrix:
    """Complete payoff matrix for one round.

    Indexed by (row_move, col_move):
    - cc: Both cooperate
    - cd: Row cooperates, Col defects
    - dc: Row defects, Col cooperates
    - dd: Both defect
    """

    cc: OutcomePayoffs
    cd: OutcomePayoffs
    dc: OutcomePayoffs
    dd: OutcomePayoffs

    def get_outcome(self, mine: Move, theirs: Move) -> OutcomePayoffs:
        """Get the outcome cell for a move pair."""
        if mine is Move.COOPERATE:
            return self.cc if theirs is Move.COOPERATE else self.cd
        return self.dc if theirs is Move.COOPERATE else self.dd

    def score(self, mine: Move, theirs: Move) -> tuple[int, int]:
        """Score one round as (my payoff, their payoff)."""
        return self.get_outcome(mine, theirs).as_tuple()


def build_matrix(params: PayoffParameters | None = None) -> PayoffMatrix:
    """Build a payoff matrix from parameters.

    This is the main entry point for matrix construction. The ordinal
    constraint is already enforced when ``PayoffParameters`` is created.
    """
    if params is None:
        params = PayoffParameters()

    t, r, p, s = params.temptation, params.reward, params.punishment, params.sucker

    return PayoffMatrix(
        cc=OutcomePayoffs(r, r),  # Mutual coop
        cd=OutcomePayoffs(s, t),  # Row got narced out
        dc=OutcomePayoffs(t, s),  # Row narcs out col
        dd=OutcomePayoffs(p, p),  # Mutual defect
    )


DEFAULT_MATRIX = build_matrix()
