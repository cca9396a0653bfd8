"""Game parameters for the repeated prisoners' dilemma.

This module is the SINGLE SOURCE OF TRUTH for all tunable game constants.
Everything else (payoff matrix defaults, game length, CLI defaults) reads
from here.

Parameter Categories:
- Game length: How many rounds two strategies play
- Payoffs: The four cells of the payoff matrix
- Defaults: Which strategies the reference run pits against each other

Usage:
    from dilemma.parameters import NUM_ROUNDS, COOPERATE_PAYOUT
"""

# =============================================================================
# GAME LENGTH
# =============================================================================

NUM_ROUNDS = 200
"""Number of rounds the prisoners' dilemma is repeated between the same pair.

Current: 200

Analysis:
    Long enough that history-dependent strategies (Tit for Tat, Grudger)
    settle into their steady state; the first-round behaviour stops
    dominating the total.

Related: DILEMMA_NUM_ROUNDS environment override (see dilemma.config)
"""


# =============================================================================
# PAYOFFS
# =============================================================================

COOPERATE_PAYOUT = 10
"""Payout each player gets when both cooperate (R, the reward).

Current: 10
"""

DEFECT_PAYOUT = 2
"""Payout each player gets when both defect (P, the punishment).

Current: 2
"""

NARC_OUT_OPPONENT_PAYOUT = 20
"""Payout for defecting against a cooperating opponent (T, the temptation).

Current: 20

Analysis:
    T > R is what makes defection tempting in a single round. With
    2R > T + S (20 > 15) mutual cooperation still beats taking turns
    exploiting each other over a long game.
"""

GOT_NARCED_OUT_PAYOUT = -5
"""Payout for cooperating while the opponent defects (S, the sucker's payoff).

Current: -5
"""


# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_STRATEGY_A = "always_cooperate"
"""Strategy played by player A when none is selected."""

DEFAULT_STRATEGY_B = "always_defect"
"""Strategy played by player B when none is selected."""
