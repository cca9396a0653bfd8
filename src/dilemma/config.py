"""Run configuration for the repeated prisoners' dilemma.

This module provides the validated configuration for a single game and the
environment overrides that feed it. Precedence, highest first:

1. Explicit arguments (CLI flags)
2. Environment variables (DILEMMA_STRATEGY_A, DILEMMA_STRATEGY_B, DILEMMA_NUM_ROUNDS)
3. Defaults from ``dilemma.parameters``
"""

import os

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dilemma import parameters
from dilemma.models.matrices import PayoffMatrix, PayoffParameters, build_matrix
from dilemma.strategies.base import Strategy, get_strategy_class


def get_strategy_a() -> str:
    """Get configured strategy for player A from environment."""
    return os.environ.get("DILEMMA_STRATEGY_A", parameters.DEFAULT_STRATEGY_A)


def get_strategy_b() -> str:
    """Get configured strategy for player B from environment."""
    return os.environ.get("DILEMMA_STRATEGY_B", parameters.DEFAULT_STRATEGY_B)


def get_num_rounds() -> int:
    """Get configured round count from environment.

    Raises:
        ValueError: If DILEMMA_NUM_ROUNDS is not an integer
    """
    raw = os.environ.get("DILEMMA_NUM_ROUNDS")
    if raw is None:
        return parameters.NUM_ROUNDS
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"DILEMMA_NUM_ROUNDS must be an integer, got {raw!r}") from None


class RunConfig(BaseModel):
    """Configuration for one game.

    Attributes:
        strategy_a: Strategy type name for player A
        strategy_b: Strategy type name for player B
        num_rounds: Rounds to play (>= 0)
        payoffs: Payoff matrix parameters
        verbose: Report every round's moves
        seed: Seed passed to stochastic strategies
    """

    model_config = ConfigDict(frozen=True)

    strategy_a: str = parameters.DEFAULT_STRATEGY_A
    strategy_b: str = parameters.DEFAULT_STRATEGY_B
    num_rounds: int = Field(default=parameters.NUM_ROUNDS, ge=0)
    payoffs: PayoffParameters = Field(default_factory=PayoffParameters)
    verbose: bool = True
    seed: int | None = None

    @field_validator("strategy_a", "strategy_b")
    @classmethod
    def validate_strategy(cls, v: str) -> str:
        """Ensure the strategy name resolves in the registry."""
        get_strategy_class(v)
        return v

    def create_strategies(self) -> tuple[Strategy, Strategy]:
        """Instantiate both configured strategies."""
        return (self._create(self.strategy_a, 0), self._create(self.strategy_b, 1))

    def _create(self, name: str, offset: int) -> Strategy:
        strategy_class = get_strategy_class(name)
        if strategy_class.stochastic and self.seed is not None:
            # Player B seeds at seed + 1
            return strategy_class(seed=self.seed + offset)
        return strategy_class()

    def build_matrix(self) -> PayoffMatrix:
        return build_matrix(self.payoffs)


def load_config(**overrides) -> RunConfig:
    """Build a RunConfig from environment defaults and explicit overrides.

    Overrides whose value is None are ignored, so CLI flags that were not
    given fall through to the environment.

    Raises:
        pydantic.ValidationError: If the resulting configuration is invalid
        ValueError: If an environment variable cannot be parsed
    """
    values = {
        "strategy_a": get_strategy_a(),
        "strategy_b": get_strategy_b(),
        "num_rounds": get_num_rounds(),
    }
    values.update({key: value for key, value in overrides.items() if value is not None})
    return RunConfig(**values)
