"""Command-line interface for the repeated prisoners' dilemma.

Usage:
    # Reference run: Always Cooperate vs Always Defect, 200 rounds
    dilemma

    # Pick strategies and game length
    dilemma --strategy-a tit_for_tat --strategy-b grudger --rounds 50

    # Custom payoffs, summary only, JSON result
    dilemma --temptation 30 --quiet --json

Exit codes:
    0: Success
    2: Invalid configuration
"""

import argparse
import json
import logging
import sys

from pydantic import ValidationError

from dilemma.config import load_config
from dilemma.models.matrices import PayoffParameters
from dilemma.runner import GameRunner
from dilemma.strategies import list_strategy_types

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dilemma",
        description="Play two strategies against each other in the repeated prisoners' dilemma",
    )
    parser.add_argument(
        "--strategy-a",
        type=str,
        default=None,
        help="Strategy for player A (default: $DILEMMA_STRATEGY_A or always_cooperate)",
    )
    parser.add_argument(
        "--strategy-b",
        type=str,
        default=None,
        help="Strategy for player B (default: $DILEMMA_STRATEGY_B or always_defect)",
    )
    parser.add_argument(
        "--rounds",
        type=int,
        default=None,
        help="Number of rounds (default: $DILEMMA_NUM_ROUNDS or 200)",
    )
    parser.add_argument("--reward", type=int, default=None, help="Payout for mutual cooperation (default: 10)")
    parser.add_argument("--punishment", type=int, default=None, help="Payout for mutual defection (default: 2)")
    parser.add_argument(
        "--temptation", type=int, default=None, help="Payout for defecting against a cooperator (default: 20)"
    )
    parser.add_argument(
        "--sucker", type=int, default=None, help="Payout for cooperating against a defector (default: -5)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for stochastic strategies",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress per-round move lines",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full game result as JSON after the final score",
    )
    parser.add_argument(
        "--list-strategies",
        action="store_true",
        help="List available strategies and exit",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Diagnostic log level, written to stderr (default: WARNING)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for the command-line runner."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    if args.list_strategies:
        for category, names in list_strategy_types().items():
            print(f"{category}:")
            for name in names:
                print(f"  {name}")
        return 0

    payoff_overrides = {
        key: value
        for key, value in {
            "reward": args.reward,
            "punishment": args.punishment,
            "temptation": args.temptation,
            "sucker": args.sucker,
        }.items()
        if value is not None
    }

    try:
        config = load_config(
            strategy_a=args.strategy_a,
            strategy_b=args.strategy_b,
            num_rounds=args.rounds,
            payoffs=PayoffParameters(**payoff_overrides),
            verbose=not args.quiet,
            seed=args.seed,
        )
    except (ValidationError, ValueError) as e:
        logger.debug("Configuration rejected", exc_info=True)
        parser.error(str(e))

    strategy_a, strategy_b = config.create_strategies()
    runner = GameRunner(
        strategy_a=strategy_a,
        strategy_b=strategy_b,
        num_rounds=config.num_rounds,
        matrix=config.build_matrix(),
        verbose=config.verbose,
    )
    result = runner.run_game()

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))

    return 0


if __name__ == "__main__":
    sys.exit(main())
