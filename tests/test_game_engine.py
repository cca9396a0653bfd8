"""Unit tests for dilemma.engine.game_engine module.

Tests cover:
- RepeatedGame: initialization, phases, history bookkeeping
- History pairing: each player sees (own moves, opponent moves)
- Scoring: reference results, partial games, idempotence, recomputation
- Contract enforcement: playing past the end, bad strategy return values
- create_game factory
"""

import itertools
from collections.abc import Sequence

import pytest

from dilemma.engine.game_engine import GamePhase, RepeatedGame, create_game
from dilemma.models.matrices import DEFAULT_MATRIX, PayoffParameters
from dilemma.models.moves import Move
from dilemma.strategies import (
    AlwaysCooperate,
    AlwaysDefect,
    Erratic,
    Grudger,
    Pavlov,
    Strategy,
    SuspiciousTitForTat,
    TitForTat,
    TitForTwoTats,
)

C = Move.COOPERATE
D = Move.DEFECT

ALL_STRATEGIES = [
    AlwaysCooperate,
    AlwaysDefect,
    TitForTat,
    SuspiciousTitForTat,
    TitForTwoTats,
    Grudger,
    Pavlov,
    Erratic,
]


def play_all(game: RepeatedGame) -> RepeatedGame:
    """Play every remaining round of a game."""
    while not game.is_complete():
        game.play_round()
    return game


class RecordingStrategy(Strategy):
    """Cooperates and records what it was shown each round."""

    def __init__(self) -> None:
        super().__init__(name="Recorder")
        self.seen: list[tuple[tuple[Move, ...], tuple[Move, ...]]] = []

    def next_move(self, my_moves: Sequence[Move], their_moves: Sequence[Move]) -> Move:
        self.seen.append((tuple(my_moves), tuple(their_moves)))
        return C


# =============================================================================
# Initialization and Phases
# =============================================================================


class TestGameInitialization:
    """Tests for a freshly created game."""

    def test_starts_empty(self, cooperator, defector):
        game = RepeatedGame(cooperator, defector, num_rounds=5)

        assert game.phase == GamePhase.EMPTY
        assert game.rounds_played == 0
        assert game.player_a_moves == []
        assert game.player_b_moves == []
        assert game.history == []
        assert game.calculate_score() == (0, 0)

    def test_default_round_count_and_matrix(self, cooperator, defector):
        game = RepeatedGame(cooperator, defector)
        assert game.num_rounds == 200
        assert game.matrix is DEFAULT_MATRIX

    def test_negative_rounds_rejected(self, cooperator, defector):
        with pytest.raises(ValueError, match="non-negative"):
            RepeatedGame(cooperator, defector, num_rounds=-1)

    def test_zero_round_game_is_complete(self, cooperator, defector):
        game = RepeatedGame(cooperator, defector, num_rounds=0)
        assert game.is_complete()
        assert game.calculate_score() == (0, 0)


class TestPhases:
    """Tests for the EMPTY -> IN_PROGRESS -> COMPLETE state machine."""

    def test_phase_transitions(self, cooperator, defector):
        game = RepeatedGame(cooperator, defector, num_rounds=3)

        assert game.phase == GamePhase.EMPTY
        game.play_round()
        assert game.phase == GamePhase.IN_PROGRESS
        game.play_round()
        assert game.phase == GamePhase.IN_PROGRESS
        game.play_round()
        assert game.phase == GamePhase.COMPLETE
        assert game.is_complete()

    def test_single_round_game(self, cooperator, defector):
        game = RepeatedGame(cooperator, defector, num_rounds=1)
        game.play_round()
        assert game.phase == GamePhase.COMPLETE

    def test_play_past_complete_raises(self, cooperator, defector):
        game = play_all(RepeatedGame(cooperator, defector, num_rounds=2))

        with pytest.raises(RuntimeError, match="already complete"):
            game.play_round()
        assert game.rounds_played == 2


# =============================================================================
# History Bookkeeping
# =============================================================================


class TestHistories:
    """Tests for move history invariants."""

    @pytest.mark.parametrize("num_rounds", [0, 1, 2, 7, 25])
    def test_histories_have_length_r_for_every_pairing(self, num_rounds):
        for cls_a, cls_b in itertools.product(ALL_STRATEGIES, repeat=2):
            game = play_all(RepeatedGame(cls_a(), cls_b(), num_rounds=num_rounds))

            assert len(game.player_a_moves) == num_rounds
            assert len(game.player_b_moves) == num_rounds
            assert game.rounds_played == num_rounds

    def test_histories_grow_by_one_per_round(self, cooperator, defector):
        game = RepeatedGame(cooperator, defector, num_rounds=4)
        for expected in range(1, 5):
            game.play_round()
            assert len(game.player_a_moves) == expected
            assert len(game.player_b_moves) == expected

    def test_history_pairs(self, cooperator, defector):
        game = play_all(RepeatedGame(cooperator, defector, num_rounds=3))
        assert game.history == [(C, D)] * 3

    def test_accessors_return_copies(self, cooperator, defector):
        game = play_all(RepeatedGame(cooperator, defector, num_rounds=2))

        game.player_a_moves.append(D)
        game.player_b_moves.clear()

        assert game.player_a_moves == [C, C]
        assert game.player_b_moves == [D, D]


class TestHistoryPairing:
    """Each strategy must see its own moves first and the opponent's second."""

    def test_player_a_sees_own_then_opponent(self, defector):
        recorder = RecordingStrategy()
        play_all(RepeatedGame(recorder, defector, num_rounds=3))

        assert recorder.seen == [
            ((), ()),
            ((C,), (D,)),
            ((C, C), (D, D)),
        ]

    def test_player_b_sees_own_then_opponent(self, defector):
        recorder = RecordingStrategy()
        play_all(RepeatedGame(defector, recorder, num_rounds=3))

        assert recorder.seen == [
            ((), ()),
            ((C,), (D,)),
            ((C, C), (D, D)),
        ]

    def test_tit_for_tat_as_player_b_against_always_defect(self, defector):
        game = play_all(RepeatedGame(defector, TitForTat(), num_rounds=10))

        assert game.player_b_moves == [C] + [D] * 9

    def test_tit_for_tat_as_player_a_against_always_defect(self, defector):
        game = play_all(RepeatedGame(TitForTat(), defector, num_rounds=10))

        assert game.player_a_moves == [C] + [D] * 9

    def test_grudger_as_player_b_reacts_to_opponent(self):
        class DefectOnThird(Strategy):
            def __init__(self):
                super().__init__(name="Defect On Third")

            def next_move(self, my_moves, their_moves):
                return D if len(my_moves) == 2 else C

        game = play_all(RepeatedGame(DefectOnThird(), Grudger(), num_rounds=6))

        assert game.player_a_moves == [C, C, D, C, C, C]
        assert game.player_b_moves == [C, C, C, D, D, D]

    def test_strategies_receive_immutable_views(self):
        class Vandal(Strategy):
            def __init__(self):
                super().__init__(name="Vandal")

            def next_move(self, my_moves, their_moves):
                my_moves.append(D)
                return C

        game = RepeatedGame(Vandal(), AlwaysCooperate(), num_rounds=2)
        with pytest.raises(AttributeError):
            game.play_round()
        assert game.rounds_played == 0
        assert game.player_b_moves == []


# =============================================================================
# Scoring
# =============================================================================


class TestScoring:
    """Tests for calculate_score."""

    def test_cooperate_vs_defect_reference_game(self, cooperator, defector):
        game = play_all(RepeatedGame(cooperator, defector, num_rounds=200))

        assert game.history == [(C, D)] * 200
        assert game.calculate_score() == (-1000, 4000)

    def test_cooperate_vs_cooperate(self):
        game = play_all(RepeatedGame(AlwaysCooperate(), AlwaysCooperate(), num_rounds=5))
        assert game.calculate_score() == (50, 50)

    def test_defect_vs_defect(self):
        game = play_all(RepeatedGame(AlwaysDefect(), AlwaysDefect(), num_rounds=3))
        assert game.calculate_score() == (6, 6)

    def test_tit_for_tat_vs_always_defect(self, defector):
        game = play_all(RepeatedGame(TitForTat(), defector, num_rounds=10))
        # Round 1: (C, D) -> (-5, 20); rounds 2-10: (D, D) -> (2, 2)
        assert game.calculate_score() == (-5 + 9 * 2, 20 + 9 * 2)

    def test_partial_game_score(self, cooperator, defector):
        game = RepeatedGame(cooperator, defector, num_rounds=10)
        game.play_round()
        game.play_round()
        assert game.calculate_score() == (-10, 40)

    def test_score_is_idempotent(self):
        game = play_all(RepeatedGame(Pavlov(), SuspiciousTitForTat(), num_rounds=20))
        first = game.calculate_score()
        assert game.calculate_score() == first
        assert game.calculate_score() == first

    def test_score_matches_recomputation(self):
        for cls_a, cls_b in itertools.product(ALL_STRATEGIES, repeat=2):
            game = play_all(RepeatedGame(cls_a(), cls_b(), num_rounds=30))

            total_a = sum(DEFAULT_MATRIX.score(a, b)[0] for a, b in game.history)
            total_b = sum(DEFAULT_MATRIX.score(a, b)[1] for a, b in game.history)
            assert game.calculate_score() == (total_a, total_b)

    def test_custom_matrix(self):
        params = PayoffParameters(temptation=5, reward=3, punishment=1, sucker=0)
        game = play_all(create_game("always_cooperate", "always_defect", num_rounds=4, params=params))
        assert game.calculate_score() == (0, 20)


# =============================================================================
# Contract Enforcement
# =============================================================================


class TestContractEnforcement:
    """Tests for fail-fast handling of contract violations."""

    def test_non_move_return_raises_type_error(self, cooperator):
        class Liar(Strategy):
            def __init__(self):
                super().__init__(name="Liar")

            def next_move(self, my_moves, their_moves):
                return "Cooperate"

        game = RepeatedGame(cooperator, Liar(), num_rounds=3)
        with pytest.raises(TypeError, match="Liar returned 'Cooperate'"):
            game.play_round()
        assert game.rounds_played == 0

    def test_mismatched_histories_raise(self, cooperator, defector):
        game = RepeatedGame(cooperator, defector, num_rounds=3)
        game._player_a_moves.append(C)

        with pytest.raises(RuntimeError, match="out of step"):
            game.play_round()


# =============================================================================
# Factory
# =============================================================================


class TestCreateGame:
    """Tests for the create_game factory."""

    def test_creates_named_strategies(self):
        game = create_game("tit_for_tat", "grudger")

        assert isinstance(game.strategy_a, TitForTat)
        assert isinstance(game.strategy_b, Grudger)
        assert game.num_rounds == 200

    def test_round_override(self):
        assert create_game("pavlov", "pavlov", num_rounds=12).num_rounds == 12

    def test_unknown_strategy_raises(self):
        with pytest.raises(ValueError, match="Unknown strategy type"):
            create_game("tit_for_tat", "nonexistent")
