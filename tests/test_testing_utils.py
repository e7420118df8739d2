"""
Unit Tests for the tactical suite and match runner.
"""

import chess
import pytest

from chess_ai.config import Difficulty, SearchConfig
from chess_ai.policy import create_chess_ai
from chess_ai.utils.testing import TACTICAL_POSITIONS, evaluate_position, play_match, run_suite


class TestTacticalSuite:
    """Tests for run_suite / evaluate_position."""

    def test_positions_are_valid(self):
        for position in TACTICAL_POSITIONS:
            board = chess.Board(position.fen)
            assert board.is_valid(), position.id
            for uci in position.best_moves:
                assert chess.Move.from_uci(uci) in board.legal_moves, position.id

    @pytest.mark.parametrize(
        "config",
        [
            SearchConfig(depth=2, difficulty=Difficulty.HARD, time_limit_ms=60_000),
            SearchConfig.for_difficulty("medium"),
        ],
    )
    def test_solves_every_position(self, config):
        ai = create_chess_ai(config.difficulty, seed=0)

        summary = run_suite(ai, config=config)

        assert summary["score"] == summary["total"] == len(TACTICAL_POSITIONS)
        assert summary["percentage"] == 100.0

    def test_empty_suite(self):
        summary = run_suite(create_chess_ai("easy"), positions=[])

        assert summary["score"] == 0
        assert summary["avg_time"] == 0

    def test_evaluate_position_reports_move(self):
        result = evaluate_position(TACTICAL_POSITIONS[0], create_chess_ai("medium", seed=0))

        assert result.correct
        assert result.found_move == "a1a8"
        assert result.time_taken >= 0


class TestPlayMatch:
    """Tests for play_match."""

    def test_mate_ends_game(self):
        board = chess.Board(TACTICAL_POSITIONS[0].fen)

        match = play_match(create_chess_ai("medium", seed=0), create_chess_ai("medium", seed=1), board=board)

        assert match.result == "1-0"
        assert match.moves == ["a1a8"]
        assert board.fen() == TACTICAL_POSITIONS[0].fen, "Starting board must not change"

    def test_black_mate(self):
        board = chess.Board(TACTICAL_POSITIONS[1].fen)

        match = play_match(create_chess_ai("easy"), create_chess_ai("medium", seed=0), board=board)

        assert match.result == "0-1"

    def test_ply_limit_adjourns(self):
        white = create_chess_ai("easy", seed=1)
        black = create_chess_ai("easy", seed=2)

        match = play_match(white, black, max_plies=20)

        replay = chess.Board()
        for uci in match.moves:
            move = chess.Move.from_uci(uci)
            assert move in replay.legal_moves
            replay.push(move)

        assert len(match.moves) <= 20
        assert replay.fen() == match.final_fen
        if len(match.moves) == 20 and not replay.is_game_over(claim_draw=True):
            assert match.result == "*"
