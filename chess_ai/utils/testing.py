"""
Engine Testing and Benchmarking

This module provides a small tactical test suite and a match runner for
comparing difficulty tiers.

Test Suite:
    Tactical positions with a single clear answer:
       - Mate in one (both colours)
       - Undefended pieces that should simply be taken
    The hard and medium tiers are expected to solve all of them; the easy
    tier only gets the capture positions right by luck.

Evaluation Metrics:
    - Correct Moves: Number of positions where the engine found the answer
    - Time per Position: Average thinking time

Match Runner:
    play_match() plays two ChessAI instances against each other from a given
    position, stopping at game over or after max_plies half-moves.
"""

import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import chess

from chess_ai.config import SearchConfig
from chess_ai.policy import ChessAI


@dataclass
class TacticalPosition:
    """
    A test position with expected best move(s).

    Attributes:
        fen: Board position in FEN notation
        best_moves: List of acceptable best moves (UCI format)
        description: Human-readable description of the position
        id: Position identifier
    """
    fen: str
    best_moves: List[str]  # UCI move strings
    description: str = ""
    id: str = ""


@dataclass
class TacticalResult:
    """
    Result of testing a single position.

    Attributes:
        position: The test position
        found_move: Move the engine found (UCI format, "" if none)
        correct: Whether the engine found a best move
        time_taken: Time spent selecting (seconds)
    """
    position: TacticalPosition
    found_move: str
    correct: bool
    time_taken: float


@dataclass
class MatchResult:
    """
    Outcome of a game between two engines.

    Attributes:
        result: "1-0", "0-1", "1/2-1/2", or "*" if stopped at max_plies
        moves: Moves played, UCI format
        final_fen: Position at the end of the game
    """
    result: str
    moves: List[str] = field(default_factory=list)
    final_fen: str = chess.STARTING_FEN


# ============================================================================
# Tactical Test Suite
# ============================================================================

TACTICAL_POSITIONS = [
    TacticalPosition(
        id="T.01",
        fen="6k1/5ppp/8/8/8/8/8/R6K w - - 0 1",
        best_moves=["a1a8"],
        description="White mates on the back rank with Ra8#"
    ),
    TacticalPosition(
        id="T.02",
        fen="rnbqkbnr/pppp1ppp/8/4p3/6P1/5P2/PPPPP2P/RNBQKBNR b KQkq - 0 2",
        best_moves=["d8h4"],
        description="Fool's mate, Black plays Qh4#"
    ),
    TacticalPosition(
        id="T.03",
        fen="r1bqkb1r/pppp1ppp/2n2n2/4p2Q/2B1P3/8/PPPP1PPP/RNB1K1NR w KQkq - 4 4",
        best_moves=["h5f7"],
        description="Scholar's mate, White plays Qxf7#"
    ),
    TacticalPosition(
        id="T.04",
        fen="r5k1/8/8/8/8/8/5PPP/6K1 b - - 0 1",
        best_moves=["a8a1"],
        description="Black mates on the back rank with Ra1#"
    ),
    TacticalPosition(
        id="T.05",
        fen="4k3/8/8/3q4/8/4N3/7P/4K3 w - - 0 1",
        best_moves=["e3d5"],
        description="White knight takes the undefended queen"
    ),
    TacticalPosition(
        id="T.06",
        fen="4k3/8/2n5/8/8/8/8/2R1K3 w - - 0 1",
        best_moves=["c1c6"],
        description="White rook takes the undefended knight"
    ),
]


def evaluate_position(
    position: TacticalPosition,
    ai: ChessAI,
    config: Optional[SearchConfig] = None,
    verbose: bool = False,
) -> TacticalResult:
    """
    Run the engine on a single test position.

    Args:
        position: Test position to solve
        ai: Engine under test
        config: Configuration override for this position (default: ai.config)
        verbose: If True, print detailed output

    Returns:
        TacticalResult with engine's move and whether it was correct
    """
    board = chess.Board(position.fen)

    if verbose:
        print(f"\nTesting {position.id}: {position.description}")
        print(f"FEN: {position.fen}")
        print(f"Expected moves: {position.best_moves}")

    start_time = time.time()
    move = ai.select_move(board, config)
    time_taken = time.time() - start_time

    found_move_uci = move.uci() if move is not None else ""
    correct = found_move_uci in position.best_moves

    if verbose:
        print(f"Engine found: {found_move_uci or '(none)'}")
        print(f"Time: {time_taken:.2f}s")
        print(f"Result: {'✓ CORRECT' if correct else '✗ WRONG'}")

    return TacticalResult(
        position=position,
        found_move=found_move_uci,
        correct=correct,
        time_taken=time_taken,
    )


def run_suite(
    ai: ChessAI,
    positions: Optional[List[TacticalPosition]] = None,
    config: Optional[SearchConfig] = None,
    verbose: bool = False,
) -> Dict[str, Any]:
    """
    Run a list of test positions.

    Args:
        ai: Engine under test
        positions: Positions to run (default: TACTICAL_POSITIONS)
        config: Configuration override (default: ai.config)
        verbose: If True, print detailed results

    Returns:
        Dictionary with test results:
            - score: Number of correct positions
            - total: Total number of positions
            - percentage: Success percentage
            - results: List of TacticalResult objects
            - avg_time: Average time per position
            - total_time: Total time
    """
    positions = TACTICAL_POSITIONS if positions is None else positions

    results = [evaluate_position(p, ai, config, verbose=verbose) for p in positions]
    correct_count = sum(1 for r in results if r.correct)
    total_time = sum(r.time_taken for r in results)

    avg_time = total_time / len(positions) if positions else 0
    percentage = (correct_count / len(positions) * 100) if positions else 0

    if verbose:
        print("\n" + "=" * 70)
        print("SUMMARY")
        print("=" * 70)
        print(f"Score: {correct_count}/{len(positions)} ({percentage:.1f}%)")
        print(f"Average time: {avg_time:.2f}s")
        print(f"Total time: {total_time:.2f}s")

    return {
        'score': correct_count,
        'total': len(positions),
        'percentage': percentage,
        'results': results,
        'avg_time': avg_time,
        'total_time': total_time,
    }


def play_match(
    white: ChessAI,
    black: ChessAI,
    max_plies: int = 200,
    board: Optional[chess.Board] = None,
) -> MatchResult:
    """
    Play one game between two engines.

    Args:
        white: Engine playing White
        black: Engine playing Black
        max_plies: Half-move limit before the game is adjourned ("*")
        board: Starting position (default: standard start; not modified)

    Returns:
        MatchResult
    """
    board = board.copy() if board is not None else chess.Board()
    rules = white.rules
    moves = []

    for _ in range(max_plies):
        if rules.is_game_over(board):
            break

        player = white if board.turn == chess.WHITE else black
        move = player.select_move(board)
        if move is None:
            break

        moves.append(move.uci())
        board = rules.apply_move(board, move)

    if rules.is_checkmate(board):
        result = "0-1" if board.turn == chess.WHITE else "1-0"
    elif rules.is_game_over(board):
        result = "1/2-1/2"
    else:
        result = "*"

    return MatchResult(result=result, moves=moves, final_fen=board.fen())
