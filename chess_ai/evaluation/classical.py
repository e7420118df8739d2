"""
Classical Piece-Square Table Evaluation

This module implements the evaluation used by every difficulty tier:
    1. Material counting (piece values)
    2. Piece-Square Tables (positional bonuses/penalties)
    3. Difficulty noise (uniform random jitter for the lower tiers)

Evaluation Components:
    - Material: P=1, N=3, B=3, R=5, Q=9, K=100 (king is a sentinel)
    - Position: PST bonuses for each piece type, in fractions of a pawn
    - Noise: easy +/-1.0, medium +/-0.5, hard none

Reference:
    Simplified Evaluation Function
    https://www.chessprogramming.org/Simplified_Evaluation_Function
"""

from typing import Optional

import chess
import numpy as np

from chess_ai.config import Difficulty
from chess_ai.evaluation.base import Evaluator
from chess_ai.rules import RulesEngine

#fmt: off
# ============================================================================
# Material Values (pawns)
# ============================================================================

PIECE_VALUES = {
    chess.PAWN: 1,
    chess.KNIGHT: 3,
    chess.BISHOP: 3,
    chess.ROOK: 5,
    chess.QUEEN: 9,
    chess.KING: 100,
}


# ============================================================================
# Piece-Square Tables (PSTs)
# ============================================================================
# Row r holds the values for a piece standing on its owner's (r+1)-th rank:
# White reads row = rank index, Black reads row = 7 - rank index, so both
# colours see the same table. Columns are files a..h.
#
# Units: pawns (added to material value)
# ============================================================================

def _table(rows):
    table = np.array(rows, dtype=np.float64)
    table.flags.writeable = False
    return table


PAWN_TABLE = _table([
    [  0,    0,    0,    0,    0,    0,    0,    0  ],
    [  5,    5,    5,    5,    5,    5,    5,    5  ],
    [  1,    1,    2,    3,    3,    2,    1,    1  ],
    [  0.5,  0.5,  1,    2.5,  2.5,  1,    0.5,  0.5],
    [  0,    0,    0,    2,    2,    0,    0,    0  ],
    [  0.5, -0.5, -1,    0,    0,   -1,   -0.5,  0.5],
    [  0.5,  1,    1,   -2,   -2,    1,    1,    0.5],
    [  0,    0,    0,    0,    0,    0,    0,    0  ],
])

KNIGHT_TABLE = _table([
    [ -5,   -4,   -3,   -3,   -3,   -3,   -4,   -5  ],
    [ -4,   -2,    0,    0,    0,    0,   -2,   -4  ],
    [ -3,    0,    1,    1.5,  1.5,  1,    0,   -3  ],
    [ -3,    0.5,  1.5,  2,    2,    1.5,  0.5, -3  ],
    [ -3,    0,    1.5,  2,    2,    1.5,  0,   -3  ],
    [ -3,    0.5,  1,    1.5,  1.5,  1,    0.5, -3  ],
    [ -4,   -2,    0,    0.5,  0.5,  0,   -2,   -4  ],
    [ -5,   -4,   -3,   -3,   -3,   -3,   -4,   -5  ],
])

BISHOP_TABLE = _table([
    [ -2,   -1,   -1,   -1,   -1,   -1,   -1,   -2  ],
    [ -1,    0,    0,    0,    0,    0,    0,   -1  ],
    [ -1,    0,    0.5,  1,    1,    0.5,  0,   -1  ],
    [ -1,    0.5,  0.5,  1,    1,    0.5,  0.5, -1  ],
    [ -1,    0,    1,    1,    1,    1,    0,   -1  ],
    [ -1,    1,    1,    1,    1,    1,    1,   -1  ],
    [ -1,    0.5,  0,    0,    0,    0,    0.5, -1  ],
    [ -2,   -1,   -1,   -1,   -1,   -1,   -1,   -2  ],
])

ROOK_TABLE = _table([
    [  0,    0,    0,    0,    0,    0,    0,    0  ],
    [  0.5,  1,    1,    1,    1,    1,    1,    0.5],
    [ -0.5,  0,    0,    0,    0,    0,    0,   -0.5],
    [ -0.5,  0,    0,    0,    0,    0,    0,   -0.5],
    [ -0.5,  0,    0,    0,    0,    0,    0,   -0.5],
    [ -0.5,  0,    0,    0,    0,    0,    0,   -0.5],
    [ -0.5,  0,    0,    0,    0,    0,    0,   -0.5],
    [  0,    0,    0,    0.5,  0.5,  0,    0,    0  ],
])

QUEEN_TABLE = _table([
    [ -2,   -1,   -1,   -0.5, -0.5, -1,   -1,   -2  ],
    [ -1,    0,    0,    0,    0,    0,    0,   -1  ],
    [ -1,    0,    0.5,  0.5,  0.5,  0.5,  0,   -1  ],
    [ -0.5,  0,    0.5,  0.5,  0.5,  0.5,  0,   -0.5],
    [  0,    0,    0.5,  0.5,  0.5,  0.5,  0,   -0.5],
    [ -1,    0.5,  0.5,  0.5,  0.5,  0.5,  0,   -1  ],
    [ -1,    0,    0.5,  0,    0,    0,    0,   -1  ],
    [ -2,   -1,   -1,   -0.5, -0.5, -1,   -1,   -2  ],
])

KING_TABLE = _table([
    [ -3,   -4,   -4,   -5,   -5,   -4,   -4,   -3  ],
    [ -3,   -4,   -4,   -5,   -5,   -4,   -4,   -3  ],
    [ -3,   -4,   -4,   -5,   -5,   -4,   -4,   -3  ],
    [ -3,   -4,   -4,   -5,   -5,   -4,   -4,   -3  ],
    [ -2,   -3,   -3,   -4,   -4,   -3,   -3,   -2  ],
    [ -1,   -2,   -2,   -2,   -2,   -2,   -2,   -1  ],
    [  2,    2,    0,    0,    0,    0,    2,    2  ],
    [  2,    3,    1,    0,    0,    1,    3,    2  ],
])
#fmt: on

PIECE_TABLES = {
    chess.PAWN: PAWN_TABLE,
    chess.KNIGHT: KNIGHT_TABLE,
    chess.BISHOP: BISHOP_TABLE,
    chess.ROOK: ROOK_TABLE,
    chess.QUEEN: QUEEN_TABLE,
    chess.KING: KING_TABLE,
}

# Half-width of the uniform noise added per tier
NOISE_AMPLITUDE = {
    Difficulty.EASY: 1.0,
    Difficulty.MEDIUM: 0.5,
    Difficulty.HARD: 0.0,
}


def position_value(piece_type: chess.PieceType, color: chess.Color, square: chess.Square) -> float:
    """
    Positional bonus of a piece on a square, read from its own side's table.

    Args:
        piece_type: chess.PAWN, chess.KNIGHT, etc.
        color: Owner of the piece
        square: Square the piece stands on

    Returns:
        float: Bonus (positive) or penalty (negative) in pawns
    """
    table = PIECE_TABLES.get(piece_type)
    if table is None:
        return 0.0

    rank = chess.square_rank(square)
    row = rank if color == chess.WHITE else 7 - rank
    return float(table[row, chess.square_file(square)])


class ClassicalEvaluator(Evaluator):
    """
    Classical evaluation using material and piece-square tables.

    Attributes:
        difficulty: Tier deciding how much noise is added
        rng: numpy Generator the noise is drawn from
        noise: Half-width of the uniform noise
    """

    def __init__(
        self,
        difficulty: Difficulty = Difficulty.HARD,
        rng: Optional[np.random.Generator] = None,
        rules: Optional[RulesEngine] = None,
    ):
        super().__init__(rules)
        self.difficulty = Difficulty.parse(difficulty)
        self.rng = rng if rng is not None else np.random.default_rng()
        self.noise = NOISE_AMPLITUDE[self.difficulty]

    def material_and_position(self, board: chess.Board) -> float:
        """Material plus PST score, White minus Black, without noise."""
        score = 0.0

        for square, piece in board.piece_map().items():
            total_value = PIECE_VALUES[piece.piece_type] + position_value(
                piece.piece_type, piece.color, square
            )

            if piece.color == chess.WHITE:
                score += total_value
            else:
                score -= total_value

        return score

    def evaluate(self, board: chess.Board) -> float:
        """
        Evaluate position using material + PST (+ noise below the hard tier).

        Args:
            board: Chess board to evaluate

        Returns:
            float: Evaluation in pawns (White's perspective)
        """
        # Check for terminal positions first
        terminal_score = self.evaluate_terminal(board)
        if terminal_score is not None:
            return terminal_score

        score = self.material_and_position(board)

        # Drawn fresh on every call
        if self.noise:
            score += float(self.rng.uniform(-self.noise, self.noise))

        return score

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(difficulty={self.difficulty.value})"
