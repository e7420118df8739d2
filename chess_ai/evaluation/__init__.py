"""
Evaluation Module

This module provides position evaluation functions for the move selection core.
Evaluators are SWAPPABLE: the search algorithm works with any evaluator that
implements the base interface.

Key Components:
    - Evaluator (ABC): Abstract base class defining the evaluation interface
    - ClassicalEvaluator: Material + piece-square table evaluation with
      difficulty-dependent noise

Data Flow:
    chess.Board → evaluator.evaluate() → float (pawns)
                                          Positive = White advantage
                                          Negative = Black advantage

"""

from chess_ai.evaluation.base import Evaluator, MATE_SCORE, DRAW_SCORE
from chess_ai.evaluation.classical import ClassicalEvaluator, PIECE_VALUES, position_value

__all__ = [
    'Evaluator',
    'ClassicalEvaluator',
    'MATE_SCORE',
    'DRAW_SCORE',
    'PIECE_VALUES',
    'position_value',
]
