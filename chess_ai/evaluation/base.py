"""
Abstract Evaluator Interface

This module defines the abstract base class for all position evaluators.
By defining a common interface, we can swap between
evaluators without modifying the search algorithm.

Key Principles:
    1. evaluate() always returns a score from White's perspective
    2. Positive = White advantage, Negative = Black advantage
    3. Checkmate positions return +/-MATE_SCORE, draws return exactly 0

Convention:
    - Material values in pawns (pawn = 1, queen = 9)
    - Terminal scores are never randomized
"""

from abc import ABC, abstractmethod
from typing import Optional

import chess

from chess_ai.rules import DEFAULT_RULES, RulesEngine


# Evaluation constants
MATE_SCORE = 1000.0  # Side to move is checkmated
DRAW_SCORE = 0.0


class Evaluator(ABC):
    """
    Abstract base class for position evaluation.

    All evaluator implementations must inherit from this class and implement
    the evaluate() method. This ensures compatibility with the search algorithm.

    Attributes:
        rules: Rules engine used to detect checkmate and draws

    Methods:
        evaluate(board): Returns position evaluation from White's perspective
    """

    def __init__(self, rules: Optional[RulesEngine] = None):
        self.rules = rules if rules is not None else DEFAULT_RULES

    @abstractmethod
    def evaluate(self, board: chess.Board) -> float:
        """
        Evaluate a chess position from White's perspective.

        Args:
            board: python-chess Board object to evaluate

        Returns:
            float: Evaluation in pawns
        """
        pass

    def is_draw(self, board: chess.Board) -> bool:
        """Check if position is a draw by rule (delegated to the rules engine)."""
        return self.rules.is_draw(board)

    def evaluate_terminal(self, board: chess.Board) -> Optional[float]:
        """
        Evaluate terminal positions (checkmate, stalemate, draw).

        Args:
            board: python-chess Board object

        Returns:
            float: Evaluation if terminal position
            None: If position is not terminal
        """
        if self.rules.is_checkmate(board):
            # The side to move has been mated
            if self.rules.side_to_move(board) == chess.WHITE:
                return -MATE_SCORE
            return MATE_SCORE

        if self.is_draw(board):
            return DRAW_SCORE

        return None

    def __repr__(self) -> str:
        """String representation of evaluator."""
        return f"{self.__class__.__name__}()"
