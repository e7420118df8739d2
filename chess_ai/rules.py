"""
Rules Engine Interface

The move selection core does not know the rules of chess. Everything it needs
about a position (legal moves, captures, game end, draws) comes from a
RulesEngine, so the search works with any implementation of this interface.

Key Principles:
    1. Positions are never mutated: apply_move() returns a new board
    2. A move the board rejects is a contract violation, not a search outcome
    3. is_draw() covers every drawn state a player could claim

ChessRules is the python-chess backed implementation used by default.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

import chess


class RulesEngine(ABC):
    """
    Abstract rules engine collaborator.

    Methods:
        legal_moves(board, from_square): Legal moves, optionally from one square
        is_capture(board, move): Whether a move captures a piece
        apply_move(board, move): Successor position (copy)
        is_game_over / is_checkmate / is_draw: Terminal state detection
        side_to_move(board): chess.WHITE or chess.BLACK
        piece_at(board, square): Piece on a square or None
    """

    @abstractmethod
    def legal_moves(
        self, board: chess.Board, from_square: Optional[chess.Square] = None
    ) -> List[chess.Move]:
        pass

    @abstractmethod
    def is_capture(self, board: chess.Board, move: chess.Move) -> bool:
        pass

    @abstractmethod
    def apply_move(self, board: chess.Board, move: chess.Move) -> chess.Board:
        pass

    @abstractmethod
    def is_checkmate(self, board: chess.Board) -> bool:
        pass

    @abstractmethod
    def is_draw(self, board: chess.Board) -> bool:
        pass

    def is_game_over(self, board: chess.Board) -> bool:
        return self.is_checkmate(board) or self.is_draw(board)

    def side_to_move(self, board: chess.Board) -> chess.Color:
        return board.turn

    def piece_at(self, board: chess.Board, square: chess.Square) -> Optional[chess.Piece]:
        return board.piece_at(square)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class ChessRules(RulesEngine):
    """Rules engine backed by python-chess."""

    def legal_moves(
        self, board: chess.Board, from_square: Optional[chess.Square] = None
    ) -> List[chess.Move]:
        if from_square is None:
            return list(board.legal_moves)
        return list(board.generate_legal_moves(from_mask=chess.BB_SQUARES[from_square]))

    def is_capture(self, board: chess.Board, move: chess.Move) -> bool:
        return board.is_capture(move)

    def apply_move(self, board: chess.Board, move: chess.Move) -> chess.Board:
        """
        Play a move on a copy of the board.

        Args:
            board: Position to start from (left untouched)
            move: Move to play

        Returns:
            chess.Board: New position after the move

        Raises:
            chess.IllegalMoveError: If the move is not legal in this position
        """
        if not board.is_pseudo_legal(move):
            raise chess.IllegalMoveError(f"illegal move {move.uci()} in {board.fen()}")

        # Repetitions cannot reach back past the last pawn move or capture,
        # so only that tail of the move stack is copied
        child = board.copy(stack=board.halfmove_clock)
        child.push(move)

        if child.was_into_check():
            raise chess.IllegalMoveError(f"illegal move {move.uci()} in {board.fen()}")

        return child

    def is_checkmate(self, board: chess.Board) -> bool:
        return board.is_checkmate()

    def is_draw(self, board: chess.Board) -> bool:
        """
        Check if position is a draw by rule.

            - Stalemate
            - Insufficient material
            - Fifty-move rule
            - Threefold repetition
        """
        return (
            board.is_stalemate()
            or board.is_insufficient_material()
            or board.is_fifty_moves()
            or board.is_repetition(3)
        )


DEFAULT_RULES = ChessRules()
