"""
Difficulty Policy

ChessAI picks the move for the side to move according to its difficulty tier:

    - easy: random capture if one exists, otherwise any random legal move
    - medium: one-ply lookahead with a slightly noisy evaluation
    - hard: iterative deepening alpha-beta search (or an external UCI engine,
      with the search as fallback)

The only state kept between calls is the current SearchConfig, which is
replaced wholesale between moves. Randomness comes from an injected numpy
Generator so games can be replayed with a seed.
"""

import logging
from typing import List, Optional, Union

import chess
import numpy as np

from chess_ai.config import Difficulty, SearchConfig
from chess_ai.evaluation.classical import ClassicalEvaluator
from chess_ai.rules import DEFAULT_RULES, RulesEngine
from chess_ai.search.deadline import Clock
from chess_ai.search.minimax import search
from chess_ai.search.ordering import order_moves
from chess_ai.uci.external import ExternalEngine, ExternalEngineError

logger = logging.getLogger(__name__)


class ChessAI:
    """
    Computer opponent with a configurable difficulty.

    Attributes:
        config: Current SearchConfig (read-only, see update_settings)
        rng: numpy Generator used for random choices and evaluation noise
        rules: Rules engine collaborator
        external_engine: Optional UCI engine used by the hard tier
        clock: Optional monotonic clock for the search deadline

    Methods:
        select_move: Choose a move for the side to move
        update_settings: Replace the configuration between moves
    """

    def __init__(
        self,
        config: Optional[SearchConfig] = None,
        rng: Optional[np.random.Generator] = None,
        rules: Optional[RulesEngine] = None,
        external_engine: Optional[ExternalEngine] = None,
        clock: Optional[Clock] = None,
    ):
        self._config = config if config is not None else SearchConfig()
        self.rng = rng if rng is not None else np.random.default_rng()
        self.rules = rules if rules is not None else DEFAULT_RULES
        self.external_engine = external_engine
        self.clock = clock

    @property
    def config(self) -> SearchConfig:
        return self._config

    def update_settings(self, config: Optional[SearchConfig] = None, **changes) -> SearchConfig:
        """
        Replace the configuration used by later select_move() calls.

        Args:
            config: Complete new configuration, or None to start from the current one
            **changes: Fields to change (depth, difficulty, time_limit_ms)

        Returns:
            The new configuration

        Raises:
            ValueError: If the resulting configuration is invalid
        """
        base = config if config is not None else self._config
        self._config = base.replace(**changes) if changes else base
        logger.debug(f"Settings updated: {self._config}")
        return self._config

    def evaluator_for(self, difficulty: Difficulty) -> ClassicalEvaluator:
        return ClassicalEvaluator(difficulty, rng=self.rng, rules=self.rules)

    def select_move(
        self, board: chess.Board, config: Optional[SearchConfig] = None
    ) -> Optional[chess.Move]:
        """
        Choose a move for the side to move.

        Args:
            board: Current position (not modified)
            config: Configuration for this call only (default: self.config)

        Returns:
            A legal move, or None if the side to move has no legal moves.
            None is not an error: game-over detection belongs to the caller.
        """
        config = config if config is not None else self._config

        moves = self.rules.legal_moves(board)
        if not moves:
            logger.debug("No moves available")
            return None

        if config.difficulty == Difficulty.EASY:
            move = self._select_easy(board, moves)
        elif config.difficulty == Difficulty.MEDIUM:
            move = self._select_medium(board, moves)
        else:
            move = self._select_hard(board, config)

        logger.debug(f"{config.difficulty.value} selected {move.uci()} in {board.fen()}")
        return move

    def _select_easy(self, board: chess.Board, moves: List[chess.Move]) -> chess.Move:
        """Random capture when there is one, otherwise a random move."""
        captures = [move for move in moves if self.rules.is_capture(board, move)]
        pool = captures if captures else moves
        return pool[int(self.rng.integers(len(pool)))]

    def _select_medium(self, board: chess.Board, moves: List[chess.Move]) -> chess.Move:
        """One-ply lookahead: best evaluation after each move, first on ties."""
        evaluator = self.evaluator_for(Difficulty.MEDIUM)
        maximizing = self.rules.side_to_move(board) == chess.WHITE

        best_move = None
        best_score = -float("inf") if maximizing else float("inf")

        for move in order_moves(board, moves, self.rules):
            score = evaluator.evaluate(self.rules.apply_move(board, move))

            if maximizing:
                if score > best_score:
                    best_score = score
                    best_move = move
            else:
                if score < best_score:
                    best_score = score
                    best_move = move

        return best_move

    def _select_hard(self, board: chess.Board, config: SearchConfig) -> chess.Move:
        """External engine if configured, else (or on failure) the built-in search."""
        if self.external_engine is not None:
            try:
                return self.external_engine.best_move(board, config.difficulty)
            except (ExternalEngineError, OSError) as e:
                logger.warning(f"External engine failed ({e}), using built-in search")

        result = search(
            board,
            config.depth,
            config.time_limit_ms,
            self.evaluator_for(Difficulty.HARD),
            rules=self.rules,
            clock=self.clock,
        )
        logger.debug(
            f"Search done: depth={result.depth} score={result.score:.2f} "
            f"nodes={result.nodes} timed_out={result.timed_out}"
        )
        return result.best_move

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._config!r})"


def create_chess_ai(
    difficulty: Union[str, Difficulty] = Difficulty.MEDIUM,
    seed: Optional[int] = None,
    external_engine: Optional[ExternalEngine] = None,
) -> ChessAI:
    """
    Build a ChessAI with the recommended depth and time budget for a tier.

    Args:
        difficulty: "easy", "medium" or "hard"
        seed: Seed for the random generator (None = fresh entropy)
        external_engine: Optional UCI engine for the hard tier
    """
    return ChessAI(
        SearchConfig.for_difficulty(difficulty),
        rng=np.random.default_rng(seed),
        external_engine=external_engine,
    )
