"""
Minimax Search with Alpha-Beta Pruning and Iterative Deepening

This module implements the search used by the hard difficulty tier.
Minimax explores the game tree to find the best move, alpha-beta pruning
skips branches that cannot change the result, and iterative deepening
searches depth 1, 2, ... until the depth limit or the time budget runs out.

Key Concepts:
    - Minimax: Recursive algorithm that assumes optimal play by both sides
    - Alpha-Beta: Optimization that prunes branches that can't affect result
    - Move Ordering: Captures are searched first to maximize pruning
    - Soft Deadline: Checked once per node, the search degrades instead of failing

Algorithm Complexity:
    - Minimax: O(b^d) where b=branching factor (~35), d=depth
    - Alpha-Beta: O(b^(d/2)) with perfect move ordering

References:
    - Minimax: https://www.chessprogramming.org/Minimax
    - Alpha-Beta: https://www.chessprogramming.org/Alpha-Beta
    - Iterative Deepening: https://www.chessprogramming.org/Iterative_Deepening
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

import chess

from chess_ai.evaluation.base import MATE_SCORE, Evaluator
from chess_ai.rules import DEFAULT_RULES, RulesEngine
from chess_ai.search.deadline import Clock, Deadline
from chess_ai.search.ordering import order_moves

logger = logging.getLogger(__name__)


@dataclass
class SearchResult:
    """
    Outcome of an iterative deepening search.

    Attributes:
        best_move: Move selected at the last depth that produced one (None if no legal moves)
        score: Score of best_move at that depth, White's perspective. When no
            depth scored a move in time, the static evaluation of the position.
        depth: Depth that produced best_move (0 if none)
        nodes: Number of positions visited
        timed_out: True if the deadline cut the search short
    """

    best_move: Optional[chess.Move]
    score: float
    depth: int
    nodes: int
    timed_out: bool = False


def minimax(
    board: chess.Board,
    depth: int,
    maximizing_player: bool,
    alpha: float,
    beta: float,
    evaluator: Evaluator,
    deadline: Deadline,
    rules: Optional[RulesEngine] = None,
    nodes_searched: Optional[List[int]] = None,
) -> float:
    """
    Minimax search with alpha-beta pruning.

    Recursively explores the game tree on board copies, assuming both players
    play optimally, and returns the evaluation of the best line found.

    Args:
        board: Current chess position (never modified)
        depth: Remaining search depth (decrements each recursive call)
        maximizing_player: True if current player wants to maximize score
        alpha: Best score the maximizer is assured of
        beta: Best score the minimizer is assured of
        evaluator: Position evaluation function
        deadline: Soft deadline, checked once per node
        rules: Rules engine (default: python-chess)
        nodes_searched: Optional mutable list [count] to track positions visited

    Returns:
        float: Evaluation of the position, White's perspective

    When the deadline expires mid-loop the partial max/min collected so far is
    returned as is.
    """
    rules = rules if rules is not None else DEFAULT_RULES

    if nodes_searched is not None:
        nodes_searched[0] += 1

    if depth == 0 or deadline.expired() or rules.is_game_over(board):
        return evaluator.evaluate(board)

    ordered_moves = order_moves(board, rules.legal_moves(board), rules)

    if maximizing_player:
        max_eval = -float("inf")
        for move in ordered_moves:
            eval_score = minimax(
                rules.apply_move(board, move),
                depth - 1,
                False,
                alpha,
                beta,
                evaluator,
                deadline,
                rules,
                nodes_searched,
            )
            max_eval = max(max_eval, eval_score)
            alpha = max(alpha, eval_score)

            # Beta cutoff: minimizing player won't allow this branch
            if beta <= alpha:
                break

        return max_eval

    min_eval = float("inf")
    for move in ordered_moves:
        eval_score = minimax(
            rules.apply_move(board, move),
            depth - 1,
            True,
            alpha,
            beta,
            evaluator,
            deadline,
            rules,
            nodes_searched,
        )
        min_eval = min(min_eval, eval_score)
        beta = min(beta, eval_score)

        # Alpha cutoff: maximizing player won't allow this branch
        if beta <= alpha:
            break

    return min_eval


def search_root(
    board: chess.Board,
    depth: int,
    ordered_moves: List[chess.Move],
    evaluator: Evaluator,
    deadline: Deadline,
    rules: Optional[RulesEngine] = None,
    nodes_searched: Optional[List[int]] = None,
) -> Tuple[Optional[chess.Move], float]:
    """
    Search every root move to a fixed depth.

    Each root move gets a full (-inf, +inf) window. The first strictly better
    score wins, so ties keep the earliest move in ordered_moves. Once the
    deadline has expired the remaining root moves are skipped.

    Returns:
        Tuple of (best_move, best_score); best_move is None if no root move
        was searched before the deadline
    """
    rules = rules if rules is not None else DEFAULT_RULES
    maximizing = rules.side_to_move(board) == chess.WHITE

    best_move = None
    best_score = -float("inf") if maximizing else float("inf")

    for move in ordered_moves:
        if deadline.expired():
            break

        child = rules.apply_move(board, move)
        score = minimax(
            child,
            depth - 1,
            rules.side_to_move(child) == chess.WHITE,
            -float("inf"),
            float("inf"),
            evaluator,
            deadline,
            rules,
            nodes_searched,
        )

        if maximizing:
            if score > best_score:
                best_score = score
                best_move = move
        else:
            if score < best_score:
                best_score = score
                best_move = move

    return best_move, best_score


def search(
    board: chess.Board,
    max_depth: int,
    time_limit_ms: Optional[float],
    evaluator: Evaluator,
    rules: Optional[RulesEngine] = None,
    clock: Optional[Clock] = None,
) -> SearchResult:
    """
    Find the best move with iterative deepening under a soft time budget.

    Args:
        board: Current chess position (never modified)
        max_depth: Deepest iteration to run (>= 1)
        time_limit_ms: Soft time budget in milliseconds (None = no limit)
        evaluator: Position evaluation function
        rules: Rules engine (default: python-chess)
        clock: Monotonic clock in seconds (default: time.monotonic)

    Returns:
        SearchResult; best_move is None only when there are no legal moves.
        Deepening stops early once a completed depth finds a forced mate.

    Raises:
        ValueError: If max_depth is not positive
    """
    if max_depth < 1:
        raise ValueError(f"max_depth must be at least 1, got {max_depth}")

    rules = rules if rules is not None else DEFAULT_RULES
    deadline = Deadline.after_ms(time_limit_ms, clock)

    legal_moves = rules.legal_moves(board)
    if not legal_moves:
        logger.debug(f"No legal moves in {board.fen()}")
        return SearchResult(best_move=None, score=evaluator.evaluate(board), depth=0, nodes=0)

    # Captures first, computed once for every iteration
    ordered_moves = order_moves(board, legal_moves, rules)
    maximizing = rules.side_to_move(board) == chess.WHITE

    nodes = [0]
    result = SearchResult(best_move=None, score=0.0, depth=0, nodes=0)

    for depth in range(1, max_depth + 1):
        best_move, best_score = search_root(
            board, depth, ordered_moves, evaluator, deadline, rules, nodes
        )

        if best_move is not None:
            result.best_move = best_move
            result.score = best_score
            result.depth = depth
            logger.debug(
                f"depth {depth}: best={best_move.uci()} score={best_score:.2f} nodes={nodes[0]}"
            )

        if deadline.expired():
            result.timed_out = True
            logger.info(f"Time limit reached at depth {depth}")
            break

        # Completed depth proves a mate for the side to move: deeper
        # iterations cannot improve on it, and a partial one must not replace it
        proven = best_score >= MATE_SCORE if maximizing else best_score <= -MATE_SCORE
        if proven:
            logger.debug(f"Forced mate found at depth {depth}, stopping")
            break

    if result.best_move is None:
        # Budget gone before depth 1 scored anything
        result.best_move = ordered_moves[0]
        result.score = evaluator.evaluate(board)
        logger.warning(f"No depth completed in time, playing {result.best_move.uci()}")

    result.nodes = nodes[0]
    return result
