"""
Move ordering.

Alpha-beta prunes more when strong moves are searched first. The only
heuristic used here is "captures first"; it changes how much work the search
does, never which move it returns at a fully searched depth.
"""

from typing import Iterable, List, Optional

import chess

from chess_ai.rules import DEFAULT_RULES, RulesEngine


def order_moves(
    board: chess.Board,
    moves: Iterable[chess.Move],
    rules: Optional[RulesEngine] = None,
) -> List[chess.Move]:
    """
    Order moves to improve alpha-beta pruning efficiency.

    Captures come before quiet moves. The sort is stable, so moves keep their
    original relative order inside each group.

    Args:
        board: Current board position
        moves: Legal moves to order
        rules: Rules engine deciding what counts as a capture

    Returns:
        New list with captures first
    """
    rules = rules if rules is not None else DEFAULT_RULES
    return sorted(moves, key=lambda move: 0 if rules.is_capture(board, move) else 1)
