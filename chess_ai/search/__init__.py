"""
Search Module

This module implements the move search used by the hard difficulty tier:
minimax with alpha-beta pruning, driven by iterative deepening under a soft
wall-clock deadline.

Key Components:
    - search: Iterative deepening entry point, returns a SearchResult
    - minimax: Core recursive search with alpha-beta pruning
    - order_moves: Captures-first move ordering
    - Deadline: Soft time limit threaded through every recursive call

"""

from chess_ai.search.deadline import Deadline
from chess_ai.search.minimax import SearchResult, minimax, search, search_root
from chess_ai.search.ordering import order_moves

__all__ = ['search', 'search_root', 'minimax', 'order_moves', 'Deadline', 'SearchResult']
