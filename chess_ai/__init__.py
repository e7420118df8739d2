"""
chess_ai: difficulty-tiered move selection

Given a chess position, pick a move for the side to move at an easy, medium
or hard playing strength.

## Architecture

1. **rules**: Rules engine collaborator (python-chess backed)
   - Legal moves, captures, move application on copies
   - Checkmate and draw detection

2. **evaluation**: Position evaluation functions
   - Abstract Evaluator interface
   - ClassicalEvaluator: material + piece-square tables, tier noise

3. **search**: Search algorithms
   - Minimax with alpha-beta pruning
   - Iterative deepening under a soft deadline
   - Captures-first move ordering

4. **policy**: Difficulty policy
   - easy: random (captures preferred)
   - medium: one-ply lookahead
   - hard: full search, optionally an external UCI engine

5. **uci**: Client for an external UCI engine (e.g. Stockfish)

6. **utils**: Tactical test suite and match runner

## Quick Start

```python
import chess
from chess_ai import create_chess_ai

ai = create_chess_ai("hard", seed=42)
board = chess.Board()

move = ai.select_move(board)
print(f"Best move: {move}")
```
"""

__version__ = "0.1.0"
__license__ = "MIT"

from chess_ai.config import Difficulty, SearchConfig, UCIConfig
from chess_ai.evaluation import ClassicalEvaluator, Evaluator
from chess_ai.policy import ChessAI, create_chess_ai
from chess_ai.rules import ChessRules, RulesEngine
from chess_ai.search import SearchResult, search

__all__ = [
    'ChessAI',
    'ChessRules',
    'ClassicalEvaluator',
    'Difficulty',
    'Evaluator',
    'RulesEngine',
    'SearchConfig',
    'SearchResult',
    'UCIConfig',
    'create_chess_ai',
    'search',
]
