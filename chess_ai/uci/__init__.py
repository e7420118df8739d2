"""
UCI Engine Client

Lets the hard difficulty tier take its move from an external engine that
speaks the Universal Chess Interface (UCI), such as Stockfish. The built-in
search stays the fallback whenever the engine is missing, slow, or answers
with something unusable.

Reference:
    UCI Protocol: https://www.chessprogramming.org/UCI
"""

from chess_ai.uci.external import ExternalEngine, ExternalEngineError

__all__ = ['ExternalEngine', 'ExternalEngineError']
