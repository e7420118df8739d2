"""
Utilities Module

Testing and benchmarking helpers for the move selection core.

Key Components:
    - Tactical test suite: mate-in-one and hanging piece positions
    - Match runner: play two difficulty tiers against each other

Success Metrics:
    - Tactical suite: 6/6 for the medium and hard tiers
"""

from chess_ai.utils.testing import (
    TACTICAL_POSITIONS,
    evaluate_position,
    play_match,
    run_suite,
)

__all__ = [
    'TACTICAL_POSITIONS',
    'evaluate_position',
    'play_match',
    'run_suite',
]
