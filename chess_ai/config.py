"""
Engine configuration.

Settings are immutable values: the policy holds one SearchConfig and swaps it
for a new one between moves, never during a search.
"""

from dataclasses import dataclass, replace as dataclass_replace
from enum import Enum
from typing import Optional, Union


class Difficulty(str, Enum):
    """Difficulty tier of the computer opponent."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, value: Union[str, "Difficulty"]) -> "Difficulty":
        """
        Convert a tier name (any case) or a Difficulty into a Difficulty.

        Raises:
            ValueError: If the name is not a known tier
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            names = ", ".join(d.value for d in cls)
            raise ValueError(f"Unknown difficulty {value!r}, expected one of: {names}") from None


# Recommended (depth, time budget) per tier
DEFAULT_DEPTHS = {
    Difficulty.EASY: 2,
    Difficulty.MEDIUM: 3,
    Difficulty.HARD: 4,
}

DEFAULT_TIME_LIMITS_MS = {
    Difficulty.EASY: 400,
    Difficulty.MEDIUM: 800,
    Difficulty.HARD: 1500,
}

# External UCI engine settings per tier
UCI_MOVETIME_MS = {
    Difficulty.EASY: 40,
    Difficulty.MEDIUM: 80,
    Difficulty.HARD: 160,
}

UCI_SKILL_LEVEL = {
    Difficulty.EASY: 1,
    Difficulty.MEDIUM: 5,
    Difficulty.HARD: 10,
}


@dataclass(frozen=True)
class SearchConfig:
    """Search settings for one move selection.

    Frozen: use replace() to derive a new configuration.
    """

    depth: int = DEFAULT_DEPTHS[Difficulty.MEDIUM]
    """Maximum iterative deepening depth in plies"""

    difficulty: Difficulty = Difficulty.MEDIUM
    """Selection strategy and evaluation noise"""

    time_limit_ms: int = DEFAULT_TIME_LIMITS_MS[Difficulty.MEDIUM]
    """Soft thinking time budget in milliseconds"""

    def __post_init__(self):
        """Validate configuration after initialization."""
        object.__setattr__(self, "difficulty", Difficulty.parse(self.difficulty))

        if isinstance(self.depth, bool) or not isinstance(self.depth, int) or self.depth <= 0:
            raise ValueError(f"depth must be a positive integer, got {self.depth!r}")

        if (
            isinstance(self.time_limit_ms, bool)
            or not isinstance(self.time_limit_ms, int)
            or self.time_limit_ms <= 0
        ):
            raise ValueError(
                f"time_limit_ms must be a positive integer, got {self.time_limit_ms!r}"
            )

    @classmethod
    def for_difficulty(cls, difficulty: Union[str, Difficulty]) -> "SearchConfig":
        """Build the recommended configuration for a tier."""
        difficulty = Difficulty.parse(difficulty)
        return cls(
            depth=DEFAULT_DEPTHS[difficulty],
            difficulty=difficulty,
            time_limit_ms=DEFAULT_TIME_LIMITS_MS[difficulty],
        )

    def replace(self, **changes) -> "SearchConfig":
        """Return a copy with the given fields changed (validated again)."""
        return dataclass_replace(self, **changes)

    def __repr__(self) -> str:
        return (
            f"SearchConfig(difficulty={self.difficulty.value}, depth={self.depth}, "
            f"time_limit_ms={self.time_limit_ms})"
        )


@dataclass(frozen=True)
class UCIConfig:
    """Settings for an external UCI engine used as the hard-tier move source."""

    engine_path: Optional[str] = None
    """Path to the engine binary (None = look for stockfish on PATH)"""

    grace_ms: int = 900
    """Extra wait on top of the movetime before giving up on the engine"""

    min_wait_ms: int = 300
    """Lower bound on the total wait for a bestmove"""

    def __post_init__(self):
        if self.grace_ms < 0:
            raise ValueError(f"grace_ms must be non-negative, got {self.grace_ms}")

        if self.min_wait_ms < 0:
            raise ValueError(f"min_wait_ms must be non-negative, got {self.min_wait_ms}")

    def movetime_ms(self, difficulty: Union[str, Difficulty]) -> int:
        return UCI_MOVETIME_MS[Difficulty.parse(difficulty)]

    def skill_level(self, difficulty: Union[str, Difficulty]) -> int:
        return UCI_SKILL_LEVEL[Difficulty.parse(difficulty)]

    def wait_ms(self, difficulty: Union[str, Difficulty]) -> int:
        """Total time to wait for a bestmove before falling back."""
        return max(self.min_wait_ms, self.movetime_ms(difficulty) + self.grace_ms)
