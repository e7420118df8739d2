"""
Soft search deadline.

One Deadline is created per search and passed down every recursive call.
It is a plain wall-clock comparison: nothing is interrupted, the search just
stops going deeper once expired() turns true.
"""

import math
import time
from typing import Callable, Optional

Clock = Callable[[], float]


class Deadline:
    """
    Point in time (seconds on a monotonic clock) after which search winds down.

    Attributes:
        at: Expiry time on the clock, math.inf for no limit
        clock: Zero-argument callable returning the current time in seconds
    """

    def __init__(self, at: float, clock: Optional[Clock] = None):
        self.at = at
        self.clock = clock if clock is not None else time.monotonic

    @classmethod
    def after_ms(cls, time_limit_ms: Optional[float], clock: Optional[Clock] = None) -> "Deadline":
        """Deadline time_limit_ms from now; None means no limit."""
        if time_limit_ms is None:
            return cls.never(clock)
        clock = clock if clock is not None else time.monotonic
        return cls(clock() + time_limit_ms / 1000.0, clock)

    @classmethod
    def never(cls, clock: Optional[Clock] = None) -> "Deadline":
        return cls(math.inf, clock)

    def expired(self) -> bool:
        return self.clock() > self.at

    def remaining_ms(self) -> float:
        return max(0.0, (self.at - self.clock()) * 1000.0)

    def __repr__(self) -> str:
        if math.isinf(self.at):
            return "Deadline(never)"
        return f"Deadline(remaining_ms={self.remaining_ms():.0f})"
