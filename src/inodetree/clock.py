"""Time sources for stamping node creation and modification times.

Nodes never read the wall clock themselves. Every NodeTree is given a clock when it is
constructed and asks it for the current time whenever a node is created or mutated, so
tests can substitute a ManualClock and get deterministic timestamps.
"""

import time
from abc import ABC, abstractmethod


class BaseClock(ABC):
    """Abstract source of the current time in whole seconds since the epoch.

    Example:
        >>> class ConstantClock(BaseClock):
        ...     def now(self) -> int:
        ...         return 1257894000
        >>> ConstantClock().now()
        1257894000
    """

    @abstractmethod
    def now(self) -> int:
        """Return the current time as POSIX seconds."""
        pass


class SystemClock(BaseClock):
    """Clock backed by the system wall clock, truncated to whole seconds."""

    def now(self) -> int:
        return int(time.time())


class ManualClock(BaseClock):
    """Clock that only moves when told to.

    Attributes:
        current (int): The time returned by now().

    Example:
        >>> clock = ManualClock(1000)
        >>> clock.now()
        1000
        >>> clock.advance(5)
        1005
        >>> clock.set(2000)
        >>> clock.now()
        2000
    """

    def __init__(self, start: int = 0) -> None:
        self.current = start

    def now(self) -> int:
        return self.current

    def advance(self, seconds: int = 1) -> int:
        """Move the clock forward and return the new time.

        Raises:
            ValueError: If seconds is negative.
        """
        if seconds < 0:
            raise ValueError(f"Cannot move a clock backwards: {seconds}")
        self.current += seconds
        return self.current

    def set(self, timestamp: int) -> None:
        self.current = timestamp
