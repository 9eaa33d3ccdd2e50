"""This module provides the time sources the date provider reads "now" from."""

import time
from typing import Protocol


class Clock(Protocol):
    """A source of the current instant, in milliseconds since the epoch."""

    def now_millis(self) -> int:
        """Returns the current instant in epoch milliseconds."""
        ...


class SystemClock:
    """Reads the current instant from the operating system's wall clock."""

    def now_millis(self) -> int:
        """Returns the wall-clock time in epoch milliseconds."""
        return time.time_ns() // 1_000_000


class FixedClock:
    """A clock frozen at a given instant, moved only when asked to.

    Useful for tests and for rendering a batch of labels against a single
    reference instant.
    """

    def __init__(self, millis: int) -> None:
        """Initializes the clock.

        Args:
            millis: The instant to report, in epoch milliseconds.
        """
        self._millis = millis

    def now_millis(self) -> int:
        """Returns the frozen instant in epoch milliseconds."""
        return self._millis

    def advance(self, *, seconds: int = 0, millis: int = 0) -> None:
        """Moves the frozen instant forward (or backward, for negative values).

        Args:
            seconds: Whole seconds to add.
            millis: Milliseconds to add.
        """
        self._millis += seconds * 1000 + millis
