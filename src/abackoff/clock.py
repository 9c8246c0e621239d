r"""Time sources used to measure elapsed time in backoff strategies.

The exponential strategy reads the current time through a ``Clock`` so
that tests can substitute a deterministic time source.
"""

from __future__ import annotations

__all__ = ["Clock", "SystemClock"]

import time
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Protocol for objects that report the current time in seconds.

    Only differences between two readings are meaningful, so any
    monotonic source works.

    Example:
        ```pycon
        >>> from abackoff.clock import Clock, SystemClock
        >>> isinstance(SystemClock(), Clock)
        True

        ```
    """

    def now(self) -> float:
        """Return the current time in seconds."""


class SystemClock:
    """Clock backed by ``time.monotonic``.

    Example:
        ```pycon
        >>> from abackoff.clock import SystemClock
        >>> clock = SystemClock()
        >>> clock.now() <= clock.now()
        True

        ```
    """

    def now(self) -> float:
        return time.monotonic()

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, SystemClock)

    def __hash__(self) -> int:
        return hash(SystemClock)
