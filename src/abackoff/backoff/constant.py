r"""Fixed-delay backoff strategies."""

from __future__ import annotations

__all__ = ["ConstantBackoff", "StopBackoff", "ZeroBackoff"]

from abackoff.backoff.base import BaseBackoff


class StopBackoff(BaseBackoff):
    """Backoff strategy that never retries.

    Example:
        ```pycon
        >>> from abackoff.backoff import StopBackoff
        >>> StopBackoff().next_backoff() is None
        True

        ```
    """

    def next_backoff(self) -> float | None:
        return None

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"


class ZeroBackoff(BaseBackoff):
    """Backoff strategy that retries immediately, forever.

    Example:
        ```pycon
        >>> from abackoff.backoff import ZeroBackoff
        >>> backoff = ZeroBackoff()
        >>> backoff.next_backoff()
        0.0
        >>> backoff.next_backoff()
        0.0

        ```
    """

    def next_backoff(self) -> float | None:
        return 0.0

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"


class ConstantBackoff(BaseBackoff):
    """Constant/fixed backoff strategy.

    Returns the same delay for every retry attempt, forever. Combine it
    with ``MaxRetriesBackoff`` to bound the number of attempts.

    Args:
        interval: The fixed delay in seconds.

    Example:
        ```pycon
        >>> from abackoff.backoff import ConstantBackoff
        >>> backoff = ConstantBackoff(interval=2.5)
        >>> backoff.next_backoff()
        2.5
        >>> backoff.next_backoff()
        2.5

        ```
    """

    def __init__(self, interval: float) -> None:
        self.interval = interval

    def next_backoff(self) -> float | None:
        return self.interval

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(interval={self.interval})"
