r"""Abstract base class for backoff strategies."""

from __future__ import annotations

__all__ = ["BaseBackoff"]

from abc import ABC, abstractmethod


class BaseBackoff(ABC):
    """Abstract base class for backoff strategies.

    A backoff strategy is a stateful, single-use generator of retry
    delays. Each call to ``next_backoff`` advances its internal state
    and returns either the delay to wait before the next attempt, or
    ``None`` when no further attempt should be made.
    """

    @abstractmethod
    def next_backoff(self) -> float | None:
        """Compute the delay before the next retry attempt.

        Returns:
            The delay in seconds, or ``None`` to stop retrying.
        """

    def reset(self) -> None:  # noqa: B027
        """Restore the strategy to its initial state.

        Stateless strategies have nothing to reset.
        """
