r"""Retry-count limiter for backoff strategies."""

from __future__ import annotations

__all__ = ["MaxRetriesBackoff"]

import logging

from abackoff.backoff.base import BaseBackoff

logger: logging.Logger = logging.getLogger(__name__)


class MaxRetriesBackoff(BaseBackoff):
    """Wrap a backoff strategy to cap the number of retries.

    After ``max_retries`` calls have been forwarded to the wrapped
    strategy, every further call returns ``None``. A ``max_retries`` of
    0 disables the limit.

    Args:
        delegate: The wrapped backoff strategy.
        max_retries: The maximum number of retries (0 means unlimited).

    Example:
        ```pycon
        >>> from abackoff.backoff import ConstantBackoff, MaxRetriesBackoff
        >>> backoff = MaxRetriesBackoff(ConstantBackoff(1.0), max_retries=2)
        >>> backoff.next_backoff()
        1.0
        >>> backoff.next_backoff()
        1.0
        >>> backoff.next_backoff() is None
        True

        ```
    """

    def __init__(self, delegate: BaseBackoff, max_retries: int) -> None:
        self.delegate = delegate
        self.max_retries = max_retries
        self._num_tries = 0

    @property
    def num_tries(self) -> int:
        """The number of calls forwarded to the wrapped strategy."""
        return self._num_tries

    def next_backoff(self) -> float | None:
        if self.max_retries > 0:
            if self._num_tries >= self.max_retries:
                logger.debug(f"Max retries reached ({self.max_retries})")
                return None
            self._num_tries += 1
        return self.delegate.next_backoff()

    def reset(self) -> None:
        self._num_tries = 0
        self.delegate.reset()

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(delegate={self.delegate!r}, "
            f"max_retries={self.max_retries})"
        )
