r"""Attempt iterators that wait between retries.

This module provides ``Backoff``, a reusable factory of attempt
iterators. Each iterator yields the attempt number (0 for the first
attempt) and sleeps for the backoff delay before yielding the next
one. Leaving the loop with ``break`` ends the iteration without any
further wait, and setting the cancellation event ends a pending wait
immediately.
"""

from __future__ import annotations

__all__ = ["Backoff", "constant", "exponential"]

import logging
from typing import TYPE_CHECKING

from abackoff.policy import build_constant_policy, build_exponential_policy
from abackoff.utils.wait import wait

if TYPE_CHECKING:
    import threading
    from collections.abc import Callable, Iterator

    from abackoff.backoff import BaseBackoff
    from abackoff.core.options import ConstantOption, ExponentialOption

logger: logging.Logger = logging.getLogger(__name__)


class Backoff:
    """Factory of attempt iterators.

    Calling the factory returns a new iterator powered by a fresh
    backoff strategy, so the same ``Backoff`` can be reused for any
    number of independent retry loops.

    Args:
        factory: Callable building a new backoff strategy.

    Example:
        ```pycon
        >>> from abackoff import constant, with_max_retries
        >>> backoff = constant(0, with_max_retries(3))
        >>> for attempt in backoff():
        ...     print("attempt", attempt)
        ...
        attempt 0
        attempt 1
        attempt 2
        attempt 3

        ```
    """

    def __init__(self, factory: Callable[[], BaseBackoff]) -> None:
        self._factory = factory

    def __call__(self, cancel: threading.Event | None = None) -> Iterator[int]:
        """Create an attempt iterator.

        Args:
            cancel: Optional event. Once it is set, the iterator stops
                at the next wait, or immediately if it is waiting.

        Returns:
            An iterator over attempt numbers.
        """
        return self._iterate(cancel)

    def _iterate(self, cancel: threading.Event | None) -> Iterator[int]:
        backoff = self._factory()
        attempt = 0
        while True:
            yield attempt
            if cancel is not None and cancel.is_set():
                logger.debug(f"Cancelled after attempt {attempt}")
                return
            delay = backoff.next_backoff()
            if delay is None:
                logger.debug(f"Stopped retrying after attempt {attempt}")
                return
            logger.debug(f"Waiting {delay:.2f}s before retry {attempt + 1}")
            if wait(delay, cancel):
                logger.debug(f"Cancelled while waiting before retry {attempt + 1}")
                return
            attempt += 1

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(factory={self._factory!r})"


def constant(interval: float, *options: ConstantOption) -> Backoff:
    """Create attempt iterators that wait a constant delay.

    - If ``interval < 0``, the iterator yields only the first attempt.
    - If ``interval == 0``, retries happen without delay.
    - If ``interval > 0``, every retry waits ``interval`` seconds.

    Args:
        interval: The delay in seconds.
        *options: Options such as ``with_max_retries``.

    Returns:
        The attempt iterator factory.

    Raises:
        TypeError: If an option does not apply to constant policies.

    Example:
        ```pycon
        >>> from abackoff import constant, with_max_retries
        >>> list(constant(-1, with_max_retries(3))())
        [0]
        >>> list(constant(0, with_max_retries(2))())
        [0, 1, 2]

        ```
    """
    return Backoff(build_constant_policy(interval, *options).new)


def exponential(*options: ExponentialOption) -> Backoff:
    """Create attempt iterators that wait an exponentially growing
    delay.

    Args:
        *options: Options such as ``with_initial_interval`` or
            ``with_max_retries``.

    Returns:
        The attempt iterator factory.

    Raises:
        TypeError: If an option does not apply to exponential policies.

    Example:
        ```pycon
        >>> import threading
        >>> from abackoff import exponential, with_initial_interval, with_max_retries
        >>> backoff = exponential(with_initial_interval(0.1), with_max_retries(5))
        >>> cancel = threading.Event()
        >>> for attempt in backoff(cancel):
        ...     if attempt == 1:
        ...         break
        ...

        ```
    """
    return Backoff(build_exponential_policy(*options).new)
