r"""Iterators over backoff delays.

Unlike the attempt iterators, these iterators never wait: they yield
``(attempt, delay)`` pairs and leave waiting, and cancellation, to the
caller.
"""

from __future__ import annotations

__all__ = ["BackoffDurations", "constant_durations", "exponential_durations"]

from typing import TYPE_CHECKING

from abackoff.policy import build_constant_policy, build_exponential_policy

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from abackoff.backoff import BaseBackoff
    from abackoff.core.options import ConstantOption, ExponentialOption


class BackoffDurations:
    """Factory of iterators over backoff delays.

    Args:
        factory: Callable building a new backoff strategy.

    Example:
        ```pycon
        >>> from abackoff import constant_durations, with_max_retries
        >>> durations = constant_durations(42.0, with_max_retries(3))
        >>> list(durations())
        [(0, 42.0), (1, 42.0), (2, 42.0)]

        ```
    """

    def __init__(self, factory: Callable[[], BaseBackoff]) -> None:
        self._factory = factory

    def __call__(self) -> Iterator[tuple[int, float]]:
        """Create an iterator over ``(attempt, delay)`` pairs.

        Returns:
            An iterator that ends when the strategy stops.
        """
        return self._iterate()

    def _iterate(self) -> Iterator[tuple[int, float]]:
        backoff = self._factory()
        attempt = 0
        while (delay := backoff.next_backoff()) is not None:
            yield attempt, delay
            attempt += 1

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(factory={self._factory!r})"


def constant_durations(interval: float, *options: ConstantOption) -> BackoffDurations:
    """Create iterators over constant backoff delays.

    See ``abackoff.constant`` for the meaning of ``interval``.

    Args:
        interval: The delay in seconds.
        *options: Options such as ``with_max_retries``.

    Returns:
        The delay iterator factory.

    Raises:
        TypeError: If an option does not apply to constant policies.

    Example:
        ```pycon
        >>> from abackoff import constant_durations
        >>> list(constant_durations(-1)())
        []

        ```
    """
    return BackoffDurations(build_constant_policy(interval, *options).new)


def exponential_durations(*options: ExponentialOption) -> BackoffDurations:
    """Create iterators over exponential backoff delays.

    Args:
        *options: Options such as ``with_initial_interval`` or
            ``with_max_retries``.

    Returns:
        The delay iterator factory.

    Raises:
        TypeError: If an option does not apply to exponential policies.

    Example:
        ```pycon
        >>> from abackoff import (
        ...     exponential_durations,
        ...     with_initial_interval,
        ...     with_max_retries,
        ...     with_randomization_factor,
        ... )
        >>> durations = exponential_durations(
        ...     with_initial_interval(10.0),
        ...     with_randomization_factor(0),
        ...     with_max_retries(5),
        ... )
        >>> list(durations())
        [(0, 10.0), (1, 15.0), (2, 22.5), (3, 33.75), (4, 50.625)]

        ```
    """
    return BackoffDurations(build_exponential_policy(*options).new)
