r"""Exponential backoff strategy with jitter and ceilings."""

from __future__ import annotations

__all__ = ["ExponentialBackoff"]

import logging
import math
import random
from typing import TYPE_CHECKING

from abackoff.backoff.base import BaseBackoff
from abackoff.clock import SystemClock
from abackoff.core.config import (
    DEFAULT_INITIAL_INTERVAL,
    DEFAULT_MAX_ELAPSED_TIME,
    DEFAULT_MAX_INTERVAL,
    DEFAULT_MULTIPLIER,
    DEFAULT_RANDOMIZATION_FACTOR,
    MAX_BACKOFF_INTERVAL,
)

if TYPE_CHECKING:
    from abackoff.clock import Clock

logger: logging.Logger = logging.getLogger(__name__)


class ExponentialBackoff(BaseBackoff):
    r"""Exponential backoff strategy.

    Each call to ``next_backoff`` returns the current interval perturbed
    by a random jitter, then grows the interval by ``multiplier``:

    ```
    delay    = uniform(cur * (1 - randomization_factor),
                       cur * (1 + randomization_factor))
    next cur = min(cur * multiplier, max_interval)
    ```

    The delay is clamped to ``[0, max_interval]``, or to
    ``[0, MAX_BACKOFF_INTERVAL]`` when ``max_interval`` is not positive,
    so the interval stops growing before it overflows. Before a delay is
    returned, the elapsed time since the strategy was created (or reset)
    is checked against the time budgets:

    - ``max_elapsed_time``: stop if ``elapsed + delay`` would exceed it.
      0 disables this check.
    - ``stop_after``: stop once ``elapsed`` reaches it. ``None``
      disables this check.

    Once a budget is exceeded the strategy stays stopped until
    ``reset`` is called, whatever the clock reports afterwards.

    Args:
        initial_interval: The delay in seconds before the first retry.
        randomization_factor: The jitter width as a proportion of the
            current interval. 0 disables jitter.
        multiplier: The growth factor applied after each retry.
        max_interval: The ceiling in seconds on a single delay.
            A value <= 0 leaves only the ``MAX_BACKOFF_INTERVAL`` ceiling.
        max_elapsed_time: The total time budget in seconds.
        stop_after: An alternate time budget in seconds, or ``None``.
        clock: The time source. Defaults to ``SystemClock``.

    Example:
        ```pycon
        >>> from abackoff.backoff import ExponentialBackoff
        >>> backoff = ExponentialBackoff(initial_interval=1.0, randomization_factor=0.0)
        >>> backoff.next_backoff()
        1.0
        >>> backoff.next_backoff()
        1.5
        >>> backoff.next_backoff()
        2.25

        ```
    """

    def __init__(
        self,
        initial_interval: float = DEFAULT_INITIAL_INTERVAL,
        randomization_factor: float = DEFAULT_RANDOMIZATION_FACTOR,
        multiplier: float = DEFAULT_MULTIPLIER,
        max_interval: float = DEFAULT_MAX_INTERVAL,
        max_elapsed_time: float = DEFAULT_MAX_ELAPSED_TIME,
        stop_after: float | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.initial_interval = initial_interval
        self.randomization_factor = randomization_factor
        self.multiplier = multiplier
        self.max_interval = max_interval
        self.max_elapsed_time = max_elapsed_time
        self.stop_after = stop_after
        self.clock: Clock = clock if clock is not None else SystemClock()
        self.reset()

    @property
    def current_interval(self) -> float:
        """The interval, before jitter, used by the next call."""
        return self._current_interval

    @property
    def elapsed_time(self) -> float:
        """The time in seconds since the strategy was created or reset."""
        return self.clock.now() - self._start_time

    @property
    def exhausted(self) -> bool:
        """Whether a time budget has been exceeded."""
        return self._exhausted

    def reset(self) -> None:
        self._current_interval = self.initial_interval
        self._start_time = self.clock.now()
        self._exhausted = False

    def next_backoff(self) -> float | None:
        if self._exhausted:
            return None

        elapsed = self.elapsed_time
        delay = self._randomize(self._current_interval)
        self._increment_current_interval()

        if self.max_elapsed_time != 0 and elapsed + delay > self.max_elapsed_time:
            logger.debug(
                f"Time budget exceeded (elapsed={elapsed:.2f}s, next={delay:.2f}s, "
                f"max_elapsed_time={self.max_elapsed_time:.2f}s)"
            )
            self._exhausted = True
            return None
        if self.stop_after is not None and elapsed >= self.stop_after:
            logger.debug(
                f"Time budget exceeded (elapsed={elapsed:.2f}s, stop_after={self.stop_after:.2f}s)"
            )
            self._exhausted = True
            return None
        return delay

    def _randomize(self, interval: float) -> float:
        """Apply jitter to an interval and clamp the result.

        Args:
            interval: The interval before jitter.

        Returns:
            A delay drawn uniformly from
                ``[interval * (1 - rf), interval * (1 + rf)]``, clamped to
                ``[0, max_interval]``, or to ``[0, MAX_BACKOFF_INTERVAL]``
                when ``max_interval`` is not positive.
        """
        if self.randomization_factor == 0:
            delay = interval
        else:
            delta = self.randomization_factor * interval
            delay = random.uniform(interval - delta, interval + delta)  # noqa: S311
        if not math.isfinite(delay):
            # the jitter range overflowed
            delay = interval
        return min(max(delay, 0.0), self._ceiling())

    def _increment_current_interval(self) -> None:
        ceiling = self._ceiling()
        grown = self._current_interval * self.multiplier
        if grown >= ceiling:
            self._current_interval = ceiling
        else:
            self._current_interval = grown

    def _ceiling(self) -> float:
        """Return the largest delay this strategy may return."""
        if self.max_interval > 0:
            return self.max_interval
        return MAX_BACKOFF_INTERVAL

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(initial_interval={self.initial_interval}, "
            f"randomization_factor={self.randomization_factor}, "
            f"multiplier={self.multiplier}, max_interval={self.max_interval}, "
            f"max_elapsed_time={self.max_elapsed_time}, stop_after={self.stop_after}, "
            f"clock={self.clock!r})"
        )
