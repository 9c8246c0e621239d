r"""Immutable backoff policies and their construction from options.

A policy describes how delays evolve. Calling ``new`` on a policy
builds a fresh backoff strategy, so a single policy can drive any
number of independent iterations.
"""

from __future__ import annotations

__all__ = [
    "ConstantPolicy",
    "ExponentialPolicy",
    "build_constant_policy",
    "build_exponential_policy",
]

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from abackoff.backoff import (
    ConstantBackoff,
    ExponentialBackoff,
    MaxRetriesBackoff,
    StopBackoff,
    ZeroBackoff,
)
from abackoff.clock import SystemClock
from abackoff.core.config import (
    DEFAULT_INITIAL_INTERVAL,
    DEFAULT_MAX_ELAPSED_TIME,
    DEFAULT_MAX_INTERVAL,
    DEFAULT_MAX_RETRIES,
    DEFAULT_MULTIPLIER,
    DEFAULT_RANDOMIZATION_FACTOR,
)
from abackoff.core.options import ConstantOption, ExponentialOption

if TYPE_CHECKING:
    from abackoff.backoff import BaseBackoff
    from abackoff.clock import Clock


@dataclass(frozen=True)
class ConstantPolicy:
    """Policy returning the same delay for every retry.

    The sign of ``interval`` selects the strategy:

    - ``interval < 0``: never retry (``StopBackoff``)
    - ``interval == 0``: retry without delay (``ZeroBackoff``)
    - ``interval > 0``: retry with a fixed delay (``ConstantBackoff``)

    Args:
        interval: The delay in seconds.
        max_retries: The maximum number of retries (0 means unlimited).
            Ignored when ``interval < 0``.

    Example:
        ```pycon
        >>> from abackoff.policy import ConstantPolicy
        >>> ConstantPolicy(-1).new()
        StopBackoff()
        >>> ConstantPolicy(0).new()
        ZeroBackoff()
        >>> ConstantPolicy(2.0, max_retries=3).new()
        MaxRetriesBackoff(delegate=ConstantBackoff(interval=2.0), max_retries=3)

        ```
    """

    interval: float
    max_retries: int = DEFAULT_MAX_RETRIES

    def new(self) -> BaseBackoff:
        """Build a fresh backoff strategy for this policy.

        Returns:
            The backoff strategy.
        """
        if self.interval < 0:
            return StopBackoff()
        backoff: BaseBackoff
        if self.interval == 0:
            backoff = ZeroBackoff()
        else:
            backoff = ConstantBackoff(self.interval)
        if self.max_retries > 0:
            backoff = MaxRetriesBackoff(backoff, self.max_retries)
        return backoff


@dataclass(frozen=True)
class ExponentialPolicy:
    """Policy growing the delay exponentially, with jitter.

    See ``ExponentialBackoff`` for the meaning of each field.

    Args:
        initial_interval: The delay in seconds before the first retry.
        randomization_factor: The jitter width as a proportion of the
            current interval.
        multiplier: The growth factor applied after each retry.
        max_interval: The ceiling in seconds on a single delay.
        max_elapsed_time: The total time budget in seconds
            (0 means no budget).
        stop_after: An alternate time budget in seconds, or ``None``.
        clock: The time source used to measure elapsed time.
        max_retries: The maximum number of retries (0 means unlimited).

    Example:
        ```pycon
        >>> from abackoff.policy import ExponentialPolicy
        >>> policy = ExponentialPolicy(initial_interval=1.0, randomization_factor=0.0)
        >>> backoff = policy.new()
        >>> backoff.next_backoff(), backoff.next_backoff()
        (1.0, 1.5)

        ```
    """

    initial_interval: float = DEFAULT_INITIAL_INTERVAL
    randomization_factor: float = DEFAULT_RANDOMIZATION_FACTOR
    multiplier: float = DEFAULT_MULTIPLIER
    max_interval: float = DEFAULT_MAX_INTERVAL
    max_elapsed_time: float = DEFAULT_MAX_ELAPSED_TIME
    stop_after: float | None = None
    clock: Clock = field(default_factory=SystemClock)
    max_retries: int = DEFAULT_MAX_RETRIES

    def new(self) -> BaseBackoff:
        """Build a fresh backoff strategy for this policy.

        The elapsed-time clock of the strategy starts when it is built.

        Returns:
            The backoff strategy.
        """
        backoff: BaseBackoff = ExponentialBackoff(
            initial_interval=self.initial_interval,
            randomization_factor=self.randomization_factor,
            multiplier=self.multiplier,
            max_interval=self.max_interval,
            max_elapsed_time=self.max_elapsed_time,
            stop_after=self.stop_after,
            clock=self.clock,
        )
        if self.max_retries > 0:
            backoff = MaxRetriesBackoff(backoff, self.max_retries)
        return backoff


def build_constant_policy(interval: float, *options: ConstantOption) -> ConstantPolicy:
    """Build a constant policy from an interval and options.

    Args:
        interval: The delay in seconds.
        *options: The options to apply, in order.

    Returns:
        The configured policy.

    Raises:
        TypeError: If an option does not apply to constant policies.

    Example:
        ```pycon
        >>> from abackoff.core.options import with_max_retries
        >>> from abackoff.policy import build_constant_policy
        >>> build_constant_policy(1.0, with_max_retries(3), with_max_retries(5))
        ConstantPolicy(interval=1.0, max_retries=5)

        ```
    """
    policy = ConstantPolicy(interval=interval)
    for option in options:
        if not isinstance(option, ConstantOption):
            msg = f"{option!r} cannot be applied to a constant backoff policy"
            raise TypeError(msg)
        policy = option.apply_to_constant(policy)
    return policy


def build_exponential_policy(*options: ExponentialOption) -> ExponentialPolicy:
    """Build an exponential policy from options.

    Fields without an option keep their default value.

    Args:
        *options: The options to apply, in order.

    Returns:
        The configured policy.

    Raises:
        TypeError: If an option does not apply to exponential policies.

    Example:
        ```pycon
        >>> from abackoff.core.options import with_multiplier
        >>> from abackoff.policy import build_exponential_policy
        >>> build_exponential_policy(with_multiplier(2.0)).multiplier
        2.0

        ```
    """
    policy = ExponentialPolicy()
    for option in options:
        if not isinstance(option, ExponentialOption):
            msg = f"{option!r} cannot be applied to an exponential backoff policy"
            raise TypeError(msg)
        policy = option.apply_to_exponential(policy)
    return policy
