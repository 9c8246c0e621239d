r"""Optional parameters for constant and exponential backoff policies.

Options come in two capability sets: ``ConstantOption`` configures a
``ConstantPolicy`` and ``ExponentialOption`` configures an
``ExponentialPolicy``. ``Option`` implements both, so it can be passed
to either family. Options are applied in order and the last one that
sets a field wins.
"""

from __future__ import annotations

__all__ = [
    "ConstantOption",
    "ExponentialOption",
    "MaxRetriesOption",
    "Option",
    "PolicyFieldOption",
    "with_clock",
    "with_initial_interval",
    "with_max_elapsed_time",
    "with_max_interval",
    "with_max_retries",
    "with_multiplier",
    "with_randomization_factor",
    "with_stop_after",
]

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from abackoff.clock import Clock
    from abackoff.policy import ConstantPolicy, ExponentialPolicy


class ConstantOption(ABC):
    """Optional parameter for constant backoff policies."""

    @abstractmethod
    def apply_to_constant(self, policy: ConstantPolicy) -> ConstantPolicy:
        """Return a copy of ``policy`` with this option applied.

        Args:
            policy: The policy to configure.

        Returns:
            The configured policy.
        """


class ExponentialOption(ABC):
    """Optional parameter for exponential backoff policies."""

    @abstractmethod
    def apply_to_exponential(self, policy: ExponentialPolicy) -> ExponentialPolicy:
        """Return a copy of ``policy`` with this option applied.

        Args:
            policy: The policy to configure.

        Returns:
            The configured policy.
        """


class Option(ConstantOption, ExponentialOption):
    """Optional parameter accepted by both policy families."""


@dataclass(frozen=True)
class MaxRetriesOption(Option):
    """Option setting the maximum number of retries.

    Args:
        max_retries: The maximum number of retries (0 means unlimited).
    """

    max_retries: int

    def apply_to_constant(self, policy: ConstantPolicy) -> ConstantPolicy:
        return replace(policy, max_retries=self.max_retries)

    def apply_to_exponential(self, policy: ExponentialPolicy) -> ExponentialPolicy:
        return replace(policy, max_retries=self.max_retries)


@dataclass(frozen=True)
class PolicyFieldOption(ExponentialOption):
    """Option setting a single field of an exponential policy.

    Args:
        name: The name of the ``ExponentialPolicy`` field.
        value: The new value of the field.
    """

    name: str
    value: Any

    def apply_to_exponential(self, policy: ExponentialPolicy) -> ExponentialPolicy:
        return replace(policy, **{self.name: self.value})


def with_max_retries(max_retries: int) -> Option:
    """Limit the number of retries.

    This option is accepted by both constant and exponential policies.

    Args:
        max_retries: The maximum number of retries. 0 means unlimited.

    Returns:
        The option.

    Example:
        ```pycon
        >>> from abackoff import constant_durations, with_max_retries
        >>> list(constant_durations(1.0, with_max_retries(2))())
        [(0, 1.0), (1, 1.0)]

        ```
    """
    return MaxRetriesOption(max_retries)


def with_initial_interval(interval: float) -> ExponentialOption:
    """Set the delay in seconds before the first retry.

    Args:
        interval: The initial interval in seconds.

    Returns:
        The option.
    """
    return PolicyFieldOption("initial_interval", interval)


def with_randomization_factor(factor: float) -> ExponentialOption:
    """Set the jitter width as a proportion of the current interval.

    A factor of 0 disables jitter, which makes the sequence of delays
    deterministic.

    Args:
        factor: The randomization factor.

    Returns:
        The option.
    """
    return PolicyFieldOption("randomization_factor", factor)


def with_multiplier(multiplier: float) -> ExponentialOption:
    """Set the growth factor applied to the interval after each retry.

    Args:
        multiplier: The multiplier.

    Returns:
        The option.
    """
    return PolicyFieldOption("multiplier", multiplier)


def with_max_interval(interval: float) -> ExponentialOption:
    """Set the ceiling in seconds on a single delay.

    Args:
        interval: The maximum interval in seconds. A value <= 0 means
            no ceiling.

    Returns:
        The option.
    """
    return PolicyFieldOption("max_interval", interval)


def with_max_elapsed_time(seconds: float) -> ExponentialOption:
    """Set the total time budget, measured from the start of the
    iteration.

    Args:
        seconds: The time budget in seconds. 0 disables the budget.

    Returns:
        The option.
    """
    return PolicyFieldOption("max_elapsed_time", seconds)


def with_stop_after(seconds: float | None) -> ExponentialOption:
    """Set an alternate time budget.

    Unlike ``with_max_elapsed_time``, the upcoming delay is not counted:
    retrying stops once the elapsed time reaches ``seconds``.

    Args:
        seconds: The time budget in seconds, or ``None`` to disable it.

    Returns:
        The option.
    """
    return PolicyFieldOption("stop_after", seconds)


def with_clock(clock: Clock) -> ExponentialOption:
    """Set the clock used to measure elapsed time.

    Args:
        clock: The time source.

    Returns:
        The option.
    """
    return PolicyFieldOption("clock", clock)
