r"""abackoff - Retry loops driven by backoff policies.

This package turns a backoff policy into a lazy, cancellable sequence
of retry attempts that can be consumed with a plain ``for`` loop. The
loop body performs the operation and ``break``s on success; the
iterator takes care of waiting between attempts.

Key Features:
    - Constant policies: never retry, retry without delay, or retry with
      a fixed delay
    - Exponential policies with jitter, a delay ceiling and time budgets
    - Retry limits shared by both policy families
    - Cancellation of pending waits with ``threading.Event`` or
      ``asyncio.Event``
    - Duration iterators that report delays without waiting
    - Injectable clock for deterministic tests

Example:
    ```pycon
    >>> from abackoff import exponential, with_initial_interval, with_max_retries
    >>> backoff = exponential(with_initial_interval(0.5), with_max_retries(5))
    >>> for attempt in backoff():  # doctest: +SKIP
    ...     if try_operation():
    ...         break
    ...

    ```
"""

from __future__ import annotations

__all__ = [
    "AsyncBackoff",
    "Backoff",
    "BackoffDurations",
    "Clock",
    "ConstantOption",
    "ConstantPolicy",
    "ExponentialOption",
    "ExponentialPolicy",
    "Option",
    "SystemClock",
    "__version__",
    "constant",
    "constant_async",
    "constant_durations",
    "exponential",
    "exponential_async",
    "exponential_durations",
    "with_clock",
    "with_initial_interval",
    "with_max_elapsed_time",
    "with_max_interval",
    "with_max_retries",
    "with_multiplier",
    "with_randomization_factor",
    "with_stop_after",
]

from importlib.metadata import PackageNotFoundError, version

from abackoff.attempts import Backoff, constant, exponential
from abackoff.attempts_async import AsyncBackoff, constant_async, exponential_async
from abackoff.clock import Clock, SystemClock
from abackoff.core.options import (
    ConstantOption,
    ExponentialOption,
    Option,
    with_clock,
    with_initial_interval,
    with_max_elapsed_time,
    with_max_interval,
    with_max_retries,
    with_multiplier,
    with_randomization_factor,
    with_stop_after,
)
from abackoff.durations import BackoffDurations, constant_durations, exponential_durations
from abackoff.policy import ConstantPolicy, ExponentialPolicy

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
