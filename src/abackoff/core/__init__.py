r"""Configuration defaults and options for backoff policies."""

from __future__ import annotations

__all__ = [
    "DEFAULT_INITIAL_INTERVAL",
    "DEFAULT_MAX_ELAPSED_TIME",
    "DEFAULT_MAX_INTERVAL",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_MULTIPLIER",
    "DEFAULT_RANDOMIZATION_FACTOR",
    "MAX_BACKOFF_INTERVAL",
    "ConstantOption",
    "ExponentialOption",
    "Option",
    "with_clock",
    "with_initial_interval",
    "with_max_elapsed_time",
    "with_max_interval",
    "with_max_retries",
    "with_multiplier",
    "with_randomization_factor",
    "with_stop_after",
]

from abackoff.core.config import (
    DEFAULT_INITIAL_INTERVAL,
    DEFAULT_MAX_ELAPSED_TIME,
    DEFAULT_MAX_INTERVAL,
    DEFAULT_MAX_RETRIES,
    DEFAULT_MULTIPLIER,
    DEFAULT_RANDOMIZATION_FACTOR,
    MAX_BACKOFF_INTERVAL,
)
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
