r"""Backoff strategies computing successive retry delays.

This package provides stateful backoff strategies: never retry, retry
without delay, retry with a constant delay, and exponential backoff
with jitter. ``MaxRetriesBackoff`` caps the number of retries of any
of them.
"""

from __future__ import annotations

__all__ = [
    "BaseBackoff",
    "ConstantBackoff",
    "ExponentialBackoff",
    "MaxRetriesBackoff",
    "StopBackoff",
    "ZeroBackoff",
]

from abackoff.backoff.base import BaseBackoff
from abackoff.backoff.constant import ConstantBackoff, StopBackoff, ZeroBackoff
from abackoff.backoff.exponential import ExponentialBackoff
from abackoff.backoff.limit import MaxRetriesBackoff
