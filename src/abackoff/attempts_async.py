r"""Asynchronous attempt iterators that wait between retries.

This module is the asyncio counterpart of ``abackoff.attempts``: the
iterators are async generators that suspend the calling task with
``asyncio.sleep`` and can be cancelled with an ``asyncio.Event``.
"""

from __future__ import annotations

__all__ = ["AsyncBackoff", "constant_async", "exponential_async"]

import logging
from typing import TYPE_CHECKING

from abackoff.policy import build_constant_policy, build_exponential_policy
from abackoff.utils.wait import wait_async

if TYPE_CHECKING:
    import asyncio
    from collections.abc import AsyncIterator, Callable

    from abackoff.backoff import BaseBackoff
    from abackoff.core.options import ConstantOption, ExponentialOption

logger: logging.Logger = logging.getLogger(__name__)


class AsyncBackoff:
    """Factory of asynchronous attempt iterators.

    Args:
        factory: Callable building a new backoff strategy.

    Example:
        ```pycon
        >>> import asyncio
        >>> from abackoff import constant_async, with_max_retries
        >>> async def main():
        ...     return [attempt async for attempt in constant_async(0, with_max_retries(2))()]
        ...
        >>> asyncio.run(main())
        [0, 1, 2]

        ```
    """

    def __init__(self, factory: Callable[[], BaseBackoff]) -> None:
        self._factory = factory

    def __call__(self, cancel: asyncio.Event | None = None) -> AsyncIterator[int]:
        """Create an asynchronous attempt iterator.

        Args:
            cancel: Optional event. Once it is set, the iterator stops
                at the next wait, or immediately if it is waiting.

        Returns:
            An asynchronous iterator over attempt numbers.
        """
        return self._iterate(cancel)

    async def _iterate(self, cancel: asyncio.Event | None) -> AsyncIterator[int]:
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
            if await wait_async(delay, cancel):
                logger.debug(f"Cancelled while waiting before retry {attempt + 1}")
                return
            attempt += 1

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(factory={self._factory!r})"


def constant_async(interval: float, *options: ConstantOption) -> AsyncBackoff:
    """Create asynchronous attempt iterators that wait a constant
    delay.

    See ``abackoff.constant`` for the meaning of ``interval``.

    Args:
        interval: The delay in seconds.
        *options: Options such as ``with_max_retries``.

    Returns:
        The asynchronous attempt iterator factory.

    Raises:
        TypeError: If an option does not apply to constant policies.
    """
    return AsyncBackoff(build_constant_policy(interval, *options).new)


def exponential_async(*options: ExponentialOption) -> AsyncBackoff:
    """Create asynchronous attempt iterators that wait an exponentially
    growing delay.

    Args:
        *options: Options such as ``with_initial_interval`` or
            ``with_max_retries``.

    Returns:
        The asynchronous attempt iterator factory.

    Raises:
        TypeError: If an option does not apply to exponential policies.
    """
    return AsyncBackoff(build_exponential_policy(*options).new)
