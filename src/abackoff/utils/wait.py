r"""Cancellable waiting between retry attempts.

This module provides the blocking and asyncio waits used by the
attempt iterators. A wait ends early when its cancellation event is
set.
"""

from __future__ import annotations

__all__ = ["wait", "wait_async"]

import asyncio
import logging
import time
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import threading

logger: logging.Logger = logging.getLogger(__name__)


def wait(delay: float, cancel: threading.Event | None = None) -> bool:
    """Block the calling thread for ``delay`` seconds.

    Args:
        delay: The time to wait in seconds.
        cancel: Optional event that ends the wait when set.

    Returns:
        ``True`` if the wait was cancelled, otherwise ``False``.

    Example:
        ```pycon
        >>> import threading
        >>> from abackoff.utils.wait import wait
        >>> wait(0.0)
        False
        >>> event = threading.Event()
        >>> event.set()
        >>> wait(10.0, event)
        True

        ```
    """
    if cancel is None:
        if delay > 0:
            time.sleep(delay)
        return False
    if cancel.wait(delay):
        logger.debug("Wait cancelled")
        return True
    return False


async def wait_async(delay: float, cancel: asyncio.Event | None = None) -> bool:
    """Suspend the calling task for ``delay`` seconds.

    Args:
        delay: The time to wait in seconds.
        cancel: Optional event that ends the wait when set.

    Returns:
        ``True`` if the wait was cancelled, otherwise ``False``.
    """
    if cancel is None:
        await asyncio.sleep(delay)
        return False
    if cancel.is_set():
        logger.debug("Wait cancelled")
        return True
    if delay <= 0:
        await asyncio.sleep(0)
        return cancel.is_set()
    try:
        await asyncio.wait_for(cancel.wait(), timeout=delay)
    except asyncio.TimeoutError:
        return cancel.is_set()
    logger.debug("Wait cancelled")
    return True
