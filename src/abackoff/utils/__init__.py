r"""Utility functions shared by the attempt iterators."""

from __future__ import annotations

__all__ = ["wait", "wait_async"]

from abackoff.utils.wait import wait, wait_async
