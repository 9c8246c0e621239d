from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import pytest

if TYPE_CHECKING:
    from collections.abc import Generator


class FakeClock:
    """Clock returning a manually controlled time."""

    def __init__(self, start: float = 0.0) -> None:
        self.time = start

    def now(self) -> float:
        return self.time

    def advance(self, seconds: float) -> None:
        self.time += seconds


@pytest.fixture
def mock_sleep() -> Generator[Mock, None, None]:
    """Patch time.sleep to make tests run faster."""
    with patch("abackoff.utils.wait.time.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def fake_clock() -> FakeClock:
    """Create a manually controlled clock starting at 0."""
    return FakeClock()
