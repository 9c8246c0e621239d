r"""Unit tests for the attempt iterators."""

from __future__ import annotations

import threading
import time
from typing import TYPE_CHECKING
from unittest.mock import Mock, call

import pytest
from coola.equality import objects_are_equal

from abackoff import (
    Backoff,
    constant,
    exponential,
    with_clock,
    with_initial_interval,
    with_max_elapsed_time,
    with_max_retries,
    with_multiplier,
    with_randomization_factor,
)
from abackoff.backoff import BaseBackoff

if TYPE_CHECKING:
    from tests.conftest import FakeClock


def make_strategy(*delays: float | None) -> Mock:
    backoff = Mock(spec=BaseBackoff)
    backoff.next_backoff.side_effect = list(delays)
    return backoff


#############################
#     Tests for Backoff     #
#############################


def test_backoff_is_lazy() -> None:
    """Test that the strategy is built on the first iteration, not
    before."""
    factory = Mock(return_value=make_strategy(None))
    iterator = Backoff(factory)()
    factory.assert_not_called()
    assert list(iterator) == [0]
    factory.assert_called_once_with()


def test_backoff_creates_fresh_strategy_per_iteration() -> None:
    """Test that each iteration builds its own strategy."""
    factory = Mock(side_effect=[make_strategy(0.0, None), make_strategy(0.0, None)])
    backoff = Backoff(factory)
    assert list(backoff()) == [0, 1]
    assert list(backoff()) == [0, 1]
    assert factory.call_count == 2


def test_backoff_stops_when_strategy_stops(mock_sleep: Mock) -> None:
    """Test that the iteration ends when the strategy returns None."""
    strategy = make_strategy(1.0, 2.0, None)
    assert list(Backoff(lambda: strategy)()) == [0, 1, 2]
    assert mock_sleep.call_args_list == [call(1.0), call(2.0)]


def test_backoff_break_does_not_wait(mock_sleep: Mock) -> None:
    """Test that leaving the loop stops the iteration without waiting."""
    strategy = make_strategy(1.0, 1.0, 1.0)
    for attempt in Backoff(lambda: strategy)():
        if attempt == 1:
            break
    assert mock_sleep.call_args_list == [call(1.0)]
    assert strategy.next_backoff.call_count == 1


def test_backoff_cancel_during_wait() -> None:
    """Test that a cancelled wait ends the iteration without yielding
    the next attempt."""
    strategy = make_strategy(1.0, 1.0, 1.0)
    cancel = Mock(spec=threading.Event)
    cancel.is_set.return_value = False
    cancel.wait.side_effect = [False, True]
    assert list(Backoff(lambda: strategy)(cancel)) == [0, 1]
    assert cancel.wait.call_args_list == [call(1.0), call(1.0)]


def test_backoff_cancel_before_start() -> None:
    """Test that the first attempt is always yielded, but no delay is
    computed once cancelled."""
    strategy = make_strategy(1.0)
    cancel = threading.Event()
    cancel.set()
    assert list(Backoff(lambda: strategy)(cancel)) == [0]
    strategy.next_backoff.assert_not_called()


def test_backoff_cancel_between_attempts(mock_sleep: Mock) -> None:
    """Test that cancelling in the loop body ends the iteration."""
    strategy = make_strategy(0.0, 0.0, 0.0, 0.0)
    cancel = threading.Event()
    seen = []
    for attempt in Backoff(lambda: strategy)(cancel):
        seen.append(attempt)
        if attempt == 2:
            cancel.set()
    assert seen == [0, 1, 2]
    assert strategy.next_backoff.call_count == 2


def test_backoff_propagates_loop_body_exception() -> None:
    """Test that exceptions raised in the loop body propagate."""
    strategy = make_strategy(0.0, 0.0)
    with pytest.raises(RuntimeError, match=r"boom"):
        for _ in Backoff(lambda: strategy)():
            msg = "boom"
            raise RuntimeError(msg)


##############################
#     Tests for constant     #
##############################


@pytest.mark.parametrize("max_retries", [0, 3])
def test_constant_negative_interval(max_retries: int, mock_sleep: Mock) -> None:
    """Test that a negative interval yields only the first attempt."""
    assert list(constant(-1, with_max_retries(max_retries))()) == [0]
    mock_sleep.assert_not_called()


def test_constant_negative_interval_break(mock_sleep: Mock) -> None:
    """Test that breaking on the first attempt of a never-retry policy works."""
    seen = []
    for attempt in constant(-1, with_max_retries(3))():
        seen.append(attempt)
        break
    assert seen == [0]


def test_constant_zero_interval(mock_sleep: Mock) -> None:
    """Test that a zero interval retries without sleeping."""
    assert list(constant(0, with_max_retries(4))()) == [0, 1, 2, 3, 4]
    mock_sleep.assert_not_called()


def test_constant_zero_interval_unbounded(mock_sleep: Mock) -> None:
    """Test that a zero interval without max_retries never stops on its own."""
    seen = []
    for attempt in constant(0)():
        seen.append(attempt)
        if attempt == 99:
            break
    assert seen == list(range(100))


def test_constant_positive_interval(mock_sleep: Mock) -> None:
    """Test that a positive interval sleeps between attempts."""
    assert list(constant(0.2, with_max_retries(5))()) == [0, 1, 2, 3, 4, 5]
    assert mock_sleep.call_args_list == [call(0.2)] * 5


def test_constant_reusable(mock_sleep: Mock) -> None:
    """Test that the same factory can be iterated several times."""
    backoff = constant(0.2, with_max_retries(2))
    assert list(backoff()) == [0, 1, 2]
    assert list(backoff()) == [0, 1, 2]
    assert mock_sleep.call_count == 4


def test_constant_invalid_option() -> None:
    """Test that an exponential-only option is rejected."""
    with pytest.raises(TypeError, match=r"cannot be applied to a constant backoff policy"):
        constant(1.0, with_initial_interval(1.0))  # type: ignore[arg-type]


def test_constant_timing() -> None:
    """Test that attempt k arrives after about k intervals."""
    unit = 0.05
    start = time.monotonic()
    elapsed = [time.monotonic() - start for _ in constant(unit, with_max_retries(3))()]
    assert len(elapsed) == 4
    for k, seconds in enumerate(elapsed):
        assert seconds >= k * unit - 0.01
        assert seconds < k * unit + 0.5


def test_constant_cancel_with_timer() -> None:
    """Test that setting the event interrupts the pending wait."""
    unit = 0.1
    cancel = threading.Event()
    timer = threading.Timer(3 * unit, cancel.set)
    start = time.monotonic()
    timer.start()
    try:
        seen = list(constant(2 * unit, with_max_retries(5))(cancel))
    finally:
        timer.cancel()
    elapsed = time.monotonic() - start
    assert seen == [0, 1]
    assert elapsed >= 3 * unit - 0.01
    assert elapsed < 4 * unit + 0.5


#################################
#     Tests for exponential     #
#################################


def test_exponential_without_jitter(mock_sleep: Mock) -> None:
    """Test the sleeps of an exponential policy without jitter."""
    backoff = exponential(
        with_initial_interval(0.1),
        with_randomization_factor(0),
        with_max_retries(7),
    )
    assert list(backoff()) == [0, 1, 2, 3, 4, 5, 6, 7]
    delays = [c.args[0] for c in mock_sleep.call_args_list]
    assert delays == pytest.approx([0.1, 0.15, 0.225, 0.3375, 0.50625, 0.759375, 1.1390625])


def test_exponential_max_elapsed_time(mock_sleep: Mock, fake_clock: FakeClock) -> None:
    """Test that the time budget ends the iteration."""
    mock_sleep.side_effect = fake_clock.advance
    backoff = exponential(
        with_initial_interval(1.0),
        with_randomization_factor(0),
        with_multiplier(2.0),
        with_max_elapsed_time(10.0),
        with_clock(fake_clock),
    )
    assert list(backoff()) == [0, 1, 2, 3]
    assert objects_are_equal(
        [c.args[0] for c in mock_sleep.call_args_list], [1.0, 2.0, 4.0]
    )


def test_exponential_idempotent(mock_sleep: Mock, fake_clock: FakeClock) -> None:
    """Test that two iterations from the same factory behave the same."""
    mock_sleep.side_effect = fake_clock.advance
    backoff = exponential(
        with_initial_interval(1.0),
        with_randomization_factor(0),
        with_max_elapsed_time(10.0),
        with_clock(fake_clock),
    )
    assert list(backoff()) == [0, 1, 2, 3, 4]
    assert list(backoff()) == [0, 1, 2, 3, 4]
    assert mock_sleep.call_count == 8
    assert mock_sleep.call_args_list[:4] == mock_sleep.call_args_list[4:]


def test_exponential_invalid_option() -> None:
    """Test that an object that is not an option is rejected."""
    with pytest.raises(TypeError, match=r"cannot be applied to an exponential backoff policy"):
        exponential(object())  # type: ignore[arg-type]
