"""Tests for the builtin step rules and generators."""

import copy
import dataclasses
import threading
from datetime import date, timedelta

import pytest

import pyoranges as pr


def test_successor_and_predecessor() -> None:
    """Test the unit step rules."""
    assert pr.successor(1) == 2
    assert pr.predecessor(1) == 0
    assert pr.successor(1.5) == 2.5


def test_offset_with_dates() -> None:
    """Test a step rule over non-numeric positions."""
    start = date(2024, 1, 1)
    rng = pr.SteppedRange(start, start + timedelta(days=21), pr.Offset(timedelta(days=7)))
    assert rng.collect() == (date(2024, 1, 1), date(2024, 1, 8), date(2024, 1, 15))


def test_scale() -> None:
    """Test the multiplicative step rule."""
    assert pr.Scale(3)(2) == 6
    assert pr.SteppedRange(64, 1, pr.Scale(0.5)).collect() == (64, 32, 16, 8, 4, 2)


def test_rules_are_frozen() -> None:
    """Test that stateless rules cannot be mutated."""
    with pytest.raises(dataclasses.FrozenInstanceError):
        pr.Offset(1).delta = 2  # type: ignore[misc]


def test_counter_state() -> None:
    """Test that the counter keeps its state on the instance."""
    gen = pr.Counter(start=-1, step=-1)
    assert [gen(), gen(), gen()] == [-1, -2, -3]
    assert gen.start == -4


def test_explicit_copy_duplicates_state() -> None:
    """Test that explicit copies of a stateful generator evolve independently."""
    gen = pr.Counter()
    gen()
    twin = pr.explicit_copy(gen)
    assert gen() == twin() == 1
    assert twin is not gen


def test_explicit_copy_keeps_functions() -> None:
    """Test that plain functions are copied by identity."""
    assert pr.explicit_copy(pr.successor) is pr.successor
    assert copy.deepcopy(pr.Offset(2)) == pr.Offset(2)


def test_owned_copy_duplicates_copyable_callables() -> None:
    """Test that callable objects which can be deep-copied get their own state."""
    gen = pr.Counter()
    twin = pr.owned_copy(gen)
    assert twin is not gen
    assert gen() == twin() == 0


def test_owned_copy_keeps_uncopyable_callables() -> None:
    """Test that callables which cannot be deep-copied are returned as is."""
    next_square = (x * x for x in range(3)).__next__
    assert pr.owned_copy(next_square) is next_square


class _Guarded:
    """Callable object holding a lock."""

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.calls = 0

    def __call__(self) -> int:
        with self.lock:
            self.calls += 1
            return self.calls


def test_owned_copy_keeps_lock_holding_objects() -> None:
    """Test that a callable object holding a lock is kept by reference."""
    gen = _Guarded()
    with pytest.raises(TypeError):
        copy.deepcopy(gen)
    assert pr.owned_copy(gen) is gen


def test_operator_protocols() -> None:
    """Test that only the operator protocols used by the builtin rules are exported."""
    from pyoranges import _core

    assert {"SupportsAdd", "SupportsSub", "SupportsMul"} <= set(_core.__all__)
    assert "SupportsDunderLT" not in _core.__all__
