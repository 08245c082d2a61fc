"""Tests for PositionIterator and SteppedRange."""

import copy
import threading
from dataclasses import dataclass, field

import pytest

import pyoranges as pr


@dataclass(slots=True)
class Accelerate:
    """Stateful step rule: each step is one larger than the previous one."""

    delta: int = 1

    def __call__(self, value: int) -> int:
        value += self.delta
        self.delta += 1
        return value


@dataclass(slots=True)
class LockedAccelerate:
    """Same as `Accelerate`, guarded by a lock, so it cannot be deep-copied."""

    delta: int = 1
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def __call__(self, value: int) -> int:
        with self.lock:
            value += self.delta
            self.delta += 1
            return value


class TestPositionIterator:
    """Cursor semantics of PositionIterator."""

    def test_current_does_not_step(self) -> None:
        """Test that reading the position never invokes the step rule."""
        calls: list[int] = []

        def _step(x: int) -> int:
            calls.append(x)
            return x + 1

        it = pr.PositionIterator(5, _step)
        assert it.current() == 5
        assert it.current() == 5
        assert calls == []

    def test_advance_returns_self(self) -> None:
        """Test pre-increment semantics."""
        it = pr.PositionIterator(0)
        assert it.advance() is it
        assert it.current() == 1

    def test_advance_copy_returns_prior(self) -> None:
        """Test post-increment semantics."""
        it = pr.PositionIterator(10, pr.predecessor)
        prior = it.advance_copy()
        assert prior.current() == 10
        assert it.current() == 9
        assert prior is not it

    def test_equality_ignores_step_rule(self) -> None:
        """Test that equality and ordering only compare positions."""
        assert pr.PositionIterator(3, pr.Scale(2)) == pr.PositionIterator(3)
        assert pr.PositionIterator(3) != pr.PositionIterator(4)
        assert pr.PositionIterator(3) < pr.PositionIterator(4)
        assert not pr.PositionIterator(4) < pr.PositionIterator(4)

    def test_equality_with_other_types(self) -> None:
        """Test that a position iterator is never equal to a bare value."""
        assert pr.PositionIterator(3) != 3
        with pytest.raises(TypeError):
            _ = pr.PositionIterator(3) < 4  # pyright: ignore[reportOperatorIssue]

    def test_copy_duplicates_step_state(self) -> None:
        """Test that copies evolve independently with a stateful step rule object."""
        it = pr.PositionIterator(0, Accelerate())
        it.advance()
        twin = copy.copy(it)
        assert it.advance().current() == 3
        assert twin.advance().current() == 3
        assert it.advance().current() == 6

    def test_closure_state_is_shared(self) -> None:
        """Test that copies of a closure-based step rule share its captured state."""
        delta = 0

        def _accelerate(x: int) -> int:
            nonlocal delta
            delta += 1
            return x + delta

        it = pr.PositionIterator(0, _accelerate)
        twin = copy.copy(it)
        assert it.advance().current() == 1
        assert twin.advance().current() == 2

    def test_uncopyable_step_rule_is_shared(self) -> None:
        """Test that a step rule which cannot be deep-copied is kept, and shared by copies."""
        rule = LockedAccelerate()
        it = pr.PositionIterator(0, rule)
        twin = copy.copy(it)
        assert it.advance().current() == 1
        assert twin.advance().current() == 2
        assert rule.delta == 3

    def test_step_errors_propagate(self) -> None:
        """Test that a failing step rule raises unchanged, and leaves the position untouched."""

        def _fail(_x: int) -> int:
            msg = "no next position"
            raise LookupError(msg)

        it = pr.PositionIterator(1, _fail)
        with pytest.raises(LookupError, match="no next position"):
            it.advance()
        assert it.current() == 1

    def test_repr(self) -> None:
        """Test the textual representation."""
        assert repr(pr.PositionIterator(2)) == "PositionIterator(2, step=successor)"


class TestSteppedRange:
    """Range semantics of SteppedRange."""

    def test_successor_traversal(self) -> None:
        """Test that the default step rule yields consecutive integers."""
        assert pr.SteppedRange(0, 5).collect() == (0, 1, 2, 3, 4)
        assert list(pr.SteppedRange(-2, 2)) == list(range(-2, 2))

    def test_doubling_traversal(self) -> None:
        """Test a multiplicative step rule."""
        assert list(pr.SteppedRange(1, 16, pr.Scale(2))) == [1, 2, 4, 8]

    def test_decrementing_traversal(self) -> None:
        """Test a decreasing progression."""
        assert list(pr.SteppedRange(3, -1, pr.predecessor)) == [3, 2, 1, 0]

    def test_empty(self) -> None:
        """Test emptiness, and its agreement with begin/end equality."""
        for begin, end in ((3, 3), (3, 4), (0, 10)):
            rng = pr.SteppedRange(begin, end)
            assert rng.empty() is (rng.begin() == rng.end())
        assert pr.SteppedRange(3, 3).empty()
        assert not pr.SteppedRange(3, 4).empty()
        assert not pr.SteppedRange(3, 3)
        assert list(pr.SteppedRange(3, 3)) == []

    def test_begin_end_are_fresh(self) -> None:
        """Test that iterators never share state with the range or each other."""
        rng = pr.SteppedRange(0, 10)
        first = rng.begin()
        first.advance().advance()
        assert first.current() == 2
        assert rng.begin().current() == 0
        assert rng.cbegin() == rng.begin()
        assert rng.end().current() == 10
        assert rng.cend() == rng.end()

    def test_reiterable(self) -> None:
        """Test that a range can be traversed many times."""
        rng = pr.SteppedRange(0, 3)
        assert list(rng) == list(rng) == [0, 1, 2]

    def test_stateful_step_restarts_each_traversal(self) -> None:
        """Test that each traversal uses a fresh copy of a stateful step rule."""
        rule = Accelerate()
        rng = pr.SteppedRange(0, 10, rule)
        assert rng.collect() == (0, 1, 3, 6)
        assert rng.collect() == (0, 1, 3, 6)
        assert rule.delta == 1

    def test_uncopyable_step_rule_continues(self) -> None:
        """Test that a lock-holding step rule is accepted, and keeps its state across traversals."""
        rule = LockedAccelerate()
        rng = pr.SteppedRange(0, 3, rule)
        assert rng.collect() == (0, 1)
        assert rule.delta == 3
        assert rng.collect() == (0,)

    def test_non_numeric_positions(self) -> None:
        """Test positions of any type supporting equality."""
        rng = pr.SteppedRange((0, 0), (2, 2), lambda p: (p[0] + 1, p[1] + 1))
        assert rng.collect() == ((0, 0), (1, 1))

    def test_take_bounds_unterminated_range(self) -> None:
        """Test that take() stops on a range whose step rule never reaches the end."""
        rng = pr.SteppedRange(0, 10, pr.Offset(3))
        assert rng.take(6) == (0, 3, 6, 9, 12, 15)
        assert rng.take(0) == ()
        with pytest.raises(ValueError, match="negative"):
            rng.take(-1)

    def test_take_while(self) -> None:
        """Test the predicate-based termination."""
        rng = pr.SteppedRange(1, 0, pr.Scale(3))
        assert list(rng.take_while(lambda x: x < 100)) == [1, 3, 9, 27, 81]
        assert list(pr.SteppedRange(0, 3).take_while(lambda _: True)) == [0, 1, 2]

    def test_length(self) -> None:
        """Test counting by traversal."""
        assert pr.SteppedRange(0, 100).length() == 100
        assert pr.SteppedRange(5, 5).length() == 0

    def test_into(self) -> None:
        """Test piping a range into a function."""
        assert pr.SteppedRange(0, 4).into(sum) == 6

    def test_repr(self) -> None:
        """Test the textual representation."""
        assert (
            repr(pr.SteppedRange(1, 16, pr.Scale(2)))
            == "SteppedRange(1, 16, step=Scale(factor=2))"
        )
