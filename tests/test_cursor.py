"""Tests for the free cursor functions."""

import pyoranges as pr


def _drive[T](rng: pr.Range[T]) -> list[T]:
    first, last = pr.begin(rng), pr.end(rng)
    out: list[T] = []
    while not pr.equals(first, last):
        out.append(pr.dereference(first))
        pr.advance(first)
    return out


def test_drive_stepped_range() -> None:
    """Test the manual pull loop over a stepped range."""
    assert _drive(pr.SteppedRange(0, 5)) == [0, 1, 2, 3, 4]


def test_drive_generative_range() -> None:
    """Test the manual pull loop over a generative range."""
    assert _drive(pr.GenerativeRange(3, pr.Counter())) == [0, 1, 2]


def test_advance_and_return_prior() -> None:
    """Test post-increment through the free function."""
    first = pr.begin(pr.GenerativeRange(3, pr.Counter()))
    prior = pr.advance_and_return_prior(first)
    assert pr.dereference(prior) == 0
    assert pr.dereference(first) == 1


def test_less_than() -> None:
    """Test ordering through the free function."""
    rng = pr.SteppedRange(0, 2)
    assert pr.less_than(pr.begin(rng), pr.end(rng))
    assert not pr.less_than(pr.end(rng), pr.begin(rng))
    generated = pr.GenerativeRange(2, pr.Counter())
    assert pr.less_than(pr.begin(generated), pr.end(generated))


def test_is_empty() -> None:
    """Test emptiness through the free function."""
    assert pr.is_empty(pr.SteppedRange(3, 3))
    assert not pr.is_empty(pr.SteppedRange(3, 4))
    assert pr.is_empty(pr.GenerativeRange(0, pr.Counter()))
    assert not pr.is_empty(pr.GenerativeRange(1, pr.Counter()))


def test_traverse_with_int_bound() -> None:
    """Test that a generative traversal accepts a plain integer as end bound."""
    first = pr.GenerativeIterator(pr.Counter(start=3))
    assert list(pr.traverse(first, 2)) == [3, 4]
    assert first.count() == 2


def test_traverse_consumes_first() -> None:
    """Test that traverse advances the given cursor in place."""
    first = pr.PositionIterator(0)
    assert list(pr.traverse(first, pr.PositionIterator(3))) == [0, 1, 2]
    assert first.current() == 3
