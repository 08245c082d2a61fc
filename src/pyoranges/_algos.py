"""Higher-order traversal helpers, working on any iterable (ranges included)."""

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterable, Iterator, Sized

import cytoolz as cz
import more_itertools as mit

from ._results import NONE, Option, Some

_MISSING = object()


def for_each_adjacent[T](
    iterable: Iterable[T], func: Callable[[T, T], object], n: int | None = None
) -> None:
    """Call **func** on each pair of adjacent elements, the later one first.

    Args:
        iterable (Iterable[T]): Elements to walk through.
        func (Callable[[T, T], object]): Function called as `func(leader, follower)`.
        n (int | None): Maximum number of pairs to visit. Defaults to all of them.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> pr.for_each_adjacent(pr.SteppedRange(1, 16, pr.Scale(2)), lambda a, b: print(a - b))
    1
    2
    4
    >>> pr.for_each_adjacent([1, 5, 6, 10], lambda a, b: print(a, b), n=1)
    5 1

    ```
    """
    for follower, leader in itertools.islice(cz.itertoolz.sliding_window(2, iterable), n):
        func(leader, follower)


def for_each_both[T, U](
    first: Iterable[T],
    second: Iterable[U],
    func: Callable[[T, U], object],
    n: int | None = None,
) -> None:
    """Call **func** on elements of **first** and **second** taken pairwise, until either is exhausted.

    Args:
        first (Iterable[T]): Elements passed as first argument.
        second (Iterable[U]): Elements passed as second argument.
        func (Callable[[T, U], object]): Function to call.
        n (int | None): Maximum number of calls. Defaults to no maximum.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> pr.for_each_both("abc", pr.SteppedRange(0, 10), lambda c, i: print(c * i))
    <BLANKLINE>
    b
    cc

    ```
    """
    for a, b in itertools.islice(zip(first, second), n):
        func(a, b)


def for_each_all(func: Callable[..., object], *iterables: Iterable[object]) -> None:
    """Call **func** with one element of each iterable, up to the shortest of them.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> pr.for_each_all(lambda *xs: print(sum(xs)), [1, 2], (10, 20, 30), pr.SteppedRange(100, 200))
    111
    123

    ```
    """
    for items in zip(*iterables):
        func(*items)


def transform_if[T, U](
    iterable: Iterable[T], predicate: Callable[[T], bool], func: Callable[[T], U]
) -> Iterator[U]:
    """Lazily apply **func** to the elements satisfying **predicate**, dropping the others.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> list(pr.transform_if(pr.SteppedRange(0, 6), lambda x: x % 2 == 0, str))
    ['0', '2', '4']

    ```
    """
    return map(func, filter(predicate, iterable))


def contains[T](iterable: Iterable[T], value: T) -> bool:
    """Check if any element of **iterable** is equal to **value**. Stops at the first match."""
    return any(item == value for item in iterable)


def last[T](iterable: Iterable[T]) -> Option[T]:
    """Return the last element of **iterable**, or `NONE` when it is empty.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> pr.last(pr.SteppedRange(0, 5))
    Some(value=4)
    >>> pr.last(pr.SteppedRange(0, 0))
    NONE

    ```
    """
    item = mit.last(iterable, _MISSING)
    if item is _MISSING:
        return NONE
    return Some(item)  # type: ignore[arg-type]


def min_size(*collections: Sized) -> int:
    """Return the smallest `len()` among **collections**.

    Raises:
        ValueError: If no collection is given.
    """
    return min(len(c) for c in collections)


def max_size(*collections: Sized) -> int:
    """Return the largest `len()` among **collections**.

    Raises:
        ValueError: If no collection is given.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> pr.max_size([1, 2], "abcd", pr.GenerativeRange(3, pr.Counter()))
    4

    ```
    """
    return max(len(c) for c in collections)
