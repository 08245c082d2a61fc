"""Free functions driving the pull-based cursor protocol shared by every range of the package.

A traversal reads as:

```python
>>> import pyoranges as pr
>>> r = pr.SteppedRange(0, 3)
>>> first, last = pr.begin(r), pr.end(r)
>>> while not pr.equals(first, last):
...     print(pr.dereference(first))
...     _ = pr.advance(first)
0
1
2

```
"""

from __future__ import annotations

from collections.abc import Iterator

from ._core import Cursor, Range


def begin[T](rng: Range[T]) -> Cursor[T]:
    """Return a fresh cursor positioned on the first element of **rng**."""
    return rng.begin()


def end[T](rng: Range[T]) -> Cursor[T]:
    """Return a fresh cursor holding the termination criterion of **rng**."""
    return rng.end()


def dereference[T](cursor: Cursor[T]) -> T:
    """Read the current element of **cursor**, without advancing it."""
    return cursor.current()


def advance[C: Cursor[object]](cursor: C) -> C:
    """Move **cursor** to the next element, and return it."""
    return cursor.advance()


def advance_and_return_prior[C: Cursor[object]](cursor: C) -> C:
    """Move **cursor** to the next element, and return a copy of it as it was before.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> it = pr.SteppedRange(0, 10).begin()
    >>> prior = pr.advance_and_return_prior(it)
    >>> pr.dereference(prior), pr.dereference(it)
    (0, 1)

    ```
    """
    return cursor.advance_copy()


def equals(a: object, b: object) -> bool:
    """Compare two cursors with `==`."""
    return a == b


def less_than(a: object, b: object) -> bool:
    """Compare two cursors with `<`."""
    return a < b  # type: ignore[operator]


def is_empty(rng: Range[object]) -> bool:
    """Check if **rng** has no element.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> pr.is_empty(pr.SteppedRange(3, 3)), pr.is_empty(pr.SteppedRange(3, 4))
    (True, False)

    ```
    """
    return rng.empty()


def traverse[T](first: Cursor[T], last: object) -> Iterator[T]:
    """Lazily yield the elements between **first** (included) and **last** (excluded).

    **first** is advanced in place. Iteration stops as soon as `first == last`:

    - for stepped cursors this requires the step rule to land exactly on the end value,
    - otherwise the iteration never stops.

    Args:
        first (Cursor[T]): Cursor on the first element. Consumed by the traversal.
        last (object): End cursor, or any bound **first** can be compared to.

    Returns:
        Iterator[T]: The traversed elements.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> r = pr.GenerativeRange(3, pr.Counter(start=5))
    >>> list(pr.traverse(r.begin(), r.end()))
    [5, 6, 7]

    ```
    """
    while first != last:
        yield first.current()
        first.advance()
