from __future__ import annotations

import copy
import itertools
from collections.abc import Callable, Iterator
from typing import Self

import cytoolz as cz
import more_itertools as mit

from ._core import Pipeable, StepRule, callable_repr
from ._cursor import traverse
from ._rules import owned_copy, successor


class PositionIterator[T]:
    """Cursor over a stepped value progression. Only stores the current position and its step rule.

    The step rule is deep-copied on construction, and again on every copy of the iterator:
    copies evolve independently, unless the rule reaches shared state by reference (closures for example),
    or cannot be deep-copied at all (see `owned_copy`).

    Equality and ordering only look at the current position, never at the step rule.

    Args:
        value (T): Initial position. Mandatory, there is no default position.
        step (StepRule[T]): Function returning the position that follows its argument. Defaults to `successor`.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> it = pr.PositionIterator(1, pr.Scale(3))
    >>> it.current()
    1
    >>> it.advance().current()
    3
    >>> prior = it.advance_copy()
    >>> prior.current(), it.current()
    (3, 9)
    >>> it == pr.PositionIterator(9)
    True

    ```
    """

    __slots__ = ("_step", "_value")

    def __init__(self, value: T, step: StepRule[T] = successor) -> None:
        self._value = value
        self._step = owned_copy(step)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._value!r}, step={callable_repr(self._step)})"

    def __copy__(self) -> Self:
        return self.__class__(self._value, self._step)

    def current(self) -> T:
        """Read the current position. Never invokes the step rule."""
        return self._value

    def advance(self) -> Self:
        """Apply the step rule to the current position (pre-increment).

        Errors raised by the step rule propagate unchanged, and the position is left untouched.

        Returns:
            Self: The iterator itself, now on the next position.
        """
        self._value = self._step(self._value)
        return self

    def advance_copy(self) -> Self:
        """Advance the iterator, and return a copy of it as it was before (post-increment).

        Returns:
            Self: An independent iterator on the previous position.
        """
        prior = copy.copy(self)
        self.advance()
        return prior

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PositionIterator):
            return NotImplemented
        return bool(self._value == other._value)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, PositionIterator):
            return NotImplemented
        return bool(self._value != other._value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PositionIterator):
            return NotImplemented
        return bool(self._value < other._value)


class SteppedRange[T](Pipeable):
    """Lazy sequence of positions `[begin, end)`, moving from one to the next with an arbitrary step rule.

    Nothing is materialized: each call to `begin()` or `end()` builds a new `PositionIterator`,
    carrying its own copy of the step rule. The range itself is never mutated, and can be iterated many times.

    **Warning** ⚠️
        Iteration stops when the step rule lands *exactly* on **end**.
        A rule which steps over it, or never reaches it, creates an infinite iterator.
        Use `SteppedRange.take()` or `SteppedRange.take_while()` to bound the traversal if necessary.

    Args:
        begin (T): First position, included.
        end (T): Position at which iteration stops, excluded.
        step (StepRule[T]): Function returning the position that follows its argument. Defaults to `successor`.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> pr.SteppedRange(0, 5).collect()
    (0, 1, 2, 3, 4)
    >>> [x for x in pr.SteppedRange("a", "aaaa", lambda s: s + "a")]
    ['a', 'aa', 'aaa']
    >>> pr.SteppedRange(3, 3).empty()
    True

    ```
    """

    __slots__ = ("_begin", "_end", "_step")

    def __init__(self, begin: T, end: T, step: StepRule[T] = successor) -> None:
        self._begin = begin
        self._end = end
        self._step = owned_copy(step)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._begin!r}, {self._end!r}, step={callable_repr(self._step)})"

    def __iter__(self) -> Iterator[T]:
        return traverse(self.begin(), self.end())

    def __bool__(self) -> bool:
        return not self.empty()

    def begin(self) -> PositionIterator[T]:
        """Build a new iterator on the first position.

        Example:
        ```python
        >>> import pyoranges as pr
        >>> r = pr.SteppedRange(0, 10, pr.Offset(5))
        >>> r.begin()
        PositionIterator(0, step=Offset(delta=5))
        >>> r.begin().advance() == r.begin()
        False

        ```
        """
        return PositionIterator(self._begin, self._step)

    def cbegin(self) -> PositionIterator[T]:
        """Same as `SteppedRange.begin()`."""
        return self.begin()

    def end(self) -> PositionIterator[T]:
        """Build a new iterator on the end position."""
        return PositionIterator(self._end, self._step)

    def cend(self) -> PositionIterator[T]:
        """Same as `SteppedRange.end()`."""
        return self.end()

    def empty(self) -> bool:
        """Check if a fresh begin iterator is equal to a fresh end iterator.

        Example:
        ```python
        >>> import pyoranges as pr
        >>> pr.SteppedRange(3, 3).empty()
        True
        >>> pr.SteppedRange(3, 4).empty()
        False

        ```
        """
        return self.begin() == self.end()

    def collect(self) -> tuple[T, ...]:
        """Traverse the whole range, and collect the positions into a `tuple`.

        Example:
        ```python
        >>> import pyoranges as pr
        >>> pr.SteppedRange(10, 0, pr.Offset(-3)).take(3)
        (10, 7, 4)
        >>> pr.SteppedRange(9, 0, pr.Offset(-3)).collect()
        (9, 6, 3)

        ```
        """
        return tuple(self)

    def take(self, n: int) -> tuple[T, ...]:
        """Collect at most the first **n** positions.

        Safe to call on a range whose step rule never reaches the end.

        Args:
            n (int): Maximum number of positions to collect.

        Returns:
            tuple[T, ...]: The collected positions.

        Raises:
            ValueError: If **n** is negative.
        """
        if n < 0:
            msg = f"Cannot take a negative number of elements, got {n}"
            raise ValueError(msg)
        return tuple(cz.itertoolz.take(n, self))

    def take_while(self, predicate: Callable[[T], bool]) -> Iterator[T]:
        """Lazily yield positions while **predicate** holds, or until the end is reached.

        This bounds the traversal with an explicit condition, instead of relying on exact equality with the end.

        Args:
            predicate (Callable[[T], bool]): Function returning `True` while positions should be yielded.

        Returns:
            Iterator[T]: The positions satisfying **predicate**.

        Example:
        ```python
        >>> import pyoranges as pr
        >>> # stepping by 3 never lands on 10
        >>> list(pr.SteppedRange(0, 10, pr.Offset(3)).take_while(lambda x: x < 10))
        [0, 3, 6, 9]

        ```
        """
        return itertools.takewhile(predicate, self)

    def length(self) -> int:
        """Count the positions of the range, by traversing it.

        Example:
        ```python
        >>> import pyoranges as pr
        >>> pr.SteppedRange(1, 1024, pr.Scale(2)).length()
        10

        ```
        """
        return mit.ilen(self)
