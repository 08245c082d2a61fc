from __future__ import annotations

import copy
from collections.abc import Iterator
from typing import Self

import cytoolz as cz

from ._core import GeneratorFn, Pipeable, callable_repr
from ._cursor import traverse
from ._results import NONE, Option, Some
from ._rules import owned_copy


class SentinelAccessError(RuntimeError):
    """Raised when reading or advancing a sentinel `GenerativeIterator`, which holds no generator."""


class GenerativeIterator[T]:
    """Cursor over the values returned by repeated calls to an argumentless, possibly stateful, function.

    Only the current value is stored, so a generated sequence can be walked without being materialized.

    The iterator has two modes, fixed at construction:

    - **value mode**, built from a generator: the generator is copied with `owned_copy`, then called once to produce the current value.
      Each `advance()` calls it again, and increments the iteration count (starting at 0).
    - **sentinel mode**, built from an `int` limit: holds no generator and no value,
      only the number of iterations at which a traversal stops.

    Comparisons are asymmetric: `lhs == rhs` holds iff the count of **lhs** equals the limit of **rhs**.
    They are meant to compare a value-mode iterator (left) against a sentinel-mode iterator (right),
    or against a plain `int` bound. Other combinations are not supported.

    Args:
        source (GeneratorFn[T] | int): Generator for a value-mode iterator, or limit for a sentinel-mode iterator.

    Raises:
        TypeError: If **source** is neither an `int` nor callable.
        ValueError: If **source** is a negative limit.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> first, last = pr.GenerativeIterator(pr.Counter()), pr.GenerativeIterator.sentinel(2)
    >>> first
    GenerativeIterator(Counter(start=1, step=1), value=0, count=0)
    >>> first != last
    True
    >>> first.advance().current(), first.count()
    (1, 1)
    >>> first.advance() == last
    True
    >>> first == 2
    True
    >>> last.current()
    Traceback (most recent call last):
        ...
    pyoranges._generative.SentinelAccessError: sentinel iterators hold no value

    ```
    """

    __slots__ = ("_count", "_generator", "_limit", "_value")

    _generator: Option[GeneratorFn[T]]
    _value: Option[T]
    _count: int
    _limit: int

    def __init__(self, source: GeneratorFn[T] | int) -> None:
        match source:
            case bool():
                msg = f"Expected a generator or an int limit, got {source!r}"
                raise TypeError(msg)
            case int():
                if source < 0:
                    msg = f"Limit must be non-negative, got {source}"
                    raise ValueError(msg)
                self._generator = NONE
                self._value = NONE
                self._limit = source
            case _ if callable(source):
                generator = owned_copy(source)
                self._value = Some(generator())
                self._generator = Some(generator)
                self._limit = 0
            case _:
                msg = f"Expected a generator or an int limit, got {source!r}"
                raise TypeError(msg)
        self._count = 0

    @classmethod
    def sentinel(cls, limit: int) -> Self:
        """Build a sentinel-mode iterator, stopping traversals after **limit** iterations."""
        return cls(limit)

    def __repr__(self) -> str:
        name = self.__class__.__name__
        match (self._generator, self._value):
            case (Some(generator), Some(value)):
                return f"{name}({callable_repr(generator)}, value={value!r}, count={self._count})"
            case _:
                return f"{name}(limit={self._limit})"

    def __copy__(self) -> Self:
        twin = object.__new__(self.__class__)
        twin._generator = self._generator.map(owned_copy)
        twin._value = self._value
        twin._count = self._count
        twin._limit = self._limit
        return twin

    def is_sentinel(self) -> bool:
        """Check if the iterator was built from a limit rather than from a generator."""
        return self._generator.is_none()

    def count(self) -> int:
        """Number of `advance()` calls since construction. Always 0 for a sentinel."""
        return self._count

    def limit(self) -> int:
        """Limit of a sentinel iterator. Always 0 for a value-mode iterator."""
        return self._limit

    def current(self) -> T:
        """Read the last generated value. Never invokes the generator.

        Raises:
            SentinelAccessError: If the iterator is a sentinel.
        """
        match self._value:
            case Some(value):
                return value
            case _:
                msg = "sentinel iterators hold no value"
                raise SentinelAccessError(msg)

    def advance(self) -> Self:
        """Invoke the generator, store its result, and increment the count (pre-increment).

        Errors raised by the generator propagate unchanged, and the iterator is left untouched.

        Returns:
            Self: The iterator itself, now on the next value.

        Raises:
            SentinelAccessError: If the iterator is a sentinel.
        """
        match self._generator:
            case Some(generator):
                self._value = Some(generator())
                self._count += 1
                return self
            case _:
                msg = "sentinel iterators cannot be advanced"
                raise SentinelAccessError(msg)

    def advance_copy(self) -> Self:
        """Advance the iterator, and return a copy of it as it was before (post-increment).

        The copy holds its own copy of the generator, so both iterators continue independently from here,
        unless the generator cannot be deep-copied.

        Example:
        ```python
        >>> import pyoranges as pr
        >>> it = pr.GenerativeIterator(pr.Counter())
        >>> prior = it.advance_copy()
        >>> prior.current(), it.current()
        (0, 1)
        >>> prior.advance().current(), it.advance().current()
        (1, 2)

        ```
        """
        if self.is_sentinel():
            msg = "sentinel iterators cannot be advanced"
            raise SentinelAccessError(msg)
        prior = copy.copy(self)
        self.advance()
        return prior

    def _bound_of(self, other: object) -> int | None:
        match other:
            case GenerativeIterator():
                return other._limit
            case bool():
                return None
            case int():
                return other
            case _:
                return None

    def __eq__(self, other: object) -> bool:
        bound = self._bound_of(other)
        if bound is None:
            return NotImplemented
        return self._count == bound

    def __ne__(self, other: object) -> bool:
        bound = self._bound_of(other)
        if bound is None:
            return NotImplemented
        return self._count != bound

    def __lt__(self, other: object) -> bool:
        bound = self._bound_of(other)
        if bound is None:
            return NotImplemented
        return self._count < bound


class GenerativeRange[T](Pipeable):
    """Lazy sequence of the first **limit** values returned by a generator.

    The range keeps its own copy of the generator, and never mutates it:

    - `begin()` builds a new value-mode `GenerativeIterator` on a fresh copy, calling it once immediately,
    - `end()` builds a new sentinel-mode `GenerativeIterator` holding **limit**.

    Every traversal therefore restarts from the generator's initial state,
    unless that state is shared by reference (for example a closure over a `nonlocal` variable),
    or the generator cannot be deep-copied (for example the `__next__` method of a generator object).

    Starting a traversal calls the generator once, even when **limit** is 0.

    Args:
        limit (int): Number of values produced by a full traversal.
        generator (GeneratorFn[T]): Argumentless function producing the values.

    Raises:
        TypeError: If **limit** is not an `int`, or is a `bool`.
        ValueError: If **limit** is negative.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> squares = pr.GenerativeRange(4, pr.Counter()).into(lambda r: [x * x for x in r])
    >>> squares
    [0, 1, 4, 9]
    >>> r = pr.GenerativeRange(3, pr.Counter(start=1, step=2))
    >>> r.collect(), r.collect()
    ((1, 3, 5), (1, 3, 5))
    >>> len(r), r.empty()
    (3, False)

    ```
    """

    __slots__ = ("_generator", "_limit")

    def __init__(self, limit: int, generator: GeneratorFn[T]) -> None:
        match limit:
            case bool():
                msg = f"Expected an int limit, got {limit!r}"
                raise TypeError(msg)
            case int():
                if limit < 0:
                    msg = f"Limit must be non-negative, got {limit}"
                    raise ValueError(msg)
            case _:
                msg = f"Expected an int limit, got {limit!r}"
                raise TypeError(msg)
        self._limit = limit
        self._generator = owned_copy(generator)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._limit}, {callable_repr(self._generator)})"

    def __len__(self) -> int:
        return self._limit

    def __iter__(self) -> Iterator[T]:
        yield from traverse(self.begin(), self.end())

    def begin(self) -> GenerativeIterator[T]:
        """Build a new value-mode iterator. Calls a fresh copy of the generator once.

        Example:
        ```python
        >>> import pyoranges as pr
        >>> r = pr.GenerativeRange(5, pr.Counter())
        >>> r.begin().advance().current(), r.begin().current()
        (1, 0)

        ```
        """
        return GenerativeIterator(self._generator)

    def cbegin(self) -> GenerativeIterator[T]:
        """Same as `GenerativeRange.begin()`."""
        return self.begin()

    def end(self) -> GenerativeIterator[T]:
        """Build a new sentinel-mode iterator holding the limit."""
        return GenerativeIterator.sentinel(self._limit)

    def cend(self) -> GenerativeIterator[T]:
        """Same as `GenerativeRange.end()`."""
        return self.end()

    def empty(self) -> bool:
        """Check if a full traversal produces no value. Never calls the generator."""
        return self._limit == 0

    def collect(self) -> tuple[T, ...]:
        """Traverse the whole range, and collect the values into a `tuple`."""
        return tuple(self)

    def take(self, n: int) -> tuple[T, ...]:
        """Collect at most the first **n** values.

        Raises:
            ValueError: If **n** is negative.
        """
        if n < 0:
            msg = f"Cannot take a negative number of elements, got {n}"
            raise ValueError(msg)
        return tuple(cz.itertoolz.take(n, self))
