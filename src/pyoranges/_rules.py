"""Builtin step rules and generator callables.

Step rules take a position and return the next one.
Generators take no argument and return the next element.

Iterators always hold their own `copy.deepcopy` of these callables:

- state stored on a callable *object* (like `Counter`) is duplicated, each copy evolves on its own,
- state captured by a closure, or any object reached by reference, stays shared between copies,
- callables which cannot be deep-copied are kept by reference, and share their state too (see `owned_copy`).
"""

from __future__ import annotations

import copy
from dataclasses import dataclass

from ._core import SupportsAdd, SupportsMul, SupportsSub


def successor[T: SupportsAdd[int, object]](value: T) -> T:
    """Return `value + 1`. Default step rule of `SteppedRange`.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> pr.successor(41)
    42

    ```
    """
    return value + 1  # type: ignore[return-value]


def predecessor[T: SupportsSub[int, object]](value: T) -> T:
    """Return `value - 1`.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> pr.SteppedRange(3, 0, pr.predecessor).collect()
    (3, 2, 1)

    ```
    """
    return value - 1  # type: ignore[return-value]


@dataclass(slots=True, frozen=True)
class Offset[D]:
    """Step rule moving the position by a fixed **delta**.

    Args:
        delta (D): Amount added to the position on each step.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> pr.SteppedRange(0, 10, pr.Offset(2)).collect()
    (0, 2, 4, 6, 8)
    >>> pr.SteppedRange(0.0, 1.0, pr.Offset(0.25)).collect()
    (0.0, 0.25, 0.5, 0.75)

    ```
    """

    delta: D

    def __call__[T: SupportsAdd[object, object]](self, value: T) -> T:
        return value + self.delta  # type: ignore[return-value]


@dataclass(slots=True, frozen=True)
class Scale[F]:
    """Step rule multiplying the position by a fixed **factor**.

    Args:
        factor (F): Amount the position is multiplied by on each step.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> pr.SteppedRange(1, 16, pr.Scale(2)).collect()
    (1, 2, 4, 8)

    ```
    """

    factor: F

    def __call__[T: SupportsMul[object, object]](self, value: T) -> T:
        return value * self.factor  # type: ignore[return-value]


@dataclass(slots=True)
class Counter:
    """Stateful generator returning **start**, **start** + **step**, ... on successive calls.

    The state lives on the instance, so every copy held by an iterator counts on its own.

    Args:
        start (int): First value returned. Defaults to 0.
        step (int): Difference between consecutive values. Defaults to 1.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> gen = pr.Counter(10, 5)
    >>> gen(), gen(), gen()
    (10, 15, 20)
    >>> gen
    Counter(start=25, step=5)

    ```
    """

    start: int = 0
    step: int = 1

    def __call__(self) -> int:
        value = self.start
        self.start += self.step
        return value


def explicit_copy[T](value: T) -> T:
    """Return an independent deep copy of **value**.

    This is the copy operation iterators apply to their step rule or generator.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> gen = pr.Counter()
    >>> twin = pr.explicit_copy(gen)
    >>> gen(), gen(), twin()
    (0, 1, 0)

    ```
    """
    return copy.deepcopy(value)


def owned_copy[F](func: F) -> F:
    """Return the copy of a step rule or generator held by an iterator or a range.

    This is `explicit_copy`, except that callables which cannot be deep-copied
    (generator methods, objects holding locks, files or sockets, ...) are kept by reference:
    their state is then shared, as for closures.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> next_square = (x * x for x in range(5)).__next__
    >>> pr.owned_copy(next_square) is next_square
    True
    >>> gen = pr.Counter()
    >>> pr.owned_copy(gen) is gen
    False

    ```
    """
    try:
        return copy.deepcopy(func)
    except (TypeError, copy.Error):
        return func
