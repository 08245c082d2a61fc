from __future__ import annotations

from typing import Protocol, Self


class StepRule[T](Protocol):
    """Callable computing the position that follows **value**.

    Implementations may be stateful. Iterators hold their own `copy.deepcopy` of the rule,
    so state kept on a callable object is duplicated, while state captured by a closure is shared.

    Rules which cannot be deep-copied (a generator's `__next__`, an object holding a lock, ...)
    are kept by reference instead, and their state is shared between every iterator using them.
    """

    def __call__(self, value: T, /) -> T: ...


class GeneratorFn[T](Protocol):
    """Zero-argument callable producing the next element of a sequence on each call.

    The same copy rules as `StepRule` apply. For example a generator object's `__next__`
    cannot be copied, so every traversal built from it continues where the previous one stopped.
    """

    def __call__(self) -> T: ...


class Cursor[T](Protocol):
    """Pull-based cursor: read the current element, then move to the next one."""

    def current(self) -> T: ...
    def advance(self) -> Self: ...
    def advance_copy(self) -> Self: ...
    def __ne__(self, other: object, /) -> bool: ...


class Range[T](Protocol):
    """Object able to build a begin cursor and an end cursor for a lazy sequence."""

    def begin(self) -> Cursor[T]: ...
    def end(self) -> Cursor[T]: ...
    def empty(self) -> bool: ...


# typeshed protocols


class SupportsAdd[T, T1](Protocol):
    def __add__(self, x: T, /) -> T1: ...


class SupportsSub[T, T1](Protocol):
    def __sub__(self, x: T, /) -> T1: ...


class SupportsMul[T, T1](Protocol):
    def __mul__(self, x: T, /) -> T1: ...
