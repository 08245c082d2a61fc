"""Benchmarks for pyoranges package - benchs.py."""

from collections.abc import Iterator

import pyoranges as pr

from ._registery import bench

# Helper functions
# ------------------------------------------------------------


def _double(x: int) -> int:
    return x * 2


def _builtin_doubling(size: int) -> Iterator[int]:
    x = 1
    for _ in range(size):
        yield x
        x *= 2


# Benchmark classes
# ------------------------------------------------------------


class Stepped:
    """Benchmark stepped range traversal against builtin equivalents."""

    @bench
    @staticmethod
    def successor(size: int) -> object:
        """Traverse a range with the default step rule."""
        return sum(pr.SteppedRange(0, size))

    @bench
    @staticmethod
    def builtin_range(size: int) -> object:
        """Traverse the builtin range."""
        return sum(range(size))

    @bench
    @staticmethod
    def offset(size: int) -> object:
        """Traverse a range with a callable object step rule."""
        return sum(pr.SteppedRange(0, size * 3, pr.Offset(3)))

    @bench
    @staticmethod
    def doubling(size: int) -> object:
        """Traverse a geometric progression with a function step rule."""
        return pr.SteppedRange(1, 2**size, _double).length()

    @bench
    @staticmethod
    def builtin_doubling(size: int) -> object:
        """Traverse a geometric progression with a builtin generator."""
        return sum(1 for _ in _builtin_doubling(size))

    @bench
    @staticmethod
    def manual_cursor(size: int) -> object:
        """Drive the cursors by hand."""
        rng = pr.SteppedRange(0, size)
        first, last = rng.begin(), rng.end()
        total = 0
        while first != last:
            total += first.current()
            first.advance()
        return total


class Generative:
    """Benchmark generative range traversal against builtin equivalents."""

    @bench
    @staticmethod
    def counter(size: int) -> object:
        """Traverse a range driven by a stateful generator object."""
        return sum(pr.GenerativeRange(size, pr.Counter()))

    @bench
    @staticmethod
    def list_comprehension(size: int) -> object:
        """Generate the same values eagerly with a list comprehension."""
        gen = pr.Counter()
        return sum([gen() for _ in range(size)])  # noqa: C419

    @bench
    @staticmethod
    def take(size: int) -> object:
        """Collect half of the range."""
        return pr.GenerativeRange(size, pr.Counter()).take(size // 2)
