"""Value classification and human-readable rendering, used for diagnostics and tests."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, TypeIs

import cytoolz as cz

from ._config import get_config

_TEXT = (str, bytes, bytearray)


def is_pair(value: object) -> TypeIs[tuple[Any, Any]]:
    """Check if **value** is a tuple of exactly two elements.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> pr.is_pair((1, "a")), pr.is_pair((1, 2, 3)), pr.is_pair([1, 2])
    (True, False, False)

    ```
    """
    return isinstance(value, tuple) and len(value) == 2  # noqa: PLR2004


def is_tuple(value: object) -> TypeIs[tuple[Any, ...]]:
    """Check if **value** is a fixed-size record (a `tuple`, named tuples included) which is not a pair."""
    return isinstance(value, tuple) and not is_pair(value)


def is_iterable(value: object) -> TypeIs[Iterable[Any]]:
    """Check if **value** is an iterable collection.

    Text types are iterable in Python, but are considered printable here.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> pr.is_iterable([1]), pr.is_iterable("abc"), pr.is_iterable(pr.SteppedRange(0, 2))
    (True, False, True)

    ```
    """
    return cz.itertoolz.isiterable(value) and not isinstance(value, _TEXT)


def is_printable(value: object) -> bool:
    """Check if **value** is rendered directly with `str`, rather than element by element."""
    return isinstance(value, _TEXT) or not (
        isinstance(value, tuple) or is_iterable(value)
    )


def to_string(value: object) -> str:
    """Render **value** as a human-readable string.

    - booleans render as `true`/`false` (see `Config.bool_alpha`),
    - printable values render with `str`,
    - pairs and tuples render as `( a, b )`,
    - mappings render as a list of `( key, value )` pairs,
    - other iterables render as `[ a, b ]`, or `[ ]` when empty.

    Nested values are rendered recursively.
    Iterables are consumed lazily and truncated after `Config.max_items` elements.

    Args:
        value (object): The value to render.

    Returns:
        str: The rendered value.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> pr.to_string([3, 5, 6, 9])
    '[ 3, 5, 6, 9 ]'
    >>> pr.to_string([(1, "a"), (2, "b")])
    '[ ( 1, a ), ( 2, b ) ]'
    >>> pr.to_string({"x": True})
    '[ ( x, true ) ]'
    >>> pr.to_string(pr.SteppedRange(0, 3))
    '[ 0, 1, 2 ]'
    >>> pr.to_string([])
    '[ ]'

    ```
    """
    match value:
        case bool() if get_config().bool_alpha:
            return "true" if value else "false"
        case _ if is_printable(value):
            return str(value)
        case tuple():
            return _enclose("(", ", ".join(to_string(item) for item in value), ")")
        case Mapping():
            return _enclose("[", _render_items(value.items()), "]")
        case _:
            return _enclose("[", _render_items(value), "]")


def _enclose(opening: str, body: str, closing: str) -> str:
    if not body:
        return f"{opening} {closing}"
    return f"{opening} {body} {closing}"


def _render_items(items: Iterable[object]) -> str:
    limit = get_config().max_items
    head = tuple(cz.itertoolz.take(limit + 1, items))
    rendered = [to_string(item) for item in head[:limit]]
    if len(head) > limit:
        rendered.append("...")
    return ", ".join(rendered)


def callable_repr(func: object) -> str:
    """Render a step rule or generator by name, falling back to its `repr` for callable objects."""
    return getattr(func, "__name__", None) or repr(func)
