"""Process-wide rendering configuration."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Any


@dataclass(slots=True, frozen=True)
class Config:
    """Settings used by `to_string` when rendering values.

    Args:
        max_items (int): Iterables are truncated after this many elements, with a trailing `...`.
        bool_alpha (bool): Render booleans as `true`/`false` instead of `True`/`False`.
    """

    max_items: int = 20
    bool_alpha: bool = True

    def __post_init__(self) -> None:
        if self.max_items < 0:
            msg = f"max_items must be non-negative, got {self.max_items}"
            raise ValueError(msg)


_CONFIG = Config()


def get_config() -> Config:
    """Return the active configuration.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> pr.get_config()
    Config(max_items=20, bool_alpha=True)

    ```
    """
    return _CONFIG


def set_config(**changes: Any) -> Config:  # noqa: ANN401
    """Replace fields of the active configuration.

    Args:
        **changes (Any): Field names and their new values.

    Returns:
        Config: The previous configuration, so it can be restored later.

    Raises:
        TypeError: If a field name is unknown.
        ValueError: If a value is out of range.
    """
    global _CONFIG  # noqa: PLW0603
    previous = _CONFIG
    _CONFIG = replace(_CONFIG, **changes)
    return previous


@contextmanager
def config_context(**changes: Any) -> Iterator[Config]:  # noqa: ANN401
    """Temporarily replace fields of the active configuration.

    The previous configuration is restored on exit, even if an exception is raised.

    Example:
    ```python
    >>> import pyoranges as pr
    >>> with pr.config_context(max_items=2):
    ...     pr.to_string([1, 2, 3])
    '[ 1, 2, ... ]'
    >>> pr.to_string([1, 2, 3])
    '[ 1, 2, 3 ]'

    ```
    """
    global _CONFIG  # noqa: PLW0603
    previous = set_config(**changes)
    try:
        yield _CONFIG
    finally:
        _CONFIG = previous
