from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Never


class OptionUnwrapError(RuntimeError): ...


class Option[T](ABC):
    """Tagged union representing an optional value: either `Some(value)` or `NONE`."""

    __slots__ = ()

    @abstractmethod
    def is_some(self) -> bool:
        """
        Returns `True` if the option is a `Some` value.

        Example:
        ```python
        >>> from pyoranges import Some, NONE
        >>> Some(2).is_some()
        True
        >>> NONE.is_some()
        False

        ```
        """
        ...

    @abstractmethod
    def is_none(self) -> bool:
        """
        Returns `True` if the option is a `None` value.

        Example:
        ```python
        >>> from pyoranges import Some, NONE
        >>> Some(2).is_none()
        False
        >>> NONE.is_none()
        True

        ```
        """
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """
        Returns the contained `Some` value.

        Returns:
            T: The contained `Some` value.

        Raises:
            OptionUnwrapError: If the option is `None`.

        Example:
        ```python
        >>> from pyoranges import Some, NONE
        >>> Some("car").unwrap()
        'car'
        >>> NONE.unwrap()
        Traceback (most recent call last):
            ...
        pyoranges._results._option.OptionUnwrapError: called `unwrap` on a `None`

        ```
        """
        ...

    def map[U](self, f: Callable[[T], U]) -> Option[U]:
        """
        Maps an `Option[T]` to `Option[U]` by applying a function to a contained `Some` value,
        leaving a `None` value untouched.

        Example:
        ```python
        >>> from pyoranges import Some, NONE
        >>> Some("Hello, World!").map(len)
        Some(value=13)
        >>> NONE.map(len)
        NONE

        ```
        """
        if self.is_some():
            return Some(f(self.unwrap()))
        return NONE


@dataclass(slots=True)
class Some[T](Option[T]):
    """Option variant representing the presence of a value.

    Args:
        value (T): The contained value.
    """

    value: T

    def is_some(self) -> bool:
        return True

    def is_none(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(slots=True)
class NoneOption(Option[Any]):
    """Option variant representing the absence of a value."""

    def __repr__(self) -> str:
        return "NONE"

    def is_some(self) -> bool:
        return False

    def is_none(self) -> bool:
        return True

    def unwrap(self) -> Never:
        raise OptionUnwrapError("called `unwrap` on a `None`")


NONE: Option[Any] = NoneOption()
"""Singleton instance representing the absence of a value."""
