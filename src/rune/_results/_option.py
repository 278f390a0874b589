from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING, ClassVar, TypeIs

if TYPE_CHECKING:
    from ._states import NoneOption, Some


class OptionUnwrapError(RuntimeError): ...


class Option[T](ABC):
    """The outcome of a single pull: either `Some(value)` or `NONE`.

    `NONE` is the only exhaustion signal of rune iterators, so `Some(None)` is a
    perfectly valid element.

    Example:
    ```python
    >>> from rune import Some, NONE
    >>> Some(None).is_some(), NONE.is_none()
    (True, True)

    ```
    """

    __slots__ = ()

    _pulled: ClassVar[bool]

    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        return self._pulled

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return not self._pulled

    @abstractmethod
    def unwrap(self) -> T:
        """
        Returns the pulled value.

        Raises:
            OptionUnwrapError: If the iterator was exhausted.

        Example:
            ```python
            >>> from rune import Some, NONE
            >>> Some("car").unwrap()
            'car'
            >>> NONE.unwrap()
            Traceback (most recent call last):
                ...
            rune._results._option.OptionUnwrapError: Nothing was pulled, the iterator is exhausted

            ```
        """
        ...

    def expect(self, msg: str) -> T:
        """Returns the pulled value, or raises `OptionUnwrapError` with `msg`."""
        if self.is_some():
            return self.unwrap()
        raise OptionUnwrapError(msg)

    def unwrap_or(self, default: T) -> T:
        """
        Returns the pulled value, or `default` when the iterator was exhausted.

        Example:
            ```python
            >>> import rune
            >>> rune.iterx.reduce([], max).unwrap().unwrap_or(0)
            0

            ```
        """
        return self.unwrap() if self.is_some() else default

    def map[U](self, f: Callable[[T], U]) -> Option[U]:
        """
        Applies `f` to the pulled value, leaving `NONE` untouched.

        Example:
            ```python
            >>> from rune import Some, NONE
            >>> Some("Hello, World!").map(len)
            Some(value=13)
            >>> NONE.map(len)
            NONE

            ```
        """
        from ._states import Some

        if self.is_some():
            return Some(f(self.unwrap()))
        return self  # type: ignore[return-value]
