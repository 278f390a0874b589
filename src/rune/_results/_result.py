from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING, ClassVar, TypeIs, cast

if TYPE_CHECKING:
    from ._states import Err, Ok


class ResultUnwrapError(RuntimeError): ...


class Result[T, E](ABC):
    """The return value of a fallible rune operation: `Ok(value)` or `Err(error)`.

    rune never raises for malformed arguments to its constructors or sinks; the error travels inside `Err` instead.

    Example:
    ```python
    >>> import rune
    >>> match rune.iterx.range(1, 3):
    ...     case rune.Ok(it):
    ...         print(it.collect())
    ...     case rune.Err(error):
    ...         print(f"failed: {error}")
    Array {1, 2, 3}

    ```
    """

    __slots__ = ()

    _succeeded: ClassVar[bool]

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        return self._succeeded

    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        return not self._succeeded

    @abstractmethod
    def unwrap(self) -> T:
        """Returns the value of an `Ok`, or raises `ResultUnwrapError` carrying the error of an `Err`."""
        ...

    @abstractmethod
    def unwrap_err(self) -> E:
        """Returns the error of an `Err`, or raises `ResultUnwrapError` for an `Ok`."""
        ...

    def expect(self, msg: str) -> T:
        """Returns the value of an `Ok`, or raises `ResultUnwrapError` with `msg` followed by the error."""
        if self.is_ok():
            return self.unwrap()
        raise ResultUnwrapError(f"{msg}: {self.unwrap_err()}")

    def unwrap_or(self, default: T) -> T:
        """
        Returns the value of an `Ok`, or `default` for an `Err`.

        ```python
        >>> import rune
        >>> rune.iterx.cycle(42).map(lambda it: it.take(2).collect()).unwrap_or(rune.Array())
        Array {}

        ```
        """
        return self.unwrap() if self.is_ok() else default

    def map[U](self, f: Callable[[T], U]) -> Result[U, E]:
        """Applies `f` to the value of an `Ok`, leaving an `Err` untouched."""
        from ._states import Ok

        if self.is_ok():
            return Ok(f(self.unwrap()))
        return cast(Result[U, E], self)
