from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Never

from ._option import Option, OptionUnwrapError
from ._result import Result, ResultUnwrapError


@dataclass(slots=True)
class Ok[T, E](Result[T, E]):
    """The operation succeeded with `value`."""

    _succeeded: ClassVar[bool] = True

    value: T

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> Never:
        raise ResultUnwrapError(f"Expected an error, got Ok({self.value!r})")


@dataclass(slots=True)
class Err[T, E](Result[T, E]):
    """The operation failed with `error`.

    ```python
    >>> import rune
    >>> rune.iterx.range(None, 10)
    Err(error=ConfigurationError('Must provide both start and stop values'))

    ```
    """

    _succeeded: ClassVar[bool] = False

    error: E

    def unwrap(self) -> Never:
        raise ResultUnwrapError(f"Expected a value, got Err({self.error!r})")

    def unwrap_err(self) -> E:
        return self.error


@dataclass(slots=True)
class Some[T](Option[T]):
    """A pulled value, which may itself be `None`.

    ```python
    >>> import rune
    >>> rune.iterx.single_iterable(None).next()
    Some(value=None)

    ```
    """

    _pulled: ClassVar[bool] = True

    value: T

    def unwrap(self) -> T:
        return self.value


@dataclass(slots=True)
class NoneOption(Option[Any]):
    _pulled: ClassVar[bool] = False

    def __repr__(self) -> str:
        return "NONE"

    def unwrap(self) -> Never:
        raise OptionUnwrapError("Nothing was pulled, the iterator is exhausted")


NONE: Option[Any] = NoneOption()
"""Returned by a pull once its iterator is exhausted."""
