from __future__ import annotations

from abc import ABC
from collections.abc import Callable
from typing import Concatenate, Self


class Pipeable:
    __slots__ = ()

    def into[**P, R](
        self,
        func: Callable[Concatenate[Self, P], R],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> R:
        """Hand the wrapper to `func` and return whatever it returns, ending a chain on a plain value.

        `x.into(f, a)` is `f(x, a)`.

        Example:
        ```python
        >>> import rune
        >>> rune.Array([1, 2, 3]).into(sum)
        6
        >>> rune.iterx.count().take(4).into(list)
        [1, 2, 3, 4]

        ```
        """
        return func(self, *args, **kwargs)

    def inspect[**P](
        self,
        func: Callable[Concatenate[Self, P], object],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Self:
        """Call `func` on the wrapper for its side effects, then carry on the chain with the same wrapper.

        Example:
        ```python
        >>> import rune
        >>> rune.Array([1, 2]).inspect(print).len()
        Array {1, 2}
        2

        ```
        """
        func(self, *args, **kwargs)
        return self


class CommonBase[T](ABC, Pipeable):
    """Base class for all rune wrappers.

    Holds the wrapped data in a single slot, so wrappers stay as light as the builtin they wrap.

    Args:
        data (T): The underlying data to wrap.
    """

    _inner: T

    __slots__ = ("_inner",)

    def __init__(self, data: T) -> None:
        self._inner = data

    def inner(self) -> T:
        """Return the wrapped builtin itself, not a copy.

        Example:
        ```python
        >>> import rune
        >>> rune.Array((1, 2)).inner()
        [1, 2]

        ```
        """
        return self._inner
