from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any

from .._core import CommonBase, render
from .._results import Option, Some
from . import _sinks
from ._pull import Pull, PullLike, into_pull
from ._transforms import (
    Chain,
    Filter,
    Map,
    Skip,
    SkipWhile,
    Take,
    TakeWhile,
    Terminate,
    Zip,
)

if TYPE_CHECKING:
    from .._array import Array
    from .._errors import MissingFunctionError
    from .._results import Result


class Iter[T](CommonBase[Callable[[], Option[T]]], Iterator[T]):
    """A fluent wrapper around a pull iterator.

    A pull iterator is any zero-argument callable returning `Some(value)` or `NONE`.
    `Iter` forwards calls to it unchanged, and exposes every `rune.iterx` transform and sink as a chainable method.

    Every transform returns a new `Iter`, and is lazy: building a chain performs no pull at all.
    Only calling the outermost `Iter` (or a sink such as `collect`) pulls values, one at a time, down to the source.

    `Iter` also implements the `Iterator` Protocol from `collections.abc`, so it can be used in a for-loop, or given to any function expecting an iterator.

    Keep in mind that `Iter` instances are single-use: pulled values are gone.

    Args:
        data (PullLike[T]): A pull callable, or any `Iterable` to pull values from.

    Example:
    ```python
    >>> import rune
    >>> it = rune.Iter("abcdef").map(str.upper).skip(2)
    >>> it
    Skip[Map[FromIterable['abcdef'], <method 'upper' of 'str' objects>], 2]
    >>> it.collect()
    Array {"C", "D", "E", "F"}

    ```
    """

    __slots__ = ()

    def __init__(self, data: PullLike[T]) -> None:
        super().__init__(into_pull(data))

    def __call__(self) -> Option[T]:
        return self._inner()

    def __next__(self) -> T:
        match self._inner():
            case Some(value):
                return value
            case _:
                raise StopIteration

    def __repr__(self) -> str:
        if isinstance(self._inner, Pull):
            return repr(self._inner)
        return render("Iter", self._inner)

    def next(self) -> Option[T]:
        """Pull the next value.

        Equivalent to calling the `Iter` itself.

        Returns:
            Option[T]: `Some(value)`, or `NONE` once the iterator is exhausted.

        Example:
        ```python
        >>> import rune
        >>> it = rune.Iter([1, 2])
        >>> it.next()
        Some(value=1)
        >>> it.next().unwrap()
        2
        >>> it.next()
        NONE

        ```
        """
        return self._inner()

    def map[R](self, func: Callable[[T], R]) -> Iter[R]:
        """Apply `func` to every value.

        A result of `None`, `0` or `False` is still a value: only upstream exhaustion ends a `map`.

        Args:
            func (Callable[[T], R]): Function applied to each value.

        Returns:
            Iter[R]: A lazy `Map` iterator.

        Example:
        ```python
        >>> import rune
        >>> rune.Iter([1, 2, 3]).map(lambda x: x % 2 == 0).collect()
        Array {False, True, False}

        ```
        """
        return Iter(Map(self, func))

    def filter(self, func: Callable[[T], object]) -> Iter[T]:
        """Keep only the values for which `func` is truthy.

        A single pull keeps pulling upstream until a value passes, or upstream is exhausted.

        Args:
            func (Callable[[T], object]): Predicate applied to each value.

        Returns:
            Iter[T]: A lazy `Filter` iterator.

        Example:
        ```python
        >>> import rune
        >>> rune.Iter(range(10)).filter(lambda x: x % 3 == 0).collect()
        Array {0, 3, 6, 9}

        ```
        """
        return Iter(Filter(self, func))

    def take(self, n: int) -> Iter[T]:
        """Yield at most `n` values, then stay exhausted without pulling upstream again.

        Args:
            n (int): Maximum number of values. Zero or less yields nothing.

        Returns:
            Iter[T]: A lazy `Take` iterator.

        Example:
        ```python
        >>> import rune
        >>> rune.iterx.reiterate("x").take(3).collect()
        Array {"x", "x", "x"}

        ```
        """
        return Iter(Take(self, n))

    def skip(self, n: int) -> Iter[T]:
        """Discard the first `n` values.

        The discarding happens on the first pull, not when the chain is built.

        Args:
            n (int): Number of values to discard.

        Returns:
            Iter[T]: A lazy `Skip` iterator.

        Example:
        ```python
        >>> import rune
        >>> rune.Iter([1, 2, 3, 4]).skip(3).collect()
        Array {4}

        ```
        """
        return Iter(Skip(self, n))

    def skip_while(self, func: Callable[[T], object]) -> Iter[T]:
        """Discard values while `func` is truthy, then pass everything through.

        The first value failing `func` is returned, and `func` is never called again.

        Args:
            func (Callable[[T], object]): Predicate deciding what to skip.

        Returns:
            Iter[T]: A lazy `SkipWhile` iterator.

        Example:
        ```python
        >>> import rune
        >>> rune.Iter([1, 2, 5, 1, 7]).skip_while(lambda x: x < 3).collect()
        Array {5, 1, 7}

        ```
        """
        return Iter(SkipWhile(self, func))

    def take_while(self, func: Callable[[T], object]) -> Iter[T]:
        """Yield values while `func` is truthy.

        The first failing value is dropped, and the iterator is exhausted for good.

        Args:
            func (Callable[[T], object]): Predicate deciding what to keep.

        Returns:
            Iter[T]: A lazy `TakeWhile` iterator.

        Example:
        ```python
        >>> import rune
        >>> rune.Iter([1, 2, 5, 1, 7]).take_while(lambda x: x < 3).collect()
        Array {1, 2}

        ```
        """
        return Iter(TakeWhile(self, func))

    def chain(self, other: PullLike[T]) -> Iter[T]:
        """Yield every value of `self`, then every value of `other`.

        Once `self` returned `NONE`, it is never pulled again.

        Args:
            other (PullLike[T]): The iterator (or iterable) to continue with.

        Returns:
            Iter[T]: A lazy `Chain` iterator.

        Example:
        ```python
        >>> import rune
        >>> rune.Iter([1, 2]).chain([3]).collect()
        Array {1, 2, 3}

        ```
        """
        return Iter(Chain(self, into_pull(other)))

    def zip[U](self, other: PullLike[U]) -> Iter[tuple[T, U]]:
        """Pair values of `self` and `other`, stopping as soon as either is exhausted.

        Args:
            other (PullLike[U]): The iterator (or iterable) to pair with.

        Returns:
            Iter[tuple[T, U]]: A lazy `Zip` iterator.

        Example:
        ```python
        >>> import rune
        >>> rune.Iter("abc").zip(rune.iterx.count()).collect()
        Array {('a', 1), ('b', 2), ('c', 3)}

        ```
        """
        return Iter(Zip(self, into_pull(other)))

    def terminate(self) -> Iter[T]:
        """Stay exhausted after the first `NONE`, even if upstream would resume.

        Returns:
            Iter[T]: A lazy `Terminate` iterator.
        """
        return Iter(Terminate(self))

    def collect(self) -> Array[T]:
        """Pull every value into a new `Array`.

        This is a terminal operation that ends the chain.

        Returns:
            Array[T]: The pulled values, in pull order.
        """
        return _sinks.collect(self)

    def reduce[U](
        self, func: Callable[[Any, T], U] | None, initial: Any = _sinks.ABSENT
    ) -> Result[Option[U], MissingFunctionError]:
        """Fold every value into an accumulator, from left to right.

        See `rune.iterx.reduce` for the details.

        Example:
        ```python
        >>> import operator
        >>> import rune
        >>> rune.Iter([1, 2, 3]).reduce(operator.add)
        Ok(value=Some(value=6))
        >>> rune.Iter([1, 2, 3]).reduce(operator.add, 10).unwrap().unwrap()
        16

        ```
        """
        return _sinks.reduce(self, func, initial)

    def for_each(self, func: Callable[[T], object]) -> None:
        """Call `func` on every value, for its side effects.

        ```python
        >>> import rune
        >>> rune.Iter("ab").for_each(print)
        a
        b

        ```
        """
        _sinks.for_each(self, func)
