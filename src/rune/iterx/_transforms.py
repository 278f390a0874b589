"""Lazy combinator state machines.

Each class wraps one (two for `Chain` and `Zip`) upstream pull and does no work
until it is called.
"""

from __future__ import annotations

from collections.abc import Callable

from .._results import NONE, Option, Some
from ._pull import Pull

type Upstream[T] = Callable[[], Option[T]]


class Map[T, R](Pull[R]):
    __slots__ = ("_func", "_inner")

    def __init__(self, inner: Upstream[T], func: Callable[[T], R]) -> None:
        self._inner = inner
        self._func = func

    def __call__(self) -> Option[R]:
        return self._inner().map(self._func)

    def _operands(self) -> tuple[object, ...]:
        return (self._inner, self._func)


class Filter[T](Pull[T]):
    __slots__ = ("_inner", "_predicate")

    def __init__(self, inner: Upstream[T], predicate: Callable[[T], object]) -> None:
        self._inner = inner
        self._predicate = predicate

    def __call__(self) -> Option[T]:
        while (item := self._inner()).is_some():
            if self._predicate(item.unwrap()):
                return item
        return NONE

    def _operands(self) -> tuple[object, ...]:
        return (self._inner, self._predicate)


class Take[T](Pull[T]):
    """Emit at most `n` values; afterwards upstream is never pulled again."""

    __slots__ = ("_inner", "_n", "_remaining")

    def __init__(self, inner: Upstream[T], n: int) -> None:
        self._inner = inner
        self._n = n
        self._remaining = n

    def __call__(self) -> Option[T]:
        if self._remaining <= 0:
            return NONE
        self._remaining -= 1
        return self._inner()

    def _operands(self) -> tuple[object, ...]:
        return (self._inner, self._n)


class Skip[T](Pull[T]):
    """Discard `n` upstream values on the first pull, then pass through."""

    __slots__ = ("_exhausted", "_inner", "_n", "_remaining")

    def __init__(self, inner: Upstream[T], n: int) -> None:
        self._inner = inner
        self._n = n
        self._remaining = n
        self._exhausted = False

    def __call__(self) -> Option[T]:
        if self._exhausted:
            return NONE
        while self._remaining > 0:
            self._remaining -= 1
            if self._inner().is_none():
                self._exhausted = True
                return NONE
        return self._inner()

    def _operands(self) -> tuple[object, ...]:
        return (self._inner, self._n)


class SkipWhile[T](Pull[T]):
    """Discard values while the predicate holds; the predicate is never retested once it failed."""

    __slots__ = ("_done_skipping", "_inner", "_predicate")

    def __init__(self, inner: Upstream[T], predicate: Callable[[T], object]) -> None:
        self._inner = inner
        self._predicate = predicate
        self._done_skipping = False

    def __call__(self) -> Option[T]:
        if self._done_skipping:
            return self._inner()
        while (item := self._inner()).is_some():
            if not self._predicate(item.unwrap()):
                self._done_skipping = True
                return item
        return NONE

    def _operands(self) -> tuple[object, ...]:
        return (self._inner, self._predicate)


class TakeWhile[T](Pull[T]):
    """Emit values while the predicate holds; the first failing value is dropped and ends the stream."""

    __slots__ = ("_done", "_inner", "_predicate")

    def __init__(self, inner: Upstream[T], predicate: Callable[[T], object]) -> None:
        self._inner = inner
        self._predicate = predicate
        self._done = False

    def __call__(self) -> Option[T]:
        if self._done:
            return NONE
        item = self._inner()
        if item.is_some() and not self._predicate(item.unwrap()):
            self._done = True
            return NONE
        return item

    def _operands(self) -> tuple[object, ...]:
        return (self._inner, self._predicate)


class Chain[T](Pull[T]):
    """Drain `first`, then switch to `second` for good."""

    __slots__ = ("_first", "_second", "_switched")

    def __init__(self, first: Upstream[T], second: Upstream[T]) -> None:
        self._first = first
        self._second = second
        self._switched = False

    def __call__(self) -> Option[T]:
        if not self._switched:
            item = self._first()
            if item.is_some():
                return item
            self._switched = True
        return self._second()

    def _operands(self) -> tuple[object, ...]:
        return (self._first, self._second)


class Zip[T, U](Pull[tuple[T, U]]):
    """Pull both sides on every call; ends as soon as either side does."""

    __slots__ = ("_left", "_right")

    def __init__(self, left: Upstream[T], right: Upstream[U]) -> None:
        self._left = left
        self._right = right

    def __call__(self) -> Option[tuple[T, U]]:
        match (self._left(), self._right()):
            case (Some(left), Some(right)):
                return Some((left, right))
            case _:
                return NONE

    def _operands(self) -> tuple[object, ...]:
        return (self._left, self._right)


class Terminate[T](Pull[T]):
    """Pass through until the first `NONE`, then stay exhausted whatever upstream does."""

    __slots__ = ("_inner", "_terminated")

    def __init__(self, inner: Upstream[T]) -> None:
        self._inner = inner
        self._terminated = False

    def __call__(self) -> Option[T]:
        if self._terminated:
            return NONE
        item = self._inner()
        if item.is_none():
            self._terminated = True
        return item

    def _operands(self) -> tuple[object, ...]:
        return (self._inner,)
