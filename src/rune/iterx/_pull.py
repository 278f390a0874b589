from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Iterator

from .._core import render
from .._results import NONE, Option, Some

type PullLike[T] = Callable[[], Option[T]] | Iterable[T]
"""Anything `into_pull` accepts: a pull callable, or a Python `Iterable`."""


class Pull[T](ABC):
    """A stateful, zero-argument callable producing `Some(value)` or `NONE`.

    Every source and combinator of `rune.iterx` is a `Pull` subclass holding its
    state in explicit slots. Calling it performs the minimal upstream work needed
    to produce one value, or to signal exhaustion.
    """

    __slots__ = ()

    @abstractmethod
    def __call__(self) -> Option[T]: ...

    @abstractmethod
    def _operands(self) -> tuple[object, ...]: ...

    def __repr__(self) -> str:
        return render(self.__class__.__name__, *self._operands())


class FromIterable[T](Pull[T]):
    """Pull values out of a Python `Iterable` (a list, a string, `re.finditer(...)`, a generator...)."""

    __slots__ = ("_iterator", "_source")

    def __init__(self, source: Iterable[T]) -> None:
        self._source = source
        self._iterator: Iterator[T] = iter(source)

    def __call__(self) -> Option[T]:
        try:
            return Some(next(self._iterator))
        except StopIteration:
            return NONE

    def _operands(self) -> tuple[object, ...]:
        return (self._source,)


class FromFn[T](Pull[T]):
    """Adapt a callable that returns `None` once it has nothing left to give.

    This is the only place where `None` means exhaustion; use it for callables
    written against that convention.
    """

    __slots__ = ("_func",)

    def __init__(self, func: Callable[[], T | None]) -> None:
        self._func = func

    def __call__(self) -> Option[T]:
        value = self._func()
        return NONE if value is None else Some(value)

    def _operands(self) -> tuple[object, ...]:
        return (self._func,)


def into_pull[T](data: PullLike[T]) -> Callable[[], Option[T]]:
    """Normalise `data` to a pull callable.

    Callables (including `Iter` and every `Pull`) are used as-is. Any other
    `Iterable` is adapted with `FromIterable`.

    Raises:
        TypeError: If `data` is neither callable nor iterable.
    """
    if callable(data):
        return data
    if isinstance(data, Iterable):
        return FromIterable(data)
    msg = f"Expected a pull callable or an iterable, got {type(data).__name__}"
    raise TypeError(msg)
