"""Source constructors: fresh pull iterators over numbers, sequences and single values."""

from __future__ import annotations

import builtins
import logging
from collections.abc import Collection, Iterator, Mapping, Sequence
from typing import Any

from .._errors import ConfigurationError
from .._results import NONE, Err, Ok, Option, Result, Some
from ._fluent import Iter
from ._pull import FromIterable, Pull

logger = logging.getLogger(__name__)

type Number = int | float


class Range(Pull[Number]):
    __slots__ = ("_current", "_start", "_step", "_stop")

    def __init__(self, start: Number, stop: Number, step: Number) -> None:
        self._start = start
        self._stop = stop
        self._step = step
        self._current = start - step

    def __call__(self) -> Option[Number]:
        candidate = self._current + self._step
        if self._past_stop(candidate):
            return NONE
        self._current = candidate
        return Some(candidate)

    def _past_stop(self, value: Number) -> bool:
        if self._step < 0:
            return value < self._stop
        return value > self._stop

    def _operands(self) -> tuple[object, ...]:
        return (self._start, self._stop, self._step)


class Reiterate[T](Pull[T]):
    __slots__ = ("_element",)

    def __init__(self, element: T) -> None:
        self._element = element

    def __call__(self) -> Option[T]:
        return Some(self._element)

    def _operands(self) -> tuple[object, ...]:
        return (self._element,)


class SingleIterable[T](Pull[T]):
    __slots__ = ("_element", "_emitted")

    def __init__(self, element: T) -> None:
        self._element = element
        self._emitted = False

    def __call__(self) -> Option[T]:
        if self._emitted:
            return NONE
        self._emitted = True
        return Some(self._element)

    def _operands(self) -> tuple[object, ...]:
        return (self._element,)


class Cycle[T](Pull[T]):
    """Loop over a sequence forever. The length is read once, at construction."""

    __slots__ = ("_data", "_index", "_length")

    def __init__(self, data: Sequence[T]) -> None:
        self._data = data
        self._length = len(data)
        self._index = 0

    def __call__(self) -> Option[T]:
        value = self._data[self._index]
        self._index = (self._index + 1) % self._length
        return Some(value)

    def _operands(self) -> tuple[object, ...]:
        return (self._data,)


class Count(Pull[Number]):
    __slots__ = ("_current", "_start", "_step")

    def __init__(self, start: Number, step: Number) -> None:
        self._start = start
        self._step = step
        self._current = start

    def __call__(self) -> Option[Number]:
        self._current += self._step
        return Some(self._current)

    def _operands(self) -> tuple[object, ...]:
        return (self._start, self._step)


def range(  # noqa: A001
    start: Number | None, stop: Number | None, step: Number = 1
) -> Result[Iter[Number], ConfigurationError]:
    """Count from `start` to `stop` (both inclusive), by `step`.

    With a positive `step`, values are produced while they are `<= stop`.
    With a negative `step`, while they are `>= stop`.

    Args:
        start (Number | None): First value.
        stop (Number | None): Inclusive bound.
        step (Number): Increment. Defaults to 1.

    Returns:
        Result[Iter[Number], ConfigurationError]: `Err` if either bound is missing.

    Example:
    ```python
    >>> import rune
    >>> rune.iterx.range(5, 50, 10).unwrap().collect()
    Array {5, 15, 25, 35, 45}
    >>> rune.iterx.range(3, 1, -1).unwrap().collect()
    Array {3, 2, 1}
    >>> rune.iterx.range(3, 1).unwrap().collect()
    Array {}
    >>> rune.iterx.range(1, 2, 0.5)
    Ok(value=Range[1, 2, 0.5])

    ```
    """
    if start is None or stop is None:
        logger.debug("range called with start=%r, stop=%r", start, stop)
        return Err(ConfigurationError("Must provide both start and stop values"))
    return Ok(Iter(Range(start, stop, step)))


def reiterate[T](element: T) -> Iter[T]:
    """Yield `element` forever.

    ```python
    >>> import rune
    >>> it = rune.iterx.reiterate(5)
    >>> it
    Reiterate[5]
    >>> it.take(3).collect()
    Array {5, 5, 5}

    ```
    """
    return Iter(Reiterate(element))


def single_iterable[T](element: T) -> Iter[T]:
    """Yield `element` once, then stay exhausted.

    `None` is a value like any other here.

    Args:
        element (T): The value to yield.

    Returns:
        Iter[T]: A one-shot iterator.

    Example:
    ```python
    >>> import rune
    >>> it = rune.iterx.single_iterable("a")
    >>> it.next(), it.next(), it.next()
    (Some(value='a'), NONE, NONE)

    ```
    """
    return Iter(SingleIterable(element))


def cycle[T](sequence: Sequence[T]) -> Result[Iter[T], ConfigurationError]:
    """Yield the items of `sequence` in order, wrapping around forever.

    Mutating `sequence` while cycling over it is not supported.

    Args:
        sequence (Sequence[T]): A non-empty sequence.

    Returns:
        Result[Iter[T], ConfigurationError]: `Err` if `sequence` is not a `Sequence`, or is empty.

    Example:
    ```python
    >>> import rune
    >>> rune.iterx.cycle("ab").unwrap().take(5).collect()
    Array {"a", "b", "a", "b", "a"}
    >>> rune.iterx.cycle([]).is_err()
    True

    ```
    """
    if not isinstance(sequence, Sequence):
        logger.debug("cycle called with a %s", type(sequence).__name__)
        return Err(
            ConfigurationError(
                f"Expected a sequence to cycle over, got {type(sequence).__name__}"
            )
        )
    if len(sequence) == 0:
        logger.debug("cycle called with an empty sequence")
        return Err(ConfigurationError("Cannot cycle over an empty sequence"))
    return Ok(Iter(Cycle(sequence)))


def always_iterable(obj: Any) -> Iter[Any]:
    """Build an iterator out of anything.

    - an `Iter`, a `Pull` or a Python `Iterator` is pulled as-is
    - a `Mapping` yields its `(key, value)` pairs, in its own iteration order
    - a `str` yields its characters, `bytes` its one-byte slices
    - any other `Sequence` yields `(index, value)` pairs, starting at 0
    - any other `Collection` (`set`, `rune.Set`...) yields its members
    - anything else is yielded once

    Example:
    ```python
    >>> import rune
    >>> rune.iterx.always_iterable({"a": 1, "b": 2}).collect()
    Array {('a', 1), ('b', 2)}
    >>> rune.iterx.always_iterable("hi").collect()
    Array {"h", "i"}
    >>> rune.iterx.always_iterable(b"hi").collect()
    Array {b'h', b'i'}
    >>> rune.iterx.always_iterable([10, 20]).collect()
    Array {(0, 10), (1, 20)}
    >>> rune.iterx.always_iterable(42).collect()
    Array {42}

    ```
    """
    match obj:
        case Iter() | Pull():
            return Iter(obj)
        case Iterator():
            return Iter(FromIterable(obj))
        case Mapping():
            return Iter(FromIterable(obj.items()))
        case str():
            return Iter(FromIterable(obj))
        case bytes() | bytearray():
            return Iter(FromIterable(obj[i : i + 1] for i in builtins.range(len(obj))))
        case Sequence():
            return Iter(FromIterable(enumerate(obj)))
        case Collection():
            return Iter(FromIterable(obj))
        case _:
            return single_iterable(obj)


def count(start: Number = 0, step: Number = 1) -> Iter[Number]:
    """Count up from `start` by `step`, forever.

    The first value pulled is `start + step`.

    ```python
    >>> import rune
    >>> rune.iterx.count().take(3).collect()
    Array {1, 2, 3}
    >>> rune.iterx.count(0, 0.5).take(2).collect()
    Array {0.5, 1.0}

    ```
    """
    return Iter(Count(start, step))
