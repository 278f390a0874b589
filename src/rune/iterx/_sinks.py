from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Final

from .._errors import MissingFunctionError
from .._results import NONE, Err, Ok, Option, Result, Some
from ._pull import PullLike, into_pull

if TYPE_CHECKING:
    from .._array import Array

logger = logging.getLogger(__name__)

ABSENT: Final = object()
"""Marker for an omitted `initial` argument, since `None` is a valid seed."""


def collect[T](it: PullLike[T]) -> Array[T]:
    """Drain `it` into a new `Array`, in pull order.

    Args:
        it (PullLike[T]): The iterator to drain.

    Returns:
        Array[T]: Every pulled value.

    Example:
    ```python
    >>> import rune
    >>> rune.iterx.collect(rune.iterx.count(10, -2).take(3))
    Array {8, 6, 4}
    >>> rune.iterx.collect([])
    Array {}

    ```
    """
    from .._array import Array

    pull = into_pull(it)
    values: list[T] = []
    while (item := pull()).is_some():
        values.append(item.unwrap())
    return Array(values)


def reduce[T, U](
    it: PullLike[T],
    func: Callable[[Any, T], U] | None,
    initial: Any = ABSENT,
) -> Result[Option[U], MissingFunctionError]:
    """Fold every value of `it` into an accumulator, from left to right.

    The accumulator is seeded with `initial` when given, otherwise with the first pulled value.

    Args:
        it (PullLike[T]): The iterator to drain.
        func (Callable[[Any, T], U] | None): Function called as `func(accumulator, value)`.
        initial (Any): Optional seed. `None` is a valid seed.

    Returns:
        Result[Option[U], MissingFunctionError]: `Err` if `func` is missing, `Ok(NONE)` if `it` is empty and no seed was given, `Ok(Some(accumulator))` otherwise.

    Example:
    ```python
    >>> import rune
    >>> rune.iterx.reduce([1, 2, 3, 4], lambda acc, x: acc * x)
    Ok(value=Some(value=24))
    >>> rune.iterx.reduce([], lambda acc, x: acc + x)
    Ok(value=NONE)
    >>> rune.iterx.reduce([], lambda acc, x: acc + x, 0)
    Ok(value=Some(value=0))
    >>> rune.iterx.reduce([1, 2], None)
    Err(error=MissingFunctionError('No reduction function provided'))

    ```
    """
    if not callable(func):
        logger.debug("reduce called without a reduction function: %r", func)
        return Err(MissingFunctionError("No reduction function provided"))
    pull = into_pull(it)
    if initial is ABSENT:
        match pull():
            case Some(first):
                accumulator = first
            case _:
                return Ok(NONE)
    else:
        accumulator = initial
    while (item := pull()).is_some():
        accumulator = func(accumulator, item.unwrap())
    return Ok(Some(accumulator))


def for_each[T](it: PullLike[T], func: Callable[[T], object]) -> None:
    """Drain `it`, calling `func` on every value for its side effects.

    ```python
    >>> import rune
    >>> seen = []
    >>> rune.iterx.for_each(rune.iterx.range(1, 3).unwrap(), seen.append)
    >>> seen
    [1, 2, 3]

    ```
    """
    pull = into_pull(it)
    while (item := pull()).is_some():
        func(item.unwrap())
