"""Ordering and flattening helpers for heterogeneous data."""

from __future__ import annotations

import functools
from collections.abc import Callable, Iterable, Iterator, Mapping, MutableSequence, Sequence
from collections.abc import Set as AbstractSet
from enum import IntEnum
from numbers import Real
from typing import TYPE_CHECKING, Any

import cytoolz as cz

if TYPE_CHECKING:
    from ._array import Array

type Before = Callable[[Any, Any], bool]


class Rank(IntEnum):
    """Position of each kind of value in the `compare_anything` ordering."""

    NONE = 1
    BOOL = 2
    NUMBER = 3
    STRING = 4
    CALLABLE = 5
    OTHER = 6
    CONTAINER = 7


def _rank(value: object) -> Rank:
    match value:
        case None:
            return Rank.NONE
        case bool():
            return Rank.BOOL
        case Real():
            return Rank.NUMBER
        case str():
            return Rank.STRING
        case Sequence() | Mapping() | AbstractSet():
            return Rank.CONTAINER
        case _ if callable(value):
            return Rank.CALLABLE
        case _:
            return Rank.OTHER


def _elements(container: Any) -> list[Any]:
    match container:
        case Mapping():
            return list(container.items())
        case AbstractSet():
            return sorted(container, key=as_key(compare_anything))
        case _:
            return list(container)


type _Pairs = frozenset[tuple[int, int]]


def _lexicographic(left: list[Any], right: list[Any], seen: _Pairs) -> bool:
    for mine, theirs in zip(left, right, strict=False):
        if _before(mine, theirs, seen):
            return True
        if _before(theirs, mine, seen):
            return False
    return len(left) < len(right)


def _before(a: Any, b: Any, seen: _Pairs) -> bool:
    rank_a, rank_b = _rank(a), _rank(b)
    if rank_a != rank_b:
        return rank_a < rank_b
    if a is b:
        return False
    match rank_a:
        case Rank.NONE:
            return False
        case Rank.BOOL:
            return a and not b
        case Rank.NUMBER | Rank.STRING:
            return a < b
        case Rank.CONTAINER:
            pair = (id(a), id(b))
            if pair in seen:
                return False
            return _lexicographic(_elements(a), _elements(b), seen | {pair})
        case _:
            return repr(a) < repr(b)


def compare_anything(a: Any, b: Any) -> bool:
    """Check whether `a` comes strictly before `b`, whatever their types.

    Values of different kinds are ordered as follows: `None`, booleans, numbers, strings, callables, other objects, containers.

    Within a kind:
        - `True` comes before `False`
        - numbers and strings use `<`
        - callables and other objects compare their `repr`
        - sequences compare lexicographically, element by element, with `compare_anything`
        - mappings compare their `(key, value)` pairs in iteration order, sets their sorted members
        - a pair of containers met again while comparing their own contents counts as equal

    Args:
        a (Any): First value.
        b (Any): Second value.

    Returns:
        bool: True if `a` sorts before `b`.

    Example:
    ```python
    >>> from rune import tablex
    >>> tablex.compare_anything(None, 0), tablex.compare_anything("a", 1)
    (True, False)
    >>> tablex.compare_anything(True, False)
    True
    >>> tablex.compare_anything([1, 2], [1, 3]), tablex.compare_anything([1, 2], [1])
    (True, False)

    ```
    """
    return _before(a, b, frozenset())


def as_key(before: Before) -> Callable[[Any], Any]:
    """Turn a "comes before" predicate into a `key` function for `sorted`, `min` or `max`."""

    def _cmp(a: Any, b: Any) -> int:
        if before(a, b):
            return -1
        if before(b, a):
            return 1
        return 0

    return functools.cmp_to_key(_cmp)


def sort[S: MutableSequence[Any]](values: S, func: Before | None = None) -> S:
    """Sort `values` in place, and return it.

    Args:
        values (S): A mutable sequence, such as a `list` or a `rune.Array`.
        func (Before | None): A "comes before" predicate. Defaults to `compare_anything`.

    Returns:
        S: The same sequence, sorted.

    Example:
    ```python
    >>> import rune
    >>> rune.tablex.sort(["b", 2, None, True, "a", 1.5])
    [None, True, 1.5, 2, 'a', 'b']
    >>> rune.tablex.sort(rune.Array([3, 1, 2]), lambda a, b: a > b)
    Array {3, 2, 1}

    ```
    """
    before = func if func is not None else compare_anything
    values[:] = sorted(values, key=as_key(before))
    return values


def _walk(values: Iterable[Any], ancestors: frozenset[int]) -> Iterator[Any]:
    for value in values:
        if isinstance(value, str | bytes) or not cz.itertoolz.isiterable(value):
            yield value
        elif id(value) not in ancestors:
            yield from _walk(value, ancestors | {id(value)})


def flatten(values: Iterable[Any]) -> Array[Any]:
    """Collapse nested iterables into a flat `Array`, depth first.

    Strings and bytes are kept whole. A container nested inside itself is skipped where it reappears.

    ```python
    >>> from rune import tablex
    >>> tablex.flatten([1, [2, [3, "four"]], (5,)])
    Array {1, 2, 3, "four", 5}
    >>> loop = [1]
    >>> loop.append(loop)
    >>> tablex.flatten(loop)
    Array {1}

    ```
    """
    from ._array import Array

    return Array(_walk(values, frozenset({id(values)})))
