from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, MutableSet
from typing import TYPE_CHECKING, Any, Self

import cytoolz as cz

from ._core import CommonBase, get_config

if TYPE_CHECKING:
    from .iterx import Iter


def _members(obj: object) -> set[Any]:
    match obj:
        case None:
            return set()
        case Mapping():
            return set(obj.keys())
        case str():
            return {obj}
        case _ if cz.itertoolz.isiterable(obj):
            return set(obj)  # type: ignore[call-overload]
        case _:
            return {obj}


class Set[T](CommonBase[set[T]], MutableSet[T]):
    """An unordered collection of unique members.

    Implements the `MutableSet` Protocol from `collections.abc`, so `|`, `-`, `^`, comparisons and `isdisjoint` come for free, and it can be passed to any function expecting a standard mutable set.

    The underlying data structure is a `set`.

    Args:
        obj (Iterable[T] | Mapping[T, Any] | T | None): Members to hold.
            - a `Mapping` provides its keys
            - a `str` is a single member
            - any other `Iterable` provides its items
            - `None` creates an empty Set
            - anything else is the single member

    Example:
    ```python
    >>> import rune
    >>> rune.Set([1, 2, 2])
    Set {1, 2}
    >>> rune.Set({"a": 1})
    Set {a}
    >>> rune.Set("abc").contains("abc")
    True
    >>> rune.Set(None)
    Set {}

    ```
    """

    _inner: set[T]

    __slots__ = ()

    def __init__(self, obj: Iterable[T] | Mapping[T, Any] | T | None = None) -> None:
        super().__init__(_members(obj))

    def __repr__(self) -> str:
        return f"Set {{{get_config().iter_repr(map(str, self._inner))}}}"

    def __contains__(self, item: object) -> bool:
        return item in self._inner

    def __iter__(self) -> Iterator[T]:
        return iter(self._inner)

    def __len__(self) -> int:
        return len(self._inner)

    def __add__(self, other: object) -> Set[T]:
        return self.union(other)

    def __radd__(self, other: object) -> Set[T]:
        return self.union(other)

    def __and__(self, other: object) -> Set[T]:
        """Intersect with `other`, converted to a Set first.

        ```python
        >>> import rune
        >>> rune.Set([1, 2, 3]) & [2, 3, 4]
        Set {2, 3}
        >>> rune.Set([1, 2]) & 2
        Set {2}

        ```
        """
        return self.intersection(other)

    def __rand__(self, other: object) -> Set[T]:
        return self.intersection(other)

    def add(self, key: T) -> Self:  # type: ignore[override]
        """Add `key` in place, and return the same Set."""
        self._inner.add(key)
        return self

    def discard(self, key: T) -> None:
        self._inner.discard(key)

    def remove(self, key: T) -> Self:  # type: ignore[override]
        """Remove `key` in place if present, and return the same Set.

        ```python
        >>> import rune
        >>> rune.Set([1, 2]).remove(2).remove(3)
        Set {1}

        ```
        """
        self._inner.discard(key)
        return self

    def union(self, other: object) -> Set[T]:
        """Return a new Set with the members of both `self` and `other`.

        `other` is converted with the `Set` constructor.

        ```python
        >>> import rune
        >>> rune.Set([1]).union([2, 3])
        Set {1, 2, 3}
        >>> rune.Set([1]) + rune.Set([1, 2])
        Set {1, 2}

        ```
        """
        return Set(self._inner | _members(other))

    def intersection(self, other: object) -> Set[T]:
        """Return a new Set with the members found in both `self` and `other`."""
        return Set(self._inner & _members(other))

    def difference(self, other: object) -> Set[T]:
        """Return a new Set with the members of `self` that are not in `other`.

        ```python
        >>> import rune
        >>> rune.Set([1, 2, 3]).difference({2: "two"})
        Set {1, 3}
        >>> rune.Set([1, 2, 3]) - [3]
        Set {1, 2}

        ```
        """
        return Set(self._inner - _members(other))

    def contains(self, needle: object) -> bool:
        return needle in self._inner

    def items(self) -> Iter[T]:
        """Return a lazy `Iter` over the members, in no particular order."""
        from .iterx import Iter

        return Iter(self._inner)
