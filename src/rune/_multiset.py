from __future__ import annotations

from collections import Counter
from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING, Any, Self

import cytoolz as cz

from ._core import CommonBase, get_config
from .misc import is_integer

if TYPE_CHECKING:
    from ._array import Array
    from .iterx import Iter


def _as_count(value: object) -> int:
    return int(value) if is_integer(value) else 1  # type: ignore[call-overload]


def _is_positive(count: int) -> bool:
    return count > 0


def _counts(obj: object) -> Counter[Any]:
    match obj:
        case None:
            return Counter()
        case str():
            return Counter(obj)
        case Mapping():
            counts = cz.dicttoolz.valmap(_as_count, obj)
            return Counter(cz.dicttoolz.valfilter(_is_positive, counts))
        case _ if cz.itertoolz.isiterable(obj):
            return Counter(obj)  # type: ignore[arg-type]
        case _:
            return Counter({obj: 1})


class MultiSet[T](CommonBase[Counter[T]], Mapping[T, int]):
    """A bag: a collection counting how many times each element occurs.

    Implements the `Mapping` Protocol from `collections.abc`, mapping each element to its count.
    Missing elements have a count of 0, but are not members.

    The underlying data structure is a `collections.Counter`.

    Args:
        obj (object): What to count.
            - a `str` counts its characters
            - a `Mapping` adds integer values as counts, and counts other values once. Zero or negative counts are dropped
            - any other `Iterable` counts its items
            - `None` creates an empty MultiSet
            - anything else is counted once

    Example:
    ```python
    >>> import rune
    >>> rune.MultiSet("aab")
    MultiSet { a=2, b=1 }
    >>> rune.MultiSet({"x": 3, "y": "many"})
    MultiSet { x=3, y=1 }
    >>> rune.MultiSet()
    MultiSet {}

    ```
    """

    _inner: Counter[T]

    __slots__ = ()

    def __init__(self, obj: object = None) -> None:
        super().__init__(_counts(obj))

    def __repr__(self) -> str:
        if not self._inner:
            return "MultiSet {}"
        return f"MultiSet {{ {get_config().dict_repr(self._inner.items())} }}"

    def __getitem__(self, element: T) -> int:
        return self._inner[element]

    def __contains__(self, element: object) -> bool:
        return element in self._inner

    def __iter__(self) -> Iterator[T]:
        return iter(self._inner)

    def __len__(self) -> int:
        return len(self._inner)

    def __add__(self, other: Mapping[T, int]) -> MultiSet[T]:
        """Sum the counts of two multisets.

        ```python
        >>> import rune
        >>> rune.MultiSet("ab") + rune.MultiSet("bc")
        MultiSet { a=1, b=2, c=1 }

        ```
        """
        return MultiSet(self._inner + _counts(other))

    def add(self, element: T, n: int = 1) -> Self:
        """Count `element` `n` more times, in place, and return the same MultiSet.

        An element whose count ends at zero or below is not a member.
        """
        self._inner[element] += n
        if self._inner[element] <= 0:
            del self._inner[element]
        return self

    def remove(self, element: T, n: int = 1) -> Self:
        """Count `element` `n` fewer times, in place, and return the same MultiSet.

        Elements whose count drops to zero or below are no longer members.

        ```python
        >>> import rune
        >>> rune.MultiSet("aab").remove("a").remove("b")
        MultiSet { a=1 }

        ```
        """
        if element in self._inner:
            self._inner[element] -= n
            if self._inner[element] <= 0:
                del self._inner[element]
        return self

    def count(self, element: T) -> int:
        return self._inner[element]

    def total(self) -> int:
        """Sum of all counts."""
        return self._inner.total()

    def most_common(self, n: int | None = None) -> Array[tuple[T, int]]:
        """Return the `n` most common elements and their counts, most common first.

        Elements with equal counts keep their first-insertion order.

        ```python
        >>> import rune
        >>> rune.MultiSet("abbccc").most_common(2)
        Array {('c', 3), ('b', 2)}

        ```
        """
        from ._array import Array

        return Array(self._inner.most_common(n))

    def elements(self) -> Iter[T]:
        """Return a lazy `Iter` repeating each element as many times as it is counted.

        ```python
        >>> import rune
        >>> rune.MultiSet({"x": 2, "y": 1}).elements().collect()
        Array {"x", "x", "y"}

        ```
        """
        from .iterx import Iter

        return Iter(self._inner.elements())
