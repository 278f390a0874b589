from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, MutableSequence, Sequence
from typing import TYPE_CHECKING, Any, Self, overload

import cytoolz as cz

from ._core import CommonBase, get_config, quote
from ._results import Err, Ok, Result

if TYPE_CHECKING:
    from .iterx import Iter, PullLike

logger = logging.getLogger(__name__)


def _render_item(item: object) -> str:
    return quote(item) if isinstance(item, str) else repr(item)


def _as_items(obj: object) -> list[Any]:
    if isinstance(obj, Sequence) and not isinstance(obj, str):
        return list(obj)
    return [obj]


class Array[T](CommonBase[list[T]], MutableSequence[T]):
    """An ordered, growable sequence with a functional API.

    Implements the `MutableSequence` Protocol from `collections.abc`, so it can be passed to any function expecting a standard mutable sequence.

    Most methods return a new `Array`. `append` and `foreach` are the exceptions, returning the same instance.

    The underlying data structure is a `list`.

    Args:
        obj (Iterable[T] | T | None): Items to hold.
            - any `Iterable` (except `str`) provides the items
            - `None` creates an empty Array
            - anything else becomes the single item of the Array

    Example:
    ```python
    >>> import rune
    >>> rune.Array([1, "a", None])
    Array {1, "a", None}
    >>> rune.Array("abc")
    Array {"abc"}
    >>> rune.Array(0.3)
    Array {0.3}
    >>> rune.Array()
    Array {}

    ```
    """

    _inner: list[T]

    __slots__ = ()

    def __init__(self, obj: Iterable[T] | T | None = None) -> None:
        if obj is None:
            data: list[T] = []
        elif isinstance(obj, str) or not cz.itertoolz.isiterable(obj):
            data = [obj]  # type: ignore[list-item]
        else:
            data = list(obj)  # type: ignore[arg-type]
        super().__init__(data)

    def __repr__(self) -> str:
        return f"Array {{{get_config().iter_repr(map(_render_item, self._inner))}}}"

    def __len__(self) -> int:
        return len(self._inner)

    def __iter__(self) -> Iterator[T]:
        return iter(self._inner)

    @overload
    def __getitem__(self, index: int) -> T: ...
    @overload
    def __getitem__(self, index: slice) -> Array[T]: ...
    def __getitem__(self, index: int | slice) -> T | Array[T]:
        if isinstance(index, slice):
            return Array(self._inner[index])
        return self._inner[index]

    @overload
    def __setitem__(self, index: int, value: T) -> None: ...
    @overload
    def __setitem__(self, index: slice, value: Iterable[T]) -> None: ...
    def __setitem__(self, index: int | slice, value: T | Iterable[T]) -> None:
        self._inner[index] = value  # type: ignore[index, assignment]

    def __delitem__(self, index: int | slice) -> None:
        del self._inner[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str) or not isinstance(other, Sequence):
            return NotImplemented
        return len(self) == len(other) and all(
            mine == theirs for mine, theirs in zip(self._inner, other, strict=True)
        )

    def __add__(self, other: Sequence[T] | T) -> Array[T]:
        return Array([*self._inner, *_as_items(other)])

    def __radd__(self, other: Sequence[T] | T) -> Array[T]:
        return Array([*_as_items(other), *self._inner])

    def __iadd__(self, other: Iterable[T]) -> Self:
        self._inner.extend(other)
        return self

    def insert(self, index: int, value: T) -> None:
        """Insert `value` before position `index` (0-based)."""
        self._inner.insert(index, value)

    def clear(self) -> None:
        self._inner.clear()

    @staticmethod
    def range(n: int, m: int | None = None) -> Array[int]:
        """Create an Array of consecutive integers.

        Args:
            n (int): Upper bound (from 1) if `m` is omitted, lower bound otherwise.
            m (int | None): Inclusive upper bound.

        Returns:
            Array[int]: `1..n`, or `n..m`. Empty if `n` is not an integer.

        Example:
        ```python
        >>> import rune
        >>> rune.Array.range(3)
        Array {1, 2, 3}
        >>> rune.Array.range(4, 6)
        Array {4, 5, 6}
        >>> rune.Array.range("3")
        Array {}

        ```
        """
        if isinstance(n, bool) or not isinstance(n, int):
            return Array()
        if m is None:
            return Array(range(1, n + 1))
        return Array(range(n, m + 1))

    @staticmethod
    def from_iterator[U](it: PullLike[U]) -> Array[U]:
        """Drain a pull iterator (or any iterable) into a new Array.

        ```python
        >>> import rune
        >>> rune.Array.from_iterator(rune.iterx.count(0, 5).take(3))
        Array {5, 10, 15}

        ```
        """
        from .iterx import collect

        return collect(it)

    @staticmethod
    def initialize[U](size: int, func: Callable[[int], U] | None = None) -> Array[U]:
        """Create an Array of `size` items, computed from their 1-based position.

        Args:
            size (int): Number of items.
            func (Callable[[int], U] | None): Called with each position. Defaults to the position itself.

        Example:
        ```python
        >>> import rune
        >>> rune.Array.initialize(3, lambda n: n * n)
        Array {1, 4, 9}

        ```
        """
        factory = func if func is not None else cz.functoolz.identity
        return Array(factory(position) for position in range(1, size + 1))

    def append(self, obj: T) -> Self:  # type: ignore[override]
        """Append `obj` in place, and return the same Array.

        ```python
        >>> import rune
        >>> rune.Array([1]).append(2).append(3)
        Array {1, 2, 3}

        ```
        """
        self._inner.append(obj)
        return self

    def foreach(self, func: Callable[..., object], *args: Any) -> Self:
        """Call `func(item, *args)` on every item, and return the same Array."""
        for item in self._inner:
            func(item, *args)
        return self

    def map[R](self, func: Callable[..., R], *args: Any) -> Array[R]:
        """Return a new Array of `func(item, *args)` for every item.

        ```python
        >>> import rune
        >>> rune.Array.range(3).map(lambda x: x * 2)
        Array {2, 4, 6}
        >>> rune.Array([1, 2]).map(pow, 3)
        Array {1, 8}

        ```
        """
        return Array(func(item, *args) for item in self._inner)

    def filter(self, func: Callable[..., object] | None = None, *args: Any) -> Array[T]:
        """Return a new Array of the items for which `func(item, *args)` is truthy.

        Without `func`, every item is kept.

        ```python
        >>> import rune
        >>> rune.Array.range(6).filter(lambda x: x % 2 == 0)
        Array {2, 4, 6}

        ```
        """
        if func is None:
            return self.copy()
        return Array(item for item in self._inner if func(item, *args))

    def filtermap[R](
        self, func: Callable[..., R | None] | None = None, *args: Any
    ) -> Array[R]:
        """Map `func(item, *args)` over the items, dropping `None` results.

        Without `func`, only `None` items are dropped.

        ```python
        >>> import rune
        >>> rune.Array([1, None, 3]).filtermap()
        Array {1, 3}
        >>> rune.Array.range(5).filtermap(lambda x: x * 10 if x % 2 else None)
        Array {10, 30, 50}

        ```
        """
        factory = func if func is not None else cz.functoolz.identity
        mapped = (factory(item, *args) for item in self._inner)
        return Array(value for value in mapped if value is not None)

    def extend(self, item: Sequence[T] | T) -> Array[T]:  # type: ignore[override]
        """Return a new Array with `item` added at the end, like `+`.

        A sequence is concatenated, any other object is appended.

        ```python
        >>> import rune
        >>> rune.Array([1]).extend([2, 3]).extend(4)
        Array {1, 2, 3, 4}

        ```
        """
        return self + item

    def len(self) -> int:
        """Return the number of items."""
        return len(self._inner)

    def copy(self) -> Array[T]:
        """Return a shallow copy."""
        return Array(self._inner.copy())

    def pop(self) -> Result[T, IndexError]:  # type: ignore[override]
        """Remove and return the last item.

        Returns:
            Result[T, IndexError]: `Err` if the Array is empty.

        Example:
        ```python
        >>> import rune
        >>> arr = rune.Array([1, 2])
        >>> arr.pop()
        Ok(value=2)
        >>> arr.pop(), arr.pop()
        (Ok(value=1), Err(error=IndexError('Array is of length 0')))

        ```
        """
        if not self._inner:
            logger.debug("pop called on an empty Array")
            return Err(IndexError("Array is of length 0"))
        return Ok(self._inner.pop())

    def remove(self, index: int) -> Result[T, IndexError | TypeError]:  # type: ignore[override]
        """Remove and return the item at `index` (0-based, negative values count from the end).

        Args:
            index (int): Position of the item to remove.

        Returns:
            Result[T, IndexError | TypeError]: `Err` if `index` is not an integer, or out of range.

        Example:
        ```python
        >>> import rune
        >>> arr = rune.Array(["a", "b", "c"])
        >>> arr.remove(1)
        Ok(value='b')
        >>> arr.remove(-1)
        Ok(value='c')
        >>> arr.remove(5)
        Err(error=IndexError('Index is larger than length of Array'))
        >>> arr.remove("0")
        Err(error=TypeError('Given index is not an integer'))
        >>> arr
        Array {"a"}

        ```
        """
        if isinstance(index, bool) or not isinstance(index, int):
            logger.debug("remove called with a non-integer index: %r", index)
            return Err(TypeError("Given index is not an integer"))
        if not self._inner:
            logger.debug("remove called on an empty Array")
            return Err(IndexError("Array is of length 0"))
        if not -len(self._inner) <= index < len(self._inner):
            logger.debug("remove index %d out of range for length %d", index, len(self))
            return Err(IndexError("Index is larger than length of Array"))
        return Ok(self._inner.pop(index))

    def iter(self) -> Iter[T]:
        """Return a lazy `Iter` over the items.

        ```python
        >>> import rune
        >>> rune.Array.range(10).iter().filter(lambda x: x > 7).collect()
        Array {8, 9, 10}

        ```
        """
        from .iterx import Iter

        return Iter(self._inner)
