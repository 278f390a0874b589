from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping, MutableMapping
from typing import TYPE_CHECKING, Any, Self

import cytoolz as cz

from ._core import CommonBase, get_config
from ._results import NONE, Option, Some

if TYPE_CHECKING:
    from .iterx import Iter


def _identity_pair(position: int) -> tuple[int, int]:
    return position, position


class HashMap[K, V](CommonBase[dict[K, V]], MutableMapping[K, V]):
    """A hash map with a functional API.

    Implements the `MutableMapping` Protocol from `collections.abc`, so it can be passed to any function expecting a standard mutable mapping.

    The underlying data structure is a `dict`, so iteration follows insertion order.

    Args:
        obj (Mapping[K, V] | Iterable[tuple[K, V]] | None): A mapping, or an iterable of key/value pairs.
            Anything else (`None`, a string, a scalar) creates an empty HashMap.

    Example:
    ```python
    >>> import rune
    >>> rune.HashMap({"a": 1, "b": 2})
    HashMap {a=1, b=2}
    >>> rune.HashMap([("x", None)])
    HashMap {x=None}
    >>> rune.HashMap(42)
    HashMap {}

    ```
    """

    _inner: dict[K, V]

    __slots__ = ()

    def __init__(
        self, obj: Mapping[K, V] | Iterable[tuple[K, V]] | None = None
    ) -> None:
        if isinstance(obj, str) or not cz.itertoolz.isiterable(obj):
            data: dict[K, V] = {}
        else:
            data = dict(obj)  # type: ignore[arg-type]
        super().__init__(data)

    def __repr__(self) -> str:
        return f"HashMap {{{get_config().dict_repr(self._inner.items())}}}"

    def __getitem__(self, key: K) -> V:
        return self._inner[key]

    def __setitem__(self, key: K, value: V) -> None:
        self._inner[key] = value

    def __delitem__(self, key: K) -> None:
        del self._inner[key]

    def __iter__(self) -> Iterator[K]:
        return iter(self._inner)

    def __len__(self) -> int:
        return len(self._inner)

    def __add__(self, other: object) -> HashMap[K, V]:
        """Merge two mappings into a new HashMap, values of `other` winning.

        ```python
        >>> import rune
        >>> rune.HashMap({"a": 1, "b": 2}) + {"b": 3}
        HashMap {a=1, b=3}
        >>> rune.HashMap({"a": 1}) + "ignored"
        HashMap {a=1}

        ```
        """
        if not isinstance(other, Mapping):
            return HashMap(self._inner)
        return HashMap(cz.dicttoolz.merge(self._inner, other))

    def __radd__(self, other: object) -> HashMap[K, V]:
        if not isinstance(other, Mapping):
            return HashMap(self._inner)
        return HashMap(cz.dicttoolz.merge(other, self._inner))

    @staticmethod
    def initialize(
        n: int, func: Callable[..., tuple[Any, Any]] | None = None, *args: Any
    ) -> HashMap[Any, Any]:
        """Build a HashMap from the `(key, value)` pairs returned by `func(i, *args)`, for `i` in `1..n`.

        Without `func`, each position maps to itself.

        ```python
        >>> import rune
        >>> rune.HashMap.initialize(3)
        HashMap {1=1, 2=2, 3=3}
        >>> rune.HashMap.initialize(2, lambda i, prefix: (f"{prefix}{i}", i), "k")
        HashMap {k1=1, k2=2}

        ```
        """
        factory = func if func is not None else _identity_pair
        return HashMap(factory(position, *args) for position in range(1, n + 1))

    def add(self, key: K, value: V) -> Self:
        """Set `key` to `value` in place, and return the same HashMap."""
        self._inner[key] = value
        return self

    def update(self, mapping: object) -> Self:  # type: ignore[override]
        """Copy every entry of `mapping` in place, and return the same HashMap.

        Anything that is not a `Mapping` is ignored.

        ```python
        >>> import rune
        >>> rune.HashMap({"a": 1}).update({"b": 2}).update([("c", 3)])
        HashMap {a=1, b=2}

        ```
        """
        if isinstance(mapping, Mapping):
            self._inner.update(mapping)
        return self

    def map[R](self, func: Callable[..., R], *args: Any) -> HashMap[K, R]:
        """Return a new HashMap where each value is replaced by `func(key, value, *args)`.

        ```python
        >>> import rune
        >>> rune.HashMap({"a": 1, "b": 2}).map(lambda k, v: k * v)
        HashMap {a=a, b=bb}

        ```
        """
        return HashMap({key: func(key, value, *args) for key, value in self._inner.items()})

    def filter(self, func: Callable[..., object], *args: Any) -> HashMap[K, V]:
        """Return a new HashMap of the entries for which `func(key, value, *args)` is truthy.

        ```python
        >>> import rune
        >>> rune.HashMap({"a": 1, "b": 2, "c": 3}).filter(lambda k, v: v % 2)
        HashMap {a=1, c=3}

        ```
        """

        def _keep(item: tuple[K, V]) -> bool:
            return bool(func(*item, *args))

        return HashMap(cz.dicttoolz.itemfilter(_keep, self._inner))

    def foreach(self, func: Callable[..., object], *args: Any) -> Self:
        """Call `func(key, value, *args)` on every entry, and return the same HashMap."""
        for key, value in self._inner.items():
            func(key, value, *args)
        return self

    def has(self, key: K) -> bool:
        return key in self._inner

    def remove(self, key: K) -> Option[V]:
        """Remove `key`, returning its value if it was present.

        ```python
        >>> import rune
        >>> h = rune.HashMap({"a": 1})
        >>> h.remove("a"), h.remove("a")
        (Some(value=1), NONE)

        ```
        """
        if key not in self._inner:
            return NONE
        return Some(self._inner.pop(key))

    def iter(self) -> Iter[tuple[K, V]]:
        """Return a lazy `Iter` over the `(key, value)` pairs, in insertion order."""
        from .iterx import Iter

        return Iter(self._inner.items())
