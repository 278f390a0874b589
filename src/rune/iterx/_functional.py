"""Functional forms of the transform combinators.

Each function accepts anything `into_pull` does as its first argument, and returns the same lazy `Iter` as the matching `Iter` method.
"""

from __future__ import annotations

from collections.abc import Callable

from ._fluent import Iter
from ._pull import FromFn, PullLike, into_pull
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


def wrap[T](pull: PullLike[T]) -> Iter[T]:
    """Wrap a pull callable (or any iterable) in the fluent adapter.

    ```python
    >>> import rune
    >>> from rune import Some, NONE
    >>> values = iter([Some(1), NONE])
    >>> rune.iterx.wrap(lambda: next(values)).map(str).collect()
    Array {"1"}

    ```
    """
    return Iter(pull)


def from_fn[T](func: Callable[[], T | None]) -> Iter[T]:
    """Adapt a callable returning `None` once it is exhausted.

    This is the only entry point where `None` means "no more values".
    Everywhere else, `None` is data and exhaustion is `NONE`.

    Example:
    ```python
    >>> import rune
    >>> stack = [1, 2, 3]
    >>> rune.iterx.from_fn(lambda: stack.pop() if stack else None).collect()
    Array {3, 2, 1}

    ```
    """
    return Iter(FromFn(func))


def map[T, R](it: PullLike[T], func: Callable[[T], R]) -> Iter[R]:  # noqa: A001
    """Apply `func` to every value of `it`.

    ```python
    >>> import rune
    >>> rune.iterx.map("abc", str.upper).collect()
    Array {"A", "B", "C"}

    ```
    """
    return Iter(Map(into_pull(it), func))


def filter[T](it: PullLike[T], func: Callable[[T], object]) -> Iter[T]:  # noqa: A001
    """Keep the values of `it` for which `func` is truthy."""
    return Iter(Filter(into_pull(it), func))


def take[T](it: PullLike[T], n: int) -> Iter[T]:
    """Yield at most `n` values of `it`.

    ```python
    >>> import rune
    >>> rune.iterx.take(rune.iterx.reiterate(5), 5).collect()
    Array {5, 5, 5, 5, 5}

    ```
    """
    return Iter(Take(into_pull(it), n))


def skip[T](it: PullLike[T], n: int) -> Iter[T]:
    """Discard the first `n` values of `it`."""
    return Iter(Skip(into_pull(it), n))


def skip_while[T](it: PullLike[T], func: Callable[[T], object]) -> Iter[T]:
    """Discard values of `it` while `func` is truthy."""
    return Iter(SkipWhile(into_pull(it), func))


def take_while[T](it: PullLike[T], func: Callable[[T], object]) -> Iter[T]:
    """Yield values of `it` while `func` is truthy."""
    return Iter(TakeWhile(into_pull(it), func))


def chain[T](it: PullLike[T], other: PullLike[T]) -> Iter[T]:
    """Yield every value of `it`, then every value of `other`."""
    return Iter(Chain(into_pull(it), into_pull(other)))


def zip[T, U](it: PullLike[T], other: PullLike[U]) -> Iter[tuple[T, U]]:  # noqa: A001
    """Pair values of `it` and `other` until either is exhausted.

    ```python
    >>> import rune
    >>> rune.iterx.zip([1, 2, 3], "ab").collect()
    Array {(1, 'a'), (2, 'b')}

    ```
    """
    return Iter(Zip(into_pull(it), into_pull(other)))


def terminate[T](it: PullLike[T]) -> Iter[T]:
    """Stay exhausted after the first `NONE` of `it`.

    ```python
    >>> import rune
    >>> from rune import Some, NONE
    >>> flip = iter([Some(1), NONE, Some(2), NONE])
    >>> it = rune.iterx.terminate(lambda: next(flip))
    >>> it(), it(), it()
    (Some(value=1), NONE, NONE)

    ```
    """
    return Iter(Terminate(into_pull(it)))

