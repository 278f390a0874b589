"""Lazy, pull-based iterator combinators.

A pull iterator is a zero-argument callable returning `Some(value)`, or `NONE` once exhausted.

Every combinator is available in two styles, which can be mixed freely:

- functional: `rune.iterx.take(rune.iterx.count(), 3)`
- fluent: `rune.iterx.count().take(3)`

```python
>>> import rune
>>> rune.iterx.range(1, 10).unwrap().filter(lambda x: x % 2).map(str).collect()
Array {"1", "3", "5", "7", "9"}

```
"""

from ._fluent import Iter
from ._functional import (
    chain,
    filter,
    from_fn,
    map,
    skip,
    skip_while,
    take,
    take_while,
    terminate,
    wrap,
    zip,
)
from ._pull import FromFn, FromIterable, Pull, PullLike, into_pull
from ._sinks import collect, for_each, reduce
from ._sources import always_iterable, count, cycle, range, reiterate, single_iterable

__all__ = [
    "FromFn",
    "FromIterable",
    "Iter",
    "Pull",
    "PullLike",
    "always_iterable",
    "chain",
    "collect",
    "count",
    "cycle",
    "filter",
    "for_each",
    "from_fn",
    "into_pull",
    "map",
    "range",
    "reduce",
    "reiterate",
    "single_iterable",
    "skip",
    "skip_while",
    "take",
    "take_while",
    "terminate",
    "wrap",
    "zip",
]
