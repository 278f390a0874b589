"""Small predicates that do not belong to any container."""

from __future__ import annotations

import logging
from collections.abc import Collection
from numbers import Real

from ._errors import ConfigurationError
from ._results import Err, Ok, Result

logger = logging.getLogger(__name__)


def is_integer(n: object) -> bool:
    """Check whether `n` is a number with no fractional part.

    Booleans are not considered numbers.

    ```python
    >>> from rune import misc
    >>> misc.is_integer(3), misc.is_integer(3.0), misc.is_integer(3.5)
    (True, True, False)
    >>> misc.is_integer("3"), misc.is_integer(True)
    (False, False)

    ```
    """
    match n:
        case bool():
            return False
        case int():
            return True
        case float():
            return n.is_integer()
        case Real():
            return int(n) == n
        case _:
            return False


def is_empty(obj: object) -> Result[bool, ConfigurationError]:
    """Check whether a collection holds no element.

    Args:
        obj (object): A `Collection` (a list, a dict, a `rune.Array`...).

    Returns:
        Result[bool, ConfigurationError]: `Err` if `obj` is not a collection.

    Example:
    ```python
    >>> import rune
    >>> rune.misc.is_empty([]), rune.misc.is_empty(rune.HashMap({"a": 1}))
    (Ok(value=True), Ok(value=False))
    >>> rune.misc.is_empty(42)
    Err(error=ConfigurationError('Expected a collection, got int'))

    ```
    """
    if not isinstance(obj, Collection):
        logger.debug("is_empty called with a %s", type(obj).__name__)
        return Err(ConfigurationError(f"Expected a collection, got {type(obj).__name__}"))
    return Ok(len(obj) == 0)
