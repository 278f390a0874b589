"""String helpers returning lazy iterators.

Every splitting function returns an `Iter`, so the pieces can be transformed before being collected.

```python
>>> from rune import stringx
>>> stringx.words("  the quick  fox ").map(str.title).collect()
Array {"The", "Quick", "Fox"}

```
"""

from __future__ import annotations

import re
import textwrap

from .iterx import Iter

_WORD = re.compile(r"\S+")


def _matches(pattern: re.Pattern[str], text: str) -> Iter[str]:
    return Iter(pattern.finditer(text)).map(re.Match.group)


def split(text: str, separator: str | None = None) -> Iter[str]:
    """Split `text` into the runs of characters not found in `separator`.

    `separator` is a set of characters, not a substring: any of them ends a run.
    Empty runs are never produced.

    Args:
        text (str): The text to split.
        separator (str | None): Characters to split on. Defaults to whitespace.

    Returns:
        Iter[str]: The runs, in order.

    Example:
    ```python
    >>> from rune import stringx
    >>> stringx.split("a,b;;c", ",;").collect()
    Array {"a", "b", "c"}
    >>> stringx.split("1-2-3", "-").collect()
    Array {"1", "2", "3"}
    >>> stringx.split(" spaced   out ").collect()
    Array {"spaced", "out"}

    ```
    """
    if not separator:
        return _matches(_WORD, text)
    return _matches(re.compile(f"[^{re.escape(separator)}]+"), text)


def chars(text: str) -> Iter[str]:
    """Iterate over the characters of `text`.

    ```python
    >>> from rune import stringx
    >>> stringx.chars("hey").collect()
    Array {"h", "e", "y"}

    ```
    """
    return Iter(text)


def words(text: str) -> Iter[str]:
    """Iterate over the whitespace-separated words of `text`."""
    return _matches(_WORD, text)


def lines(text: str) -> Iter[str]:
    """Iterate over the lines of `text`, without their line endings.

    ```python
    >>> from rune import stringx
    >>> stringx.lines("one\\ntwo\\r\\n").collect()
    Array {"one", "two"}

    ```
    """
    return Iter(text.splitlines())


def trim(text: str) -> str:
    """Strip leading and trailing whitespace."""
    return text.strip()


def dedent(text: str) -> str:
    """Remove the whitespace prefix common to every line of `text`.

    ```python
    >>> from rune import stringx
    >>> print(stringx.dedent("    a\\n      b"))
    a
      b

    ```
    """
    return textwrap.dedent(text)
