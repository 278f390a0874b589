from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from collections.abc import Set as AbstractSet
from numbers import Real

from rich.console import Console

from ._core import get_config, quote
from .tablex import as_key, compare_anything

CYCLE = "... (cycle)"


def _entries(obj: object) -> Iterable[tuple[object, object]]:
    match obj:
        case Mapping():
            return obj.items()
        case AbstractSet():
            return enumerate(sorted(obj, key=as_key(compare_anything)))
        case _:
            return enumerate(obj)  # type: ignore[arg-type]


def _render_key(key: object) -> str:
    if isinstance(key, Real) and not isinstance(key, bool):
        return repr(key)
    return quote(str(key))


def _is_container(obj: object) -> bool:
    return isinstance(obj, Mapping | AbstractSet) or (
        isinstance(obj, Sequence) and not isinstance(obj, str | bytes)
    )


def pprint(
    obj: object,
    indent: int | None = None,
    level: int = 1,
    _ancestors: frozenset[int] = frozenset(),
) -> str:
    """Render `obj` as an indented, human readable string.

    Containers (mappings, sequences and sets) are rendered one `[key] = value,` entry per line.
    Sequences use their 0-based index as key, sets their sorted position.
    Strings are double-quoted, other values use their `repr`.

    A container found inside itself renders as `... (cycle)` instead of recursing forever.

    Args:
        obj (object): The value to render.
        indent (int | None): Spaces per nesting level. Defaults to `get_config().pprint_indent`.
        level (int): Nesting level of `obj`, starting at 1.

    Returns:
        str: The rendering, without a trailing newline.

    Example:
    ```python
    >>> import rune
    >>> print(rune.pprint({"a": [1, "x"], 2: None}))
    {
      ["a"] = {
        [0] = 1,
        [1] = "x",
      },
      [2] = None,
    }
    >>> loop = {"name": "loop"}
    >>> loop["self"] = loop
    >>> print(rune.pprint(loop, indent=4))
    {
        ["name"] = "loop",
        ["self"] = ... (cycle),
    }
    >>> rune.pprint([]), rune.pprint("hi"), rune.pprint(1.5)
    ('{}', '"hi"', '1.5')

    ```
    """
    if isinstance(obj, str):
        return quote(obj)
    if not _is_container(obj):
        return repr(obj)
    if id(obj) in _ancestors:
        return CYCLE
    width = indent if indent is not None else get_config().pprint_indent
    entries = list(_entries(obj))
    if not entries:
        return "{}"
    seen = _ancestors | {id(obj)}
    padding = " " * (level * width)
    lines = [
        f"{padding}[{_render_key(key)}] = {pprint(value, width, level + 1, seen)},"
        for key, value in entries
    ]
    closing = " " * ((level - 1) * width)
    return "\n".join(["{", *lines, f"{closing}}}"])


def dump(obj: object, indent: int | None = None) -> None:
    """Print the `pprint` rendering of `obj` to standard output."""
    Console(soft_wrap=True).print(
        pprint(obj, indent), markup=False, highlight=False, emoji=False
    )
