from __future__ import annotations

import dataclasses
import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass

import more_itertools as mit

logger = logging.getLogger(__name__)

ENV_PREFIX = "RUNE_"


@dataclass(slots=True, frozen=True)
class Config:
    """Process-wide display settings.

    Args:
        max_items (int): Number of items rendered by container reprs before truncating with `...`.
        pprint_indent (int): Default number of spaces per nesting level used by `rune.pprint`.
    """

    max_items: int = 20
    pprint_indent: int = 2

    def iter_repr(self, rendered: Iterable[str]) -> str:
        """Join already-rendered items with `, `, keeping at most `max_items` of them.

        ```python
        >>> from rune._core import Config
        >>> Config(max_items=2).iter_repr(["1", "2", "3"])
        '1, 2, ...'

        ```
        """
        items = iter(rendered)
        head = mit.take(self.max_items, items)
        suffix = [] if mit.first(items, None) is None else ["..."]
        return ", ".join([*head, *suffix])

    def dict_repr(self, pairs: Iterable[tuple[object, object]]) -> str:
        """Render key/value pairs as `key=value`, truncated like `iter_repr`."""
        return self.iter_repr(f"{key}={value}" for key, value in pairs)


def _from_env() -> Config:
    values: dict[str, int] = {}
    for field in dataclasses.fields(Config):
        name = f"{ENV_PREFIX}{field.name.upper()}"
        if (raw := os.environ.get(name)) is None:
            continue
        try:
            values[field.name] = int(raw)
        except ValueError:
            logger.warning("Ignoring %s=%r, expected an integer", name, raw)
    return Config(**values)


_CONFIG = _from_env()


def get_config() -> Config:
    """Return the active `Config`.

    ```python
    >>> import rune
    >>> rune.get_config().pprint_indent
    2

    ```
    """
    return _CONFIG


def set_config(**changes: int) -> Config:
    """Replace fields of the active `Config` and return the new one.

    Raises:
        TypeError: If a field name is unknown.
    """
    global _CONFIG  # noqa: PLW0603
    _CONFIG = dataclasses.replace(_CONFIG, **changes)
    logger.debug("Configuration updated: %s", _CONFIG)
    return _CONFIG
