"""Collection utilities built around lazy, pull-based iterators.

```python
>>> import rune
>>> rune.Array.range(10).iter().skip(7).map(lambda x: x * x).collect()
Array {64, 81, 100}

```
"""

import logging

from . import iterx, misc, stringx, tablex
from ._array import Array
from ._core import Config, configure_logging, get_config, set_config
from ._errors import ConfigurationError, MissingFunctionError
from ._hashmap import HashMap
from ._multiset import MultiSet
from ._pprint import dump, pprint
from ._results import (
    NONE,
    Err,
    NoneOption,
    Ok,
    Option,
    OptionUnwrapError,
    Result,
    ResultUnwrapError,
    Some,
)
from ._set import Set
from .iterx import Iter

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "NONE",
    "Array",
    "Config",
    "ConfigurationError",
    "Err",
    "HashMap",
    "Iter",
    "MissingFunctionError",
    "MultiSet",
    "NoneOption",
    "Ok",
    "Option",
    "OptionUnwrapError",
    "Result",
    "ResultUnwrapError",
    "Set",
    "Some",
    "configure_logging",
    "dump",
    "get_config",
    "iterx",
    "misc",
    "pprint",
    "set_config",
    "stringx",
    "tablex",
]
