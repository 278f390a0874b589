from ._config import Config, get_config, set_config
from ._format import quote, render, strip_address
from ._logging import configure_logging
from ._main import CommonBase, Pipeable

__all__ = [
    "CommonBase",
    "Config",
    "Pipeable",
    "configure_logging",
    "get_config",
    "quote",
    "render",
    "set_config",
    "strip_address",
]
