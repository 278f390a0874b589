"""Logging helpers.

rune is silent by default: the package logger only carries a `NullHandler`.
Applications that want to see what the library reports (fallible constructors
log their `Err` returns at DEBUG) can attach a Rich console handler with
`configure_logging`.
"""

from __future__ import annotations

import logging
from typing import Literal

from rich.console import Console
from rich.logging import RichHandler

PROJECT_PREFIX = "rune"

type ColorSystem = Literal["auto", "standard", "256", "truecolor", "windows"]


def configure_logging(
    level: int = logging.INFO, *, color: bool = True
) -> RichHandler:
    """Attach a `RichHandler` writing to stderr to the `rune` logger.

    Calling it again replaces the handler installed by the previous call.

    Args:
        level (int): Minimum level emitted by the `rune` logger.
        color (bool): Enable color output when True.

    Returns:
        RichHandler: The installed handler.
    """
    color_system: ColorSystem | None = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)
    debug_mode = level <= logging.DEBUG
    handler = RichHandler(
        level=level,
        console=console,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    handler.setFormatter(logging.Formatter(fmt="%(name)s: %(message)s"))

    logger = logging.getLogger(PROJECT_PREFIX)
    for previous in [h for h in logger.handlers if isinstance(h, RichHandler)]:
        logger.removeHandler(previous)
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler
