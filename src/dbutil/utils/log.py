"""Logging setup for dbutil."""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from dbutil.models.sql_log import TRACE

ROOT_LOGGER = "dbutil"


def configure_logging(level: str = "INFO", console: Optional[Console] = None) -> logging.Logger:
    """Attach a rich handler to the ``dbutil`` logger tree.

    Calling it again replaces the previous handler instead of stacking another.
    """

    logging.addLevelName(TRACE, "TRACE")
    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(console=console or Console(stderr=True), show_path=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(_resolve_level(level))
    return logger


def _resolve_level(level: str) -> int:
    name = level.strip().upper()
    if name == "WARN":
        name = "WARNING"
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.INFO


__all__ = ["ROOT_LOGGER", "configure_logging"]
