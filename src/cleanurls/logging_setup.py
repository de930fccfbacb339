"""Rich logging for the cleanurls CLI."""

from __future__ import annotations

import logging
import os
from typing import Final

from rich.console import Console
from rich.logging import RichHandler

__all__ = ["CleanUrlsHandler", "configure_logging", "console"]

LOG_LEVEL_ENV: Final[str] = "CLEANURLS_LOG_LEVEL"
_DEFAULT_LEVEL: Final[int] = logging.INFO

console = Console(stderr=True)


class CleanUrlsHandler(RichHandler):
    """The single root handler installed by :func:`configure_logging`."""

    def __init__(self) -> None:
        super().__init__(console=console, rich_tracebacks=True, show_path=False, markup=True)
        self.setFormatter(logging.Formatter("%(message)s"))


def _resolve_level(level_name: str | None = None) -> int:
    """Level from the argument, else ``CLEANURLS_LOG_LEVEL``; unknown names mean INFO."""
    name = (level_name or os.getenv(LOG_LEVEL_ENV) or "").upper()
    return logging.getLevelNamesMapping().get(name, _DEFAULT_LEVEL)


def configure_logging(level_name: str | None = None) -> None:
    """Route log records through Rich on stderr.

    Other Rich handlers on the root logger are replaced; calling this again
    only changes the level.
    """
    root_logger = logging.getLogger()

    if not any(isinstance(handler, CleanUrlsHandler) for handler in root_logger.handlers):
        for handler in list(root_logger.handlers):
            if isinstance(handler, RichHandler):
                root_logger.removeHandler(handler)
        root_logger.addHandler(CleanUrlsHandler())

    root_logger.setLevel(_resolve_level(level_name))
    logging.captureWarnings(True)
