"""Logging setup shared by the command line entry points."""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV = "FREE_NONPROFITS_LOG_LEVEL"
LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once from the environment.

    An explicit ``level`` overrides the current level on every call.
    """
    if not getattr(configure_logging, "_done", False):  # type: ignore[attr-defined]
        level_name = os.getenv(LOG_LEVEL_ENV, "WARNING").upper()
        logging.basicConfig(
            level=getattr(logging, level_name, logging.WARNING), format=LOG_FORMAT
        )
        configure_logging._done = True  # type: ignore[attr-defined]
    if level is None:
        return
    numeric = getattr(logging, level.upper(), logging.WARNING)
    root_logger = logging.getLogger()
    root_logger.setLevel(numeric)
    for handler in root_logger.handlers:
        handler.setLevel(numeric)


__all__ = ["LOG_LEVEL_ENV", "LOG_FORMAT", "configure_logging"]
