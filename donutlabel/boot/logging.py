"""Logging setup shared by donutlabel entry points."""

from __future__ import annotations

import logging
import os
from typing import Any

__all__ = ["configure_logging", "resolve_level"]

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def resolve_level(value: str | int | None, *, verbosity: int = 0) -> int:
    """Translate ``value`` into a numeric ``logging`` level.

    Accepts level names in any case or numeric strings. Unknown values map
    to INFO. Each ``verbosity`` step lowers the level by ten, never below
    DEBUG.
    """

    level = logging.INFO
    if isinstance(value, int):
        level = value
    elif value and value.strip():
        candidate = value.strip()
        if candidate.isdigit():
            level = int(candidate)
        else:
            named = logging.getLevelName(candidate.upper())
            if isinstance(named, int):
                level = named
    if verbosity > 0:
        level = max(logging.DEBUG, level - 10 * verbosity)
    return level


def configure_logging(
    *, level: str | int | None = None, verbosity: int = 0, **kwargs: Any
) -> int:
    """Configure the root logger and return the effective level.

    ``level`` falls back to the ``LOG_LEVEL`` environment variable. Extra
    keyword arguments go to :func:`logging.basicConfig`.
    """

    source = os.environ.get("LOG_LEVEL") if level is None else level
    effective = resolve_level(source, verbosity=verbosity)
    logging.basicConfig(
        level=effective,
        format=kwargs.pop("format", LOG_FORMAT),
        datefmt=kwargs.pop("datefmt", LOG_DATEFMT),
        force=kwargs.pop("force", True),
        **kwargs,
    )
    return effective
