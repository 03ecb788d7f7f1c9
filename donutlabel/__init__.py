"""donutlabel package bootstrap and curated public API surface."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version as _get_version

LOG = logging.getLogger(__name__)

try:
    __version__ = _get_version("donutlabel")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    __version__ = "0.0.0"

from .viz.core.collision import CollisionStack
from .viz.core.geometry import Sector, SectorGeometry, resolve_sector
from .viz.core.labeler import LabelDescriptor, LabelPlacer, place_inline_label
from .viz.core.leader import LeaderLine, build_leader_line
from .viz.core.threshold import should_suppress


def get_version() -> str:
    """Return the resolved donutlabel package version."""

    return __version__


__all__ = [
    "__version__",
    "get_version",
    "CollisionStack",
    "LabelDescriptor",
    "LabelPlacer",
    "LeaderLine",
    "Sector",
    "SectorGeometry",
    "build_leader_line",
    "place_inline_label",
    "resolve_sector",
    "should_suppress",
]
