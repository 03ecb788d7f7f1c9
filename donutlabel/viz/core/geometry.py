"""Polar to Cartesian resolution for donut sectors."""
from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass
from typing import Literal, Optional, Tuple

LOG = logging.getLogger(__name__)

RAD = math.pi / 180.0

Side = Literal["left", "right"]
Point = Tuple[float, float]


@dataclass(frozen=True)
class Sector:
    """One wedge of a donut as resolved into screen space by the chart host.

    ``percent`` is expressed on a 0-100 scale and ``mid_angle`` in degrees,
    measured counter-clockwise from east with the y axis pointing down.
    """

    index: int
    name: str
    value: float
    percent: float
    fill: str
    mid_angle: float
    outer_radius: float
    cx: float
    cy: float

    def safe_percent(self) -> float:
        try:
            pct = float(self.percent)
        except (TypeError, ValueError):
            return 0.0
        return pct if math.isfinite(pct) else 0.0


@dataclass(frozen=True)
class SectorGeometry:
    """Anchor and candidate label points for a single sector."""

    anchor: Point
    candidate: Point
    side: Side
    cx: float
    cy: float
    outer_radius: float
    extra_radius: float

    @property
    def label_radius(self) -> float:
        return self.outer_radius + self.extra_radius


def _finite(*values: object) -> bool:
    for value in values:
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            return False
        if not math.isfinite(value):
            return False
    return True


def is_placeable(sector: Sector) -> bool:
    """Return ``True`` when the sector carries usable screen geometry."""

    if not _finite(sector.mid_angle, sector.outer_radius, sector.cx, sector.cy):
        return False
    return sector.outer_radius > 0.0


def resolve_sector(sector: Sector, extra_radius: float) -> Optional[SectorGeometry]:
    """Resolve ``sector`` into Cartesian anchor and candidate points.

    Returns ``None`` when the sector cannot be placed so the caller can skip
    the label while the rest of the chart still renders.
    """

    if not is_placeable(sector) or not _finite(extra_radius):
        LOG.debug("Sector %r (%s) is unplaceable", sector.index, sector.name)
        return None

    theta = -sector.mid_angle * RAD
    cos_t = math.cos(theta)
    sin_t = math.sin(theta)
    anchor = (
        sector.cx + sector.outer_radius * cos_t,
        sector.cy + sector.outer_radius * sin_t,
    )
    radius = sector.outer_radius + extra_radius
    candidate = (sector.cx + radius * cos_t, sector.cy + radius * sin_t)
    side: Side = "right" if candidate[0] >= sector.cx else "left"
    return SectorGeometry(
        anchor=anchor,
        candidate=candidate,
        side=side,
        cx=float(sector.cx),
        cy=float(sector.cy),
        outer_radius=float(sector.outer_radius),
        extra_radius=float(extra_radius),
    )
