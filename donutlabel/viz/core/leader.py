"""Leader lines joining a sector's arc to its displaced label."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Tuple

from .geometry import Point, Side

TextAnchor = Literal["start", "end"]

DEFAULT_LEADER_LENGTH = 10.0
DEFAULT_X_MARGIN = 20.0
DEFAULT_TEXT_OFFSET = 6.0


@dataclass(frozen=True)
class LeaderLine:
    """Three-point polyline: arc anchor, displaced point, horizontal terminus."""

    p0: Point
    p1: Point
    p2: Point

    def points(self) -> Tuple[Point, Point, Point]:
        return (self.p0, self.p1, self.p2)

    def svg_points(self) -> str:
        return " ".join(f"{x!r},{y!r}" for x, y in self.points())

    def text_position(self, side: Side, offset: float = DEFAULT_TEXT_OFFSET) -> Tuple[float, TextAnchor]:
        """Return the text x and anchor so the text grows away from the chart."""

        if side == "right":
            return self.p2[0] + offset, "start"
        return self.p2[0] - offset, "end"


def build_leader_line(
    anchor: Point,
    label_point: Point,
    side: Side,
    *,
    cx: float,
    outer_radius: float,
    extra_radius: float,
    leader_length: float = DEFAULT_LEADER_LENGTH,
    x_margin: float = DEFAULT_X_MARGIN,
) -> LeaderLine:
    x1, y1 = label_point
    x2 = x1 + leader_length if side == "right" else x1 - leader_length
    reach = outer_radius + extra_radius + x_margin
    x2 = min(max(x2, cx - reach), cx + reach)
    return LeaderLine(p0=anchor, p1=(x1, y1), p2=(x2, y1))
