"""Collision-aware donut label placement with leader lines."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import AbstractSet, Dict, Iterable, List, Optional

from ...config.settings import InlineLabelCfg, LabelCfg
from .collision import CollisionStack
from .geometry import Sector, Side, resolve_sector
from .leader import LeaderLine, TextAnchor, build_leader_line
from .threshold import DEFAULT_THRESHOLD_PERCENT, should_suppress

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class LabelDescriptor:
    """Renderable label primitive handed back to the chart host."""

    index: int
    name: str
    text: str
    x: float
    y: float
    text_anchor: TextAnchor
    side: Side
    fill: str
    leader: LeaderLine

    def to_payload(self) -> Dict[str, object]:
        return {
            "index": self.index,
            "name": self.name,
            "text": self.text,
            "x": self.x,
            "y": self.y,
            "text_anchor": self.text_anchor,
            "side": self.side,
            "fill": self.fill,
            "leader": [list(point) for point in self.leader.points()],
        }


@dataclass(frozen=True)
class InlineLabel:
    """Leader-less label positioned just outside the ring."""

    index: int
    text: str
    x: float
    y: float
    text_anchor: TextAnchor
    fill: str

    def to_payload(self) -> Dict[str, object]:
        return {
            "index": self.index,
            "text": self.text,
            "x": self.x,
            "y": self.y,
            "text_anchor": self.text_anchor,
            "fill": self.fill,
        }


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _format_value(value: object) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_label_text(name: str, percent: float, value: object, show_value: bool) -> str:
    """Return ``"<name> <pct>%"`` optionally followed by ``"(<value>)"``."""

    text = f"{name} {round_half_up(percent)}%"
    if show_value:
        text = f"{text} ({_format_value(value)})"
    return text


class LabelPlacer:
    """Place donut labels for one chart instance.

    The placer owns the chart's :class:`CollisionStack`, so two charts shown
    side by side must each construct their own placer. Hosts call
    :meth:`reset` once before the first sector of every render pass, or use
    :meth:`render_pass` which does so itself.

    The minimum gap is kept between the positions the search settles on.
    The emitted ``y`` is then clamped to the card, so labels crowded against
    the top or bottom edge may share a y even though their search positions
    are far enough apart.
    """

    def __init__(
        self,
        config: Optional[LabelCfg] = None,
        *,
        stacks: Optional[CollisionStack] = None,
    ) -> None:
        self.config = config or LabelCfg()
        self.always_show: AbstractSet[str] = frozenset(self.config.always_show_names)
        self.stacks = stacks if stacks is not None else CollisionStack(self.config.max_steps)

    def reset(self) -> None:
        LOG.debug("Resetting label collision stacks")
        self.stacks.reset()

    def render_pass(self, sectors: Iterable[Sector]) -> List[LabelDescriptor]:
        self.reset()
        labels: List[LabelDescriptor] = []
        for sector in sectors:
            label = self.place(sector)
            if label is not None:
                labels.append(label)
        return labels

    def place(self, sector: Sector) -> Optional[LabelDescriptor]:
        """Place the label for ``sector`` or return ``None`` when it is omitted."""

        cfg = self.config
        geometry = resolve_sector(sector, cfg.extra_radius)
        if geometry is None:
            return None

        percent = sector.safe_percent()
        if should_suppress(percent, sector.name, self.always_show, cfg.threshold_percent):
            LOG.debug("Suppressing label for %s at %.2f%%", sector.name, percent)
            return None

        y = self.stacks.place(
            geometry.candidate[1],
            geometry.side,
            cfg.min_gap,
            center_y=geometry.cy,
            y_limit=geometry.label_radius + cfg.y_margin,
        )
        leader = build_leader_line(
            geometry.anchor,
            (geometry.candidate[0], y),
            geometry.side,
            cx=geometry.cx,
            outer_radius=geometry.outer_radius,
            extra_radius=geometry.extra_radius,
            leader_length=cfg.leader_length,
            x_margin=cfg.x_margin,
        )
        text_x, anchor = leader.text_position(geometry.side, cfg.text_offset)
        return LabelDescriptor(
            index=sector.index,
            name=sector.name,
            text=format_label_text(sector.name, percent, sector.value, cfg.show_value),
            x=text_x,
            y=y,
            text_anchor=anchor,
            side=geometry.side,
            fill=sector.fill,
            leader=leader,
        )


def place_inline_label(
    sector: Sector,
    *,
    config: Optional[InlineLabelCfg] = None,
    always_show: AbstractSet[str] = frozenset(),
    threshold: float = DEFAULT_THRESHOLD_PERCENT,
) -> Optional[InlineLabel]:
    """Place a single label on a ring without collision handling.

    Thin slices that are still shown because of ``always_show`` are pushed
    out to ``small_extra_radius``.
    """

    cfg = config or InlineLabelCfg()
    percent = sector.safe_percent()
    if should_suppress(percent, sector.name, always_show, threshold):
        return None
    extra = cfg.extra_radius
    if percent < threshold and cfg.small_extra_radius is not None:
        extra = cfg.small_extra_radius
    geometry = resolve_sector(sector, extra)
    if geometry is None:
        return None
    x, y = geometry.candidate
    return InlineLabel(
        index=sector.index,
        text=format_label_text(sector.name, percent, sector.value, False),
        x=x,
        y=y,
        text_anchor="start" if x > geometry.cx else "end",
        fill=sector.fill,
    )
