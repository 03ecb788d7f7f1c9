"""SVG adapter turning label descriptors into drawable primitives."""
from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from .core.labeler import InlineLabel, LabelDescriptor, LabelPlacer
from .core.geometry import Sector
from .core.svg import SvgDocument, SvgElement, format_points
from .core.theme import STATION_DARK, LabelTheme


def render_labels(
    labels: Iterable[LabelDescriptor], theme: LabelTheme = STATION_DARK
) -> List[SvgElement]:
    """Return one ``<g>`` per label holding its leader and its text."""

    stroke = theme.color("leader", "rgba(255,255,255,0.25)")
    stroke_width = theme.stroke("leader", 1.0)
    font_size = theme.size("label", 12.0)
    font_weight = int(theme.size("label_weight", 600.0) or 600)
    elements: List[SvgElement] = []
    for label in labels:
        group = SvgElement("g").set(pointer_events="none", data_index=label.index)
        group.add(
            SvgElement("polyline").set(
                points=format_points(label.leader.points()),
                fill="none",
                stroke=stroke,
                stroke_width=stroke_width,
            ),
            SvgElement("text", text=label.text).set(
                x=label.x,
                y=label.y,
                text_anchor=label.text_anchor,
                dominant_baseline="central",
                fill=label.fill,
                font_size=font_size,
                font_weight=font_weight,
                font_family=theme.fonts.get("label"),
            ),
        )
        elements.append(group)
    return elements


def render_inline_labels(
    labels: Iterable[InlineLabel], theme: LabelTheme = STATION_DARK
) -> List[SvgElement]:
    font_size = theme.size("inline_label", 11.0)
    return [
        SvgElement("text", text=label.text).set(
            x=label.x,
            y=label.y,
            text_anchor=label.text_anchor,
            dominant_baseline="central",
            fill=label.fill,
            font_size=font_size,
            font_weight=500,
        )
        for label in labels
    ]


def render_label_document(
    sectors: Sequence[Sector],
    placer: LabelPlacer,
    *,
    width: float,
    height: float,
    theme: LabelTheme = STATION_DARK,
    background: Optional[str] = None,
) -> SvgDocument:
    """Run one render pass and return a standalone SVG holding the labels."""

    doc = SvgDocument(width=width, height=height, background=background)
    layer = doc.group(id="donut-labels")
    layer.add(*render_labels(placer.render_pass(sectors), theme))
    doc.add(layer)
    return doc


def render_inline_document(
    labels: Iterable[InlineLabel],
    *,
    width: float,
    height: float,
    theme: LabelTheme = STATION_DARK,
    background: Optional[str] = None,
) -> SvgDocument:
    doc = SvgDocument(width=width, height=height, background=background)
    layer = doc.group(id="donut-inline-labels")
    layer.add(*render_inline_labels(labels, theme))
    doc.add(layer)
    return doc
