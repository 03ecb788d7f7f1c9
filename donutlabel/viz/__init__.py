"""Donut label visualisation helpers.

The :mod:`.core` package computes label geometry and text; :mod:`.sectors`
stands in for the chart host when only raw status counts are available and
:mod:`.donut` turns descriptors into SVG primitives.
"""

from .core.labeler import LabelDescriptor, LabelPlacer
from .core.svg import SvgDocument, SvgElement
from .core.theme import LabelTheme, ThemeRegistry
from .donut import (
    render_inline_document,
    render_inline_labels,
    render_label_document,
    render_labels,
)
from .sectors import layout_sectors, overview_distribution, station_distribution

__all__ = [
    "LabelDescriptor",
    "LabelPlacer",
    "LabelTheme",
    "SvgDocument",
    "SvgElement",
    "ThemeRegistry",
    "layout_sectors",
    "overview_distribution",
    "render_inline_document",
    "render_inline_labels",
    "render_label_document",
    "render_labels",
    "station_distribution",
]
