"""Core label-placement primitives used by the donut renderers."""

from .collision import MAX_DISPLACEMENT_STEPS, CollisionStack
from .geometry import RAD, Sector, SectorGeometry, resolve_sector
from .labeler import (
    InlineLabel,
    LabelDescriptor,
    LabelPlacer,
    format_label_text,
    place_inline_label,
)
from .leader import LeaderLine, build_leader_line
from .svg import SvgDocument, SvgElement
from .theme import STATION_DARK, LabelTheme, ThemeRegistry
from .threshold import DEFAULT_THRESHOLD_PERCENT, should_suppress

__all__ = [
    "CollisionStack",
    "DEFAULT_THRESHOLD_PERCENT",
    "InlineLabel",
    "LabelDescriptor",
    "LabelPlacer",
    "LabelTheme",
    "LeaderLine",
    "MAX_DISPLACEMENT_STEPS",
    "RAD",
    "STATION_DARK",
    "Sector",
    "SectorGeometry",
    "SvgDocument",
    "SvgElement",
    "ThemeRegistry",
    "build_leader_line",
    "format_label_text",
    "place_inline_label",
    "resolve_sector",
    "should_suppress",
]
