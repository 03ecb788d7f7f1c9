"""``place`` subcommand: compute donut labels from a JSON payload."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Mapping

from pydantic import ValidationError

from ..config import Settings, apply_preset, load_settings
from ..viz.core.geometry import Sector
from ..viz.core.labeler import InlineLabel, LabelPlacer, place_inline_label
from ..viz.core.theme import STATION_DARK, LabelTheme, ThemeRegistry
from ..viz.donut import render_inline_document, render_label_document
from ..viz.sectors import layout_sectors, overview_distribution, station_distribution

LOG = logging.getLogger(__name__)

_SECTOR_ALIASES = {
    "mid_angle": ("mid_angle", "midAngle"),
    "outer_radius": ("outer_radius", "outerRadius"),
}


def _read_payload(path: str) -> Any:
    if path == "-":
        text = sys.stdin.read()
    else:
        text = Path(path).read_text(encoding="utf-8")
    return json.loads(text)


def _lookup(row: Mapping[str, Any], field: str) -> Any:
    for key in _SECTOR_ALIASES.get(field, (field,)):
        if key in row:
            return row[key]
    return None


def _as_float(raw: Any) -> float:
    if isinstance(raw, bool):
        return float("nan")
    try:
        return float(raw)
    except (TypeError, ValueError):
        return float("nan")


def sector_from_mapping(row: Mapping[str, Any], index: int) -> Sector:
    """Build a :class:`Sector` from a JSON object, accepting camelCase keys.

    Missing or non-numeric geometry becomes NaN, so the placer drops that
    sector and still labels the rest of the chart.
    """

    if not isinstance(row, Mapping):
        raise TypeError(f"sector #{index} must be an object")
    position = row.get("index", index)
    return Sector(
        index=position if isinstance(position, int) and not isinstance(position, bool) else index,
        name=str(row.get("name", "")),
        value=row.get("value", 0),
        percent=_as_float(row.get("percent", 0.0)),
        fill=str(row.get("fill") or "#ffffff"),
        mid_angle=_as_float(_lookup(row, "mid_angle")),
        outer_radius=_as_float(_lookup(row, "outer_radius")),
        cx=_as_float(_lookup(row, "cx")),
        cy=_as_float(_lookup(row, "cy")),
    )


def sectors_from_payload(
    payload: Any, settings: Settings, theme: LabelTheme = STATION_DARK
) -> List[Sector]:
    """Return sectors from a list of sectors or a document describing counts."""

    if isinstance(payload, list):
        return [sector_from_mapping(row, i) for i, row in enumerate(payload)]
    if not isinstance(payload, Mapping):
        raise TypeError("unsupported JSON payload structure")
    if "sectors" in payload:
        return sectors_from_payload(list(payload["sectors"]), settings, theme)

    if "entries" in payload:
        entries = payload["entries"]
    elif "station" in payload:
        entries = station_distribution(payload["station"])
    elif "stations" in payload:
        entries = overview_distribution(payload["stations"])
    else:
        raise KeyError("sectors")

    chart = settings.chart
    return layout_sectors(
        entries,
        cx=chart.width / 2.0,
        cy=chart.height / 2.0,
        outer_radius=chart.outer_radius,
        start_angle=chart.start_angle,
        end_angle=chart.end_angle,
        padding_angle=chart.padding_angle,
        min_angle=chart.min_angle,
        theme=theme,
    )


def add_subparser(sub: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    """Register the ``place`` subcommand."""

    parser = sub.add_parser(
        "place",
        help="Compute donut labels for a set of sectors",
        description=(
            "Read sectors (or raw status counts) as JSON and emit label "
            "descriptors as JSON or as an SVG overlay. Use '-' for stdin."
        ),
    )
    parser.add_argument("--input", default="-", help="Input JSON file (default: stdin)")
    parser.add_argument("--out", help="Destination file (default: stdout)")
    parser.add_argument(
        "--format",
        choices=("json", "svg"),
        default="json",
        help="Output format (default: json)",
    )
    parser.add_argument("--preset", help="Apply a built-in chart preset (station, admin)")
    parser.add_argument("--config", help="Settings YAML file to load")
    parser.add_argument(
        "--style",
        choices=("leader", "inline"),
        default="leader",
        help="Leader lines with collision handling, or inline labels on the ring",
    )
    parser.set_defaults(func=run)


def resolve_theme(settings: Settings) -> LabelTheme:
    """Return the active theme after registering any themes from ``settings``."""

    registry = ThemeRegistry()
    for payload in settings.themes:
        registry.load_from_payload(payload)
    return registry.get(settings.theme)


def _place_inline(sectors: List[Sector], settings: Settings) -> List[InlineLabel]:
    always_show = frozenset(settings.labels.always_show_names)
    labels: List[InlineLabel] = []
    for sector in sectors:
        label = place_inline_label(
            sector,
            config=settings.inline,
            always_show=always_show,
            threshold=settings.labels.threshold_percent,
        )
        if label is not None:
            labels.append(label)
    return labels


def run(args: argparse.Namespace) -> int:
    try:
        settings = load_settings(Path(args.config) if args.config else None)
        if args.preset:
            settings = apply_preset(settings, args.preset)
        theme = resolve_theme(settings)
        sectors = sectors_from_payload(_read_payload(args.input), settings, theme)
    except (OSError, ValueError, KeyError, TypeError, ValidationError) as exc:
        # json.JSONDecodeError is a ValueError subclass.
        print(f"place: invalid input: {exc}", file=sys.stderr)
        return 2

    chart = settings.chart
    if args.style == "inline":
        inline = _place_inline(sectors, settings)
        if args.format == "svg":
            output = render_inline_document(
                inline, width=chart.width, height=chart.height, theme=theme
            ).to_string(pretty=True)
        else:
            output = json.dumps([label.to_payload() for label in inline], indent=2)
    else:
        placer = LabelPlacer(settings.labels)
        if args.format == "svg":
            doc = render_label_document(
                sectors,
                placer,
                width=chart.width,
                height=chart.height,
                theme=theme,
            )
            output = doc.to_string(pretty=True)
        else:
            labels = placer.render_pass(sectors)
            output = json.dumps([label.to_payload() for label in labels], indent=2)
    LOG.debug("Placed %s labels for %d sectors", args.style, len(sectors))

    if args.out:
        Path(args.out).write_text(output + "\n", encoding="utf-8")
    else:
        sys.stdout.write(output + "\n")
    return 0
