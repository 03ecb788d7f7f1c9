"""Turn status counts into screen-space sectors.

This mirrors what the dashboard's chart host does before it calls the
label callback: values are converted to shares of the whole and every
non-empty slice gets its angular sweep, honouring a padding gap between
slices and a minimum sweep for tiny values. Only the mid angle matters to
the label engine; arc painting stays with the host.
"""
from __future__ import annotations

import logging
import math
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from .core.geometry import Sector
from .core.theme import STATION_DARK, LabelTheme

LOG = logging.getLogger(__name__)

MAX_SWEEP = 359.999

Entry = Union[Tuple[str, float], Tuple[str, float, Optional[str]], Mapping[str, object]]


def _coerce_value(name: str, raw: object) -> float:
    try:
        value = float(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        LOG.debug("Non-numeric value %r for %s treated as zero", raw, name)
        return 0.0
    if not math.isfinite(value) or value < 0.0:
        LOG.debug("Invalid value %r for %s treated as zero", raw, name)
        return 0.0
    return value


def _normalise(entry: Entry) -> Tuple[str, float, Optional[str]]:
    if isinstance(entry, Mapping):
        name = str(entry.get("name", ""))
        fill = entry.get("fill")
        return name, _coerce_value(name, entry.get("value")), str(fill) if fill else None
    if len(entry) == 2:
        name, raw = entry  # type: ignore[misc]
        return str(name), _coerce_value(str(name), raw), None
    name, raw, fill = entry  # type: ignore[misc]
    return str(name), _coerce_value(str(name), raw), fill or None


def layout_sectors(
    entries: Iterable[Entry],
    *,
    cx: float,
    cy: float,
    outer_radius: float,
    start_angle: float = 0.0,
    end_angle: float = 360.0,
    padding_angle: float = 0.0,
    min_angle: float = 0.0,
    theme: LabelTheme = STATION_DARK,
) -> List[Sector]:
    """Lay ``entries`` out around a ring and return one :class:`Sector` each.

    Entries are ``(name, value)``, ``(name, value, fill)`` or mappings with
    the same keys. A zero total produces no sectors.
    """

    rows = [_normalise(entry) for entry in entries]
    total = sum(value for _, value, _ in rows)
    if total <= 0.0:
        return []

    delta = end_angle - start_angle
    sign = 1.0 if delta >= 0.0 else -1.0
    sweep = min(abs(delta), MAX_SWEEP)
    non_zero = sum(1 for _, value, _ in rows if value != 0.0)
    gaps = non_zero if sweep >= 360.0 else non_zero - 1
    available = sweep - non_zero * min_angle - max(gaps, 0) * padding_angle

    palette = theme.palette()
    sectors: List[Sector] = []
    end = start_angle
    for index, (name, value, fill) in enumerate(rows):
        share = value / total
        if index == 0:
            begin = start_angle
        else:
            begin = end + sign * (padding_angle if value != 0.0 else 0.0)
        end = begin + sign * ((min_angle if value != 0.0 else 0.0) + share * available)
        colour = fill or theme.colors.get(name.strip().lower().replace(" ", "_"))
        sectors.append(
            Sector(
                index=index,
                name=name,
                value=value,
                percent=share * 100.0,
                fill=colour or palette[index % len(palette)],
                mid_angle=(begin + end) / 2.0,
                outer_radius=outer_radius,
                cx=cx,
                cy=cy,
            )
        )
    return sectors


def station_distribution(summary: Mapping[str, object]) -> List[Tuple[str, float]]:
    """Return the four status slices for one station summary row."""

    return [
        ("Queued", _coerce_value("Queued", summary.get("queue", 0))),
        ("Offered", _coerce_value("Offered", summary.get("offered", 0))),
        ("In Progress", _coerce_value("In Progress", summary.get("in_progress", 0))),
        ("Completed", _coerce_value("Completed", summary.get("done", 0))),
    ]


def overview_distribution(stations: Sequence[Mapping[str, object]]) -> List[Tuple[str, float]]:
    """Return queued versus completed totals across every station."""

    queued = sum(_coerce_value("Queued", row.get("queue", 0)) for row in stations)
    completed = sum(_coerce_value("Completed", row.get("done", 0)) for row in stations)
    return [("Queued", queued), ("Completed", completed)]
