import pytest

from donutlabel.viz.core.theme import ThemeRegistry
from donutlabel.viz.sectors import layout_sectors, overview_distribution, station_distribution

RING = {"cx": 150.0, "cy": 130.0, "outer_radius": 104.0}


def test_shares_and_mid_angles():
    sectors = layout_sectors([("Queued", 3), ("Completed", 1)], **RING)

    assert [s.percent for s in sectors] == pytest.approx([75.0, 25.0])
    assert sectors[0].mid_angle == pytest.approx(359.999 * 0.75 / 2)
    assert sectors[1].mid_angle == pytest.approx(359.999 * 0.75 + 359.999 * 0.25 / 2)
    assert {(s.cx, s.cy, s.outer_radius) for s in sectors} == {(150.0, 130.0, 104.0)}


def test_empty_slices_get_no_padding():
    sectors = layout_sectors([("A", 1), ("B", 0), ("C", 1)], padding_angle=2.0, **RING)

    half = (359.999 - 2.0) / 2
    assert sectors[0].mid_angle == pytest.approx(half / 2)
    assert sectors[1].mid_angle == pytest.approx(half)
    assert sectors[2].mid_angle == pytest.approx(half + 2.0 + half / 2)


def test_min_angle_widens_tiny_slices():
    sectors = layout_sectors([("big", 999), ("tiny", 1)], min_angle=10.0, **RING)

    available = 359.999 - 20.0
    tiny_start = 10.0 + 0.999 * available
    assert sectors[1].mid_angle == pytest.approx(tiny_start + (10.0 + 0.001 * available) / 2)


def test_zero_total_yields_no_sectors():
    assert layout_sectors([("Queued", 0), ("Completed", 0)], **RING) == []
    assert layout_sectors([], **RING) == []


def test_fills_prefer_explicit_then_status_palette():
    sectors = layout_sectors(
        [("Queued", 1), {"name": "Other", "value": 1}, ("Completed", 1, "#000000")], **RING
    )

    assert sectors[0].fill == "#6366F1"
    assert sectors[1].fill == "#22D3EE"
    assert sectors[2].fill == "#000000"


def test_theme_keyword_supplies_status_colours():
    theme = ThemeRegistry().load_from_payload(
        {"identifier": "night", "colors": {"queued": "#010101"}}
    )

    sectors = layout_sectors([("Queued", 1), ("Completed", 1)], theme=theme, **RING)

    assert sectors[0].fill == "#010101"
    assert sectors[1].fill == "#34D399"


def test_invalid_values_count_as_zero():
    sectors = layout_sectors([("A", -4), ("B", float("nan")), ("C", "x"), ("D", 2)], **RING)

    assert [s.percent for s in sectors] == pytest.approx([0.0, 0.0, 0.0, 100.0])


def test_station_and_overview_distributions():
    summary = {"station_code": "ST-1", "queue": 4, "offered": 1, "in_progress": 2, "done": 9}

    assert station_distribution(summary) == [
        ("Queued", 4.0),
        ("Offered", 1.0),
        ("In Progress", 2.0),
        ("Completed", 9.0),
    ]
    assert overview_distribution([summary, {"queue": 1, "done": 1}]) == [
        ("Queued", 5.0),
        ("Completed", 10.0),
    ]
