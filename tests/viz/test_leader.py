import pytest

from donutlabel.viz.core.leader import build_leader_line

BOX = {"cx": 150.0, "outer_radius": 100.0, "extra_radius": 22.0}


def test_right_leader_extends_outward():
    leader = build_leader_line((250.0, 150.0), (272.0, 140.0), "right", **BOX)

    assert leader.points() == ((250.0, 150.0), (272.0, 140.0), (282.0, 140.0))
    assert leader.text_position("right") == (288.0, "start")


def test_left_leader_extends_outward():
    leader = build_leader_line((50.0, 150.0), (28.0, 160.0), "left", **BOX)

    assert leader.p2 == (18.0, 160.0)
    assert leader.text_position("left", offset=4.0) == (14.0, "end")


def test_terminus_is_clamped_to_card():
    right = build_leader_line((0.0, 0.0), (290.0, 10.0), "right", **BOX)
    left = build_leader_line((0.0, 0.0), (12.0, 10.0), "left", **BOX)

    assert right.p2[0] == pytest.approx(292.0)
    assert left.p2[0] == pytest.approx(8.0)


def test_svg_points_lists_three_vertices():
    leader = build_leader_line((250.0, 150.0), (272.0, 140.0), "right", leader_length=5.0, **BOX)

    assert leader.svg_points() == "250.0,150.0 272.0,140.0 277.0,140.0"
