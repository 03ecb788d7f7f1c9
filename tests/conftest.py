"""Shared fixtures for the donutlabel test suite."""

from __future__ import annotations

from typing import Callable

import pytest

from donutlabel.viz.core.geometry import Sector


@pytest.fixture(autouse=True)
def _isolated_config_home(tmp_path, monkeypatch):
    """Keep settings files out of the real home directory."""

    home = tmp_path / "donutlabel-home"
    monkeypatch.setenv("DONUTLABEL_HOME", str(home))
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    return home


@pytest.fixture
def make_sector() -> Callable[..., Sector]:
    def _factory(
        mid_angle: float,
        percent: float = 25.0,
        *,
        name: str | None = None,
        index: int = 0,
        value: float = 10,
        fill: str = "#6366F1",
        outer_radius: float = 100.0,
        cx: float = 150.0,
        cy: float = 150.0,
    ) -> Sector:
        return Sector(
            index=index,
            name=name if name is not None else f"slice-{index}",
            value=value,
            percent=percent,
            fill=fill,
            mid_angle=mid_angle,
            outer_radius=outer_radius,
            cx=cx,
            cy=cy,
        )

    return _factory
