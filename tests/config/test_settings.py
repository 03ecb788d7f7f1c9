"""Tests for settings models, presets and YAML persistence."""

import pytest
import yaml
from pydantic import ValidationError

from donutlabel.config import (
    CURRENT_SETTINGS_SCHEMA_VERSION,
    ChartCfg,
    InlineLabelCfg,
    LabelCfg,
    Settings,
    apply_preset,
    config_path,
    default_settings,
    ensure_default_config,
    load_settings,
    save_settings,
)


def test_defaults_match_station_panel() -> None:
    settings = default_settings()

    assert settings.preset == "station"
    assert settings.labels.min_gap == 16.0
    assert settings.labels.extra_radius == 22.0
    assert settings.labels.show_value is True
    assert settings.labels.always_show_names == ["Completed", "In Progress"]
    assert settings.chart.outer_radius == 104.0


def test_admin_preset_overrides_chart_and_inline_radii() -> None:
    merged = apply_preset(default_settings(), "admin")

    assert merged.preset == "admin"
    assert merged.chart.outer_radius == 118.0
    assert merged.chart.min_angle == 2.0
    assert merged.inline.small_extra_radius == 28.0
    assert merged.labels.always_show_names == []


def test_unknown_preset_raises() -> None:
    with pytest.raises(KeyError):
        apply_preset(Settings(), "nope")


def test_always_show_names_are_normalised() -> None:
    cfg = LabelCfg(always_show_names=" Completed, In Progress ,Completed,")

    assert cfg.always_show_names == ["Completed", "In Progress"]


def test_invalid_values_are_rejected() -> None:
    with pytest.raises(ValidationError):
        LabelCfg(min_gap=-1)
    with pytest.raises(ValidationError):
        LabelCfg(max_steps=5000)
    with pytest.raises(ValidationError):
        ChartCfg(outer_radius=0.0)


def test_inline_small_radius_defaults_to_regular_radius() -> None:
    assert InlineLabelCfg(extra_radius=18.0).small_extra_radius == 18.0


def test_load_creates_defaults_when_missing(_isolated_config_home) -> None:
    settings = load_settings()

    assert config_path() == _isolated_config_home / "config.yaml"
    assert config_path().exists()
    assert settings == default_settings()


def test_save_then_load_preserves_changes(tmp_path) -> None:
    target = tmp_path / "custom.yaml"
    settings = default_settings().model_copy(
        update={"labels": LabelCfg(min_gap=20.0, show_value=False)}
    )

    save_settings(settings, target)

    loaded = load_settings(target)
    assert loaded.labels.min_gap == 20.0
    assert loaded.labels.show_value is False


def test_v1_payload_is_upgraded_and_rewritten(tmp_path) -> None:
    target = tmp_path / "old.yaml"
    target.write_text(
        yaml.safe_dump({"min_gap": 12, "always_show_names": ["Queued"]}),
        encoding="utf-8",
    )

    settings = load_settings(target)

    assert settings.labels.min_gap == 12.0
    assert settings.labels.always_show_names == ["Queued"]
    rewritten = yaml.safe_load(target.read_text(encoding="utf-8"))
    assert rewritten["schema_version"] == CURRENT_SETTINGS_SCHEMA_VERSION
    assert "min_gap" not in rewritten


def test_ensure_default_config_is_idempotent() -> None:
    first = ensure_default_config()
    first.write_text(yaml.safe_dump({"schema_version": 2, "theme": "custom"}), encoding="utf-8")

    assert ensure_default_config() == first
    assert load_settings(first).theme == "custom"
