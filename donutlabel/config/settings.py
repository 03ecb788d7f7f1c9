"""Configuration models and helpers for donutlabel settings."""

from __future__ import annotations

import os
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

CURRENT_SETTINGS_SCHEMA_VERSION = 2
CONFIG_FILENAME = "config.yaml"

# -------------------- Settings Schema --------------------


class LabelCfg(BaseModel):
    """Collision-aware donut label placement."""

    min_gap: float = Field(default=16.0, ge=0.0)
    extra_radius: float = Field(default=22.0, ge=0.0)
    show_value: bool = True
    always_show_names: List[str] = Field(default_factory=list)
    threshold_percent: float = Field(default=3.0, ge=0.0, le=100.0)
    leader_length: float = Field(default=10.0, ge=0.0)
    y_margin: float = Field(default=40.0, ge=0.0)
    x_margin: float = Field(default=20.0, ge=0.0)
    text_offset: float = 6.0
    max_steps: int = Field(default=60, ge=0, le=1000)

    @field_validator("always_show_names", mode="before")
    @classmethod
    def _normalise_names(cls, value: object) -> List[str]:
        if value is None:
            return []
        if isinstance(value, str):
            value = value.split(",")
        seen: List[str] = []
        for item in value:  # type: ignore[union-attr]
            name = str(item).strip()
            if name and name not in seen:
                seen.append(name)
        return seen


class InlineLabelCfg(BaseModel):
    """Leader-less labels drawn just outside the ring."""

    extra_radius: float = Field(default=14.0, ge=0.0)
    small_extra_radius: Optional[float] = None

    @model_validator(mode="after")
    def _default_small_radius(self) -> "InlineLabelCfg":
        if self.small_extra_radius is None:
            self.small_extra_radius = self.extra_radius
        return self


class ChartCfg(BaseModel):
    """Donut geometry used when laying out raw status counts."""

    width: float = Field(default=300.0, gt=0.0)
    height: float = Field(default=260.0, gt=0.0)
    outer_radius: float = Field(default=104.0, gt=0.0)
    start_angle: float = 0.0
    end_angle: float = 360.0
    padding_angle: float = Field(default=1.6, ge=0.0)
    min_angle: float = Field(default=0.0, ge=0.0)


class Settings(BaseModel):
    """Top-level settings document persisted as YAML."""

    schema_version: int = CURRENT_SETTINGS_SCHEMA_VERSION
    preset: str = "station"
    theme: str = "station-dark"
    themes: List[Dict[str, Any]] = Field(default_factory=list)
    labels: LabelCfg = Field(default_factory=LabelCfg)
    inline: InlineLabelCfg = Field(default_factory=InlineLabelCfg)
    chart: ChartCfg = Field(default_factory=ChartCfg)


# -------------------- Presets --------------------


def built_in_presets() -> Dict[str, dict]:
    """Return overlays reproducing the dashboard's two donut panels."""

    return {
        "station": {
            "labels": {
                "show_value": True,
                "always_show_names": ["Completed", "In Progress"],
            },
            "inline": {"extra_radius": 14.0},
            "chart": {
                "outer_radius": 104.0,
                "padding_angle": 1.6,
                "min_angle": 0.0,
                "height": 260.0,
            },
        },
        "admin": {
            "labels": {"show_value": True, "always_show_names": []},
            "inline": {"extra_radius": 18.0, "small_extra_radius": 28.0},
            "chart": {
                "outer_radius": 118.0,
                "padding_angle": 1.6,
                "min_angle": 2.0,
                "height": 360.0,
            },
        },
    }


def _deep_merge(base: dict, overlay: dict) -> dict:
    merged = deepcopy(base)
    for key, value in overlay.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = deepcopy(value)
    return merged


def apply_preset(base: Settings, name: str) -> Settings:
    """Return a copy of ``base`` with the named preset overlay applied."""

    presets = built_in_presets()
    try:
        overlay = presets[name]
    except KeyError as exc:
        raise KeyError(f"Unknown preset '{name}'") from exc
    data = _deep_merge(base.model_dump(), overlay)
    data["preset"] = name
    return Settings(**data)


# -------------------- Persistence --------------------


def get_config_home() -> Path:
    """Return the directory where settings should be stored."""

    return Path(os.environ.get("DONUTLABEL_HOME", str(Path.home() / ".donutlabel")))


def config_path() -> Path:
    """Return the full path to the configuration file, creating directories as needed."""

    home = get_config_home()
    home.mkdir(parents=True, exist_ok=True)
    return home / CONFIG_FILENAME


def default_settings() -> Settings:
    return apply_preset(Settings(), "station")


def save_settings(settings: Settings, path: Optional[Path] = None) -> Path:
    """Persist the given settings to disk as YAML."""

    target_path = Path(path) if path else config_path()
    target_path.parent.mkdir(parents=True, exist_ok=True)
    data = settings.model_dump()
    with target_path.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(data, handle, sort_keys=False, allow_unicode=True)
    return target_path


def _coerce_schema_version(raw: object) -> int:
    try:
        value = int(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 1
    return max(1, value)


def _upgrade_settings_payload(
    data: dict[str, object], *, schema_version: int
) -> tuple[dict[str, object], bool]:
    """Apply in-place upgrades required for older settings payloads."""

    upgraded = deepcopy(data)
    changed = False

    if schema_version < 2:
        # v1 stored the label knobs at the top level.
        labels = dict(upgraded.get("labels") or {})  # type: ignore[arg-type]
        for key in ("min_gap", "extra_radius", "show_value", "always_show_names"):
            if key in upgraded:
                labels.setdefault(key, upgraded.pop(key))
                changed = True
        if labels:
            upgraded["labels"] = labels

    if upgraded.get("schema_version") != CURRENT_SETTINGS_SCHEMA_VERSION:
        upgraded["schema_version"] = CURRENT_SETTINGS_SCHEMA_VERSION
        changed = True

    return upgraded, changed


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from disk, creating defaults if missing."""

    source_path = Path(path) if path else config_path()
    if not source_path.exists():
        settings = default_settings()
        save_settings(settings, source_path)
        return settings
    with source_path.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle) or {}
    if not isinstance(raw, dict):
        raw = {}
    schema_version = _coerce_schema_version(raw.get("schema_version"))
    data, upgraded = _upgrade_settings_payload(raw, schema_version=schema_version)
    settings = Settings(**data)
    if upgraded:
        save_settings(settings, source_path)
    return settings


def ensure_default_config() -> Path:
    """Ensure a configuration file exists on disk and return its path."""

    target = config_path()
    if not target.exists():
        save_settings(default_settings(), target)
    return target
