"""Configuration helpers exposed at :mod:`donutlabel.config`."""

from __future__ import annotations

from .settings import (
    CURRENT_SETTINGS_SCHEMA_VERSION,
    ChartCfg,
    InlineLabelCfg,
    LabelCfg,
    Settings,
    apply_preset,
    built_in_presets,
    config_path,
    default_settings,
    ensure_default_config,
    get_config_home,
    load_settings,
    save_settings,
)

__all__ = [
    "CURRENT_SETTINGS_SCHEMA_VERSION",
    "ChartCfg",
    "InlineLabelCfg",
    "LabelCfg",
    "Settings",
    "apply_preset",
    "built_in_presets",
    "config_path",
    "default_settings",
    "ensure_default_config",
    "get_config_home",
    "load_settings",
    "save_settings",
]
