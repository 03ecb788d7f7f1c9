import pytest

from donutlabel.viz.core.theme import STATION_DARK, ThemeRegistry


def test_registry_starts_with_station_theme():
    registry = ThemeRegistry()

    assert registry.get("station-dark") is STATION_DARK
    with pytest.raises(KeyError):
        registry.get("missing")


def test_duplicate_registration_is_rejected():
    registry = ThemeRegistry()

    with pytest.raises(ValueError):
        registry.register(STATION_DARK)


def test_payload_theme_inherits_unset_tokens():
    registry = ThemeRegistry()

    theme = registry.load_from_payload(
        {
            "identifier": "night",
            "colors": {"leader": "#ff0000", "queued": "#000000"},
            "sizes": {"label": "14"},
        }
    )

    assert registry.get("night") is theme
    assert theme.name == "night"
    assert theme.color("leader") == "#ff0000"
    assert theme.status_color("Queued") == "#000000"
    assert theme.status_color("Completed") == STATION_DARK.status_color("Completed")
    assert theme.size("label") == 14.0
    assert theme.size("inline_label") == 11.0
    assert theme.stroke("leader") == 1.0
    assert theme.fonts == STATION_DARK.fonts


def test_payload_theme_replaces_namesake():
    registry = ThemeRegistry()
    registry.load_from_payload({"identifier": "night", "colors": {"leader": "#111111"}})
    registry.load_from_payload({"identifier": "night", "colors": {"leader": "#222222"}})

    assert registry.get("night").color("leader") == "#222222"


def test_payload_theme_requires_identifier_and_mapping_sections():
    registry = ThemeRegistry()

    with pytest.raises(ValueError):
        registry.load_from_payload({"colors": {"leader": "#fff"}})
    with pytest.raises(TypeError):
        registry.load_from_payload({"identifier": "x", "colors": ["#fff"]})
