"""Label styling tokens for donut charts."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, Mapping, MutableMapping, Optional

STATUS_ORDER = ("Queued", "Offered", "In Progress", "Completed")


@dataclass(frozen=True)
class LabelTheme:
    """Colors, fonts and stroke widths used when emitting label primitives."""

    identifier: str
    name: str
    colors: Mapping[str, str] = field(default_factory=dict)
    fonts: Mapping[str, str] = field(default_factory=dict)
    sizes: Mapping[str, float] = field(default_factory=dict)
    strokes: Mapping[str, float] = field(default_factory=dict)

    def color(self, role: str, default: Optional[str] = None) -> Optional[str]:
        return self.colors.get(role, default)

    def size(self, token: str, default: Optional[float] = None) -> Optional[float]:
        return self.sizes.get(token, default)

    def stroke(self, token: str, default: Optional[float] = None) -> Optional[float]:
        return self.strokes.get(token, default)

    def status_color(self, name: str, fallback: str = "#ffffff") -> str:
        key = name.strip().lower().replace(" ", "_")
        return self.colors.get(key, fallback)

    def palette(self) -> tuple[str, ...]:
        return tuple(self.status_color(name) for name in STATUS_ORDER)


class ThemeRegistry:
    """Named :class:`LabelTheme` instances available to a dashboard."""

    def __init__(self, themes: Optional[Iterable[LabelTheme]] = None) -> None:
        self._themes: MutableMapping[str, LabelTheme] = {}
        for theme in themes or (STATION_DARK,):
            self.register(theme)

    def register(self, theme: LabelTheme) -> None:
        if theme.identifier in self._themes:
            raise ValueError(f"Theme '{theme.identifier}' already registered")
        self._themes[theme.identifier] = theme

    def get(self, identifier: str) -> LabelTheme:
        try:
            return self._themes[identifier]
        except KeyError as exc:
            raise KeyError(f"Unknown theme '{identifier}'") from exc

    def load_from_payload(
        self, payload: Mapping[str, object], base: Optional[LabelTheme] = None
    ) -> LabelTheme:
        """Register a theme described by a mapping, replacing any namesake.

        Sections left out of ``payload`` inherit the tokens of ``base``
        (the built-in station theme by default).
        """

        base = base or STATION_DARK
        identifier = payload.get("identifier")
        if not identifier:
            raise ValueError("Theme payload needs an 'identifier'")
        identifier = str(identifier)
        theme = LabelTheme(
            identifier=identifier,
            name=str(payload.get("name", identifier)),
            colors=_merged(base.colors, payload.get("colors"), str),
            fonts=_merged(base.fonts, payload.get("fonts"), str),
            sizes=_merged(base.sizes, payload.get("sizes"), float),
            strokes=_merged(base.strokes, payload.get("strokes"), float),
        )
        self._themes[identifier] = theme
        return theme


def _merged(base: Mapping[str, Any], section: object, cast: Callable[[Any], Any]) -> Dict[str, Any]:
    merged = dict(base)
    merged.update({key: cast(value) for key, value in _as_mapping(section).items()})
    return merged


def _as_mapping(source: object) -> Dict[str, object]:
    if source is None:
        return {}
    if isinstance(source, Mapping):
        return dict(source)
    raise TypeError("Theme payload sections must be mappings")


STATION_DARK = LabelTheme(
    identifier="station-dark",
    name="Station Dark",
    colors={
        "background": "#111827",
        "queued": "#6366F1",
        "offered": "#22D3EE",
        "in_progress": "#FBBF24",
        "completed": "#34D399",
        "leader": "rgba(255,255,255,0.25)",
    },
    fonts={"label": "Inter, 'Helvetica Neue', Arial, sans-serif"},
    sizes={"label": 12.0, "label_weight": 600.0, "inline_label": 11.0},
    strokes={"leader": 1.0},
)
