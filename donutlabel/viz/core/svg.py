"""Deterministic SVG scene graph for label primitives.

Attribute values are stored as strings and children keep insertion order,
so the same descriptors always serialise to the same bytes.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

SVG_NS = "http://www.w3.org/2000/svg"


@dataclass
class SvgElement:
    """A minimal SVG node."""

    tag: str
    attributes: Dict[str, str] = field(default_factory=dict)
    children: List["SvgElement"] = field(default_factory=list)
    text: Optional[str] = None

    def set(self, **attrs: object) -> "SvgElement":
        """Assign attributes and return ``self``.

        Underscores in keyword names become dashes, so ``pointer_events``
        is written as ``pointer-events``. ``None`` values are skipped.
        """

        for key, value in attrs.items():
            if value is None:
                continue
            name = key.replace("_", "-")
            self.attributes[name] = repr(value) if isinstance(value, float) else str(value)
        return self

    def add(self, *children: "SvgElement") -> "SvgElement":
        self.children.extend(children)
        return self

    def find_all(self, tag: str) -> List["SvgElement"]:
        found = [self] if self.tag == tag else []
        for child in self.children:
            found.extend(child.find_all(tag))
        return found

    def to_string(self, indent: int = 0, pretty: bool = True) -> str:
        pad = "  " * indent if pretty else ""
        attrs = "".join(
            f" {name}={_quote(value)}" for name, value in sorted(self.attributes.items())
        )
        if not self.children and self.text is None:
            return f"{pad}<{self.tag}{attrs}/>"

        sep = "\n" if pretty else ""
        parts = [f"{pad}<{self.tag}{attrs}>"]
        if self.text is not None:
            child_pad = "  " * (indent + 1) if pretty else ""
            parts.append(f"{child_pad}{_escape(self.text)}")
        parts.extend(child.to_string(indent + 1, pretty=pretty) for child in self.children)
        parts.append(f"{pad}</{self.tag}>")
        return sep.join(parts)


def _quote(value: str) -> str:
    return f'"{_escape(value)}"'


def _escape(value: str) -> str:
    return (
        value.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&apos;")
    )


def format_points(points: Sequence[Tuple[float, float]]) -> str:
    return " ".join(f"{float(x)!r},{float(y)!r}" for x, y in points)


@dataclass
class SvgDocument:
    """Standalone SVG container sized to one chart card."""

    width: float
    height: float
    background: Optional[str] = None
    root: SvgElement = field(init=False)

    def __post_init__(self) -> None:
        self.root = SvgElement(
            "svg",
            {
                "xmlns": SVG_NS,
                "width": str(self.width),
                "height": str(self.height),
                "viewBox": f"0 0 {self.width} {self.height}",
            },
        )
        if self.background:
            self.root.add(
                SvgElement("rect").set(
                    x=0, y=0, width=self.width, height=self.height, fill=self.background
                )
            )

    # Element factories -------------------------------------------------
    def group(self, **attrs: object) -> SvgElement:
        return SvgElement("g").set(**attrs)

    def add(self, element: SvgElement) -> SvgElement:
        self.root.add(element)
        return element

    def to_string(self, pretty: bool = True) -> str:
        return self.root.to_string(indent=0, pretty=pretty)

    def to_bytes(self, pretty: bool = True) -> bytes:
        return self.to_string(pretty=pretty).encode("utf-8")
