"""SVG canvas: documents, transformed groups and filled primitives.

Shapes are held as small Python objects while the encoder draws and only turn
into XML when ``SvgDocument.render`` runs. Serialization goes through
``xml.etree.ElementTree`` so escaping and well-formedness come for free.
"""

from __future__ import annotations

import io
import xml.etree.ElementTree as ET
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import BinaryIO, Union

SVG_NS = "http://www.w3.org/2000/svg"

# Ten significant digits keeps sub-unit detail on 1000+ unit documents.
_NUM_PRECISION = 10


def _num(value: float) -> str:
    return f"{value:.{_NUM_PRECISION}g}"


class Style(dict):
    """Inline CSS declarations, rendered as ``fill:black;stroke-width:0``."""

    def set(self, key: str, value: object) -> None:
        self[key] = str(value)

    def __str__(self) -> str:
        return ";".join(f"{k}:{v}" for k, v in self.items())


@dataclass
class Transform:
    """Ordered list of SVG transform functions."""

    ops: list[str] = field(default_factory=list)

    def translate(self, x: float, y: float) -> Transform:
        self.ops.append(f"translate({_num(x)} {_num(y)})")
        return self

    def scale(self, k: float) -> Transform:
        self.ops.append(f"scale({_num(k)})")
        return self

    def __str__(self) -> str:
        return " ".join(self.ops)


@dataclass
class Rect:
    x: float
    y: float
    width: float
    height: float
    style: Style = field(default_factory=Style)

    tag = "rect"

    def attributes(self) -> dict[str, str]:
        return {
            "x": _num(self.x),
            "y": _num(self.y),
            "width": _num(self.width),
            "height": _num(self.height),
        }


@dataclass
class Circle:
    cx: float
    cy: float
    r: float
    style: Style = field(default_factory=Style)

    tag = "circle"

    def attributes(self) -> dict[str, str]:
        return {"cx": _num(self.cx), "cy": _num(self.cy), "r": _num(self.r)}


@dataclass
class Polygon:
    points: list[tuple[float, float]]
    style: Style = field(default_factory=Style)

    tag = "polygon"

    def attributes(self) -> dict[str, str]:
        return {"points": " ".join(f"{_num(x)},{_num(y)}" for x, y in self.points)}


Shape = Union[Rect, Circle, Polygon]


class Container:
    """Anything shapes and groups can be appended to."""

    def __init__(self) -> None:
        self.children: list[Shape | Group] = []

    def rect(self, x: float, y: float, width: float, height: float) -> Rect:
        shape = Rect(x, y, width, height)
        self.children.append(shape)
        return shape

    def circle(self, cx: float, cy: float, r: float) -> Circle:
        shape = Circle(cx, cy, r)
        self.children.append(shape)
        return shape

    def polygon(self, *points: tuple[float, float]) -> Polygon:
        shape = Polygon(list(points))
        self.children.append(shape)
        return shape

    def group(self) -> Group:
        g = Group()
        self.children.append(g)
        return g

    def walk(self) -> Iterator[Shape]:
        """Yield every primitive below this container, depth-first in draw order."""
        for child in self.children:
            if isinstance(child, Group):
                yield from child.walk()
            else:
                yield child

    def _append_to(self, parent: ET.Element) -> None:
        for child in self.children:
            if isinstance(child, Group):
                attrs = {"transform": str(child.transform)} if child.transform.ops else {}
                el = ET.SubElement(parent, "g", attrs)
                child._append_to(el)
            else:
                attrs = child.attributes()
                if child.style:
                    attrs["style"] = str(child.style)
                ET.SubElement(parent, child.tag, attrs)


class Group(Container):
    """``<g>`` element carrying a transform applied to all of its children."""

    def __init__(self) -> None:
        super().__init__()
        self.transform = Transform()


class SvgDocument(Container):
    """Root ``<svg>`` element with a nominal width and height."""

    def __init__(self, width: float, height: float) -> None:
        super().__init__()
        self.width = width
        self.height = height

    def to_element(self) -> ET.Element:
        root = ET.Element(
            "svg",
            {
                "xmlns": SVG_NS,
                "width": _num(self.width),
                "height": _num(self.height),
                "viewBox": f"0 0 {_num(self.width)} {_num(self.height)}",
            },
        )
        self._append_to(root)
        return root

    def render(self, fp: BinaryIO) -> None:
        """Write the whole document as UTF-8 XML to a binary stream."""
        ET.ElementTree(self.to_element()).write(fp, encoding="utf-8", xml_declaration=True)

    def to_bytes(self) -> bytes:
        buf = io.BytesIO()
        self.render(buf)
        return buf.getvalue()
