"""Shared test fixtures and helpers."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import NamedTuple

import pytest
from pydantic import BaseModel

from kandinsky.encoder import Dispatcher, Region, Walker
from kandinsky.svg.canvas import SVG_NS, SvgDocument

SIZE = 96.0

_NS = {"svg": SVG_NS}
_TRANSLATE_RE = re.compile(r"translate\(([-\d.e]+) ([-\d.e]+)\)")
_SCALE_RE = re.compile(r"scale\(([-\d.e]+)\)")


# Sample records


@dataclass
class Point:
    x: int
    y: int


@dataclass
class WithPrivate:
    a: int
    b: float
    _hidden: int = 7


@dataclass
class Holder:
    inner: Point | None


@dataclass
class Direct:
    inner: Point


class Pair(NamedTuple):
    left: int
    right: bool


class Model(BaseModel):
    name: str
    score: float
    tags: list[int] = []


@dataclass
class Nested:
    flags: list[bool] = field(default_factory=lambda: [True, False])
    ratio: float = 0.25
    label: str = "hi"


# Parsing helpers


def parse(doc: bytes) -> ET.Element:
    return ET.fromstring(doc)


def find_all(root: ET.Element, tag: str) -> list[ET.Element]:
    return root.findall(f".//svg:{tag}", _NS)


def direct_groups(el: ET.Element) -> list[ET.Element]:
    return el.findall("svg:g", _NS)


def style_of(el: ET.Element) -> dict[str, str]:
    raw = el.get("style", "")
    return dict(part.split(":", 1) for part in raw.split(";") if part)


def translate_of(el: ET.Element) -> tuple[float, float]:
    m = _TRANSLATE_RE.search(el.get("transform", ""))
    assert m, el.get("transform")
    return float(m.group(1)), float(m.group(2))


def scale_of(el: ET.Element) -> float:
    m = _SCALE_RE.search(el.get("transform", ""))
    assert m, el.get("transform")
    return float(m.group(1))


# Fixtures


@pytest.fixture
def dispatcher() -> Dispatcher:
    return Dispatcher()


@pytest.fixture
def walker(dispatcher) -> Walker:
    return Walker(dispatcher)


@pytest.fixture
def doc() -> SvgDocument:
    return SvgDocument(SIZE, SIZE)


@pytest.fixture
def region(doc) -> Region:
    return Region.root(doc)
