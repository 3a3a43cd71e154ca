"""Demonstration values served by the /struct and /slice routes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass
class Sample:
    x: int
    y: float
    z: bool
    # Private: never drawn
    _s: int = 0


@dataclass
class Inner:
    bs: list[bool] = field(default_factory=list)
    strs: list[str] = field(default_factory=list)
    f: float = 0.0


@dataclass
class Item:
    x: int
    f: float
    w: str
    inner: Inner
    m: dict[int, list[int]]


def struct_demo() -> Sample:
    return Sample(x=-1234, y=0.73, z=True, _s=11235813)


def slice_demo(n: int = 16) -> list[Item]:
    """``n`` records; record ``i`` carries the 8-bit Gray code of ``i`` as booleans."""
    items: list[Item] = []
    for i in range(n):
        inner = Inner(f=math.cos(i / 2.0))
        gray = i ^ (i >> 1)
        for _ in range(8):
            b = (gray & 1) == 0
            inner.bs.append(b)
            inner.strs.append(str(b).lower())
            gray >>= 1

        items.append(
            Item(
                x=i,
                f=math.sin(i / 4.0),
                w=str(i),
                inner=inner,
                m={j: list(range(j)) for j in range(i)},
            )
        )
    return items
