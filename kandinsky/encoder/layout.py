"""Canvas regions and the grid subdivision shared by composite encoders."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass

from kandinsky.svg.canvas import Container, SvgDocument


@dataclass(frozen=True)
class Region:
    """Square drawing area in its own local coordinate system.

    ``side`` is the local side length. Child regions are reached through a
    translate + scale group, so every level of nesting keeps the root's side
    length locally. ``depth`` is 0 for the document itself.
    """

    canvas: Container
    side: float
    depth: int = 0

    @classmethod
    def root(cls, doc: SvgDocument) -> Region:
        return cls(canvas=doc, side=doc.width)


@dataclass(frozen=True)
class Cell:
    index: int
    col: int
    row: int
    x: float
    y: float
    side: float


def grid_width(n: int) -> int:
    """Smallest ``w`` with ``w * w >= n``."""
    w = math.isqrt(n)
    return w if w * w == n else w + 1


def grid_cells(n: int, side: float) -> Iterator[Cell]:
    """Row-major cells of a ``ceil(sqrt(n))``-wide grid over a square of ``side``."""
    if n <= 0:
        return
    width = grid_width(n)
    cell_side = side / width
    for i in range(n):
        row, col = divmod(i, width)
        yield Cell(i, col, row, col * cell_side, row * cell_side, cell_side)


def subdivide(region: Region, n: int) -> Iterator[Region]:
    """Carve ``n`` child regions out of ``region``, creating each group lazily.

    A group only exists once its child is about to be drawn, so a failing child
    leaves the siblings before it on the canvas and nothing after it.
    """
    for cell in grid_cells(n, region.side):
        g = region.canvas.group()
        g.transform.translate(cell.x, cell.y).scale(cell.side / region.side)
        yield Region(canvas=g, side=region.side, depth=region.depth + 1)
