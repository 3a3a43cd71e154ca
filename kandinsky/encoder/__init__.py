"""Structural visual encoder."""

from kandinsky.encoder.registry import Dispatcher, ShapeKind, classify, get_dispatcher, strategy
from kandinsky.encoder.layout import Region, grid_cells, grid_width, subdivide
from kandinsky.encoder.walker import Walker
from kandinsky.encoder.composites import EntryPair
from kandinsky.encoder.marshal import marshal, marshal_png

__all__ = [
    "Dispatcher",
    "ShapeKind",
    "classify",
    "get_dispatcher",
    "strategy",
    "Region",
    "grid_cells",
    "grid_width",
    "subdivide",
    "Walker",
    "EntryPair",
    "marshal",
    "marshal_png",
]
