"""Leaf encoders: scalars drawn directly into their region."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Any

import numpy as np

from kandinsky.encoder.registry import ShapeKind, strategy

if TYPE_CHECKING:
    from kandinsky.encoder.layout import Region
    from kandinsky.encoder.walker import Walker

logger = logging.getLogger(__name__)

_POSITIVE = "black"
_NEGATIVE = "red"

# Integers: 8x8 bit matrix = 64 bits, the width of a machine word.
_GRID = 8
_INT_BITS = _GRID * _GRID

# Bytes: one horizontal bar per bit.
_BYTE_BITS = 8

# Gap between neighbouring cells/bars: 1/12 of the pitch.
# On a 96-unit document a cell is 12 units, leaving an 11-unit square.
_CELL_INSET_FRACTION = 1 / 12

# Triangle margin as a fraction of the region side (1 unit at side 96).
_TRIANGLE_MARGIN_FRACTION = 1 / 96

# sin(60°): height of an equilateral triangle per unit of base.
_SIN_60 = math.sqrt(3) / 2


@strategy(ShapeKind.SIGNED_INT)
def encode_int(walker: Walker, value: Any, region: Region) -> None:
    """Bit matrix of |value|, MSB top-left, LSB bottom-right; red when negative."""
    side = region.side
    val = int(value)

    color = _POSITIVE if val >= 0 else _NEGATIVE
    val = abs(val)

    pitch = side / _GRID
    inset = pitch * _CELL_INSET_FRACTION
    cell = pitch - inset

    for bit in range(_INT_BITS):
        if val == 0:
            return
        if val & 1:
            row, col = divmod(_INT_BITS - 1 - bit, _GRID)
            r = region.canvas.rect(col * pitch + inset / 2, row * pitch + inset / 2, cell, cell)
            r.style.set("stroke-width", "0")
            r.style.set("fill", color)
        val >>= 1


@strategy(ShapeKind.BYTE)
def encode_byte(walker: Walker, value: Any, region: Region) -> None:
    """Stacked bars, LSB on top."""
    side = region.side
    val = int(value)

    pitch = side / _BYTE_BITS
    inset = pitch * _CELL_INSET_FRACTION

    for bit in range(_BYTE_BITS):
        if val == 0:
            return
        if val & 1:
            r = region.canvas.rect(inset / 2, bit * pitch + inset / 2, side - inset, pitch - inset)
            r.style.set("stroke-width", "0")
            r.style.set("fill", _POSITIVE)
        val >>= 1


@strategy(ShapeKind.FLOAT)
def encode_float(walker: Walker, value: Any, region: Region) -> None:
    """Centered circle with radius |value| * side/2. Not clamped: |value| > 1 overflows."""
    side = region.side
    val = float(value)
    if not math.isfinite(val):
        logger.debug("Skipping non-finite float %r", val)
        return

    fill = _POSITIVE if val >= 0 else _NEGATIVE
    c = region.canvas.circle(side / 2, side / 2, abs(val) * side / 2)
    c.style.set("fill", fill)
    c.style.set("stroke", fill)


@strategy(ShapeKind.BOOL)
def encode_bool(walker: Walker, value: Any, region: Region) -> None:
    """Equilateral triangle: apex up in black for True, apex down in red for False."""
    side = region.side
    margin = side * _TRIANGLE_MARGIN_FRACTION
    base = side - 2 * margin
    height = base * _SIN_60

    top = (side - height) / 2
    bottom = top + height
    left, mid, right = margin, side / 2, side - margin

    if bool(value):
        pts = [(left, bottom), (mid, top), (right, bottom)]
        color = _POSITIVE
    else:
        pts = [(left, top), (mid, bottom), (right, top)]
        color = _NEGATIVE

    p = region.canvas.polygon(*pts)
    p.style.set("stroke-width", "0")
    p.style.set("fill", color)


@strategy(ShapeKind.TEXT)
def encode_text(walker: Walker, value: Any, region: Region) -> None:
    """Text is drawn as the sequence of its UTF-8 bytes."""
    raw = value.encode("utf-8", errors="surrogatepass")
    walker.encode(np.frombuffer(raw, dtype=np.uint8), region)
