"""Top-level entry points: value → SVG (or PNG) document bytes."""

from __future__ import annotations

import logging
import math
import time
from typing import Any

from kandinsky.encoder.layout import Region
from kandinsky.encoder.registry import Dispatcher
from kandinsky.encoder.walker import MAX_DEPTH, Walker
from kandinsky.errors import InvalidSizeError, NestingTooDeepError
from kandinsky.svg.canvas import SvgDocument

logger = logging.getLogger(__name__)


def marshal(value: Any, size: float, *, dispatcher: Dispatcher | None = None) -> bytes:
    """Marshal a value into an SVG document.

    ``size`` is a nominal document side length, not a pixel count: the output is
    vector graphics and the size only gives viewers a sensible default. Returns
    bytes only when the whole value encoded; on failure the partially drawn
    document is dropped and the error propagates.
    """
    if not (math.isfinite(size) and size > 0):
        raise InvalidSizeError(size)

    start = time.perf_counter()
    doc = SvgDocument(size, size)
    try:
        Walker(dispatcher).encode(value, Region.root(doc))
    except RecursionError as e:
        # Same-region hops (mappings, text, indirection) do not count toward the depth cap
        raise NestingTooDeepError(MAX_DEPTH) from e
    out = doc.to_bytes()

    logger.debug(
        "Marshaled %s at size %g: %d shapes, %d bytes in %.1fms",
        type(value).__name__,
        size,
        sum(1 for _ in doc.walk()),
        len(out),
        (time.perf_counter() - start) * 1000,
    )
    return out


def marshal_png(
    value: Any,
    size: float,
    *,
    output_size: int | None = None,
    dispatcher: Dispatcher | None = None,
) -> bytes:
    """Marshal a value and rasterize the document to PNG."""
    from kandinsky.svg.raster import svg_to_png

    return svg_to_png(marshal(value, size, dispatcher=dispatcher), output_size=output_size)
