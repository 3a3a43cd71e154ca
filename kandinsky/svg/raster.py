"""SVG → PNG rasterization via cairosvg."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def svg_to_png(svg_bytes: bytes, output_size: int | None = None) -> bytes:
    """Render an SVG document to PNG bytes.

    ``output_size`` sets both output width and height in pixels; when omitted
    cairosvg uses the document's nominal width/height.
    """
    # cairosvg loads libcairo on import, keep it off the SVG-only path
    import cairosvg

    png = cairosvg.svg2png(
        bytestring=svg_bytes,
        output_width=output_size,
        output_height=output_size,
    )
    logger.debug("Rasterized %d SVG bytes to %d PNG bytes", len(svg_bytes), len(png))
    return png
