"""Shared marshal → HTTP response helper."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import HTTPException
from fastapi.responses import Response

from kandinsky.encoder import Dispatcher, marshal, marshal_png
from kandinsky.errors import KandinskyError
from kandinsky.models.requests import OutputFormat

logger = logging.getLogger(__name__)

_MEDIA_TYPES = {
    OutputFormat.SVG: "image/svg+xml",
    OutputFormat.PNG: "image/png",
}


def parse_format(raw: str) -> OutputFormat:
    try:
        return OutputFormat(raw.lower())
    except ValueError:
        raise HTTPException(status_code=400, detail=f"unknown format {raw!r}") from None


def document_response(
    value: Any,
    size: float,
    output_format: OutputFormat,
    dispatcher: Dispatcher,
) -> Response:
    """Marshal ``value`` and wrap the document in an image response (500 on failure)."""
    try:
        if output_format is OutputFormat.PNG:
            body = marshal_png(value, size, dispatcher=dispatcher)
        else:
            body = marshal(value, size, dispatcher=dispatcher)
    except KandinskyError as e:
        logger.error("Marshal failed for %s: %s", type(value).__name__, e)
        raise HTTPException(status_code=500, detail=str(e)) from e

    return Response(content=body, media_type=_MEDIA_TYPES[output_format])
