"""GET /viz: render a single scalar given as a type tag and a literal."""

from __future__ import annotations

import logging
import re
from typing import Any

import numpy as np
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from kandinsky.api.rendering import document_response, parse_format
from kandinsky.config import Settings
from kandinsky.dependencies import get_encoder_dispatcher, get_settings
from kandinsky.encoder import Dispatcher
from kandinsky.models.requests import ScalarType

logger = logging.getLogger(__name__)

router = APIRouter()

_INT_RE = re.compile(r"[+-]?[0-9]+")

_TRUE_LITERALS = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE_LITERALS = {"0", "f", "F", "FALSE", "false", "False"}


def _parse_int(raw: str) -> int:
    if not _INT_RE.fullmatch(raw):
        raise ValueError(f"invalid int literal {raw!r}")
    return int(raw)


def _parse_bool(raw: str) -> bool:
    if raw in _TRUE_LITERALS:
        return True
    if raw in _FALSE_LITERALS:
        return False
    raise ValueError(f"invalid bool literal {raw!r}")


def _parse_byte(raw: str) -> np.uint8:
    val = _parse_int(raw)
    if not 0 <= val <= 0xFF:
        raise ValueError(f"byte out of range: {val}")
    return np.uint8(val)


_PARSERS = {
    ScalarType.INT: _parse_int,
    ScalarType.FLOAT: float,
    ScalarType.BOOL: _parse_bool,
    ScalarType.BYTE: _parse_byte,
    ScalarType.STR: str,
}


def parse_scalar(type_tag: str, raw: str) -> Any:
    """Turn a ``(type, literal)`` query pair into a Python value, raising ValueError."""
    try:
        scalar_type = ScalarType(type_tag)
    except ValueError:
        raise ValueError(f"unknown type {type_tag!r}") from None
    return _PARSERS[scalar_type](raw)


@router.get("/viz")
def viz(
    type: str = "",
    v: str = "",
    format: str = "svg",
    settings: Settings = Depends(get_settings),
    dispatcher: Dispatcher = Depends(get_encoder_dispatcher),
) -> Response:
    output_format = parse_format(format)
    try:
        value = parse_scalar(type, v)
    except ValueError as e:
        logger.info("Rejected /viz request: %s", e)
        raise HTTPException(status_code=400, detail=str(e)) from e

    return document_response(value, settings.scalar_size, output_format, dispatcher)
