"""GET /struct and /slice: fixed demonstration composites."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from kandinsky.api.rendering import document_response, parse_format
from kandinsky.config import Settings
from kandinsky.demo import slice_demo, struct_demo
from kandinsky.dependencies import get_encoder_dispatcher, get_settings
from kandinsky.encoder import Dispatcher

router = APIRouter()


@router.get("/struct")
def struct(
    format: str = "svg",
    settings: Settings = Depends(get_settings),
    dispatcher: Dispatcher = Depends(get_encoder_dispatcher),
) -> Response:
    return document_response(struct_demo(), settings.struct_size, parse_format(format), dispatcher)


@router.get("/slice")
def slice_(
    format: str = "svg",
    settings: Settings = Depends(get_settings),
    dispatcher: Dispatcher = Depends(get_encoder_dispatcher),
) -> Response:
    return document_response(slice_demo(), settings.slice_size, parse_format(format), dispatcher)
