"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

import kandinsky
from kandinsky.encoder import ShapeKind
from kandinsky.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=kandinsky.__version__,
        shapes_supported=len(ShapeKind),
    )
