"""FastAPI dependency injection."""

from __future__ import annotations

from kandinsky.config import Settings, settings
from kandinsky.encoder import Dispatcher, get_dispatcher


def get_settings() -> Settings:
    return settings


def get_encoder_dispatcher() -> Dispatcher:
    return get_dispatcher()
