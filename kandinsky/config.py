"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    kandinsky_env: str = "development"
    kandinsky_log_level: str = "info"

    # Demo server listen address, host:port (empty host = all interfaces)
    http_addr: str = ":8080"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Nominal document sizes per demo route
    scalar_size: float = 96.0
    struct_size: float = 96.0
    slice_size: float = 900.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
