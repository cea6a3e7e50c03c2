"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

# A large arc over two pairs of small arcs.
_SAMPLE_PATH = (
    "M-50,90 "
    "A90,90 0 0 0 180,90 "
    "M30,30 "
    "A15,15 0 0 0 60,30 "
    "M30,30 "
    "A15,15 0 0 1 60,30 "
    "M120,30 "
    "A15,15 0 0 0 150,30 "
    "M120,30 "
    "A15,15 0 0 1 150,30"
)


class Settings(BaseSettings):
    pathviewer_env: str = "development"
    pathviewer_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Documents
    default_path_data: str = _SAMPLE_PATH
    path_margin: float = 20.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
