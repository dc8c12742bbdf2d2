"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from polymorph.geometry.kernel import Kernel


class Settings(BaseSettings):
    polymorph_env: str = "development"
    polymorph_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Numeric kernel used when a request does not name one
    default_kernel: Kernel = Kernel.INEXACT

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
