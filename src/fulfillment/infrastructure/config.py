"""Application settings, read from ``FULFILLMENT_*`` environment variables."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

# When installed in editable mode the project root is the repo root.
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="FULFILLMENT_",
        env_file=".env",
        extra="ignore",
    )

    data_dir: Path = _PROJECT_ROOT / "data"
    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"


def get_settings() -> Settings:
    # Not cached: tests redirect storage through the environment.
    return Settings()
