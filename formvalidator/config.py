"""Library configuration via environment variables."""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Settings loaded from FORMVALIDATOR_* environment variables."""

    # Logging
    LOG_LEVEL: str = "info"
    LOG_JSON: bool = True

    # Extra directory of preset JSON files
    PRESETS_DIR: Optional[Path] = None

    model_config = {
        "env_prefix": "FORMVALIDATOR_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    return Settings()
