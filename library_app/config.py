"""Application configuration."""

import logging
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings, read from ``LIBRARY_*`` environment variables."""

    # Seed data; None means the bundled sample_books.json
    SEED_FILE: Optional[Path] = None
    LOAD_SEED: bool = True

    LOG_LEVEL: str = "INFO"

    model_config = {"env_prefix": "LIBRARY_", "env_file": ".env"}


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


settings = Settings()
