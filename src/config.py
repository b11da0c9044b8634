import logging
from pathlib import Path
from typing import List, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PLACEHOLDER_THUMB = "/thumbs/_placeholder.webp"
DEFAULT_FETCH_TIMEOUT = 30.0
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    debug: bool = False
    log_level: str = "INFO"

    brands_csv_url: Optional[str] = None
    master_csv_url: Optional[str] = None

    placeholder_thumb: str = DEFAULT_PLACEHOLDER_THUMB

    public_dir: Path = Path("public")
    build_dir: Path = Path("build")

    fetch_timeout: float = DEFAULT_FETCH_TIMEOUT
    thumbnail_scan_concurrency: int = 16
    optimize_assets: bool = True

    github_step_summary: Optional[str] = None

    @field_validator("placeholder_thumb", mode="before")
    @classmethod
    def _strip_placeholder(cls, value):
        cleaned = (value or "").strip()
        return cleaned or DEFAULT_PLACEHOLDER_THUMB

    @field_validator("log_level", mode="before")
    @classmethod
    def _known_log_level(cls, value):
        level = str(value or "").strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def logging_level(self) -> int:
        return logging.DEBUG if self.debug else getattr(logging, self.log_level)

    def missing_sources(self) -> List[str]:
        missing = []
        if not (self.brands_csv_url or "").strip():
            missing.append("BRANDS_CSV_URL")
        if not (self.master_csv_url or "").strip():
            missing.append("MASTER_CSV_URL")
        return missing
