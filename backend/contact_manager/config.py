import logging
from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_config_logger = logging.getLogger(__name__)

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Contact Manager API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./contacts.db"
    cors_origins: list[str] = ["http://localhost:3000"]

    # Paging
    default_page_size: int = 10
    max_page_size: int = 500

    # CSV import
    max_upload_size_mb: int = 5
    csv_encoding: str = "utf-8-sig"

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL queries
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_http: str = "INFO"             # request log middleware
    log_level_import: str = "INFO"           # CSV import pipeline

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    def model_post_init(self, __context: object) -> None:
        """Keep the page size bounds consistent with each other."""
        if self.default_page_size > self.max_page_size:
            _config_logger.warning(
                "default_page_size=%d exceeds max_page_size=%d; clamping",
                self.default_page_size,
                self.max_page_size,
            )
            object.__setattr__(self, "default_page_size", self.max_page_size)

    @property
    def max_upload_size_bytes(self) -> int:
        return self.max_upload_size_mb * 1024 * 1024


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
