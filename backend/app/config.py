from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Trader Query Engine API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    cors_origins: list[str] = ["http://localhost:3000"]

    # Card catalog (relative paths resolve against the backend directory)
    card_catalog_file: str = "data/cards.yaml"

    # Search defaults
    default_max_results: int = 10
    quick_search_max_results: int = 5
    related_tools_max_results: int = 4

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_engine: str = "INFO"           # Query engine services
    log_level_catalog: str = "INFO"          # Card catalog loading
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    @property
    def card_catalog_path(self) -> Path:
        """Absolute path of the card catalog file."""
        path = Path(self.card_catalog_file)
        if path.is_absolute():
            return path
        return _BACKEND_DIR / path


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance; reads .env once."""
    return Settings()
