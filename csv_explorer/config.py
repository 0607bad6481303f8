from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from . import rules


class Settings(BaseSettings):
    PROJECT_NAME: str = "csv-explorer"
    VERSION: str = "0.1.0"
    LOG_LEVEL: str = "INFO"

    MAX_UPLOAD_SIZE: int = 50 * 1024 * 1024  # 50MB
    DEFAULT_PAGE_SIZE: int = rules.DEFAULT_PAGE_SIZE
    MAX_DATASETS: int = 20

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Single cached Settings instance."""
    return Settings()
