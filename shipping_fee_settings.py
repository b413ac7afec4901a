"""
Process settings.

Loaded from environment variables (prefix SHIPPING_FEE_) and an optional .env file.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for the shipping fee package.

    Attributes:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
    """

    model_config = SettingsConfigDict(
        env_prefix="SHIPPING_FEE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()
