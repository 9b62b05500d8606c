"""Configuration management using Pydantic Settings"""

from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from STP_* environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="STP_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Service
    service_name: str = "stp-backend"
    log_level: str = "INFO"
    cors_origins: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ]

    # Engine
    max_periods: int = Field(default=100, ge=1)
    months_per_period: int = Field(default=12, ge=1)


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
