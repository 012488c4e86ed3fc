"""
Configuration management for sideorder
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sideorder.models.medium import get_medium


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Logging
    log_level: str = "INFO"
    log_file: str = ""  # Empty disables the file handler

    # Evaluation
    worker_count: int = Field(default=1, ge=1)
    max_permutations: int = Field(default=40320, ge=0)  # 8!, bounds the exhaustive search
    chunk_size: int = Field(default=256, ge=1)

    # Medium used when a job names none
    default_medium: str = "lp"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="SIDEORDER_",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @field_validator("default_medium")
    @classmethod
    def check_default_medium(cls, value: str) -> str:
        get_medium(value)
        return value


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
