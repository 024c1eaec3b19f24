"""
Configuration module using pydantic-settings.

All configuration loaded from environment variables with sensible defaults.
"""

from pathlib import Path
from typing import Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """
    Application settings with environment variable support.
    
    Load from .env file or environment variables prefixed with SELFLINK_.
    """
    
    # Logging
    log_level: str = "WARNING"
    log_file: Optional[Path] = None
    
    # Matching
    strict_matching: bool = False  # Ambiguous matches become errors
    
    model_config = SettingsConfigDict(
        env_prefix="SELFLINK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )
    
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate log level name"""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Must be one of {sorted(LOG_LEVELS)}")
        return level


# Global settings instance
settings = Settings()
