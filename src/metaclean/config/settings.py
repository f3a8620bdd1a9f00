"""Application settings and configuration."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""
    
    model_config = SettingsConfigDict(env_prefix="METACLEAN_", env_file=".env")
    
    # Re-encoding quality for lossy formats (JPEG, HEIC)
    quality: int = Field(default=95, ge=1, le=100)
    
    # Processing
    workers: int = Field(default=1, ge=1, le=32)
    safe_write: bool = True
    
    # Output settings
    summary: bool = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
