"""
Configuration management for the face-index generator.
Loads settings from environment variables.
"""

from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    # Application
    app_name: str = "face-index"
    
    # Face canvas (default anchor for derived geometry)
    face_center_x: float = 200.0
    face_center_y: float = 200.0
    
    # Walks
    walk_max_length: int = 1000  # faces per walk
    
    # Logging
    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "json"
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get settings instance."""
    return settings
