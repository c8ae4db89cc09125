"""
Application configuration using Pydantic settings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from typing import Optional


class Settings(BaseSettings):
    """Application settings."""

    # App
    app_name: str = "Pennywise"
    log_level: str = "INFO"

    # Remote finance API
    remote_api_url: str = "http://localhost:8080/api/v1"
    remote_api_token: Optional[str] = None  # Used when a request carries no bearer token
    remote_timeout: float = 10.0  # Seconds

    # Server
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    frontend_url: str = "http://localhost:5173"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False
    )


# Global settings instance
settings = Settings()
