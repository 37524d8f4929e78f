"""
Application Configuration
Uses Pydantic Settings for environment variable management
"""

from pydantic_settings import BaseSettings
from typing import Optional
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Application
    APP_NAME: str = "Booklog"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    # Database
    DATABASE_URL: str = "sqlite:///./booklog.db"
    DATABASE_ECHO: bool = False

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # API Settings
    API_PREFIX: str = "/api"
    CORS_ORIGINS: list = ["*"]
    CORS_METHODS: list = ["GET", "POST", "PUT", "DELETE"]
    CORS_HEADERS: list = ["Content-Type"]

    # Client Settings
    CLIENT_API_URL: str = "http://localhost:3000/api"
    CLIENT_TIMEOUT: int = 10

    class Config:
        env_file = ".env"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
