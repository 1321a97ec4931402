"""
Application configuration using Pydantic Settings
"""

from pathlib import Path
from pydantic_settings import BaseSettings
from typing import Optional

PROJECT_ROOT = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    # Database
    DATABASE_PATH: str = str(PROJECT_ROOT / "api_data.db")
    DATABASE_URL: Optional[str] = None

    # Remote API
    REMOTE_API_BASE_URL: str = "https://jsonplaceholder.typicode.com"
    REMOTE_TIMEOUT_SECONDS: Optional[float] = None

    # Server
    API_HOST: str = "0.0.0.0"
    PORT: int = 3000
    PUBLIC_DIR: str = str(PROJECT_ROOT / "public")

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"

    @property
    def database_url(self) -> str:
        """Explicit DATABASE_URL wins, otherwise a SQLite file at DATABASE_PATH"""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return f"sqlite+aiosqlite:///{self.DATABASE_PATH}"


settings = Settings()
