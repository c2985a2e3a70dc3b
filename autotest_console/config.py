"""
Configuration settings for the Autotest Console
"""
from pathlib import Path
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""

    # Application
    APP_NAME: str = "Autotest Console"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    HOST: str = "127.0.0.1"
    PORT: int = 5173

    # Paths
    BASE_DIR: Path = Path(__file__).parent
    TEMPLATES_DIR: Path = BASE_DIR / "templates"
    STATIC_DIR: Path = BASE_DIR / "static"

    # Test-execution backend
    API_BASE_URL: str = "http://localhost:8080"
    REQUEST_TIMEOUT: float = 30.0  # seconds
    RUN_REQUEST_TIMEOUT: Optional[float] = None  # a run blocks until execution finishes

    # Listing
    SESSIONS_PAGE_SIZE: int = 20
    LOG_FETCH_LIMIT: int = 500

    # Dev-time bridge for screenshots stored on the executing host
    LOCAL_FILE_VIEWER_ENABLED: bool = False

    @field_validator("API_BASE_URL")
    @classmethod
    def _require_absolute_base(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value.startswith(("http://", "https://")):
            raise ValueError("API_BASE_URL must be an absolute http(s) URL, e.g. http://localhost:8080")
        return value

    class Config:
        env_file = ".env"
        extra = "allow"


settings = Settings()
