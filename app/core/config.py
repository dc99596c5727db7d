import logging
from dotenv import load_dotenv
from pydantic import computed_field
from pydantic_settings import BaseSettings
from typing import ClassVar, List, Optional

# Load environment variables from .env file
load_dotenv(".env", override=True)
logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Class to store all the settings of the task board application."""

    # ------------------------------
    # Database - Required
    # ------------------------------
    DATABASE_URL: str
    DB_ECHO: bool = False
    DB_POOL_SIZE: int = 15
    DB_MAX_OVERFLOW: int = 5

    # ------------------------------
    # Auth
    # ------------------------------
    API_KEY: Optional[str] = None

    # ------------------------------
    # HTTP
    # ------------------------------
    API_PREFIX: str = "/api"
    PORT: int = 3000
    ALLOWED_ORIGINS: str = "http://localhost:4200"
    RATE_LIMIT: str = "120/minute"
    RATE_LIMIT_ENABLED: bool = True

    # ------------------------------
    # Environment
    # ------------------------------
    ENVIRONMENT: str = "development"

    # ------------------------------
    # Data & Seeding
    # ------------------------------
    SEED_ON_STARTUP: bool = False

    # ------------------------------
    # Database models
    # ------------------------------
    DB_MODELS: ClassVar[List[str]] = [
        "app.models.channel",
        "app.models.task",
        "app.models.subtask",
        "app.models.tag",
    ]

    # ------------------------------
    # Computed Fields
    # ------------------------------
    @computed_field
    @property
    def allowed_origins_list(self) -> List[str]:
        """CORS origins parsed from the comma separated ALLOWED_ORIGINS value."""
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]

    class Config:
        """Configuration for the settings class."""
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Instantiate the settings
settings = Settings()
