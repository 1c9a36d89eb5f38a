"""Configuration settings for the Fortnite-API client."""

from typing import Optional

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..constants import DEFAULT_LANGUAGE, Language

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Client settings loaded from ``FORTNITE_API_*`` environment variables."""

    key: Optional[str] = Field(
        default=None,
        description="API key sent with stats requests, from https://dash.fortnite-api.com/account",
    )
    language: Language = Field(default=DEFAULT_LANGUAGE)

    # HTTP Configuration
    timeout: float = Field(default=30.0, gt=0)
    user_agent: str = Field(default="fortnite-api-client/1.0")

    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="FORTNITE_API_",
        extra="ignore",
    )


def get_settings() -> Settings:
    """Get client settings instance."""
    return Settings()


# Create a global settings instance lazily
settings: Optional[Settings] = None


def get_global_settings() -> Settings:
    """Get or create the global settings instance."""
    global settings
    if settings is None:
        settings = get_settings()
    return settings
