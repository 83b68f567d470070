"""
Application configuration using Pydantic Settings.

All environment variables are accessed through this config object.
Never use os.getenv() directly in business logic.
"""

from typing import List

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Google Web Fonts Configuration
    GOOGLE_FONTS_API_URL: str = Field(
        default="https://www.googleapis.com/webfonts/v1/webfonts",
        description="Google Web Fonts listing endpoint",
    )
    GOOGLE_FONTS_API_KEY: str = Field(
        default="",
        validation_alias=AliasChoices("GOOGLE_FONTS_API_KEY", "APIKEY"),
        description="Google Web Fonts API key (server-side only)",
    )
    FONTS_API_TIMEOUT: float = Field(
        default=10.0,
        description="Timeout in seconds for the font catalog request",
    )

    # Application Configuration
    ALLOWED_ORIGINS: List[str] = Field(
        default=["*"],
        description="CORS allowed origins",
    )
    MAX_UPLOAD_SIZE: int = Field(
        default=10485760,
        description="Maximum size of each uploaded file in bytes (10MB)",
    )

    # Storage Configuration
    STORAGE_PATH: str = Field(
        default="/tmp/certificates",
        description="Root directory for per-request workspaces",
    )
    FONTS_DIR: str = Field(
        default="fonts",
        description="Directory scanned for .ttf/.otf fonts at generation time",
    )
    FILE_TTL_HOURS: int = Field(
        default=24,
        description="Age after which an abandoned workspace is removed",
    )
    CLEANUP_INTERVAL_HOURS: int = Field(
        default=1,
        description="Interval between stale workspace sweeps",
    )

    # Certificate Style Defaults
    DEFAULT_FONT_FAMILY: str = Field(
        default="Lato",
        description="Font family used when the request does not name one",
    )
    DEFAULT_FONT_SIZE: int = Field(
        default=80,
        description="Font size in pixels used when the request does not give one",
    )
    DEFAULT_FONT_COLOR: str = Field(
        default="gold",
        description="Text color used when the request does not give one",
    )


# Global settings instance
settings = Settings()
