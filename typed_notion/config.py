"""
Configuration for the typed Notion SDK.

Values come from the environment (or a ``.env`` file) and can be
overridden by passing keyword arguments to ``NotionSettings``.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.notion.com/v1"
DEFAULT_API_VERSION = "2022-06-28"


class NotionSettings(BaseSettings):
    """Notion API connection settings."""

    NOTION_API_KEY: str = Field(..., description="Integration token (secret_... or ntn_...)")
    NOTION_VERSION: str = Field(default=DEFAULT_API_VERSION, description="Notion-Version header value")
    NOTION_BASE_URL: str = Field(default=DEFAULT_BASE_URL, description="REST API base URL")
    NOTION_TIMEOUT: float = Field(default=30.0, description="Request timeout in seconds")

    LOG_LEVEL: str = Field(default="INFO", description="Log level for setup_logging")
    LOG_FORMAT: str = Field(default="standard", description="standard, simple or json")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )

    @field_validator("NOTION_API_KEY")
    @classmethod
    def validate_api_key(cls, v):
        if not v or not v.strip():
            raise ValueError("NOTION_API_KEY must not be empty")
        return v.strip()

    @field_validator("NOTION_BASE_URL")
    @classmethod
    def validate_base_url(cls, v):
        if not v.startswith(("https://", "http://")):
            raise ValueError("NOTION_BASE_URL must be an http(s) URL")
        return v.rstrip("/")

    @field_validator("NOTION_TIMEOUT")
    @classmethod
    def validate_timeout(cls, v):
        if v <= 0:
            raise ValueError("NOTION_TIMEOUT must be positive")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v):
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"LOG_LEVEL must be one of: {valid_levels}")
        return v.upper()

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v):
        valid_formats = ["standard", "json", "simple"]
        if v not in valid_formats:
            raise ValueError(f"LOG_FORMAT must be one of: {valid_formats}")
        return v


@lru_cache()
def get_settings() -> NotionSettings:
    """Settings instance loaded from the environment (cached)."""
    return NotionSettings()
