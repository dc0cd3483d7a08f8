"""Pydantic Settings model for application configuration."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from gitvault.utils.constants import DEFAULT_BACKUP_DIR, DEFAULT_CONFIG_PATH, DEFAULT_GITHUB_API_URL


class Settings(BaseSettings):
    """Environment variable settings for the application."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Generic application-wide settings
    DEBUG: bool = False

    # GitHub API settings
    GITHUB_API_URL: str = DEFAULT_GITHUB_API_URL

    # Mirror settings
    GITVAULT_CONFIG_PATH: Path = DEFAULT_CONFIG_PATH
    GITVAULT_BACKUP_DIR: Path = DEFAULT_BACKUP_DIR


settings = Settings()
