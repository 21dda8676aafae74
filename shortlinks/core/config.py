"""Application configuration settings."""

import os
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

# Environment variable naming an alternative YAML config file
CONFIG_FILE_ENV = "SHORTLINKS_CONFIG"
DEFAULT_CONFIG_FILE = "config.yaml"


class Settings(BaseSettings):
    """Application settings.

    Values are resolved in this order (first wins): constructor arguments,
    ``SHORTLINKS_*`` environment variables, ``.env`` file, YAML config file.
    """

    model_config = SettingsConfigDict(
        env_prefix="SHORTLINKS_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Server
    host: str = "0.0.0.0"
    port: int = Field(8080, ge=1, le=65535)
    template_path: str = "templates"

    # Database
    database_url: str = "url.db"

    # Application
    app_title: str = "Short Links"
    app_version: str = "0.1.0"
    app_description: str = "Turns long URLs into short random slugs and redirects back"

    # Short links
    domain: str = "http://localhost:8080/"
    slug_length: int = Field(6, ge=1, le=64)
    max_slug_attempts: int = Field(5, ge=1)

    # Logging
    log_level: str = "INFO"

    @field_validator("domain")
    @classmethod
    def ensure_trailing_slash(cls, value: str) -> str:
        """Short URLs are ``domain + slug``, so the domain must end with a slash."""
        value = value.strip()
        if not value.endswith("/"):
            value += "/"
        return value

    @field_validator("log_level")
    @classmethod
    def upper_log_level(cls, value: str) -> str:
        return value.upper()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        yaml_file = os.environ.get(CONFIG_FILE_ENV, DEFAULT_CONFIG_FILE)
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls, yaml_file=yaml_file),
            file_secret_settings,
        )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
