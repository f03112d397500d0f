"""
Form Builder - Configuration

Pydantic Settings for all configuration via environment variables.
"""

from pydantic_settings import BaseSettings
from pydantic import Field
from typing import Literal, Optional


class StoreSettings(BaseSettings):
    """Object store and listing cache configuration."""
    cache_enabled: bool = Field(True, alias="FORM_CACHE_ENABLED")
    cache_ttl: int = Field(60, alias="FORM_CACHE_TTL_SECONDS")
    cache_max_entries: int = Field(32, alias="FORM_CACHE_MAX_ENTRIES")

    model_config = {"env_prefix": "", "extra": "ignore"}


class PreferenceSettings(BaseSettings):
    """User preference flags consumed by the editors."""
    autosave: bool = Field(False, alias="FORM_AUTOSAVE")
    theme: Literal["system", "light", "dark"] = Field("system", alias="FORM_THEME")
    backup_frequency: Literal["never", "daily", "weekly", "monthly"] = Field(
        "weekly", alias="FORM_BACKUP_FREQUENCY"
    )

    model_config = {"env_prefix": "", "extra": "ignore"}


class ExportSettings(BaseSettings):
    """Export/import configuration."""
    indent: Optional[int] = Field(None, alias="FORM_EXPORT_INDENT")

    model_config = {"env_prefix": "", "extra": "ignore"}


class LogSettings(BaseSettings):
    """Logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "INFO", alias="LOG_LEVEL"
    )
    format: Literal["json", "text"] = Field("text", alias="LOG_FORMAT")

    model_config = {"env_prefix": "", "extra": "ignore"}


class Settings(BaseSettings):
    """Main settings aggregating all configuration."""
    store: StoreSettings = Field(default_factory=StoreSettings)
    preferences: PreferenceSettings = Field(default_factory=PreferenceSettings)
    export: ExportSettings = Field(default_factory=ExportSettings)
    log: LogSettings = Field(default_factory=LogSettings)

    model_config = {"env_prefix": "", "extra": "ignore"}


def get_settings() -> Settings:
    """Load settings from environment variables."""
    from dotenv import load_dotenv
    load_dotenv()
    return Settings()
