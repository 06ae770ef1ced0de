"""Configuration module - public API.

Centralized configuration using Pydantic BaseSettings. Only the factory and
the logging setup read it; core classes take explicit arguments.

Exports:
    settings: Singleton Settings instance
    get_settings: Accessor for the singleton
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation loading settings
"""

from i18nkit.configuration.i18n import I18nSettings
from i18nkit.configuration.settings import Settings

settings = Settings()


def get_settings() -> Settings:
    """Return the process-wide Settings instance."""
    return settings


__all__ = ["Settings", "I18nSettings", "settings", "get_settings"]
