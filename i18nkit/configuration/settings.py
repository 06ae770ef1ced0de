"""i18nkit configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from i18nkit.configuration.i18n import I18nSettings


class Settings(BaseSettings):
    """Library configuration settings - main aggregator.

    Environment Variables:
        PREFIX: Environment prefix, empty in production
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)

    Example:
        ```python
        from i18nkit.configuration import get_settings

        settings = get_settings()
        translations_dir = settings.i18n.translations_dir

        if settings.is_production:
            # JSON logs...
        ```
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    i18n: I18nSettings

    @property
    def is_production(self) -> bool:
        """Check if running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        if "i18n" not in kwargs:
            kwargs["i18n"] = I18nSettings()
        super().__init__(**kwargs)
