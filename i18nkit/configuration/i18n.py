"""Translation loading settings."""

from pathlib import Path
from typing import List, Optional

from pydantic import Field

from i18nkit.configuration.base import LibrarySettings


class I18nSettings(LibrarySettings):
    """Settings used when building a translator from a directory of files.

    Environment Variables:
        I18N_TRANSLATIONS_DIR: Directory holding YAML translation files
            named ``<language>.yml`` or ``<domain>.<language>.yml``
        I18N_FILE_SUFFIX: Translation file suffix (default: ".yml")
        I18N_USE_CACHE: Cache loaded languages in the loader (default: True)
        I18N_FALLBACK_LANGUAGES: Comma-separated default fallback chain,
            e.g. "en-us,da-dk"

    Example:
        ```python
        from i18nkit.configuration import get_settings

        settings = get_settings()
        languages = settings.i18n.fallback_languages
        ```
    """

    translations_dir: Optional[Path] = Field(
        default=None,
        alias="I18N_TRANSLATIONS_DIR",
        description="Directory containing YAML translation files",
    )
    file_suffix: str = Field(
        default=".yml",
        alias="I18N_FILE_SUFFIX",
        description="Suffix of translation files",
    )
    use_cache: bool = Field(
        default=True,
        alias="I18N_USE_CACHE",
        description="Cache loaded languages in memory",
    )
    fallback_languages_raw: str = Field(
        default="",
        alias="I18N_FALLBACK_LANGUAGES",
        description="Comma-separated language identifiers in fallback order",
    )

    @property
    def fallback_languages(self) -> List[str]:
        """Fallback chain parsed from I18N_FALLBACK_LANGUAGES."""
        return [
            language.strip()
            for language in self.fallback_languages_raw.split(",")
            if language.strip()
        ]
