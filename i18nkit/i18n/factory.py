"""Factory functions for creating i18n components.

Builds translators from a directory of YAML files using configuration
settings for anything not passed explicitly.
"""

from pathlib import Path
from typing import Callable, Optional

from i18nkit.configuration import Settings, get_settings
from i18nkit.i18n.handle import T
from i18nkit.i18n.loader import YAMLTranslationLoader
from i18nkit.i18n.models import Errlog
from i18nkit.i18n.translator import Translator
from i18nkit.logging import get_module_logger

logger = get_module_logger()


def create_translator(
    translations_dir: Optional[Path] = None,
    settings: Optional[Settings] = None,
    log: Optional[Errlog] = None,
) -> Translator:
    """Create a Translator from every language in a directory.

    Args:
        translations_dir: Directory of YAML files (default: I18N_TRANSLATIONS_DIR).
        settings: Settings to read defaults from (default: process settings).
        log: Optional diagnostic sink installed on the translator.

    Returns:
        Translator: Configured translator instance

    Raises:
        ValueError: If no directory is configured, it does not exist, or it
            holds no translation files.
        ParseError: If a translation file cannot be parsed.

    Usage:
        translator = create_translator(Path("locales"), log=make_errlog())
        tr = translator.tfunc("en-us")
    """
    settings = settings or get_settings()
    if translations_dir is None:
        translations_dir = settings.i18n.translations_dir
    if translations_dir is None:
        raise ValueError(
            "No translations directory given and I18N_TRANSLATIONS_DIR is not set"
        )

    loader = YAMLTranslationLoader(
        translations_dir=translations_dir,
        file_suffix=settings.i18n.file_suffix,
        use_cache=settings.i18n.use_cache,
    )
    languages = loader.load_all()
    translator = Translator(*languages.values())
    translator.set_log(log)

    logger.info(
        "translator_created",
        translations_dir=str(translations_dir),
        languages=sorted(languages),
    )
    return translator


def create_tfunc(
    *language_ids: str,
    translator: Optional[Translator] = None,
    settings: Optional[Settings] = None,
) -> Callable[[str], T]:
    """Create a resolver, defaulting the fallback chain from settings.

    Args:
        *language_ids: Languages in fallback order (default: I18N_FALLBACK_LANGUAGES).
        translator: Translator to resolve with (default: create_translator()).
        settings: Settings to read defaults from (default: process settings).

    Returns:
        Function mapping a key to a translation handle.
    """
    settings = settings or get_settings()
    if translator is None:
        translator = create_translator(settings=settings)
    if not language_ids:
        language_ids = tuple(settings.i18n.fallback_languages)
    return translator.tfunc(*language_ids)
