"""Translator service for resolving keys across an ordered list of languages.

Lookups never fail hard: a key missing from every language resolves to a
handle that renders the key itself. Misses are reported to the optional
diagnostic sink installed with set_log().
"""

from typing import Callable, Dict, List, Optional

from i18nkit.i18n.handle import T
from i18nkit.i18n.models import Errlog, Language, Plurality, Value
from i18nkit.logging import get_module_logger

logger = get_module_logger()


class Translator:
    """Index of loaded languages with fallback-chain key resolution.

    The language set is fixed at construction. After that the translator is
    only read, so it is safe to share between threads as long as nobody
    mutates the loaded languages.

    Attributes:
        languages: Loaded languages keyed by identifier.
        log: Optional diagnostic sink, ``log(fmt, *args)``.
    """

    def __init__(self, *languages: Language):
        """Initialize Translator.

        Args:
            *languages: Languages to index. A later language with the same
                identifier replaces an earlier one.
        """
        self.languages: Dict[str, Language] = {}
        for language in languages:
            self.languages[language.id] = language
        self.log: Optional[Errlog] = None
        logger.info("initialized_translator", language_count=len(self.languages))

    def set_log(self, log: Optional[Errlog]) -> None:
        """Install the diagnostic sink for missing keys and template errors.

        Args:
            log: Callable taking a %-style format string and its arguments,
                or None to drop diagnostics.
        """
        self.log = log

    def _report(self, fmt: str, *args) -> None:
        if self.log is not None:
            self.log(fmt, *args)

    def tfunc(self, *language_ids: str) -> Callable[[str], T]:
        """Return a resolver bound to languages in priority order.

        The first language has first priority. If a key is not found there
        the next language is tried, and so on.

        Args:
            *language_ids: Language identifiers in fallback order.

        Returns:
            Function mapping a key to a translation handle.
        """
        order = tuple(language_ids)

        def resolve(key: str) -> T:
            for language_id in order:
                language = self.languages.get(language_id)
                if language is None:
                    self._report("Language %s does not exist", language_id)
                    continue
                value = language.get(key)
                if value is not None:
                    return T(value=value, plurality=Plurality.ONE, log=self.log)
                self._report(
                    "No translation match for key: %s in language %s, trying next language",
                    key,
                    language_id,
                )

            self._report(
                "No translation match for key: %s in any of the languages given",
                key,
            )
            return T(value=Value.from_key(key), log=self.log)

        return resolve

    def get_language(self, language_id: str) -> Optional[Language]:
        """Get a loaded language.

        Args:
            language_id: Language identifier.

        Returns:
            Language or None if not loaded.
        """
        return self.languages.get(language_id)

    def get_available_languages(self) -> List[str]:
        """Get identifiers of loaded languages."""
        return list(self.languages.keys())

    def has_key(self, key: str, language_id: str) -> bool:
        """Check if a translation exists for key in a language.

        Args:
            key: Translation key.
            language_id: Language to check.

        Returns:
            True if the key is translated in that language, False otherwise.
        """
        language = self.languages.get(language_id)
        return language is not None and language.has_key(key)
