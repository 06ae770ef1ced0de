"""Custom exceptions for the i18n system.

Only load-time problems surface as exceptions. Lookup and rendering problems
are reported through the translator's diagnostic sink instead.
"""


class I18nError(Exception):
    """Base exception for all i18n-related errors.

    Example:
        try:
            language = load_yaml(stream, "en-us")
        except I18nError as e:
            logger.error("translation_load_failed", error=str(e))
    """

    pass


class ParseError(I18nError, ValueError):
    """Raised when a translation source cannot be read or parsed.

    Covers unreadable streams, malformed YAML and documents whose shape does
    not match the expected key -> plural buckets mapping.

    Example:
        >>> load_yaml(b"title: [", "en-us")
        Traceback (most recent call last):
        ...
        ParseError: Failed to parse translations for en-us: ...
    """

    def __init__(self, message: str, language_id: str = ""):
        super().__init__(message)
        self.language_id = language_id
