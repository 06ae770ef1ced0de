"""Translation loading from YAML sources.

Expected document format (keys are flat, dots are literal):

    apple.count:
      zero: No apples
      one: 1 apple
      few: "{{.Count}} apples"
      many: Many apples
      other: "{{.Name}} other apples"

Every bucket is optional. Load failures raise ParseError, unlike lookup and
rendering which only report through the diagnostic sink.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError, field_validator

from i18nkit.i18n.errors import ParseError
from i18nkit.i18n.models import Language, Value
from i18nkit.logging import get_module_logger

logger = get_module_logger()


class ValueSchema(BaseModel):
    """Validation schema for one translation entry. Unknown fields are ignored."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    zero: str = ""
    one: str = ""
    few: str = ""
    many: str = ""
    other: str = ""

    @field_validator("zero", "one", "few", "many", "other", mode="before")
    @classmethod
    def _scalar_to_str(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return str(value)
        return value

    def to_value(self) -> Value:
        return Value(
            zero=self.zero,
            one=self.one,
            few=self.few,
            many=self.many,
            other=self.other,
        )


_DOCUMENT = TypeAdapter(Dict[str, Optional[ValueSchema]])


def _read(stream: Any, language_id: str) -> Union[str, bytes]:
    if isinstance(stream, (str, bytes)):
        return stream
    if isinstance(stream, (bytearray, memoryview)):
        return bytes(stream)
    try:
        return stream.read()
    except (OSError, AttributeError, ValueError) as e:
        raise ParseError(
            f"Failed to read translations for {language_id}: {e}", language_id
        ) from e


def load_yaml(stream: Any, language_id: str) -> Language:
    """Load a language from a YAML source.

    Args:
        stream: YAML text as str or bytes, or a readable object such as an
            open file or io.BytesIO.
        language_id: Identifier given to the loaded language.

    Returns:
        Language with every key in the document.

    Raises:
        ParseError: If the source cannot be read, is not valid YAML, or is
            not a mapping of key -> plural buckets.
    """
    content = _read(stream, language_id)

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ParseError(
            f"Failed to parse translations for {language_id}: {e}", language_id
        ) from e

    if data is None:
        return Language(id=language_id)

    if not isinstance(data, dict):
        raise ParseError(
            f"Translations for {language_id} must be a mapping, got {type(data).__name__}",
            language_id,
        )

    try:
        entries = _DOCUMENT.validate_python({str(k): v for k, v in data.items()})
    except ValidationError as e:
        raise ParseError(
            f"Invalid translations for {language_id}: {e}", language_id
        ) from e

    keys = {
        key: entry.to_value() if entry is not None else Value()
        for key, entry in entries.items()
    }
    return Language(id=language_id, keys=keys)


class YAMLTranslationLoader:
    """Loader for a directory of YAML translation files.

    Files are named ``<language>.yml`` or ``<domain>.<language>.yml``. All
    files of one language are merged into a single Language, later files
    (in sorted name order) overriding keys of earlier ones.

    Attributes:
        translations_dir: Path to directory containing YAML files.
        file_suffix: Suffix of translation files.
        use_cache: Whether loaded languages are kept in memory.
        cache: Loaded languages keyed by identifier.
    """

    def __init__(
        self,
        translations_dir: Path,
        file_suffix: str = ".yml",
        use_cache: bool = True,
    ):
        """Initialize YAML translation loader.

        Args:
            translations_dir: Path to directory with YAML translation files.
            file_suffix: Suffix of translation files (default: ".yml").
            use_cache: Whether to cache loaded languages in memory.

        Raises:
            ValueError: If the directory does not exist.
        """
        self.translations_dir = Path(translations_dir)
        self.file_suffix = file_suffix
        self.use_cache = use_cache
        self.cache: Dict[str, Language] = {}

        if not self.translations_dir.is_dir():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_yaml_loader",
            translations_dir=str(self.translations_dir),
            use_cache=use_cache,
        )

    def _language_files(self, language_id: str) -> List[Path]:
        files = set(self.translations_dir.glob(f"*.{language_id}{self.file_suffix}"))
        single = self.translations_dir / f"{language_id}{self.file_suffix}"
        if single.is_file():
            files.add(single)
        return sorted(files)

    def load(self, language_id: str) -> Language:
        """Load and merge every file for a language.

        Args:
            language_id: Language to load.

        Returns:
            Language with keys from all matching files.

        Raises:
            FileNotFoundError: If no file exists for the language.
            ParseError: If a file cannot be parsed.
        """
        if self.use_cache and language_id in self.cache:
            logger.debug("loaded_from_cache", language=language_id)
            return self.cache[language_id]

        files = self._language_files(language_id)
        if not files:
            raise FileNotFoundError(
                f"No translation files found for language {language_id} in {self.translations_dir}"
            )

        language = Language(id=language_id)
        for path in files:
            try:
                with open(path, "rb") as f:
                    loaded = load_yaml(f, language_id)
            except ParseError as e:
                logger.error("yaml_parse_error", file=str(path), error=str(e))
                raise
            language.keys.update(loaded.keys)

        logger.info(
            "loaded_translations",
            language=language_id,
            file_count=len(files),
            key_count=len(language),
        )

        if self.use_cache:
            self.cache[language_id] = language

        return language

    def discover(self) -> List[str]:
        """List language identifiers found in file names, sorted."""
        found = set()
        for path in self.translations_dir.glob(f"*{self.file_suffix}"):
            stem = path.name[: -len(self.file_suffix)]
            language_id = stem.rsplit(".", 1)[-1]
            if language_id:
                found.add(language_id)
        return sorted(found)

    def load_all(self) -> Dict[str, Language]:
        """Load every language found in the directory.

        Returns:
            Dict mapping language identifier to Language.

        Raises:
            ValueError: If the directory holds no translation files.
            ParseError: If a file cannot be parsed.
        """
        language_ids = self.discover()
        if not language_ids:
            raise ValueError(f"No translation files found in {self.translations_dir}")

        return {language_id: self.load(language_id) for language_id in language_ids}

    def clear_cache(self) -> None:
        """Clear all cached languages."""
        self.cache.clear()
        logger.info("cleared_translation_cache")
