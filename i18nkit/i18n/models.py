"""Translation models for i18n system.

Defines core data structures for plural buckets, translated values and
loaded languages.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Iterator, Optional

# Diagnostic sink: receives a %-style format string and its arguments.
Errlog = Callable[..., None]


class Plurality(int, Enum):
    """Plural buckets a translated value can be rendered in.

    A fixed closed set of tiers, not the full CLDR category list.
    """

    ZERO = 0
    ONE = 1
    FEW = 2
    MANY = 3
    OTHER = 4


@dataclass(frozen=True)
class Value:
    """Translated strings for a single key, one per plural bucket.

    Any bucket may be empty and any bucket may contain template placeholders
    such as ``{{.Count}}``. Frozen so a loaded value can be shared freely.

    Attributes:
        zero: Text used when the count is zero.
        one: Text used for a single item and the default bucket.
        few: Text used for small counts, always rendered with ``Count``.
        many: Text used when the count reaches the caller's threshold.
        other: Free-form variant selected explicitly.
    """

    zero: str = ""
    one: str = ""
    few: str = ""
    many: str = ""
    other: str = ""

    @classmethod
    def from_key(cls, key: str) -> "Value":
        """Create a Value where every bucket is the key itself.

        Used when a key cannot be resolved in any language so that the raw
        key is displayed instead of nothing.

        Args:
            key: Translation key that could not be resolved.

        Returns:
            Value with all five buckets set to ``key``.
        """
        return cls(zero=key, one=key, few=key, many=key, other=key)

    def get(self, plurality: Plurality) -> str:
        """Return the raw text for a plural bucket.

        Args:
            plurality: Bucket to read.

        Returns:
            Bucket text (may be empty).
        """
        return getattr(self, plurality.name.lower())


@dataclass
class Language:
    """A loaded language: an identifier plus its translated keys.

    Keys are flat strings. Dots are part of the key, not a nesting
    separator. Treated as read-only once handed to a Translator.

    Attributes:
        id: Language identifier (e.g., "en-us").
        keys: Mapping of translation key to Value.
    """

    id: str
    keys: Dict[str, Value] = field(default_factory=dict)

    def get(self, key: str) -> Optional[Value]:
        """Retrieve the Value for a key, or None if not translated."""
        return self.keys.get(key)

    def has_key(self, key: str) -> bool:
        """Check if a translation exists for key."""
        return key in self.keys

    def __contains__(self, key: object) -> bool:
        return key in self.keys

    def __len__(self) -> int:
        return len(self.keys)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys)
