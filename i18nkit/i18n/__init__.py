"""i18n system - translation lookup, pluralization and interpolation.

Main components:
- models: Value, Language, Plurality
- loader: load_yaml and YAMLTranslationLoader
- translator: Translator with fallback-chain resolution
- handle: T, the chainable translation handle
- template: best-effort ``{{.Field}}`` rendering
- factory: create_translator and create_tfunc
"""

from i18nkit.i18n.errors import I18nError, ParseError
from i18nkit.i18n.factory import create_tfunc, create_translator
from i18nkit.i18n.handle import T
from i18nkit.i18n.loader import YAMLTranslationLoader, load_yaml
from i18nkit.i18n.models import Errlog, Language, Plurality, Value
from i18nkit.i18n.template import RenderResult, render_template
from i18nkit.i18n.translator import Translator

__all__ = [
    "Errlog",
    "I18nError",
    "Language",
    "ParseError",
    "Plurality",
    "RenderResult",
    "T",
    "Translator",
    "Value",
    "YAMLTranslationLoader",
    "create_tfunc",
    "create_translator",
    "load_yaml",
    "render_template",
]
