"""i18nkit - YAML-backed translations with plural buckets and templating.

Example:
    from i18nkit import Translator, load_yaml

    with open("en-us.yml", "rb") as f:
        en = load_yaml(f, "en-us")

    tr = Translator(en).tfunc("en-us")
    tr("apple.count").plural(3, 10).render()
"""

from i18nkit.i18n import (
    Errlog,
    I18nError,
    Language,
    ParseError,
    Plurality,
    RenderResult,
    T,
    Translator,
    Value,
    YAMLTranslationLoader,
    create_tfunc,
    create_translator,
    load_yaml,
    render_template,
)
from i18nkit.logging import make_errlog

__version__ = "0.1.0"

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
    "make_errlog",
    "render_template",
]
