"""Locale-aware string lookup with plural forms and positional arguments."""

from .errors import (
    ConfigurationError,
    LocaleUnavailable,
    LocalizationError,
    MissingKey,
    PluralFormOutOfRange,
    TemplateLoadError,
    UnknownPluralRule,
)
from .localization import (
    StringFormatter,
    get_formatter,
    get_plural_rule,
    init_formatter,
)

__all__ = [
    "ConfigurationError",
    "LocaleUnavailable",
    "LocalizationError",
    "MissingKey",
    "PluralFormOutOfRange",
    "StringFormatter",
    "TemplateLoadError",
    "UnknownPluralRule",
    "get_formatter",
    "get_plural_rule",
    "init_formatter",
]
