"""String lookup, pluralization and substitution helpers."""

from .bundles import available_locales, get_formatter
from .formatter import (
    REFERENCE_LOCALE,
    StringFormatter,
    TemplateLoader,
    init_formatter,
    reference_locale,
    split_plural_forms,
)
from .plurals import PLURAL_RULE_KEY, PluralRule, PluralRuleFamily, get_plural_rule
from .substitution import normalise_args, substitute

__all__ = [
    "PLURAL_RULE_KEY",
    "PluralRule",
    "PluralRuleFamily",
    "REFERENCE_LOCALE",
    "StringFormatter",
    "TemplateLoader",
    "available_locales",
    "get_formatter",
    "get_plural_rule",
    "init_formatter",
    "normalise_args",
    "reference_locale",
    "split_plural_forms",
    "substitute",
]
