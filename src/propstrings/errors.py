"""Exception hierarchy shared by the formatter, catalogue and config layers."""

from __future__ import annotations

from typing import Sequence


class LocalizationError(Exception):
    """Base class for every error raised by :mod:`propstrings`."""


class ConfigurationError(LocalizationError, ValueError):
    """Raised when settings or bundle metadata violate schema expectations."""


class UnknownPluralRule(ConfigurationError):
    """Raised when a bundle names a plural rule that is not registered."""

    def __init__(self, rule_id: object) -> None:
        super().__init__(f"Unknown plural rule: {rule_id!r}")
        self.rule_id = rule_id


class TemplateLoadError(LocalizationError):
    """Raised by loaders when a bundle exists but cannot be parsed."""


class LocaleUnavailable(LocalizationError):
    """Raised when no template table can be loaded for the requested locale."""

    def __init__(self, locales: Sequence[str]) -> None:
        tried = ", ".join(locales) or "<none>"
        super().__init__(f"No template table could be loaded (tried: {tried})")
        self.locales = tuple(locales)


class MissingKey(LocalizationError, LookupError):
    """Raised when a key is absent from both the primary and fallback tables."""

    def __init__(self, key: str, locales: Sequence[str] = ()) -> None:
        message = f"Missing localized string {key!r}"
        if locales:
            message += f" in {', '.join(locales)}"
        super().__init__(message)
        self.key = key
        self.locales = tuple(locales)


class PluralFormOutOfRange(LocalizationError, IndexError):
    """Raised when a plural rule selects a form the template does not define."""

    def __init__(self, key: str, index: int, form_count: int, quantity: float) -> None:
        super().__init__(
            f"Plural form #{index} of {key!r} for quantity {quantity} is unavailable "
            f"({form_count} form(s) defined)"
        )
        self.key = key
        self.index = index
        self.form_count = form_count
        self.quantity = quantity


__all__ = [
    "ConfigurationError",
    "LocaleUnavailable",
    "LocalizationError",
    "MissingKey",
    "PluralFormOutOfRange",
    "TemplateLoadError",
    "UnknownPluralRule",
]
