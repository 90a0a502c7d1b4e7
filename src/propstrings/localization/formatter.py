"""Locale-aware string lookup with plural selection and argument substitution."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Literal, Mapping, Protocol, Sequence

from propstrings.errors import (
    ConfigurationError,
    LocaleUnavailable,
    MissingKey,
    PluralFormOutOfRange,
    TemplateLoadError,
)

from .plurals import PLURAL_RULE_KEY, PluralRule, get_plural_rule
from .substitution import Args, substitute

_LOGGER = logging.getLogger(__name__)

REFERENCE_LOCALE = "en-US"
PLURAL_FORM_DELIMITER = ";"
PLURAL_POLICIES = ("fail", "clamp")

PluralPolicy = Literal["fail", "clamp"]
TemplateTable = Mapping[str, str]
FormSplitter = Callable[[str], Sequence[str]]


class TemplateLoader(Protocol):
    """Callable returning the template table for a locale, or ``None``."""

    def __call__(self, locale: str) -> TemplateTable | None:
        ...


def reference_locale(requested: str) -> str:
    """Default alternate-locale resolver: always the reference locale."""

    return REFERENCE_LOCALE


def split_plural_forms(template: str, delimiter: str = PLURAL_FORM_DELIMITER) -> list[str]:
    """Split a plural template into its ordered sub-forms."""

    return template.split(delimiter)


def _lookup(
    key: str,
    primary: TemplateTable,
    fallback: TemplateTable,
    locales: Sequence[str],
) -> str:
    try:
        return primary[key]
    except KeyError:
        pass
    try:
        return fallback[key]
    except KeyError:
        raise MissingKey(key, locales) from None


@dataclass(frozen=True)
class StringFormatter:
    """Resolve, pluralize and fill localized templates for one locale.

    Instances are immutable; build them with :func:`init_formatter`.
    """

    locale: str
    fallback_locale: str
    plural_rule: PluralRule
    _primary: TemplateTable = field(repr=False)
    _fallback: TemplateTable = field(repr=False)
    plural_policy: PluralPolicy = "fail"
    form_splitter: FormSplitter = field(default=split_plural_forms, repr=False)

    @property
    def plural_form_count(self) -> int:
        return self.plural_rule.form_count

    def has(self, key: str) -> bool:
        return key in self._primary or key in self._fallback

    def template(self, key: str) -> str:
        """Return the raw template for ``key`` without any processing."""

        return _lookup(key, self._primary, self._fallback, self._locales())

    def get(
        self,
        key: str,
        args: Args | None = None,
        quantity: float | None = None,
    ) -> str:
        """Return the localized string for ``key``.

        ``quantity`` picks the plural form before substitution; ``args`` fills
        ``%S`` and ``%N$S`` placeholders. A bare value is treated as a single
        argument. Placeholders beyond the supplied arguments are kept verbatim.
        """

        text = self.template(key)

        if quantity is not None:
            text = self._select_form(key, text, quantity)

        if args is not None:
            text = substitute(text, args)

        return text

    __call__ = get

    def _select_form(self, key: str, template: str, quantity: Any) -> str:
        forms = self.form_splitter(template)
        index = self.plural_rule.index_for(quantity)

        if 0 <= index < len(forms):
            return forms[index]

        if self.plural_policy == "clamp" and forms:
            _LOGGER.debug(
                "Clamping plural form #%s of %r to #%s for quantity %s",
                index,
                key,
                len(forms) - 1,
                quantity,
            )
            return forms[-1]

        raise PluralFormOutOfRange(key, index, len(forms), quantity)

    def _locales(self) -> tuple[str, ...]:
        if self.locale == self.fallback_locale:
            return (self.locale,)
        return (self.locale, self.fallback_locale)


def _load_table(loader: TemplateLoader, locale: str) -> TemplateTable | None:
    try:
        table = loader(locale)
    except TemplateLoadError as error:
        _LOGGER.warning("Ignoring malformed template table for %s: %s", locale, error)
        return None

    if table is None:
        _LOGGER.debug("No template table available for %s", locale)
        return None

    _LOGGER.debug("Loaded %d template(s) for %s", len(table), locale)
    return MappingProxyType(dict(table))


def init_formatter(
    locale: str,
    fallback_locale: str,
    loader: TemplateLoader,
    *,
    resolve_alternate: Callable[[str], str] | None = None,
    plural_policy: PluralPolicy = "fail",
    form_splitter: FormSplitter | None = None,
) -> StringFormatter:
    """Load the template tables for ``locale`` and return a ready formatter.

    The requested locale is tried first, then ``resolve_alternate(locale)``
    (the reference locale by default); the first table that loads becomes the
    primary table. ``fallback_locale`` is always loaded as well and answers
    keys the primary table lacks. No other locales are tried.

    Raises :class:`LocaleUnavailable` when neither the requested nor the
    alternate locale can be loaded, even if the fallback table would answer
    every key; the fallback never stands in as the primary table. Raises
    :class:`MissingKey` when no table defines
    ``pluralRule`` and :class:`UnknownPluralRule` when its value is not a
    registered family.
    """

    if plural_policy not in PLURAL_POLICIES:
        raise ConfigurationError(
            f"Plural policy must be one of {', '.join(PLURAL_POLICIES)}; got {plural_policy!r}"
        )

    resolver = resolve_alternate or reference_locale
    tried = [locale]
    selected = locale
    primary = _load_table(loader, locale)

    if primary is None:
        alternate = resolver(locale)
        if alternate != locale:
            tried.append(alternate)
            primary = _load_table(loader, alternate)
            selected = alternate
        if primary is None:
            raise LocaleUnavailable(tried)
        _LOGGER.warning("Locale %s is unavailable; using %s instead", locale, selected)

    if fallback_locale == selected:
        fallback: TemplateTable = primary
    else:
        loaded = _load_table(loader, fallback_locale)
        if loaded is None:
            _LOGGER.warning(
                "Fallback locale %s is unavailable; missing keys will not be recovered",
                fallback_locale,
            )
            loaded = MappingProxyType({})
        fallback = loaded

    locales = (selected,) if fallback_locale == selected else (selected, fallback_locale)
    rule = get_plural_rule(_lookup(PLURAL_RULE_KEY, primary, fallback, locales))

    return StringFormatter(
        locale=selected,
        fallback_locale=fallback_locale,
        plural_rule=rule,
        _primary=primary,
        _fallback=fallback,
        plural_policy=plural_policy,
        form_splitter=form_splitter or split_plural_forms,
    )


__all__ = [
    "FormSplitter",
    "PLURAL_FORM_DELIMITER",
    "PLURAL_POLICIES",
    "PluralPolicy",
    "REFERENCE_LOCALE",
    "StringFormatter",
    "TemplateLoader",
    "TemplateTable",
    "init_formatter",
    "reference_locale",
    "split_plural_forms",
]
