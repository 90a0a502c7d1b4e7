"""Formatters backed by the configured bundle directory or the packaged bundles."""

from __future__ import annotations

from functools import cache, partial

from propstrings.catalog import DirectoryLoader, PackageLoader
from propstrings.config import FormatterSettings, default_settings

from .formatter import StringFormatter, init_formatter, split_plural_forms


def bundle_loader(settings: FormatterSettings | None = None) -> DirectoryLoader | PackageLoader:
    """Return the loader selected by ``settings.locales_dir``."""

    settings = settings or default_settings()
    if settings.locales_dir is not None:
        return DirectoryLoader(settings.locales_dir)
    return PackageLoader()


def available_locales(settings: FormatterSettings | None = None) -> tuple[str, ...]:
    """Return the locales with a published bundle."""

    return bundle_loader(settings).available_locales()


@cache
def get_formatter(
    locale: str | None = None,
    settings: FormatterSettings | None = None,
) -> StringFormatter:
    """Return a cached formatter for ``locale`` using the configured bundles."""

    settings = settings or default_settings()
    alternate = settings.alternate_locale

    return init_formatter(
        locale or settings.default_locale,
        settings.fallback_locale,
        bundle_loader(settings),
        resolve_alternate=lambda _requested: alternate,
        plural_policy=settings.plural_policy,
        form_splitter=partial(split_plural_forms, delimiter=settings.plural_form_delimiter),
    )


__all__ = ["available_locales", "bundle_loader", "get_formatter"]
