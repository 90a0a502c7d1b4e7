"""Utilities for validating locale bundles against the reference locale."""

from __future__ import annotations

import argparse
import re
from pathlib import Path
from typing import Mapping, Sequence

from propstrings.catalog import DirectoryLoader, PackageLoader
from propstrings.errors import TemplateLoadError, UnknownPluralRule
from propstrings.localization.formatter import (
    PLURAL_FORM_DELIMITER,
    REFERENCE_LOCALE,
    TemplateLoader,
)
from propstrings.localization.plurals import PLURAL_RULE_KEY, PluralRule, get_plural_rule

PLACEHOLDER_PATTERN = re.compile(r"%(?:(\d+)\$)?s", re.IGNORECASE)


def _format_scope(scope: str, message: str) -> str:
    return f"{scope}: {message}"


def placeholder_positions(template: str) -> set[int]:
    """Return the 1-based argument positions referenced by ``template``."""

    return {int(position) if position else 1 for position in PLACEHOLDER_PATTERN.findall(template)}


def _resolve_rule(scope: str, table: Mapping[str, str], errors: list[str]) -> PluralRule | None:
    rule_id = table.get(PLURAL_RULE_KEY)
    if rule_id is None:
        errors.append(_format_scope(scope, f"'{PLURAL_RULE_KEY}' is not defined"))
        return None
    try:
        return get_plural_rule(rule_id)
    except UnknownPluralRule:
        errors.append(_format_scope(scope, f"plural rule '{rule_id}' is not recognised"))
        return None


def _validate_keys(
    scope: str,
    table: Mapping[str, str],
    reference: Mapping[str, str],
) -> list[str]:
    errors: list[str] = []

    missing = sorted(set(reference) - set(table) - {PLURAL_RULE_KEY})
    if missing:
        errors.append(
            _format_scope(scope, f"missing {len(missing)} key(s): {', '.join(missing)}")
        )

    unexpected = sorted(set(table) - set(reference) - {PLURAL_RULE_KEY})
    if unexpected:
        errors.append(
            _format_scope(scope, f"keys absent from the reference locale: {', '.join(unexpected)}")
        )

    return errors


def _validate_placeholders(
    scope: str,
    table: Mapping[str, str],
    reference: Mapping[str, str],
) -> list[str]:
    errors: list[str] = []

    for key in sorted(set(table) & set(reference)):
        if key == PLURAL_RULE_KEY:
            continue
        expected = placeholder_positions(reference[key])
        found = placeholder_positions(table[key])
        if found - expected:
            extra = ", ".join(str(position) for position in sorted(found - expected))
            errors.append(
                _format_scope(
                    f"{scope}.{key}",
                    f"references argument(s) {extra} not used by the reference locale",
                )
            )

    return errors


def _validate_plural_forms(
    scope: str,
    table: Mapping[str, str],
    reference: Mapping[str, str],
    rule: PluralRule,
    delimiter: str,
) -> list[str]:
    errors: list[str] = []

    for key, template in sorted(table.items()):
        if key == PLURAL_RULE_KEY:
            continue
        reference_template = reference.get(key, template)
        if delimiter not in template and delimiter not in reference_template:
            continue

        form_count = len(template.split(delimiter))
        if form_count != rule.form_count:
            errors.append(
                _format_scope(
                    f"{scope}.{key}",
                    (
                        f"defines {form_count} plural form(s) but rule "
                        f"{rule.rule_id} expects {rule.form_count}"
                    ),
                )
            )

    return errors


def validate_table(
    locale: str,
    table: Mapping[str, str],
    reference: Mapping[str, str] | None = None,
    *,
    delimiter: str = PLURAL_FORM_DELIMITER,
) -> list[str]:
    """Return a list of issues for ``table`` compared with ``reference``."""

    errors: list[str] = []
    rule = _resolve_rule(locale, table, errors)

    if reference is not None and reference is not table:
        errors.extend(_validate_keys(locale, table, reference))
        errors.extend(_validate_placeholders(locale, table, reference))

    if rule is not None:
        errors.extend(
            _validate_plural_forms(locale, table, reference or table, rule, delimiter)
        )

    return errors


def validate_locales(
    loader: TemplateLoader,
    locales: Sequence[str],
    *,
    reference_locale: str = REFERENCE_LOCALE,
    delimiter: str = PLURAL_FORM_DELIMITER,
) -> dict[str, list[str]]:
    """Validate every locale in ``locales`` and return issues keyed by locale."""

    reference = loader(reference_locale)
    results: dict[str, list[str]] = {}
    if reference is None:
        results[reference_locale] = [_format_scope(reference_locale, "bundle not found")]

    for locale in locales:
        try:
            table = loader(locale)
        except TemplateLoadError as error:
            results[locale] = [_format_scope(locale, f"failed to load bundle: {error}")]
            continue

        if table is None:
            results[locale] = [_format_scope(locale, "bundle not found")]
            continue

        results[locale] = validate_table(
            locale,
            table,
            None if locale == reference_locale else reference,
            delimiter=delimiter,
        )

    return results


def _build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Validate locale bundles and report issues helpful to translators."
    )
    parser.add_argument(
        "locales",
        nargs="*",
        help="Specific locales to validate (defaults to every bundle found)",
    )
    parser.add_argument(
        "--dir",
        dest="directory",
        type=Path,
        help="Directory of bundles to validate (defaults to the packaged bundles)",
    )
    parser.add_argument(
        "--reference",
        default=REFERENCE_LOCALE,
        help=f"Reference locale to compare against (default: {REFERENCE_LOCALE})",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for running validations from the command line."""

    parser = _build_argument_parser()
    args = parser.parse_args(argv)
    loader = DirectoryLoader(args.directory) if args.directory else PackageLoader()
    locales = args.locales or list(loader.available_locales())

    if not locales:
        parser.print_help()
        return 1

    exit_code = 0
    try:
        results = validate_locales(loader, locales, reference_locale=args.reference)
    except TemplateLoadError as error:
        print(f"[{args.reference}] failed to load reference bundle: {error}")
        return 1

    for locale, issues in results.items():
        if issues:
            exit_code = 1
            print(f"[{locale}] {len(issues)} issue(s) detected:")
            for issue in issues:
                print(f"  - {issue}")
        else:
            print(f"[{locale}] OK")

    return exit_code


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    raise SystemExit(main())
