"""Unit coverage for the plural-rule registry."""

from __future__ import annotations

import pytest

from propstrings.errors import ConfigurationError, UnknownPluralRule
from propstrings.localization.plurals import (
    PluralRuleFamily,
    available_rules,
    get_plural_rule,
)


@pytest.mark.parametrize(
    ("family", "quantity", "expected"),
    [
        (PluralRuleFamily.CHINESE, 42, 0),
        (PluralRuleFamily.ENGLISH, 0, 1),
        (PluralRuleFamily.ENGLISH, 1, 0),
        (PluralRuleFamily.ENGLISH, 2, 1),
        (PluralRuleFamily.FRENCH, 0, 0),
        (PluralRuleFamily.FRENCH, 1, 0),
        (PluralRuleFamily.FRENCH, 1.5, 1),
        (PluralRuleFamily.LATVIAN, 0, 0),
        (PluralRuleFamily.LATVIAN, 21, 1),
        (PluralRuleFamily.LATVIAN, 11, 2),
        (PluralRuleFamily.RUSSIAN, 1, 0),
        (PluralRuleFamily.RUSSIAN, 3, 1),
        (PluralRuleFamily.RUSSIAN, 5, 2),
        (PluralRuleFamily.RUSSIAN, 11, 2),
        (PluralRuleFamily.RUSSIAN, 21, 0),
        (PluralRuleFamily.RUSSIAN, 22, 1),
        (PluralRuleFamily.RUSSIAN, 112, 2),
        (PluralRuleFamily.SLOVAK, 4, 1),
        (PluralRuleFamily.SLOVAK, 22, 2),
        (PluralRuleFamily.POLISH, 1, 0),
        (PluralRuleFamily.POLISH, 21, 2),
        (PluralRuleFamily.POLISH, 22, 1),
        (PluralRuleFamily.SLOVENIAN, 101, 0),
        (PluralRuleFamily.SLOVENIAN, 102, 1),
        (PluralRuleFamily.SLOVENIAN, 104, 2),
        (PluralRuleFamily.SLOVENIAN, 5, 3),
        (PluralRuleFamily.IRISH, 7, 3),
        (PluralRuleFamily.ARABIC, 0, 5),
        (PluralRuleFamily.ARABIC, 2, 1),
        (PluralRuleFamily.ARABIC, 3, 2),
        (PluralRuleFamily.ARABIC, 11, 3),
        (PluralRuleFamily.ARABIC, 102, 4),
        (PluralRuleFamily.BRETON, 1, 0),
        (PluralRuleFamily.BRETON, 72, 4),
        (PluralRuleFamily.BRETON, 9, 2),
        (PluralRuleFamily.BRETON, 1000000, 3),
        (PluralRuleFamily.WELSH, 6, 4),
        (PluralRuleFamily.WELSH, 4, 5),
        (PluralRuleFamily.SERBIAN, 24, 1),
    ],
)
def test_rule_selects_expected_index(
    family: PluralRuleFamily, quantity: float, expected: int
) -> None:
    assert get_plural_rule(family).index_for(quantity) == expected


@pytest.mark.parametrize("rule", available_rules(), ids=lambda rule: rule.family.name)
def test_rule_indexes_stay_within_form_count(rule) -> None:
    indexes = {rule.index_for(quantity) for quantity in range(0, 250)}

    assert max(indexes) < rule.form_count
    assert min(indexes) >= 0


def test_registry_covers_every_family() -> None:
    assert [rule.rule_id for rule in available_rules()] == list(range(20))


def test_remainders_keep_the_sign_of_the_quantity() -> None:
    russian = get_plural_rule(PluralRuleFamily.RUSSIAN)

    assert russian.index_for(-1) == 2
    assert russian.index_for(1) == 0


@pytest.mark.parametrize(
    ("quantity", "expected"),
    [("", 1), ("1", 0), ("5", 1), (True, 0)],
)
def test_quantities_are_coerced_to_numbers(quantity, expected: int) -> None:
    assert get_plural_rule(1)(quantity) == expected


@pytest.mark.parametrize(
    "rule_id",
    ["7", " 7 ", 7, "russian", "RUSSIAN", PluralRuleFamily.RUSSIAN],
)
def test_rule_ids_resolve_by_number_or_name(rule_id) -> None:
    assert get_plural_rule(rule_id).family is PluralRuleFamily.RUSSIAN


def test_hyphenated_family_names_resolve() -> None:
    assert get_plural_rule("scottish-gaelic").family is PluralRuleFamily.SCOTTISH_GAELIC


@pytest.mark.parametrize("rule_id", ["20", 20, -1, "bogus", "", 1.5, True, None])
def test_unknown_rule_ids_raise(rule_id) -> None:
    with pytest.raises(UnknownPluralRule) as excinfo:
        get_plural_rule(rule_id)

    assert isinstance(excinfo.value, ConfigurationError)
