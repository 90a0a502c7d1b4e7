"""Registry of the numbered plural-rule families used by locale bundles.

Each bundle names its grammar family under the reserved ``pluralRule`` key.
The value is the family number (``"1"`` for English, ``"7"`` for Russian and
so on) or, for readability, the family name defined by
:class:`PluralRuleFamily`. Selectors reproduce the bundle arithmetic exactly:
remainders keep the sign of the quantity and fractional quantities are not
rounded.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from numbers import Real
from typing import Callable, Mapping

from propstrings.errors import UnknownPluralRule

PLURAL_RULE_KEY = "pluralRule"


class PluralRuleFamily(IntEnum):
    """Closed set of plural-rule families, numbered as in locale bundles."""

    CHINESE = 0
    ENGLISH = 1
    FRENCH = 2
    LATVIAN = 3
    SCOTTISH_GAELIC = 4
    ROMANIAN = 5
    LITHUANIAN = 6
    RUSSIAN = 7
    SLOVAK = 8
    POLISH = 9
    SLOVENIAN = 10
    IRISH = 11
    ARABIC = 12
    MALTESE = 13
    LAST_DIGIT = 14
    MACEDONIAN = 15
    BRETON = 16
    SHUAR = 17
    WELSH = 18
    SERBIAN = 19


def _mod(n: float, m: int) -> float:
    return math.fmod(n, m)


def _chinese(n: float) -> int:
    return 0


def _english(n: float) -> int:
    return 0 if n == 1 else 1


def _french(n: float) -> int:
    return 1 if n > 1 else 0


def _latvian(n: float) -> int:
    if _mod(n, 10) == 0:
        return 0
    if _mod(n, 10) == 1 and _mod(n, 100) != 11:
        return 1
    return 2


def _scottish_gaelic(n: float) -> int:
    if n in (1, 11):
        return 0
    if n in (2, 12):
        return 1
    if 0 < n < 20:
        return 2
    return 3


def _romanian(n: float) -> int:
    if n == 1:
        return 0
    if n == 0 or 0 < _mod(n, 100) < 20:
        return 1
    return 2


def _lithuanian(n: float) -> int:
    if _mod(n, 10) == 1 and _mod(n, 100) != 11:
        return 0
    if _mod(n, 10) >= 2 and (_mod(n, 100) < 10 or _mod(n, 100) >= 20):
        return 2
    return 1


def _slavic(n: float) -> int:
    if _mod(n, 10) == 1 and _mod(n, 100) != 11:
        return 0
    if 2 <= _mod(n, 10) <= 4 and (_mod(n, 100) < 10 or _mod(n, 100) >= 20):
        return 1
    return 2


def _slovak(n: float) -> int:
    if n == 1:
        return 0
    if 2 <= n <= 4:
        return 1
    return 2


def _polish(n: float) -> int:
    if n == 1:
        return 0
    if 2 <= _mod(n, 10) <= 4 and (_mod(n, 100) < 10 or _mod(n, 100) >= 20):
        return 1
    return 2


def _slovenian(n: float) -> int:
    remainder = _mod(n, 100)
    if remainder == 1:
        return 0
    if remainder == 2:
        return 1
    if remainder in (3, 4):
        return 2
    return 3


def _irish(n: float) -> int:
    if n == 1:
        return 0
    if n == 2:
        return 1
    if 3 <= n <= 6:
        return 2
    if 7 <= n <= 10:
        return 3
    return 4


def _arabic(n: float) -> int:
    if n == 0:
        return 5
    if n == 1:
        return 0
    if n == 2:
        return 1
    if 3 <= _mod(n, 100) <= 10:
        return 2
    if 11 <= _mod(n, 100) <= 99:
        return 3
    return 4


def _maltese(n: float) -> int:
    if n == 1:
        return 0
    if n == 0 or 0 < _mod(n, 100) <= 10:
        return 1
    if 10 < _mod(n, 100) < 20:
        return 2
    return 3


def _last_digit(n: float) -> int:
    if _mod(n, 10) == 1:
        return 0
    if _mod(n, 10) == 2:
        return 1
    return 2


def _macedonian(n: float) -> int:
    return 0 if _mod(n, 10) == 1 and _mod(n, 100) != 11 else 1


def _breton(n: float) -> int:
    units = _mod(n, 10)
    hundreds = _mod(n, 100)
    if units == 1 and hundreds not in (11, 71, 91):
        return 0
    if units == 2 and hundreds not in (12, 72, 92):
        return 1
    if units in (3, 4, 9) and hundreds not in (13, 14, 19, 73, 74, 79, 93, 94, 99):
        return 2
    if _mod(n, 1000000) == 0 and n != 0:
        return 3
    return 4


def _shuar(n: float) -> int:
    return 1 if n != 0 else 0


def _welsh(n: float) -> int:
    return {0: 0, 1: 1, 2: 2, 3: 3, 6: 4}.get(n, 5)


@dataclass(frozen=True)
class PluralRule:
    """A plural-rule family: how many forms it expects and how to pick one."""

    family: PluralRuleFamily
    form_count: int
    _selector: Callable[[float], int]

    @property
    def rule_id(self) -> int:
        return int(self.family)

    def index_for(self, quantity: float | int | str) -> int:
        """Return the plural-form index for ``quantity``."""

        return self._selector(_coerce_quantity(quantity))

    def __call__(self, quantity: float | int | str) -> int:
        return self.index_for(quantity)


def _coerce_quantity(quantity: float | int | str) -> float:
    if isinstance(quantity, bool):
        return int(quantity)
    if isinstance(quantity, Real):
        return quantity  # type: ignore[return-value]
    if not quantity:
        return 0
    return float(quantity)


_RULES: Mapping[PluralRuleFamily, PluralRule] = {
    rule.family: rule
    for rule in (
        PluralRule(PluralRuleFamily.CHINESE, 1, _chinese),
        PluralRule(PluralRuleFamily.ENGLISH, 2, _english),
        PluralRule(PluralRuleFamily.FRENCH, 2, _french),
        PluralRule(PluralRuleFamily.LATVIAN, 3, _latvian),
        PluralRule(PluralRuleFamily.SCOTTISH_GAELIC, 4, _scottish_gaelic),
        PluralRule(PluralRuleFamily.ROMANIAN, 3, _romanian),
        PluralRule(PluralRuleFamily.LITHUANIAN, 3, _lithuanian),
        PluralRule(PluralRuleFamily.RUSSIAN, 3, _slavic),
        PluralRule(PluralRuleFamily.SLOVAK, 3, _slovak),
        PluralRule(PluralRuleFamily.POLISH, 3, _polish),
        PluralRule(PluralRuleFamily.SLOVENIAN, 4, _slovenian),
        PluralRule(PluralRuleFamily.IRISH, 5, _irish),
        PluralRule(PluralRuleFamily.ARABIC, 6, _arabic),
        PluralRule(PluralRuleFamily.MALTESE, 4, _maltese),
        PluralRule(PluralRuleFamily.LAST_DIGIT, 3, _last_digit),
        PluralRule(PluralRuleFamily.MACEDONIAN, 2, _macedonian),
        PluralRule(PluralRuleFamily.BRETON, 5, _breton),
        PluralRule(PluralRuleFamily.SHUAR, 2, _shuar),
        PluralRule(PluralRuleFamily.WELSH, 6, _welsh),
        PluralRule(PluralRuleFamily.SERBIAN, 3, _slavic),
    )
}


def get_plural_rule(rule_id: str | int | PluralRuleFamily) -> PluralRule:
    """Return the registered rule for a bundle's ``pluralRule`` value."""

    if isinstance(rule_id, PluralRuleFamily):
        return _RULES[rule_id]

    if isinstance(rule_id, int) and not isinstance(rule_id, bool):
        try:
            return _RULES[PluralRuleFamily(rule_id)]
        except ValueError as exc:
            raise UnknownPluralRule(rule_id) from exc

    if isinstance(rule_id, str):
        token = rule_id.strip()
        if token.isdigit():
            return get_plural_rule(int(token))
        try:
            return _RULES[PluralRuleFamily[token.upper().replace("-", "_")]]
        except KeyError as exc:
            raise UnknownPluralRule(rule_id) from exc

    raise UnknownPluralRule(rule_id)


def available_rules() -> tuple[PluralRule, ...]:
    """Return every registered rule ordered by family number."""

    return tuple(_RULES[family] for family in sorted(_RULES))


__all__ = [
    "PLURAL_RULE_KEY",
    "PluralRule",
    "PluralRuleFamily",
    "available_rules",
    "get_plural_rule",
]
