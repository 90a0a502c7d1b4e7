"""Placeholder substitution for localized templates.

Templates use two placeholder spellings, both case-insensitive:

``%S``
    The first argument.
``%N$S``
    The ``N``-th argument, counted from 1.

``%S`` and ``%1$S`` therefore resolve to the same value. A positional
placeholder that points past the supplied arguments is left untouched.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Any, Sequence, Union

Args = Union[Sequence[Any], Any]

_FIRST_ARGUMENT = re.compile(r"%s", re.IGNORECASE)


@lru_cache(maxsize=32)
def _positional(position: int) -> re.Pattern[str]:
    return re.compile(rf"%{position}\$s", re.IGNORECASE)


def normalise_args(args: Args) -> tuple[Any, ...]:
    """Return ``args`` as a tuple, wrapping scalars and strings."""

    if isinstance(args, (str, bytes)) or not isinstance(args, Sequence):
        return (args,)
    return tuple(args)


def substitute(template: str, args: Args) -> str:
    """Fill ``%S`` and ``%N$S`` placeholders in ``template`` from ``args``."""

    values = [str(value) for value in normalise_args(args)]
    if not values:
        return template

    first = values[0]
    result = _FIRST_ARGUMENT.sub(lambda _match: first, template)

    for position, value in enumerate(values, start=1):
        result = _positional(position).sub(lambda _match, value=value: value, result)

    return result


__all__ = ["Args", "normalise_args", "substitute"]
