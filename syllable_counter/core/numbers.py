"""Spell integers out as English words."""

from __future__ import annotations

from typing import List

import inflect

_ENGINE = inflect.engine()


def humanize(number: int) -> List[str]:
    """Return the cardinal spelling of ``number`` split into words.

    ``2012`` becomes ``["two", "thousand", "and", "twelve"]``. Group separators
    emitted by :mod:`inflect` for large values are dropped, hyphenated compounds
    such as ``"twenty-one"`` stay a single word. Numbers too long to name
    (past the decillions) are read digit by digit.
    """

    try:
        spelled = _ENGINE.number_to_words(int(number))
    except inflect.NumOutOfRangeError:
        spelled = _ENGINE.number_to_words(int(number), group=1)
    return [word.strip(",") for word in spelled.split() if word.strip(",")]


__all__ = ["humanize"]
