"""Heuristic syllable estimation for words missing from the dictionary.

English spelling is not regular enough for an exact algorithm, so the estimate
counts vowel clusters and then corrects the count with the patterns in
:mod:`syllable_counter.core.rules`. Measured against the CMU pronouncing
dictionary it is right for roughly nine words in ten; on ordinary prose, which
has fewer loan words and proper names, the hit rate is higher.
"""

from __future__ import annotations

import re
from typing import Iterable

from .rules import ADD_RULES, SUBTRACT_RULES, SyllableRule

_VOWEL_GROUP_PATTERN = re.compile(r"[aeiouy]+")


def normalize_word(word: str) -> str:
    """Lowercase ``word`` and drop apostrophes."""

    return word.lower().replace("'", "")


def _fired(rules: Iterable[SyllableRule], word: str) -> int:
    return sum(1 for rule in rules if rule.matches(word))


def guess(word: str) -> int:
    """Estimate the number of syllables in ``word``; never less than one."""

    normalized = normalize_word(word)
    if len(normalized) == 1:
        return 1

    syllables = len(_VOWEL_GROUP_PATTERN.findall(normalized))
    syllables -= _fired(SUBTRACT_RULES, normalized)
    syllables += _fired(ADD_RULES, normalized)

    return max(1, syllables)


__all__ = ["guess", "normalize_word"]
