"""Estimate the number of spoken syllables in English text.

The module level functions share one :class:`SyllableCounter` backed by the
process-wide dictionary cache::

    >>> import syllable_counter
    >>> syllable_counter.count("An old silent pond...")
    5
"""

from __future__ import annotations

from typing import List

from .core import (
    DEFAULT_DICTIONARY,
    NumberExpansion,
    SyllableCounter,
    SyllableDictionary,
    Token,
    WordCount,
    WordToken,
)

DEFAULT_COUNTER = SyllableCounter(DEFAULT_DICTIONARY)


def tokenize(text: str) -> List[Token]:
    return DEFAULT_COUNTER.tokenize(text)


def words(text: str) -> List[str]:
    return DEFAULT_COUNTER.words(text)


def guess(word: str) -> int:
    return DEFAULT_COUNTER.guess(word)


def count_word(word: str) -> int:
    return DEFAULT_COUNTER.count_word(word)


def count(text: str) -> int:
    return DEFAULT_COUNTER.count(text)


def breakdown(text: str) -> List[WordCount]:
    return DEFAULT_COUNTER.breakdown(text)


__all__ = [
    "DEFAULT_COUNTER",
    "DEFAULT_DICTIONARY",
    "NumberExpansion",
    "SyllableCounter",
    "SyllableDictionary",
    "Token",
    "WordCount",
    "WordToken",
    "breakdown",
    "count",
    "count_word",
    "guess",
    "tokenize",
    "words",
]
