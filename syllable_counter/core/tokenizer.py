"""Split text into countable word and number tokens."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple, Union

from .numbers import humanize

# A word starts with a letter at a word boundary. A number is an optional ``$``
# marker followed by digit groups such as ``1,000`` or ``.5``; the closing
# boundary belongs to the number branch only.
TOKEN_PATTERN = re.compile(
    r"\b(?P<word>[a-z][a-z'-]*)"
    r"|(?:(?P<currency>\$?)\s*(?P<number>(?:\.?\d+,?)+))\b",
    re.IGNORECASE,
)
_POSSESSIVE_PATTERN = re.compile(r"(?:'s|s')\Z")
_NON_DIGIT_PATTERN = re.compile(r"\D+")

CURRENCY_WORD = "dollar"


@dataclass(frozen=True)
class WordToken:
    """An alphabetic word, possibly with apostrophes or hyphens."""

    text: str

    @property
    def words(self) -> Tuple[str, ...]:
        return (self.text,)


@dataclass(frozen=True)
class NumberExpansion:
    """A numeric literal spelled out word by word."""

    value: int
    words: Tuple[str, ...]
    currency: bool = False


Token = Union[WordToken, NumberExpansion]
Humanizer = Callable[[int], List[str]]


def normalize_possessive(word: str) -> str:
    """Rewrite a trailing ``'s`` or ``s'`` to a plain ``s``."""

    return _POSSESSIVE_PATTERN.sub("s", word)


def _word_token(match: re.Match[str]) -> WordToken:
    return WordToken(normalize_possessive(match.group("word")))


def _number_token(match: re.Match[str], humanizer: Humanizer) -> NumberExpansion:
    value = int(_NON_DIGIT_PATTERN.sub("", match.group("number")))
    spelled = list(humanizer(value))
    currency = bool(match.group("currency"))
    if currency:
        spelled.append(CURRENCY_WORD)
    return NumberExpansion(value=value, words=tuple(spelled), currency=currency)


def tokenize(text: str, humanizer: Optional[Humanizer] = None) -> List[Token]:
    """Return the word and number tokens of ``text`` in reading order.

    Characters that belong to neither a word nor a number are skipped.
    """

    spell = humanizer or humanize
    tokens: List[Token] = []
    for match in TOKEN_PATTERN.finditer(text or ""):
        if match.group("word") is not None:
            tokens.append(_word_token(match))
        else:
            tokens.append(_number_token(match, spell))
    return tokens


def words(text: str, humanizer: Optional[Humanizer] = None) -> List[str]:
    """Return every countable word of ``text``, numbers spelled out in place."""

    return [word for token in tokenize(text, humanizer) for word in token.words]


__all__ = [
    "TOKEN_PATTERN",
    "CURRENCY_WORD",
    "WordToken",
    "NumberExpansion",
    "Token",
    "normalize_possessive",
    "tokenize",
    "words",
]
