"""Tokenizing, dictionary lookup and heuristic estimation of syllables."""

from .corpus import iter_corpus_lines, parse_corpus_line
from .counter import SyllableCounter, WordCount
from .dictionary import DEFAULT_DICTIONARY, SyllableDictionary
from .estimator import guess
from .numbers import humanize
from .rules import ADD_RULES, SUBTRACT_RULES, SyllableRule
from .tokenizer import NumberExpansion, Token, WordToken, tokenize, words

__all__ = [
    "ADD_RULES",
    "DEFAULT_DICTIONARY",
    "NumberExpansion",
    "SUBTRACT_RULES",
    "SyllableCounter",
    "SyllableDictionary",
    "SyllableRule",
    "Token",
    "WordCount",
    "WordToken",
    "guess",
    "humanize",
    "iter_corpus_lines",
    "parse_corpus_line",
    "tokenize",
    "words",
]
