"""Count syllables in words and passages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from syllable_counter.utils.observability import create_counter, get_logger

from .dictionary import DEFAULT_DICTIONARY, SyllableDictionary
from .estimator import guess
from .tokenizer import Humanizer, Token, tokenize, words

SOURCE_DICTIONARY = "dictionary"
SOURCE_HEURISTIC = "heuristic"

LOOKUPS = create_counter(
    "syllable_counter_lookups",
    "Words counted, by where the syllable count came from.",
    ["source"],
)


@dataclass(frozen=True)
class WordCount:
    word: str
    syllables: int
    source: str


class SyllableCounter:
    """Dictionary-first syllable counter with a heuristic fallback."""

    def __init__(
        self,
        dictionary: Optional[SyllableDictionary] = None,
        *,
        humanizer: Optional[Humanizer] = None,
    ) -> None:
        self.dictionary = dictionary if dictionary is not None else DEFAULT_DICTIONARY
        self._humanizer = humanizer
        self._logger = get_logger(__name__).bind(component="syllable_counter")

    def tokenize(self, text: str) -> List[Token]:
        return tokenize(text, self._humanizer)

    def words(self, text: str) -> List[str]:
        return words(text, self._humanizer)

    def guess(self, word: str) -> int:
        return guess(word)

    def _measure(self, word: str) -> WordCount:
        stored = self.dictionary.lookup(word)
        if stored is not None:
            LOOKUPS.labels(source=SOURCE_DICTIONARY).inc()
            return WordCount(word, stored, SOURCE_DICTIONARY)

        estimate = guess(word)
        LOOKUPS.labels(source=SOURCE_HEURISTIC).inc()
        self._logger.debug(
            "Estimated syllables for unknown word",
            context={"word": word, "syllables": estimate},
        )
        return WordCount(word, estimate, SOURCE_HEURISTIC)

    def count_word(self, word: str) -> int:
        """Return the dictionary count for ``word``, or the heuristic estimate."""

        return self._measure(word).syllables

    def breakdown(self, text: str) -> List[WordCount]:
        """Return one :class:`WordCount` per countable word of ``text``."""

        return [self._measure(word) for word in self.words(text)]

    def count(self, text: str) -> int:
        """Return the total number of syllables in ``text``."""

        return sum(entry.syllables for entry in self.breakdown(text))


__all__ = [
    "SOURCE_DICTIONARY",
    "SOURCE_HEURISTIC",
    "SyllableCounter",
    "WordCount",
]
