"""Read raw pronunciation corpora in the CMU dictionary layout.

Each entry line holds an uppercase headword followed by its phonemes, separated
by one or two spaces::

    SODA  S OW1 D AH0

Every phoneme that starts with a vowel letter carries one syllable.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, Iterator, Optional, Tuple

import pronouncing

VOWEL_LETTERS: Tuple[str, ...] = ("A", "E", "I", "O", "U")

_HEADWORD_PATTERN = re.compile(r"^[A-Z]")
_FIELD_SEPARATOR = re.compile(r"  ?")


def count_vowel_phonemes(phonemes: Iterable[str]) -> int:
    return sum(1 for phone in phonemes if phone.startswith(VOWEL_LETTERS))


def parse_corpus_line(line: str) -> Optional[Tuple[str, int]]:
    """Return ``(headword, syllables)`` for an entry line, ``None`` otherwise.

    Lines that do not start with an uppercase letter (comments, headers,
    punctuation entries) and lines without phonemes are skipped.
    """

    if not _HEADWORD_PATTERN.match(line):
        return None

    headword, *phonemes = _FIELD_SEPARATOR.split(line.rstrip("\r\n"))
    phonemes = [phone for phone in phonemes if phone]
    if not phonemes:
        return None

    return headword, count_vowel_phonemes(phonemes)


def iter_corpus_entries(lines: Iterable[str]) -> Iterator[Tuple[str, int]]:
    for line in lines:
        entry = parse_corpus_line(line)
        if entry is not None:
            yield entry


def bundled_corpus_lines() -> Iterator[str]:
    """Yield the CMU dictionary shipped with :mod:`pronouncing` as raw lines."""

    pronouncing.init_cmu()
    for word, phones in pronouncing.pronunciations:
        # Some entries carry a trailing "# comment".
        phonemes = phones.split("#", 1)[0].strip()
        yield f"{word.upper()}  {phonemes}"


def iter_corpus_lines(path: Optional[Path | str] = None) -> Iterator[str]:
    """Yield raw corpus lines from ``path`` or from the bundled CMU data."""

    if path is None:
        yield from bundled_corpus_lines()
        return

    with Path(path).open("r", encoding="utf-8") as handle:
        yield from handle


__all__ = [
    "VOWEL_LETTERS",
    "bundled_corpus_lines",
    "count_vowel_phonemes",
    "iter_corpus_entries",
    "iter_corpus_lines",
    "parse_corpus_line",
]
