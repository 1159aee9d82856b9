"""Persisted headword -> syllable count cache built from a pronunciation corpus."""

from __future__ import annotations

import logging
import os
import sqlite3
import threading
import time
from functools import partial
from pathlib import Path
from typing import Callable, Iterable, Optional

from syllable_counter.utils.observability import create_histogram, get_logger

from .corpus import iter_corpus_entries, iter_corpus_lines

CACHE_PATH_ENV = "SYLLABLE_COUNTER_CACHE"
CORPUS_PATH_ENV = "SYLLABLE_COUNTER_CORPUS"
MEMORY_CACHE = ":memory:"

CorpusReader = Callable[[], Iterable[str]]

CORPUS_LOAD_SECONDS = create_histogram(
    "syllable_counter_corpus_load_seconds",
    "Time spent building the syllable dictionary from the raw corpus.",
)


def default_cache_path() -> Path:
    base = os.getenv("XDG_CACHE_HOME") or Path.home() / ".cache"
    return Path(base) / "syllable_counter" / "dictionary.sqlite3"


def _ensure_parent_directory(path: str) -> None:
    directory = os.path.dirname(os.path.abspath(path))
    if directory and not os.path.exists(directory):
        os.makedirs(directory, exist_ok=True)


class SyllableDictionary:
    """SQLite-backed lookup of syllable counts keyed by uppercase headword.

    The table is filled from the raw corpus the first time :meth:`ensure_loaded`
    runs against an empty cache and is reused untouched afterwards. Lookups call
    :meth:`ensure_loaded` themselves, so explicit loading is only needed to
    control when the one-off build happens.
    """

    def __init__(
        self,
        cache_path: Optional[Path | str] = None,
        *,
        corpus_path: Optional[Path | str] = None,
        corpus_reader: Optional[CorpusReader] = None,
    ) -> None:
        if cache_path is None:
            cache_path = os.getenv(CACHE_PATH_ENV) or default_cache_path()
        if corpus_path is None:
            corpus_path = os.getenv(CORPUS_PATH_ENV) or None

        self.cache_path: str = str(cache_path)
        self.corpus_path: Optional[Path] = Path(corpus_path) if corpus_path else None
        self._corpus_reader: CorpusReader = corpus_reader or partial(
            iter_corpus_lines, self.corpus_path
        )
        self._connection: Optional[sqlite3.Connection] = None
        self._lock = threading.RLock()
        self._loaded = False
        self._corpus_warned = False
        self._logger = get_logger(__name__).bind(
            component="syllable_dictionary",
            cache_path=self.cache_path,
        )

    # Connection management -------------------------------------------------
    def _connect(self) -> sqlite3.Connection:
        if self._connection is None:
            if self.cache_path != MEMORY_CACHE:
                _ensure_parent_directory(self.cache_path)
            connection = sqlite3.connect(self.cache_path, check_same_thread=False)
            connection.execute(
                """
                CREATE TABLE IF NOT EXISTS pronunciations (
                    word TEXT PRIMARY KEY,
                    syllables INTEGER NOT NULL
                )
                """
            )
            connection.commit()
            self._connection = connection
            self._logger.info("Syllable cache opened")
        return self._connection

    def close(self) -> None:
        with self._lock:
            if self._connection is not None:
                self._connection.close()
                self._connection = None
            self._loaded = False

    def _row_count(self, connection: sqlite3.Connection) -> int:
        (count,) = connection.execute("SELECT COUNT(*) FROM pronunciations").fetchone()
        return int(count)

    def __len__(self) -> int:
        with self._lock:
            return self._row_count(self._connect())

    # Loading ----------------------------------------------------------------
    @property
    def loaded(self) -> bool:
        return self._loaded

    def populate(self) -> int:
        """Fill an empty cache from the corpus and return the rows written.

        A cache that already holds entries is left as it is and ``0`` is
        returned. All rows go in within one transaction, so a corpus that fails
        part way leaves the cache empty.
        """

        with self._lock:
            connection = self._connect()
            if self._row_count(connection):
                return 0

            source = str(self.corpus_path) if self.corpus_path else "bundled"
            self._logger.info(
                "Building syllable cache from corpus",
                context={"corpus": source},
            )
            start = time.perf_counter()
            with connection:
                # First entry wins for repeated headwords.
                connection.executemany(
                    "INSERT OR IGNORE INTO pronunciations (word, syllables) VALUES (?, ?)",
                    iter_corpus_entries(self._corpus_reader()),
                )
            elapsed = time.perf_counter() - start
            written = self._row_count(connection)

            CORPUS_LOAD_SECONDS.observe(elapsed)
            self._logger.info(
                "Syllable cache built",
                context={"corpus": source, "entries": written, "seconds": round(elapsed, 3)},
            )
            return written

    def ensure_loaded(self) -> bool:
        """Make sure the cache is populated; ``False`` if the corpus is unreadable."""

        if self._loaded:
            return True

        with self._lock:
            if self._loaded:
                return True
            try:
                self.populate()
            except (OSError, UnicodeDecodeError) as exc:
                # Left unloaded so a later call retries once the corpus is readable.
                # Only the first failure warns; retries log at debug.
                level = logging.DEBUG if self._corpus_warned else logging.WARNING
                self._corpus_warned = True
                self._logger.log(
                    level,
                    "Pronunciation corpus unavailable, falling back to estimates",
                    context={"error": str(exc)},
                )
                return False
            self._loaded = True
            self._corpus_warned = False
            return True

    # Lookup -----------------------------------------------------------------
    def lookup(self, word: str) -> Optional[int]:
        """Return the stored syllable count for ``word`` or ``None`` when unknown."""

        if not word:
            return None

        self.ensure_loaded()
        with self._lock:
            row = self._connect().execute(
                "SELECT syllables FROM pronunciations WHERE word = ?",
                (word.upper(),),
            ).fetchone()
        if row is None:
            return None
        return int(row[0])

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.lookup(word) is not None


DEFAULT_DICTIONARY = SyllableDictionary()

__all__ = [
    "CACHE_PATH_ENV",
    "CORPUS_PATH_ENV",
    "DEFAULT_DICTIONARY",
    "MEMORY_CACHE",
    "SyllableDictionary",
    "default_cache_path",
]
