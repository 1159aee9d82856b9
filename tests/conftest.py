import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import syllable_counter
from syllable_counter.core import SyllableCounter, SyllableDictionary
from syllable_counter.core.dictionary import MEMORY_CACHE


@pytest.fixture(scope="session")
def cmu_dictionary(tmp_path_factory):
    """Dictionary built once per run from the CMU data bundled with ``pronouncing``."""

    cache_path = tmp_path_factory.mktemp("syllable_cache") / "dictionary.sqlite3"
    dictionary = SyllableDictionary(cache_path)
    assert dictionary.ensure_loaded()
    yield dictionary
    dictionary.close()


@pytest.fixture
def cmu_counter(cmu_dictionary):
    return SyllableCounter(cmu_dictionary)


@pytest.fixture
def default_counter(monkeypatch, cmu_dictionary):
    """Point the module level helpers at the session dictionary."""

    monkeypatch.setattr(syllable_counter.DEFAULT_COUNTER, "dictionary", cmu_dictionary)
    return syllable_counter.DEFAULT_COUNTER


@pytest.fixture
def make_dictionary():
    """Factory for in-memory dictionaries fed from a list of raw corpus lines."""

    created = []

    def _make(lines, cache_path=MEMORY_CACHE):
        entries = list(lines)
        dictionary = SyllableDictionary(cache_path, corpus_reader=lambda: iter(entries))
        created.append(dictionary)
        return dictionary

    yield _make

    for dictionary in created:
        dictionary.close()
