import pytest

from ascending_alphabet.corpus import Corpus, load_corpus


@pytest.fixture(autouse=True)
def _clear_corpus_cache():
    load_corpus.cache_clear()
    yield
    load_corpus.cache_clear()


@pytest.fixture
def small_corpus():
    return Corpus.from_words([
        "ZA", "YB", "XC", "BE", "ACE", "DOG", "CAT", "BOX", "FLOW",
        "ALMOST", "BEEFY", "CHINTZ", "GHOST", "KNOW", "DIRTY", "", "Q",
    ])


@pytest.fixture
def word_file(tmp_path):
    def _write(text, name="words.txt"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write
