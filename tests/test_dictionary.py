import logging

import pytest

from autocompleter.dictionary import Dictionary, DictionaryError, clean_word, iter_words


@pytest.mark.parametrize(
    "token, expected",
    [
        ("dog", "dog"),
        ("dog,", "dog"),
        ("dog...", "dog"),
        ("don't", "don't"),
        ("(dog)", "(dog"),
        ("?!", ""),
        ("Straße.", "Straße"),
    ],
)
def test_clean_word(token, expected):
    assert clean_word(token) == expected


def test_iter_words():
    lines = ["The cat sat.\n", "\n", "  on the mat, --  \n", "Dog!"]
    assert list(iter_words(lines)) == ["The", "cat", "sat", "on", "the", "mat", "Dog"]


@pytest.fixture
def word_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("cat car\ncare,\ndog\ncat\n", encoding="utf-8")
    return path


def test_load_from_file(word_file, caplog):
    with caplog.at_level(logging.INFO, logger="autocompleter"):
        d = Dictionary(str(word_file))
    assert len(d) == 4
    assert "care" in d
    assert d.predict("ca") == ["car", "care", "cat"]
    assert f"Loaded 4 words from {word_file}" in caplog.text


def test_empty_dictionary():
    d = Dictionary()
    assert len(d) == 0
    assert d.predict("a") == []


def test_missing_file(tmp_path):
    missing = tmp_path / "nope.txt"
    with pytest.raises(DictionaryError) as excinfo:
        Dictionary(str(missing))
    assert excinfo.value.path == str(missing)
    assert isinstance(excinfo.value, OSError)
    assert str(missing) in str(excinfo.value)


def test_add_and_predict():
    d = Dictionary()
    assert d.add("hello") is True
    assert d.add("hello") is False
    d.add("help")
    assert d.is_valid("help")
    assert not d.is_valid("hel")
    assert d.predict("hel") == ["hello", "help"]
    assert d.predict("hel", 1) == ["hello"]


def test_predict_empty_prefix_returns_nothing():
    d = Dictionary()
    d.add("hello")
    assert d.predict("") == []
    assert d.trie.complete("") == ["hello"]
