from kansuji.number_trie import (
    get_number_trie_size,
    is_number_trie_loaded,
    load_number_trie,
    lookup_value,
    unload_number_trie,
)
from kansuji.tables import KANJI_NUMBER_VALUES
from kansuji.tokenizer import tokenize_numerals


def test_lookup_value():
    assert lookup_value("〇") == 0
    assert lookup_value("弐") == 2
    assert lookup_value("廿") == 20
    assert lookup_value("阡") == 1000
    assert lookup_value("京") == 10 ** 16
    assert lookup_value("７") == 7
    assert lookup_value("a") is None
    assert lookup_value("個") is None


def test_number_trie_covers_table():
    load_number_trie()
    assert get_number_trie_size() == len(KANJI_NUMBER_VALUES)


def test_number_trie_rebuilds_after_unload():
    load_number_trie()
    assert is_number_trie_loaded()
    unload_number_trie()
    assert not is_number_trie_loaded()
    assert get_number_trie_size() == 0
    assert lookup_value("百") == 100
    assert is_number_trie_loaded()


def test_tokenize_numerals():
    result = tokenize_numerals("二百十一")
    assert result.tokens == [2, 100, 10, 1]
    assert result.kanji == "二百十一"
    assert result.suffix == ""


def test_tokenize_numerals_echoes_arabic_digits_as_kanji():
    result = tokenize_numerals("5億０")
    assert result.tokens == [5, 10 ** 8, 0]
    assert result.kanji == "五億〇"


def test_tokenize_numerals_suffix():
    assert tokenize_numerals("一二三abc") is None
    result = tokenize_numerals("一二三abc", allow_suffix=True)
    assert result.tokens == [1, 2, 3]
    assert result.kanji == "一二三"
    assert result.suffix == "abc"


def test_tokenize_numerals_needs_tokens():
    assert tokenize_numerals("") is None
    assert tokenize_numerals("abc", allow_suffix=True) is None
