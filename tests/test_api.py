import pytest

import kansuji
from kansuji import NormalizedNumber, NumberStyle


def test_convert_lists_every_form():
    values = [s.value for s in kansuji.convert("20")]
    assert values == [
        "二十", "弐拾", "廿",        # Kanji with ranks
        "20", "２０",                # separated
        "二〇", "２０",              # wide digits
        "⑳",                         # circled
        "0x14", "024", "0b10100",    # radixes
    ]


def test_convert_decimal_fraction_only_separates():
    results = kansuji.convert("1234.5")
    assert [s.value for s in results] == ["1,234.5", "１，２３４．５"]


def test_convert_rejects_empty():
    with pytest.raises(ValueError):
        kansuji.convert("")
    with pytest.raises(ValueError):
        kansuji.convert("   ")


def test_normalize():
    assert kansuji.normalize("百二十万") == NormalizedNumber("百二十万", "1200000", "")
    assert kansuji.normalize("〇〇一", trim_leading_zeros=True).arabic == "1"
    assert kansuji.normalize("三十五個") is None
    assert kansuji.normalize("三十五個", allow_suffix=True).suffix == "個"


def test_normalize_rejects_empty():
    with pytest.raises(ValueError):
        kansuji.normalize(" ")


def test_warm_up():
    total, timings = kansuji.warm_up()
    assert total >= 0
    assert "trie" in timings and "total" in timings


def test_version():
    assert kansuji.get_version() == kansuji.__version__


def test_exported_styles():
    assert NumberStyle.NUMBER_OLD_KANJI in {s.style for s in kansuji.convert("2")}
