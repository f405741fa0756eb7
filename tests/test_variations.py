import pytest

from kansuji.number_types import NumberStyle
from kansuji.variations import (
    arabic_to_separated_arabic,
    arabic_to_wide_arabic,
    is_arabic_number,
    is_decimal_integer,
    is_decimal_number,
    script_variants,
)


def test_is_decimal_integer():
    assert is_decimal_integer("0123")
    assert not is_decimal_integer("")
    assert not is_decimal_integer("１２")
    assert not is_decimal_integer("1.2")
    assert not is_decimal_integer("-1")


def test_is_decimal_number():
    assert is_decimal_number("123")
    assert is_decimal_number("123.")
    assert is_decimal_number("1.25")
    assert not is_decimal_number("1.2.3")
    assert not is_decimal_number("")
    assert not is_decimal_number("1,000")


def test_is_arabic_number():
    assert is_arabic_number("１2３")
    assert is_arabic_number("0")
    assert not is_arabic_number("一")
    assert not is_arabic_number("")


def test_script_variants():
    results = script_variants("12")
    assert [r.value for r in results] == ["12", "１２", "一二", "壱弐"]
    assert results[-1].style == NumberStyle.NUMBER_OLD_KANJI


def test_script_variants_skips_missing_glyph():
    # 大字 has no zero.
    assert [r.value for r in script_variants("10")] == ["10", "１０", "一〇"]


def test_script_variants_rejects_invalid_input():
    assert script_variants("") == []
    assert script_variants("1a") == []


def test_arabic_to_wide_arabic():
    results = arabic_to_wide_arabic("1230")
    assert [r.value for r in results] == ["一二三〇", "１２３０"]
    assert [r.style for r in results] == [NumberStyle.NUMBER_KANJI_ARABIC, NumberStyle.DEFAULT_STYLE]
    assert arabic_to_wide_arabic("12.3") == []


@pytest.mark.parametrize("number, half, full", [
    ("1", "1", "１"),
    ("123", "123", "１２３"),
    ("1234", "1,234", "１，２３４"),
    ("1234567.89", "1,234,567.89", "１，２３４，５６７．８９"),
    ("123456.", "123,456.", "１２３，４５６．"),
])
def test_arabic_to_separated_arabic(number, half, full):
    results = arabic_to_separated_arabic(number)
    assert [r.value for r in results] == [half, full]
    assert [r.style for r in results] == [
        NumberStyle.NUMBER_SEPARATED_ARABIC_HALFWIDTH,
        NumberStyle.NUMBER_SEPARATED_ARABIC_FULLWIDTH,
    ]


@pytest.mark.parametrize("number", ["0", "0123", "0.5", ".5", "1.2.3", "", "12a"])
def test_arabic_to_separated_arabic_rejects(number):
    assert arabic_to_separated_arabic(number) == []


@pytest.mark.parametrize("length", range(1, 14))
def test_separator_placement(length):
    number = "9876543210987"[:length]
    groups = arabic_to_separated_arabic(number)[0].value.split(",")
    assert "".join(groups) == number
    assert 1 <= len(groups[0]) <= 3
    assert all(len(g) == 3 for g in groups[1:])
