import pytest

from kansuji.safe_parse import (
    safe_str_to_double,
    safe_str_to_int16,
    safe_str_to_int32,
    safe_str_to_int64,
    safe_str_to_uint16,
    safe_str_to_uint32,
    safe_str_to_uint64,
    simple_atoi,
)


def test_safe_str_to_int16():
    assert safe_str_to_int16("32767") == 32767
    assert safe_str_to_int16("-32768") == -32768
    assert safe_str_to_int16("32768") is None
    assert safe_str_to_int16("-32769") is None
    assert safe_str_to_int16("99999999999") is None


def test_safe_str_to_uint16():
    assert safe_str_to_uint16("65535") == 65535
    assert safe_str_to_uint16("0") == 0
    assert safe_str_to_uint16("65536") is None
    assert safe_str_to_uint16("-1") is None


def test_safe_str_to_32bit():
    assert safe_str_to_int32(" 123 ") == 123
    assert safe_str_to_int32("+7") == 7
    assert safe_str_to_int32("2147483648") is None
    assert safe_str_to_uint32("4294967295") == 4294967295
    assert safe_str_to_uint32("4294967296") is None
    assert safe_str_to_uint32("-1") is None


def test_safe_str_to_64bit():
    assert safe_str_to_int64("-9223372036854775808") == -(1 << 63)
    assert safe_str_to_int64("9223372036854775808") is None
    assert safe_str_to_uint64("18446744073709551615") == (1 << 64) - 1
    assert safe_str_to_uint64("18446744073709551616") is None


@pytest.mark.parametrize("text", ["", "12a", "1.0", "１２", "0x10", "- 1"])
def test_safe_str_to_int_rejects_malformed(text):
    assert safe_str_to_int32(text) is None
    assert safe_str_to_uint64(text) is None


def test_simple_atoi():
    assert simple_atoi("42") == 42
    assert simple_atoi("-42") == -42
    assert simple_atoi("abc") == 0
    assert simple_atoi("2147483648") == 0


def test_safe_str_to_double():
    assert safe_str_to_double("1.5") == 1.5
    assert safe_str_to_double("-2e3") == -2000.0
    assert safe_str_to_double(" 0.25 ") == 0.25


@pytest.mark.parametrize("text", ["nan", "NaN", "inf", "-infinity", "1e400", "abc", "", "1_0", "１"])
def test_safe_str_to_double_rejects(text):
    assert safe_str_to_double(text) is None


@pytest.mark.parametrize("text, expected", [("5.", 5.0), (".5", 0.5), ("+1E2", 100.0)])
def test_safe_str_to_double_accepts_float_notation(text, expected):
    assert safe_str_to_double(text) == expected


@pytest.mark.parametrize("text", ["0x10", "1e", "e5", "1.5abc", "infinit", "."])
def test_safe_str_to_double_rejects_non_float_letters(text):
    assert safe_str_to_double(text) is None
