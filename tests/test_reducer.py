import pytest

from kansuji.constants import UINT64_MAX
from kansuji.errors import InvalidNumeralInput, NumeralGrammarError, NumeralOverflowError
from kansuji.reducer import (
    checked_add,
    checked_multiply,
    interpret_numbers,
    interpret_numbers_as_base10,
    interpret_numbers_in_japanese_way,
)


def test_interpret_numbers_positional():
    assert interpret_numbers([5, 4, 3]) == 543
    assert interpret_numbers([0, 0, 7]) == 7


def test_interpret_numbers_japanese_way():
    assert interpret_numbers([1, 10000, 2, 1000, 3, 100, 4, 10, 5]) == 12345
    assert interpret_numbers([1, 1000, 2, 100, 3, 10, 4, 10000]) == 12340000
    assert interpret_numbers([2, 10]) == 20
    assert interpret_numbers([20]) == 20
    assert interpret_numbers([1, 1000]) == 1000
    assert interpret_numbers([0, 10]) == 10


def test_interpret_numbers_empty():
    with pytest.raises(InvalidNumeralInput):
        interpret_numbers([])


@pytest.mark.parametrize("tokens", [
    [1, 10],
    [1, 100],
    [3, 100, 4, 100],
    [1, 10, 2, 100],
    [1, 10000, 2, 10000],
    [1, 10000, 2, 100000000],
    [10000],
])
def test_interpret_numbers_grammar_errors(tokens):
    with pytest.raises(NumeralGrammarError):
        interpret_numbers(tokens)


def test_interpret_numbers_overflow():
    with pytest.raises(NumeralOverflowError):
        interpret_numbers([9] * 20)
    with pytest.raises(NumeralOverflowError):
        interpret_numbers([1000, 9, 100, 10 ** 16])
    assert interpret_numbers([1] * 20) == 11111111111111111111


def test_interpret_numbers_as_base10_rejects_ranks():
    with pytest.raises(NumeralGrammarError):
        interpret_numbers_as_base10([1, 10])


def test_interpret_numbers_in_japanese_way_digit_run():
    assert interpret_numbers_in_japanese_way([2, 1000, 3, 4, 5]) == 2345
    with pytest.raises(NumeralGrammarError):
        interpret_numbers_in_japanese_way([2, 1000, 3, 4, 5, 6, 7])


def test_checked_arithmetic():
    assert checked_add(UINT64_MAX - 1, 1) == UINT64_MAX
    assert checked_multiply(0, UINT64_MAX) == 0
    with pytest.raises(NumeralOverflowError):
        checked_add(UINT64_MAX, 1)
    with pytest.raises(NumeralOverflowError):
        checked_multiply(1 << 63, 2)
