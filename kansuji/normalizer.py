"""
Kanji numeral normalization: "百二十万" -> "1200000".
"""

import logging
from typing import Optional

from kansuji.errors import NumeralError
from kansuji.number_types import NormalizedNumber
from kansuji.reducer import interpret_numbers
from kansuji.tokenizer import tokenize_numerals

logger = logging.getLogger(__name__)


def _count_leading_zeros(tokens) -> int:
    count = 0
    for token in tokens:
        if token != 0:
            break
        count += 1
    return count


def _normalize(text: str, trim_leading_zeros: bool, allow_suffix: bool) -> Optional[NormalizedNumber]:
    numerals = tokenize_numerals(text, allow_suffix=allow_suffix)
    if numerals is None:
        return None

    try:
        value = interpret_numbers(numerals.tokens)
    except NumeralError as e:
        logger.debug("Cannot interpret %r: %s", text, e)
        return None

    arabic = str(value)
    if not trim_leading_zeros:
        # k zeros alone give k - 1 leading zeros before the "0" itself.
        num_zeros = _count_leading_zeros(numerals.tokens)
        if num_zeros == len(numerals.tokens):
            num_zeros -= 1
        arabic = '0' * num_zeros + arabic

    return NormalizedNumber(numerals.kanji, arabic, numerals.suffix)


def normalize_numbers(text: str, trim_leading_zeros: bool = False) -> Optional[NormalizedNumber]:
    """
    Convert a Kanji numeral to Arabic digits.

    Args:
        text: Numeral text made only of numeral characters
        trim_leading_zeros: Drop leading zeros ("〇〇一" -> "1" instead of "001")

    Returns:
        NormalizedNumber(kanji, arabic, ""), or None if text is not a valid
        numeral

    Example:
        >>> normalize_numbers("百二十万")
        NormalizedNumber(kanji='百二十万', arabic='1200000', suffix='')
    """
    return _normalize(text, trim_leading_zeros, allow_suffix=False)


def normalize_numbers_with_suffix(text: str, trim_leading_zeros: bool = False) -> Optional[NormalizedNumber]:
    """
    Like normalize_numbers, but a trailing non-numeral part is returned as
    the suffix instead of failing.

    Example:
        >>> normalize_numbers_with_suffix("三十五個")
        NormalizedNumber(kanji='三十五', arabic='35', suffix='個')
    """
    return _normalize(text, trim_leading_zeros, allow_suffix=True)
