"""
Interpretation of numeral token sequences.

A token sequence is read one of two ways, depending on its largest token:

- No rank token (all tokens < 10): the digits are read positionally,
  [5, 4, 3] -> 543.
- Otherwise in the Japanese way, as blocks below 10000 each followed by a
  decreasing bigger-rank:
  "一万二千三百四十五" = [1, 10000, 2, 1000, 3, 100, 4, 10, 5] -> 12345

Every helper takes the token list and a cursor position and returns the
reduced value with the new position. All arithmetic is checked against the
unsigned 64-bit range.
"""

from typing import List, Optional, Sequence, Tuple

from kansuji.constants import BLOCK_LIMIT, RANK_THRESHOLD, UINT64_MAX
from kansuji.errors import InvalidNumeralInput, NumeralGrammarError, NumeralOverflowError


# ============================================================================
# Checked Arithmetic
# ============================================================================

def checked_add(a: int, b: int) -> int:
    """a + b, raising NumeralOverflowError past UINT64_MAX."""
    if b > UINT64_MAX - a:
        raise NumeralOverflowError(f"{a} + {b} overflows uint64")
    return a + b


def checked_multiply(a: int, b: int) -> int:
    """a * b, raising NumeralOverflowError past UINT64_MAX."""
    if a != 0 and b > UINT64_MAX // a:
        raise NumeralOverflowError(f"{a} * {b} overflows uint64")
    return a * b


# ============================================================================
# Base-10 Reading
# ============================================================================

def _reduce_leading_numbers_as_base10(tokens: Sequence[int], pos: int) -> Tuple[int, int]:
    """
    Read leading digits positionally.

    [1, 2, 3, 10, 100] from 0 -> (123, 3)
    """
    value = 0
    while pos < len(tokens) and tokens[pos] < RANK_THRESHOLD:
        value = checked_add(checked_multiply(value, 10), tokens[pos])
        pos += 1
    return value, pos


def interpret_numbers_as_base10(tokens: Sequence[int]) -> int:
    """
    Read every token as a digit: [1, 2, 3] -> 123.

    Raises:
        NumeralGrammarError: If a rank token is present
        NumeralOverflowError: If the value does not fit in 64 bits
    """
    value, pos = _reduce_leading_numbers_as_base10(tokens, 0)
    if pos != len(tokens):
        raise NumeralGrammarError(f"rank token {tokens[pos]} in a digit sequence")
    return value


# ============================================================================
# Japanese Reading
# ============================================================================

def _reduce_ones_digit(tokens: Sequence[int], pos: int) -> Tuple[Optional[int], int]:
    if pos == len(tokens) or tokens[pos] >= RANK_THRESHOLD:
        return None, pos
    return tokens[pos], pos + 1


def _reduce_digits(tokens: Sequence[int], pos: int, expected_base: int) -> Tuple[Optional[int], int]:
    """
    Read the part of a block at ``expected_base`` (10, 100 or 1000).

    For expected_base == 10:
        [10, ...]    -> 10
        [2, 10, ...] -> 20
        [1, 10, ...] -> no match, "一十" is not written in Japanese
        [20, ...]    -> 20, "廿" is read as 20
        [2, 0, ...]  -> 20
    For expected_base == 1000, [1, 1000, ...] -> 1000 is allowed.

    Leading zeros are skipped even when nothing matches.

    Returns:
        (value or None if no match, new position)

    Raises:
        NumeralGrammarError: If a positional digit run is too large for the
            rank or is followed by something other than a bigger-rank
    """
    end = len(tokens)
    while pos < end and tokens[pos] == 0:
        pos += 1
    if pos == end:
        return None, pos
    leading = tokens[pos]

    if leading < RANK_THRESHOLD:
        if end - pos < 2:
            return None, pos
        following = tokens[pos + 1]

        # [1, 2, ...] is read positionally and must stay below 10 * base.
        if following < RANK_THRESHOLD:
            value, pos = _reduce_leading_numbers_as_base10(tokens, pos)
            if value >= expected_base * 10 or (pos != end and tokens[pos] < BLOCK_LIMIT):
                raise NumeralGrammarError(
                    f"digit run {value} does not fit below rank {expected_base}")
            return value, pos

        # [2, 10, ...] and [1, 1000, ...]
        if following != expected_base or (leading == 1 and expected_base != 1000):
            return None, pos
        return leading * expected_base, pos + 2

    if leading == expected_base or (expected_base == 10 and leading == 20):
        return leading, pos + 1
    return None, pos


def _reduce_number_less_than_10000(tokens: Sequence[int], pos: int) -> Tuple[int, int]:
    """
    Read one block below 10000.

    [1, 1000, 2, 100, 3, 10, 4, 10000, ...] -> 1234, stopping at 10000
    [3, 100, 4, 100] -> error, the same rank appears twice

    Raises:
        NumeralGrammarError: If nothing matched or the block is not
            followed by the end or a bigger-rank
    """
    total = 0
    matched = False
    # These additions never overflow.
    for base in (1000, 100, 10):
        value, pos = _reduce_digits(tokens, pos, base)
        if value is not None:
            total += value
            matched = True
    value, pos = _reduce_ones_digit(tokens, pos)
    if value is not None:
        total += value
        matched = True

    if not matched:
        raise NumeralGrammarError(f"no block below {BLOCK_LIMIT} at position {pos}")
    if pos != len(tokens) and tokens[pos] < BLOCK_LIMIT:
        raise NumeralGrammarError(f"unexpected token {tokens[pos]} at position {pos}")
    return total, pos


def interpret_numbers_in_japanese_way(tokens: Sequence[int]) -> int:
    """
    Read tokens as a Japanese numeral with ranks.

    Bigger-ranks must strictly decrease: "一万二万" = [1, 10000, 2, 10000]
    is an error.

    Raises:
        NumeralGrammarError: If the sequence is not a valid numeral
        NumeralOverflowError: If the value does not fit in 64 bits
    """
    last_base = UINT64_MAX
    total = 0
    pos = 0
    while True:
        coef, pos = _reduce_number_less_than_10000(tokens, pos)
        if pos == len(tokens):
            return checked_add(total, coef)

        base = tokens[pos]
        if base >= last_base:
            raise NumeralGrammarError(f"rank {base} does not decrease from {last_base}")
        total = checked_add(total, checked_multiply(coef, base))
        last_base = base
        pos += 1
        if pos == len(tokens):
            return total


def interpret_numbers(tokens: List[int]) -> int:
    """
    Reduce a token sequence to its value.

    Args:
        tokens: Token values from the tokenizer

    Returns:
        The value as a non-negative int below 2**64

    Raises:
        InvalidNumeralInput: If tokens is empty
        NumeralGrammarError: If the sequence is not a valid numeral
        NumeralOverflowError: If the value does not fit in 64 bits
    """
    if not tokens:
        raise InvalidNumeralInput("no numeral tokens")
    if max(tokens) < RANK_THRESHOLD:
        return interpret_numbers_as_base10(tokens)
    return interpret_numbers_in_japanese_way(tokens)
