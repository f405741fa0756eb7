"""
Fixed constants shared by the kansuji converters.
"""

# Largest value an unsigned 64-bit integer can hold. Every intermediate
# value in the reduction path is checked against it.
UINT64_MAX = (1 << 64) - 1

INT16_MIN, INT16_MAX = -(1 << 15), (1 << 15) - 1
UINT16_MAX = (1 << 16) - 1
INT32_MIN, INT32_MAX = -(1 << 31), (1 << 31) - 1
UINT32_MAX = (1 << 32) - 1
INT64_MIN, INT64_MAX = -(1 << 63), (1 << 63) - 1

# Number of digits covered by one bigger rank (万, 億, ...).
DIGITS_IN_BIG_RANK = 4

# Token values at or above this are ranks, below are digits.
RANK_THRESHOLD = 10

# A block reduced from tokens is always below this value.
BLOCK_LIMIT = 10000

# 10^100
GOOGOL = "1" + "0" * 100

# ============================================================================
# Descriptions
# ============================================================================

DESC_ARABIC = "数字"
DESC_KANJI = "漢数字"
DESC_OLD_KANJI = "大字"
DESC_ROMAN_CAPITAL = "ローマ数字(大文字)"
DESC_ROMAN_SMALL = "ローマ数字(小文字)"
DESC_CIRCLED = "丸数字"
DESC_HEX = "16進数"
DESC_OCT = "8進数"
DESC_BIN = "2進数"
