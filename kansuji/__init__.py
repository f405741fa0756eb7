"""
kansuji: Japanese Numeral Transcription

Converts Arabic numbers into Japanese numeral forms (Kanji with ranks,
大字, full-width, separated, Roman, circled, other radixes) and reads Kanji
numerals back into Arabic digits.

Basic Usage:
    import kansuji

    # Arabic -> every supported form
    for s in kansuji.convert("12345"):
        print(f"{s.value} ({s.description})")

    # Kanji -> Arabic
    kansuji.normalize("百二十万").arabic   # "1200000"
"""

import time
from typing import List, Optional, Tuple

from kansuji.errors import (
    InvalidNumeralInput,
    NumeralError,
    NumeralGrammarError,
    NumeralOverflowError,
    UnsupportedNumeral,
)
from kansuji.kanji import arabic_to_kanji
from kansuji.normalizer import normalize_numbers, normalize_numbers_with_suffix
from kansuji.number_types import NormalizedNumber, NumberString, NumberStyle
from kansuji.special_forms import arabic_to_other_forms, arabic_to_other_radixes
from kansuji.variations import (
    arabic_to_separated_arabic,
    arabic_to_wide_arabic,
    is_arabic_number,
    is_decimal_integer,
    is_decimal_number,
    script_variants,
)

__version__ = "0.1.0"


# =============================================================================
# Main API
# =============================================================================

def convert(input_num: str) -> List[NumberString]:
    """
    Convert an Arabic number string into every supported numeral form.

    Args:
        input_num: ASCII decimal number, e.g. "1234" or "1234.5"

    Returns:
        List of NumberString, in order: Kanji with ranks, separated,
        wide digits, Roman/circled, other radixes

    Raises:
        ValueError: If input is empty or whitespace-only

    Example:
        >>> [s.value for s in kansuji.convert("20")][:3]
        ['二十', '弐拾', '廿']
    """
    if not input_num or not input_num.strip():
        raise ValueError("input must be non-empty and not whitespace-only")

    output = []
    output.extend(arabic_to_kanji(input_num))
    output.extend(arabic_to_separated_arabic(input_num))
    output.extend(arabic_to_wide_arabic(input_num))
    output.extend(arabic_to_other_forms(input_num))
    output.extend(arabic_to_other_radixes(input_num))
    return output


def normalize(
    text: str,
    trim_leading_zeros: bool = False,
    allow_suffix: bool = False,
) -> Optional[NormalizedNumber]:
    """
    Read a Kanji numeral as Arabic digits.

    Args:
        text: Numeral text, e.g. "二千二十二"
        trim_leading_zeros: Drop leading zeros from the Arabic output
        allow_suffix: Return trailing non-numeral text as the suffix

    Returns:
        NormalizedNumber, or None if text is not a valid numeral

    Raises:
        ValueError: If text is empty or whitespace-only
    """
    if not text or not text.strip():
        raise ValueError("text must be non-empty and not whitespace-only")

    if allow_suffix:
        return normalize_numbers_with_suffix(text, trim_leading_zeros)
    return normalize_numbers(text, trim_leading_zeros)


def warm_up(verbose: bool = False) -> Tuple[float, dict]:
    """
    Build the numeral reading trie ahead of the first normalize() call.

    Args:
        verbose: If True, print timing information

    Returns:
        Tuple of (total_time_seconds, timing_details_dict)
    """
    from kansuji.number_trie import load_number_trie, get_number_trie_size

    timings = {}
    total_start = time.perf_counter()

    load_number_trie()
    timings['trie'] = (time.perf_counter() - total_start) * 1000

    if verbose:
        print(f"  Reading trie:   {timings['trie']:>7.1f}ms ({get_number_trie_size():,} entries)")

    total_time = time.perf_counter() - total_start
    timings['total'] = total_time * 1000
    return total_time, timings


def get_version() -> str:
    """Get the library version."""
    return __version__


# =============================================================================
# Module-level exports
# =============================================================================

__all__ = [
    # Data classes
    "NumberString",
    "NumberStyle",
    "NormalizedNumber",
    # Main API
    "convert",
    "normalize",
    "warm_up",
    "get_version",
    # Converters
    "script_variants",
    "arabic_to_kanji",
    "arabic_to_separated_arabic",
    "arabic_to_wide_arabic",
    "arabic_to_other_forms",
    "arabic_to_other_radixes",
    "normalize_numbers",
    "normalize_numbers_with_suffix",
    # Predicates
    "is_decimal_integer",
    "is_decimal_number",
    "is_arabic_number",
    # Exceptions
    "NumeralError",
    "InvalidNumeralInput",
    "UnsupportedNumeral",
    "NumeralGrammarError",
    "NumeralOverflowError",
    # Version
    "__version__",
]
