"""
Exceptions raised while interpreting numerals.

The public converters turn these into empty results; they surface directly
only from the lower-level functions in ``kansuji.reducer``.
"""


class NumeralError(ValueError):
    """Base class for every numeral conversion failure."""
    pass


class InvalidNumeralInput(NumeralError):
    """Raised when input fails a format predicate."""
    pass


class UnsupportedNumeral(NumeralError):
    """Raised when a value needs more ranks or glyphs than the tables have."""
    pass


class NumeralGrammarError(NumeralError):
    """Raised when a token sequence is not a valid Japanese numeral."""
    pass


class NumeralOverflowError(NumeralError):
    """Raised when an intermediate value would not fit in 64 unsigned bits."""
    pass
