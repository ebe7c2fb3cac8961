"""
Roman numeral conversion.

roman_to_arabic is deliberately lenient: it applies the subtractive rule
symbol by symbol and does not check that the input is written in standard
form, so "IIII" parses as 4 and "VX" as 5. Use is_canonical() on top of it
when standard form is required.
"""

from core.config import MIN_ROMAN_VALUE, MAX_ROMAN_VALUE
from core.exceptions import (
    create_empty_input_error,
    create_invalid_symbol_error,
    create_out_of_range_error,
)
from core.regex_utils import is_canonical_numeral

ROMAN_SYMBOL_VALUES = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}

# Descending, including the subtractive pairs
ROMAN_NUMERAL_VALUES = [
    (1000, "M"), (900, "CM"), (500, "D"), (400, "CD"),
    (100, "C"), (90, "XC"), (50, "L"), (40, "XL"),
    (10, "X"), (9, "IX"), (5, "V"), (4, "IV"), (1, "I"),
]


def roman_to_arabic(roman: str) -> int:
    """
    Converts a Roman numeral string to an integer.

    Input is case-insensitive; surrounding whitespace is ignored.

    Args:
        roman: Numeral such as "XIV" or "mcmliv"

    Returns:
        Integer value in the range 1-3999

    Raises:
        ParseError: EMPTY_INPUT, INVALID_SYMBOL or OUT_OF_RANGE
    """
    numeral = roman.strip().upper()
    if not numeral:
        raise create_empty_input_error()

    result = 0
    prev_value = 0

    # Right to left: a symbol smaller than the one after it is subtracted
    for ch in reversed(numeral):
        value = ROMAN_SYMBOL_VALUES.get(ch)
        if value is None:
            raise create_invalid_symbol_error(ch, numeral)

        if value < prev_value:
            result -= value
        else:
            result += value
        prev_value = value

    if result < MIN_ROMAN_VALUE or result > MAX_ROMAN_VALUE:
        raise create_out_of_range_error(result, numeral)

    return result


def arabic_to_roman(num: int) -> str:
    """
    Converts an integer to its canonical uppercase Roman numeral.

    Callers must range-check first; 0 and negative numbers give "".
    """
    result = []
    for value, symbol in ROMAN_NUMERAL_VALUES:
        while num >= value:
            result.append(symbol)
            num -= value
    return "".join(result)


def is_canonical(roman: str) -> bool:
    """True if roman is the standard (minimal) form of the number it denotes."""
    return is_canonical_numeral(roman)
