"""
Regex utilities for validating numeral and number input.
"""

import re
from typing import Pattern

from core.exceptions import create_invalid_number_error

# Thousands, hundreds, tens and units in standard subtractive notation (1-3999).
CANONICAL_NUMERAL_PATTERN = re.compile(
    r'^M{0,3}(CM|CD|D?C{0,3})(XC|XL|L?X{0,3})(IX|IV|V?I{0,3})$',
    re.IGNORECASE
)
INTEGER_PATTERN = re.compile(r'^\s*([+-]?\d+)\s*$')


def regex_extract(text: str, pattern: str | Pattern, group: int = 1,
                  default=None, case_insensitive: bool = True):
    """
    Extracts a value from text using regex.

    Args:
        text: Text to search
        pattern: Regex pattern with capture group(s)
        group: Which capture group to return (default 1)
        default: Default value if no match
        case_insensitive: If True, search is case-insensitive

    Returns:
        Matched group value, or default if not found
    """
    if text is None:
        return default

    if isinstance(pattern, str):
        flags = re.IGNORECASE if case_insensitive else 0
        pattern = re.compile(pattern, flags)

    match = pattern.search(str(text))
    if match:
        try:
            return match.group(group)
        except IndexError:
            return match.group(0)
    return default


def is_canonical_numeral(text: str) -> bool:
    """
    Checks whether text is a Roman numeral written in standard form.

    The empty string matches the bare pattern, so it is rejected explicitly.
    """
    if not text:
        return False
    return CANONICAL_NUMERAL_PATTERN.match(text.strip()) is not None


def extract_integer(text: str):
    """
    Returns the whole number written in text, or None if text is not a plain integer.

    Raises:
        EvaluationError: INVALID_NUMBER if the digits exceed the interpreter's conversion limit
    """
    result = regex_extract(text, INTEGER_PATTERN, group=1, default=None)
    if result is None:
        return None
    try:
        return int(result)
    except ValueError:
        raise create_invalid_number_error(text[:20] + "..." if len(text) > 20 else text)
