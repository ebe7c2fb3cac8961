from typing import Optional, Union

from core.config import MIN_ROMAN_VALUE, MAX_ROMAN_VALUE
from core.exceptions import (
    CalculatorError,
    ParseError,
    create_division_by_zero_error,
    create_invalid_number_error,
    create_non_canonical_error,
    create_result_out_of_range_error,
)
from core.logger import setup_logger
from core.models import CalculatorState, ConversionResult, EvaluationResult, Operand, Operation
from core.regex_utils import extract_integer
from core.roman import arabic_to_roman, is_canonical, roman_to_arabic

logger = setup_logger(__name__)

OPERAND_PREFIXES = {
    Operand.FIRST.value: "First number",
    Operand.SECOND.value: "Second number",
}


def _parse_or_raise(roman: str, strict: bool = False) -> int:
    value = roman_to_arabic(roman)
    if strict and not is_canonical(roman):
        raise create_non_canonical_error(roman.strip().upper(), arabic_to_roman(value))
    return value


def parse(roman: str, strict: bool = False) -> ConversionResult:
    """
    Parses a numeral, returning the error as a value instead of raising.

    Args:
        roman: Numeral text as typed by the user
        strict: If True, non-standard forms such as "IIII" are rejected

    Returns:
        ConversionResult with either value or error set
    """
    try:
        return ConversionResult(numeral=roman, value=_parse_or_raise(roman, strict))
    except ParseError as e:
        logger.debug(f"Parse failed for '{roman}': {e}")
        return ConversionResult(numeral=roman, error=e)


def format_numeral(num: int) -> str:
    """
    Formats an integer as a Roman numeral, re-validating the range.

    Raises:
        EvaluationError: INVALID_NUMBER for non-integers, RESULT_OUT_OF_RANGE outside 1-3999
    """
    # bool is an int subclass but never a meaningful number here
    if isinstance(num, bool) or not isinstance(num, int):
        raise create_invalid_number_error(num)
    if num < MIN_ROMAN_VALUE or num > MAX_ROMAN_VALUE:
        raise create_result_out_of_range_error(num)
    return arabic_to_roman(num)


def apply_operation(num1: int, num2: int, operation: Union[Operation, str]) -> int:
    """
    Applies one arithmetic operation to two integers.

    Subtraction may go to zero or below; range checking is left to the caller.
    Division truncates toward zero.

    Raises:
        EvaluationError: DIVISION_BY_ZERO, or UNKNOWN_OPERATION for an unrecognised operation
    """
    operation = Operation.from_value(operation)

    if operation is Operation.ADD:
        return num1 + num2
    if operation is Operation.SUBTRACT:
        return num1 - num2
    if operation is Operation.MULTIPLY:
        return num1 * num2

    if num2 == 0:
        raise create_division_by_zero_error()
    quotient = abs(num1) // abs(num2)
    return quotient if (num1 < 0) == (num2 < 0) else -quotient


def evaluate(
    roman_a: str,
    roman_b: str,
    operation: Union[Operation, str],
    strict: bool = False
) -> EvaluationResult:
    """
    Parses both numerals, applies the operation and formats the result.

    Never raises for bad input: failures are returned in EvaluationResult.error.
    Parse failures are tagged with the operand ("first" / "second") that caused them.
    """
    result = EvaluationResult(first=roman_a, second=roman_b)

    try:
        result.operation = Operation.from_value(operation)
    except CalculatorError as e:
        result.error = e
        return result

    first = parse(roman_a, strict=strict)
    if not first.ok:
        result.error = first.error.tagged(Operand.FIRST.value)
        return result

    second = parse(roman_b, strict=strict)
    if not second.ok:
        result.error = second.error.tagged(Operand.SECOND.value)
        return result

    try:
        value = apply_operation(first.value, second.value, result.operation)
        result.numeral = format_numeral(value)
        result.value = value
    except CalculatorError as e:
        logger.debug(f"Evaluation failed for {roman_a} {result.operation.symbol} {roman_b}: {e}")
        result.error = e
        return result

    logger.info(f"{roman_a} {result.operation.symbol} {roman_b} = {result.numeral} ({value})")
    return result


def describe_error(error: CalculatorError) -> str:
    """Builds the message shown to the user, prefixed with the failing operand."""
    prefix = OPERAND_PREFIXES.get(error.operand)
    if prefix:
        return f"{prefix}: {error.message}"
    return error.message


class CalculatorService:
    """Runs calculations against a CalculatorState owned by the caller."""

    def __init__(self, strict: bool = False):
        self.strict = strict

    def calculate(self, state: CalculatorState) -> EvaluationResult:
        """
        Evaluates the state's inputs and writes the outcome back into it.

        On failure the previous result is left in place and error_message is set.
        """
        state.error_message = ""

        outcome = evaluate(state.input1, state.input2, state.operation, strict=self.strict)
        if outcome.ok:
            state.result = outcome.numeral
        else:
            state.error_message = describe_error(outcome.error)
        return outcome

    def convert(self, text: str) -> dict:
        """
        Two-way conversion: "14" -> XIV, "xiv" -> 14.

        Returns:
            Dict with 'input', 'roman' and 'arabic' keys

        Raises:
            CalculatorError: if text is neither a valid number nor a valid numeral
        """
        number: Optional[int] = extract_integer(text)
        if number is not None:
            roman = format_numeral(number)
            return {"input": text, "roman": roman, "arabic": number}

        value = _parse_or_raise(text, self.strict)
        return {"input": text, "roman": arabic_to_roman(value), "arabic": value}
