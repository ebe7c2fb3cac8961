"""
Custom exception classes for the Roman Numeral Calculator.

These exceptions carry user-friendly error messages that can be serialized
to JSON for the CLI or rendered directly in the UI.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(Enum):
    """Error codes for categorizing calculator errors."""

    # Parse-time errors
    EMPTY_INPUT = "EMPTY_INPUT"
    INVALID_SYMBOL = "INVALID_SYMBOL"
    OUT_OF_RANGE = "OUT_OF_RANGE"
    NON_CANONICAL = "NON_CANONICAL"  # Only raised in strict mode

    # Evaluation errors
    DIVISION_BY_ZERO = "DIVISION_BY_ZERO"
    RESULT_OUT_OF_RANGE = "RESULT_OUT_OF_RANGE"
    UNKNOWN_OPERATION = "UNKNOWN_OPERATION"
    INVALID_NUMBER = "INVALID_NUMBER"

    # Chart export errors
    INVALID_RANGE = "INVALID_RANGE"
    UNSUPPORTED_FORMAT = "UNSUPPORTED_FORMAT"

    # General errors
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class CalculatorError(Exception):
    """
    Base exception for all calculator errors.

    Attributes:
        error_code: An ErrorCode enum value for categorization.
        message: A user-friendly error message.
        operand: Which input failed ("first" / "second"), empty if not operand-specific.
        context: Additional context data for debugging (optional).
    """

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        operand: str = "",
        context: Optional[Dict[str, Any]] = None
    ):
        self.error_code = error_code
        self.message = message
        self.operand = operand
        self.context = context or {}

        # Build the full exception message for logging
        full_message = f"[{error_code.value}] {message}"
        if operand:
            full_message += f" (Operand: {operand})"

        super().__init__(full_message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serializes the exception to a dictionary for JSON output.

        Returns:
            A dictionary containing all error details.
        """
        return {
            "error_code": self.error_code.value,
            "message": self.message,
            "operand": self.operand,
            "context": self.context
        }


# ============================================================================
# Specific Exception Classes
# ============================================================================

class ParseError(CalculatorError):
    """Exception for numeral parse errors (empty, bad symbol, out of range)."""

    def tagged(self, operand: str) -> "ParseError":
        """Returns a copy of this error attributed to the given operand."""
        return type(self)(self.error_code, self.message, operand, dict(self.context))


class EvaluationError(CalculatorError):
    """Exception for arithmetic and result validation errors."""


class ExportError(CalculatorError):
    """Exception for conversion chart export errors."""


# ============================================================================
# Helper Functions
# ============================================================================

def create_empty_input_error() -> ParseError:
    """Creates a standardized EMPTY_INPUT error."""
    return ParseError(
        error_code=ErrorCode.EMPTY_INPUT,
        message="Empty numeral"
    )


def create_invalid_symbol_error(symbol: str, numeral: str = "") -> ParseError:
    """Creates a standardized INVALID_SYMBOL error."""
    return ParseError(
        error_code=ErrorCode.INVALID_SYMBOL,
        message=f"Invalid symbol: {symbol}",
        context={"symbol": symbol, "numeral": numeral}
    )


def create_out_of_range_error(value: int, numeral: str = "") -> ParseError:
    """Creates a standardized OUT_OF_RANGE error for a parsed numeral."""
    return ParseError(
        error_code=ErrorCode.OUT_OF_RANGE,
        message="Number out of range (1-3999)",
        context={"value": value, "numeral": numeral}
    )


def create_non_canonical_error(numeral: str, canonical: str) -> ParseError:
    """Creates a NON_CANONICAL error, used when strict parsing is enabled."""
    return ParseError(
        error_code=ErrorCode.NON_CANONICAL,
        message=f"'{numeral}' is not a standard numeral (expected {canonical})",
        context={"numeral": numeral, "canonical": canonical}
    )


def create_division_by_zero_error() -> EvaluationError:
    """Creates a standardized DIVISION_BY_ZERO error."""
    return EvaluationError(
        error_code=ErrorCode.DIVISION_BY_ZERO,
        message="Cannot divide by zero!"
    )


def create_result_out_of_range_error(result: Any) -> EvaluationError:
    """Creates a RESULT_OUT_OF_RANGE error carrying the raw arithmetic result."""
    return EvaluationError(
        error_code=ErrorCode.RESULT_OUT_OF_RANGE,
        message="Result out of Roman numeral range (1-3999)!",
        context={"result": result}
    )


def create_unknown_operation_error(operation: Any) -> EvaluationError:
    """Creates an UNKNOWN_OPERATION error."""
    return EvaluationError(
        error_code=ErrorCode.UNKNOWN_OPERATION,
        message=f"Unknown operation: '{operation}'",
        context={"operation": str(operation)}
    )


def create_invalid_number_error(raw_value: Any) -> EvaluationError:
    """Creates an INVALID_NUMBER error for values that are not plain integers."""
    return EvaluationError(
        error_code=ErrorCode.INVALID_NUMBER,
        message=f"Not a whole number: '{raw_value}'",
        context={"raw_value": str(raw_value)}
    )


def create_invalid_range_error(start: int, end: int) -> ExportError:
    """Creates an INVALID_RANGE error for a chart whose start exceeds its end."""
    return ExportError(
        error_code=ErrorCode.INVALID_RANGE,
        message=f"Chart start ({start}) must not be greater than end ({end})",
        context={"start": start, "end": end}
    )


def create_unsupported_format_error(file_name: str) -> ExportError:
    """Creates an UNSUPPORTED_FORMAT error for chart export paths."""
    return ExportError(
        error_code=ErrorCode.UNSUPPORTED_FORMAT,
        message=f"Unsupported chart format: '{file_name}' (use .csv or .xlsx)",
        context={"file_name": file_name}
    )


def create_unknown_error(
    original_exception: Exception,
    operation: str = ""
) -> CalculatorError:
    """
    Creates an UNKNOWN_ERROR for unexpected exceptions.
    Use this to wrap any exception that isn't explicitly handled, so the
    CLI can still report it in its JSON envelope.

    Args:
        original_exception: The original exception that was caught
        operation: Optional description of what was being attempted
    """
    error_msg = str(original_exception)
    if operation:
        error_msg = f"{operation}: {error_msg}"

    return CalculatorError(
        error_code=ErrorCode.UNKNOWN_ERROR,
        message=error_msg,
        context={
            "exception_type": type(original_exception).__name__,
            "exception_message": str(original_exception),
            "operation": operation
        }
    )
