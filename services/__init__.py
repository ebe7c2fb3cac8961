"""
Roman Numeral Calculator Services - Public API

This module exposes the calculator functions for other code (the GUI, the CLI,
or external scripts) to import and use directly.

Usage:
    from services import evaluate, Operation

    outcome = evaluate("X", "II", Operation.ADD)
    if outcome.ok:
        print(outcome.numeral)   # XII
    else:
        print(outcome.error.to_dict())
"""

# Conversion and arithmetic
from services.calculator_service import (
    CalculatorService,
    apply_operation,
    describe_error,
    evaluate,
    format_numeral,
    parse,
)

# Reference chart
from services.chart_service import SYMBOL_TABLE, build_chart, export_chart

# Models
from core.models import CalculatorState, ConversionResult, EvaluationResult, Operand, Operation

# Exceptions - for catching errors
from core.exceptions import (
    CalculatorError,
    ParseError,
    EvaluationError,
    ExportError,
    ErrorCode,
)


# Define public API
__all__ = [
    # Main functions
    "parse",
    "format_numeral",
    "evaluate",
    "apply_operation",
    "describe_error",
    "build_chart",
    "export_chart",
    "SYMBOL_TABLE",

    # Services
    "CalculatorService",

    # Models
    "CalculatorState",
    "ConversionResult",
    "EvaluationResult",
    "Operand",
    "Operation",

    # Exceptions
    "CalculatorError",
    "ParseError",
    "EvaluationError",
    "ExportError",
    "ErrorCode",
]
